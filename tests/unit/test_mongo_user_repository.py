"""
Unit tests for MongoUserRepository against a mocked motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo.errors import PyMongoError

from user_service.domain.exceptions import StoreError
from user_service.domain.models.user import User
from user_service.domain.models.user_patch import UserPatch
from user_service.infrastructure.db.mongo_user_repository import MongoUserRepository


class _AsyncCursor:
    """Stand-in for a motor cursor: supports ``async for``."""

    def __init__(self, documents):
        self._documents = list(documents)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._documents:
            raise StopAsyncIteration
        return self._documents.pop(0)


@pytest.fixture
def collection():
    return AsyncMock()


@pytest.fixture
def repository(collection):
    return MongoUserRepository(user_collection=collection)


def _document(object_id: ObjectId, name: str = "Ana") -> dict:
    return {"_id": object_id, "name": name, "age": 31, "email": f"{name.lower()}@example.com"}


class TestCreate:
    """Tests for create and insert_many"""

    @pytest.mark.asyncio
    async def test_create_returns_stored_user(self, repository, collection):
        object_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=object_id)
        collection.find_one.return_value = _document(object_id)

        user = await repository.create(User(id=None, name="Ana", age=31, email="ana@example.com"))

        assert user.id == str(object_id)
        collection.insert_one.assert_awaited_once_with(
            {"name": "Ana", "age": 31, "email": "ana@example.com"}
        )

    @pytest.mark.asyncio
    async def test_create_wraps_driver_error(self, repository, collection):
        collection.insert_one.side_effect = PyMongoError("not primary")

        with pytest.raises(StoreError, match="not primary"):
            await repository.create(User(id=None, name="Ana", age=31, email="ana@example.com"))

    @pytest.mark.asyncio
    async def test_create_wraps_bson_overflow(self, repository, collection):
        collection.insert_one.side_effect = OverflowError("MongoDB can only handle up to 8-byte ints")

        with pytest.raises(StoreError) as exc_info:
            await repository.create(User(id=None, name="Ana", age=10**20, email="ana@example.com"))
        assert exc_info.value.operation == "create"

    @pytest.mark.asyncio
    async def test_insert_many_wraps_invalid_document(self, repository, collection):
        collection.insert_many.side_effect = InvalidDocument("cannot encode object")

        with pytest.raises(StoreError, match="cannot encode object"):
            await repository.insert_many([User(id=None, name="Ana", age=31, email="ana@example.com")])

    @pytest.mark.asyncio
    async def test_insert_many_single_write(self, repository, collection):
        ids = [ObjectId(), ObjectId()]
        collection.insert_many.return_value = MagicMock(inserted_ids=ids)
        users = [
            User(id=None, name="Ana", age=31, email="ana@example.com"),
            User(id=None, name="Bea", age=29, email="bea@example.com"),
        ]

        result = await repository.insert_many(users)

        assert result == [str(i) for i in ids]
        collection.insert_many.assert_awaited_once()
        assert len(collection.insert_many.await_args.args[0]) == 2

    @pytest.mark.asyncio
    async def test_insert_many_empty_is_noop(self, repository, collection):
        assert await repository.insert_many([]) == []
        collection.insert_many.assert_not_awaited()


class TestRead:
    """Tests for list_all, find_by_id and exists"""

    @pytest.mark.asyncio
    async def test_list_all(self, repository, collection):
        collection.find = MagicMock(
            return_value=_AsyncCursor([_document(ObjectId(), "Ana"), _document(ObjectId(), "Bea")])
        )

        users = await repository.list_all()

        assert [user.name for user in users] == ["Ana", "Bea"]
        collection.find.assert_called_once_with({})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "document",
        [
            {"name": "Ana", "age": 31, "email": "ana@example.com"},
            {"_id": ObjectId(), "name": "Ana", "age": 0, "email": "ana@example.com"},
            {"_id": ObjectId(), "name": "", "age": 31, "email": "ana@example.com"},
        ],
    )
    async def test_list_all_bad_document_raises_store_error(self, repository, collection, document):
        collection.find = MagicMock(return_value=_AsyncCursor([_document(ObjectId()), document]))

        with pytest.raises(StoreError) as exc_info:
            await repository.list_all()
        assert exc_info.value.operation == "decode"

    @pytest.mark.asyncio
    async def test_find_by_id_bad_document_raises_store_error(self, repository, collection):
        object_id = ObjectId()
        collection.find_one.return_value = {"_id": object_id, "name": "Ana", "age": -1, "email": "x"}

        with pytest.raises(StoreError, match=str(object_id)):
            await repository.find_by_id(str(object_id))

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, repository, collection):
        collection.find_one.return_value = None
        assert await repository.find_by_id(str(ObjectId())) is None

    @pytest.mark.asyncio
    async def test_find_by_id_invalid_id_skips_query(self, repository, collection):
        assert await repository.find_by_id("nope") is None
        collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_exists(self, repository, collection):
        collection.count_documents.return_value = 1
        assert await repository.exists(str(ObjectId())) is True


class TestUpdate:
    """Tests for update_by_id"""

    @pytest.mark.asyncio
    async def test_sets_only_patch_fields(self, repository, collection):
        object_id = ObjectId()
        collection.update_one.return_value = MagicMock(acknowledged=True, matched_count=1, modified_count=1)

        outcome = await repository.update_by_id(str(object_id), UserPatch(changes={"age": 40}))

        collection.update_one.assert_awaited_once_with({"_id": object_id}, {"$set": {"age": 40}})
        assert (outcome.matched_count, outcome.modified_count) == (1, 1)

    @pytest.mark.asyncio
    async def test_unknown_id_reports_zero(self, repository, collection):
        collection.update_one.return_value = MagicMock(acknowledged=True, matched_count=0, modified_count=0)

        outcome = await repository.update_by_id(str(ObjectId()), UserPatch(changes={"name": "Bea"}))

        assert outcome.matched_count == 0

    @pytest.mark.asyncio
    async def test_empty_patch_does_not_write(self, repository, collection):
        collection.count_documents.return_value = 1

        outcome = await repository.update_by_id(str(ObjectId()), UserPatch())

        collection.update_one.assert_not_awaited()
        assert (outcome.matched_count, outcome.modified_count) == (1, 0)


class TestDelete:
    """Tests for delete_by_id and delete_all"""

    @pytest.mark.asyncio
    async def test_delete_by_id(self, repository, collection):
        object_id = ObjectId()
        collection.delete_one.return_value = MagicMock(acknowledged=True, deleted_count=1)

        outcome = await repository.delete_by_id(str(object_id))

        collection.delete_one.assert_awaited_once_with({"_id": object_id})
        assert outcome.deleted_count == 1

    @pytest.mark.asyncio
    async def test_delete_all(self, repository, collection):
        collection.delete_many.return_value = MagicMock(acknowledged=True, deleted_count=7)

        outcome = await repository.delete_all()

        collection.delete_many.assert_awaited_once_with({})
        assert outcome.deleted_count == 7

    @pytest.mark.asyncio
    async def test_delete_all_wraps_driver_error(self, repository, collection):
        collection.delete_many.side_effect = PyMongoError("timeout")

        with pytest.raises(StoreError) as exc_info:
            await repository.delete_all()

        assert exc_info.value.operation == "delete_all"
