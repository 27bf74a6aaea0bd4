"""
Shared pytest fixtures for user service tests.
"""
import os
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId

from user_service.domain.models.user import User
from user_service.domain.models.user_patch import UserPatch
from user_service.domain.models.outcomes import DeleteOutcome, UpdateOutcome
from user_service.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_random_users",
        "RANDOM_USER_API_URL": "https://randomuser.test/api/",
        "RANDOM_USER_API_TIMEOUT": "2",
        "LOG_LEVEL": "DEBUG",
        "HOST": "127.0.0.1",
        "PORT": "8081",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.random_user_api_url = "https://randomuser.test/api/"
    mock.random_user_api_timeout = 2.0
    mock.host = "127.0.0.1"
    mock.port = 8081
    mock.api_prefix = ""
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_service.core.config.get_settings", return_value=mock), patch(
        "user_service.infrastructure.external.random_user_client.get_settings", return_value=mock
    ), patch("user_service.infrastructure.http_client_factory.get_settings", return_value=mock), patch(
        "user_service.__main__.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def valid_payload() -> Dict[str, object]:
    return {"name": "Ana", "age": 31, "email": "ana@example.com"}


def random_user_api_body(first: str = "Lucas", age: int = 42, email: str = "lucas@example.com") -> dict:
    """Body shaped like a randomuser.me response (trimmed to the fields we read)."""
    return {
        "results": [
            {
                "gender": "male",
                "name": {"title": "Mr", "first": first, "last": "Moreau"},
                "email": email,
                "dob": {"date": "1982-03-01T10:00:00.000Z", "age": age},
            }
        ],
        "info": {"seed": "abc", "results": 1, "page": 1, "version": "1.4"},
    }


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository used to exercise use cases end to end."""

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, object]] = {}
        self.insert_many_calls = 0

    def _store(self, user: User) -> str:
        user_id = str(ObjectId())
        self.documents[user_id] = {"name": user.name, "age": user.age, "email": user.email}
        return user_id

    def _load(self, user_id: str) -> User:
        return User(id=user_id, **self.documents[user_id])

    async def create(self, user: User) -> User:
        return self._load(self._store(user))

    async def insert_many(self, users: List[User]) -> List[str]:
        self.insert_many_calls += 1
        return [self._store(user) for user in users]

    async def list_all(self) -> List[User]:
        return [self._load(user_id) for user_id in self.documents]

    async def find_by_id(self, user_id: str) -> Optional[User]:
        if user_id not in self.documents:
            return None
        return self._load(user_id)

    async def exists(self, user_id: str) -> bool:
        return user_id in self.documents

    async def update_by_id(self, user_id: str, patch: UserPatch) -> UpdateOutcome:
        if user_id not in self.documents:
            return UpdateOutcome(acknowledged=True, matched_count=0, modified_count=0)
        before = dict(self.documents[user_id])
        self.documents[user_id].update(patch.changes)
        modified = 1 if self.documents[user_id] != before else 0
        return UpdateOutcome(acknowledged=True, matched_count=1, modified_count=modified)

    async def delete_by_id(self, user_id: str) -> DeleteOutcome:
        deleted = 1 if self.documents.pop(user_id, None) is not None else 0
        return DeleteOutcome(acknowledged=True, deleted_count=deleted)

    async def delete_all(self) -> DeleteOutcome:
        count = len(self.documents)
        self.documents.clear()
        return DeleteOutcome(acknowledged=True, deleted_count=count)


@pytest.fixture
def memory_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def make_api_body():
    """Factory fixture for randomuser.me-shaped response bodies."""
    return random_user_api_body
