# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidDocument, InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.user_patch import UserPatch
from ...domain.models.outcomes import UpdateOutcome, DeleteOutcome
from ...domain.constants import UserFields
from ...domain.exceptions import StoreError
from .mongo_connection import get_user_collection

# Driver failures plus BSON encoding failures (e.g. an int beyond int64)
_STORE_FAILURES = (PyMongoError, InvalidDocument, OverflowError)


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def create(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User domain model without ID
            
        Returns:
            Stored User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")
        
        try:
            result = await self.user_collection.insert_one(self._user_to_dict(user))
            
            # Fetch and return the newly created document
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except _STORE_FAILURES as e:
            raise StoreError(f"Error creating user: {str(e)}", operation="create")
        
        if new_document is None:
            raise StoreError("User was created but could not be retrieved", operation="create")
        return self._document_to_user(new_document)
    
    async def insert_many(self, users: List[User]) -> List[str]:
        """
        Insert several users with a single write
        
        Args:
            users: User domain models without IDs
            
        Returns:
            IDs of the inserted documents, in input order
        """
        if not users:
            return []
        
        try:
            result = await self.user_collection.insert_many(
                [self._user_to_dict(user) for user in users]
            )
        except _STORE_FAILURES as e:
            raise StoreError(f"Error inserting users: {str(e)}", operation="insert_many")
        
        return [str(inserted_id) for inserted_id in result.inserted_ids]
    
    async def list_all(self) -> List[User]:
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except _STORE_FAILURES as e:
            raise StoreError(f"Error listing users: {str(e)}", operation="list_all")
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except _STORE_FAILURES as e:
            raise StoreError(f"Error finding user by ID: {str(e)}", operation="find_by_id")
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def exists(self, user_id: str) -> bool:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False
        
        try:
            count = await self.user_collection.count_documents(
                {UserFields.MONGO_ID: object_id}, limit=1
            )
        except _STORE_FAILURES as e:
            raise StoreError(f"Error checking user existence: {str(e)}", operation="exists")
        return count > 0
    
    async def update_by_id(self, user_id: str, patch: UserPatch) -> UpdateOutcome:
        """
        Set the fields carried by the patch; other fields are not touched.
        
        No existence check is made. An unknown ID yields matched_count == 0.
        An empty patch performs no write and only reports whether the ID matched.
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return UpdateOutcome(acknowledged=True, matched_count=0, modified_count=0)
        
        if patch.is_empty():
            matched = 1 if await self.exists(user_id) else 0
            return UpdateOutcome(acknowledged=True, matched_count=matched, modified_count=0)
        
        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": dict(patch.changes)}
            )
        except _STORE_FAILURES as e:
            raise StoreError(f"Error updating user: {str(e)}", operation="update_by_id")
        
        return UpdateOutcome(
            acknowledged=update_result.acknowledged,
            matched_count=update_result.matched_count,
            modified_count=update_result.modified_count,
        )
    
    async def delete_by_id(self, user_id: str) -> DeleteOutcome:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return DeleteOutcome(acknowledged=True, deleted_count=0)
        
        try:
            delete_result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except _STORE_FAILURES as e:
            raise StoreError(f"Error deleting user: {str(e)}", operation="delete_by_id")
        
        return DeleteOutcome(
            acknowledged=delete_result.acknowledged,
            deleted_count=delete_result.deleted_count,
        )
    
    async def delete_all(self) -> DeleteOutcome:
        try:
            delete_result = await self.user_collection.delete_many({})
        except _STORE_FAILURES as e:
            raise StoreError(f"Error deleting users: {str(e)}", operation="delete_all")
        
        return DeleteOutcome(
            acknowledged=delete_result.acknowledged,
            deleted_count=delete_result.deleted_count,
        )
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
            
        Raises:
            StoreError: If the document is missing _id or breaks the user field rules
        """
        if not document or UserFields.MONGO_ID not in document:
            raise StoreError("Invalid document: missing _id field", operation="decode")
        
        try:
            return User(
                id=str(document[UserFields.MONGO_ID]),
                name=document.get(UserFields.NAME, ""),
                age=document.get(UserFields.AGE, 0),
                email=document.get(UserFields.EMAIL, ""),
            )
        except ValueError as e:
            raise StoreError(
                f"Stored user {document[UserFields.MONGO_ID]} is invalid: {str(e)}",
                operation="decode",
            )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """Convert User domain model to a MongoDB document without _id"""
        if not user:
            raise ValueError("User cannot be None")
        
        return {
            UserFields.NAME: user.name,
            UserFields.AGE: user.age,
            UserFields.EMAIL: user.email,
        }
