from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User
from ..models.user_patch import UserPatch
from ..models.outcomes import UpdateOutcome, DeleteOutcome


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user and return it with its store-assigned ID"""
        pass
    
    @abstractmethod
    async def insert_many(self, users: List[User]) -> List[str]:
        """Insert several users in one write and return their new IDs"""
        pass
    
    @abstractmethod
    async def list_all(self) -> List[User]:
        """Return every stored user"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Check whether a user with this ID is stored"""
        pass
    
    @abstractmethod
    async def update_by_id(self, user_id: str, patch: UserPatch) -> UpdateOutcome:
        """Apply a partial update without checking existence first"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: str) -> DeleteOutcome:
        """Delete a single user"""
        pass
    
    @abstractmethod
    async def delete_all(self) -> DeleteOutcome:
        """Delete every user"""
        pass
