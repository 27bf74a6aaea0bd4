# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError, ValidationError
from ...dto.user_dto import DeleteOutcomeResponse
from ...validation import validate_object_id
from .user_mapper import to_delete_response

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a single user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> DeleteOutcomeResponse:
        """
        Delete a user by ID
        
        Raises:
            ValidationError: If the ID is not a valid ObjectId
            NotFoundError: If no user has this ID (nothing is deleted)
            StoreError: If the delete fails
        """
        violations = validate_object_id(user_id)
        if violations:
            raise ValidationError(violations)
        
        if not await self.user_repository.exists(user_id):
            raise NotFoundError(user_id)
        
        outcome = await self.user_repository.delete_by_id(user_id)
        logger.info(f"Deleted user {user_id}")
        
        return to_delete_response(outcome)
