# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError, ValidationError
from ...dto.user_dto import UserResponse
from ...validation import validate_object_id
from .user_mapper import to_user_response


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID
        
        Args:
            user_id: ObjectId string of the user
            
        Returns:
            UserResponse with user information
            
        Raises:
            ValidationError: If the ID is not a valid ObjectId (checked before any store access)
            NotFoundError: If no user has this ID
        """
        violations = validate_object_id(user_id)
        if violations:
            raise ValidationError(violations)
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(user_id)
        
        return to_user_response(user)
