# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.user_dto import UserCreateRequest, UserResponse
from .user_mapper import to_user_response

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Validated creation request with name, age and email
            
        Returns:
            UserResponse with the stored user, including its new ID
            
        Raises:
            StoreError: If the insert fails
        """
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            age=request.age,
            email=str(request.email),
        )
        
        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Created user {saved_user.id}")
        
        return to_user_response(saved_user)
