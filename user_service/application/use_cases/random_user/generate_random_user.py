# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....infrastructure.external.random_user_client import RandomUserClient
from ...dto.message_dto import MessageResponse

logger = logging.getLogger(__name__)


class GenerateRandomUserUseCase:
    """Use case for storing one user fetched from the random user API"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        random_user_client: RandomUserClient,
    ) -> None:
        self.user_repository = user_repository
        self.random_user_client = random_user_client
    
    async def execute(self) -> MessageResponse:
        """
        Fetch one random identity and persist it right away
        
        Returns:
            MessageResponse with a generic success message (not the stored record)
            
        Raises:
            ExternalFetchError: If the API call fails or answers non-2xx
            StoreError: If the insert fails
        """
        user = await self.random_user_client.fetch_user()
        saved_user = await self.user_repository.create(user)
        logger.info(f"Stored random user {saved_user.id}")
        
        return MessageResponse(message="Random user generated")
