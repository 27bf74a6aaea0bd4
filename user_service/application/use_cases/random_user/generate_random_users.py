# Standard library imports
import asyncio
import logging
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import ValidationError
from ....infrastructure.external.random_user_client import RandomUserClient
from ...dto.message_dto import MessageResponse
from ...validation import validate_count

logger = logging.getLogger(__name__)


class GenerateRandomUsersUseCase:
    """
    Use case for storing a batch of users fetched from the random user API.
    
    All fetches are issued at once and joined. The batch is all-or-nothing:
    if any single fetch fails, the first failure is raised and nothing is
    inserted. Fetches already in flight are not cancelled; their results are
    discarded.
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        random_user_client: RandomUserClient,
    ) -> None:
        self.user_repository = user_repository
        self.random_user_client = random_user_client
    
    async def execute(self, count: Union[str, int]) -> MessageResponse:
        """
        Fetch ``count`` random identities concurrently and insert them together
        
        Args:
            count: Number of users to generate, as received in the path
            
        Returns:
            MessageResponse naming how many users were generated
            
        Raises:
            ValidationError: If count is not an integer >= 1 (no request is made)
            ExternalFetchError: If any fetch fails (nothing is stored)
            StoreError: If the bulk insert fails
        """
        violations = validate_count(count)
        if violations:
            raise ValidationError(violations)
        total = int(count)
        
        logger.info(f"Fetching {total} random users")
        users = await asyncio.gather(
            *(self.random_user_client.fetch_user() for _ in range(total))
        )
        
        inserted_ids = await self.user_repository.insert_many(list(users))
        logger.info(f"Stored {len(inserted_ids)} random users")
        
        return MessageResponse(message=f"{total} random users generated")
