# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import DeleteOutcomeResponse
from .user_mapper import to_delete_response

logger = logging.getLogger(__name__)


class DeleteAllUsersUseCase:
    """Use case for emptying the users collection"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> DeleteOutcomeResponse:
        outcome = await self.user_repository.delete_all()
        logger.info(f"Deleted all users (count={outcome.deleted_count})")
        return to_delete_response(outcome)
