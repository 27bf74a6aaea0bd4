# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user_patch import UserPatch
from ....domain.exceptions import ValidationError
from ...dto.user_dto import UpdateOutcomeResponse, UserUpdateRequest
from ...validation import validate_object_id
from .user_mapper import to_update_response

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for partially updating a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(
        self,
        user_id: str,
        request: Optional[UserUpdateRequest] = None,
    ) -> UpdateOutcomeResponse:
        """
        Update the fields the client sent; omitted fields keep their value.
        
        The update is unconditional: an unknown ID is not an error and is
        reported as matched_count == 0.
        
        Args:
            user_id: ObjectId string of the user
            request: Validated partial update; None means nothing to change
        
        Raises:
            ValidationError: If the ID is not a valid ObjectId
            StoreError: If the update fails
        """
        violations = validate_object_id(user_id)
        if violations:
            raise ValidationError(violations)
        
        if request is None:
            patch = UserPatch()
        else:
            patch = UserPatch.from_payload(
                request.model_dump(include=request.model_fields_set)
            )
        
        outcome = await self.user_repository.update_by_id(user_id, patch)
        if outcome.matched_count == 0:
            logger.info(f"Update matched no user for ID {user_id}")
        else:
            logger.info(f"Updated user {user_id} fields={sorted(patch.changes)}")
        
        return to_update_response(outcome)
