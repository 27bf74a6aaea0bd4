# Local application imports
from ....domain.models.user import User
from ....domain.models.outcomes import UpdateOutcome, DeleteOutcome
from ...dto.user_dto import UserResponse, UpdateOutcomeResponse, DeleteOutcomeResponse


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        name=user.name,
        age=user.age,
        email=user.email,
    )


def to_update_response(outcome: UpdateOutcome) -> UpdateOutcomeResponse:
    return UpdateOutcomeResponse(
        acknowledged=outcome.acknowledged,
        matched_count=outcome.matched_count,
        modified_count=outcome.modified_count,
    )


def to_delete_response(outcome: DeleteOutcome) -> DeleteOutcomeResponse:
    return DeleteOutcomeResponse(
        acknowledged=outcome.acknowledged,
        deleted_count=outcome.deleted_count,
    )
