from .user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    UpdateOutcomeResponse,
    DeleteOutcomeResponse,
)
from .message_dto import MessageResponse

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "UpdateOutcomeResponse",
    "DeleteOutcomeResponse",
    "MessageResponse",
]
