from .user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    DeleteAllUsersUseCase,
)
from .random_user import (
    GenerateRandomUserUseCase,
    GenerateRandomUsersUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "DeleteAllUsersUseCase",
    "GenerateRandomUserUseCase",
    "GenerateRandomUsersUseCase",
]
