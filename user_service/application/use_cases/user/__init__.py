from .create_user import CreateUserUseCase
from .list_users import ListUsersUseCase
from .get_user import GetUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase
from .delete_all_users import DeleteAllUsersUseCase

__all__ = [
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "DeleteAllUsersUseCase",
]
