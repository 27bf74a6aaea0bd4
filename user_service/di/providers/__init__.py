from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider
from .random_user_provider import RandomUserProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "RandomUserProvider",
]
