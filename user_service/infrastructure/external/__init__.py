"""External service clients for communicating with external systems"""

from .random_user_client import RandomUserClient

__all__ = [
    "RandomUserClient",
]
