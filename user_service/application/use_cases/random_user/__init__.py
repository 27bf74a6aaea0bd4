from .generate_random_user import GenerateRandomUserUseCase
from .generate_random_users import GenerateRandomUsersUseCase

__all__ = ["GenerateRandomUserUseCase", "GenerateRandomUsersUseCase"]
