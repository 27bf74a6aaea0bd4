from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.random_user import (
    GenerateRandomUserUseCase,
    GenerateRandomUsersUseCase,
)
from ...infrastructure.external.random_user_client import RandomUserClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RandomUserProvider:
    """Random user use case provider - wires the external API client into its use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Register RandomUserClient as singleton if not already registered
        if not container.is_registered(RandomUserClient):
            container.register_singleton(RandomUserClient, RandomUserClient())
        
        container.register_factory(
            GenerateRandomUserUseCase,
            lambda: GenerateRandomUserUseCase(
                user_repository=container.get(UserRepository),
                random_user_client=container.get(RandomUserClient),
            )
        )
        
        container.register_factory(
            GenerateRandomUsersUseCase,
            lambda: GenerateRandomUsersUseCase(
                user_repository=container.get(UserRepository),
                random_user_client=container.get(RandomUserClient),
            )
        )
