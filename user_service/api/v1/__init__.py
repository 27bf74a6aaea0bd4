from .user_controller import router as user_router
from .random_user_controller import router as random_user_router


__all__ = ["user_router", "random_user_router"]
