from .user import User
from .user_patch import UserPatch
from .outcomes import UpdateOutcome, DeleteOutcome

__all__ = ["User", "UserPatch", "UpdateOutcome", "DeleteOutcome"]
