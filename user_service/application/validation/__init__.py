from .user_validator import (
    validate_count,
    validate_object_id,
    violations_from_errors,
)

__all__ = [
    "validate_count",
    "validate_object_id",
    "violations_from_errors",
]
