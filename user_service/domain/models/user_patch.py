# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

# Local application imports
from ..constants import UserFields


@dataclass(frozen=True)
class UserPatch:
    """
    Partial update for a User.
    
    Only fields present in ``changes`` are written. A field missing from
    ``changes`` is left untouched in the store; it is never reset to a default.
    """
    changes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserPatch":
        """Keep only the updatable fields that the payload actually carries."""
        return cls(
            changes={
                key: payload[key]
                for key in UserFields.UPDATABLE
                if key in payload
            }
        )

    def is_empty(self) -> bool:
        return not self.changes

    def __contains__(self, field_name: str) -> bool:
        return field_name in self.changes
