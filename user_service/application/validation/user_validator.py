"""
Field rules for user requests.

Every function returns an ordered list of FieldViolation objects. An empty
list means the input may proceed to the store. Nothing in this module raises
for bad input and nothing touches the database.

Body rules live on the pydantic request DTOs (UserCreateRequest,
UserUpdateRequest); violations_from_errors turns their errors into the
field/message pairs returned to clients.
"""
# Standard library imports
import re
from typing import Any, Dict, Iterable, List, Sequence

# External package imports
from bson import ObjectId

# Local application imports
from ...domain.constants import UserFields
from ...domain.exceptions import FieldViolation

# Same grammar as a JSON integer literal, with an optional sign
_INTEGER_PATTERN = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$")
# ObjectId.is_valid also accepts raw 12-byte strings; clients only ever see the hex form
_OBJECT_ID_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

BODY_FIELD = "body"

NAME_REQUIRED = "Name is required"
NAME_EMPTY = "Name cannot be empty"
AGE_INVALID = "Age must be a positive integer"
EMAIL_INVALID = "Email is not valid"
ID_INVALID = "ID format is not a valid MongoDB ObjectId"
COUNT_INVALID = "Count must be a positive integer"
BODY_INVALID = "Request body must be a JSON object"

_FIELD_MESSAGES = {
    UserFields.NAME: NAME_EMPTY,
    UserFields.AGE: AGE_INVALID,
    UserFields.EMAIL: EMAIL_INVALID,
}


def _field_of(location: Sequence[Any]) -> str:
    # FastAPI prefixes body errors with "body"; model_validate does not
    parts = list(location)
    if parts and parts[0] == BODY_FIELD:
        parts = parts[1:]
    if parts and parts[0] in _FIELD_MESSAGES:
        return parts[0]
    return BODY_FIELD


def violations_from_errors(errors: Iterable[Dict[str, Any]]) -> List[FieldViolation]:
    """
    Convert pydantic error dicts into FieldViolations.
    
    Keeps the order pydantic reports (model field order) and reports each
    field once.
    """
    violations: List[FieldViolation] = []
    seen = set()
    for error in errors:
        field = _field_of(error.get("loc", ()))
        if field in seen:
            continue
        seen.add(field)
        
        if field == BODY_FIELD:
            message = BODY_INVALID
        elif field == UserFields.NAME and error.get("type") == "missing":
            message = NAME_REQUIRED
        else:
            message = _FIELD_MESSAGES[field]
        violations.append(FieldViolation(field, message))
    return violations


def validate_object_id(user_id: Any) -> List[FieldViolation]:
    if (
        not isinstance(user_id, str)
        or not _OBJECT_ID_HEX_PATTERN.fullmatch(user_id)
        or not ObjectId.is_valid(user_id)
    ):
        return [FieldViolation(UserFields.ID, ID_INVALID)]
    return []


def validate_count(raw_count: Any) -> List[FieldViolation]:
    """The bulk generation count arrives as a path segment and must be an integer >= 1."""
    if isinstance(raw_count, bool):
        return [FieldViolation("cantidad", COUNT_INVALID)]
    if isinstance(raw_count, int):
        count = raw_count
    elif isinstance(raw_count, str) and _INTEGER_PATTERN.fullmatch(raw_count.strip()):
        count = int(raw_count.strip())
    else:
        return [FieldViolation("cantidad", COUNT_INVALID)]
    
    if count < 1:
        return [FieldViolation("cantidad", COUNT_INVALID)]
    return []
