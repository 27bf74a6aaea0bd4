from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, EmailStr, Field, field_validator

# Largest integer BSON can store (int64)
MAX_STORABLE_INT = 2**63 - 1


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("Age must be a positive integer")
    return value


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("Name cannot be empty")
    return value


UserName = Annotated[str, Field(min_length=1), AfterValidator(_reject_blank)]
UserAge = Annotated[int, BeforeValidator(_reject_bool), Field(ge=1, le=MAX_STORABLE_INT)]


class UserCreateRequest(BaseModel):
    """DTO for user creation request"""
    name: UserName
    age: UserAge
    email: EmailStr


class UserUpdateRequest(BaseModel):
    """
    DTO for a partial user update.
    
    Every field may be omitted; ``model_fields_set`` tells which ones the
    client actually sent. Validators only run on sent values, so an explicit
    null is rejected while an omitted field stays None.
    """
    name: Optional[UserName] = None
    age: Optional[UserAge] = None
    email: Optional[EmailStr] = None

    @field_validator("name", "age", "email", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class UserResponse(BaseModel):
    """DTO for a stored user"""
    id: str
    name: str
    age: int
    email: str


class UpdateOutcomeResponse(BaseModel):
    """DTO for the store outcome of a partial update"""
    acknowledged: bool
    matched_count: int
    modified_count: int


class DeleteOutcomeResponse(BaseModel):
    """DTO for the store outcome of a delete"""
    acknowledged: bool
    deleted_count: int
