# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    UpdateOutcomeResponse,
    DeleteOutcomeResponse,
)
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    DeleteAllUsersUseCase,
)
from ...domain.exceptions import UserServiceError
from ...di.container import get_container
from .errors import raise_http_error


router = APIRouter(tags=["users"])


@router.post("/users", response_model=UserResponse)
async def create_user(request: UserCreateRequest) -> UserResponse:
    """
    Create a new user
    
    Args:
        request: User creation request (name, age, email)
        
    Returns:
        UserResponse with the created user, including its ID
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        return await create_user_use_case.execute(request)
    except UserServiceError as exception:
        raise_http_error(exception)


@router.get("/users", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """List every stored user"""
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    try:
        return await list_users_use_case.execute()
    except UserServiceError as exception:
        raise_http_error(exception)


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    """
    Get a user by ID
    
    Args:
        user_id: MongoDB ObjectId of the user
        
    Returns:
        UserResponse with user information
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    try:
        return await get_user_use_case.execute(user_id)
    except UserServiceError as exception:
        raise_http_error(exception)


@router.put("/users/{user_id}", response_model=UpdateOutcomeResponse)
async def update_user(
    user_id: str,
    request: Optional[UserUpdateRequest] = None,
) -> UpdateOutcomeResponse:
    """
    Partially update a user
    
    Only the fields present in the body are changed. An unknown ID is not
    an error: the outcome reports matched_count 0.
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    try:
        return await update_user_use_case.execute(user_id, request)
    except UserServiceError as exception:
        raise_http_error(exception)


@router.delete("/users/{user_id}", response_model=DeleteOutcomeResponse)
async def delete_user(user_id: str) -> DeleteOutcomeResponse:
    """Delete a user by ID (404 if it does not exist)"""
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    try:
        return await delete_user_use_case.execute(user_id)
    except UserServiceError as exception:
        raise_http_error(exception)


@router.delete("/users", response_model=DeleteOutcomeResponse)
async def delete_all_users() -> DeleteOutcomeResponse:
    container = get_container()
    delete_all_users_use_case = container.get(DeleteAllUsersUseCase)
    
    try:
        return await delete_all_users_use_case.execute()
    except UserServiceError as exception:
        raise_http_error(exception)
