# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.message_dto import MessageResponse
from ...application.use_cases.random_user import (
    GenerateRandomUserUseCase,
    GenerateRandomUsersUseCase,
)
from ...application.validation.user_validator import COUNT_INVALID
from ...domain.exceptions import ExternalFetchError, UserServiceError, ValidationError
from ...di.container import get_container


router = APIRouter(tags=["random users"])

logger = logging.getLogger(__name__)


@router.get("/randomUsers", response_model=MessageResponse)
async def generate_random_user() -> MessageResponse:
    """
    Store one user fetched from the random user API
    
    A non-2xx answer from the API is forwarded with the same status code.
    Any other failure is a 500.
    """
    container = get_container()
    generate_random_user_use_case = container.get(GenerateRandomUserUseCase)
    
    try:
        return await generate_random_user_use_case.execute()
    except ExternalFetchError as exception:
        if exception.status_code is not None and exception.status_code >= 400:
            raise HTTPException(
                status_code=exception.status_code,
                detail={"message": exception.user_message},
            )
        logger.error(f"Random user generation failed: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Internal server error"},
        )
    except UserServiceError as exception:
        logger.error(f"Random user generation failed: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Internal server error"},
        )


@router.get("/randomUsers/{cantidad}", response_model=MessageResponse)
async def generate_random_users(cantidad: str) -> MessageResponse:
    """
    Store ``cantidad`` users fetched concurrently from the random user API
    
    Args:
        cantidad: Number of users to generate (positive integer)
        
    Returns:
        MessageResponse naming how many users were generated
    """
    container = get_container()
    generate_random_users_use_case = container.get(GenerateRandomUsersUseCase)
    
    try:
        return await generate_random_users_use_case.execute(cantidad)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": COUNT_INVALID,
                **exception.details,
            },
        )
    except UserServiceError as exception:
        logger.error(f"Random users generation failed: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Internal server error", "error": exception.message},
        )
