"""Translation of service and request-validation errors into HTTP errors."""
# Standard library imports
import logging
from typing import NoReturn

# External package imports
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...application.validation import violations_from_errors
from ...domain.exceptions import (
    NotFoundError,
    StoreError,
    UserServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def raise_http_error(exception: UserServiceError) -> NoReturn:
    """
    Raise the HTTPException matching a user service error.
    
    ValidationError -> 400 with the list of field violations
    NotFoundError   -> 404
    StoreError      -> 500 with the driver message
    anything else   -> 500
    """
    if isinstance(exception, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.details,
        )
    if isinstance(exception, NotFoundError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": exception.user_message},
        )
    if isinstance(exception, StoreError):
        logger.error(f"Store failure during {exception.operation}: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": exception.message},
        )
    
    logger.error(f"Unhandled service error: {exception.message}")
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": "Internal server error"},
    )


async def request_validation_exception_handler(
    request: Request,
    exception: RequestValidationError,
) -> JSONResponse:
    """
    Answer request-body validation failures with 400 and the same
    ``{"errors": [{field, message}]}`` body the use cases produce.
    """
    error = ValidationError(violations_from_errors(exception.errors()))
    logger.debug(f"Rejected {request.method} {request.url.path}: {error.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": error.details},
    )
