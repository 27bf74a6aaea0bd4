# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import user_router, random_user_router
from .api.v1.errors import request_validation_exception_handler
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    MongoDB and the outbound HTTP client connect lazily on first use, so
    startup only logs; shutdown closes both.
    """
    logger.info("User service started")
    
    yield
    
    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)
    
    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    configure_logging(settings.log_level)
    
    application = FastAPI(
        title="Random Users API",
        version="1.0.0",
        description="CRUD over users, plus generation from the randomuser.me API",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Body validation failures use the same 400 shape as the use cases
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    
    # Register API routers
    application.include_router(user_router, prefix=settings.api_prefix)
    application.include_router(random_user_router, prefix=settings.api_prefix)
    
    @application.get("/")
    async def root():
        return {"message": "Random Users API is running"}
    
    return application


# Create application instance
app = create_application()
