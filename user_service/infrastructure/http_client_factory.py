"""Process-wide httpx client used for calls to the random user API."""
import httpx
import logging
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)

_random_user_http_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Return the pooled client, creating it on first use.
    
    GET /randomUsers/{cantidad} opens one request per generated user at the
    same moment, all against randomuser.me; sharing one client lets those
    requests reuse connections instead of opening a new one each.
    The per-request timeout comes from RANDOM_USER_API_TIMEOUT.
    """
    global _random_user_http_client
    
    if _random_user_http_client is None:
        settings = get_settings()
        _random_user_http_client = httpx.AsyncClient(
            timeout=settings.random_user_api_timeout,
            limits=httpx.Limits(
                max_keepalive_connections=20,
                max_connections=100,
                keepalive_expiry=30.0,
            ),
            http2=True,
        )
        logger.info(
            f"Created random user HTTP client (timeout={settings.random_user_api_timeout}s)"
        )
    
    return _random_user_http_client


async def close_shared_http_client() -> None:
    """Close the pooled client; called from the FastAPI lifespan on shutdown."""
    global _random_user_http_client
    
    if _random_user_http_client is not None:
        await _random_user_http_client.aclose()
        _random_user_http_client = None
        logger.info("Closed random user HTTP client")
