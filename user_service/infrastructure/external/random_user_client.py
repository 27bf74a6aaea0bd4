# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.models.user import User
from ...domain.exceptions import ExternalFetchError
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class RandomUserClient:
    """
    HTTP client for the randomuser.me API.
    
    Each call fetches one random identity and projects it into a User
    without ID. The expected response shape is::
    
        {"results": [{"name": {"first": ...}, "dob": {"age": ...}, "email": ...}]}
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the random user client.
        
        Args:
            base_url: Endpoint to call. If None, reads from settings.
            http_client: Client to send requests with. If None, the shared pooled client is used.
        """
        settings = get_settings()
        self.base_url = base_url or settings.random_user_api_url
        self._http_client = http_client
    
    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            return get_shared_http_client()
        return self._http_client
    
    async def fetch_user(self) -> User:
        """
        Fetch one random identity.
        
        Returns:
            User domain model with id=None
            
        Raises:
            ExternalFetchError: On transport failure, non-2xx status, or an
                unexpected body. status_code is set only for non-2xx answers.
        """
        try:
            response = await self.http_client.get(self.base_url)
        except httpx.HTTPError as e:
            logger.warning(f"Request to random user API failed: {e}")
            raise ExternalFetchError(f"Request to random user API failed: {e}")
        
        if not response.is_success:
            logger.warning(
                f"Random user API answered {response.status_code}: {response.text[:200]}"
            )
            raise ExternalFetchError(
                f"Random user API answered {response.status_code}",
                status_code=response.status_code,
            )
        
        try:
            data = response.json()
        except ValueError as e:
            raise ExternalFetchError(f"Random user API returned invalid JSON: {e}")
        
        return self._parse_user(data)
    
    def _parse_user(self, data: Dict[str, Any]) -> User:
        """Project the first result of an API response into a User."""
        try:
            result = data["results"][0]
            return User(
                id=None,
                name=result["name"]["first"],
                age=result["dob"]["age"],
                email=result["email"],
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ExternalFetchError(f"Unexpected random user API response: {e!r}")
