"""
Unit tests for the uvicorn entry point and the shared random user HTTP client.
"""
from unittest.mock import patch

import httpx
import pytest

from user_service import __main__ as entrypoint
from user_service.infrastructure import http_client_factory


class TestMain:
    """Tests for python -m user_service"""

    def test_runs_app_with_configured_address(self, mock_settings):
        with patch.object(entrypoint.uvicorn, "run") as run:
            entrypoint.main()

        run.assert_called_once_with(
            "user_service.main:app",
            host="127.0.0.1",
            port=8081,
            log_level="info",
        )


class TestSharedHttpClient:
    """Tests for get_shared_http_client / close_shared_http_client"""

    @pytest.mark.asyncio
    async def test_client_is_created_once_and_closed(self, mock_settings):
        first = http_client_factory.get_shared_http_client()
        try:
            assert isinstance(first, httpx.AsyncClient)
            assert http_client_factory.get_shared_http_client() is first
            assert first.timeout.read == 2.0
        finally:
            await http_client_factory.close_shared_http_client()

        assert first.is_closed
        assert http_client_factory._random_user_http_client is None

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        await http_client_factory.close_shared_http_client()
        assert http_client_factory._random_user_http_client is None
