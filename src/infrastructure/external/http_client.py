"""
HTTP client utilities for external API calls.
"""

import time
from typing import Any, Dict, Optional

import httpx
import structlog

logger = structlog.get_logger()


class HTTPClient:
    """HTTP client for external API calls.

    Owns an ``httpx.AsyncClient`` unless one is handed in, in which case the
    caller keeps ownership and closing this wrapper leaves it open.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        base_url: str = "",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.timeout = timeout
        self.base_url = base_url
        self.client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self.client is None:
            self.client = httpx.AsyncClient(timeout=self.timeout, base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        if self.client and self._owns_client:
            await self.client.aclose()
            self.client = None

    async def request(
        self,
        method: str,
        url: str,
        json: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send a request and log its outcome and timing."""
        if self.client is None:
            await self.__aenter__()

        start_time = time.time()

        try:
            response = await self.client.request(
                method,
                url,
                json=json,
                data=data,
                files=files,
                params=params,
                headers=headers,
            )

            response_time = (time.time() - start_time) * 1000

            logger.debug(
                f"HTTP {method.upper()} request completed",
                url=url,
                status_code=response.status_code,
                response_time_ms=response_time,
            )

            return response

        except Exception as e:
            response_time = (time.time() - start_time) * 1000

            logger.error(
                f"HTTP {method.upper()} request failed",
                url=url,
                error=str(e),
                response_time_ms=response_time,
            )
            raise

    async def post(
        self,
        url: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        files: Optional[Any] = None,
    ) -> httpx.Response:
        """Make POST request.

        ``data`` is sent as JSON, or as form fields when ``files`` is given.
        """
        if files is not None:
            return await self.request(
                "POST", url, data=data, files=files, headers=headers
            )
        return await self.request("POST", url, json=data, headers=headers)
