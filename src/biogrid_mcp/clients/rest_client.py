"""
REST API client for the BioGRID webservice.

Provides access to https://webservice.thebiogrid.org with:
- Access key and JSON format injected into every request
- Fixed request timeout
- Connection pooling via a single shared httpx.AsyncClient
- Typed errors for transport, HTTP and decoding failures

Requests are never retried: a failure is surfaced to the caller immediately.
"""

import logging
from typing import Any, Optional

import httpx

from biogrid_mcp.config import Settings
from biogrid_mcp.constants import RESPONSE_FORMAT

logger = logging.getLogger(__name__)

# Longest slice of an error body echoed back in exception messages
ERROR_BODY_EXCERPT = 200


class BiogridAPIError(Exception):
    """Request to the BioGRID webservice failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class BiogridClient:
    """
    HTTP client for the BioGRID REST webservice.

    Holds no per-call state; one instance is shared by every tool invocation.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 20.0,
        user_agent: str = "BioGRID-MCP-Server/1.0.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize BioGRID client.

        Args:
            base_url: Webservice base URL (e.g., https://webservice.thebiogrid.org)
            api_key: BioGRID access key, sent as the accesskey parameter
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._api_key = api_key

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
            follow_redirects=True,
            transport=transport,
        )

        logger.info(f"BioGRID client initialized for {self.base_url}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "BiogridClient":
        """Build a client from validated settings."""
        return cls(
            base_url=settings.biogrid_api_base,
            api_key=settings.biogrid_api_key or "",
            timeout=settings.request_timeout_seconds,
            user_agent=settings.user_agent,
        )

    async def call(self, path: str, params: dict[str, str]) -> list[dict[str, Any]]:
        """
        Issue one GET request against a webservice endpoint.

        Args:
            path: Endpoint path (e.g., /interactions/)
            params: Query parameters built for the tool

        Returns:
            Raw records as dictionaries, in upstream order

        Raises:
            BiogridAPIError: On timeout, connection failure, non-2xx status
                or a body that is not JSON
        """
        query = {**params, "format": RESPONSE_FORMAT, "accesskey": self._api_key}
        logger.debug(f"GET {path} params={self._redact(query)}")

        try:
            response = await self.client.get(path, params=query)
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.error(f"BioGRID request to {path} timed out: {e}")
            raise BiogridAPIError(
                f"Request to {path} timed out after {self.timeout}s"
            ) from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            body = e.response.text[:ERROR_BODY_EXCERPT]
            logger.error(f"BioGRID request to {path} failed: {status} - {body}")
            raise BiogridAPIError(f"HTTP {status}: {body}", status_code=status) from e

        except httpx.HTTPError as e:
            logger.error(f"BioGRID request to {path} error: {e}")
            raise BiogridAPIError(str(e) or type(e).__name__) from e

        try:
            raw_data = response.json()
        except ValueError as e:
            body = response.text[:ERROR_BODY_EXCERPT]
            logger.error(f"BioGRID response from {path} is not JSON: {body}")
            raise BiogridAPIError(f"Invalid JSON response: {body}") from e

        records = self._parse_response(raw_data, path)
        logger.debug(f"GET {path} returned {len(records)} records")
        return records

    def _parse_response(self, raw_data: Any, path: str) -> list[dict[str, Any]]:
        """
        Flatten a webservice payload into a list of records.

        Notes:
            - format=json returns an object keyed by record ID
            - some deployments return a plain array of records
            - an empty result may come back as null, [] or {}
        """
        if raw_data is None:
            return []

        if isinstance(raw_data, dict):
            records = list(raw_data.values())
        elif isinstance(raw_data, list):
            records = raw_data
        else:
            raise BiogridAPIError(
                f"Unexpected response from {path}: {type(raw_data).__name__}"
            )

        if not all(isinstance(record, dict) for record in records):
            raise BiogridAPIError(f"Unexpected record shape in response from {path}")

        return records

    @staticmethod
    def _redact(params: dict[str, str]) -> dict[str, str]:
        """Copy of params safe for logging."""
        return {k: ("***" if k == "accesskey" else v) for k, v in params.items()}

    async def close(self) -> None:
        """Close HTTP client and connections."""
        await self.client.aclose()
        logger.info("BioGRID client closed")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
