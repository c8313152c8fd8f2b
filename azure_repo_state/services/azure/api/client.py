"""
Azure DevOps REST API client for making authenticated requests.
Supports both personal access tokens and username/password basic auth.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from common.config.config import (
    AZURE_API_CONNECT_TIMEOUT,
    AZURE_API_TIMEOUT,
    AZURE_API_VERSION,
    AZURE_ENDPOINT,
    AZURE_PASSWORD,
    AZURE_TOKEN,
    AZURE_USERNAME,
)

logger = logging.getLogger(__name__)


class AzureDevOpsAPIError(Exception):
    """Raised when an Azure DevOps request fails at the transport or HTTP level."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ItemTextStream:
    """Open response body of a streamed request.

    Owns the underlying response and HTTP client; both are released by
    aclose(), or on leaving an ``async with`` block.
    """

    def __init__(self, response: httpx.Response, client: httpx.AsyncClient):
        self._response = response
        self._client = client
        self._closed = False

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def readable(self) -> bool:
        return not self._closed

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self):
        return self._response.aiter_bytes()

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await self._response.aclose()
        finally:
            await self._client.aclose()

    async def __aenter__(self) -> "ItemTextStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


class AzureDevOpsAPIClient:
    """Base client for Azure DevOps API interactions."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_version: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Azure DevOps API client.

        Args:
            endpoint: Organisation URL (defaults to config)
            token: Personal access token (defaults to config)
            username: Basic auth username, used when no token is set
            password: Basic auth password, used when no token is set
            api_version: REST API version (defaults to config)
            transport: Optional httpx transport, mainly for tests
        """
        self.endpoint = (endpoint or AZURE_ENDPOINT).rstrip("/") + "/"
        self.token = token or AZURE_TOKEN
        self.username = username or AZURE_USERNAME
        self.password = password or AZURE_PASSWORD
        self.api_version = api_version or AZURE_API_VERSION
        self._transport = transport

        if not self.token and not (self.username and self.password):
            logger.warning("Azure DevOps API client initialized without credentials - authentication may fail")

    def _get_auth(self) -> Optional[httpx.BasicAuth]:
        """Build request authentication.

        Personal access tokens are sent as basic auth with an empty user name.
        """
        if self.token:
            return httpx.BasicAuth("", self.token)
        if self.username and self.password:
            return httpx.BasicAuth(self.username, self.password)
        return None

    def _get_headers(self, accept: str = "application/json") -> Dict[str, str]:
        """Get headers for Azure DevOps API requests.

        Args:
            accept: Accepted response media type

        Returns:
            Headers dictionary
        """
        return {
            "Accept": accept,
            "Content-Type": "application/json",
        }

    def _build_url(self, path: str) -> str:
        return f"{self.endpoint}{path.lstrip('/')}"

    def _build_params(self, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        query["api-version"] = self.api_version
        return query

    def _new_http_client(self, timeout: Optional[float] = None) -> httpx.AsyncClient:
        timeout_config = httpx.Timeout(
            timeout or AZURE_API_TIMEOUT, connect=AZURE_API_CONNECT_TIMEOUT
        )
        return httpx.AsyncClient(
            auth=self._get_auth(),
            timeout=timeout_config,
            trust_env=False,
            transport=self._transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Make an Azure DevOps API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH)
            path: API path relative to the organisation URL
            data: Request body data
            params: Query parameters (None values are dropped)
            timeout: Request timeout in seconds

        Returns:
            Decoded JSON response, or an empty dict for empty bodies

        Raises:
            AzureDevOpsAPIError: If the request fails
        """
        url = self._build_url(path)
        headers = self._get_headers()
        query = self._build_params(params)

        try:
            async with self._new_http_client(timeout) as client:
                response = await client.request(
                    method.upper(), url, json=data, headers=headers, params=query
                )
        except httpx.RequestError as e:
            error_msg = f"Azure DevOps API request error: {e}"
            logger.error(error_msg)
            raise AzureDevOpsAPIError(error_msg) from e

        return self._process_response(response, method, url)

    def _process_response(self, response: httpx.Response, method: str, url: str) -> Any:
        """Process HTTP response and extract data.

        Args:
            response: HTTP response object
            method: HTTP method used
            url: Request URL

        Returns:
            Response data or empty dict

        Raises:
            AzureDevOpsAPIError: If response status indicates failure
        """
        if response.status_code in (200, 201, 204):
            logger.info(
                f"Azure DevOps API {method} request to {url} "
                f"successful (status: {response.status_code})"
            )
            if response.content:
                return response.json()
            return {}

        error_msg = f"Azure DevOps API request failed (status {response.status_code}): {response.text}"
        logger.error(error_msg)
        raise AzureDevOpsAPIError(error_msg, status_code=response.status_code)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a GET request.

        Args:
            path: API path
            params: Query parameters

        Returns:
            Response data
        """
        return await self.request("GET", path, params=params)

    async def get_list(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Make a GET request against a collection endpoint.

        Args:
            path: API path
            params: Query parameters

        Returns:
            Items of the ``{"count": n, "value": [...]}`` envelope
        """
        response = await self.get(path, params=params)
        if isinstance(response, list):
            return response
        return (response or {}).get("value", [])

    async def open_stream(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "text/plain",
        allowed_statuses: Tuple[int, ...] = (200,),
    ) -> Optional[ItemTextStream]:
        """Open a streamed GET request.

        The response body is handed over unread for statuses in
        allowed_statuses; the caller owns the returned stream and must close it.

        Args:
            path: API path
            params: Query parameters
            accept: Accepted response media type
            allowed_statuses: Statuses whose body is returned to the caller

        Returns:
            Open stream, or None for a 204 No Content response

        Raises:
            AzureDevOpsAPIError: If the request fails or the status is not allowed
        """
        url = self._build_url(path)
        client = self._new_http_client()

        try:
            request = client.build_request(
                "GET", url, headers=self._get_headers(accept), params=self._build_params(params)
            )
            response = await client.send(request, stream=True)
        except httpx.RequestError as e:
            await client.aclose()
            error_msg = f"Azure DevOps API request error: {e}"
            logger.error(error_msg)
            raise AzureDevOpsAPIError(error_msg) from e

        stream = ItemTextStream(response, client)

        if response.status_code not in allowed_statuses:
            try:
                await response.aread()
                error_msg = f"Azure DevOps API request failed (status {response.status_code}): {response.text}"
            finally:
                await stream.aclose()
            logger.error(error_msg)
            raise AzureDevOpsAPIError(error_msg, status_code=response.status_code)

        if response.status_code == 204:
            logger.debug(f"Azure DevOps API GET request to {url} returned no content")
            await stream.aclose()
            return None

        logger.info(
            f"Azure DevOps API GET stream to {url} opened (status: {response.status_code})"
        )
        return stream
