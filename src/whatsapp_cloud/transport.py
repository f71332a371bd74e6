"""
Graph API Request Pipeline

The single way resource services reach the Cloud API. GraphTransport
owns one httpx.AsyncClient that:

- attaches ``Authorization: Bearer <token>`` to every request it sends,
  including absolute URLs outside the default phone-number scope
- raises ApiError when a failed response carries an ``{"error": {...}}``
  envelope, and lets the original httpx error through otherwise
"""

import logging
from collections.abc import Generator
from typing import IO, Any

import httpx
from pydantic import SecretStr

from whatsapp_cloud.config import ClientConfig
from whatsapp_cloud.contracts.messages import MESSAGING_PRODUCT
from whatsapp_cloud.errors import ApiError

logger = logging.getLogger(__name__)


class BearerAuth(httpx.Auth):
    """Sets the bearer token on each outgoing request."""

    def __init__(self, token: SecretStr):
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token.get_secret_value()}"
        yield request


class GraphTransport:
    """
    Authenticated HTTP client scoped to the configured phone number.

    Relative paths resolve against ``config.phone_url``; pass ``base_url``
    (e.g. ``transport.graph_url``) for WABA-scoped or root-level nodes.
    Absolute URLs are sent as-is, still authenticated. A closed transport
    cannot be reused; create a new one instead.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._closed = False

    @property
    def graph_url(self) -> str:
        return self.config.graph_url

    @property
    def phone_url(self) -> str:
        return self.config.phone_url

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP client."""
        if self._closed:
            raise RuntimeError("GraphTransport is closed")
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.phone_url,
                timeout=self.config.timeout,
                auth=BearerAuth(self.config.access_token),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        self._closed = True
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GraphTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def resolve_url(self, path: str = "", base_url: str | None = None) -> str:
        """Absolute URL for ``path`` under ``base_url`` (default: phone scope)."""
        if path.startswith(("http://", "https://")):
            return path
        base = (base_url or self.config.phone_url).rstrip("/")
        path = path.strip("/")
        return f"{base}/{path}" if path else base

    async def request(
        self,
        method: str,
        path: str = "",
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to ``base_url``, or an absolute URL
            params: Query string parameters
            json: JSON body
            data: Form fields (multipart when ``files`` is given)
            files: Multipart file parts
            base_url: Override for the default phone-number scope
            timeout: Per-call timeout passed through to httpx

        Returns:
            Decoded JSON body, or an empty dict for empty responses

        Raises:
            ApiError: The API answered with an error envelope
            httpx.HTTPError: Any other transport or status failure
        """
        response = await self._send(
            method,
            self.resolve_url(path, base_url),
            params=params,
            json=json,
            data=data,
            files=files,
            timeout=timeout,
        )
        if not response.content:
            return {}
        return response.json()

    async def get_bytes(self, url: str, timeout: float | None = None) -> bytes:
        """Download raw bytes (e.g. a media URL) with the auth header attached."""
        response = await self._send("GET", self.resolve_url(url), timeout=timeout)
        return response.content

    async def upload(
        self,
        path: str,
        *,
        filename: str,
        content: bytes | IO[bytes],
        mime_type: str,
        base_url: str | None = None,
    ) -> Any:
        """Multipart upload with the fixed messaging_product field and one file part."""
        return await self.request(
            "POST",
            path,
            data={"messaging_product": MESSAGING_PRODUCT, "type": mime_type},
            files={"file": (filename, content, mime_type)},
            base_url=base_url,
        )

    async def _send(self, method: str, url: str, timeout: float | None = None, **kwargs: Any) -> httpx.Response:
        client = self._get_client()
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug("Graph API request", extra={"method": method, "url": url})
        response = await client.request(method, url, **kwargs)
        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """Translate an error envelope into ApiError; re-raise anything else untouched."""
        if not response.is_error:
            return

        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            api_error = ApiError.from_envelope(error, status_code=response.status_code)
            logger.warning(
                "Graph API error",
                extra={
                    "status_code": response.status_code,
                    "code": api_error.code,
                    "subcode": api_error.subcode,
                    "fbtrace_id": api_error.trace_id,
                },
            )
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise api_error from exc

        response.raise_for_status()
