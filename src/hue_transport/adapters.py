"""Adapters performing the literal HTTP exchange with the bridge."""

import logging
from typing import Optional, Protocol, runtime_checkable

import httpx

from .config import HueConfig, config
from .exceptions import AdapterError, AdapterTimeoutError

logger = logging.getLogger(__name__)


@runtime_checkable
class Adapter(Protocol):
    """Capabilities the transport needs from an HTTP adapter.

    Adapters may also define ``open()`` and ``close()``; the transport calls
    them around each request when present.
    """

    def send(self, method: str, url: str, body: Optional[bytes] = None) -> bytes: ...

    def get_http_status_code(self) -> Optional[int]: ...

    def get_content_type(self) -> Optional[str]: ...


class HttpxAdapter:
    """Default adapter, one httpx.Client per request (no pooling)."""

    def __init__(
        self,
        hue_config: Optional[HueConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        hue_config = hue_config or config
        self.timeout = httpx.Timeout(
            connect=hue_config.timeout_connect,
            read=hue_config.timeout_read,
            write=5.0,
            pool=5.0,
        )
        # Only used to substitute httpx.MockTransport in tests
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._status_code: Optional[int] = None
        self._content_type: Optional[str] = None

    def open(self) -> None:
        """Open the underlying HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)

    def send(self, method: str, url: str, body: Optional[bytes] = None) -> bytes:
        """Send the request and return the raw response body."""
        self._status_code = None
        self._content_type = None
        self.open()

        headers = {"Content-Type": "application/json"} if body is not None else None
        try:
            response = self._client.request(method, url, content=body, headers=headers)
        except httpx.TimeoutException as e:
            raise AdapterTimeoutError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            raise AdapterError(f"Request failed: {e}") from e
        except httpx.InvalidURL as e:
            raise AdapterError(f"Invalid URL {url!r}: {e}") from e

        self._status_code = response.status_code
        self._content_type = response.headers.get("content-type")
        logger.debug(f"{method} {url} -> {self._status_code} ({self._content_type})")
        return response.content

    def get_http_status_code(self) -> Optional[int]:
        return self._status_code

    def get_content_type(self) -> Optional[str]:
        return self._content_type

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
