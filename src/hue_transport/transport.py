"""HTTP transport for the Hue bridge REST API."""

import ipaddress
import json
import logging
from enum import Enum
from typing import Any, Optional, Union

from .adapters import Adapter, HttpxAdapter
from .config import HueConfig, config
from .exceptions import (
    AdapterError,
    AdapterTimeoutError,
    HueConnectionError,
    HueError,
    HueTimeoutError,
    HueValidationError,
    get_exception_by_type,
)

logger = logging.getLogger(__name__)

STATUS_OK = 200
JSON_CONTENT_TYPE = "application/json"


class HttpMethod(str, Enum):
    """HTTP methods understood by the bridge."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class HttpTransport:
    """Sends requests to the bridge and decodes its JSON envelopes."""

    def __init__(self, hue_config: Optional[HueConfig] = None):
        self.config = hue_config or config
        self._adapter: Optional[Adapter] = None

    def get_adapter(self) -> Adapter:
        """Get the adapter, creating the default one on first access."""
        if self._adapter is None:
            self._adapter = HttpxAdapter(self.config)
        return self._adapter

    def set_adapter(self, adapter: Adapter) -> None:
        """Replace the adapter used for subsequent requests."""
        self._adapter = adapter

    def build_request_url(self, path: str, full_url: bool = False) -> str:
        """Build the request URL for a resource path."""
        url = f"/api/{path}"
        if full_url:
            url = f"http://{self._url_host(self.config.bridge_host)}{url}"
        return url

    def send_request(
        self,
        path: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        body: Any = None,
    ) -> Any:
        """Send a request to the bridge and return the decoded payload.

        Array responses are reduced to their first element; a ``success``
        envelope is reduced to its value. An ``error`` envelope is raised as
        the matching BridgeError subclass.
        """
        method = self._normalize_method(method)
        url = self.build_request_url(path, full_url=True)
        payload = json.dumps(body).encode() if body is not None else None

        adapter = self.get_adapter()
        logger.debug(f"Sending {method.value} {url}")
        close = getattr(adapter, "close", None)
        try:
            open_ = getattr(adapter, "open", None)
            if open_ is not None:
                open_()
            raw = adapter.send(method.value, url, payload)
            status_code = adapter.get_http_status_code()
            content_type = adapter.get_content_type()
        except AdapterTimeoutError as e:
            raise HueTimeoutError(f"Request timeout for {url}: {e}") from e
        except AdapterError as e:
            raise HueConnectionError(f"Connection failure for {url}: {e}") from e
        finally:
            if close is not None:
                close()

        if status_code != STATUS_OK:
            raise HueConnectionError(
                f"Connection failure: HTTP {status_code} from {url}",
                status_code=status_code,
                content_type=content_type,
            )

        if not self._is_json(content_type):
            raise HueConnectionError(
                f"Connection failure: unexpected content type {content_type!r} from {url}",
                status_code=status_code,
                content_type=content_type,
            )

        result = self._decode(raw, url, status_code, content_type)
        return self._inspect(result)

    def test_connection(self) -> bool:
        """Test connection to the bridge."""
        try:
            self.send_request(self.config.api_path("config"), HttpMethod.GET)
            logger.info(f"Successfully connected to Hue bridge at {self.config.bridge_host}")
            return True
        except HueError as e:
            logger.error(f"Failed to connect to Hue bridge: {e}")
            return False

    @staticmethod
    def _normalize_method(method: Union[HttpMethod, str]) -> HttpMethod:
        try:
            return HttpMethod(method.upper() if isinstance(method, str) else method)
        except ValueError as e:
            raise HueValidationError(f"Unsupported method: {method}") from e

    @staticmethod
    def _url_host(host: str) -> str:
        try:
            address = ipaddress.ip_address(host)
        except ValueError:
            return host
        return f"[{address}]" if address.version == 6 else host

    @staticmethod
    def _is_json(content_type: Optional[str]) -> bool:
        if not content_type:
            return False
        return content_type.split(";", 1)[0].strip().lower() == JSON_CONTENT_TYPE

    @staticmethod
    def _decode(
        raw: Optional[Union[bytes, str]], url: str, status_code: int, content_type: str
    ) -> Any:
        if raw is None:
            return None
        if not raw.strip():
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise HueConnectionError(
                f"Invalid JSON body from {url}: {e}",
                status_code=status_code,
                content_type=content_type,
            ) from e

    @staticmethod
    def _inspect(result: Any) -> Any:
        # Mutations are acknowledged with a list of per-operation records
        if isinstance(result, list):
            result = result[0] if result else None

        if isinstance(result, dict):
            if "error" in result:
                error = result["error"] or {}
                if not isinstance(error, dict):
                    error = {"description": str(error)}
                raise get_exception_by_type(error.get("type"), error.get("description"))
            if "success" in result:
                return result["success"]

        return result
