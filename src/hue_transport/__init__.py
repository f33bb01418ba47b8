"""Philips Hue bridge client - HTTP transport for the local REST API."""

from .adapters import Adapter, HttpxAdapter
from .config import HueConfig, configure_logging
from .exceptions import (
    AdapterError,
    AdapterTimeoutError,
    AuthorizationError,
    BridgeError,
    ErrorType,
    GroupTableFullError,
    HueConnectionError,
    HueError,
    HueTimeoutError,
    HueValidationError,
    InvalidBodyError,
    InvalidParameterError,
    InvalidValueError,
    LinkButtonError,
    MethodError,
    ParameterUnavailableError,
    ResourceError,
    ThrottleError,
    exception_class_for,
    get_exception_by_type,
)
from .transport import HttpMethod, HttpTransport

__version__ = "1.0.0"
__description__ = "HTTP transport for the Philips Hue bridge local REST API"

__all__ = [
    "Adapter",
    "HttpxAdapter",
    "HttpMethod",
    "HttpTransport",
    "HueConfig",
    "configure_logging",
    "ErrorType",
    "exception_class_for",
    "get_exception_by_type",
    "HueError",
    "HueConnectionError",
    "HueTimeoutError",
    "HueValidationError",
    "AdapterError",
    "AdapterTimeoutError",
    "BridgeError",
    "AuthorizationError",
    "InvalidBodyError",
    "ResourceError",
    "MethodError",
    "InvalidParameterError",
    "ParameterUnavailableError",
    "InvalidValueError",
    "LinkButtonError",
    "GroupTableFullError",
    "ThrottleError",
]
