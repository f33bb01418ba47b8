"""Exceptions raised by the Hue transport and the bridge error-code table."""

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Optional, Type


class HueError(Exception):
    """Base exception for all Hue-related errors."""

    pass


class HueConnectionError(HueError):
    """Network/connection related errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        content_type: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.content_type = content_type


class HueTimeoutError(HueConnectionError):
    """Request timeout errors."""

    pass


class HueValidationError(HueError):
    """Parameter validation errors."""

    pass


class BridgeError(HueError):
    """Error reported by the bridge in an error envelope."""

    def __init__(self, message: Optional[str] = None, error_type: Optional[int] = None):
        super().__init__(message or "Unknown bridge error")
        self.message = message
        self.error_type = error_type


class AuthorizationError(BridgeError):
    """Unauthorized user."""


class InvalidBodyError(BridgeError):
    """Body contains invalid JSON."""


class ResourceError(BridgeError):
    """Resource not available."""


class MethodError(BridgeError):
    """Method not available for resource."""


class InvalidParameterError(BridgeError):
    """Missing parameters in body."""


class ParameterUnavailableError(BridgeError):
    """Parameter not available."""


class InvalidValueError(BridgeError):
    """Invalid value for parameter."""


class LinkButtonError(BridgeError):
    """Link button not pressed."""


class GroupTableFullError(BridgeError):
    """Group table full."""


class ThrottleError(BridgeError):
    """Bridge is busy, back off."""


class AdapterError(Exception):
    """Raised by adapters when the HTTP exchange itself fails."""

    pass


class AdapterTimeoutError(AdapterError):
    """Raised by adapters when the HTTP exchange times out."""

    pass


class ErrorType(IntEnum):
    """Error types defined by the bridge API."""

    UNAUTHORIZED_USER = 1
    INVALID_JSON = 2
    RESOURCE_UNAVAILABLE = 3
    METHOD_UNAVAILABLE = 4
    MISSING_PARAMETERS = 5
    PARAMETER_UNAVAILABLE = 6
    INVALID_VALUE = 7
    LINK_BUTTON_NOT_PRESSED = 101
    GROUP_TABLE_FULL = 301
    INTERNAL_ERROR = 901


EXCEPTIONS_BY_TYPE = MappingProxyType(
    {
        ErrorType.UNAUTHORIZED_USER: AuthorizationError,
        ErrorType.INVALID_JSON: InvalidBodyError,
        ErrorType.RESOURCE_UNAVAILABLE: ResourceError,
        ErrorType.METHOD_UNAVAILABLE: MethodError,
        ErrorType.MISSING_PARAMETERS: InvalidParameterError,
        ErrorType.PARAMETER_UNAVAILABLE: ParameterUnavailableError,
        ErrorType.INVALID_VALUE: InvalidValueError,
        ErrorType.LINK_BUTTON_NOT_PRESSED: LinkButtonError,
        ErrorType.GROUP_TABLE_FULL: GroupTableFullError,
        ErrorType.INTERNAL_ERROR: ThrottleError,
    }
)


def _coerce_error_type(code: Any) -> Optional[int]:
    if isinstance(code, bool):
        return None
    try:
        return int(code)
    except (TypeError, ValueError):
        return None


def exception_class_for(code: Any) -> Type[BridgeError]:
    """Return the exception class for a bridge error type, BridgeError if unknown."""
    error_type = _coerce_error_type(code)
    if error_type is None:
        return BridgeError
    # IntEnum members hash like their int values
    return EXCEPTIONS_BY_TYPE.get(error_type, BridgeError)


def get_exception_by_type(code: Any, message: Optional[str]) -> BridgeError:
    """Build the exception for a bridge error envelope.

    Never raises itself; unknown or malformed codes produce a plain
    BridgeError so callers can always raise the result.
    """
    exception_class = exception_class_for(code)
    return exception_class(message, error_type=_coerce_error_type(code))
