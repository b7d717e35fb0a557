"""Error catalog: the fixed status/title/message defaults for every error kind.

Everything here is built once at import and is read-only afterwards.
Constructors in exceptions.py look their defaults up in CATALOG.
"""

from dataclasses import dataclass
from types import MappingProxyType

from project_errors.http import HTTP, is_valid_status

NAME = "ProjectError"


@dataclass(frozen=True)
class ErrorMessages:
    """Default detail messages, one per error kind."""

    BAD_GATEWAY: str = "An unexpected error occurred on an upstream resource"
    BAD_REQUEST: str = "The request was not properly formatted"
    CONFIGURATION_ERROR: str = (
        "The application responding to the request encountered a configuration error"
    )
    FORBIDDEN: str = "Access to this resource is not authorized"
    GATEWAY_TIMEOUT: str = "The connection timed out waiting for an upstream resource"
    GONE: str = "The requested resource is no longer available"
    INTERNAL_ERROR: str = "An unexpected error occurred and the request was unable to complete"
    METHOD_NOT_ALLOWED: str = "The requested method is not allowed"
    NOT_FOUND: str = "The requested resource was not found"
    NOT_IMPLEMENTED: str = "The request was understood but the resource is not implemented"
    REJECTED: str = "The request was rejected prior to processing"
    TEAPOT: str = "This resource is a teapot incapable of processing the request"
    UNAVAILABLE: str = "The requested resource is temporarily unavailable"
    UNREACHABLE_CODE: str = (
        "The application encountered an unreachable condition while processing the request"
    )


@dataclass(frozen=True)
class ErrorTitles:
    """Short human labels, one per error kind."""

    BAD_GATEWAY: str = "Bad Gateway"
    BAD_REQUEST: str = "Bad Request"
    CONFIGURATION_ERROR: str = "Internal Configuration Error"
    FORBIDDEN: str = "Forbidden"
    GATEWAY_TIMEOUT: str = "Gateway Timeout"
    GONE: str = "Gone"
    INTERNAL_ERROR: str = "Internal Application Error"
    METHOD_NOT_ALLOWED: str = "Method Not Allowed"
    NOT_FOUND: str = "Not Found"
    NOT_IMPLEMENTED: str = "Not Implemented"
    REJECTED: str = "Request Rejected"
    TEAPOT: str = "Teapot"
    UNAVAILABLE: str = "Service Unavailable"


@dataclass(frozen=True)
class ErrorText:
    """``ERROR.MESSAGE.<KIND>`` / ``ERROR.TITLE.<KIND>`` lookup root."""

    MESSAGE: ErrorMessages
    TITLE: ErrorTitles


ERROR = ErrorText(MESSAGE=ErrorMessages(), TITLE=ErrorTitles())


@dataclass(frozen=True)
class ErrorKind:
    """Defaults for one kind of error.

    Validated on construction so a bad catalog entry fails at import,
    never while a request is being answered.
    """

    status: int
    title: str
    message: str

    def __post_init__(self) -> None:
        if not is_valid_status(self.status):
            raise ValueError(f"status {self.status!r} is not a three-digit HTTP code")
        # Plain int, so HTTPCode members never reach a payload.
        object.__setattr__(self, "status", int(self.status))
        if not isinstance(self.title, str) or not self.title:
            raise ValueError("title must be a non-empty string")
        if not isinstance(self.message, str) or not self.message:
            raise ValueError("message must be a non-empty string")


CATALOG: MappingProxyType[str, ErrorKind] = MappingProxyType(
    {
        "BAD_GATEWAY": ErrorKind(
            HTTP.CODE.BAD_GATEWAY, ERROR.TITLE.BAD_GATEWAY, ERROR.MESSAGE.BAD_GATEWAY
        ),
        "BAD_REQUEST": ErrorKind(
            HTTP.CODE.BAD_REQUEST, ERROR.TITLE.BAD_REQUEST, ERROR.MESSAGE.BAD_REQUEST
        ),
        "CONFIGURATION_ERROR": ErrorKind(
            HTTP.CODE.INTERNAL_ERROR,
            ERROR.TITLE.CONFIGURATION_ERROR,
            ERROR.MESSAGE.CONFIGURATION_ERROR,
        ),
        "FORBIDDEN": ErrorKind(
            HTTP.CODE.FORBIDDEN, ERROR.TITLE.FORBIDDEN, ERROR.MESSAGE.FORBIDDEN
        ),
        "GATEWAY_TIMEOUT": ErrorKind(
            HTTP.CODE.GATEWAY_TIMEOUT,
            ERROR.TITLE.GATEWAY_TIMEOUT,
            ERROR.MESSAGE.GATEWAY_TIMEOUT,
        ),
        "GONE": ErrorKind(HTTP.CODE.GONE, ERROR.TITLE.GONE, ERROR.MESSAGE.GONE),
        "INTERNAL_ERROR": ErrorKind(
            HTTP.CODE.INTERNAL_ERROR,
            ERROR.TITLE.INTERNAL_ERROR,
            ERROR.MESSAGE.INTERNAL_ERROR,
        ),
        "METHOD_NOT_ALLOWED": ErrorKind(
            HTTP.CODE.METHOD_NOT_ALLOWED,
            ERROR.TITLE.METHOD_NOT_ALLOWED,
            ERROR.MESSAGE.METHOD_NOT_ALLOWED,
        ),
        "NOT_FOUND": ErrorKind(
            HTTP.CODE.NOT_FOUND, ERROR.TITLE.NOT_FOUND, ERROR.MESSAGE.NOT_FOUND
        ),
        # Historical: reported as a client error, not 501.
        "NOT_IMPLEMENTED": ErrorKind(
            HTTP.CODE.BAD_REQUEST,
            ERROR.TITLE.NOT_IMPLEMENTED,
            ERROR.MESSAGE.NOT_IMPLEMENTED,
        ),
        "REJECTED": ErrorKind(
            HTTP.CODE.FORBIDDEN, ERROR.TITLE.REJECTED, ERROR.MESSAGE.REJECTED
        ),
        "TEAPOT": ErrorKind(HTTP.CODE.TEAPOT, ERROR.TITLE.TEAPOT, ERROR.MESSAGE.TEAPOT),
        "UNAVAILABLE": ErrorKind(
            HTTP.CODE.UNAVAILABLE, ERROR.TITLE.UNAVAILABLE, ERROR.MESSAGE.UNAVAILABLE
        ),
        "UNREACHABLE_CODE": ErrorKind(
            HTTP.CODE.INTERNAL_ERROR,
            ERROR.TITLE.INTERNAL_ERROR,
            ERROR.MESSAGE.UNREACHABLE_CODE,
        ),
    }
)
