"""HTTP status-code table.

Symbolic names for the status codes the error catalog and the formatter use.
TEAPOT is 600, outside the registered HTTP range.
"""

from enum import IntEnum


class HTTPCode(IntEnum):
    """Integer HTTP status codes, addressable by name."""

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    CONFLICT = 409
    GONE = 410
    INTERNAL_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    TEAPOT = 600


class HTTP:
    """Namespace mirroring ``HTTP.CODE.NOT_FOUND`` style lookups."""

    CODE = HTTPCode


def status_class(status: int) -> int:
    """Return the hundreds digit of a status code (4 for 404, 5 for 502)."""
    return status // 100


def is_valid_status(value: object) -> bool:
    """True for a three-digit integer status (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and 100 <= value <= 999
