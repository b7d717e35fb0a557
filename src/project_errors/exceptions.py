"""Application errors raised by request handlers.

Handlers raise these to signal a failure the client should see.
The boundary handler (handlers.py) turns them into a JSON:API error
document via format_error(): {"errors": [{"status": "...", "title": "...", "detail": "..."}]}.

ProjectError is one failure; ProjectMultiError bundles several. Both carry
``is_project_error = True`` and a ``variant`` tag, so callers can recognize
and dispatch on them without isinstance checks.
"""

from collections.abc import Iterable
from typing import Any, ClassVar, Literal

from project_errors.catalog import CATALOG, NAME, ErrorKind
from project_errors.http import is_valid_status
from project_errors.logging import get_logger
from project_errors.schemas.error import JsonApiErrorSource

logger = get_logger(__name__)


def is_project_error(value: Any) -> bool:
    """Return True if ``value`` is a recognized application error (single or bundle)."""
    return getattr(value, "is_project_error", False) is True


class ProjectError(Exception):
    """Base class for all application errors.

    Defaults come from the class's ``kind``; an explicit message, status or
    title overrides them. Empty strings and statuses outside 100..999 fall
    back to the defaults too, so construction never fails and the fields
    always hold a usable response. ``source`` optionally points at the part
    of the request that caused the error. Fields are read-only.
    """

    kind: ClassVar[ErrorKind] = CATALOG["INTERNAL_ERROR"]
    name: ClassVar[str] = NAME
    is_project_error: ClassVar[bool] = True
    variant: ClassVar[Literal["single"]] = "single"

    def __init__(
        self,
        message: str | None = None,
        *,
        status: int | None = None,
        title: str | None = None,
        source: JsonApiErrorSource | None = None,
    ) -> None:
        kind = type(self).kind
        self._detail = message or kind.message
        self._status = kind.status
        if status is not None:
            if is_valid_status(status):
                self._status = int(status)
            else:
                logger.warning("invalid_error_status", status=repr(status), fallback=kind.status)
        self._title = title or kind.title
        self._source = source
        super().__init__(self._detail)

    @property
    def status(self) -> int:
        return self._status

    @property
    def title(self) -> str:
        return self._title

    @property
    def detail(self) -> str:
        return self._detail

    @property
    def source(self) -> JsonApiErrorSource | None:
        return self._source

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status={self._status!r}, "
            f"title={self._title!r}, detail={self._detail!r})"
        )


class ProjectMultiError(Exception):
    """Several independent application errors raised together (e.g. batch validation).

    Order is preserved: it is the order of the entries in the formatted response.
    """

    name: ClassVar[str] = NAME
    is_project_error: ClassVar[bool] = True
    variant: ClassVar[Literal["bundle"]] = "bundle"

    def __init__(self, errors: Iterable[ProjectError] | None = None) -> None:
        self._errors: tuple[ProjectError, ...] = tuple(errors) if errors is not None else ()
        super().__init__("; ".join(str(error) for error in self._errors))

    @property
    def errors(self) -> tuple[ProjectError, ...]:
        return self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(errors={list(self._errors)!r})"


MultiError = ProjectMultiError


# Standard HTTP


class BadGatewayError(ProjectError):
    """An upstream resource failed unexpectedly."""

    kind = CATALOG["BAD_GATEWAY"]


class BadRequestError(ProjectError):
    """The request was malformed."""

    kind = CATALOG["BAD_REQUEST"]


class ForbiddenError(ProjectError):
    """The caller is not allowed to access the resource."""

    kind = CATALOG["FORBIDDEN"]


class GatewayTimeoutError(ProjectError):
    """Timed out waiting on an upstream resource."""

    kind = CATALOG["GATEWAY_TIMEOUT"]


class GoneError(ProjectError):
    kind = CATALOG["GONE"]


class InternalError(ProjectError):
    kind = CATALOG["INTERNAL_ERROR"]


class MethodNotAllowedError(ProjectError):
    kind = CATALOG["METHOD_NOT_ALLOWED"]


class NotFoundError(ProjectError):
    """Raised when a requested resource does not exist."""

    kind = CATALOG["NOT_FOUND"]


class TeapotError(ProjectError):
    kind = CATALOG["TEAPOT"]


class UnavailableError(ProjectError):
    """The resource is temporarily unavailable; the client may retry."""

    kind = CATALOG["UNAVAILABLE"]


# Special errors


class ConfigurationError(ProjectError):
    """The application is misconfigured (missing env var, bad setting)."""

    kind = CATALOG["CONFIGURATION_ERROR"]


class RejectedError(ProjectError):
    """The request was refused before any processing (403, "Request Rejected")."""

    kind = CATALOG["REJECTED"]


class UnimplementedError(ProjectError):
    """The request is understood but the resource is not implemented.

    Reported as 400, not 501.
    """

    kind = CATALOG["NOT_IMPLEMENTED"]


class UnreachableCodeError(ProjectError):
    """A branch that should be impossible was reached. Logs a warning when created."""

    kind = CATALOG["UNREACHABLE_CODE"]

    def __init__(
        self,
        message: str | None = None,
        *,
        status: int | None = None,
        title: str | None = None,
        source: JsonApiErrorSource | None = None,
    ) -> None:
        logger.warning("unreachable_code")
        super().__init__(message, status=status, title=title, source=source)
