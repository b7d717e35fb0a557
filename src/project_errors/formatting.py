"""Turn application errors into a JSON:API error response.

format_error() takes a ProjectError or a ProjectMultiError and returns the
status to answer with plus the {"errors": [...]} body. Anything else is
re-raised untouched so an outer handler can deal with it.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from project_errors.config import settings
from project_errors.exceptions import InternalError, ProjectError, is_project_error
from project_errors.http import HTTP, status_class
from project_errors.logging import get_logger
from project_errors.schemas.error import serialize_error

logger = get_logger(__name__)


@dataclass(frozen=True)
class ErrorResponseDescriptor:
    """Status code plus body for an error response.

    Not an HTTP response: the caller writes ``status`` and ``data`` onto
    whatever response object its framework uses.
    """

    status: int
    data: dict[str, Any]

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data}


def reconcile_status(statuses: Iterable[int]) -> int:
    """Collapse several statuses into the one the response is sent with.

    A running fold, left to right: each status is compared to the current
    result (not to the first status). Equal keeps the result; two different
    4XX codes give 400; any other mismatch gives 500.

    Raises:
        ValueError: if ``statuses`` is empty.
    """
    iterator = iter(statuses)
    try:
        status = int(next(iterator))
    except StopIteration:
        raise ValueError("cannot reconcile an empty sequence of statuses") from None

    for current in iterator:
        if current == status:
            continue
        if status_class(status) == 4 and status_class(current) == 4:
            status = int(HTTP.CODE.BAD_REQUEST)
        else:
            status = int(HTTP.CODE.INTERNAL_ERROR)
    return status


def _flatten(error: Any) -> Sequence[ProjectError]:
    # Marked errors without a tag are treated as single errors.
    if getattr(error, "variant", "single") == "bundle":
        return error.errors
    return (error,)


def format_error(error: Any) -> ErrorResponseDescriptor:
    """Format an application error as ``{status, data: {errors: [...]}}``.

    Entries keep the order of the input. An empty bundle is answered as a
    single internal error.

    Raises:
        The ``error`` itself, unchanged, if it is an exception that is not an
        application error.
        TypeError: if ``error`` is neither an exception nor an application error.
    """
    if not is_project_error(error):
        if isinstance(error, BaseException):
            raise error
        raise TypeError(f"cannot format {type(error).__name__!s} as an error response")

    errors = _flatten(error)
    if not errors:
        logger.warning("empty_error_bundle")
        errors = (InternalError(),)

    data: dict[str, Any] = {
        # serialize_error() wraps each error in its own document; keep only the entry.
        "errors": [serialize_error(e).entries()[0] for e in errors],
    }
    if settings.jsonapi_version:
        data["jsonapi"] = {"version": settings.jsonapi_version}

    return ErrorResponseDescriptor(
        status=reconcile_status(e.status for e in errors),
        data=data,
    )
