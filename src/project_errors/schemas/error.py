"""JSON:API error schemas.

Every error entry has the JSON:API 1.0 error-object shape:
{"status": "404", "title": "Not Found", "detail": "..."} plus optional members.
format_error() builds entries through serialize_error() and never shapes them itself.
"""

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, field_validator


class ErrorLike(Protocol):
    """Anything with the three error fields, e.g. a ProjectError."""

    @property
    def status(self) -> int: ...

    @property
    def title(self) -> str: ...

    @property
    def detail(self) -> str: ...


class JsonApiErrorSource(BaseModel):
    """Where in the request the error originated."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pointer: str | None = None
    parameter: str | None = None
    header: str | None = None


class JsonApiErrorObject(BaseModel):
    """A single JSON:API error object. ``status`` is always a string on the wire."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str | None = None
    status: str
    code: str | None = None
    title: str
    detail: str
    source: JsonApiErrorSource | None = None
    links: dict[str, str] | None = None
    meta: dict[str, Any] | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _stringify_status(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(int(value))
        return value


class JsonApiErrorDocument(BaseModel):
    """Top-level ``{"errors": [...]}`` document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    errors: list[JsonApiErrorObject]

    def entries(self) -> list[dict[str, Any]]:
        """Dump every entry as a plain dict, leaving unset members out."""
        return [error.model_dump(exclude_none=True) for error in self.errors]

    @classmethod
    def from_entry(cls, entry: dict[str, Any]) -> "JsonApiErrorDocument":
        """Re-parse one serialized entry into a single-entry document."""
        return cls.model_validate({"errors": [entry]})


def serialize_error(error: ErrorLike) -> JsonApiErrorDocument:
    """Wrap one error in a document holding exactly one JSON:API entry.

    An optional ``source`` attribute on the error becomes the entry's ``source`` member.
    """
    entry = JsonApiErrorObject(
        status=error.status,
        title=error.title,
        detail=error.detail,
        source=getattr(error, "source", None),
    )
    return JsonApiErrorDocument(errors=[entry])
