"""Exception hierarchy for scaffolding and template operations."""

from __future__ import annotations

from pathlib import Path


class PydgenError(Exception):
    """Base exception for pydgen errors.

    ``str(err)`` is a short message without filesystem paths. The full
    detail, usually naming the offending file, is kept for logging along
    with the path itself and the underlying exception, if any.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        path: str | Path | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped
        self.path = Path(path) if path is not None else None

    def internal(self) -> str:
        """Return the detailed message meant for logs, not end users."""
        return self.internal_details


class SourceNotFoundError(PydgenError):
    """Raised when a source file, directory or template does not exist."""


class TargetExistsError(PydgenError):
    """Raised when a copy destination exists and may not be replaced."""


class TemplateRenderError(PydgenError):
    """Raised when the template engine fails to compile or render."""


class DataFileError(PydgenError):
    """Raised when a data file cannot be parsed or has an unsupported format."""
