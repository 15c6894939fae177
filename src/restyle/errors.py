"""Error hierarchy for restyle."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restyle.model.diagnostic import Diagnostic


class RestyleError(Exception):
    """Base error for all restyle errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidPromptError(RestyleError):
    """The caller supplied a prompt that is empty after trimming."""


class TemplateNotFoundError(RestyleError):
    """No template with the requested name is registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown template: {name!r}")
        self.name = name


class ConfigError(RestyleError):
    """A configuration value is missing or invalid."""


class BackendError(RestyleError):
    """A tag backend failed to answer."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = True,
        retry_after: float | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.retryable = retryable
        self.retry_after = retry_after


class StylesheetParseError(RestyleError):
    """Raised when style text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)


class StylesheetValidationError(RestyleError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )
