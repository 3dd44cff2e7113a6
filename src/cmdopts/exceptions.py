"""Custom exception hierarchy for cmdopts.

Every error that leaves the core must inherit from
:class:`CmdOptsError` so that callers (and the CLI error boundary) can
render a clean message without leaking stack traces.

Hierarchy
---------
CmdOptsError
├── ConfigError
├── EnvironmentError
└── ParseError
    ├── ValidationError
    └── MissingRequiredParameterError

:class:`HelpRequested` is deliberately *not* part of the hierarchy: it
signals a successful early termination, not a failure.
"""

from __future__ import annotations


class CmdOptsError(Exception):
    """Base exception for all cmdopts errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Declaration -----------------------------------------------------------

class ConfigError(CmdOptsError):
    """Raised at registration time when a parameter declaration is invalid."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdOptsError):
    """Raised when an optional runtime dependency is not available."""


# --- Parsing ---------------------------------------------------------------

class ParseError(CmdOptsError):
    """Base class for failures detected while parsing an argument list."""

    def __init__(
        self,
        message: str,
        *,
        param_name: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.param_name: str = param_name
        """Declared name of the parameter the failure relates to."""


class ValidationError(ParseError):
    """Raised when a captured value does not satisfy the declared type."""

    def __init__(
        self,
        message: str,
        *,
        param_name: str,
        flag: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, param_name=param_name, hint=hint)
        self.flag: str = flag
        """The flag token exactly as it appeared in the input."""


class MissingRequiredParameterError(ParseError):
    """Raised when a parameter without a default was never supplied."""


# --- Non-error signals -----------------------------------------------------

class HelpRequested(Exception):
    """Raised by :meth:`ParseOutcome.unwrap` when help was requested."""

    def __init__(self, help_text: str) -> None:
        super().__init__("help requested")
        self.help_text: str = help_text
