"""Domain models for cmdopts.

Declarations and results are **frozen** dataclasses — value objects with
no behaviour beyond data access and a few derived properties.  They
carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cmdopts.exceptions import ConfigError, HelpRequested, ParseError

OptionValue = bool | str | int | float | list[str]
"""Any value an option can resolve to."""

DefaultValue = bool | str | int | float
"""Values accepted as a declared default."""

ChoiceValue = str | int | float | bool
"""Values accepted in an ``enum`` parameter's permitted set."""

OptionMap = dict[str, OptionValue]
"""Ordered mapping from parameter name (and alias) to resolved value."""


# ---------------------------------------------------------------------------
# Parameter declaration
# ---------------------------------------------------------------------------

class ParamType(str, Enum):
    """Semantic type of a declared parameter."""

    BOOLEAN = "boolean"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    FILE = "file"
    ENUM = "enum"
    ARRAY = "array"


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Declaration of one recognised option.

    Structural validation (enum choices, identifier collisions) happens
    when the declaration is registered, see :meth:`Commands.add_param`.
    """

    name: str
    """Primary identifier, matched as ``-name`` or ``--name``."""

    type: ParamType
    """Selects the coercion rule.  A plain string value is accepted."""

    alias: str | None = None
    """Optional secondary identifier."""

    comment: str | None = None
    """Description shown in the help text."""

    default: DefaultValue | None = None
    """When set, the parameter is optional and seeds the option map."""

    choices: tuple[ChoiceValue, ...] | None = None
    """Permitted values for ``enum`` parameters."""

    def __post_init__(self) -> None:
        try:
            param_type = ParamType(self.type)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in ParamType)
            raise ConfigError(
                f"Unknown type {self.type!r} for parameter {self.name!r}.",
                hint=f"Use one of: {allowed}",
            ) from exc
        object.__setattr__(self, "type", param_type)
        if self.choices is not None and not isinstance(self.choices, tuple):
            object.__setattr__(self, "choices", tuple(self.choices))

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Name followed by the alias, when one is declared."""
        if self.alias:
            return (self.name, self.alias)
        return (self.name,)


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedOption:
    """A matched option after its raw values were coerced."""

    name: str
    alias: str | None
    value: OptionValue


class ParseStatus(str, Enum):
    """How a parse call terminated."""

    SUCCESS = "success"
    HELP_REQUESTED = "help_requested"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of :meth:`Commands.parse`.

    On failure ``options`` and ``args`` hold the registry's state from
    before the call; nothing from the failed parse leaks into them.
    """

    status: ParseStatus
    options: OptionMap
    args: list[str] = field(default_factory=list)
    error: ParseError | None = None
    help_text: str | None = None
    """Help to display: always set on help requests, and on errors when
    the registry was built with ``auto_show_help``."""

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.SUCCESS

    @property
    def exit_code(self) -> int:
        """Conventional process exit status for this outcome."""
        return 1 if self.status is ParseStatus.ERROR else 0

    def unwrap(self) -> OptionMap:
        """Return the option map, or raise what terminated the parse.

        Raises
        ------
        HelpRequested
            If the help flag was given.
        ParseError
            The first failure detected during parsing.
        """
        if self.status is ParseStatus.HELP_REQUESTED:
            raise HelpRequested(self.help_text or "")
        if self.error is not None:
            raise self.error
        return self.options

