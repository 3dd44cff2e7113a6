"""Pure help-text formatting for declared parameters.

Produces one aligned line per parameter, in registration order::

    -H, --help <boolean>       Show this help (default: false)
    --type <dog|cat>           Animal kind dog,cat

Nothing here prints; the CLI layer decides where the text goes.
"""

from __future__ import annotations

from collections.abc import Sequence

from cmdopts.core.models import ParameterSpec, ParamType

MAX_NAME_COLUMN: int = 35
"""Upper bound for the width of the flag column."""

_ENUM_LABEL_LIMIT: int = 30


# ---------------------------------------------------------------------------
# Value and flag rendering
# ---------------------------------------------------------------------------

def render_value(value: object) -> str:
    """Render a default or enum choice the way users type it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def display_flag(identifier: str) -> str:
    """``-x`` for single-character identifiers, ``--name`` otherwise."""
    if len(identifier) > 1:
        return f"--{identifier}"
    return f"-{identifier}"


def _display_names(spec: ParameterSpec) -> str:
    return ", ".join(display_flag(identifier) for identifier in spec.identifiers)


def _type_label(spec: ParameterSpec) -> str:
    if spec.type is ParamType.ENUM and spec.choices:
        joined = "|".join(render_value(choice) for choice in spec.choices)
        if len(joined) < _ENUM_LABEL_LIMIT:
            return joined
    return spec.type.value


def _description(spec: ParameterSpec) -> str:
    text = spec.comment or ""
    if spec.choices:
        text += " " + ",".join(render_value(choice) for choice in spec.choices)
    if isinstance(spec.default, str):
        text += f' (default: "{spec.default}")'
    elif spec.default is not None:
        text += f" (default: {render_value(spec.default)})"
    return text.strip()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def format_help_lines(params: Sequence[ParameterSpec]) -> list[str]:
    """Return the aligned help lines for *params*."""
    if not params:
        return []

    rows = [
        (f"{_display_names(spec)} <{_type_label(spec)}>", _description(spec))
        for spec in params
    ]
    width = min(max(len(name) for name, _ in rows) + 1, MAX_NAME_COLUMN)
    return [f"{name.ljust(width)} {description}".rstrip() for name, description in rows]


def format_help(params: Sequence[ParameterSpec]) -> str:
    """Return the help lines joined with newlines."""
    return "\n".join(format_help_lines(params))
