"""Type coercion of raw flag values into typed option values.

Each ``_coerce_*`` function converts the raw strings captured for one
flag occurrence and raises :class:`~cmdopts.exceptions.ValidationError`
when they do not satisfy the declared type.  :func:`coerce` dispatches
on :class:`~cmdopts.core.models.ParamType` and handles the "no value
captured" case shared by every type.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from cmdopts.core.help_format import render_value
from cmdopts.core.models import (
    ChoiceValue,
    OptionValue,
    ParameterSpec,
    ParamType,
    ParsedOption,
)
from cmdopts.core.tokenizer import FlagMatch
from cmdopts.exceptions import ValidationError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")
_BOOL_RE = re.compile(r"true|false|1|0|yes|no", re.IGNORECASE)
_TRUTHY = frozenset({"true", "1", "yes"})


def _invalid(spec: ParameterSpec, flag: str, value: str, expected: str) -> ValidationError:
    return ValidationError(
        f"Invalid value {value!r} for {flag}: expected {expected}.",
        param_name=spec.name,
        flag=flag,
    )


# ---------------------------------------------------------------------------
# Per-type rules
# ---------------------------------------------------------------------------

def _coerce_boolean(spec: ParameterSpec, flag: str, values: Sequence[str]) -> bool:
    value = values[0]
    if not _BOOL_RE.fullmatch(value):
        raise _invalid(spec, flag, value, "one of true, false, 1, 0, yes, no")
    return value.lower() in _TRUTHY


def _coerce_int(spec: ParameterSpec, flag: str, values: Sequence[str]) -> int:
    value = values[0]
    if not _INT_RE.fullmatch(value):
        raise _invalid(spec, flag, value, "int")
    return int(value)


def _coerce_float(spec: ParameterSpec, flag: str, values: Sequence[str]) -> float:
    value = values[0]
    if not _FLOAT_RE.fullmatch(value):
        raise _invalid(spec, flag, value, "float")
    return float(value)


def _coerce_text(spec: ParameterSpec, flag: str, values: Sequence[str]) -> str:
    return " ".join(values)


def _choice_matches(choice: ChoiceValue, value: str) -> bool:
    """Numeric choices compare by value, everything else by display form."""
    if isinstance(choice, bool) or not isinstance(choice, (int, float)):
        return render_value(choice) == value
    if _INT_RE.fullmatch(value):
        return int(value) == choice
    if _FLOAT_RE.fullmatch(value):
        return float(value) == choice
    return False


def _coerce_enum(spec: ParameterSpec, flag: str, values: Sequence[str]) -> OptionValue:
    value = values[0]
    for choice in spec.choices or ():
        if _choice_matches(choice, value):
            return choice
    permitted = ", ".join(render_value(choice) for choice in spec.choices or ())
    raise ValidationError(
        f"Invalid value {value!r} for {flag}.",
        param_name=spec.name,
        flag=flag,
        hint=f"Permitted values: {permitted}",
    )


def _coerce_array(spec: ParameterSpec, flag: str, values: Sequence[str]) -> list[str]:
    return list(values)


_COERCERS: dict[ParamType, Callable[[ParameterSpec, str, Sequence[str]], OptionValue]] = {
    ParamType.BOOLEAN: _coerce_boolean,
    ParamType.INT: _coerce_int,
    ParamType.FLOAT: _coerce_float,
    ParamType.STRING: _coerce_text,
    ParamType.FILE: _coerce_text,
    ParamType.ENUM: _coerce_enum,
    ParamType.ARRAY: _coerce_array,
}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def coerce(match: FlagMatch) -> ParsedOption | None:
    """Convert one flag occurrence into a :class:`ParsedOption`.

    Returns ``None`` when the flag carried no value but the parameter
    has a default: the seeded default stays in place.

    Raises
    ------
    ValidationError
        If the captured value does not fit the declared type, or a
        non-boolean flag without a default carried no value.
    """
    spec = match.spec
    values = match.raw_values

    if not values and spec.type is ParamType.BOOLEAN:
        return ParsedOption(name=spec.name, alias=spec.alias, value=True)

    # An array flag followed by nothing is an empty list, not a missing value.
    if not values and spec.type is not ParamType.ARRAY:
        if spec.default is not None:
            return None
        raise ValidationError(
            f"Missing value for parameter {match.flag}.",
            param_name=spec.name,
            flag=match.flag,
        )

    value = _COERCERS[spec.type](spec, match.flag, values)
    return ParsedOption(name=spec.name, alias=spec.alias, value=value)
