"""Core layer — declaration, tokenizing, coercion and result building.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Failures surface as :mod:`cmdopts.exceptions` types only.
"""

from cmdopts.core.commands import HELP_PARAM, Commands
from cmdopts.core.help_format import format_help, format_help_lines
from cmdopts.core.models import (
    OptionMap,
    OptionValue,
    ParameterSpec,
    ParamType,
    ParsedOption,
    ParseOutcome,
    ParseStatus,
)
from cmdopts.core.tokenizer import FlagMatch, TokenizedInput, tokenize

__all__: list[str] = [
    "Commands",
    "FlagMatch",
    "HELP_PARAM",
    "OptionMap",
    "OptionValue",
    "ParameterSpec",
    "ParamType",
    "ParseOutcome",
    "ParseStatus",
    "ParsedOption",
    "TokenizedInput",
    "format_help",
    "format_help_lines",
    "tokenize",
]
