"""Single-pass tokenizer that matches flags against declared parameters.

Every function here is a pure transformation of the token list — no
coercion, no validation, no side effects.  Rules:

1. A token is *flag-shaped* when it starts with ``-``.
2. Non-flag tokens become positional arguments immediately.
3. A flag matches the first spec whose name or alias equals the token
   with one leading dash stripped (two for ``--``).
4. Unmatched flags fall through to the positional arguments.
5. ``array`` specs consume every following non-flag token; every other
   type consumes at most one.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cmdopts.core.models import ParameterSpec, ParamType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlagMatch:
    """A recognised flag together with the raw values captured after it."""

    spec: ParameterSpec
    flag: str
    """The flag token as written, e.g. ``--width``."""

    raw_values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TokenizedInput:
    """Output of :func:`tokenize`, both lists in input order."""

    matches: tuple[FlagMatch, ...]
    positionals: tuple[str, ...]


# ---------------------------------------------------------------------------
# Token classification
# ---------------------------------------------------------------------------

def is_flag_shaped(token: str) -> bool:
    return token.startswith("-")


def flag_identifier(token: str) -> str:
    """Strip the ``-`` or ``--`` prefix from a flag-shaped token.

    ``---x`` keeps one dash (``-x``), so it only matches a parameter
    literally declared with that identifier.
    """
    if token.startswith("--"):
        return token[2:]
    return token[1:]


def find_spec(
    token: str,
    params: Sequence[ParameterSpec],
) -> ParameterSpec | None:
    """Return the first spec whose name or alias matches *token*."""
    identifier = flag_identifier(token)
    if not identifier:
        return None
    for spec in params:
        if identifier in spec.identifiers:
            return spec
    return None


# ---------------------------------------------------------------------------
# Main pass
# ---------------------------------------------------------------------------

def _take_values(
    tokens: Sequence[str],
    start: int,
    spec: ParameterSpec,
) -> tuple[str, ...]:
    """Collect the non-flag tokens that belong to *spec* from *start*."""
    limit = len(tokens) if spec.type is ParamType.ARRAY else min(start + 1, len(tokens))
    end = start
    while end < limit and not is_flag_shaped(tokens[end]):
        end += 1
    return tuple(tokens[start:end])


def tokenize(
    tokens: Sequence[str],
    params: Sequence[ParameterSpec],
) -> TokenizedInput:
    """Walk *tokens* once, left to right, splitting flags from positionals."""
    matches: list[FlagMatch] = []
    positionals: list[str] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if not is_flag_shaped(token):
            positionals.append(token)
            continue

        spec = find_spec(token, params)
        if spec is None:
            logger.debug("unrecognised flag %r kept as positional", token)
            positionals.append(token)
            continue

        values = _take_values(tokens, index, spec)
        index += len(values)
        logger.debug("matched %r to %s with %d value(s)", token, spec.name, len(values))
        matches.append(FlagMatch(spec=spec, flag=token, raw_values=values))

    return TokenizedInput(matches=tuple(matches), positionals=tuple(positionals))
