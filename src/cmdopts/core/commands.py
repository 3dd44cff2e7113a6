"""Parameter registry and result builder.

:class:`Commands` is the object callers configure and parse with.  It
holds the ordered parameter declarations, seeds the option map with
their defaults, and turns an argument list into a
:class:`~cmdopts.core.models.ParseOutcome` by delegating to the
tokenizer and the coercer.

Guarantees
----------
* No ``print()``, no ``sys.exit()`` — presentation belongs to the caller.
* A failed parse leaves :attr:`Commands.options` and
  :attr:`Commands.args` exactly as they were.
* Only the first :class:`~cmdopts.exceptions.ParseError` is reported.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from cmdopts.core.coercion import coerce
from cmdopts.core.help_format import display_flag, format_help
from cmdopts.core.models import (
    OptionMap,
    ParameterSpec,
    ParamType,
    ParseOutcome,
    ParseStatus,
)
from cmdopts.core.tokenizer import tokenize
from cmdopts.exceptions import ConfigError, MissingRequiredParameterError, ParseError

logger = logging.getLogger(__name__)

HELP_PARAM = ParameterSpec(
    name="H",
    alias="help",
    type=ParamType.BOOLEAN,
    default=False,
    comment="Show this help",
)
"""Synthetic parameter registered first by every :class:`Commands`."""


def _snapshot(options: OptionMap) -> OptionMap:
    """Copy *options* so callers cannot mutate the registry's state."""
    return {
        key: list(value) if isinstance(value, list) else value
        for key, value in options.items()
    }


class Commands:
    """Ordered registry of declared parameters plus the parse entry point.

    Parameters
    ----------
    auto_show_help:
        When ``True`` (default), failed parses carry the generated help
        text in :attr:`ParseOutcome.help_text` so the caller can print
        it next to the error.

    Examples
    --------
    >>> commands = Commands().add_param(ParameterSpec("width", "int", default=100))
    >>> commands.parse(["--width", "640"]).options["width"]
    640
    """

    def __init__(self, auto_show_help: bool = True) -> None:
        self._auto_show_help: bool = auto_show_help
        self._params: list[ParameterSpec] = []
        self._options: OptionMap = {}
        self._args: list[str] = []
        self._lock = threading.Lock()
        self.add_param(HELP_PARAM)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def auto_show_help(self) -> bool:
        return self._auto_show_help

    @property
    def params(self) -> tuple[ParameterSpec, ...]:
        """Declared parameters in registration order."""
        return tuple(self._params)

    @property
    def options(self) -> OptionMap:
        """Resolved option values keyed by name and alias."""
        return self._options

    @property
    def args(self) -> list[str]:
        """Tokens from the last successful parse that matched no option."""
        return self._args

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_param(self, spec: ParameterSpec) -> Commands:
        """Register *spec* and seed its default.

        Returns the registry itself so declarations can be chained.

        Raises
        ------
        ConfigError
            If *spec* is an ``enum`` without choices, has an empty
            identifier, or reuses an identifier already registered.
        """
        self._validate_spec(spec)
        self._params.append(spec)
        if spec.default is not None:
            for key in spec.identifiers:
                self._options[key] = spec.default
        logger.debug("registered parameter %s (%s)", spec.name, spec.type.value)
        return self

    def _validate_spec(self, spec: ParameterSpec) -> None:
        if not spec.name:
            raise ConfigError("Parameter name must not be empty.")
        if spec.alias == "":
            raise ConfigError(
                f"Alias of parameter {spec.name!r} must not be empty.",
                hint="Omit the alias instead of passing an empty string.",
            )
        if spec.type is ParamType.ENUM and not spec.choices:
            raise ConfigError(
                f"Enum parameter {spec.name!r} must declare its permitted values.",
                hint="Pass a non-empty 'choices' sequence.",
            )
        if spec.alias == spec.name:
            raise ConfigError(f"Parameter {spec.name!r} uses its own name as alias.")

        taken = {
            identifier: existing.name
            for existing in self._params
            for identifier in existing.identifiers
        }
        for identifier in spec.identifiers:
            if identifier in taken:
                raise ConfigError(
                    f"Identifier {identifier!r} of parameter {spec.name!r} "
                    f"is already used by parameter {taken[identifier]!r}.",
                )

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def help_text(self) -> str:
        """Aligned help for every declared parameter."""
        return format_help(self._params)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str]) -> ParseOutcome:
        """Parse *argv* against the declared parameters.

        Parameters
        ----------
        argv:
            The argument vector without the program name, typically
            ``sys.argv[1:]``.

        Returns
        -------
        ParseOutcome
            ``SUCCESS`` or ``HELP_REQUESTED`` with the resolved options,
            or ``ERROR`` with the first :class:`ParseError` encountered.
        """
        with self._lock:
            try:
                options, args = self._build(argv)
                help_requested = options.get(HELP_PARAM.name) is True
                # --help short-circuits before required parameters are checked.
                if not help_requested:
                    self._check_required(options)
            except ParseError as exc:
                logger.debug("parse failed: %s", exc)
                return ParseOutcome(
                    status=ParseStatus.ERROR,
                    options=_snapshot(self._options),
                    args=list(self._args),
                    error=exc,
                    help_text=self.help_text() if self._auto_show_help else None,
                )

            self._options = options
            self._args = args

        if help_requested:
            logger.debug("help requested")
            return ParseOutcome(
                status=ParseStatus.HELP_REQUESTED,
                options=_snapshot(options),
                args=list(args),
                help_text=self.help_text(),
            )
        return ParseOutcome(
            status=ParseStatus.SUCCESS, options=_snapshot(options), args=list(args),
        )

    def _build(self, argv: Sequence[str]) -> tuple[OptionMap, list[str]]:
        """Tokenize, coerce and merge over a copy of the seeded defaults."""
        tokenized = tokenize(argv, self._params)
        options = self._seeded_defaults()
        for match in tokenized.matches:
            parsed = coerce(match)
            if parsed is None:
                continue
            if parsed.alias:
                options[parsed.alias] = parsed.value
            options[parsed.name] = parsed.value
        return options, list(tokenized.positionals)

    def _seeded_defaults(self) -> OptionMap:
        defaults: OptionMap = {}
        for spec in self._params:
            if spec.default is not None:
                for key in spec.identifiers:
                    defaults[key] = spec.default
        return defaults

    def _check_required(self, options: OptionMap) -> None:
        """Raise for the first parameter without default that is unset."""
        for spec in self._params:
            if not spec.required:
                continue
            if all(options.get(key) is None for key in spec.identifiers):
                raise MissingRequiredParameterError(
                    f"Missing required parameter {display_flag(spec.name)}.",
                    param_name=spec.name,
                )
