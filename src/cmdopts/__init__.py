"""cmdopts — declarative command-line option parsing.

Declare the expected parameters once; get a validated option map, the
residual positional arguments, and aligned help text from them.
"""

from cmdopts.core.commands import Commands
from cmdopts.core.models import (
    ParameterSpec,
    ParamType,
    ParsedOption,
    ParseOutcome,
    ParseStatus,
)
from cmdopts.exceptions import (
    CmdOptsError,
    ConfigError,
    HelpRequested,
    MissingRequiredParameterError,
    ParseError,
    ValidationError,
)
from cmdopts.version import __version__

__all__: list[str] = [
    "CmdOptsError",
    "Commands",
    "ConfigError",
    "HelpRequested",
    "MissingRequiredParameterError",
    "ParameterSpec",
    "ParamType",
    "ParseError",
    "ParseOutcome",
    "ParseStatus",
    "ParsedOption",
    "ValidationError",
    "__version__",
]
