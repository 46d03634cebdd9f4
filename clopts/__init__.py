"""
clopts

Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .clopts import ClOpts, Tiers, parse_or_exit
from .exceptions import (
    BindingError,
    CastError,
    ClOptsError,
    ConfigFileError,
    NameResolutionError,
    RegistrationError,
    ValidationError,
)
from .option import OptionSpec, ShortAlias, ShortState
from .signals import HelpSignal, VersionSignal
from .tokens import TokenizedInput, tokenize
from .type_caster import OptionType, TypeCaster
from .version import __version__

logger = logging.getLogger("clopts")


__all__ = [
    "ClOpts",
    "Tiers",
    "parse_or_exit",
    "ClOptsError",
    "RegistrationError",
    "CastError",
    "BindingError",
    "ValidationError",
    "NameResolutionError",
    "ConfigFileError",
    "HelpSignal",
    "VersionSignal",
    "OptionSpec",
    "OptionType",
    "ShortAlias",
    "ShortState",
    "TokenizedInput",
    "TypeCaster",
    "tokenize",
    "__version__",
]
