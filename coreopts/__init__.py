"""
Coreopts CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .app import app
from .builder import CompiledOptions, OptionSetBuilder
from .exceptions import (
    CoreOptsError,
    DuplicateOptionError,
    OptionConfigError,
    UsageError,
)
from .help_text import HelpText, HelpTextBuilder
from .matches import Matches
from .outcome import EarlyExit, OutputStream, ParseOutcome
from .parser import Arity, OptionDescriptor
from .resolver import NameResolver
from .version import __version__

logger = logging.getLogger("coreopts")


__all__ = [
    "app",
    "Arity",
    "CompiledOptions",
    "CoreOptsError",
    "DuplicateOptionError",
    "EarlyExit",
    "HelpText",
    "HelpTextBuilder",
    "Matches",
    "NameResolver",
    "OptionConfigError",
    "OptionDescriptor",
    "OptionSetBuilder",
    "OutputStream",
    "ParseOutcome",
    "UsageError",
    "__version__",
]
