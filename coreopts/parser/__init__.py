"""
Coreopts CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arity import Arity
from .descriptor import OptionDescriptor
from .engine import GrammarEngine, RawMatches
from .help import get_usage, render_help, render_version

__all__ = [
    "Arity",
    "OptionDescriptor",
    "GrammarEngine",
    "RawMatches",
    "get_usage",
    "render_help",
    "render_version",
]
