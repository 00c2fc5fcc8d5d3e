# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
One-call construction of an `OptionSetBuilder` for a command-line program.

`app()` fills the program name from how the program was invoked and the
version from the installed distribution of that program, so a typical
utility only states its usage syntax and help text:

    matches = (
        app("[OPTION]... [FILE]...", "Concatenate FILE(s) to standard output.", "")
        .flag("n", "number", "Number all output lines.")
        .parse()
    )
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version

from coreopts.builder import OptionSetBuilder
from coreopts.help_text import HelpTextBuilder
from coreopts.logger import logger
from coreopts.utils import get_program_name


def get_installed_version(name: str) -> str | None:
    """Return the version of the installed distribution called `name`, if any."""
    try:
        return distribution_version(name)
    except PackageNotFoundError:
        logger.debug("No installed distribution named '%s'", name)
        return None


def app(
    syntax: str,
    summary: str,
    long_help: str,
    *,
    name: str | None = None,
    version: str | None = None,
) -> OptionSetBuilder:
    """
    Create an `OptionSetBuilder` with program metadata filled in.

    Args:
        syntax (str): Usage syntax after the program name.
        summary (str): Short description shown under the usage line.
        long_help (str): Extended help shown after the options.
        name (str | None): Program name; defaults to the invoked program name.
        version (str | None): Version string. When None, the version of the
            installed distribution named after the program is used; without
            one, `--version` is not offered. Pass "" to never offer it.
    """
    name = name or get_program_name()
    if version is None:
        version = get_installed_version(name)
    builder = HelpTextBuilder(name)
    if version:
        builder.version(version)
    if syntax:
        builder.syntax(syntax)
    if summary:
        builder.summary(summary)
    if long_help:
        builder.long_help(long_help)
    return OptionSetBuilder(builder.build())
