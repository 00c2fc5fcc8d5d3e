# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Program metadata used for help and version output.

`HelpText` is supplied once when an option set is built and never changes
afterwards. `HelpTextBuilder` assembles it step by step:

    help_text = (
        HelpTextBuilder("wc")
        .version("0.1.0")
        .syntax("[OPTION]... [FILE]...")
        .summary("Print newline, word, and byte counts for each FILE.")
        .long_help("With no FILE, or when FILE is -, read standard input.")
        .build()
    )
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HelpText:
    """
    Immutable program metadata.

    Attributes:
        name (str): Program name, used as the prefix of error messages.
        version (str | None): Version string; enables `--version` when set.
        syntax (str | None): Full usage line, program name included.
        summary (str | None): One-paragraph description shown under the usage line.
        long_help (str | None): Extended text shown after the option list.
    """

    name: str
    version: str | None = None
    syntax: str | None = None
    summary: str | None = None
    long_help: str | None = None


class HelpTextBuilder:
    """Chaining builder for `HelpText`."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        self._version: str | None = None
        self._syntax: str | None = None
        self._summary: str | None = None
        self._long_help: str | None = None

    def version(self, version: str) -> HelpTextBuilder:
        self._version = version
        return self

    def syntax(self, syntax: str) -> HelpTextBuilder:
        """Set the usage line; the program name is prepended."""
        self._syntax = f"{self.name} {syntax}"
        return self

    def summary(self, summary: str) -> HelpTextBuilder:
        self._summary = summary
        return self

    def long_help(self, long_help: str) -> HelpTextBuilder:
        self._long_help = long_help
        return self

    def build(self) -> HelpText:
        return HelpText(
            name=self.name,
            version=self._version,
            syntax=self._syntax,
            summary=self._summary,
            long_help=self._long_help,
        )
