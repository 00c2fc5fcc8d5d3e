# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionSetBuilder`, the declaration surface of coreopts,
and `CompiledOptions`, the immutable configuration it produces.

Options are declared in a getopts-like style, one method per kind of option,
and every method returns the builder so declarations chain:

    options = (
        OptionSetBuilder(help_text)
        .flag("v", "verbose", "Print more output.")
        .flag_repeatable("d", "debug", "Increase debug level.")
        .flag_with_optional_value("c", "color", "Colorize output.", "WHEN")
        .option("o", "output", "Write output to FILE.", "FILE")
        .option_multi("I", "include", "Add DIR to the search path.", "DIR")
        .flag_aliases(["q", "s"], ["quiet", "silent"], "Print nothing.")
        .compile()
    )
    matches = options.parse()

Declaration is a separate phase from parsing. `compile()` freezes the
descriptors, adds the implicit `help`/`version` flags and the hidden capture
for free arguments, and builds the alias table once. The compiled options can
then parse any number of argument vectors.

Parse outcomes:
- `try_parse()` returns a `Matches`, or an `EarlyExit` for help, version and
  usage errors.
- `parse()` returns a `Matches`, or writes the early-exit text and raises
  `SystemExit` with its code (0 for help/version, 1 for usage errors).

Declaration mistakes (no name, invalid name, a name used twice) raise
`OptionConfigError` immediately and leave the builder unchanged.
"""
from __future__ import annotations

import sys
from typing import Sequence

from coreopts.exceptions import DuplicateOptionError, UsageError
from coreopts.help_text import HelpText
from coreopts.logger import logger
from coreopts.matches import Matches
from coreopts.outcome import EarlyExit, OutputStream, ParseOutcome
from coreopts.parser.arity import Arity
from coreopts.parser.descriptor import OptionDescriptor
from coreopts.parser.engine import GrammarEngine
from coreopts.parser.help import render_help, render_version
from coreopts.resolver import NameResolver
from coreopts.signals import HelpSignal, VersionSignal

FREE_ARGS_KEY = "ARGS"


class CompiledOptions:
    """
    Immutable, parse-ready option configuration.

    Holds the ordered descriptors (implicit flags first, free-argument capture
    last), the shared `NameResolver`, and the `GrammarEngine` built from them.
    """

    def __init__(
        self,
        help_text: HelpText,
        descriptors: Sequence[OptionDescriptor],
        help_key: str | None = None,
        version_key: str | None = None,
        free_key: str | None = FREE_ARGS_KEY,
    ) -> None:
        self._help_text: HelpText = help_text
        self._descriptors: tuple[OptionDescriptor, ...] = tuple(descriptors)
        self._free_key: str | None = free_key
        self._resolver: NameResolver = NameResolver.from_descriptors(self._descriptors)
        self._engine: GrammarEngine = GrammarEngine(
            self._descriptors, help_key=help_key, version_key=version_key
        )

    @property
    def help_text(self) -> HelpText:
        return self._help_text

    @property
    def descriptors(self) -> tuple[OptionDescriptor, ...]:
        return self._descriptors

    @property
    def resolver(self) -> NameResolver:
        return self._resolver

    @property
    def engine(self) -> GrammarEngine:
        return self._engine

    def render_help(self) -> str:
        return render_help(self._help_text, self._descriptors)

    def render_version(self) -> str:
        return render_version(self._help_text)

    def try_parse(self, args: Sequence[str] | None = None) -> ParseOutcome:
        """
        Parse `args` and return a `Matches`, or an `EarlyExit` describing
        the help, version or usage-error output.

        Args:
            args (Sequence[str] | None): Argument vector without the program
                name. Defaults to `sys.argv[1:]`.
        """
        if args is None:
            args = sys.argv[1:]
        name = self._help_text.name
        try:
            raw = self._engine.parse(args)
        except HelpSignal:
            logger.debug("[%s] Help requested", name)
            return EarlyExit(0, self.render_help(), OutputStream.STDOUT)
        except VersionSignal:
            logger.debug("[%s] Version requested", name)
            return EarlyExit(0, self.render_version(), OutputStream.STDOUT)
        except UsageError as error:
            logger.debug("[%s] Usage error: %s", name, error)
            return EarlyExit(1, f"{name}: {error}\n", OutputStream.STDERR)

        matches = Matches.from_raw(raw, self._resolver, self._free_key)
        logger.debug(
            "[%s] Parsed %d option(s), %d free argument(s)",
            name,
            len(matches.occurrences),
            len(matches.free),
        )
        return matches

    def parse(self, args: Sequence[str] | None = None) -> Matches:
        """
        Parse `args` into a `Matches`.

        Help and version output go to stdout and exit with status 0. Usage
        errors are reported as `<program>: <message>` on stderr and exit with
        status 1.
        """
        outcome = self.try_parse(args)
        if isinstance(outcome, EarlyExit):
            outcome.exit()
        return outcome

    def __str__(self) -> str:
        return (
            f"CompiledOptions(name={self._help_text.name!r}, "
            f"options={len(self._descriptors)}, names={len(self._resolver)})"
        )

    def __repr__(self) -> str:
        return str(self)


class OptionSetBuilder:
    """
    Accumulates option declarations for one program.

    Args:
        help_text (HelpText): Program metadata for help, version and error output.
    """

    def __init__(self, help_text: HelpText) -> None:
        self.help_text: HelpText = help_text
        self._descriptors: list[OptionDescriptor] = []
        self._names: dict[str, str] = {}
        self._keys: set[str] = {FREE_ARGS_KEY}

    @property
    def descriptors(self) -> tuple[OptionDescriptor, ...]:
        """Caller-declared descriptors, in declaration order."""
        return tuple(self._descriptors)

    def add(self, descriptor: OptionDescriptor) -> OptionSetBuilder:
        """
        Register a prepared descriptor.

        Raises:
            DuplicateOptionError: If its key or any of its names is already taken.
        """
        if descriptor.key in self._keys:
            raise DuplicateOptionError(f"Option '{descriptor.key}' is already defined")
        for name in descriptor.names:
            if name in self._names:
                raise DuplicateOptionError(
                    f"Name '{name}' is already used by option '{self._names[name]}'"
                )
        if len(set(descriptor.names)) != len(descriptor.names):
            raise DuplicateOptionError(
                f"Option '{descriptor.key}' lists the same name more than once"
            )

        self._descriptors.append(descriptor)
        self._keys.add(descriptor.key)
        for name in descriptor.names:
            self._names[name] = descriptor.key
        logger.debug("Registered option %s", descriptor)
        return self

    def flag(self, short_name: str, long_name: str, description: str) -> OptionSetBuilder:
        """Declare a presence-only flag."""
        return self.add(
            OptionDescriptor(
                short_name=short_name, long_name=long_name, description=description
            )
        )

    def flag_with_optional_value(
        self, short_name: str, long_name: str, description: str, hint: str
    ) -> OptionSetBuilder:
        """Declare a flag that may carry one value, never a hyphen-prefixed one."""
        return self.add(
            OptionDescriptor(
                short_name=short_name,
                long_name=long_name,
                description=description,
                value_hint=hint,
                arity=Arity.OPTIONAL_ONE,
            )
        )

    def flag_repeatable(
        self, short_name: str, long_name: str, description: str
    ) -> OptionSetBuilder:
        """Declare a presence-only flag that may be given several times."""
        return self.add(
            OptionDescriptor(
                short_name=short_name,
                long_name=long_name,
                description=description,
                multiple=True,
            )
        )

    def option(
        self, short_name: str, long_name: str, description: str, hint: str
    ) -> OptionSetBuilder:
        """Declare an option that requires exactly one value."""
        return self.add(
            OptionDescriptor(
                short_name=short_name,
                long_name=long_name,
                description=description,
                value_hint=hint,
                arity=Arity.REQUIRED_ONE,
            )
        )

    def option_multi(
        self, short_name: str, long_name: str, description: str, hint: str
    ) -> OptionSetBuilder:
        """Declare an option taking one value per occurrence, all retained."""
        return self.add(
            OptionDescriptor(
                short_name=short_name,
                long_name=long_name,
                description=description,
                value_hint=hint,
                arity=Arity.REPEATED,
            )
        )

    def flag_aliases(
        self,
        short_names: Sequence[str],
        long_names: Sequence[str],
        description: str,
    ) -> OptionSetBuilder:
        """
        Declare one flag with several names.

        The first name of each list is the primary short/long name; the
        remaining names are aliases resolving to the same option.
        """
        short_names = list(short_names)
        long_names = list(long_names)
        return self.add(
            OptionDescriptor(
                short_name=short_names[0] if short_names else "",
                long_name=long_names[0] if long_names else "",
                description=description,
                short_aliases=tuple(short_names[1:]),
                long_aliases=tuple(long_names[1:]),
            )
        )

    def _implicit_flag(
        self, short_name: str, long_name: str, description: str
    ) -> OptionDescriptor | None:
        """Build an implicit flag from whichever of its names the caller left free."""
        short_name = short_name if short_name not in self._names else ""
        long_name = long_name if long_name not in self._names else ""
        if not short_name and not long_name:
            return None
        return OptionDescriptor(
            short_name=short_name, long_name=long_name, description=description
        )

    def compile(self) -> CompiledOptions:
        """Freeze the declarations into a `CompiledOptions`."""
        help_descriptor = self._implicit_flag("h", "help", "Show this help message.")
        version_descriptor = None
        if self.help_text.version:
            version_descriptor = self._implicit_flag(
                "", "version", "Show version information."
            )
        free_descriptor = OptionDescriptor(
            long_name=FREE_ARGS_KEY,
            arity=Arity.REPEATED,
            positional=True,
            hidden=True,
        )
        implicit = [d for d in (help_descriptor, version_descriptor) if d is not None]
        compiled = CompiledOptions(
            self.help_text,
            implicit + self._descriptors + [free_descriptor],
            help_key=help_descriptor.key if help_descriptor else None,
            version_key=version_descriptor.key if version_descriptor else None,
            free_key=free_descriptor.key,
        )
        logger.debug("Compiled %s", compiled)
        return compiled

    def try_parse(self, args: Sequence[str] | None = None) -> ParseOutcome:
        """Compile and parse in one step, returning `Matches` or `EarlyExit`."""
        return self.compile().try_parse(args)

    def parse(self, args: Sequence[str] | None = None) -> Matches:
        """Compile and parse in one step, exiting on help, version or usage errors."""
        return self.compile().parse(args)
