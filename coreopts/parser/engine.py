# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `GrammarEngine`, the token walker that assigns raw
argument strings to declared options.

The engine knows nothing about aliases tables, help rendering or process
exit. It receives an ordered collection of `OptionDescriptor` objects, walks
an already-split argument vector, and returns a `RawMatches` table keyed by
canonical option keys. Help and version requests are raised as signals, user
mistakes as `UsageError`.

Token rules:
- `--` ends option processing; every later token is positional.
- `-` on its own is positional (the usual stdin placeholder).
- `--name` selects a long option, `--name=value` attaches a value inline.
- `-abc` bundles short options. The first value-taking option in a bundle
  takes the rest of the token as its value (`-ofile`, `-o=file`), or the
  next token when the bundle ends with it.
- Options with a required value take the next token as is, even when it
  starts with `-`. Options with an optional value never take a
  hyphen-prefixed value: `-c-x` reads as `-c -x`, and `--color=-x` is an
  error.
- An option not marked `multiple` may only be given once.

Example Usage:
    engine = GrammarEngine(
        [
            OptionDescriptor("v", "verbose"),
            OptionDescriptor("o", "output", arity=Arity.REQUIRED_ONE),
            OptionDescriptor(long_name="ARGS", positional=True, hidden=True),
        ]
    )
    raw = engine.parse(["-v", "-o", "out.txt", "in.txt"])

    # raw.occurrences == {'verbose': 1, 'output': 1}
    # raw.values == {'output': ['out.txt'], 'ARGS': ['in.txt']}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from coreopts.exceptions import DuplicateOptionError, OptionConfigError, UsageError
from coreopts.parser.arity import Arity
from coreopts.parser.descriptor import OptionDescriptor
from coreopts.signals import HelpSignal, VersionSignal


@dataclass
class RawMatches:
    """Presence and value table produced by one engine run."""

    occurrences: dict[str, int] = field(default_factory=dict)
    values: dict[str, list[str]] = field(default_factory=dict)


class GrammarEngine:
    """
    Walks an argument vector against a fixed set of option descriptors.

    Args:
        descriptors (Iterable[OptionDescriptor]): Options to accept, at most one positional.
        help_key (str | None): Canonical key that triggers `HelpSignal`.
        version_key (str | None): Canonical key that triggers `VersionSignal`.
    """

    def __init__(
        self,
        descriptors: Iterable[OptionDescriptor],
        help_key: str | None = None,
        version_key: str | None = None,
    ) -> None:
        self.help_key: str | None = help_key
        self.version_key: str | None = version_key
        self._descriptors: list[OptionDescriptor] = []
        self._short: dict[str, OptionDescriptor] = {}
        self._long: dict[str, OptionDescriptor] = {}
        self._keys: set[str] = set()
        self._positional: OptionDescriptor | None = None
        for descriptor in descriptors:
            self._register(descriptor)

    def _register(self, descriptor: OptionDescriptor) -> None:
        if descriptor.key in self._keys:
            raise DuplicateOptionError(
                f"Option key '{descriptor.key}' is already defined"
            )
        if descriptor.positional:
            if self._positional is not None:
                raise OptionConfigError(
                    f"Only one positional capture is supported, "
                    f"'{self._positional.key}' is already defined"
                )
            self._positional = descriptor
        for name in descriptor.short_names:
            if name in self._short:
                raise DuplicateOptionError(
                    f"Flag '-{name}' is already used by option '{self._short[name].key}'"
                )
        for name in descriptor.long_names:
            if name in self._long:
                raise DuplicateOptionError(
                    f"Flag '--{name}' is already used by option '{self._long[name].key}'"
                )
        for name in descriptor.short_names:
            self._short[name] = descriptor
        if not descriptor.positional:
            for name in descriptor.long_names:
                self._long[name] = descriptor
        self._keys.add(descriptor.key)
        self._descriptors.append(descriptor)

    @property
    def descriptors(self) -> tuple[OptionDescriptor, ...]:
        return tuple(self._descriptors)

    @property
    def positional(self) -> OptionDescriptor | None:
        return self._positional

    def get_descriptor(self, key: str) -> OptionDescriptor | None:
        """Return the descriptor registered under a canonical key, if any."""
        return next((d for d in self._descriptors if d.key == key), None)

    def _raise_unrecognized(self, token: str) -> None:
        suggestions = []
        prefix = token.partition("=")[0]
        if prefix.startswith("--") and len(prefix) > 2:
            suggestions = sorted(
                f"--{name}" for name in self._long if f"--{name}".startswith(prefix)
            )
        if suggestions:
            raise UsageError(
                f"Unrecognized option '{token}'. Did you mean one of: {', '.join(suggestions)}?"
            )
        if self.help_key is not None:
            help_spec = self.get_descriptor(self.help_key)
            if help_spec is not None and help_spec.flags:
                raise UsageError(
                    f"Unrecognized option '{token}'. "
                    f"Use {help_spec.flags[-1]} to see available options."
                )
        raise UsageError(f"Unrecognized option '{token}'.")

    def _record(
        self,
        spec: OptionDescriptor,
        flag: str,
        result: RawMatches,
        value: str | None = None,
    ) -> None:
        if spec.key == self.help_key:
            raise HelpSignal()
        if spec.key == self.version_key:
            raise VersionSignal()
        count = result.occurrences.get(spec.key, 0)
        if count and not spec.multiple:
            raise UsageError(
                f"Option '{flag}' was provided more than once, "
                "but cannot be used multiple times"
            )
        result.occurrences[spec.key] = count + 1
        if value is not None:
            result.values.setdefault(spec.key, []).append(value)

    def _consume_value(
        self,
        spec: OptionDescriptor,
        flag: str,
        args: Sequence[str],
        i: int,
        result: RawMatches,
    ) -> int:
        """Record `spec` and take its value from `args[i]` if the arity wants one."""
        if spec.arity is Arity.NONE:
            self._record(spec, flag, result)
            return i
        if spec.arity is Arity.OPTIONAL_ONE:
            if i < len(args) and not args[i].startswith("-"):
                self._record(spec, flag, result, args[i])
                return i + 1
            self._record(spec, flag, result)
            return i
        if i >= len(args):
            raise UsageError(f"Option '{flag}' requires a value <{spec.value_hint}>")
        self._record(spec, flag, result, args[i])
        return i + 1

    def _handle_long(
        self, token: str, args: Sequence[str], i: int, result: RawMatches
    ) -> int:
        name, separator, inline_value = token[2:].partition("=")
        spec = self._long.get(name)
        if spec is None:
            self._raise_unrecognized(token)
        assert spec is not None
        flag = f"--{name}"
        if separator:
            if not spec.arity.takes_value:
                raise UsageError(f"Option '{flag}' does not take a value")
            if spec.arity is Arity.OPTIONAL_ONE and inline_value.startswith("-"):
                raise UsageError(
                    f"Option '{flag}' does not accept a value starting with '-'"
                )
            self._record(spec, flag, result, inline_value)
            return i + 1
        return self._consume_value(spec, flag, args, i + 1, result)

    def _handle_short_bundle(
        self, token: str, args: Sequence[str], i: int, result: RawMatches
    ) -> int:
        position = 1
        while position < len(token):
            char = token[position]
            flag = f"-{char}"
            spec = self._short.get(char)
            if spec is None:
                self._raise_unrecognized(flag)
            assert spec is not None
            rest = token[position + 1 :]
            if spec.arity.takes_value:
                value = rest.removeprefix("=")
                if rest and spec.arity is Arity.OPTIONAL_ONE and value.startswith("-"):
                    # "-c-x" reads as "-c -x"
                    self._record(spec, flag, result)
                    position = len(token) - len(value) + 1
                    continue
                if rest:
                    self._record(spec, flag, result, value)
                    return i + 1
                return self._consume_value(spec, flag, args, i + 1, result)
            self._record(spec, flag, result)
            position += 1
        return i + 1

    def _store_positionals(self, tokens: Sequence[str], result: RawMatches) -> None:
        if not tokens:
            return
        if self._positional is None:
            plural = "s" if len(tokens) > 1 else ""
            raise UsageError(
                f"Unexpected positional argument{plural}: {', '.join(tokens)}"
            )
        result.values.setdefault(self._positional.key, []).extend(tokens)

    def parse(self, args: Sequence[str] | None = None) -> RawMatches:
        """
        Walk `args` and assign every token to an option or to the positional capture.

        Args:
            args (Sequence[str]): The argument vector, program name excluded.

        Returns:
            RawMatches: Occurrence counts and captured values by canonical key.

        Raises:
            HelpSignal: The help option was encountered.
            VersionSignal: The version option was encountered.
            UsageError: The arguments do not fit the declared options.
        """
        args = list(args or [])
        result = RawMatches()
        i = 0
        while i < len(args):
            token = args[i]
            if token == "--":
                self._store_positionals(args[i + 1 :], result)
                break
            if token.startswith("--"):
                i = self._handle_long(token, args, i, result)
            elif token.startswith("-") and token != "-":
                i = self._handle_short_bundle(token, args, i, result)
            else:
                self._store_positionals([token], result)
                i += 1
        return result

    def __str__(self) -> str:
        hidden = sum(d.hidden for d in self._descriptors)
        return (
            f"GrammarEngine(options={len(self._descriptors)}, "
            f"short={len(self._short)}, long={len(self._long)}, hidden={hidden})"
        )

    def __repr__(self) -> str:
        return str(self)
