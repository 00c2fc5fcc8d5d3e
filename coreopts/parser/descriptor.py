# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionDescriptor` dataclass, the immutable record of one declared
command-line option.

Each descriptor carries an optional short name (`-v`), an optional long name
(`--verbose`), display text, the value arity, and any alias names that resolve
to the same option. At least one of the short or long name must be set; a
descriptor without either is rejected when it is constructed.

Key Attributes:
- `short_name`: single character, or "" for no short form
- `long_name`: two or more characters, or "" for no long form
- `description`: help text, no effect on parsing
- `value_hint`: placeholder shown in help for value-taking options
- `arity`: `Arity` member describing how many values are captured
- `multiple`: whether the option may appear more than once
- `short_aliases` / `long_aliases`: extra names for the same option
- `positional` / `hidden`: used by the implicit free-argument capture

The canonical key of a descriptor is its long name if it has one, otherwise
its short name. Presence and values are stored under that key.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from coreopts.exceptions import OptionConfigError
from coreopts.parser.arity import Arity


def validate_short_name(name: str) -> None:
    """Raise `OptionConfigError` unless `name` is a usable short option name."""
    if not isinstance(name, str):
        raise OptionConfigError(f"Short name {name!r} must be a string")
    if len(name) != 1:
        raise OptionConfigError(f"Short name '{name}' must be a single character")
    if name == "-" or name.isspace():
        raise OptionConfigError(f"Short name '{name}' is not a valid option character")


def validate_long_name(name: str) -> None:
    """Raise `OptionConfigError` unless `name` is a usable long option name."""
    if not isinstance(name, str):
        raise OptionConfigError(f"Long name {name!r} must be a string")
    if len(name) < 2:
        raise OptionConfigError(
            f"Long name '{name}' must be at least 2 characters long"
        )
    if name.startswith("-"):
        raise OptionConfigError(f"Long name '{name}' must not start with '-'")
    if "=" in name or any(char.isspace() for char in name):
        raise OptionConfigError(
            f"Long name '{name}' must not contain '=' or whitespace"
        )


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Represents one declared command-line option.

    Attributes:
        short_name (str): Single-character short name, "" for none.
        long_name (str): Long name without leading dashes, "" for none.
        description (str): Help text for the option.
        value_hint (str): Value placeholder shown in help.
        arity (Arity): How many values the option captures.
        multiple (bool): True if the option may be given more than once.
        short_aliases (tuple[str, ...]): Extra short names for this option.
        long_aliases (tuple[str, ...]): Extra long names for this option.
        positional (bool): True for the free-argument capture.
        hidden (bool): True if the option is left out of help output.
    """

    short_name: str = ""
    long_name: str = ""
    description: str = ""
    value_hint: str = ""
    arity: Arity = Arity.NONE
    multiple: bool = False
    short_aliases: tuple[str, ...] = field(default_factory=tuple)
    long_aliases: tuple[str, ...] = field(default_factory=tuple)
    positional: bool = False
    hidden: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.arity, Arity):
            try:
                object.__setattr__(self, "arity", Arity(self.arity))
            except ValueError as error:
                raise OptionConfigError(str(error)) from error
        object.__setattr__(self, "short_aliases", tuple(self.short_aliases))
        object.__setattr__(self, "long_aliases", tuple(self.long_aliases))
        if self.arity is Arity.REPEATED:
            object.__setattr__(self, "multiple", True)

        if self.positional:
            if not self.long_name or self.short_name or self.has_aliases:
                raise OptionConfigError(
                    "A positional capture needs a long name and nothing else"
                )
            return

        if not self.short_name and not self.long_name:
            raise OptionConfigError("option has neither a short nor a long name")
        if self.short_name:
            validate_short_name(self.short_name)
        if self.long_name:
            validate_long_name(self.long_name)
        for alias in self.short_aliases:
            validate_short_name(alias)
        for alias in self.long_aliases:
            validate_long_name(alias)
        if self.arity is not Arity.NONE and not self.value_hint:
            object.__setattr__(self, "value_hint", self.key.upper())
        elif self.arity is Arity.NONE and self.value_hint:
            raise OptionConfigError(
                f"Option '{self.key}' takes no value and cannot have a value hint"
            )

    @property
    def key(self) -> str:
        """Canonical key: the long name if present, else the short name."""
        return self.long_name or self.short_name

    @property
    def has_aliases(self) -> bool:
        return bool(self.short_aliases or self.long_aliases)

    @property
    def short_names(self) -> tuple[str, ...]:
        """Every single-character name, primary first."""
        primary = (self.short_name,) if self.short_name else ()
        return primary + self.short_aliases

    @property
    def long_names(self) -> tuple[str, ...]:
        """Every long name, primary first."""
        primary = (self.long_name,) if self.long_name else ()
        return primary + self.long_aliases

    @property
    def names(self) -> tuple[str, ...]:
        """Every bare name this option answers to."""
        return self.short_names + self.long_names

    @property
    def flags(self) -> tuple[str, ...]:
        """Every command-line spelling of this option (`-s`, `--long`)."""
        if self.positional:
            return ()
        return tuple(f"-{name}" for name in self.short_names) + tuple(
            f"--{name}" for name in self.long_names
        )

    def get_value_text(self) -> str:
        """Get the value placeholder text for help output."""
        if self.arity is Arity.NONE:
            return ""
        if self.arity is Arity.OPTIONAL_ONE:
            return f"[{self.value_hint}]"
        if self.arity is Arity.REPEATED:
            return f"{self.value_hint}..."
        return self.value_hint

    def __str__(self) -> str:
        return (
            f"OptionDescriptor(key={self.key!r}, flags={self.flags}, "
            f"arity={self.arity}, multiple={self.multiple})"
        )
