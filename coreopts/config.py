# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for coreopts option sets.

An option set can be declared in a YAML or TOML file instead of code:

    name: wc
    version: 0.1.0
    syntax: "[OPTION]... [FILE]..."
    summary: Print newline, word, and byte counts for each FILE.
    options:
      - short: l
        long: lines
        description: Print the newline counts.
      - short: o
        long: output
        kind: option
        hint: FILE
        description: Write counts to FILE.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from coreopts.builder import OptionSetBuilder
from coreopts.help_text import HelpTextBuilder
from coreopts.logger import logger

OPTION_KINDS = ("flag", "flag_optional", "flag_repeatable", "option", "multi")


class RawOption(BaseModel):
    """Raw option model for coreopts configuration."""

    short: str = ""
    long: str = ""
    description: str = ""
    hint: str = ""
    kind: str = "flag"
    short_aliases: list[str] = Field(default_factory=list)
    long_aliases: list[str] = Field(default_factory=list)

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in OPTION_KINDS:
            raise ValueError(
                f"Invalid option kind '{value}'. Must be one of: {', '.join(OPTION_KINDS)}"
            )
        return normalized

    @model_validator(mode="after")
    def validate_aliases(self) -> RawOption:
        if (self.short_aliases or self.long_aliases) and self.kind != "flag":
            raise ValueError("Aliases are only supported for options of kind 'flag'")
        return self

    @model_validator(mode="after")
    def validate_hint(self) -> RawOption:
        if self.hint and self.kind in ("flag", "flag_repeatable"):
            raise ValueError(
                f"A hint is only supported for value-taking options, not '{self.kind}'"
            )
        return self

    def register(self, builder: OptionSetBuilder) -> OptionSetBuilder:
        """Declare this option on `builder`."""
        if self.short_aliases or self.long_aliases:
            short_names = [self.short] if self.short else []
            long_names = [self.long] if self.long else []
            return builder.flag_aliases(
                short_names + self.short_aliases,
                long_names + self.long_aliases,
                self.description,
            )
        if self.kind == "flag":
            return builder.flag(self.short, self.long, self.description)
        if self.kind == "flag_optional":
            return builder.flag_with_optional_value(
                self.short, self.long, self.description, self.hint
            )
        if self.kind == "flag_repeatable":
            return builder.flag_repeatable(self.short, self.long, self.description)
        if self.kind == "option":
            return builder.option(self.short, self.long, self.description, self.hint)
        return builder.option_multi(self.short, self.long, self.description, self.hint)


class CoreOptsConfig(BaseModel):
    """Option set configuration model."""

    name: str
    version: str | None = None
    syntax: str | None = None
    summary: str | None = None
    long_help: str | None = None
    options: list[RawOption] = Field(default_factory=list)

    def to_builder(self) -> OptionSetBuilder:
        help_text = HelpTextBuilder(self.name)
        if self.version:
            help_text.version(self.version)
        if self.syntax:
            help_text.syntax(self.syntax)
        if self.summary:
            help_text.summary(self.summary)
        if self.long_help:
            help_text.long_help(self.long_help)
        builder = OptionSetBuilder(help_text.build())
        for option in self.options:
            option.register(builder)
        return builder


def loader(file_path: Path | str) -> OptionSetBuilder:
    """
    Load an option set from a YAML or TOML file.

    The file must contain a mapping with at least a `name` and, usually, a
    list of `options`. Each option entry needs a `short` or `long` name.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        OptionSetBuilder: A builder holding the declared options, ready to
        extend or compile.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported, the file cannot be parsed,
            or the content is not a mapping.
        pydantic.ValidationError: If an entry does not match the models.
        OptionConfigError: If an option declaration is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            try:
                raw_config: Any = yaml.safe_load(config_file)
            except yaml.YAMLError as error:
                raise ValueError(f"Invalid YAML in {path}: {error}") from error
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a program name "
            "and a list of options.\n"
            "Example:\n"
            "name: 'wc'\n"
            "options:\n"
            "  - short: 'l'\n"
            "    long: 'lines'\n"
            "    description: 'Print the newline counts.'"
        )

    config = CoreOptsConfig(**raw_config)
    logger.debug("Loaded %d option(s) from %s", len(config.options), path)
    return config.to_builder()
