# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity`, an enum describing how many values an option captures.

Supports alias coercion for config-friendly values, so option declarations
loaded from YAML or TOML can spell the arity the way they read best.

Example:
    Arity("none")     → Arity.NONE
    Arity("flag")     → Arity.NONE (via alias)
    Arity("multi")    → Arity.REPEATED (via alias)
"""
from __future__ import annotations

from enum import Enum


class Arity(Enum):
    """
    Number of values an option may capture.

    Members:
        NONE: Presence only, the option never takes a value.
        OPTIONAL_ONE: The option may carry one value, or none at all.
        REQUIRED_ONE: The option must be followed by exactly one value.
        REPEATED: One value per occurrence, all occurrences retained in order.

    Aliases:
        - "flag" → "none"
        - "optional" → "optional_one"
        - "required" → "required_one"
        - "multi" → "repeated"
    """

    NONE = "none"
    OPTIONAL_ONE = "optional_one"
    REQUIRED_ONE = "required_one"
    REPEATED = "repeated"

    @property
    def takes_value(self) -> bool:
        """True if the option can capture a value at all."""
        return self is not Arity.NONE

    @classmethod
    def choices(cls) -> list[Arity]:
        """Return a list of all arities."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "flag": "none",
            "optional": "optional_one",
            "required": "required_one",
            "multi": "repeated",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
