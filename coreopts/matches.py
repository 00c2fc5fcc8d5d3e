# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Matches`, the immutable result of a successful parse.

A `Matches` owns its own copy of the captured strings and shares the
read-only `NameResolver` of the configuration that produced it. Every query
accepts a short name, a long name or an alias interchangeably.

Querying an option that was never declared is not an error: it reads as
absent, exactly like a declared option that was not supplied.

Example:
    matches = options.parse(["-v", "--output", "out.txt", "in.txt"])
    matches.is_present("v")          # True
    matches.is_present("verbose")    # True
    matches.value_of("o")            # 'out.txt'
    matches.free                     # ('in.txt',)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from coreopts.parser.engine import RawMatches
from coreopts.resolver import NameResolver


@dataclass(frozen=True)
class Matches:
    """
    Queryable snapshot of one parsed argument vector.

    Attributes:
        free (tuple[str, ...]): Positional arguments not claimed by any option,
            in command-line order.
    """

    free: tuple[str, ...] = ()
    occurrences: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )
    values: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )
    resolver: NameResolver = field(default_factory=NameResolver, repr=False)

    @classmethod
    def from_raw(
        cls,
        raw: RawMatches,
        resolver: NameResolver,
        free_key: str | None = None,
    ) -> Matches:
        """Copy an engine result into a `Matches`, splitting off the free arguments."""
        values = {key: tuple(captured) for key, captured in raw.values.items()}
        free = values.pop(free_key, ()) if free_key else ()
        return cls(
            free=free,
            occurrences=MappingProxyType(dict(raw.occurrences)),
            values=MappingProxyType(values),
            resolver=resolver,
        )

    def is_present(self, name: str) -> bool:
        """Return True if the option named `name` appeared on the command line."""
        return self.occurrences.get(self.resolver.resolve(name), 0) > 0

    def any_present(self, names: Iterable[str]) -> bool:
        """Return True if at least one of `names` is present."""
        return any(self.is_present(name) for name in names)

    def value_of(self, name: str) -> str | None:
        """Return the first value captured for `name`, or None."""
        captured = self.values.get(self.resolver.resolve(name))
        if not captured:
            return None
        return captured[0]

    def values_of(self, name: str) -> list[str]:
        """Return every value captured for `name` in command-line order."""
        return list(self.values.get(self.resolver.resolve(name), ()))
