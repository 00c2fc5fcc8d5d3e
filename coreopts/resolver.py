# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `NameResolver`, the alias table that maps every name an option answers
to back to that option's canonical key.

The table is built once from the compiled descriptors and is read-only from
then on, so it can be shared by every `Matches` produced from the same
configuration.

Short names, short aliases and long aliases all resolve to the owning
option's key. Any other name is returned unchanged: it is either already
canonical or was never declared, and both read as "absent" downstream.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from coreopts.exceptions import DuplicateOptionError
from coreopts.parser.descriptor import OptionDescriptor


class NameResolver:
    """Read-only mapping from option names to canonical keys."""

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self._table: Mapping[str, str] = MappingProxyType(dict(table or {}))

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[OptionDescriptor]) -> NameResolver:
        """
        Build the alias table for a set of descriptors.

        Raises:
            DuplicateOptionError: If two options claim the same name.
        """
        table: dict[str, str] = {}
        for descriptor in descriptors:
            if descriptor.positional:
                continue
            for name in descriptor.names:
                owner = table.get(name)
                if owner is not None and owner != descriptor.key:
                    raise DuplicateOptionError(
                        f"Name '{name}' is used by both '{owner}' and '{descriptor.key}'"
                    )
                table[name] = descriptor.key
        return cls(table)

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    def resolve(self, name: str) -> str:
        """Translate `name` to its canonical key, or return it unchanged."""
        return self._table.get(name, name)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"NameResolver({dict(self._table)!r})"
