"""Core type definitions for pi-search."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterator, Literal, Union

MatchType = Literal["key", "aliases", "description", "similar"]


@dataclass(frozen=True)
class SingleAlias:
    value: str

    def __iter__(self) -> Iterator[str]:
        yield self.value


@dataclass(frozen=True)
class ManyAliases:
    values: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)


Aliases = Union[SingleAlias, ManyAliases]

NO_ALIASES = ManyAliases()


def aliases_from_value(value: object) -> Aliases:
    """Convert a loosely typed aliases value (string, list or None) into Aliases.

    An empty string, or anything that is neither a string nor a sequence of
    strings, is treated as having no aliases.
    """
    if isinstance(value, (SingleAlias, ManyAliases)):
        return value
    if isinstance(value, str):
        return SingleAlias(value) if value else NO_ALIASES
    if isinstance(value, Sequence):
        return ManyAliases(tuple(v for v in value if isinstance(v, str)))
    return NO_ALIASES


@dataclass(frozen=True)
class MatchResult:
    score: int
    type: MatchType
    indices: tuple[int, ...] | None
    distance: int | None = None


@dataclass(frozen=True)
class Candidate:
    key: str
    description: str = ""
    aliases: Aliases = field(default=NO_ALIASES)
    url: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.aliases, (SingleAlias, ManyAliases)):
            object.__setattr__(self, "aliases", aliases_from_value(self.aliases))
