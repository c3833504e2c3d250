"""Catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocationAreaPage:
    """One page of location area names with its pagination links."""

    names: tuple[str, ...]
    next_url: str | None
    previous_url: str | None
    count: int


@dataclass(frozen=True)
class PokemonStat:
    """A single base stat of a Pokemon."""

    name: str
    base_stat: int


@dataclass(frozen=True)
class PokemonDetails:
    """Pokemon details shown by the inspect command."""

    name: str
    height: int
    weight: int
    base_experience: int | None
    stats: tuple[PokemonStat, ...]
    types: tuple[str, ...]
