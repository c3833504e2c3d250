"""Pydantic models for PokeAPI response payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NamedResource(_Payload):
    """Reference to another API resource."""

    name: str
    url: str


class LocationAreaList(_Payload):
    """Paginated list of location areas."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = []


class EncounterDetail(_Payload):
    """Conditions under which a Pokemon can be encountered."""

    chance: int | None = None
    min_level: int | None = None
    max_level: int | None = None
    condition_values: list[Any] | None = None
    method: NamedResource | None = None


class EncounterVersionDetail(_Payload):
    """Encounter details for a single game version."""

    max_chance: int | None = None
    version: NamedResource | None = None
    encounter_details: list[EncounterDetail] = []


class PokemonEncounter(_Payload):
    """A Pokemon found in a location area."""

    pokemon: NamedResource
    version_details: list[EncounterVersionDetail] = []


class LocationAreaDetail(_Payload):
    """Single location area with its encounters."""

    id: int | None = None
    name: str
    pokemon_encounters: list[PokemonEncounter] = []


class PokemonStatPayload(_Payload):
    """Base stat entry of a Pokemon."""

    base_stat: int
    effort: int | None = None
    stat: NamedResource


class PokemonTypePayload(_Payload):
    """Type slot of a Pokemon."""

    slot: int | None = None
    type: NamedResource


class PokemonPayload(_Payload):
    """Pokemon resource."""

    id: int | None = None
    name: str
    base_experience: int | None = None
    height: int = 0
    weight: int = 0
    stats: list[PokemonStatPayload] = []
    types: list[PokemonTypePayload] = []
