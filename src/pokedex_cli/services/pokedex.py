"""Pokedex of caught Pokemon."""

import random
from dataclasses import dataclass, field

from pokedex_cli.domain.catalog import PokemonDetails

_MAX_BASE_EXPERIENCE = 400
_MIN_CATCH_CHANCE = 0.1


@dataclass
class PokedexService:
    """Catch attempts and the collection of caught Pokemon."""

    rng: random.Random = field(default_factory=random.Random)
    caught: dict[str, PokemonDetails] = field(default_factory=dict)

    def catch(self, pokemon: PokemonDetails) -> bool:
        """Attempt to catch a Pokemon, recording it on success."""
        if self.rng.random() >= catch_chance(pokemon):
            return False
        self.caught[pokemon.name] = pokemon
        return True

    def get(self, name: str) -> PokemonDetails | None:
        """Return a caught Pokemon by name, if present."""
        return self.caught.get(name.strip().lower())

    def list_names(self) -> list[str]:
        """Return the names of caught Pokemon in alphabetical order."""
        return sorted(self.caught)


def catch_chance(pokemon: PokemonDetails) -> float:
    """Probability of catching a Pokemon; stronger ones are harder."""
    if pokemon.base_experience is None:
        return 1.0
    chance = 1 - pokemon.base_experience / _MAX_BASE_EXPERIENCE
    return max(_MIN_CATCH_CHANCE, min(1.0, chance))
