"""Shared test fixtures."""

import json
import random
from collections.abc import Iterator
from dataclasses import dataclass, field

import httpx
import pytest

from pokedex_cli.adapters.pokeapi_client import PokeApiClient
from pokedex_cli.config import Settings
from pokedex_cli.containers import AppContainer
from pokedex_cli.services.cache import ExpiringCache
from pokedex_cli.services.catalog import CatalogService
from pokedex_cli.services.commands import CommandDispatcher
from pokedex_cli.services.pokedex import PokedexService

BASE_URL = "https://pokeapi.test/api/v2"

FIRST_PAGE = {
    "count": 4,
    "next": f"{BASE_URL}/location-area?offset=2&limit=2",
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": f"{BASE_URL}/location-area/1/"},
        {"name": "eterna-city-area", "url": f"{BASE_URL}/location-area/2/"},
    ],
}

SECOND_PAGE = {
    "count": 4,
    "next": None,
    "previous": f"{BASE_URL}/location-area?offset=0&limit=2",
    "results": [
        {"name": "pastoria-city-area", "url": f"{BASE_URL}/location-area/3/"},
        {"name": "sunyshore-city-area", "url": f"{BASE_URL}/location-area/4/"},
    ],
}

CANALAVE_AREA = {
    "id": 1,
    "name": "canalave-city-area",
    "game_index": 1,
    "pokemon_encounters": [
        {
            "pokemon": {"name": "tentacool", "url": f"{BASE_URL}/pokemon/72/"},
            "version_details": [
                {
                    "max_chance": 60,
                    "version": {"name": "diamond", "url": f"{BASE_URL}/version/12/"},
                    "encounter_details": [
                        {
                            "chance": 60,
                            "condition_values": [],
                            "min_level": 20,
                            "max_level": 30,
                            "method": {"name": "surf", "url": f"{BASE_URL}/m/5/"},
                        }
                    ],
                }
            ],
        },
        {"pokemon": {"name": "staryu", "url": f"{BASE_URL}/pokemon/120/"}},
    ],
}

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u"}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": "u"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
}


def default_responses() -> dict[str, bytes]:
    return {
        f"{BASE_URL}/location-area": json.dumps(FIRST_PAGE).encode(),
        f"{BASE_URL}/location-area?offset=2&limit=2": json.dumps(SECOND_PAGE).encode(),
        f"{BASE_URL}/location-area?offset=0&limit=2": json.dumps(FIRST_PAGE).encode(),
        f"{BASE_URL}/location-area/canalave-city-area": json.dumps(
            CANALAVE_AREA
        ).encode(),
        f"{BASE_URL}/pokemon/pikachu": json.dumps(PIKACHU).encode(),
    }


def http_error(url: str, status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"HTTP {status_code}", request=request, response=response
    )


@dataclass
class CountingPokeApiClient(PokeApiClient):
    """Fake API client serving canned bodies and counting calls per URL."""

    responses: dict[str, bytes] = field(default_factory=default_responses)
    failures: dict[str, list[Exception]] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def fetch(self, url: str) -> bytes:
        self.calls.append(url)
        pending = self.failures.get(url)
        if pending:
            raise pending.pop(0)
        if url not in self.responses:
            raise http_error(url, 404)
        return self.responses[url]

    def close(self) -> None:
        return None


class FixedRandom(random.Random):
    """Random source that always returns the same roll."""

    def __init__(self, roll: float) -> None:
        super().__init__()
        self.roll = roll

    def random(self) -> float:
        return self.roll


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base_url=BASE_URL,
        cache_ttl_seconds=60,
        retry_attempts=1,
        retry_delay_seconds=0,
    )


@pytest.fixture
def cache() -> Iterator[ExpiringCache]:
    cache = ExpiringCache(ttl_seconds=60)
    yield cache
    cache.stop()


@pytest.fixture
def api_client() -> CountingPokeApiClient:
    return CountingPokeApiClient()


@pytest.fixture
def catalog_service(
    api_client: CountingPokeApiClient, cache: ExpiringCache
) -> CatalogService:
    return CatalogService(
        client=api_client,
        cache=cache,
        base_url=BASE_URL,
        retry_attempts=1,
        retry_delay_seconds=0,
    )


@pytest.fixture
def pokedex_service() -> PokedexService:
    return PokedexService(rng=FixedRandom(0.0))


@pytest.fixture
def container(
    settings: Settings,
    cache: ExpiringCache,
    api_client: CountingPokeApiClient,
    catalog_service: CatalogService,
    pokedex_service: PokedexService,
) -> AppContainer:
    command_dispatcher = CommandDispatcher(
        catalog_service=catalog_service,
        pokedex_service=pokedex_service,
    )

    def close_resources() -> None:
        cache.stop()

    return AppContainer(
        settings=settings,
        cache=cache,
        api_client=api_client,
        catalog_service=catalog_service,
        pokedex_service=pokedex_service,
        command_dispatcher=command_dispatcher,
        close_resources=close_resources,
    )
