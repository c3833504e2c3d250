"""Catalog service browsing PokeAPI through the response cache."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from pokedex_cli.adapters.pokeapi_client import PokeApiClient
from pokedex_cli.adapters.pokeapi_models import (
    LocationAreaDetail,
    LocationAreaList,
    PokemonPayload,
)
from pokedex_cli.domain.catalog import LocationAreaPage, PokemonDetails, PokemonStat
from pokedex_cli.domain.errors import CatalogError, NotFoundError
from pokedex_cli.services.cache import Cache

_HTTP_NOT_FOUND = 404
_HTTP_SERVER_ERROR = 500

_logger = logging.getLogger(__name__)

_PayloadT = TypeVar("_PayloadT", bound=BaseModel)


@dataclass
class CatalogService:
    """Service for catalog lookups backed by the response cache.

    Every resource is cached under its full request URL. Bodies are stored
    only after they were fetched and decoded successfully.
    """

    client: PokeApiClient
    cache: Cache
    base_url: str = "https://pokeapi.co/api/v2"
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    _current_page: LocationAreaPage | None = field(
        default=None, init=False, repr=False
    )

    def next_location_areas(self) -> LocationAreaPage:
        """Advance the map cursor to the next page of location areas."""
        if self._current_page is None:
            url = f"{self.base_url}/location-area"
        elif self._current_page.next_url:
            url = self._current_page.next_url
        else:
            raise CatalogError("you're on the last page")
        return self._load_page(url)

    def previous_location_areas(self) -> LocationAreaPage:
        """Move the map cursor back one page."""
        if self._current_page is None or not self._current_page.previous_url:
            raise CatalogError("you're on the first page")
        return self._load_page(self._current_page.previous_url)

    def explore_area(self, area_name: str) -> list[str]:
        """Return the names of Pokemon encountered in a location area."""
        name = quote(area_name.strip().lower(), safe="")
        url = f"{self.base_url}/location-area/{name}"
        area = self._get_payload(
            url, LocationAreaDetail, missing=f"no such area '{area_name}'"
        )
        return [encounter.pokemon.name for encounter in area.pokemon_encounters]

    def get_pokemon(self, name: str) -> PokemonDetails:
        """Retrieve a Pokemon by name."""
        normalized = quote(name.strip().lower(), safe="")
        url = f"{self.base_url}/pokemon/{normalized}"
        payload = self._get_payload(
            url, PokemonPayload, missing=f"no such pokemon '{name}'"
        )
        return PokemonDetails(
            name=payload.name,
            height=payload.height,
            weight=payload.weight,
            base_experience=payload.base_experience,
            stats=tuple(
                PokemonStat(name=entry.stat.name, base_stat=entry.base_stat)
                for entry in payload.stats
            ),
            types=tuple(entry.type.name for entry in payload.types),
        )

    def _load_page(self, url: str) -> LocationAreaPage:
        payload = self._get_payload(url, LocationAreaList, missing="no such page")
        page = LocationAreaPage(
            names=tuple(result.name for result in payload.results),
            next_url=payload.next,
            previous_url=payload.previous,
            count=payload.count,
        )
        self._current_page = page
        return page

    def _get_payload(
        self, url: str, model: type[_PayloadT], *, missing: str
    ) -> _PayloadT:
        """Return a decoded payload, consulting the cache before the network."""
        body, hit = self.cache.get(url)
        if hit:
            _logger.debug("Cache hit: %s", url)
            try:
                return model.model_validate_json(body)
            except ValidationError as exc:
                raise CatalogError(f"can't decode cached response for {url}") from exc

        _logger.debug("Cache miss: %s", url)
        body = self._call_with_retry(
            lambda: self.client.fetch(url), url=url, missing=missing
        )
        try:
            payload = model.model_validate_json(body)
        except ValidationError as exc:
            raise CatalogError(f"can't decode response from {url}") from exc
        self.cache.set(url, body)
        return payload

    def _call_with_retry(
        self, func: Callable[[], bytes], *, url: str, missing: str
    ) -> bytes:
        """Call the API with a short retry on transport and server errors."""
        attempt = 0
        while True:
            try:
                return func()
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                if status_code == _HTTP_NOT_FOUND:
                    raise NotFoundError(missing) from exc
                if status_code < _HTTP_SERVER_ERROR:
                    raise CatalogError(f"call to {url} failed: {status_code}") from exc
                error: Exception = exc
            except httpx.HTTPError as exc:
                error = exc
            attempt += 1
            _logger.warning(
                "Fetch %s failed (attempt %s/%s): %s",
                url,
                attempt,
                self.retry_attempts + 1,
                error,
            )
            if attempt > self.retry_attempts:
                raise CatalogError(f"can't get {url}: {error}") from error
            time.sleep(self.retry_delay_seconds)
