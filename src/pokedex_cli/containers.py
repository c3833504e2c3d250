"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from pokedex_cli.adapters.pokeapi_client import HttpxPokeApiClient, PokeApiClient
from pokedex_cli.config import Settings
from pokedex_cli.services.cache import ExpiringCache
from pokedex_cli.services.catalog import CatalogService
from pokedex_cli.services.commands import CommandDispatcher
from pokedex_cli.services.pokedex import PokedexService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    cache: ExpiringCache
    api_client: PokeApiClient
    catalog_service: CatalogService
    pokedex_service: PokedexService
    command_dispatcher: CommandDispatcher
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    cache = ExpiringCache(resolved_settings.cache_ttl_seconds)
    api_client = HttpxPokeApiClient.create(
        timeout_seconds=resolved_settings.http_timeout_seconds
    )
    catalog_service = CatalogService(
        client=api_client,
        cache=cache,
        base_url=resolved_settings.api_base_url.rstrip("/"),
        retry_attempts=resolved_settings.retry_attempts,
        retry_delay_seconds=resolved_settings.retry_delay_seconds,
    )
    pokedex_service = PokedexService()
    command_dispatcher = CommandDispatcher(
        catalog_service=catalog_service,
        pokedex_service=pokedex_service,
    )

    def close_resources() -> None:
        cache.stop()
        api_client.close()

    return AppContainer(
        settings=resolved_settings,
        cache=cache,
        api_client=api_client,
        catalog_service=catalog_service,
        pokedex_service=pokedex_service,
        command_dispatcher=command_dispatcher,
        close_resources=close_resources,
    )
