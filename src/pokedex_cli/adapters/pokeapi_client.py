"""PokeAPI HTTP client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class PokeApiClient(Protocol):
    """Interface for raw PokeAPI retrieval."""

    def fetch(self, url: str) -> bytes:
        """Return the raw response body for a URL."""


@dataclass
class HttpxPokeApiClient(PokeApiClient):
    """HTTPX-backed PokeAPI client."""

    http_client: httpx.Client
    timeout_seconds: float = 10

    @classmethod
    def create(cls, timeout_seconds: float = 10) -> "HttpxPokeApiClient":
        """Create a client with a managed httpx session."""
        return cls(http_client=httpx.Client(), timeout_seconds=timeout_seconds)

    def fetch(self, url: str) -> bytes:
        """GET a URL and return its body, raising on non-success status."""
        response = self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.content

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
