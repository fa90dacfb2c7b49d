"""HTTP client for the PokeAPI with a short-lived response cache."""

from __future__ import annotations

import json
import urllib.request
from typing import Any, Callable, TypeVar

from .cache import Cache
from .types import LocationArea, LocationAreaPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

Fetcher = Callable[[str, float], bytes]

T = TypeVar("T")


def _http_get(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, method="GET")
    with urllib.request.urlopen(request, timeout=timeout) as response:
        return response.read()


class PokeAPIClient:
    """Fetches location areas and pokemon, caching raw response bodies.

    ``fetch`` is called as ``fetch(url, timeout)`` and must return the
    response body; by default a plain HTTP GET is made.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        *,
        base_url: str = BASE_URL,
        fetch: Fetcher | None = None,
    ) -> None:
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self._fetch = fetch if fetch is not None else _http_get
        self._cache = Cache(cache_interval)

    def list_locations(self, page_url: str | None = None) -> LocationAreaPage:
        """Return a page of location areas; the first page if no URL is given."""
        url = page_url if page_url is not None else f"{self.base_url}/location-area"
        return self._get(url, LocationAreaPage.from_dict)

    def get_location_area(self, name: str) -> LocationArea:
        """Return the location area called ``name``."""
        return self._get(f"{self.base_url}/location-area/{name}", LocationArea.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the pokemon called ``name``."""
        return self._get(f"{self.base_url}/pokemon/{name}", Pokemon.from_dict)

    def close(self) -> None:
        """Release the cache and its background reaper."""
        self._cache.close()

    def __enter__(self) -> PokeAPIClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _get(self, url: str, parse: Callable[[Any], T]) -> T:
        cached = self._cache.get(url)
        if cached is not None:
            return parse(json.loads(cached))
        body = self._fetch(url, self.timeout)
        result = parse(json.loads(body))
        self._cache.add(url, body)
        return result