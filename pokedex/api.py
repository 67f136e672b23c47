"""Client for the location-area endpoints of the Pokémon web API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Protocol

import requests

LOCATION_AREA_API = "https://pokeapi.co/api/v2/location-area/"

_TIMEOUT = 30.0


class PokeAPIError(Exception):
    """Raised when a request to the API or decoding its answer fails."""


class CacheLike(Protocol):
    def add(self, key: str, val: bytes) -> None: ...

    def get(self, key: str) -> bytes | None: ...


@dataclass
class Config:
    """Paging state shared between commands, plus an optional response cache."""

    next: str = ""
    prev: str = ""
    cache: CacheLike | None = None


@dataclass(frozen=True)
class NamedResource:
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> NamedResource:
        data = data or {}
        return cls(name=data.get("name") or "", url=data.get("url") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class LocationArea:
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> LocationArea:
        data = data or {}
        return cls(name=data.get("name") or "", url=data.get("url") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url}


@dataclass
class LocationResponse:
    count: int = 0
    next: str = ""
    previous: str = ""
    results: list[LocationArea] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LocationResponse:
        return cls(
            count=data.get("count") or 0,
            next=data.get("next") or "",
            previous=data.get("previous") or "",
            results=[LocationArea.from_dict(r) for r in data.get("results") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "next": self.next,
            "previous": self.previous,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass
class PokemonEncounter:
    pokemon: NamedResource = field(default_factory=NamedResource)
    version_details: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PokemonEncounter:
        return cls(
            pokemon=NamedResource.from_dict(data.get("pokemon")),
            version_details=list(data.get("version_details") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"pokemon": self.pokemon.to_dict(), "version_details": self.version_details}


@dataclass
class ExplorationResponse:
    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: list[dict[str, Any]] = field(default_factory=list)
    encounter_method_rates: list[dict[str, Any]] = field(default_factory=list)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExplorationResponse:
        return cls(
            id=data.get("id") or 0,
            name=data.get("name") or "",
            game_index=data.get("game_index") or 0,
            location=NamedResource.from_dict(data.get("location")),
            names=list(data.get("names") or []),
            encounter_method_rates=list(data.get("encounter_method_rates") or []),
            pokemon_encounters=[
                PokemonEncounter.from_dict(e) for e in data.get("pokemon_encounters") or []
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "encounter_method_rates": self.encounter_method_rates,
            "game_index": self.game_index,
            "id": self.id,
            "location": self.location.to_dict(),
            "name": self.name,
            "names": self.names,
            "pokemon_encounters": [e.to_dict() for e in self.pokemon_encounters],
        }


def _load_cached(raw: bytes, what: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except ValueError as err:
        raise PokeAPIError(f"error unmarshalling cached {what}: {err}") from err
    if not isinstance(data, dict):
        raise PokeAPIError(f"error unmarshalling cached {what}: not a JSON object")
    return data


def _fetch(url: str) -> dict[str, Any]:
    try:
        res = requests.get(url, timeout=_TIMEOUT)
    except requests.RequestException as err:
        raise PokeAPIError(f"error requesting {url} - {err}") from err
    with res:
        try:
            data = res.json()
        except ValueError as err:
            raise PokeAPIError(f"error decoding {url} - {err}") from err
    if not isinstance(data, dict):
        raise PokeAPIError(f"error decoding {url} - not a JSON object")
    return data


def _store(config: Config, url: str, payload: dict[str, Any]) -> None:
    if config.cache is not None:
        config.cache.add(url, json.dumps(payload).encode("utf-8"))


def get_locations(config: Config, url: str) -> list[LocationArea]:
    """Fetch one page of location areas and update the paging state in ``config``."""
    if config.cache is not None:
        cached = config.cache.get(url)
        if cached is not None:
            locations = LocationResponse.from_dict(_load_cached(cached, "locations"))
            config.next = locations.next
            config.prev = locations.previous
            print("Using cached locations")
            return locations.results

    locations = LocationResponse.from_dict(_fetch(url))
    _store(config, url, locations.to_dict())
    config.next = locations.next
    config.prev = locations.previous
    return locations.results


def get_pokemon_in_area(config: Config, area: str) -> list[PokemonEncounter]:
    """Return the Pokémon encounters of the named location area."""
    url = f"{LOCATION_AREA_API}{area}"
    if config.cache is not None:
        cached = config.cache.get(url)
        if cached is not None:
            exploration = ExplorationResponse.from_dict(
                _load_cached(cached, "exploration response")
            )
            print("Using cached exploration response")
            return exploration.pokemon_encounters

    exploration = ExplorationResponse.from_dict(_fetch(url))
    _store(config, url, exploration.to_dict())
    return exploration.pokemon_encounters