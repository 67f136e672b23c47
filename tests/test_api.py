import pytest
import responses

from pokedex.api import (
    LOCATION_AREA_API,
    Config,
    ExplorationResponse,
    LocationArea,
    LocationResponse,
    NamedResource,
    PokeAPIError,
    get_locations,
    get_pokemon_in_area,
)

NEXT_URL = "https://pokeapi.co/api/v2/location-area/?offset=20&limit=20"

LOCATION_PAGE = {
    "count": 2,
    "next": NEXT_URL,
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": "https://pokeapi.co/api/v2/location-area/1/"},
        {"name": "eterna-city-area", "url": "https://pokeapi.co/api/v2/location-area/2/"},
    ],
}


def _area(pokemon):
    return {
        "id": 1,
        "name": "area",
        "game_index": 1,
        "location": {"name": "somewhere", "url": "https://pokeapi.co/api/v2/location/1/"},
        "names": [],
        "encounter_method_rates": [],
        "pokemon_encounters": [
            {"pokemon": {"name": name, "url": url}, "version_details": []}
            for name, url in pokemon
        ],
    }


AREAS = {
    "canalave-city-area": _area(
        [
            ("tentacool", "https://pokeapi.co/api/v2/pokemon/72/"),
            ("tentacruel", "https://pokeapi.co/api/v2/pokemon/73/"),
        ]
    ),
    "eterna-city-area": _area(
        [
            ("psyduck", "https://pokeapi.co/api/v2/pokemon/54/"),
            ("golduck", "https://pokeapi.co/api/v2/pokemon/55/"),
        ]
    ),
}


class MockCache:
    def __init__(self):
        self.data = {}

    def add(self, key, val):
        self.data[key] = val

    def get(self, key):
        return self.data.get(key)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def location_server(mocked):
    mocked.add(responses.GET, LOCATION_AREA_API, json=LOCATION_PAGE)
    return mocked


@pytest.fixture
def area_server(mocked):
    for area, body in AREAS.items():
        mocked.add(responses.GET, LOCATION_AREA_API + area, json=body)
    return mocked


def test_get_locations_no_cache(location_server):
    config = Config()
    locations = get_locations(config, LOCATION_AREA_API)
    assert len(locations) == 2
    assert locations[0].name == "canalave-city-area"
    assert config.next == NEXT_URL
    assert config.prev == ""


def test_get_locations_with_cache(location_server, capsys):
    cache = MockCache()
    config = Config(cache=cache)

    first = get_locations(config, LOCATION_AREA_API)
    assert len(first) == 2

    second = get_locations(config, LOCATION_AREA_API)
    assert len(second) == 2
    assert second == first
    assert cache.get(LOCATION_AREA_API) is not None
    assert len(location_server.calls) == 1
    assert "Using cached locations" in capsys.readouterr().out
    assert config.next == NEXT_URL


def test_get_locations_invalid_url(mocked):
    with pytest.raises(PokeAPIError, match="error requesting http://invalid-url"):
        get_locations(Config(), "http://invalid-url")


def test_get_locations_bad_body(mocked):
    mocked.add(responses.GET, LOCATION_AREA_API, body="not json")
    with pytest.raises(PokeAPIError, match="error decoding"):
        get_locations(Config(), LOCATION_AREA_API)


def test_get_locations_bad_cached_data(mocked):
    cache = MockCache()
    cache.add(LOCATION_AREA_API, b"{broken")
    with pytest.raises(PokeAPIError, match="error unmarshalling cached locations"):
        get_locations(Config(cache=cache), LOCATION_AREA_API)


@pytest.mark.parametrize(
    "area, index, name, url",
    [
        ("canalave-city-area", 0, "tentacool", "https://pokeapi.co/api/v2/pokemon/72/"),
        ("canalave-city-area", 1, "tentacruel", "https://pokeapi.co/api/v2/pokemon/73/"),
        ("eterna-city-area", 0, "psyduck", "https://pokeapi.co/api/v2/pokemon/54/"),
        ("eterna-city-area", 1, "golduck", "https://pokeapi.co/api/v2/pokemon/55/"),
    ],
)
def test_single_pokemon_names_in_area(area_server, area, index, name, url):
    encounters = get_pokemon_in_area(Config(), area)
    assert encounters[index].pokemon == NamedResource(name=name, url=url)


@pytest.mark.parametrize("area", ["canalave-city-area", "eterna-city-area"])
def test_multiple_pokemon_in_area(area_server, area):
    encounters = get_pokemon_in_area(Config(), area)
    assert len(encounters) > 1


def test_get_pokemon_in_area_uses_cache(area_server, capsys):
    config = Config(cache=MockCache())
    first = get_pokemon_in_area(config, "eterna-city-area")
    second = get_pokemon_in_area(config, "eterna-city-area")
    assert [e.pokemon.name for e in second] == ["psyduck", "golduck"]
    assert second == first
    assert len(area_server.calls) == 1
    assert "Using cached exploration response" in capsys.readouterr().out


def test_get_pokemon_in_area_request_error(mocked):
    with pytest.raises(PokeAPIError, match="error requesting"):
        get_pokemon_in_area(Config(), "nowhere-area")


def test_location_response_round_trip():
    parsed = LocationResponse.from_dict(LOCATION_PAGE)
    assert parsed.results[1] == LocationArea(
        name="eterna-city-area", url="https://pokeapi.co/api/v2/location-area/2/"
    )
    assert LocationResponse.from_dict(parsed.to_dict()) == parsed


def test_exploration_response_round_trip():
    parsed = ExplorationResponse.from_dict(AREAS["canalave-city-area"])
    assert ExplorationResponse.from_dict(parsed.to_dict()) == parsed