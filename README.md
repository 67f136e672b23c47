# pokedex

An interactive command-line Pokedex. It pages through the location areas
published by PokeAPI, twenty at a time. Responses are kept in an in-memory
cache for about five seconds. A page asked for again within that time is
served from the cache and not fetched a second time.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedex
```

You get a `Pokedex > ` prompt that accepts these commands:

| Command | What it does                         |
|---------|--------------------------------------|
| `help`  | Displays a help message              |
| `map`   | Displays the next 20 locations       |
| `mapb`  | Displays the previous 20 locations   |
| `exit`  | Exit the Pokedex                     |

- A line is trimmed and lower-cased before it is matched, so `  MAP ` works
  too. Only the first word counts.
- An empty line is ignored.
- An unknown command prints `Unknown command`.
- `mapb` before any page has been shown prints `you're on the first page`.
- When a page comes from the cache, `Using cached locations` is printed
  before it.
- A failed request is reported as `error: ...` and the prompt carries on.
- `exit` prints a goodbye and ends the program. End of input (Ctrl-D) also
  ends it.

## Using it as a library

```python
from pokedex.api import LOCATION_AREA_API, Config, get_locations, get_pokemon_in_area
from pokedex.cache import Cache

with Cache(5.0) as cache:     # entries are dropped after about five seconds
    config = Config(cache=cache)

    for area in get_locations(config, LOCATION_AREA_API):
        print(area.name)

    print(config.next)        # URL of the following page, "" if there is none
    print(config.prev)        # URL of the preceding page, "" if there is none

    for encounter in get_pokemon_in_area(config, "canalave-city-area"):
        print(encounter.pokemon.name)
```

- `get_locations(config, url)` returns a list of `LocationArea` (`name`,
  `url`) and sets `config.next` and `config.prev`.
- `get_pokemon_in_area(config, area)` returns a list of `PokemonEncounter`.
  Each one carries a `pokemon` (`NamedResource` with `name` and `url`) and
  the raw `version_details`.
- A cache is optional. `Config()` without one always fetches. Any object with
  `add(key, val)` and `get(key)` methods can serve as the cache, where `get`
  returns `None` for a missing key.
- A failed request, a response that is not a JSON object, or a cached entry
  that cannot be decoded raises `pokedex.api.PokeAPIError`.

`Cache.get` returns the stored bytes, or `None` if the key is missing or has
expired. `Cache.close()` stops the background thread that drops old entries.
Leaving the `with` block calls it for you.

`pokedex.repl.clean_input` splits a line the same way the prompt does:

```python
>>> from pokedex.repl import clean_input
>>> clean_input("  Hello World  ")
['hello', 'world']
```

## What it does not do

The prompt only browses location areas. Listing the Pokémon of an area is
possible through `get_pokemon_in_area`, but the prompt has no command for it.
There is also no catching, no inspecting of Pokémon, and no Pokedex kept
between runs. Nothing is stored on disk, and the cache lives only as long as
the process.

## Running the tests

```
pip install ".[test]"
pytest
```