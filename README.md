# pokedexcli

An interactive command-line Pokedex. Page through the location areas of the
Pokemon world, explore an area to see which Pokemon live there, try to catch
them, and inspect the ones you have caught. Data comes from the public PokeAPI
over HTTP, using only the Python standard library.

Raw responses are kept in an in-memory cache. A background thread checks the
cache every five minutes and drops entries older than five minutes, so a page
you have seen recently is served without a new request.

## Installation

```
pip install .
```

## Usage

Start the interactive prompt:

```
pokedexcli
```

or, equivalently, `python -m pokedexcli.repl`.

Type commands at the `Pokedex > ` prompt. Input is lower-cased before it is
read and extra whitespace is ignored. An unrecognised command prints
`Unknown command`. The prompt ends on `exit` or at the end of input.

| Command                   | What it does                                                  |
|---------------------------|---------------------------------------------------------------|
| `help`                    | Lists the commands                                            |
| `map`                     | Shows the next page of location areas                         |
| `mapb`                    | Shows the previous page (`you're on the first page` if none)  |
| `explore <location_name>` | Lists the Pokemon found in a location area                    |
| `catch <pokemon_name>`    | Throws a Pokeball at a Pokemon                                |
| `inspect <pokemon_name>`  | Shows name, height, weight, stats and types of a caught Pokemon |
| `pokedex`                 | Lists every Pokemon you have caught                           |
| `exit`                    | Prints a goodbye and exits                                    |

A catch succeeds when a random number from 0 to 254 is at least the Pokemon's
base experience, so high-experience Pokemon are harder to catch. Catching a
Pokemon that is already in the Pokedex keeps the first entry.

When a command fails (a missing argument, an unknown name, a network error or
a response that cannot be read) its message is printed and the prompt carries
on.

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
 ...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
Pokedex > inspect magikarp
Name: magikarp
Height: 9
Weight: 100
Stats:
  -hp: 20
  ...
Types:
  - water
Pokedex > exit
```

## Using it from Python

- `pokedexcli.client.PokeAPIClient(timeout=5.0, cache_interval=300.0, *, base_url=..., fetch=None)`
  offers `list_locations(page_url=None)`, `get_location_area(name)` and
  `get_pokemon(name)`, returning the dataclasses of `pokedexcli.types`
  (`LocationAreaPage`, `LocationArea`, `Pokemon`, ...). `fetch(url, timeout)`
  may be given to replace the HTTP GET. The client is a context manager;
  `close()` stops the cache's background thread.
- `pokedexcli.cache.Cache(interval)` is the expiring byte cache, with `add`,
  `get`, `close` and context-manager support.
- `pokedexcli.commands` holds `Config` (session state, including an output
  stream `out` and a random generator `rng`), `get_commands()` and the command
  functions, which raise `CommandError` on failure.
- `pokedexcli.repl.start_repl(cfg, stream=None)` runs the prompt on a stream
  (standard input by default); `clean_input(text)` lower-cases and splits a line.

## Limitations

The Pokedex lives only in memory: caught Pokemon are not saved and are lost
when the program ends. Command-line arguments are ignored.

## Running the tests

```
pip install ".[test]"
pytest
```