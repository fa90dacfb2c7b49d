import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from pokedexcli.client import BASE_URL, PokeAPIClient
from pokedexcli.types import LocationAreaPage


class RecordingFetch:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, url, timeout):
        self.calls.append((url, timeout))
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


PAGE = {
    "count": 2,
    "next": BASE_URL + "/location-area?offset=20&limit=20",
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": BASE_URL + "/location-area/1/"},
        {"name": "eterna-city-area", "url": BASE_URL + "/location-area/2/"},
    ],
}


def make_client(responses, timeout=5.0):
    fetch = RecordingFetch(responses)
    return PokeAPIClient(timeout=timeout, cache_interval=60.0, fetch=fetch), fetch


def test_first_page_uses_location_area_url():
    url = "https://pokeapi.co/api/v2/location-area"
    client, fetch = make_client({url: json.dumps(PAGE).encode()})
    with client:
        page = client.list_locations(None)
    assert fetch.calls == [(url, 5.0)]
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]
    assert page.next == PAGE["next"]
    assert page.previous is None


def test_explicit_page_url_is_used_verbatim():
    url = PAGE["next"]
    client, fetch = make_client({url: json.dumps(PAGE).encode()})
    with client:
        page = client.list_locations(url)
    assert fetch.calls[0][0] == url
    assert page == LocationAreaPage.from_dict(PAGE)


def test_responses_are_cached():
    url = BASE_URL + "/location-area"
    client, fetch = make_client({url: json.dumps(PAGE).encode()})
    with client:
        first = client.list_locations()
        second = client.list_locations()
    assert first == second
    assert len(fetch.calls) == 1


def test_get_pokemon_builds_url_and_parses():
    body = {"name": "pikachu", "base_experience": 112, "height": 4, "weight": 60}
    url = BASE_URL + "/pokemon/pikachu"
    client, fetch = make_client({url: json.dumps(body).encode()})
    with client:
        pokemon = client.get_pokemon("pikachu")
    assert fetch.calls[0][0] == url
    assert (pokemon.name, pokemon.base_experience, pokemon.height, pokemon.weight) == (
        "pikachu",
        112,
        4,
        60,
    )


def test_get_location_area_builds_url_and_parses():
    body = {
        "name": "pastoria-city-area",
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": "u1"}},
            {"pokemon": {"name": "magikarp", "url": "u2"}},
        ],
    }
    url = BASE_URL + "/location-area/pastoria-city-area"
    client, fetch = make_client({url: json.dumps(body).encode()})
    with client:
        area = client.get_location_area("pastoria-city-area")
    assert fetch.calls[0][0] == url
    assert [e.pokemon.name for e in area.pokemon_encounters] == ["tentacool", "magikarp"]


def test_invalid_json_raises_and_is_not_cached():
    url = BASE_URL + "/pokemon/missingno"
    client, fetch = make_client({url: b"Not Found"})
    with client:
        with pytest.raises(ValueError):
            client.get_pokemon("missingno")
        with pytest.raises(ValueError):
            client.get_pokemon("missingno")
    assert len(fetch.calls) == 2


def test_fetch_errors_propagate():
    url = BASE_URL + "/pokemon/pikachu"
    client, _ = make_client({url: ConnectionRefusedError("refused")})
    with client:
        with pytest.raises(ConnectionRefusedError):
            client.get_pokemon("pikachu")


def test_timeout_is_passed_to_fetch():
    url = BASE_URL + "/location-area"
    client, fetch = make_client({url: json.dumps(PAGE).encode()}, timeout=1.5)
    with client:
        client.list_locations()
    assert fetch.calls[0][1] == 1.5


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        body = json.dumps({"name": self.path.rsplit("/", 1)[-1]}).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


def test_default_fetch_performs_http_get():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        base = f"http://127.0.0.1:{server.server_address[1]}/api/v2"
        with PokeAPIClient(timeout=5.0, cache_interval=60.0, base_url=base) as client:
            pokemon = client.get_pokemon("bulbasaur")
    finally:
        server.shutdown()
        server.server_close()
    assert pokemon.name == "bulbasaur"