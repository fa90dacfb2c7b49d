import time

import pytest

from pokedexcli.cache import Cache


@pytest.mark.parametrize(
    ("key", "val"),
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, val):
    with Cache(5.0) as cache:
        cache.add(key, val)
        assert cache.get(key) == val


def test_reap_loop():
    base_time = 0.005
    wait_time = base_time + 0.005
    with Cache(base_time) as cache:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"

        deadline = time.monotonic() + 2.0
        time.sleep(wait_time)
        while "https://example.com" in cache and time.monotonic() < deadline:
            time.sleep(wait_time)

        assert cache.get("https://example.com") is None


def test_missing_key_returns_none():
    with Cache(5.0) as cache:
        assert cache.get("https://example.com/none") is None
        assert "https://example.com/none" not in cache


def test_add_replaces_value():
    with Cache(5.0) as cache:
        cache.add("https://example.com", b"first")
        cache.add("https://example.com", b"second")
        assert cache.get("https://example.com") == b"second"
        assert len(cache) == 1


def test_entries_survive_before_interval():
    with Cache(5.0) as cache:
        cache.add("https://example.com", b"testdata")
        time.sleep(0.02)
        assert cache.get("https://example.com") == b"testdata"


@pytest.mark.parametrize("interval", [0, -1])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)


def test_close_stops_reaper():
    cache = Cache(0.005)
    cache.close()
    cache.add("https://example.com", b"testdata")
    time.sleep(0.03)
    assert cache.get("https://example.com") == b"testdata"