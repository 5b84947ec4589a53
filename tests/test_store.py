import logging
from datetime import datetime
from enum import Enum
from typing import Literal

import pytest

from argstyle.parser import DEFAULT_KEY
from argstyle.store import (
    ArgumentStore,
    get_argument_store,
    reset_argument_store,
    set_argument_store,
)


@pytest.fixture(autouse=True)
def clean_shared_store():
    reset_argument_store()
    yield
    reset_argument_store()


@pytest.fixture
def store():
    return ArgumentStore().parse(["tool", "--x=1", "--alias=2", "-v", "target"])


def test_parse_returns_store(store):
    assert isinstance(store, ArgumentStore)
    assert store.get(DEFAULT_KEY) == "target"


def test_get_precedence(store):
    assert store.get("x", "alias", "def") == "1"
    assert store.get("missing", "alias", "def") == "2"
    assert store.get("missing", "other", "def") == "def"
    assert store.get("missing", None, "def") == "def"
    assert store.get("missing") is None


def test_get_empty_alias_is_ignored():
    store = ArgumentStore().add("", "empty")
    assert store.get("missing", "", "def") == "def"
    assert not store.has("missing", "")


def test_has_precedence(store):
    assert store.has("x")
    assert store.has("missing", "alias")
    assert store.has("verbose", "v")
    assert not store.has("missing", "other")
    assert not store.has("missing")


def test_parse_replaces_arguments(store):
    store.parse(["tool", "--other"])
    assert store.get_all() == {"other": True}
    assert not store.has("x")


def test_get_all_is_read_only_snapshot(store):
    snapshot = store.get_all()
    with pytest.raises(TypeError):
        snapshot["x"] = "changed"  # type: ignore[index]
    store.add("new", True)
    assert "new" not in snapshot


def test_add_is_chainable():
    store = ArgumentStore().add("a", "1").add("b", True)
    assert store.get_all() == {"a": "1", "b": True}
    assert "a" in store
    assert len(store) == 2


def test_parse_and_store_alias():
    store = ArgumentStore().parse_and_store(["tool", "--color"])
    assert store.has("color")


def test_get_as():
    store = ArgumentStore().parse(["tool", "--port=8080", "--debug", "--ratio=0.5"])
    assert store.get_as("port", int) == 8080
    assert store.get_as("p", int, alias="port") == 8080
    assert store.get_as("debug", bool) is True
    assert store.get_as("ratio", float) == 0.5
    assert store.get_as("missing", int, default=3) == 3


def test_get_as_invalid_returns_default(caplog):
    store = ArgumentStore().parse(["tool", "--port=http"])
    with caplog.at_level(logging.WARNING, logger="argstyle"):
        assert store.get_as("port", int, default=80) == 80
    assert "Ignoring argument 'port'" in caplog.text


def test_shared_store_is_lazy_singleton():
    first = get_argument_store()
    assert first.get_all() == {}
    assert get_argument_store() is first


def test_set_and_reset_shared_store():
    store = ArgumentStore().parse(["tool", "--color"])
    set_argument_store(store)
    assert get_argument_store() is store

    reset_argument_store()
    assert get_argument_store() is not store


class Speed(Enum):
    FAST = "fast"
    SLOW = "slow"


def test_get_as_pydantic_types():
    store = ArgumentStore().parse(
        [
            "tool",
            "--speed=slow",
            "--mode=json",
            "--since=2025-01-02T00:00:00",
            "--quiet=off",
        ]
    )
    assert store.get_as("speed", Speed) is Speed.SLOW
    assert store.get_as("mode", Literal["cli", "json"]) == "json"
    assert store.get_as("since", datetime) == datetime(2025, 1, 2)
    assert store.get_as("quiet", bool) is False
    assert store.get_as("mode", int | str) == "json"


def test_get_as_invalid_choice_returns_default():
    store = ArgumentStore().parse(["tool", "--speed=warp", "--mode=xml"])
    assert store.get_as("speed", Speed, default=Speed.FAST) is Speed.FAST
    assert store.get_as("mode", Literal["cli", "json"], default="cli") == "cli"
