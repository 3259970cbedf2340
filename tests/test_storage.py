from dataclasses import dataclass

import pytest

from quadkit import storage
from quadkit.storage import Storage


@dataclass
class WorldBoundaries:
    value: int


@dataclass
class Settings:
    name: str


class NeverStored:
    pass


def test_store_and_get():
    box = Storage()
    box.store(WorldBoundaries(23))
    assert box.get(WorldBoundaries).value == 23


def test_store_overwrites_previous_value():
    box = Storage()
    box.store(WorldBoundaries(1))
    box.store(WorldBoundaries(2))
    assert box.get(WorldBoundaries) == WorldBoundaries(2)


def test_try_get_missing_returns_none():
    box = Storage()
    box.store(WorldBoundaries(5))
    assert box.try_get(Settings) is None


def test_get_missing_raises():
    box = Storage()
    with pytest.raises(KeyError):
        box.get(Settings)


def test_values_are_shared_and_mutable():
    box = Storage()
    box.store(Settings("a"))
    box.get(Settings).name = "b"
    assert box.try_get(Settings).name == "b"


def test_types_are_kept_apart():
    box = Storage()
    box.store(WorldBoundaries(7))
    box.store(Settings("level"))
    assert box.get(WorldBoundaries).value == 7
    assert box.get(Settings).name == "level"


def test_module_level_storage():
    storage.store(WorldBoundaries(23))
    assert storage.get(WorldBoundaries).value == 23
    assert storage.try_get(NeverStored) is None
    with pytest.raises(KeyError):
        storage.get(NeverStored)