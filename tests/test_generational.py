import pytest

from quadkit.generational import GenerationalId, GenerationalStorage


def test_push_and_get_round_trip():
    storage = GenerationalStorage()
    a = storage.push("a")
    b = storage.push("b")
    assert storage.get(a) == "a"
    assert storage.get(b) == "b"
    assert storage.count() == len(["a", "b"])


def test_first_ids_have_generation_zero():
    storage = GenerationalStorage()
    first = storage.push("x")
    assert first == GenerationalId(0, 0)


def test_free_removes_value():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.free(a)
    assert storage.get(a) is None
    assert a not in storage


def test_freed_slot_is_reused_with_next_generation():
    storage = GenerationalStorage()
    old = storage.push("old")
    storage.free(old)
    new = storage.push("new")
    assert new.id == old.id
    assert new.generation == old.generation + 1
    assert storage.get(old) is None
    assert storage.get(new) == "new"


def test_free_with_stale_id_keeps_current_value():
    storage = GenerationalStorage()
    old = storage.push("old")
    storage.free(old)
    new = storage.push("new")
    storage.free(old)
    assert storage.get(new) == "new"


def test_retain_drops_values_failing_predicate():
    storage = GenerationalStorage()
    ids = {value: storage.push(value) for value in range(6)}
    storage.retain(lambda value: value % 2 == 0)
    kept = [value for value, id_ in ids.items() if storage.get(id_) is not None]
    assert kept == [0, 2, 4]
    assert storage.count() == len(kept)


def test_retain_visits_in_slot_order():
    storage = GenerationalStorage()
    for value in ["p", "q", "r"]:
        storage.push(value)
    seen = []
    storage.retain(lambda value: seen.append(value) or True)
    assert seen == ["p", "q", "r"]


def test_clear_removes_everything():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.push("b")
    storage.clear()
    assert storage.count() == 0
    assert storage.get(a) is None
    assert storage.push("c") == a


def test_set_replaces_live_value():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.set(a, "z")
    assert storage.get(a) == "z"


def test_set_on_stale_id_raises():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.free(a)
    with pytest.raises(KeyError):
        storage.set(a, "z")


def test_get_out_of_range_returns_none():
    storage = GenerationalStorage()
    storage.push("a")
    assert storage.get(GenerationalId(50, 0)) is None
    assert len(storage) == 1