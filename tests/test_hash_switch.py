# tests/test_hash_switch.py
import pytest

from switchcase.core.switch import HashSwitch

TABLE = {1: "1", 2: "2", 3: "3"}


def _never():
    raise AssertionError("producer should not run")


def test_hash_case_hit():
    assert HashSwitch.make(3).hash_case(TABLE).default(_never) == "3"


def test_hash_case_miss_falls_to_default():
    assert HashSwitch.make(4).hash_case(TABLE).default(lambda: "X") == "X"


def test_hash_case_miss_without_default():
    hs = HashSwitch.make(4).hash_case(TABLE)
    assert hs.result is None
    assert hs.matched is False


def test_callable_values_run_only_on_match():
    hs = HashSwitch.make("b").hash_case({"a": _never, "b": lambda: "B"})
    assert hs.result == "B"


def test_none_value_still_counts_as_match():
    hs = HashSwitch.make(1).hash_case({1: None})
    assert hs.matched is True
    assert hs.default(lambda: "X") == "X"


def test_chained_tables_overwrite():
    hs = HashSwitch.make(1).hash_case({1: "first"}).hash_case({1: "second"})
    assert hs.result == "second"


def test_empty_table():
    assert HashSwitch.make(1).hash_case({}).default(lambda: "X") == "X"


def test_unhashable_value_raises():
    with pytest.raises(TypeError):
        HashSwitch.make([1]).hash_case(TABLE)
