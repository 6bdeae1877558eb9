# tests/test_cache_utils.py
import pytest

from catalog_autocompleter.utils.cache_utils import average_ms, record, timed


def test_timed_returns_result_and_elapsed():
    res, dt = timed("add")(lambda a, b: a + b)(2, 3)
    assert res == 5
    assert dt >= 0


def test_timed_records_under_label():
    stats = {}
    fn = timed("upper", stats)(str.upper)
    fn("a")
    fn("b")
    assert stats["upper"][1] == 2
    assert stats["upper"][0] >= 0


def test_record_and_average():
    stats = {}
    record(stats, "load", 0.002)
    record(stats, "load", 0.004)
    assert average_ms(stats)["load"] == pytest.approx(3.0)
    assert average_ms({}) == {}
