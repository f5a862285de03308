import itertools
import logging
from collections import deque

import pytest

from samplekit.config import SampleKitConfig, set_config
from samplekit.engine import RandomEngine
from samplekit.exceptions import CapacityExceededError
from samplekit.fill import collect_unique, fill_unique, rfill, rfill_front
from samplekit.generators import BoundedIntGenerator
from samplekit.names import FIRST_NAMES, random_name


def test_rfill_list_allows_duplicates():
    values = rfill([], 50, BoundedIntGenerator(0, 1))
    assert len(values) == 50
    assert set(values) <= {0, 1}


def test_rfill_tops_up_existing_container():
    values = [9, 9]
    rfill(values, 5, itertools.count().__next__)
    assert values == [9, 9, 0, 1, 2]


def test_rfill_leaves_full_container_alone():
    values = [1, 2, 3]
    rfill(values, 2, lambda: pytest.fail("producer must not be called"))
    assert values == [1, 2, 3]


def test_rfill_set_skips_duplicates():
    s = rfill(set(), 10, BoundedIntGenerator(0, 20, RandomEngine(1)))
    assert len(s) == 10
    assert all(0 <= v <= 20 for v in s)


def test_rfill_deque_and_zero_target():
    d = rfill(deque(), 4, lambda: "x")
    assert list(d) == ["x"] * 4
    assert rfill([], 0, lambda: 1) == []


def test_rfill_set_beyond_value_space_raises():
    with pytest.raises(CapacityExceededError) as ei:
        rfill(set(), 5, BoundedIntGenerator(0, 2), max_stalled_draws=200)
    assert ei.value.requested == 5
    assert ei.value.reached == 3
    assert ei.value.limit == 200


def test_rfill_rejects_negative_count_and_bad_container():
    with pytest.raises(ValueError):
        rfill([], -1, lambda: 0)
    with pytest.raises(TypeError):
        rfill((), 3, lambda: 0)


def test_rfill_front_inserts_exactly_n_in_reverse_order():
    values = [100]
    rfill_front(values, 3, itertools.count().__next__)
    assert values == [2, 1, 0, 100]

    d = deque(["z"])
    rfill_front(d, 2, iter("ab").__next__)
    assert list(d) == ["b", "a", "z"]


def test_fill_unique_gives_n_distinct_sorted_values():
    out = fill_unique([], 30, BoundedIntGenerator(0, 99, RandomEngine(5)))
    assert len(out) == 30
    assert len(set(out)) == 30
    assert out == sorted(out)
    assert all(0 <= v <= 99 for v in out)


def test_fill_unique_can_exhaust_a_small_space():
    out = fill_unique([], 6, BoundedIntGenerator(1, 6))
    assert out == [1, 2, 3, 4, 5, 6]


def test_fill_unique_replaces_previous_contents():
    values = [-1, -2, -3]
    fill_unique(values, 2, BoundedIntGenerator(10, 11))
    assert values == [10, 11]

    s = {"old"}
    fill_unique(s, 5, random_name)
    assert len(s) == 5
    assert s <= set(FIRST_NAMES)

    d = deque([0])
    fill_unique(d, 3, BoundedIntGenerator(0, 2))
    assert list(d) == [0, 1, 2]


def test_fill_unique_beyond_value_space_raises_capacity_exceeded(caplog):
    caplog.set_level(logging.WARNING, logger="samplekit.fill")
    with pytest.raises(CapacityExceededError) as ei:
        fill_unique([], 11, BoundedIntGenerator(0, 9), max_stalled_draws=1000)
    assert ei.value.reached == 10
    assert any("stalled" in rec.message for rec in caplog.records)


def test_stall_ceiling_comes_from_config():
    set_config(SampleKitConfig(max_stalled_draws=5))
    calls = []

    def constant():
        calls.append(1)
        return 42

    with pytest.raises(CapacityExceededError):
        collect_unique(2, constant)
    # one productive draw then five stalled ones
    assert len(calls) == 6


def test_stall_ceiling_counts_consecutive_misses_only():
    # Every other draw repeats; a limit of 2 is never hit.
    seq = iter([0, 0, 1, 1, 2, 2, 3])
    assert collect_unique(4, seq.__next__, max_stalled_draws=2) == [0, 1, 2, 3]


def test_invalid_stall_limit():
    with pytest.raises(ValueError):
        collect_unique(1, lambda: 0, max_stalled_draws=0)
