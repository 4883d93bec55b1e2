import numpy as np
import pytest

from stacksimulator.config import RANDOM_VALUE_RANGE, DEFAULT_CAPACITY
from stacksimulator.controller.launcher import (
    LaunchConfig,
    DataMode,
    generate_seed_values,
    bulk_load,
    build_stack,
)
from stacksimulator.model.stack import BoundedStack


def test_default_config_builds_empty_stack():
    stack = build_stack(LaunchConfig())

    assert stack.capacity == DEFAULT_CAPACITY
    assert stack.is_empty()


def test_empty_mode_ignores_random_count():
    config = LaunchConfig(capacity=8, mode=DataMode.EMPTY, random_count=10)

    assert config.seed_count == 0
    assert build_stack(config).is_empty()


def test_random_mode_pushes_requested_count():
    config = LaunchConfig(capacity=12, mode=DataMode.RANDOM, random_count=7)

    stack = build_stack(config, rng=np.random.default_rng(1))

    assert stack.size() == 7
    low, high = RANDOM_VALUE_RANGE
    assert all(low <= v <= high for v in stack.snapshot())
    assert all(v == int(v) for v in stack.snapshot())


def test_random_count_is_capped_by_capacity():
    config = LaunchConfig(capacity=5, mode=DataMode.RANDOM, random_count=10)

    assert config.seed_count == 5
    stack = build_stack(config, rng=np.random.default_rng(0))
    assert stack.is_full()


def test_same_seed_gives_same_stack():
    config = LaunchConfig(capacity=10, mode=DataMode.RANDOM, random_count=6)

    a = build_stack(config, rng=np.random.default_rng(123))
    b = build_stack(config, rng=np.random.default_rng(123))

    assert a.snapshot() == b.snapshot()


@pytest.mark.parametrize("kwargs", [
    {"capacity": 4},
    {"capacity": 21},
    {"random_count": 0},
    {"random_count": 11},
])
def test_out_of_range_config_is_rejected(kwargs):
    with pytest.raises(ValueError):
        LaunchConfig(**kwargs)


def test_generate_seed_values_range_is_inclusive():
    values = generate_seed_values(5000, rng=np.random.default_rng(7))

    assert len(values) == 5000
    assert min(values) == RANDOM_VALUE_RANGE[0]
    assert max(values) == RANDOM_VALUE_RANGE[1]


def test_generate_zero_values():
    assert generate_seed_values(0) == []


def test_generate_negative_count_is_rejected():
    with pytest.raises(ValueError):
        generate_seed_values(-1)


def test_bulk_load_stops_quietly_on_overflow():
    stack = BoundedStack(3)

    pushed = bulk_load(stack, [1, 2, 3, 4, 5])

    assert pushed == 3
    assert stack.snapshot() == [1, 2, 3]


def test_bulk_load_on_partially_filled_stack():
    stack = BoundedStack(3)
    stack.push(9)

    assert bulk_load(stack, [1, 2]) == 2
    assert stack.snapshot() == [9, 1, 2]
