"""
Launcher logic: turns the pre-flight configuration into a ready stack.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from stacksimulator.config import (
    MIN_CAPACITY, MAX_CAPACITY, DEFAULT_CAPACITY,
    MIN_RANDOM_COUNT, MAX_RANDOM_COUNT, DEFAULT_RANDOM_COUNT,
    RANDOM_VALUE_RANGE,
)
from stacksimulator.model.stack import BoundedStack, StackOverflowError

logger = logging.getLogger(__name__)


class DataMode(Enum):
    EMPTY = "empty"
    RANDOM = "random"


@dataclass(frozen=True)
class LaunchConfig:
    """Choices made in the launcher dialog."""
    capacity: int = DEFAULT_CAPACITY
    mode: DataMode = DataMode.EMPTY
    random_count: int = DEFAULT_RANDOM_COUNT

    def __post_init__(self) -> None:
        if not MIN_CAPACITY <= self.capacity <= MAX_CAPACITY:
            raise ValueError(
                f"Capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}, got {self.capacity}"
            )
        if not MIN_RANDOM_COUNT <= self.random_count <= MAX_RANDOM_COUNT:
            raise ValueError(
                f"Random count must be between {MIN_RANDOM_COUNT} and {MAX_RANDOM_COUNT}, "
                f"got {self.random_count}"
            )

    @property
    def seed_count(self) -> int:
        """How many values will actually be pushed at start-up."""
        if self.mode is DataMode.EMPTY:
            return 0
        return min(self.random_count, self.capacity)


def generate_seed_values(count: int, rng: Optional[np.random.Generator] = None) -> list[float]:
    """Draw `count` integers uniformly from RANDOM_VALUE_RANGE (inclusive)."""
    if count < 0:
        raise ValueError(f"Count must not be negative, got {count}")
    rng = rng if rng is not None else np.random.default_rng()
    low, high = RANDOM_VALUE_RANGE
    return [float(v) for v in rng.integers(low, high, size=count, endpoint=True)]


def bulk_load(stack: BoundedStack, values: Iterable[float]) -> int:
    """
    Push `values` in order until they run out or the stack is full.

    Returns:
        Number of values actually pushed.
    """
    pushed = 0
    for value in values:
        try:
            stack.push(value)
        except StackOverflowError:
            logger.debug(f"Stack full after {pushed} seed values, remaining values dropped.")
            break
        pushed += 1
    return pushed


def build_stack(config: LaunchConfig, rng: Optional[np.random.Generator] = None) -> BoundedStack:
    """Create the stack described by `config`, seeded if requested."""
    stack = BoundedStack(config.capacity)
    if config.mode is DataMode.RANDOM:
        values = generate_seed_values(config.seed_count, rng)
        bulk_load(stack, values)
        logger.info(f"Seeded stack with {stack.size()} random values: {stack.snapshot()}")
    logger.info(f"Stack created: capacity={config.capacity}, mode={config.mode.value}")
    return stack
