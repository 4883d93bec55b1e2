"""
Render model for the stack column.

Pure data: the Qt widget in `view.widgets.stack_view` only draws what is
described here.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from stacksimulator.config import GAUGE_MEDIUM_THRESHOLD, GAUGE_HIGH_THRESHOLD


class GaugeBand(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ValueSign(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


@dataclass(frozen=True)
class StackRow:
    """One cell of the column. `index` and `value` are None for empty slots."""
    index: Optional[int]
    value: Optional[float]
    is_top: bool = False

    @property
    def is_empty(self) -> bool:
        return self.index is None

    @property
    def sign(self) -> Optional[ValueSign]:
        if self.value is None:
            return None
        if self.value > 0:
            return ValueSign.POSITIVE
        if self.value < 0:
            return ValueSign.NEGATIVE
        return ValueSign.ZERO


@dataclass(frozen=True)
class StackRenderModel:
    capacity: int
    size: int
    rows: tuple[StackRow, ...]  # top of the screen first
    fill_ratio: float
    band: GaugeBand

    @property
    def capacity_label(self) -> str:
        return f"Capacity: {self.capacity} | Used: {self.size}"

    @property
    def fill_percent(self) -> int:
        return int(round(self.fill_ratio * 100))


def gauge_band(fill_ratio: float) -> GaugeBand:
    if fill_ratio < GAUGE_MEDIUM_THRESHOLD:
        return GaugeBand.LOW
    if fill_ratio < GAUGE_HIGH_THRESHOLD:
        return GaugeBand.MEDIUM
    return GaugeBand.HIGH


def build_render_model(elements: Sequence[float], capacity: int) -> StackRenderModel:
    """
    Lay out `capacity` rows: empty placeholders on top, then the live elements
    from the top of the stack down to index 0.

    Args:
        elements: Live values ordered bottom to top, as returned by `snapshot()`.
        capacity: Total number of rows to draw.
    """
    size = len(elements)
    if size > capacity:
        raise ValueError(f"{size} elements do not fit into capacity {capacity}")

    empty_rows = [StackRow(index=None, value=None) for _ in range(capacity - size)]
    live_rows = [
        StackRow(index=i, value=float(elements[i]), is_top=(i == size - 1))
        for i in range(size - 1, -1, -1)
    ]

    fill_ratio = size / capacity if capacity else 0.0
    return StackRenderModel(
        capacity=capacity,
        size=size,
        rows=tuple(empty_rows + live_rows),
        fill_ratio=fill_ratio,
        band=gauge_band(fill_ratio),
    )
