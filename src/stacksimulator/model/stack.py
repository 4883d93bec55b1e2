"""
Bounded Stack (Data Model)
==========================
Fixed-capacity, array-backed LIFO container displayed by the simulator.

Why is this file needed?
------------------------
1. Core Logic: It is the only object the simulator actually mutates. The
   presenter and the widgets merely read from it.
2. Strict Bounds: Capacity is fixed at construction. Pushing into a full
   stack fails instead of silently growing.
3. Rendering: `snapshot()` hands out an independent copy, so the view can
   keep it around while the stack keeps changing.

Classes:
    BoundedStack: The container.
    StackError: Base of the error hierarchy raised by the container.
"""
from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)


class StackError(Exception):
    """Base class for all errors raised by BoundedStack."""


class InvalidCapacityError(StackError, ValueError):
    """Raised when a stack is constructed with a non-positive capacity."""


class StackOverflowError(StackError, RuntimeError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(StackError, RuntimeError):
    """Raised when popping from an empty stack."""


class StackEmptyError(StackUnderflowError):
    """Raised when peeking into an empty stack."""


class BoundedStack:
    """
    Array-backed stack with a fixed capacity.

    The elements live in a preallocated float64 array. `_top` is the index of
    the topmost live element, -1 when the stack is empty. Slots above `_top`
    are dead and their contents are meaningless.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise InvalidCapacityError(f"Capacity must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise InvalidCapacityError("Capacity must be positive")

        self._capacity: int = int(capacity)
        self._slots = np.empty(self._capacity, dtype=np.float64)
        self._top: int = -1

    # --- PROPERTIES ---

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._top + 1

    def is_empty(self) -> bool:
        return self._top == -1

    def is_full(self) -> bool:
        return self._top == self._capacity - 1

    # --- OPERATIONS ---

    def push(self, value: float) -> None:
        """
        Place `value` on top of the stack.

        Raises:
            StackOverflowError: If the stack is full. The stack is left untouched.
            ValueError, OverflowError: If `value` cannot be stored
                as a float. The stack is left untouched.
        """
        if self.is_full():
            raise StackOverflowError("Stack Overflow")
        # Store first, the cursor only moves once the slot holds the value
        self._slots[self._top + 1] = value
        self._top += 1

    def pop(self) -> float:
        """
        Remove the topmost element and return it.

        Raises:
            StackUnderflowError: If the stack is empty.
        """
        if self.is_empty():
            raise StackUnderflowError("Stack Underflow")
        value = float(self._slots[self._top])
        self._top -= 1
        return value

    def peek(self) -> float:
        """Return the topmost element without removing it."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty")
        return float(self._slots[self._top])

    def snapshot(self) -> list[float]:
        """
        Copy of the live elements, ordered bottom (index 0) to top.

        The returned list shares nothing with the stack.
        """
        return self._slots[: self.size()].tolist()

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, elements={self.snapshot()})"
