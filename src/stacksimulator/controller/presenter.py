"""
Stack Presenter (Controller)
============================
Turns user gestures into stack operations and describes the outcome.

Why is this file needed?
------------------------
1. Decoupling: The widgets never touch the stack directly. They hand the raw
   input text to the presenter and display the `Feedback` it returns.
2. Error Handling: Overflow/underflow and bad input are caught here and
   classified into one of four status categories, so no failure escapes to
   the Qt event loop.
3. Testability: No PySide6 import. The whole command table can be exercised
   with plain pytest.

Classes:
    StackPresenter: Owns the current stack and dispatches the six commands.
    Feedback: What the view should show after a command.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from stacksimulator.config import PUSH_REFRESH_DELAY_MS, POP_REFRESH_DELAY_MS, STANDALONE_CAPACITY
from stacksimulator.controller.render_model import StackRenderModel, build_render_model
from stacksimulator.model.stack import (
    BoundedStack, StackOverflowError, StackUnderflowError, StackEmptyError
)

logger = logging.getLogger(__name__)

# Optional sign, digits with optional fraction (or ".5"), optional exponent
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

INVALID_INPUT_STATUS = "Invalid input. Enter numbers only."


class Status(Enum):
    """Outcome categories, each drawn in its own colour."""
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class InputError(ValueError):
    """The text in the input field cannot be pushed."""


class EmptyInputError(InputError):
    pass


class InvalidInputError(InputError):
    pass


def parse_value(text: Optional[str]) -> float:
    """
    Parse the input field into a stack value.

    Raises:
        EmptyInputError: Nothing but whitespace was entered.
        InvalidInputError: The text is not a finite decimal number.
    """
    stripped = (text or "").strip()
    if not stripped:
        raise EmptyInputError("Input field is empty. Please enter a numeric value.")
    if not _NUMBER_PATTERN.fullmatch(stripped):
        raise InvalidInputError("Please enter a valid numeric value.")

    value = float(stripped)
    if not math.isfinite(value):
        # e.g. "1e999"
        raise InvalidInputError("Please enter a valid numeric value.")
    return value


def format_value(value: float) -> str:
    """Render a stack value the way the status line shows it (10.0, -2.5)."""
    return repr(float(value))


@dataclass(frozen=True)
class Alert:
    """A modal message box request."""
    status: Status
    title: str
    message: str


@dataclass(frozen=True)
class ButtonStates:
    push: bool
    pop: bool
    peek: bool


@dataclass(frozen=True)
class Feedback:
    """
    Result of one command.

    `last_operation` is None when the "Last Operation" line must keep its
    previous text (failed commands). `refresh_delay_ms` is how long the view
    may wait before redrawing the stack column.
    """
    status: Status
    message: str
    last_operation: Optional[str] = None
    alert: Optional[Alert] = None
    changed: bool = False
    refresh_delay_ms: int = 0
    value: Optional[float] = None


class StackPresenter:
    """
    Owns the current stack and executes user commands on it.

    The stack is replaced (never reset in place) by `clear()`, so callers must
    always go through `presenter.stack` instead of keeping their own handle.
    """

    def __init__(self, stack: Optional[BoundedStack] = None) -> None:
        self._stack = stack if stack is not None else BoundedStack(STANDALONE_CAPACITY)

    @property
    def stack(self) -> BoundedStack:
        return self._stack

    @property
    def capacity(self) -> int:
        return self._stack.capacity

    # --- COMMANDS ---

    def push(self, text: Optional[str]) -> Feedback:
        try:
            value = parse_value(text)
        except InputError as e:
            logger.warning(f"Rejected input {text!r}: {e}")
            return Feedback(
                status=Status.WARNING,
                message=INVALID_INPUT_STATUS,
                alert=Alert(Status.WARNING, "Invalid Input", str(e)),
            )

        try:
            self._stack.push(value)
        except StackOverflowError as e:
            logger.warning(f"Push of {value} rejected: {e}")
            return Feedback(
                status=Status.ERROR,
                message=str(e),
                alert=Alert(Status.ERROR, "Stack Overflow", str(e)),
            )

        shown = format_value(value)
        logger.info(f"Pushed {shown} (size {self._stack.size()}/{self.capacity})")
        return Feedback(
            status=Status.SUCCESS,
            message=f"Pushed: {shown}",
            last_operation=f"Pushed: {shown} | Stack Size: {self._stack.size()}",
            changed=True,
            refresh_delay_ms=PUSH_REFRESH_DELAY_MS,
            value=value,
        )

    def pop(self) -> Feedback:
        try:
            value = self._stack.pop()
        except StackUnderflowError as e:
            logger.warning(f"Pop rejected: {e}")
            return Feedback(
                status=Status.ERROR,
                message=str(e),
                alert=Alert(Status.ERROR, "Stack Underflow", str(e)),
            )

        shown = format_value(value)
        logger.info(f"Popped {shown} (size {self._stack.size()}/{self.capacity})")
        return Feedback(
            status=Status.SUCCESS,
            message=f"Popped: {shown}",
            last_operation=f"Popped: {shown} | Stack Size: {self._stack.size()}",
            changed=True,
            refresh_delay_ms=POP_REFRESH_DELAY_MS,
            value=value,
        )

    def peek(self) -> Feedback:
        try:
            value = self._stack.peek()
        except StackEmptyError as e:
            logger.warning(f"Peek rejected: {e}")
            return Feedback(
                status=Status.ERROR,
                message=str(e),
                alert=Alert(Status.ERROR, "Stack Empty", str(e)),
            )

        shown = format_value(value)
        logger.debug(f"Peeked {shown}")
        return Feedback(
            status=Status.INFO,
            message=f"Top element: {shown}",
            last_operation=f"Peek: {shown} | No change",
            value=value,
        )

    def size(self) -> Feedback:
        size = self._stack.size()
        logger.debug(f"Size queried: {size}")
        return Feedback(
            status=Status.INFO,
            message=f"Stack size: {size}",
            last_operation=f"Size: {size} | No change",
        )

    def is_empty(self) -> Feedback:
        empty = self._stack.is_empty()
        logger.debug(f"Is-empty queried: {empty}")
        return Feedback(
            status=Status.INFO,
            message=f"Stack is empty: {str(empty).lower()}",
            last_operation=f"Is Empty: {'Yes' if empty else 'No'} | No change",
        )

    def clear(self) -> Feedback:
        # Replace, don't reset: no one keeps a handle on the old stack
        self._stack = BoundedStack(self.capacity)
        logger.info(f"Stack cleared (capacity {self.capacity})")
        return Feedback(
            status=Status.WARNING,
            message="Stack cleared",
            last_operation="Stack cleared | Stack Size: 0",
            changed=True,
        )

    # --- DERIVED VIEW STATE ---

    def button_states(self) -> ButtonStates:
        return ButtonStates(
            push=not self._stack.is_full(),
            pop=not self._stack.is_empty(),
            peek=not self._stack.is_empty(),
        )

    def render_model(self) -> StackRenderModel:
        return build_render_model(self._stack.snapshot(), self._stack.capacity)
