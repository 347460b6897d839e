"""Stack and queue based structures: bracket matching, string decoding,
a stack with constant-time minimum, a queue built on two stacks and a
running median."""

from __future__ import annotations

import heapq
import re

__all__ = [
    "is_valid_parentheses",
    "decode_string",
    "MinStack",
    "StackQueue",
    "MedianFinder",
]

_CLOSING_TO_OPENING = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())

_LEXEME_RE = re.compile(
    r"(?P<count>[0-9]+)|(?P<text>[a-z]+)|(?P<bracket>[\[\]])|(?P<other>.)",
    re.DOTALL,
)


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed by its match in order.

    Characters other than ``()[]{}`` can never close a bracket, so they make
    the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif not stack or stack.pop() != _CLOSING_TO_OPENING.get(char):
            return False
    return not stack


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, repeating ``text`` ``k`` times, nested freely.

    A group without a leading count is repeated zero times. Only ASCII
    digits, lower-case letters and square brackets are accepted.

    Raises:
        ValueError: on an unexpected character or unbalanced brackets.
    """
    stack: list[tuple[str, int]] = []
    current = ""
    count = 0
    for match in _LEXEME_RE.finditer(s):
        kind = match.lastgroup
        piece = match.group()
        if kind == "count":
            count = int(piece)
        elif kind == "text":
            current += piece
        elif piece == "[":
            stack.append((current, count))
            current, count = "", 0
        elif kind == "bracket":
            if not stack:
                raise ValueError(f"unmatched ']' at position {match.start()}")
            prefix, repeat = stack.pop()
            current = prefix + current * repeat
            count = 0
        else:
            raise ValueError(
                f"unexpected character {piece!r} at position {match.start()}"
            )
    if stack:
        raise ValueError("unclosed '[' in encoded string")
    return current


class MinStack:
    """A stack of integers that also reports its smallest element in O(1)."""

    def __init__(self) -> None:
        self._data: list[int] = []
        self._mins: list[int] = []

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        self._data.append(val)
        if not self._mins or val <= self._mins[-1]:
            self._mins.append(val)

    def pop(self) -> None:
        """Remove the top element.

        Raises:
            IndexError: if the stack is empty.
        """
        if not self._data:
            raise IndexError("pop from empty MinStack")
        if self._data[-1] == self._mins[-1]:
            self._mins.pop()
        self._data.pop()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._data:
            raise IndexError("top of empty MinStack")
        return self._data[-1]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._mins:
            raise IndexError("minimum of empty MinStack")
        return self._mins[-1]

    def __len__(self) -> int:
        return len(self._data)


class StackQueue:
    """A first-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the front element."""
        value = self.peek()
        self._outbox.pop()
        return value

    def peek(self) -> int:
        """Return the front element without removing it.

        Raises:
            IndexError: if the queue is empty.
        """
        if not self._outbox:
            if not self._inbox:
                raise IndexError("peek at empty StackQueue")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox[-1]

    def empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class MedianFinder:
    """Tracks the median of a stream of numbers using two heaps."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap of the smaller half, stored negated
        self._high: list[int] = []  # min-heap of the larger half

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if not self._low or num <= -self._low[0]:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low) + 1:
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Return the median of all numbers added so far.

        Raises:
            IndexError: if no number has been added.
        """
        if not self._low and not self._high:
            raise IndexError("median of empty stream")
        if len(self._low) == len(self._high):
            return (-self._low[0] + self._high[0]) / 2.0
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return float(self._high[0])