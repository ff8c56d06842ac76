"""Reverse-scan helpers over ordered sequences."""

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


def find_last_index(items: Sequence[T], predicate: Callable[[T], bool]) -> int:
    """Index of the last item satisfying ``predicate``, or -1."""
    for index in range(len(items) - 1, -1, -1):
        if predicate(items[index]):
            return index
    return -1


def find_last(items: Sequence[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """Last item satisfying ``predicate``, or None."""
    index = find_last_index(items, predicate)
    return items[index] if index != -1 else None
