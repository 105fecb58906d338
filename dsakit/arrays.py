"""Basic operations on mutable sequences: search, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def contains(items: Iterable[Any], key: Any) -> bool:
    """Tell whether ``key`` occurs in ``items`` by a linear scan."""
    return any(item == key for item in items)


def delete_at(items: MutableSequence[Any], index: int) -> Any:
    """Remove and return the element at ``index``, shifting the rest left.

    Raises IndexError when ``index`` is outside the sequence.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"invalid index {index}")
    return items.pop(index)


def delete_last(items: MutableSequence[Any]) -> Any:
    """Remove and return the last element; raises IndexError when empty."""
    if not items:
        raise IndexError("cannot delete from an empty sequence")
    return items.pop()


def insert_at(items: MutableSequence[Any], index: int, element: Any) -> None:
    """Insert ``element`` at ``index``, shifting later elements right.

    ``index`` may equal the length, which appends. Any other position
    outside the sequence raises IndexError.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"invalid index {index}")
    items.insert(index, element)


def append(items: MutableSequence[Any], element: Any) -> None:
    """Add ``element`` at the end of ``items``."""
    items.append(element)


def format_items(items: Iterable[Any], separator: str = " ") -> str:
    """Return the elements of ``items`` as text joined by ``separator``."""
    return separator.join(str(item) for item in items)