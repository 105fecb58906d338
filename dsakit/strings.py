"""String routines: concatenation, copying, reversal and permutations."""

from __future__ import annotations

from collections.abc import Iterator


def concat(dest: str, source: str) -> str:
    """Return ``source`` appended to ``dest``."""
    return f"{dest}{source}"


def copy(source: str) -> str:
    """Return a copy of ``source``."""
    return "".join(source)


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text``.

    Arrangements come in swap order: each position in turn is swapped with
    every later one before recursing. Repeated characters give repeated
    results, and an empty string yields nothing.
    """
    chars = list(text)
    last = len(chars) - 1

    def permute(left: int) -> Iterator[str]:
        if left == last:
            yield "".join(chars)
            return
        for i in range(left, len(chars)):
            chars[left], chars[i] = chars[i], chars[left]
            yield from permute(left + 1)
            chars[left], chars[i] = chars[i], chars[left]

    if chars:
        yield from permute(0)