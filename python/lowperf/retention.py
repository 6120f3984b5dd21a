"""Long-lived accumulator used to simulate unbounded retention."""

from __future__ import annotations

from typing import Iterator, Optional


class RetentionCache:
    """
    Grow-only text store with an ordered view and an index view.

    ``items`` keeps every added string in insertion order. ``by_index`` maps
    each string's position in ``items`` to the string. There is no removal
    or clear operation: an instance only ever grows.
    """

    def __init__(self) -> None:
        self.items: list[str] = []
        self.by_index: dict[int, str] = {}

    def add(self, text: str) -> int:
        """Append text and return its position."""
        pos = len(self.items)
        self.items.append(text)
        self.by_index[pos] = text
        return pos

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"RetentionCache(items={len(self.items)}, indexed={len(self.by_index)})"


_PROCESS_CACHE: Optional[RetentionCache] = None


def process_cache() -> RetentionCache:
    """Return the process-wide cache, creating it on first use."""
    global _PROCESS_CACHE
    if _PROCESS_CACHE is None:
        _PROCESS_CACHE = RetentionCache()
    return _PROCESS_CACHE
