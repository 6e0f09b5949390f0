from __future__ import annotations

from collections.abc import Iterable, Iterator

from src.config import RECENT_LIMIT


class RecentQueries:
    """Most-recent-first search history, unique case-insensitively, capped."""

    def __init__(self, initial: Iterable[str] = (), limit: int = RECENT_LIMIT) -> None:
        self.limit = limit
        self._items: list[str] = []
        # oldest first so the first given entry ends up in front
        for query in reversed(list(initial)):
            self.add(query)

    def add(self, query: str) -> None:
        """Put `query` in front; an existing case-insensitive match is moved, not duplicated."""
        query = query.strip()
        if not query:
            return
        folded = query.casefold()
        rest = [q for q in self._items if q.casefold() != folded]
        self._items = [query, *rest][: self.limit]

    def items(self) -> list[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, query: object) -> bool:
        if not isinstance(query, str):
            return False
        return any(q.casefold() == query.strip().casefold() for q in self._items)
