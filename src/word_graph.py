"""Word intersection graph and depth-first placement ordering."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from models import Connection, IntersectionPoint

logger = logging.getLogger(__name__)


def find_all_intersections(word_a: str, word_b: str) -> list[IntersectionPoint]:
    """Every (index in *word_a*, index in *word_b*) pair holding the same letter."""
    return [
        IntersectionPoint(i, j, ch)
        for i, ch in enumerate(word_a)
        for j, other in enumerate(word_b)
        if ch == other
    ]


class WordGraph:
    """Undirected graph of words sharing at least one letter.

    Each word maps to its connections in insertion order.  Indices inside a
    connection are relative to the owning word first, the connected word second.
    Built once and never mutated afterwards.
    """

    def __init__(self, words: Iterable[str]):
        # Duplicates collapse to a single node, first occurrence wins.
        self._words: tuple[str, ...] = tuple(dict.fromkeys(words))
        self._connections: dict[str, list[Connection]] = {w: [] for w in self._words}
        self._build()

    @classmethod
    def build(cls, words: Iterable[str]) -> WordGraph:
        return cls(words)

    def _build(self) -> None:
        words = self._words
        for i, first in enumerate(words):
            for second in words[i + 1:]:
                points = find_all_intersections(first, second)
                if not points:
                    continue
                self._connections[first].append(Connection(second, tuple(points)))
                self._connections[second].append(
                    Connection(first, tuple(p.swapped() for p in points))
                )

        if logger.isEnabledFor(logging.DEBUG):
            for word in words:
                links = ", ".join(
                    f"{c.connected_word}[{len(c.intersections)}]"
                    for c in self._connections[word]
                )
                logger.debug("%s -> %s", word, links or "(none)")

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def connections(self, word: str) -> tuple[Connection, ...]:
        return tuple(self._connections[word])

    def connection_between(self, word: str, other: str) -> Optional[Connection]:
        for conn in self._connections.get(word, ()):
            if conn.connected_word == other:
                return conn
        return None

    def neighbours(self, word: str) -> list[str]:
        return [c.connected_word for c in self._connections[word]]

    def is_connected(self) -> bool:
        """True when every word is reachable from the first one."""
        return not self.unreachable_words()

    def unreachable_words(self) -> list[str]:
        """Words outside the component of the first word, in input order."""
        if not self._words:
            return []
        reached = set(_dfs(self, self._words[0]))
        return [w for w in self._words if w not in reached]

    def __contains__(self, word: object) -> bool:
        return word in self._connections

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


def _dfs(graph: WordGraph, start_word: str) -> list[str]:
    """Pre-order DFS following connections in stored order."""
    visited = {start_word}
    order = [start_word]
    stack = [iter(graph.neighbours(start_word))]
    while stack:
        for word in stack[-1]:
            if word not in visited:
                visited.add(word)
                order.append(word)
                stack.append(iter(graph.neighbours(word)))
                break
        else:
            stack.pop()
    return order


def placement_order(graph: WordGraph, start_word: str) -> list[str]:
    """Visit order from *start_word*; unreachable words follow in input order."""
    if start_word not in graph:
        raise KeyError(start_word)

    order = _dfs(graph, start_word)
    seen = set(order)
    order.extend(w for w in graph.words if w not in seen)
    return order
