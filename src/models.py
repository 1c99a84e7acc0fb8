"""Data models for the crossword layout generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from grid import Grid


class Direction(Enum):
    HORIZONTAL = "H"
    VERTICAL = "V"

    @property
    def opposite(self) -> Direction:
        return Direction.VERTICAL if self is Direction.HORIZONTAL else Direction.HORIZONTAL

    @property
    def step(self) -> tuple[int, int]:
        """(dx, dy) between consecutive letters."""
        return (1, 0) if self is Direction.HORIZONTAL else (0, 1)


@dataclass(frozen=True)
class IntersectionPoint:
    """Positions in two words that hold the same letter."""

    index_in_first: int
    index_in_second: int
    char: str

    def swapped(self) -> IntersectionPoint:
        return IntersectionPoint(self.index_in_second, self.index_in_first, self.char)


@dataclass(frozen=True)
class Connection:
    """An edge of the word graph, seen from the word that owns it."""

    connected_word: str
    intersections: tuple[IntersectionPoint, ...]


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the grid. ``order_number`` is 1-based."""

    word: str
    start_x: int
    start_y: int
    direction: Direction
    order_number: int

    def cells(self) -> Iterator[tuple[int, int]]:
        dx, dy = self.direction.step
        for i in range(len(self.word)):
            yield self.start_x + dx * i, self.start_y + dy * i


@dataclass(frozen=True)
class Bounds:
    """Bounding box of the occupied cells, inclusive on both ends."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> int:
        return 0 if self.is_empty else self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return 0 if self.is_empty else self.max_y - self.min_y + 1


@dataclass
class PuzzleLayout:
    """Finished layout: the grid of the successful attempt and its placed words."""

    grid: Grid
    placed_words: list[PlacedWord] = field(default_factory=list)
    attempts: int = 1

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def rows(self) -> list[list[Optional[str]]]:
        """The ``grid[y][x]`` matrix."""
        return self.grid.rows

    def cell(self, x: int, y: int) -> Optional[str]:
        return self.grid.get(x, y)

    def bounds(self) -> Bounds:
        return self.grid.bounds()


class CrosswordError(Exception):
    """Fatal error during crossword generation."""


class GenerationFailed(CrosswordError):
    """No valid layout was found within the restart limit."""

    def __init__(self, attempts: int, message: str | None = None):
        self.attempts = attempts
        super().__init__(message or f"No valid layout found after {attempts} attempts")
