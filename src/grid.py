"""Square letter grid with the placement rules for new words."""

from __future__ import annotations

import logging
from typing import Optional

from models import Bounds, Direction, PlacedWord

logger = logging.getLogger(__name__)

Cells = list[list[Optional[str]]]


class Grid:
    """A ``size`` x ``size`` board addressed as ``cells[y][x]``."""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.cells: Cells = [[None] * size for _ in range(size)]
        self.word_count = 0

    @classmethod
    def create(cls, size: int) -> Grid:
        return cls(size)

    @property
    def rows(self) -> Cells:
        return [row[:] for row in self.cells]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> Optional[str]:
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def _occupied(self, x: int, y: int) -> bool:
        return self.get(x, y) is not None

    # ── Validation ────────────────────────────────────────────────────

    def can_place(
        self,
        word: str,
        x: int,
        y: int,
        direction: Direction,
        target: PlacedWord | None = None,
    ) -> bool:
        """Check bounds, letters, adjacency and intersection rules for *word*."""
        length = len(word)
        dx, dy = direction.step
        # Perpendicular offsets
        px, py = dy, dx

        end_x, end_y = x + dx * (length - 1), y + dy * (length - 1)
        if not (self.in_bounds(x, y) and self.in_bounds(end_x, end_y)):
            return False

        intersections = 0
        on_target = 0
        for i, letter in enumerate(word):
            cx, cy = x + dx * i, y + dy * i
            existing = self.cells[cy][cx]

            if existing is not None:
                if existing != letter:
                    logger.debug("Rejected %s at (%d,%d): conflicts with '%s' at (%d,%d)",
                                 word, x, y, existing, cx, cy)
                    return False
                intersections += 1
                if target is not None and self.is_position_in_word(cx, cy, target):
                    on_target += 1
            elif self._occupied(cx + px, cy + py) or self._occupied(cx - px, cy - py):
                logger.debug("Rejected %s at (%d,%d): touches a parallel letter at (%d,%d)",
                             word, x, y, cx, cy)
                return False

        if self._occupied(x - dx, y - dy) or self._occupied(end_x + dx, end_y + dy):
            logger.debug("Rejected %s at (%d,%d): would run into an existing word",
                         word, x, y)
            return False

        if target is not None and (intersections != 1 or on_target != 1):
            logger.debug("Rejected %s at (%d,%d): %d intersections, %d with %s",
                         word, x, y, intersections, on_target, target.word)
            return False

        if self.word_count > 0:
            if intersections == 0:
                logger.debug("Rejected %s at (%d,%d): not connected", word, x, y)
                return False
            if intersections == length:
                logger.debug("Rejected %s at (%d,%d): fully embedded", word, x, y)
                return False

        return True

    # ── Mutation ──────────────────────────────────────────────────────

    def place(self, word: str, x: int, y: int, direction: Direction) -> None:
        """Write *word* without validation; call ``can_place`` first."""
        dx, dy = direction.step
        for i, letter in enumerate(word):
            self.cells[y + dy * i][x + dx * i] = letter
        self.word_count += 1

    # ── Queries ───────────────────────────────────────────────────────

    @staticmethod
    def is_position_in_word(x: int, y: int, placed: PlacedWord) -> bool:
        length = len(placed.word)
        if placed.direction is Direction.HORIZONTAL:
            return y == placed.start_y and placed.start_x <= x < placed.start_x + length
        return x == placed.start_x and placed.start_y <= y < placed.start_y + length

    def bounds(self) -> Bounds:
        """Bounding box of non-empty cells; empty range when the grid is blank."""
        min_x = min_y = self.size
        max_x = max_y = -1
        for y, row in enumerate(self.cells):
            for x, letter in enumerate(row):
                if letter is not None:
                    min_x, max_x = min(min_x, x), max(max_x, x)
                    min_y, max_y = min(min_y, y), max(max_y, y)
        return Bounds(min_x, max_x, min_y, max_y)

    def __str__(self) -> str:
        return "\n".join("".join(c or "." for c in row) for row in self.cells)
