"""Crossword layout generation: DFS placement order + single-intersection placement with restarts."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from grid import Grid
from models import (
    CrosswordError,
    Direction,
    GenerationFailed,
    IntersectionPoint,
    PlacedWord,
    PuzzleLayout,
)
from word_graph import WordGraph, placement_order

logger = logging.getLogger(__name__)

GRID_SCALE = 1.5
DEFAULT_MAX_RESTARTS = 1000
DEFAULT_FIRST_WORD_TRIES = 100


def compute_grid_size(words: Sequence[str]) -> int:
    """Side length of the working grid: 1.5x the total letter count, floored."""
    total = sum(len(w) for w in words)
    return int(total * GRID_SCALE)


@dataclass
class _Attempt:
    """State owned by one generation attempt; thrown away on restart."""

    grid: Grid
    rng: random.Random
    placed: list[PlacedWord] = field(default_factory=list)

    def commit(self, word: str, x: int, y: int, direction: Direction, order_number: int) -> None:
        self.grid.place(word, x, y, direction)
        self.placed.append(PlacedWord(word, x, y, direction, order_number))


class PuzzleGenerator:
    """Places a fixed word list on a grid, restarting from scratch on dead ends.

    The word graph is built once here and shared read-only by every attempt.
    """

    def __init__(
        self,
        words: Sequence[str],
        graph: WordGraph | None = None,
        max_restarts: int = DEFAULT_MAX_RESTARTS,
        max_first_word_tries: int = DEFAULT_FIRST_WORD_TRIES,
    ):
        if not words:
            raise CrosswordError("Word list is empty")
        if max_restarts < 1:
            raise ValueError("max_restarts must be at least 1")
        if max_first_word_tries < 1:
            raise ValueError("max_first_word_tries must be at least 1")
        self.words = list(words)
        self.graph = graph if graph is not None else WordGraph.build(self.words)
        self.grid_size = compute_grid_size(self.words)
        self.max_restarts = max_restarts
        self.max_first_word_tries = max_first_word_tries

    def generate(self, rng: random.Random | None = None) -> PuzzleLayout:
        """Run attempts until one places every word or the restart limit is hit.

        A word list whose graph is disconnected can never be laid out, since
        every word after the first must cross an earlier one; it fails
        before any attempt is made.
        """
        rng = rng if rng is not None else random.Random()

        unreachable = self.graph.unreachable_words()
        if unreachable:
            raise GenerationFailed(
                0,
                f"Words share no letters with the rest of the list: {', '.join(unreachable)}",
            )

        for attempt_no in range(1, self.max_restarts + 1):
            attempt = _Attempt(Grid.create(self.grid_size), rng)
            if self._single_attempt(attempt):
                logger.info("Placed %d words in %dx%d grid after %d attempt(s)",
                            len(attempt.placed), self.grid_size, self.grid_size, attempt_no)
                return PuzzleLayout(attempt.grid, attempt.placed, attempt_no)
            logger.info("Attempt %d failed, restarting", attempt_no)

        raise GenerationFailed(self.max_restarts)

    # ── Single attempt ────────────────────────────────────────────────

    def _single_attempt(self, attempt: _Attempt) -> bool:
        start_word = attempt.rng.choice(self.graph.words)
        order = placement_order(self.graph, start_word)
        logger.debug("Placement order: %s", " ".join(order))

        if not self._place_first_word(attempt, order[0]):
            return False

        for order_number, word in enumerate(order[1:], start=2):
            if not self._place_next_word(attempt, word, order_number):
                logger.debug("Could not place %s (step %d)", word, order_number)
                return False
        return True

    def _place_first_word(self, attempt: _Attempt, word: str) -> bool:
        """Center-biased start, then uniform resampling over the valid range."""
        rng, size = attempt.rng, self.grid_size
        direction = rng.choice((Direction.HORIZONTAL, Direction.VERTICAL))
        x = y = size // 2
        span = size - len(word)

        for _ in range(self.max_first_word_tries):
            if attempt.grid.can_place(word, x, y, direction):
                attempt.commit(word, x, y, direction, 1)
                return True
            if direction is Direction.HORIZONTAL:
                x, y = rng.randint(0, span), rng.randrange(size)
            else:
                x, y = rng.randrange(size), rng.randint(0, span)
        return False

    def _place_next_word(self, attempt: _Attempt, word: str, order_number: int) -> bool:
        last = attempt.placed[-1].direction
        for direction in (last.opposite, last):
            if self._try_direction(attempt, word, direction, order_number):
                return True
        return False

    def _try_direction(
        self, attempt: _Attempt, word: str, direction: Direction, order_number: int,
    ) -> bool:
        # Only perpendicular words can be crossed at a single cell.
        neighbours = [p for p in attempt.placed if p.direction is not direction]
        attempt.rng.shuffle(neighbours)

        for neighbour in neighbours:
            connection = self.graph.connection_between(word, neighbour.word)
            if connection is None:
                continue
            points = list(connection.intersections)
            attempt.rng.shuffle(points)
            for point in points:
                x, y = intersection_start(neighbour, point, direction)
                if attempt.grid.can_place(word, x, y, direction, target=neighbour):
                    attempt.commit(word, x, y, direction, order_number)
                    logger.debug("Placed %s %s at (%d,%d) across %s on '%s'",
                                 word, direction.value, x, y, neighbour.word, point.char)
                    return True
        return False


def intersection_start(
    neighbour: PlacedWord, point: IntersectionPoint, direction: Direction,
) -> tuple[int, int]:
    """Start cell of a new word crossing *neighbour* through *point*.

    ``point.index_in_first`` indexes the new word, ``index_in_second`` the neighbour.
    """
    new_idx, placed_idx = point.index_in_first, point.index_in_second
    if direction is Direction.HORIZONTAL:
        return neighbour.start_x - new_idx, neighbour.start_y + placed_idx
    return neighbour.start_x + placed_idx, neighbour.start_y - new_idx


def generate(
    words: Sequence[str],
    seed: int | None = None,
    rng: random.Random | None = None,
    max_restarts: int = DEFAULT_MAX_RESTARTS,
    max_first_word_tries: int = DEFAULT_FIRST_WORD_TRIES,
) -> PuzzleLayout:
    """Lay out *words*; the same *seed* always yields the same layout.

    Raises GenerationFailed when no attempt succeeds within *max_restarts*.
    """
    generator = PuzzleGenerator(
        words,
        max_restarts=max_restarts,
        max_first_word_tries=max_first_word_tries,
    )
    return generator.generate(rng if rng is not None else random.Random(seed))
