"""Tests for puzzle_generator.py."""

import random

import pytest

from models import (
    CrosswordError,
    Direction,
    GenerationFailed,
    IntersectionPoint,
    PlacedWord,
)
from puzzle_generator import (
    PuzzleGenerator,
    compute_grid_size,
    generate,
    intersection_start,
)
from word_graph import WordGraph

SAMPLE = ["SEAT", "EAST", "TEA", "SET", "EAT"]
LARGER = ["PYTHON", "NOTE", "TONE", "STONE", "ONSET", "HONEST", "PHONE", "OPEN"]


def _assert_valid_layout(layout, words):
    """Check the layout invariants against the placed word list."""
    placed = sorted(layout.placed_words, key=lambda p: p.order_number)
    assert [p.order_number for p in placed] == list(range(1, len(words) + 1))
    assert sorted(p.word for p in placed) == sorted(words)

    # Every letter of every word is on the grid
    for entry in placed:
        for ch, (x, y) in zip(entry.word, entry.cells()):
            assert layout.cell(x, y) == ch

    earlier: dict[tuple[int, int], list[str]] = {}
    for k, entry in enumerate(placed):
        cells = list(entry.cells())
        shared = [c for c in cells if c in earlier]
        if k == 0:
            assert shared == []
        else:
            # Exactly one shared cell, owned by exactly one earlier word
            assert len(shared) == 1
            assert len(earlier[shared[0]]) == 1
            assert len(shared) < len(cells)
        for c in cells:
            earlier.setdefault(c, []).append(entry.word)

    # Nothing on the grid that no word accounts for
    occupied = {(x, y) for y, row in enumerate(layout.rows)
                for x, ch in enumerate(row) if ch is not None}
    assert occupied == set(earlier)


class TestComputeGridSize:
    def test_single_word(self):
        assert compute_grid_size(["ABC"]) == 4

    def test_sample(self):
        assert compute_grid_size(SAMPLE) == 25


class TestIntersectionStart:
    def test_vertical_through_horizontal(self):
        seat = PlacedWord("SEAT", 2, 2, Direction.HORIZONTAL, 1)
        # EAST's E (index 0) on SEAT's E (index 1)
        assert intersection_start(seat, IntersectionPoint(0, 1, "E"),
                                  Direction.VERTICAL) == (3, 2)

    def test_horizontal_through_vertical(self):
        east = PlacedWord("EAST", 3, 2, Direction.VERTICAL, 2)
        # TEA's A (index 2) on EAST's A (index 1)
        assert intersection_start(east, IntersectionPoint(2, 1, "A"),
                                  Direction.HORIZONTAL) == (1, 3)


class TestGenerate:
    def test_sample_words(self):
        layout = generate(SAMPLE, seed=42)
        assert layout.size == 25
        _assert_valid_layout(layout, SAMPLE)

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_larger_list(self, seed):
        layout = generate(LARGER, seed=seed)
        _assert_valid_layout(layout, LARGER)

    def test_directions_alternate_from_first(self):
        layout = generate(SAMPLE, seed=11)
        first, second = layout.placed_words[:2]
        assert first.direction != second.direction

    def test_determinism(self):
        a = generate(SAMPLE, seed=123)
        b = generate(SAMPLE, seed=123)
        assert a.placed_words == b.placed_words
        assert a.rows == b.rows
        assert a.attempts == b.attempts

    def test_shared_rng(self):
        a = generate(LARGER, rng=random.Random(9))
        b = generate(LARGER, rng=random.Random(9))
        assert a.placed_words == b.placed_words

    def test_single_word(self):
        layout = generate(["ABC"], seed=3)
        assert layout.size == 4
        assert len(layout.placed_words) == 1
        entry = layout.placed_words[0]
        assert entry.order_number == 1
        assert all(0 <= x < 4 and 0 <= y < 4 for x, y in entry.cells())
        assert "".join(layout.cell(x, y) for x, y in entry.cells()) == "ABC"

    def test_disconnected_words_fail_before_any_attempt(self):
        with pytest.raises(GenerationFailed, match="DOG") as exc:
            generate(["CAT", "DOG"], seed=1)
        assert exc.value.attempts == 0

    def test_disconnected_groups_name_unreachable_words(self):
        with pytest.raises(GenerationFailed, match="DOG, GOD"):
            generate(["CAT", "ACT", "DOG", "GOD"], seed=1)

    def test_restart_limit_exhausted(self):
        # Connected, but a single letter crossing AB is always fully embedded
        with pytest.raises(GenerationFailed) as exc:
            generate(["A", "B", "AB"], seed=1, max_restarts=3)
        assert exc.value.attempts == 3

    def test_empty_list(self):
        with pytest.raises(CrosswordError):
            generate([])

    def test_duplicates_placed_once(self):
        layout = generate(["SEAT", "SEAT", "EAST"], seed=5)
        assert layout.size == 18
        assert sorted(p.word for p in layout.placed_words) == ["EAST", "SEAT"]


class TestPuzzleGenerator:
    def test_graph_built_once(self):
        gen = PuzzleGenerator(SAMPLE)
        graph = gen.graph
        gen.generate(random.Random(1))
        gen.generate(random.Random(2))
        assert gen.graph is graph

    def test_accepts_prebuilt_graph(self):
        graph = WordGraph(SAMPLE)
        gen = PuzzleGenerator(SAMPLE, graph=graph)
        assert gen.graph is graph
        _assert_valid_layout(gen.generate(random.Random(8)), SAMPLE)

    def test_invalid_restart_limit(self):
        with pytest.raises(ValueError):
            PuzzleGenerator(SAMPLE, max_restarts=0)

    def test_invalid_first_word_tries(self):
        with pytest.raises(ValueError):
            PuzzleGenerator(SAMPLE, max_first_word_tries=0)

    def test_attempts_recorded(self):
        layout = PuzzleGenerator(SAMPLE).generate(random.Random(4))
        assert layout.attempts >= 1
