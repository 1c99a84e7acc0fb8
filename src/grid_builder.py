"""Post-process a finished layout: crop to bounds, label start cells, list words."""

from __future__ import annotations

from typing import Optional

from models import Direction, PlacedWord, PuzzleLayout


def crop_rows(layout: PuzzleLayout) -> list[list[Optional[str]]]:
    """Rows of the grid restricted to the bounding box of occupied cells."""
    b = layout.bounds()
    if b.is_empty:
        return []
    return [
        [layout.cell(x, y) for x in range(b.min_x, b.max_x + 1)]
        for y in range(b.min_y, b.max_y + 1)
    ]


def build_start_labels(placed: list[PlacedWord]) -> dict[tuple[int, int], str]:
    """Map each start cell to its label.

    A single word gives its order number; words sharing a start cell give the
    sorted order numbers joined with ``-`` (e.g. ``"1-2"``).
    """
    groups: dict[tuple[int, int], list[int]] = {}
    for entry in placed:
        groups.setdefault((entry.start_x, entry.start_y), []).append(entry.order_number)

    return {
        pos: "-".join(str(n) for n in sorted(numbers))
        for pos, numbers in groups.items()
    }


def build_word_lists(
    placed: list[PlacedWord],
) -> tuple[list[PlacedWord], list[PlacedWord]]:
    """Split placed words by direction, each sorted by order number."""
    horizontal = [p for p in placed if p.direction == Direction.HORIZONTAL]
    vertical = [p for p in placed if p.direction == Direction.VERTICAL]
    horizontal.sort(key=lambda p: p.order_number)
    vertical.sort(key=lambda p: p.order_number)
    return horizontal, vertical


def relative_start(layout: PuzzleLayout, entry: PlacedWord) -> tuple[int, int]:
    """Start cell of *entry* relative to the cropped grid."""
    b = layout.bounds()
    return entry.start_x - b.min_x, entry.start_y - b.min_y


def format_grid(layout: PuzzleLayout, blank: str = ".") -> str:
    """Plain text rendering of the cropped grid, one line per row."""
    return "\n".join(
        "".join(letter or blank for letter in row) for row in crop_rows(layout)
    )
