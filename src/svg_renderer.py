"""Render a crossword layout as standalone SVG."""

from __future__ import annotations

from grid_builder import build_start_labels
from models import PuzzleLayout


def render_svg(
    layout: PuzzleLayout,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the occupied part of the grid to an SVG file, one tile per letter."""
    bounds = layout.bounds()
    if cell_size is None:
        cell_size = _default_cell_size(max(bounds.width, bounds.height))

    label_font = cell_size * 0.3
    letter_font = cell_size * 0.45
    width = cell_size * bounds.width
    height = cell_size * bounds.height
    labels = build_start_labels(layout.placed_words)

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )

    if not bounds.is_empty:
        for y in range(bounds.min_y, bounds.max_y + 1):
            for x in range(bounds.min_x, bounds.max_x + 1):
                letter = layout.cell(x, y)
                if letter is None:
                    continue
                tx = (x - bounds.min_x) * cell_size
                ty = (y - bounds.min_y) * cell_size
                parts.append(
                    f'  <rect x="{tx}" y="{ty}" width="{cell_size}" '
                    f'height="{cell_size}" fill="#f8f8f8" '
                    f'stroke="black" stroke-width="1"/>\n'
                )

                label = labels.get((x, y))
                if label is not None:
                    # Shared start cells carry a longer label in a smaller font
                    size = label_font if "-" not in label else cell_size * 0.25
                    parts.append(
                        f'  <text x="{tx + cell_size * 0.1}" y="{ty + size + cell_size * 0.05}" '
                        f'font-family="Arial, Helvetica, sans-serif" '
                        f'font-weight="bold" font-size="{size}" '
                        f'fill="black">{label}</text>\n'
                    )

                if show_answers:
                    parts.append(
                        f'  <text x="{tx + cell_size / 2}" y="{ty + cell_size / 2}" '
                        f'text-anchor="middle" dominant-baseline="central" '
                        f'font-family="Arial, Helvetica, sans-serif" '
                        f'font-size="{letter_font}" '
                        f'fill="black">{letter}</text>\n'
                    )

    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(layout: PuzzleLayout, output_path: str) -> None:
    """Render empty tiles with start labels only."""
    render_svg(layout, output_path, show_answers=False)


def render_answer_svg(layout: PuzzleLayout, output_path: str) -> None:
    """Render tiles with their letters."""
    render_svg(layout, output_path, show_answers=True)


def _default_cell_size(extent: int) -> float:
    if extent <= 10:
        return 50.0
    elif extent <= 20:
        return 32.0
    else:
        return 24.0
