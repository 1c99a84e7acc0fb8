"""Render a crossword layout to PDF using ReportLab.

Page 1: title banner, empty tiles with start labels, and the word lists
split by direction.  Page 2: answer key with every letter filled in.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from grid_builder import build_start_labels, build_word_lists
from models import PlacedWord, PuzzleLayout

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
MAX_CELL = 36.0


@dataclass
class LayoutParams:
    """Computed page measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN

    banner_h: float = 28.0
    banner_y: float = 0.0

    cols: int = 0
    rows: int = 0
    cell_size: float = MAX_CELL
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    list_font_size: float = 10.0
    list_zone_y: float = 0.0
    list_gutter: float = 18.0

    title: str = "CROSSWORD"


def render_pdf(layout: PuzzleLayout, title: str, output_path: str) -> None:
    """Draw page 1 (puzzle + word lists) and page 2 (answer key)."""
    from reportlab.pdfgen.canvas import Canvas

    params = _compute_layout(layout, title, grid_share=0.6)
    c = Canvas(output_path, pagesize=letter)

    _draw_title_banner(c, params)
    _draw_tiles(c, layout, params, show_answers=False)
    _draw_word_lists(c, layout, params)
    c.showPage()

    key = _compute_layout(layout, "ANSWER KEY", grid_share=0.9)
    _draw_title_banner(c, key)
    _draw_tiles(c, layout, key, show_answers=True)
    c.showPage()

    c.save()


def _compute_layout(layout: PuzzleLayout, title: str, grid_share: float) -> LayoutParams:
    """Fit the cropped grid into *grid_share* of the height below the banner."""
    lp = LayoutParams(title=title)
    bounds = layout.bounds()
    lp.cols = max(bounds.width, 1)
    lp.rows = max(bounds.height, 1)

    lp.banner_y = lp.page_h - lp.margin - lp.banner_h
    available_h = (lp.banner_y - 12 - lp.margin) * grid_share
    lp.cell_size = min(MAX_CELL, lp.usable_w / lp.cols, available_h / lp.rows)

    grid_w = lp.cell_size * lp.cols
    lp.grid_x = (lp.page_w - grid_w) / 2
    lp.grid_y = lp.banner_y - 12
    lp.list_zone_y = lp.grid_y - lp.cell_size * lp.rows - 18
    return lp


def _list_style(lp: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "WordListStyle",
        fontName="Helvetica",
        fontSize=lp.list_font_size,
        leading=lp.list_font_size + 2,
        spaceAfter=1.5,
    )


def _entry_markup(entry: PlacedWord) -> str:
    return f"<b>{entry.order_number}.</b> {entry.word} ({len(entry.word)})"


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, lp: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = lp.margin
    y = lp.banner_y
    w = lp.usable_w
    h = lp.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(lp.title, "Helvetica-Bold", 16)
    c.drawString(x + (w - text_w) / 2, y + (h - 16) / 2 + 2, lp.title)


def _draw_tiles(c, layout: PuzzleLayout, lp: LayoutParams, show_answers: bool) -> None:
    """One framed tile per occupied cell, start labels, optional letters."""
    bounds = layout.bounds()
    if bounds.is_empty:
        return

    labels = build_start_labels(layout.placed_words)
    cs = lp.cell_size

    for y in range(bounds.min_y, bounds.max_y + 1):
        for x in range(bounds.min_x, bounds.max_x + 1):
            ch = layout.cell(x, y)
            if ch is None:
                continue
            cx = lp.grid_x + (x - bounds.min_x) * cs
            cy = lp.grid_y - (y - bounds.min_y + 1) * cs

            c.setFillColorRGB(0.97, 0.97, 0.97)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.75)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            label = labels.get((x, y))
            if label is not None:
                size = cs * (0.3 if "-" not in label else 0.25)
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica-Bold", size)
                c.drawString(cx + cs * 0.1, cy + cs - size - cs * 0.05, label)

            if show_answers:
                font_size = cs * 0.45
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica", font_size)
                lw = stringWidth(ch, "Helvetica", font_size)
                c.drawString(cx + (cs - lw) / 2, cy + cs * 0.5 - font_size * 0.35, ch)


def _draw_word_lists(c, layout: PuzzleLayout, lp: LayoutParams) -> None:
    """Horizontal words in the left column, vertical words in the right."""
    horizontal, vertical = build_word_lists(layout.placed_words)
    style = _list_style(lp)
    col_w = (lp.usable_w - lp.list_gutter) / 2

    for i, (heading, entries) in enumerate((("HORIZONTAL", horizontal), ("VERTICAL", vertical))):
        x = lp.margin + i * (col_w + lp.list_gutter)
        current_y = _draw_section_header(c, heading, x, lp.list_zone_y, col_w) - 4
        for drawn, entry in enumerate(entries):
            p = Paragraph(_entry_markup(entry), style)
            _, h = p.wrap(col_w, 10000)
            if current_y - h < lp.margin:
                print(
                    f"Warning: {len(entries) - drawn} {heading.lower()} word(s) "
                    f"did not fit on the page and were left out of the PDF list",
                    file=sys.stderr,
                )
                break
            p.drawOn(c, x, current_y - h)
            current_y -= h + style.spaceAfter


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> float:
    """Black rect + white bold text. Returns y at bottom of header."""
    h = 14
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - h, width, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - h + 3.5, text)

    return y - h
