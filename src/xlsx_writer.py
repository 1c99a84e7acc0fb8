"""Write a crossword layout to an XLSX workbook."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Alignment, Font

from grid_builder import build_word_lists, crop_rows, relative_start
from models import PuzzleLayout


def write_layout_xlsx(layout: PuzzleLayout, output_path: str) -> None:
    """Write the placed words and the cropped letter grid.

    Sheet "Words": one row per word, grouped HORIZONTAL then VERTICAL, with
    the start cell relative to the cropped grid.  Sheet "Grid": one letter
    per cell, empty cells left blank.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Words"

    header_font = Font(bold=True, size=12)
    horizontal, vertical = build_word_lists(layout.placed_words)

    for col, name in enumerate(("Number", "Word", "Direction", "X", "Y"), start=1):
        ws.cell(row=1, column=col, value=name).font = header_font

    row = 2
    for entry in horizontal + vertical:
        x, y = relative_start(layout, entry)
        ws.cell(row=row, column=1, value=entry.order_number)
        ws.cell(row=row, column=2, value=entry.word)
        ws.cell(row=row, column=3, value=entry.direction.name)
        ws.cell(row=row, column=4, value=x)
        ws.cell(row=row, column=5, value=y)
        row += 1

    ws.column_dimensions["B"].width = 20
    ws.column_dimensions["C"].width = 14

    # Letter grid sheet
    ws2 = wb.create_sheet(title="Grid")
    center = Alignment(horizontal="center", vertical="center")
    for r, letters in enumerate(crop_rows(layout), start=1):
        for c, ch in enumerate(letters, start=1):
            if ch is None:
                continue
            cell = ws2.cell(row=r, column=c, value=ch)
            cell.alignment = center

    wb.save(output_path)
