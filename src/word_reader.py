"""Read and validate word lists from an XLSX workbook or a plain text file."""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import CrosswordError

HEADER_NAMES = {"WORD", "WORDS", "ANSWER", "ANSWERS"}


def read_words(path: str | Path, min_length: int = 2) -> list[str]:
    """Open *path*, parse one word per row/line, normalize and validate."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    if path.suffix.lower() == ".xlsx":
        raw = _read_xlsx(path)
    else:
        raw = _read_text(path)

    words = [w for w in (normalize_word(r) for r in raw) if w]
    return validate_words(words, min_length)


def _read_xlsx(path: Path) -> list[str]:
    """Column A of the active sheet, skipping a header row if present."""
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    values: list[str] = []
    for i, row in enumerate(ws.iter_rows(min_col=1, max_col=1, values_only=True)):
        value = row[0]
        if value is None:
            continue
        text = str(value).strip()
        if i == 0 and _is_header(text):
            continue
        values.append(text)

    wb.close()
    return values


def _read_text(path: Path) -> list[str]:
    """One word per line; blank lines and ``#`` comments ignored."""
    lines = path.read_text(encoding="utf-8").splitlines()
    return [ln.strip() for ln in lines if ln.strip() and not ln.lstrip().startswith("#")]


def _is_header(text: str) -> bool:
    return text.upper() in HEADER_NAMES


def normalize_word(raw: str) -> str:
    """Uppercase, strip everything except letters."""
    return "".join(c for c in raw.upper() if c.isalpha())


def validate_words(words: list[str], min_length: int = 2) -> list[str]:
    """Drop short words and duplicates, error if none remain."""
    seen: set[str] = set()
    result: list[str] = []

    for word in words:
        if len(word) < min_length:
            print(
                f"Warning: skipping '{word}' (too short, <{min_length} letters)",
                file=sys.stderr,
            )
            continue
        if word in seen:
            print(f"Warning: duplicate word '{word}', skipping", file=sys.stderr)
            continue
        seen.add(word)
        result.append(word)

    if not result:
        raise CrosswordError("No valid words after filtering")

    return result
