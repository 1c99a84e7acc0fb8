#!/usr/bin/env python3
"""CLI entry point for crossword layout generation.

Word list sources, in order of precedence:
  1. --words on the command line
  2. an input file (XLSX column A, or a text file with one word per line)
  3. the built-in sample list
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from models import CrosswordError, PuzzleLayout
from puzzle_generator import DEFAULT_MAX_RESTARTS, compute_grid_size, generate

SAMPLE_WORDS = ["SEAT", "EAST", "TEA", "SET", "EAT"]


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a crossword layout from a word list."
    )
    p.add_argument("input", nargs="?", default=None,
                   help="XLSX or text file with one word per row/line")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF path (default: crossword.pdf or input with .pdf extension)",
    )
    p.add_argument("--words", nargs="+", default=None, metavar="WORD",
                   help="Words to place (overrides the input file)")
    p.add_argument("--title", default="CROSSWORD",
                   help='Title text (default: "CROSSWORD")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--max-restarts", type=_positive_int, default=DEFAULT_MAX_RESTARTS,
                   help=f"Attempts before giving up (default: {DEFAULT_MAX_RESTARTS})")
    p.add_argument("--show", action="store_true",
                   help="Print the letter grid to stdout")
    p.add_argument("--verbose", action="store_true",
                   help="Log placement details to stderr")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        words = _load_words(args)
        output_path = args.output or (
            str(Path(args.input).with_suffix(".pdf")) if args.input else "crossword.pdf"
        )
        grid_size = compute_grid_size(words)
        print(f"Placing {len(words)} words on {grid_size}x{grid_size} grid (seed={seed})...",
              file=sys.stderr)

        layout = generate(words, seed=seed, max_restarts=args.max_restarts)

        if args.show:
            from grid_builder import format_grid
            print(format_grid(layout))

        _output_all(layout, args.title, output_path)

    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    elapsed = time.time() - t0
    bounds = layout.bounds()
    print(
        f"Placed {len(layout.placed_words)} words in {bounds.width}x{bounds.height}, "
        f"{layout.attempts} attempt(s), "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _load_words(args) -> list[str]:
    from word_reader import normalize_word, read_words, validate_words

    if args.words:
        return validate_words([normalize_word(w) for w in args.words])
    if args.input:
        words = read_words(args.input)
        print(f"Read {len(words)} valid words", file=sys.stderr)
        return words
    return list(SAMPLE_WORDS)


def _output_all(layout: PuzzleLayout, title: str, output_path: str) -> None:
    """Generate all output files in an 'output' folder: PDF, XLSX, puzzle SVG, answer SVG."""
    from pdf_renderer import render_pdf
    from xlsx_writer import write_layout_xlsx
    from svg_renderer import render_puzzle_svg, render_answer_svg

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_words.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(layout, title, pdf_path)
    write_layout_xlsx(layout, xlsx_path)
    render_puzzle_svg(layout, puzzle_svg_path)
    render_answer_svg(layout, answer_svg_path)

    for path in (pdf_path, xlsx_path, puzzle_svg_path, answer_svg_path):
        print(f"Output: {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
