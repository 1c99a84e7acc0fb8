"""Integration tests: end-to-end word list → output files."""

import pytest

from crossword_generator import main


@pytest.mark.slow
class TestEndToEnd:
    def test_text_file_to_outputs(self, tmp_path):
        words = tmp_path / "words.txt"
        words.write_text("SEAT\nEAST\nTEA\nSET\nEAT\n", encoding="utf-8")
        out = tmp_path / "puzzle.pdf"

        main([str(words), str(out), "--seed", "42"])

        out_dir = tmp_path / "output"
        pdf = out_dir / "puzzle.pdf"
        assert pdf.exists()
        assert pdf.read_bytes()[:5] == b"%PDF-"
        assert (out_dir / "puzzle_words.xlsx").exists()
        assert (out_dir / "puzzle_puzzle.svg").exists()
        assert (out_dir / "puzzle_answer.svg").exists()

    def test_default_word_list(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main(["--seed", "7", "--show"])
        assert (tmp_path / "output" / "crossword.pdf").exists()
        captured = capsys.readouterr()
        assert "Placed 5 words" in captured.err
        assert "S" in captured.out
        assert set(captured.out) <= set("SEAT.\n")

    def test_words_option(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["--words", "seat", "east", "tea", "--seed", "3"])
        assert (tmp_path / "output" / "crossword_answer.svg").exists()

    def test_disconnected_words_exit(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main(["--words", "CAT", "DOG"])
        assert exc.value.code == 1
        assert "share no letters" in capsys.readouterr().err

    def test_max_restarts_must_be_positive(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main(["--max-restarts", "0"])
        assert exc.value.code == 2
        assert "must be at least 1" in capsys.readouterr().err
        assert not (tmp_path / "output").exists()

    def test_missing_input_exit(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "missing.xlsx")])
