"""Tests for numerus.convert_numerals_csv batch conversion."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from numerus.convert_numerals_csv import TO_INT, TO_ROMAN, convert_cell, convert_numerals_csv


def _write_csv(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


def _read_output(path: str) -> pd.DataFrame:
    return pd.read_csv(path, dtype=str, keep_default_na=False)


class TestConvertCell:
    def test_numeral_to_int(self) -> None:
        assert convert_cell(" xlii ", TO_INT) == (42, "")

    def test_invalid_numeral(self) -> None:
        value, error = convert_cell("IIII", TO_INT)
        assert value is None
        assert "IIII" in error

    def test_int_to_numeral(self) -> None:
        assert convert_cell("1994", TO_ROMAN) == ("MCMXCIV", "")
        assert convert_cell(12.0, TO_ROMAN) == ("XII", "")

    @pytest.mark.parametrize("cell, message", [("abc", "not a number"), ("2.5", "not a whole number"), ("4000", "out of range")])
    def test_invalid_number(self, cell: str, message: str) -> None:
        value, error = convert_cell(cell, TO_ROMAN)
        assert value is None
        assert message in error

    def test_missing_cell(self) -> None:
        assert convert_cell(float("nan"), TO_INT) == (None, "")


class TestConvertNumeralsCsv:
    def test_numerals_to_integers(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        input_csv = _write_csv(
            tmp_path / "chapters.csv",
            "title,chapter\nIntroduction,I\nMethods,ii\nBlank,\nBroken,IIII\nResults,XLII\n",
        )

        output = convert_numerals_csv(str(input_csv), "chapter")

        assert output == str(tmp_path / "chapters_converted.csv")
        df = _read_output(output)
        assert list(df.columns) == ["title", "chapter", "chapter_converted", "chapter_error"]
        assert list(df["title"]) == ["Introduction", "Methods", "Blank", "Broken", "Results"]
        assert list(df["chapter_converted"]) == ["1", "2", "", "", "42"]
        assert df["chapter_error"][3].startswith("'IIII' is not a valid Roman numeral")
        assert list(df["chapter_error"][[0, 1, 2, 4]]) == ["", "", "", ""]
        assert "1 of 5 cells could not be converted" in capsys.readouterr().out

    def test_integers_to_numerals(self, tmp_path: Path) -> None:
        input_csv = _write_csv(tmp_path / "years.csv", "year\n1994\n2015\nabc\n4000\n")
        output_csv = tmp_path / "out.csv"

        output = convert_numerals_csv(str(input_csv), "year", str(output_csv), direction=TO_ROMAN)

        assert output == str(output_csv)
        df = _read_output(output)
        assert list(df["year"]) == ["1994", "2015", "abc", "4000"]
        assert list(df["year_converted"]) == ["MCMXCIV", "MMXV", "", ""]
        assert "not a number" in df["year_error"][2]
        assert "out of range" in df["year_error"][3]

    def test_missing_column(self, tmp_path: Path) -> None:
        input_csv = _write_csv(tmp_path / "chapters.csv", "title\nIntroduction\n")
        with pytest.raises(ValueError, match="Column 'chapter' not found"):
            convert_numerals_csv(str(input_csv), "chapter")

    def test_not_a_csv(self, tmp_path: Path) -> None:
        input_file = _write_csv(tmp_path / "chapters.txt", "chapter\nI\n")
        with pytest.raises(ValueError, match="not a valid CSV"):
            convert_numerals_csv(str(input_file), "chapter")

    def test_missing_output_folder(self, tmp_path: Path) -> None:
        input_csv = _write_csv(tmp_path / "chapters.csv", "chapter\nI\n")
        with pytest.raises(ValueError, match="not a valid directory"):
            convert_numerals_csv(str(input_csv), "chapter", str(tmp_path / "missing" / "out.csv"))

    def test_unknown_direction(self, tmp_path: Path) -> None:
        input_csv = _write_csv(tmp_path / "chapters.csv", "chapter\nI\n")
        with pytest.raises(ValueError, match="Unknown conversion direction"):
            convert_numerals_csv(str(input_csv), "chapter", direction="sideways")
