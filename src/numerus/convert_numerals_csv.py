"""Convert a column of a CSV table between Roman numerals and integers.

This module is the batch front end of the converter: it reads a table,
converts every cell of one column and writes a copy of the table with the
results next to the original values. Chapter lists, regnal numbers and
copyright years typically arrive this way.

Invalid cells never stop the job. Their diagnostic is written to an error
column so they can be fixed by hand and the file converted again.
"""
from pathlib import Path
from typing import Optional, Tuple

import pandas as pd

from .common.errors import NumerusError
from .common.progress import ProgressPrinter
from .common.roman_numerals import convert_int_to_roman
from .common.validators import validate_csv_file, validate_directory
from .numeral import RomanNumeral

TO_INT = "to_int"
TO_ROMAN = "to_roman"
DIRECTIONS = (TO_INT, TO_ROMAN)


def _cell_to_int(cell) -> Tuple[Optional[int], str]:
    numeral = RomanNumeral(str(cell))
    return numeral.value, ""


def _cell_to_roman(cell) -> Tuple[Optional[str], str]:
    try:
        number = float(cell)
    except (TypeError, ValueError):
        return None, f"'{cell}' is not a number"
    if not number.is_integer():
        return None, f"'{cell}' is not a whole number"
    return convert_int_to_roman(int(number)), ""


def convert_cell(cell, direction: str = TO_INT) -> Tuple[Optional[object], str]:
    """Convert one table cell.

    Args:
        cell: Raw cell value as read by pandas
        direction: TO_INT (numeral to integer) or TO_ROMAN (integer to numeral)

    Returns:
        Tuple of (converted value, error message). Exactly one of the two is
        meaningful: the value is None when the message is non-empty. Missing
        cells give (None, "").
    """
    if pd.isna(cell):
        return None, ""

    converter = _cell_to_int if direction == TO_INT else _cell_to_roman
    try:
        return converter(cell)
    except NumerusError as e:
        return None, str(e)


def convert_numerals_csv(input_csv: str, column: str, output_csv: Optional[str] = None,
                         direction: str = TO_INT) -> str:
    """Convert one column of a CSV file and write the result to a new CSV.

    The output holds every original column plus:
    - <column>_converted: integer (TO_INT) or numeral (TO_ROMAN), empty on error
    - <column>_error: diagnostic for cells that could not be converted

    Args:
        input_csv: Path to the CSV file to read
        column: Name of the column to convert
        output_csv: Optional output path. Defaults to "<input stem>_converted.csv"
                    next to the input file.
        direction: TO_INT or TO_ROMAN

    Returns:
        str: Path to the written CSV file

    Raises:
        ValueError: If the input is not a CSV file, the column is missing,
                    the output folder does not exist or direction is unknown

    Example:
        Input chapters.csv with a "chapter" column holding I, II, IIII:
        chapters_converted.csv gains chapter_converted = 1, 2, <empty>
        and chapter_error = <empty>, <empty>, "'IIII' is not a valid ..."
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown conversion direction: {direction} (expected one of {', '.join(DIRECTIONS)})")

    input_path = Path(input_csv)
    validate_csv_file(input_path, "Numerals CSV")

    if output_csv is None:
        output_path = input_path.parent / f"{input_path.stem}_converted.csv"
    else:
        output_path = Path(output_csv)
    validate_directory(output_path.parent, "Output folder")

    # Read every cell as text so untouched columns are written back unchanged
    df = pd.read_csv(input_path, dtype=str)

    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in {input_path}. Available columns: {list(df.columns)}")

    converted = []
    errors = []
    progress = ProgressPrinter("Converting numerals", len(df), step=100)

    for i, cell in enumerate(df[column]):
        progress.update(i + 1)
        value, error = convert_cell(cell, direction)
        converted.append(value)
        errors.append(error)

    progress.done()

    df[f"{column}_converted"] = pd.Series(converted, index=df.index, dtype="object")
    df[f"{column}_error"] = errors

    df.to_csv(output_path, index=False)

    failed = sum(1 for error in errors if error)
    if failed:
        print(f"Warning: {failed} of {len(df)} cells could not be converted, see column '{column}_error'")
    print(f"\nConversion completed! Wrote {len(df)} rows to {output_path}")

    return str(output_path)
