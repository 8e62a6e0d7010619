"""Path validation utilities for the numerus package.

This module checks the files and folders handed to the batch conversion
tool before any numeral is read, so a typo in a path fails fast with a
clear message instead of half-way through a table.
"""
from pathlib import Path


def validate_directory(path: Path, name: str = "Output folder") -> None:
    """Validate that the folder a converted numeral table goes to exists.

    The batch tool writes "<stem>_converted.csv" into this folder and never
    creates it, so a mistyped output path is reported before any cell is
    converted.

    Args:
        path: Folder that will receive the converted table
        name: Label used in the error message

    Raises:
        ValueError: If path does not exist or is not a directory
    """
    if not path.is_dir():
        raise ValueError(f"Error: {name} is not a valid directory: {path}")


def validate_csv_file(path: Path, name: str = "Numerals CSV") -> None:
    """Validate that a numeral table is an existing .csv file.

    The extension check ignores case, since tables exported from
    spreadsheets are often named "CHAPTERS.CSV".

    Args:
        path: Table holding the column of numerals or integers to convert
        name: Label used in the error message

    Raises:
        ValueError: If path does not exist, is not a file, or doesn't
                   have a .csv extension

    Example:
        >>> from pathlib import Path
        >>> validate_csv_file(Path("./chapters.csv"))
        # Raises ValueError if chapters.csv doesn't exist or isn't a CSV
    """
    if not path.is_file() or path.suffix.lower() != ".csv":
        raise ValueError(f"Error: {name} is not a valid CSV: {path}")
