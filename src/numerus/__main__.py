"""Main entry point for the numerus package."""
import sys
import json
import argparse
from pathlib import Path
from typing import Optional

from .common.config import DEFAULT_STORE_PATH, NUMERUS_DEBUG
from .common.errors import NumerusError, NumeralStorageError, RomanFormatError
from .common.syntax import check_roman_syntax, normalize_numeral
from .convert_numerals_csv import DIRECTIONS, TO_INT, convert_numerals_csv
from .numeral import RomanNumeral
from .storage import read_numerals, save_numerals


def print_menu():
    """Print the main menu."""
    print("\n=== Numerus Roman Numeral Tool ===\n")
    print("1. Convert numeral to integer")
    print("2. Convert integer to numeral")
    print("3. Check numeral syntax")
    print("4. Convert a CSV column")
    print("5. Save numeral to store")
    print("6. Load numerals from store")
    print("0. Exit")


def load_config(config_path: Optional[str]) -> dict:
    """Load configuration from JSON file, or defaults when no file is given."""
    config = {"store_path": DEFAULT_STORE_PATH}
    if config_path is None:
        return config

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        loaded = json.load(f)

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must hold a JSON object: {config_path}")
    config.update(loaded)
    return config


def print_format_error(error: RomanFormatError) -> None:
    """Print a rejected numeral, one problem per line in debug mode."""
    print(f"Error: {error}")
    if NUMERUS_DEBUG and error.report is not None:
        for problem in error.report.problems:
            print(f"  - {problem.kind}: {', '.join(problem.fragments) or '(none)'}")


def main():
    """Main menu for numeral conversion functions."""
    parser = argparse.ArgumentParser(description='Numerus Roman Numeral Tool')
    parser.add_argument('--config', help='Path to configuration JSON file')
    args = parser.parse_args()

    try:
        config = load_config(args.config)
        if args.config:
            print(f"Loaded configuration from: {args.config}")
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        sys.exit(1)

    while True:
        print_menu()
        try:
            choice = input("\nEnter your choice (0-6): ").strip()
        except (KeyboardInterrupt, EOFError):
            sys.exit(0)

        if choice == "0":
            sys.exit(0)
        elif choice == "1":
            run_numeral_to_int()
        elif choice == "2":
            run_int_to_numeral()
        elif choice == "3":
            run_check_syntax()
        elif choice == "4":
            run_convert_csv()
        elif choice == "5":
            run_save_numeral(config)
        elif choice == "6":
            run_load_numerals(config)
        else:
            print("Invalid choice. Please try again.")


def run_numeral_to_int():
    """Run the numeral to integer conversion."""
    print("\n--- Convert numeral to integer ---")

    try:
        numeral = RomanNumeral(input("Roman numeral: "))
        print(f"{numeral} = {numeral.value}")
    except RomanFormatError as e:
        print_format_error(e)
    except NumerusError as e:
        print(f"Error: {e}")


def run_int_to_numeral():
    """Run the integer to numeral conversion."""
    print("\n--- Convert integer to numeral ---")

    try:
        value = int(input("Integer (0-3999): ").strip())
        numeral = RomanNumeral.from_int(value)
        print(f"{value} = {numeral}")
    except ValueError as e:
        print(f"Error: {e}")


def run_check_syntax():
    """Run the syntax check and show every problem found."""
    print("\n--- Check numeral syntax ---")

    report = check_roman_syntax(normalize_numeral(input("Roman numeral: ")))
    if report.is_valid:
        print(f"'{report.numeral}' is a correct Roman numeral")
        return

    print(f"'{report.numeral}' is not a correct Roman numeral:")
    for problem in report.problems:
        print(f"  - {problem.describe()}")


def run_convert_csv():
    """Run the CSV column conversion."""
    print("\n--- Convert a CSV column ---")

    try:
        input_csv = input("Input CSV: ").strip()
        column = input("Column: ").strip()
        direction = input(f"Direction ({'/'.join(DIRECTIONS)}) [{TO_INT}]: ").strip() or TO_INT
        output_file = convert_numerals_csv(input_csv, column, direction=direction)
        print(f"Success! Output file: {output_file}")
    except (OSError, ValueError) as e:
        print(f"Error: {e}")


def run_save_numeral(config):
    """Append a numeral to the store file."""
    print("\n--- Save numeral to store ---")

    store_path = Path(config['store_path'])
    try:
        numeral = RomanNumeral(input("Roman numeral: "))
        numerals = read_numerals(store_path) if store_path.exists() else []
        numerals.append(numeral)
        save_numerals(numerals, store_path)
        print(f"Success! Saved {numeral} to {store_path} ({len(numerals)} numerals stored)")
    except RomanFormatError as e:
        print_format_error(e)
    except NumeralStorageError as e:
        print(f"Error: {e}")


def run_load_numerals(config):
    """List every numeral in the store file."""
    print("\n--- Load numerals from store ---")

    store_path = Path(config['store_path'])
    try:
        numerals = read_numerals(store_path)
    except RomanFormatError as e:
        print_format_error(e)
        return
    except NumeralStorageError as e:
        print(f"Error: {e}")
        return

    if not numerals:
        print(f"No numerals stored in {store_path}")
        return

    for numeral in numerals:
        print(f"  {numeral} = {numeral.value}")


if __name__ == "__main__":
    main()
