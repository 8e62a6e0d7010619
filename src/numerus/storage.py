"""Saving and loading Roman numerals as JSON.

A numeral is stored as a small JSON record holding only its text:

    {"numeral": "MMXV"}

The integer value is never stored; it is recomputed on load. Loading never
trusts the stored text: every record goes through RomanNumeral.set_numeral,
so a hand-edited or corrupted file fails with RomanFormatError instead of
producing an invalid container.
"""
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from .common.errors import NumeralStorageError
from .numeral import RomanNumeral


class NumeralRecord(BaseModel):
    """Persisted form of one RomanNumeral."""
    numeral: str


_record_adapter = TypeAdapter(NumeralRecord)
_records_adapter = TypeAdapter(List[NumeralRecord])


def _to_record(numeral: RomanNumeral) -> NumeralRecord:
    return NumeralRecord(numeral=numeral.numeral)


def _from_record(record: NumeralRecord) -> RomanNumeral:
    restored = RomanNumeral()
    restored.set_numeral(record.numeral)
    return restored


def dump_numeral(numeral: RomanNumeral) -> bytes:
    """Serialize a numeral to UTF-8 JSON bytes."""
    return _record_adapter.dump_json(_to_record(numeral))


def load_numeral(data: Union[bytes, str]) -> RomanNumeral:
    """Restore a numeral from JSON produced by dump_numeral.

    Args:
        data: JSON bytes or text

    Returns:
        A new RomanNumeral holding the stored numeral

    Raises:
        NumeralStorageError: If data is not JSON or not a numeral record
        RomanFormatError: If the stored numeral is not a correct Roman numeral
    """
    try:
        record = _record_adapter.validate_json(data)
    except ValidationError as e:
        raise NumeralStorageError(f"Stored numeral is malformed: {e}") from e
    return _from_record(record)


def dump_numerals(numerals: Iterable[RomanNumeral]) -> bytes:
    """Serialize several numerals to one JSON array."""
    return _records_adapter.dump_json([_to_record(numeral) for numeral in numerals])


def load_numerals(data: Union[bytes, str]) -> List[RomanNumeral]:
    """Restore a list of numerals produced by dump_numerals.

    Raises:
        NumeralStorageError: If data is not a JSON array of numeral records
        RomanFormatError: If any stored numeral is not a correct Roman numeral
    """
    try:
        records = _records_adapter.validate_json(data)
    except ValidationError as e:
        raise NumeralStorageError(f"Stored numerals are malformed: {e}") from e
    return [_from_record(record) for record in records]


def _write_bytes(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as e:
        raise NumeralStorageError(f"Cannot write numerals to {path}: {e}") from e


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise NumeralStorageError(f"Cannot read numerals from {path}: {e}") from e


def save_numeral(numeral: RomanNumeral, path: Union[str, Path]) -> Path:
    """Write one numeral to a JSON file.

    Args:
        numeral: Container to save
        path: Destination file, overwritten if it exists

    Returns:
        Path: The file written

    Raises:
        NumeralStorageError: If the file cannot be written
    """
    path = Path(path)
    _write_bytes(path, dump_numeral(numeral))
    return path


def read_numeral(path: Union[str, Path]) -> RomanNumeral:
    """Read one numeral from a JSON file written by save_numeral.

    Raises:
        NumeralStorageError: If the file cannot be read or is malformed
        RomanFormatError: If the stored numeral is not a correct Roman numeral
    """
    return load_numeral(_read_bytes(Path(path)))


def save_numerals(numerals: Iterable[RomanNumeral], path: Union[str, Path]) -> Path:
    """Write several numerals to one JSON file, replacing its contents."""
    path = Path(path)
    _write_bytes(path, dump_numerals(numerals))
    return path


def read_numerals(path: Union[str, Path]) -> List[RomanNumeral]:
    """Read every numeral from a JSON file written by save_numerals."""
    return load_numerals(_read_bytes(Path(path)))
