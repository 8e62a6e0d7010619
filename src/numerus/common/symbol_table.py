"""Roman numeral symbol table for the numerus package.

This module holds the fixed set of symbol units used by both the syntax
validator and the converter: the seven letters plus the six subtractive
pairs (CM, CD, XC, XL, IX, IV), ordered from largest to smallest value.
Everything here is built once at import time and never modified.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


# Roman symbol units in descending order of value
# Include subtractive pairs so conversion can be greedy
ROMAN_UNITS: Tuple[Tuple[str, int], ...] = (
    ("M", 1000),
    ("CM", 900),   # 900 (1000 - 100)
    ("D", 500),
    ("CD", 400),   # 400 (500 - 100)
    ("C", 100),
    ("XC", 90),    # 90 (100 - 10)
    ("L", 50),
    ("XL", 40),    # 40 (50 - 10)
    ("X", 10),
    ("IX", 9),     # 9 (10 - 1)
    ("V", 5),
    ("IV", 4),     # 4 (5 - 1)
    ("I", 1),
)

# Single letters allowed in a numeral
ROMAN_ALPHABET = frozenset("MDCLXVI")

# Powers of ten (and I), may repeat up to three times in a row
BASE_SYMBOLS = frozenset("MCXI")

# Halves of the next power of ten, may appear only once
FIVE_LIKE_SYMBOLS = frozenset("DLV")


def _build_char_maps(units: Tuple[Tuple[str, int], ...]) -> Tuple[Dict[str, int], Dict[int, str]]:
    """Build glyph->value and value->glyph mappings from the ordered units.

    Args:
        units: Ordered (glyph, value) pairs

    Returns:
        Tuple of (char_to_value, value_to_char) dictionaries

    Raises:
        ValueError: If a glyph or a value appears more than once, i.e. the
                    two mappings would not be inverses of each other
    """
    char_to_value: Dict[str, int] = {}
    value_to_char: Dict[int, str] = {}

    for glyph, value in units:
        if glyph in char_to_value:
            raise ValueError(f"Duplicate Roman glyph in symbol table: {glyph}")
        if value in value_to_char:
            raise ValueError(f"Duplicate Roman value in symbol table: {value}")
        char_to_value[glyph] = value
        value_to_char[value] = glyph

    return char_to_value, value_to_char


_char_to_value, _value_to_char = _build_char_maps(ROMAN_UNITS)

CHAR_TO_VALUE: Mapping[str, int] = MappingProxyType(_char_to_value)
VALUE_TO_CHAR: Mapping[int, str] = MappingProxyType(_value_to_char)
