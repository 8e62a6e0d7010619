"""Roman numeral conversion utilities for the numerus package.

This module provides bidirectional conversion between canonical Roman
numerals and integers in the range 1-3999. Both directions are greedy scans
over the symbol table, largest unit first. NULLA stands for 0.
"""
from .config import MAX_VALUE, NULLA
from .errors import RomanFormatError, RomanRangeError
from .symbol_table import ROMAN_UNITS


def convert_roman_to_int(roman: str) -> int:
    """Convert a validated Roman numeral string to an integer.

    The numeral is read left to right. For each symbol unit, largest first,
    the unit's value is added every time the remaining text starts with its
    glyph, and one occurrence of the glyph is consumed. When the remaining
    text does not start with the unit, the scan moves on to the next smaller
    unit at the same position.

    Args:
        roman: Normalized Roman numeral already accepted by the syntax check
               (e.g. "MCMXCIV"), or NULLA

    Returns:
        Integer value of the Roman numeral (0 for NULLA)

    Raises:
        RomanFormatError: If the text cannot be fully decomposed into symbol
                          units. This only happens for input that was never
                          validated; the syntax is not re-checked otherwise.

    Examples:
        >>> convert_roman_to_int("XIV")
        14
        >>> convert_roman_to_int("MCMXCIV")
        1994
        >>> convert_roman_to_int("NULLA")
        0
    """
    if roman == NULLA:
        return 0

    int_value = 0
    remaining = roman
    index = 0

    while remaining:
        if index >= len(ROMAN_UNITS):
            raise RomanFormatError(f"Cannot convert '{roman}': unexpected symbols '{remaining}'")

        glyph, value = ROMAN_UNITS[index]
        if remaining.startswith(glyph):
            int_value += value
            remaining = remaining[len(glyph):]
        else:
            index += 1

    return int_value


def convert_int_to_roman(num: int) -> str:
    """Convert an integer to an uppercase Roman numeral string.

    Builds the canonical subtractive form (IV, IX, XL, XC, CD, CM) by
    repeatedly appending the largest unit that still fits.

    Args:
        num: Integer between 0 and 3999

    Returns:
        Uppercase Roman numeral string, NULLA for 0

    Raises:
        RomanRangeError: If num is not an integer or lies outside 0-3999

    Examples:
        >>> convert_int_to_roman(14)
        'XIV'
        >>> convert_int_to_roman(1994)
        'MCMXCIV'
        >>> convert_int_to_roman(0)
        'NULLA'
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise RomanRangeError(f"Roman numerals can only be built from integers, not {type(num).__name__}")
    if num < 0 or num > MAX_VALUE:
        raise RomanRangeError(f"{num} is out of range for Roman numerals (0-{MAX_VALUE})")

    if num == 0:
        return NULLA

    result = []

    # Build Roman numeral by subtracting largest possible values
    for roman, value in ROMAN_UNITS:
        while num >= value:
            result.append(roman)
            num -= value

    return ''.join(result)
