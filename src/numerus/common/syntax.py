"""Syntax checking for Roman numerals.

This module decides whether a string is a well-formed classical Roman
numeral and, when it is not, explains why. The check runs in stages:

1. Length: the numeral must be non-empty and no longer than the longest
   numeral in range (MMMDCCCLXXXVIII).
2. Alphabet: only M, D, C, L, X, V and I are allowed.
3. Repetition: M, C, X and I may repeat at most three times in a row;
   D, L and V may appear only once in the whole numeral.
4. Decomposition: the numeral must split left to right into symbol units
   of non-increasing value and be the canonical way of writing its value.

Stages 2 and 3 are both reported when both fail, so a user sees every
problem at once. Stage 4 only runs when 2 and 3 pass.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import MAX_NUMERAL_LENGTH, MAX_REPEATS, MAX_VALUE, MIN_VALUE
from .errors import NullNumeralError, RomanFormatError
from .symbol_table import BASE_SYMBOLS, CHAR_TO_VALUE, FIVE_LIKE_SYMBOLS, ROMAN_ALPHABET, ROMAN_UNITS

# Problem kinds, in the order they are reported
PROBLEM_LENGTH = "length"
PROBLEM_CHARACTERS = "characters"
PROBLEM_REPETITION = "repetition"
PROBLEM_SYNTAX = "syntax"

# Four or more of the same base symbol in a row, e.g. CCCC
_BASE_RUN_RE = re.compile(
    "|".join(f"{symbol}{{{MAX_REPEATS + 1},}}" for symbol in sorted(BASE_SYMBOLS))
)


@dataclass(frozen=True)
class SyntaxProblem:
    """One kind of problem found in a candidate numeral.

    Attributes:
        kind: One of the PROBLEM_* constants
        fragments: The exact substrings (or characters) responsible
    """
    kind: str
    fragments: Tuple[str, ...] = ()

    def describe(self) -> str:
        if self.kind == PROBLEM_LENGTH:
            if not self.fragments:
                return "numeral is empty"
            return f"numeral is longer than {MAX_NUMERAL_LENGTH} characters: {self.fragments[0]}"
        if self.kind == PROBLEM_CHARACTERS:
            return f"invalid characters: {', '.join(self.fragments)}"
        if self.kind == PROBLEM_REPETITION:
            return f"illegal repetitions: {', '.join(self.fragments)}"
        return f"incorrect roman syntax: {', '.join(self.fragments)}"


@dataclass(frozen=True)
class SyntaxReport:
    """Result of checking one normalized numeral.

    Attributes:
        numeral: The normalized string that was checked
        problems: Every distinct problem found, empty when the numeral is valid
    """
    numeral: str
    problems: Tuple[SyntaxProblem, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.problems

    def problem(self, kind: str) -> Optional[SyntaxProblem]:
        """Return the problem of the given kind, or None if there is none."""
        for problem in self.problems:
            if problem.kind == kind:
                return problem
        return None

    def describe(self) -> str:
        """Build the human-readable diagnostic for this report.

        Returns:
            Empty string for a valid numeral, otherwise one line naming the
            numeral followed by every problem, separated by semicolons

        Example:
            >>> check_roman_syntax("CCCCQ").describe()
            "'CCCCQ' is not a valid Roman numeral: invalid characters: Q; illegal repetitions: CCCC"
        """
        if self.is_valid:
            return ""
        details = "; ".join(problem.describe() for problem in self.problems)
        return f"'{self.numeral}' is not a valid Roman numeral: {details}"


def normalize_numeral(candidate: str) -> str:
    """Strip every whitespace character from a candidate and upcase it.

    Args:
        candidate: Raw text supplied by a caller (e.g. "  xl I  ii\\n")

    Returns:
        Normalized string (e.g. "XLIII")

    Raises:
        NullNumeralError: If candidate is None
        TypeError: If candidate is not a string
    """
    if candidate is None:
        raise NullNumeralError("Roman numeral must not be None")
    if not isinstance(candidate, str):
        raise TypeError(f"Roman numeral must be a string, not {type(candidate).__name__}")

    return "".join(candidate.split()).upper()


def _find_invalid_characters(numeral: str) -> List[str]:
    # Deduplicated, in order of first appearance
    invalid = []
    for char in numeral:
        if char not in ROMAN_ALPHABET and char not in invalid:
            invalid.append(char)
    return invalid


def _find_repetitions(numeral: str) -> List[str]:
    """Collect every illegal repetition, in order of position in the numeral.

    Runs of base symbols are reported exactly (CCCC). A five-like symbol that
    appears twice is reported as the span from its first to its last
    occurrence, so adjacent duplicates give the minimal span (DD in DDXII)
    and distant ones the whole stretch between them (DXID in DXID).
    """
    found: List[Tuple[int, str]] = []

    for match in _BASE_RUN_RE.finditer(numeral):
        found.append((match.start(), match.group()))

    for symbol in sorted(FIVE_LIKE_SYMBOLS):
        first = numeral.find(symbol)
        last = numeral.rfind(symbol)
        if first != last:
            found.append((first, numeral[first:last + 1]))

    fragments = []
    for _, fragment in sorted(found):
        if fragment not in fragments:
            fragments.append(fragment)
    return fragments


def decompose_numeral(numeral: str) -> Tuple[List[str], str]:
    """Split a numeral into symbol units, largest first.

    At each position the scan tries the units from the current one down the
    table; a two-letter unit always precedes its one-letter prefix in the
    table, so the longest match wins. The scan never moves back to a larger
    unit.

    Args:
        numeral: Normalized numeral

    Returns:
        Tuple of (matched unit glyphs, leftover text that could not be matched)

    Example:
        >>> decompose_numeral("MMCMIIIX")
        (['M', 'M', 'CM', 'I', 'I', 'I'], 'X')
    """
    units = []
    position = 0
    index = 0

    while position < len(numeral) and index < len(ROMAN_UNITS):
        glyph, _ = ROMAN_UNITS[index]
        if numeral.startswith(glyph, position):
            units.append(glyph)
            position += len(glyph)
        else:
            index += 1

    return units, numeral[position:]


def _canonical_units(value: int) -> List[str]:
    # Largest unit that still fits, repeated until nothing is left
    units = []
    for glyph, unit_value in ROMAN_UNITS:
        count, value = divmod(value, unit_value)
        units.extend([glyph] * count)
    return units


def _is_canonical(numeral: str) -> bool:
    units, leftover = decompose_numeral(numeral)
    if leftover:
        return False

    value = sum(CHAR_TO_VALUE[glyph] for glyph in units)
    if not MIN_VALUE <= value <= MAX_VALUE:
        return False

    # Rejects orderings like IXI or CMCM that decompose but are not how
    # their value is written
    return "".join(_canonical_units(value)) == numeral


def check_roman_syntax(numeral: str) -> SyntaxReport:
    """Check a normalized numeral against classical Roman numeral rules.

    Args:
        numeral: Normalized numeral (see normalize_numeral)

    Returns:
        SyntaxReport listing every distinct problem found

    Examples:
        >>> check_roman_syntax("MCMXCIV").is_valid
        True
        >>> check_roman_syntax("DDXII").problem("repetition").fragments
        ('DD',)
    """
    if not numeral:
        return SyntaxReport(numeral, (SyntaxProblem(PROBLEM_LENGTH),))
    if len(numeral) > MAX_NUMERAL_LENGTH:
        return SyntaxReport(numeral, (SyntaxProblem(PROBLEM_LENGTH, (numeral,)),))

    problems = []

    invalid_characters = _find_invalid_characters(numeral)
    if invalid_characters:
        problems.append(SyntaxProblem(PROBLEM_CHARACTERS, tuple(invalid_characters)))

    repetitions = _find_repetitions(numeral)
    if repetitions:
        problems.append(SyntaxProblem(PROBLEM_REPETITION, tuple(repetitions)))

    if not problems and not _is_canonical(numeral):
        problems.append(SyntaxProblem(PROBLEM_SYNTAX, (numeral,)))

    return SyntaxReport(numeral, tuple(problems))


def validate_roman_numeral(numeral: str) -> None:
    """Validate that a normalized string is a correct Roman numeral.

    Args:
        numeral: Normalized numeral

    Raises:
        RomanFormatError: If the numeral is rejected; the message lists every
                          problem and the exception carries the full report
    """
    report = check_roman_syntax(numeral)
    if not report.is_valid:
        raise RomanFormatError(report.describe(), report)


def is_correct_roman_syntax(candidate: Optional[str]) -> bool:
    """Tell whether a raw string is a correct Roman numeral, without raising.

    The candidate is normalized first, so "  mcm xciv " is accepted.
    None and non-string values are simply not correct.
    """
    try:
        numeral = normalize_numeral(candidate)
    except TypeError:
        return False
    return check_roman_syntax(numeral).is_valid
