"""Container for syntactically correct Roman numerals.

A RomanNumeral always holds either a valid canonical numeral together with
its integer value, or the NULLA placeholder with the value 0. Every change
goes through set_numeral, which validates before touching the stored state,
so a failed update leaves the previous numeral in place.
"""
from typing import Iterator, Tuple, Union

from .common.config import NULLA
from .common.errors import NumeralIndexError
from .common.roman_numerals import convert_int_to_roman, convert_roman_to_int
from .common.syntax import is_correct_roman_syntax, normalize_numeral, validate_roman_numeral


class RomanNumeral:
    """Validated, mutable holder of a Roman numeral and its value.

    The numeral is stored normalized: without whitespace and uppercase.
    Two containers are equal when their numerals are equal. Because the
    container can change, it is not hashable.

    The sequence views (len, indexing, iteration, char_at, substring) cover
    the symbols of the numeral; NULLA holds no symbols and has length 0.

    Instances are not meant to be mutated from several threads at once.

    Attributes:
        numeral: Normalized numeral text, NULLA when empty
        value: Integer value, 0 when empty

    Example:
        >>> roman = RomanNumeral("  xl I  ii")
        >>> roman.numeral, roman.value
        ('XLIII', 43)
        >>> roman.char_at(1)
        'L'
    """

    __hash__ = None

    def __init__(self, numeral: str = NULLA):
        """Create a container, empty (NULLA) unless a numeral is given.

        Args:
            numeral: Raw numeral text, normalized and validated like set_numeral

        Raises:
            NullNumeralError: If numeral is None
            RomanFormatError: If numeral is not a correct Roman numeral
        """
        self._state: Tuple[str, int] = (NULLA, 0)
        self.set_numeral(numeral)

    @classmethod
    def from_int(cls, value: int) -> "RomanNumeral":
        """Create a container holding the numeral for an integer.

        Args:
            value: Integer between 0 and 3999 (0 gives NULLA)

        Raises:
            RomanRangeError: If value cannot be written as a Roman numeral
        """
        numeral = cls()
        numeral._state = (convert_int_to_roman(value), value)
        return numeral

    @staticmethod
    def is_correct_roman_syntax(candidate: str) -> bool:
        """Check a raw string without creating a container."""
        return is_correct_roman_syntax(candidate)

    def set_numeral(self, numeral: str) -> None:
        """Replace the stored numeral.

        The text is stripped of all whitespace and upcased, then checked.
        NULLA, in any case, empties the container. On any error the
        container keeps its previous numeral.

        Args:
            numeral: Raw numeral text (e.g. "  mcm xciv ")

        Raises:
            NullNumeralError: If numeral is None
            RomanFormatError: If the normalized text is not a correct Roman
                              numeral; the message lists every problem found
        """
        normalized = normalize_numeral(numeral)

        if normalized == NULLA:
            self._state = (NULLA, 0)
            return

        validate_roman_numeral(normalized)
        self._state = (normalized, convert_roman_to_int(normalized))

    @property
    def numeral(self) -> str:
        return self._state[0]

    @property
    def value(self) -> int:
        return self._state[1]

    def is_nulla(self) -> bool:
        """Return True while the container holds no value."""
        return self._state[0] == NULLA

    def _symbols(self) -> str:
        return "" if self.is_nulla() else self._state[0]

    def char_at(self, index: int) -> str:
        """Return the symbol at a zero-based position.

        Raises:
            NumeralIndexError: If index is outside [0, len(self))
        """
        symbols = self._symbols()
        if not 0 <= index < len(symbols):
            raise NumeralIndexError(f"Index {index} out of range for numeral '{self.numeral}' of length {len(symbols)}")
        return symbols[index]

    def substring(self, start: int, end: int) -> str:
        """Return the symbols in the half-open range [start, end).

        Raises:
            NumeralIndexError: Unless 0 <= start <= end <= len(self)
        """
        symbols = self._symbols()
        if not 0 <= start <= end <= len(symbols):
            raise NumeralIndexError(
                f"Range [{start}, {end}) out of bounds for numeral '{self.numeral}' of length {len(symbols)}"
            )
        return symbols[start:end]

    def copy(self) -> "RomanNumeral":
        """Return an independent container holding the same numeral."""
        clone = type(self).__new__(type(self))
        clone._state = self._state
        return clone

    def __copy__(self) -> "RomanNumeral":
        return self.copy()

    def __deepcopy__(self, memo) -> "RomanNumeral":
        return self.copy()

    def __len__(self) -> int:
        return len(self._symbols())

    def __getitem__(self, key: Union[int, slice]) -> str:
        if isinstance(key, slice):
            return self._symbols()[key]
        return self.char_at(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols())

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.numeral

    def __repr__(self) -> str:
        return f"RomanNumeral('{self.numeral}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.numeral == other.numeral

    # Pickling keeps only the text and re-validates it on load
    def __getstate__(self) -> dict:
        return {"numeral": self.numeral}

    def __setstate__(self, state: dict) -> None:
        self._state = (NULLA, 0)
        self.set_numeral(state.get("numeral"))
