"""Exception types raised by the numerus package.

Each error kind also derives from the builtin exception a caller would
naturally expect (ValueError for bad values, IndexError for positions, ...)
so code that only knows the builtins keeps working.
"""


class NumerusError(Exception):
    """Base class for all numerus errors."""


class NullNumeralError(NumerusError, TypeError):
    """Raised when None is given where a numeral string is required."""


class RomanFormatError(NumerusError, ValueError):
    """Raised when a string is not a syntactically correct Roman numeral.

    Attributes:
        report: The SyntaxReport listing every problem found, if available
    """

    def __init__(self, message: str, report=None):
        super().__init__(message)
        self.report = report


class RomanRangeError(NumerusError, ValueError):
    """Raised when an integer cannot be written as a Roman numeral."""


class NumeralIndexError(NumerusError, IndexError):
    """Raised when a character position lies outside the numeral."""


class NumeralStorageError(NumerusError, OSError):
    """Raised when numerals cannot be read from or written to storage."""
