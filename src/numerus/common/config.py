"""Configuration constants for the numerus package.

This module contains the limits of the supported Roman numeral range and
the settings used by the command line tool.

Environment Variables:
    NUMERUS_DEBUG: Set to "1" to print full syntax reports on rejected input
    NUMERUS_STORE: Path of the JSON file used by the CLI to save numerals
"""
import os

# Debug mode prints every problem found by the syntax check, one per line
NUMERUS_DEBUG = os.getenv("NUMERUS_DEBUG", "0") == "1"

# Placeholder text held by a numeral that has no value
NULLA = "NULLA"

# Supported range of values (NULLA stands for 0)
MIN_VALUE = 1
MAX_VALUE = 3999

# MMMDCCCLXXXVIII (3888) is the longest numeral in range
MAX_NUMERAL_LENGTH = 15

# M, C, X and I may appear at most this many times in a row
MAX_REPEATS = 3

# File the CLI reads and writes numerals to
DEFAULT_STORE_PATH = os.getenv("NUMERUS_STORE", "numerals.json")
