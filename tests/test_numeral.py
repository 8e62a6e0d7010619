"""Tests for numerus.numeral.RomanNumeral, the validated numeral container."""
from __future__ import annotations

import copy
import pickle

import pytest

from numerus.common.errors import (
    NullNumeralError,
    NumeralIndexError,
    RomanFormatError,
    RomanRangeError,
)
from numerus.numeral import RomanNumeral


@pytest.fixture
def roman() -> RomanNumeral:
    return RomanNumeral()


class TestEmptyContainer:
    def test_default_is_nulla(self, roman: RomanNumeral) -> None:
        assert roman.numeral == "NULLA"
        assert roman.value == 0
        assert roman.is_nulla()

    def test_nulla_has_no_symbols(self, roman: RomanNumeral) -> None:
        assert len(roman) == 0
        assert list(roman) == []
        with pytest.raises(NumeralIndexError):
            roman.char_at(0)

    def test_setting_a_numeral_initializes(self, roman: RomanNumeral) -> None:
        roman.set_numeral("C")
        assert not roman.is_nulla()

    @pytest.mark.parametrize("text", ["NULLA", "nullA", " nU lla "])
    def test_nulla_text_accepted(self, text: str) -> None:
        assert RomanNumeral(text).numeral == "NULLA"
        numeral = RomanNumeral("XII")
        numeral.set_numeral(text)
        assert numeral.is_nulla()
        assert numeral.value == 0


class TestSetNumeral:
    def test_correct_string(self, roman: RomanNumeral) -> None:
        roman.set_numeral("XLII")
        assert roman.numeral == "XLII"
        assert roman.value == 42

    def test_stripped_and_upcased(self, roman: RomanNumeral) -> None:
        roman.set_numeral("  \t\n\r   xliI ")
        assert roman.numeral == "XLII"

    def test_inner_whitespace_removed(self, roman: RomanNumeral) -> None:
        roman.set_numeral("  XL I  II")
        assert roman.numeral == "XLIII"
        assert roman.value == 43

    def test_none_raises(self, roman: RomanNumeral) -> None:
        with pytest.raises(NullNumeralError):
            roman.set_numeral(None)  # type: ignore[arg-type]

    def test_none_raises_after_valid_value(self) -> None:
        numeral = RomanNumeral("MMXV")
        with pytest.raises(NullNumeralError):
            numeral.set_numeral(None)  # type: ignore[arg-type]
        assert numeral.numeral == "MMXV"

    def test_none_in_constructor_raises(self) -> None:
        with pytest.raises(TypeError):
            RomanNumeral(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["", "  \t\n\r  ", "M" * 35, "pFXC-", "MMCMIIIX"])
    def test_rejected_strings(self, roman: RomanNumeral, text: str) -> None:
        with pytest.raises(RomanFormatError):
            roman.set_numeral(text)

    @pytest.mark.parametrize(
        "text, shown",
        [
            ("pPFXC-", "P, F, -"),
            ("CCCC", "CCCC"),
            ("DDXII", "DD"),
            ("DXID", "DXID"),
            ("MMCMIIIX", "MMCMIIIX"),
        ],
    )
    def test_message_shows_offending_symbols(self, roman: RomanNumeral, text: str, shown: str) -> None:
        with pytest.raises(RomanFormatError) as excinfo:
            roman.set_numeral(text)
        assert shown in str(excinfo.value)

    def test_failed_update_keeps_previous_numeral(self) -> None:
        numeral = RomanNumeral("DXI")
        with pytest.raises(RomanFormatError):
            numeral.set_numeral("DXID")
        assert numeral.numeral == "DXI"
        assert numeral.value == 511

    def test_constructor_same_as_setter(self) -> None:
        numeral1 = RomanNumeral()
        numeral1.set_numeral("MCMLXIV")
        numeral2 = RomanNumeral("MCMLXIV")
        assert numeral1 == numeral2


class TestFromInt:
    def test_from_int(self) -> None:
        numeral = RomanNumeral.from_int(1994)
        assert numeral.numeral == "MCMXCIV"
        assert numeral.value == 1994
        assert numeral == RomanNumeral("MCMXCIV")

    def test_zero_is_nulla(self) -> None:
        assert RomanNumeral.from_int(0).is_nulla()

    def test_out_of_range(self) -> None:
        with pytest.raises(RomanRangeError):
            RomanNumeral.from_int(4000)


class TestViews:
    def test_syntax_check_without_instantiation(self) -> None:
        assert RomanNumeral.is_correct_roman_syntax("CLXXII")
        assert not RomanNumeral.is_correct_roman_syntax("LINUX RULES!")

    def test_str_is_numeral(self) -> None:
        numeral = RomanNumeral("MCMLXIV")
        assert str(numeral) == numeral.numeral
        assert repr(numeral) == "RomanNumeral('MCMLXIV')"
        assert int(numeral) == 1964

    def test_char_at(self) -> None:
        numeral = RomanNumeral("MCMLXIV")
        assert numeral.char_at(0) == "M"
        assert numeral.char_at(6) == "V"
        assert numeral[3] == "L"

    @pytest.mark.parametrize("index", [-1, 7, 100])
    def test_char_at_out_of_bounds(self, index: int) -> None:
        numeral = RomanNumeral("MCMLXIV")
        with pytest.raises(NumeralIndexError):
            numeral.char_at(index)
        with pytest.raises(IndexError):
            numeral[index]

    def test_substring_half_open(self) -> None:
        numeral = RomanNumeral("MCMLXIV")
        assert numeral.substring(1, 3) == "CM"
        assert numeral.substring(0, 7) == "MCMLXIV"
        assert numeral.substring(4, 4) == ""
        assert numeral[1:3] == "CM"

    @pytest.mark.parametrize("start, end", [(-1, 2), (3, 2), (0, 8)])
    def test_substring_out_of_bounds(self, start: int, end: int) -> None:
        with pytest.raises(NumeralIndexError):
            RomanNumeral("MCMLXIV").substring(start, end)

    def test_len_and_iteration(self) -> None:
        numeral = RomanNumeral("XLII")
        assert len(numeral) == 4
        assert "".join(numeral) == "XLII"


class TestEquality:
    def test_equal_numerals(self) -> None:
        assert RomanNumeral("MCMLXIV") == RomanNumeral("mcm lxiv")

    def test_different_numerals(self) -> None:
        assert RomanNumeral("MCMLXIV") != RomanNumeral("MCMLXV")

    def test_not_equal_to_string(self) -> None:
        assert RomanNumeral("XII") != "XII"

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(RomanNumeral("XII"))


class TestCopy:
    def test_copy_equals_original(self, roman: RomanNumeral) -> None:
        roman.set_numeral("DXI")
        assert roman.copy() == roman
        assert copy.copy(roman) == roman
        assert copy.deepcopy(roman) == roman

    def test_copy_is_independent(self, roman: RomanNumeral) -> None:
        roman.set_numeral("DXI")
        other = roman.copy()
        other.set_numeral("XII")
        assert roman.numeral == "DXI"
        assert other.numeral == "XII"


class TestPickle:
    def test_round_trip(self, roman: RomanNumeral) -> None:
        roman.set_numeral("MMXV")
        restored = pickle.loads(pickle.dumps(roman))
        assert restored == roman
        assert restored.value == 2015

    def test_nulla_round_trip(self, roman: RomanNumeral) -> None:
        assert pickle.loads(pickle.dumps(roman)).is_nulla()

    def test_tampered_pickle_is_revalidated(self) -> None:
        data = pickle.dumps(RomanNumeral("MMXV"))
        with pytest.raises(RomanFormatError):
            pickle.loads(data.replace(b"MMXV", b"MMMM"))
