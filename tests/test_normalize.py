"""Tests for input normalization."""

import pytest

from metaphone3 import normalize_word, uppercase_word
from metaphone3._normalize import SENTINEL


class TestUppercase:
    def test_basic_latin(self):
        assert uppercase_word("metaphone") == "METAPHONE"

    def test_already_uppercase(self):
        assert uppercase_word("KNIGHT") == "KNIGHT"

    @pytest.mark.parametrize(
        "lower,upper",
        [
            ("à", "À"),
            ("é", "É"),
            ("ñ", "Ñ"),
            ("ç", "Ç"),
            ("ø", "Ø"),
            ("þ", "Þ"),
            ("ð", "Ð"),
            ("š", "Š"),
            ("ž", "Ž"),
            ("œ", "Œ"),
            ("ÿ", "Ÿ"),
        ],
    )
    def test_extended_letters(self, lower, upper):
        assert uppercase_word(lower) == upper

    def test_sharp_s_is_kept(self):
        # A single letter, not expanded to "SS"
        assert uppercase_word("straße") == "STRAßE"

    def test_division_sign_untouched(self):
        assert uppercase_word("÷") == "÷"

    def test_non_letters_pass_through(self):
        assert uppercase_word("o'brien-2") == "O'BRIEN-2"


class TestNormalizeWord:
    def test_appends_sentinel(self):
        assert normalize_word("Mary") == "MARY" + SENTINEL

    def test_empty(self):
        assert normalize_word("") == SENTINEL

    def test_sentinel_is_space(self):
        assert SENTINEL == " "
