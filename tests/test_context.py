"""
Tests for the scan context: bounded lookups, cursor movement and the
key buffers every rule writes through.
"""

import pytest

from metaphone3 import EncoderConfig, ScanContext
from metaphone3._context import is_vowel, root_or_inflections


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    def test_raw_word_is_normalized(self, make_context):
        ctx = make_context("knight")
        assert ctx.word == "KNIGHT "
        assert ctx.text == "KNIGHT"
        assert ctx.length == 6
        assert ctx.last == 5

    def test_empty_word(self, make_context):
        ctx = make_context("")
        assert ctx.length == 0
        assert ctx.last == -1

    def test_defaults(self):
        ctx = ScanContext("MARY ")
        assert ctx.current == 0
        assert ctx.primary == ""
        assert ctx.secondary == ""
        assert ctx.flag_al_inversion is False
        assert ctx.config == EncoderConfig()

    def test_settings_from_config(self, make_context):
        ctx = make_context("x", encode_vowels=True, encode_exact=True)
        assert ctx.encode_vowels is True
        assert ctx.encode_exact is True


# =============================================================================
# Lookups
# =============================================================================


class TestCharAt:
    def test_inside(self, make_context):
        assert make_context("abc").char_at(1) == "B"

    def test_sentinel(self, make_context):
        assert make_context("abc").char_at(3) == " "

    @pytest.mark.parametrize("at", [-1, 4, 100])
    def test_outside(self, make_context, at):
        assert make_context("abc").char_at(at) == ""


class TestStringAt:
    def test_match(self, make_context):
        ctx = make_context("thompson")
        assert ctx.string_at(2, 4, "OMAS", "OMPS")

    def test_no_match(self, make_context):
        ctx = make_context("thompson")
        assert not ctx.string_at(2, 4, "OMAS", "OVEN")

    def test_negative_start(self, make_context):
        assert not make_context("smith").string_at(-1, 2, "SM")

    def test_window_past_end(self, make_context):
        ctx = make_context("smith")
        assert ctx.string_at(3, 2, "TH")
        assert not ctx.string_at(3, 3, "TH ")

    def test_sentinel_never_matches(self, make_context):
        assert not make_context("van").string_at(0, 4, "VAN ")

    def test_inner_space_matches(self, make_context):
        assert make_context("van gogh").string_at(0, 4, "VAN ")

    def test_short_pattern_never_matches(self, make_context):
        assert not make_context("robillard").string_at(0, 7, "ROBILL")

    def test_no_patterns(self, make_context):
        assert not make_context("smith").string_at(0, 2)


class TestVowels:
    @pytest.mark.parametrize("char", list("AEIOUY") + ["É", "Ü", "Ø", "Ÿ", "Æ"])
    def test_vowels(self, char):
        assert is_vowel(char)

    @pytest.mark.parametrize("char", ["W", "H", "B", "Ñ", " ", ""])
    def test_not_vowels(self, char):
        assert not is_vowel(char)

    def test_is_vowel_at_bounds(self, make_context):
        ctx = make_context("aba")
        assert ctx.is_vowel_at(0)
        assert not ctx.is_vowel_at(1)
        assert ctx.is_vowel_at(2)
        assert not ctx.is_vowel_at(-1)
        assert not ctx.is_vowel_at(3)

    def test_front_vowel(self, make_context):
        ctx = make_context("gem")
        assert ctx.front_vowel(1)
        assert not ctx.front_vowel(2)


class TestSlavoGermanic:
    @pytest.mark.parametrize("word", ["schmidt", "swanson", "jablonski", "wagner"])
    def test_detected(self, make_context, word):
        assert make_context(word).slavo_germanic()

    @pytest.mark.parametrize("word", ["smith", "gallagher", "aswan"])
    def test_not_detected(self, make_context, word):
        assert not make_context(word).slavo_germanic()


class TestRootOrInflections:
    @pytest.mark.parametrize(
        "word", ["ACHE", "ACHES", "ACHED", "ACHING", "ACHINGLY", "ACHY"]
    )
    def test_root_ending_in_e(self, word):
        assert root_or_inflections(word, "ACHE")

    @pytest.mark.parametrize(
        "word", ["FINGER", "FINGERS", "FINGERES", "FINGERED", "FINGERING", "FINGERY"]
    )
    def test_root_not_ending_in_e(self, word):
        assert root_or_inflections(word, "FINGER")

    @pytest.mark.parametrize("word", ["ACHEES", "HEADACHE", "ACHINGS", "ACH"])
    def test_rejected(self, word):
        assert not root_or_inflections(word, "ACHE")

    def test_context_ignores_sentinel(self, make_context):
        assert make_context("fingers").root_or_inflections("FINGER")

    def test_context_from_offset(self, make_context):
        assert make_context("christened").root_or_inflections("CHRISTEN")
        assert make_context("reassaulted").root_or_inflections("ASSAULT", start=2)


# =============================================================================
# Cursor
# =============================================================================


class TestSkipVowels:
    def test_stops_at_consonant(self, make_context):
        assert make_context("meehan").skip_vowels(1) == 3

    def test_skips_w(self, make_context):
        assert make_context("dawson").skip_vowels(1) == 3

    def test_skips_wh(self, make_context):
        # 'H' of a "WH" that does not start another word
        assert make_context("awhile").skip_vowels(1) == 4

    def test_stops_at_slavic_w(self, make_context):
        assert make_context("filipowicz").skip_vowels(5) == 6

    def test_at_end(self, make_context):
        ctx = make_context("idea")
        assert ctx.skip_vowels(3) == 4
        assert ctx.skip_vowels(10) == 4

    def test_negative(self, make_context):
        assert make_context("idea").skip_vowels(-2) == 0


class TestAdvanceCounter:
    def test_without_vowels(self, make_context):
        ctx = make_context("word")
        ctx.advance_counter(3, 1)
        assert ctx.current == 3

    def test_with_vowels(self, make_context):
        ctx = make_context("word", encode_vowels=True)
        ctx.advance_counter(3, 1)
        assert ctx.current == 1


# =============================================================================
# Key Buffers
# =============================================================================


class TestAdd:
    def test_same_symbol_to_both(self, make_context):
        ctx = make_context("x")
        ctx.add("K")
        assert (ctx.primary, ctx.secondary) == ("K", "K")

    def test_separate_symbols(self, make_context):
        ctx = make_context("x")
        ctx.add("S", "X")
        assert (ctx.primary, ctx.secondary) == ("S", "X")

    def test_empty_alternate(self, make_context):
        ctx = make_context("x")
        ctx.add("J", "")
        assert (ctx.primary, ctx.secondary) == ("J", "")

    def test_no_double_vowel_placeholder(self, make_context):
        ctx = make_context("x")
        ctx.add("A")
        ctx.add("A")
        ctx.add("AR")
        assert ctx.primary == "A"

    def test_placeholder_suppressed_per_buffer(self, make_context):
        ctx = make_context("x")
        ctx.add("A", "F")
        ctx.add("A")
        assert (ctx.primary, ctx.secondary) == ("A", "FA")

    def test_exact_approx(self, make_context):
        approx = make_context("x")
        approx.add_exact_approx("B", "P")
        exact = make_context("x", encode_exact=True)
        exact.add_exact_approx("B", "P")
        assert approx.primary == "P"
        assert exact.primary == "B"

    def test_exact_approx_alt(self, make_context):
        approx = make_context("x")
        approx.add_exact_approx_alt("G", "J", "K", "J")
        exact = make_context("x", encode_exact=True)
        exact.add_exact_approx_alt("G", "J", "K", "J")
        assert (approx.primary, approx.secondary) == ("K", "J")
        assert (exact.primary, exact.secondary) == ("G", "J")

    def test_keys_full(self, make_context):
        ctx = make_context("x", max_key_length=2)
        ctx.add("KS")
        assert not ctx.keys_full()
        ctx.add("", "T")
        assert ctx.keys_full()
