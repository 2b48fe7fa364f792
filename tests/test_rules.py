"""
Tests for the per-letter rule groups and the dispatcher.

Each case pins one rule firing (or not firing) in a word short enough to
follow by hand.
"""

import pytest

from metaphone3 import Metaphone3
from metaphone3.rules import LETTER_RULES, PASSTHROUGH, encode_next
from metaphone3.rules._names import (
    germanic_or_slavic_name_beginning_with_w,
    names_beginning_with_j_that_get_alt_y,
    names_beginning_with_sw_that_get_alt_sv,
    names_beginning_with_sw_that_get_alt_xv,
)


def keys(encoder: Metaphone3, word: str) -> tuple[str, str]:
    result = encoder.encode_word(word)
    return result.primary, result.alternate


# =============================================================================
# Dispatcher
# =============================================================================


class TestDispatcher:
    def test_every_consonant_has_a_rule_group(self):
        assert set(LETTER_RULES) == set("BCDFGHJKLMNPQRSTVWXZ")

    def test_passthrough_symbols(self):
        assert PASSTHROUGH["ß"] == "S"
        assert PASSTHROUGH["Ç"] == "S"
        assert PASSTHROUGH["Ñ"] == "N"
        assert PASSTHROUGH["Þ"] == PASSTHROUGH["Ð"] == "0"
        assert PASSTHROUGH["Š"] == "X"
        assert PASSTHROUGH["Ž"] == "S"

    def test_unknown_character_is_skipped(self, make_context):
        ctx = make_context("7b")
        encode_next(ctx)
        assert ctx.current == 1
        assert ctx.primary == ""

    def test_passthrough_advances_one(self, make_context):
        ctx = make_context("ñu")
        encode_next(ctx)
        assert ctx.current == 1
        assert ctx.primary == "N"

    def test_initial_vowel(self, make_context):
        ctx = make_context("oak")
        encode_next(ctx)
        assert ctx.primary == "A"
        assert ctx.current == 2

    def test_accented_vowel_routes_to_vowel_rules(self, make_context):
        ctx = make_context("élan")
        encode_next(ctx)
        assert ctx.primary == "A"
        assert ctx.current == 1


# =============================================================================
# Letter Groups
# =============================================================================


class TestSilentLetters:
    @pytest.mark.parametrize(
        "word,primary",
        [
            ("Knight", "NT"),  # initial KN-, silent GH
            ("Thumb", "0M"),  # -MB
            ("Hour", "AR"),  # initial silent H
            ("Hugh", "H"),  # final GH
            ("Walk", "AK"),  # -LK
            ("Would", "AT"),  # -OULD
            ("Yves", "AF"),  # French final S
            ("Tzar", "SR"),  # initial T
        ],
    )
    def test_silent(self, encoder: Metaphone3, word, primary):
        assert encoder.encode_word(word).primary == primary

    def test_island(self, encoder: Metaphone3):
        assert "S" not in encoder.encode_word("Island").primary


class TestDigraphs:
    def test_ph(self, encoder: Metaphone3):
        assert encoder.encode_word("Phone").primary == "FN"

    def test_sthm(self, encoder: Metaphone3):
        assert encoder.encode_word("Asthma").primary == "ASM"

    def test_tzsch(self, encoder: Metaphone3):
        assert encoder.encode_word("Nietzsche").primary == "NX"

    def test_sch_before_consonant(self, encoder: Metaphone3):
        assert keys(encoder, "Schmidt") == ("XMT", "")

    def test_th(self, encoder: Metaphone3):
        assert encoder.encode_word("Thumb").primary.startswith("0")

    def test_th_said_t_in_names(self, encoder: Metaphone3):
        assert encoder.encode_word("Thompson").primary.startswith("T")

    def test_italian_zz(self, encoder: Metaphone3):
        assert keys(encoder, "Pizza") == ("PTS", "PS")

    def test_german_z(self, encoder: Metaphone3):
        assert encoder.encode_word("Mozart").primary == "MTSRT"


class TestAlternates:
    def test_smith_meets_schmidt(self, encoder: Metaphone3):
        smith = encoder.encode_word("Smith")
        schmidt = encoder.encode_word("Schmidt")
        assert smith.keys == ("SM0", "XMT")
        assert schmidt.primary in smith.keys

    def test_scandinavian_sw(self, encoder: Metaphone3):
        assert keys(encoder, "Swanson") == ("SNSN", "SVNSN")

    def test_germanic_w(self, encoder: Metaphone3):
        assert keys(encoder, "Wolf") == ("ALF", "FLF")

    def test_germanic_w_exact(self, exact_encoder: Metaphone3):
        assert keys(exact_encoder, "Wolf") == ("ALF", "VLF")

    def test_often(self, encoder: Metaphone3):
        assert keys(encoder, "Often") == ("AFN", "AFTN")

    def test_herb(self, encoder: Metaphone3):
        assert keys(encoder, "Herb") == ("HRP", "ARP")


class TestExactVoicing:
    def test_b(self, encoder: Metaphone3, exact_encoder: Metaphone3):
        assert encoder.encode_word("Bob").primary == "PP"
        assert exact_encoder.encode_word("Bob").primary == "BB"

    def test_ould(self, encoder: Metaphone3, exact_encoder: Metaphone3):
        assert encoder.encode_word("Would").primary == "AT"
        assert exact_encoder.encode_word("Would").primary == "AD"

    def test_dt_devoiced(self, exact_encoder: Metaphone3):
        assert exact_encoder.encode_word("Schmidt").primary == "XMT"


class TestAbbreviations:
    def test_mr(self, encoder: Metaphone3, vowel_encoder: Metaphone3):
        assert encoder.encode_word("Mr").primary == "MSTR"
        assert vowel_encoder.encode_word("Mr").primary == "MASTAR"

    def test_mrs(self, encoder: Metaphone3, vowel_encoder: Metaphone3):
        assert encoder.encode_word("Mrs").primary == "MSS"
        assert vowel_encoder.encode_word("Mrs").primary == "MASAS"


# =============================================================================
# Name Lists
# =============================================================================


class TestNameLists:
    @pytest.mark.parametrize("word", ["swanson", "swobodas", "swarthout"])
    def test_sw_alt_sv(self, make_context, word):
        assert names_beginning_with_sw_that_get_alt_sv(make_context(word))

    @pytest.mark.parametrize("word", ["swartz", "switzer", "swinehart"])
    def test_sw_alt_xv(self, make_context, word):
        assert names_beginning_with_sw_that_get_alt_xv(make_context(word))

    @pytest.mark.parametrize("word", ["wolf", "wagner", "wojciechowski"])
    def test_germanic_w(self, make_context, word):
        assert germanic_or_slavic_name_beginning_with_w(make_context(word))

    @pytest.mark.parametrize("word", ["john", "joseph", "jakubowski"])
    def test_j_alt_y(self, make_context, word):
        assert names_beginning_with_j_that_get_alt_y(make_context(word))

    @pytest.mark.parametrize("word", ["swan", "walk", "jack", "smith", ""])
    def test_not_listed(self, make_context, word):
        ctx = make_context(word)
        assert not names_beginning_with_sw_that_get_alt_sv(ctx)
        assert not names_beginning_with_sw_that_get_alt_xv(ctx)
        assert not germanic_or_slavic_name_beginning_with_w(ctx)
        assert not names_beginning_with_j_that_get_alt_y(ctx)


# =============================================================================
# Expected Keys per Letter Group
# =============================================================================


class TestBGroup:
    @pytest.mark.parametrize(
        "word,primary,alternate",
        [
            ("Bob", "PP", ""),
            ("debt", "TT", ""),
            ("doubt", "TT", ""),
            ("Thumb", "0M", ""),
        ],
    )
    def test_keys(self, encoder: Metaphone3, word, primary, alternate):
        assert keys(encoder, word) == (primary, alternate)


class TestCGroup:
    @pytest.mark.parametrize(
        "word,primary,alternate",
        [
            ("czar", "SR", ""),
            ("chorus", "KRS", "XRS"),
            ("ache", "AK", "AX"),
            ("focaccia", "FKX", "FKS"),
            ("accident", "AKSTNT", ""),
            ("kovacs", "KFKS", "KFX"),
        ],
    )
    def test_keys(self, encoder: Metaphone3, word, primary, alternate):
        assert keys(encoder, word) == (primary, alternate)

    def test_greek_ch_is_k_first(self, encoder: Metaphone3):
        primary, alternate = keys(encoder, "chorus")
        assert primary.startswith("K")
        assert alternate.startswith("X")

    def test_gracia_prefers_s(self, encoder: Metaphone3):
        # Same "-CIA" ending, opposite preference
        assert keys(encoder, "Gracia") == ("KRS", "KRX")
        assert keys(encoder, "Gracie") == ("KRS", "KRX")
        assert keys(encoder, "acacia") == ("AKX", "AKS")


class TestGGroup:
    @pytest.mark.parametrize(
        "word,primary,alternate",
        [
            ("laugh", "LF", ""),
            ("ghost", "KST", ""),
            ("gem", "JM", "KM"),
            ("gift", "KFT", "JFT"),
            ("sign", "SN", "SKN"),
        ],
    )
    def test_keys(self, encoder: Metaphone3, word, primary, alternate):
        assert keys(encoder, word) == (primary, alternate)

    def test_gh_said_f(self, encoder: Metaphone3):
        assert keys(encoder, "laugh")[0].endswith("F")

    def test_margary_soft_g(self, encoder: Metaphone3):
        assert keys(encoder, "Margary") == ("MRJR", "MRKR")

    def test_margarita_hard_g(self, encoder: Metaphone3):
        assert keys(encoder, "Margarita") == ("MRKRT", "")


class TestHGroup:
    @pytest.mark.parametrize(
        "word,primary,alternate",
        [
            ("Hour", "AR", ""),
            ("Hugh", "H", ""),
            ("Herb", "HRP", "ARP"),
            ("graham", "KRM", ""),
        ],
    )
    def test_keys(self, encoder: Metaphone3, word, primary, alternate):
        assert keys(encoder, word) == (primary, alternate)


class TestJGroup:
    @pytest.mark.parametrize(
        "word,primary,alternate",
        [
            ("Jose", "HS", ""),
            ("John", "JN", "AN"),
        ],
    )
    def test_keys(self, encoder: Metaphone3, word, primary, alternate):
        assert keys(encoder, word) == (primary, alternate)


class TestSGroup:
    @pytest.mark.parametrize(
        "word,primary,alternate",
        [
            ("bristle", "PRSL", ""),
            ("Smith", "SM0", "XMT"),
            ("Schmidt", "XMT", ""),
            ("Asthma", "ASM", ""),
            ("assault", "ASLT", ""),
        ],
    )
    def test_keys(self, encoder: Metaphone3, word, primary, alternate):
        assert keys(encoder, word) == (primary, alternate)


class TestTransposition:
    """'-LE' and '-STLE' endings said as 'AL' when vowels are encoded."""

    def test_stle_without_vowels(self, encoder: Metaphone3):
        assert keys(encoder, "bristle") == ("PRSL", "")

    def test_stle_with_vowels(self, vowel_encoder: Metaphone3):
        assert keys(vowel_encoder, "bristle") == ("PRASAL", "")

    def test_le_with_vowels(self, encoder: Metaphone3, vowel_encoder: Metaphone3):
        assert keys(encoder, "apple") == ("APL", "")
        assert keys(vowel_encoder, "apple") == ("APAL", "")

    def test_inversion_flag_skips_final_e(self, make_context):
        ctx = make_context("bristle", encode_vowels=True)
        while ctx.current <= 3:
            encode_next(ctx)
        assert ctx.primary == "PRASAL"
        assert ctx.flag_al_inversion is True
        assert ctx.char_at(ctx.current) == "E"

        encode_next(ctx)
        assert ctx.primary == "PRASAL"
        assert ctx.flag_al_inversion is False


class TestRootOrInflections:
    """Root words are matched against the word without its trailing space."""

    def test_ache(self, encoder: Metaphone3):
        assert keys(encoder, "ache") == ("AK", "AX")

    def test_assault_keeps_l_and_t(self, encoder: Metaphone3):
        assert keys(encoder, "assault") == ("ASLT", "")

    def test_french_ault_is_silent(self, encoder: Metaphone3):
        assert keys(encoder, "Renault") == ("RN", "")
