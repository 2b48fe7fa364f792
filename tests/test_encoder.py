"""
Tests for the Metaphone 3 encoder: configuration, the driver loop, and
worked examples for common English words and American names.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from metaphone3 import (
    DEFAULT_MAX_KEY_LENGTH,
    MAX_KEY_ALLOCATION,
    EncodingResult,
    Metaphone3,
    encode,
    metaphone,
)

from conftest import SAMPLE_WORDS


# =============================================================================
# Basic API Tests
# =============================================================================


class TestBasicAPI:
    """Test basic API functionality."""

    def test_empty_string(self, encoder: Metaphone3):
        encoder.set_word("")
        encoder.encode()
        assert encoder.primary_key == ""
        assert encoder.alternate_key == ""

    def test_no_letters(self, encoder: Metaphone3):
        result = encoder.encode_word("1234-!?")
        assert result.primary == ""
        assert result.alternate == ""

    def test_keys_before_encoding_are_empty(self):
        encoder = Metaphone3("Metaphone")
        assert encoder.primary_key == ""
        assert encoder.alternate_key == ""

    def test_constructor_word(self):
        encoder = Metaphone3("Metaphone")
        encoder.encode()
        assert encoder.primary_key == "MTFN"

    def test_word_is_normalized(self, encoder: Metaphone3):
        encoder.set_word("Müller")
        assert encoder.word == "MÜLLER"

    def test_case_insensitive(self, encoder: Metaphone3):
        lower = encoder.encode_word("knight")
        upper = encoder.encode_word("KNIGHT")
        assert (lower.primary, lower.alternate) == (upper.primary, upper.alternate)

    def test_encode_word_returns_result(self, encoder: Metaphone3):
        result = encoder.encode_word("Smith")
        assert isinstance(result, EncodingResult)
        assert result.word == "SMITH"
        assert result.keys == ("SM0", "XMT")

    def test_result_keys_without_alternate(self, encoder: Metaphone3):
        assert encoder.encode_word("Meehan").keys == ("MHN",)


class TestModuleFunction:
    def test_encode_function(self):
        assert encode("Meehan").primary == "MHN"
        assert encode("Mary").primary == "MR"

    def test_encode_function_options(self):
        assert encode("banana").primary == "PNN"
        assert encode("banana", encode_vowels=True).primary == "PANANA"
        assert encode("Bob", encode_exact=True).primary == "BB"

    def test_encode_repeatable(self):
        result1 = encode("Thompson")
        result2 = encode("Thompson")
        assert result1 == result2

    def test_metaphone_tuple(self):
        assert metaphone("Smith") == ("SM0", "XMT")
        assert metaphone("Mary") == ("MR", "")


# =============================================================================
# Configuration
# =============================================================================


class TestConfiguration:
    def test_defaults(self, encoder: Metaphone3):
        assert encoder.max_key_length == DEFAULT_MAX_KEY_LENGTH
        assert encoder.encode_vowels is False
        assert encoder.encode_exact is False

    def test_maximum_key_length(self):
        assert Metaphone3.get_maximum_key_length() == MAX_KEY_ALLOCATION == 32

    def test_set_key_length_in_range(self, encoder: Metaphone3):
        assert encoder.set_max_key_length(5) is True
        assert encoder.max_key_length == 5

    def test_set_key_length_zero_clamps_to_one(self, encoder: Metaphone3):
        assert encoder.set_max_key_length(0) is False
        assert encoder.max_key_length == 1

    def test_set_key_length_negative_clamps_to_one(self, encoder: Metaphone3):
        assert encoder.set_max_key_length(-3) is False
        assert encoder.max_key_length == 1

    def test_set_key_length_above_ceiling(self, encoder: Metaphone3):
        assert encoder.set_max_key_length(33) is False
        assert encoder.max_key_length == 32

    def test_set_key_length_at_ceiling(self, encoder: Metaphone3):
        assert encoder.set_max_key_length(32) is True

    def test_constructor_clamps_key_length(self):
        assert Metaphone3(max_key_length=100).max_key_length == 32

    def test_toggles(self, encoder: Metaphone3):
        encoder.set_encode_vowels(True)
        encoder.set_encode_exact(True)
        assert encoder.encode_vowels is True
        assert encoder.encode_exact is True
        assert encoder.config.encode_vowels is True

    def test_configuration_survives_new_word(self, encoder: Metaphone3):
        encoder.set_max_key_length(3)
        encoder.set_encode_vowels(True)
        encoder.set_word("banana")
        encoder.encode()
        assert encoder.primary_key == "PAN"
        assert encoder.max_key_length == 3
        assert encoder.encode_vowels is True


# =============================================================================
# Driver Loop and Key Invariants
# =============================================================================


class TestKeyInvariants:
    def test_truncated_to_key_length(self, encoder: Metaphone3):
        encoder.set_max_key_length(2)
        assert encoder.encode_word("Mozart").primary == "MT"

    def test_key_length_five(self, encoder: Metaphone3):
        encoder.set_max_key_length(5)
        for word in SAMPLE_WORDS:
            result = encoder.encode_word(word)
            assert len(result.primary) <= 5
            assert len(result.alternate) <= 5

    def test_secondary_collapses_after_truncation(self, encoder: Metaphone3):
        assert encoder.encode_word("Pizza").keys == ("PTS", "PS")
        encoder.set_max_key_length(1)
        result = encoder.encode_word("Pizza")
        assert result.primary == "P"
        assert result.alternate == ""

    def test_reencode_resets_state(self, encoder: Metaphone3):
        encoder.encode_word("Smith")
        result = encoder.encode_word("Mary")
        assert result.keys == ("MR",)

    @pytest.mark.parametrize("encode_vowels", [False, True])
    @pytest.mark.parametrize("encode_exact", [False, True])
    def test_invariants_over_samples(self, encode_vowels, encode_exact):
        encoder = Metaphone3(encode_vowels=encode_vowels, encode_exact=encode_exact)
        for word in SAMPLE_WORDS:
            first = encoder.encode_word(word)
            second = encoder.encode_word(word)
            assert first == second
            for key in first.keys:
                assert len(key) <= DEFAULT_MAX_KEY_LENGTH
                assert "AA" not in key
            if first.alternate:
                assert first.alternate != first.primary

    def test_long_word_hits_ceiling(self):
        encoder = Metaphone3(max_key_length=32, encode_vowels=True)
        result = encoder.encode_word("supercalifragilisticexpialidocious" * 2)
        assert len(result.primary) == 32

    def test_debug_logging(self, encoder: Metaphone3, caplog):
        with caplog.at_level(logging.DEBUG, logger="metaphone3"):
            encoder.encode_word("Meehan")
        assert "MHN" in caplog.text

    def test_each_step_advances(self, monkeypatch, caplog):
        import metaphone3._encoder as encoder_module

        calls = []
        original = encoder_module.encode_next

        def counting(ctx):
            calls.append(ctx.current)
            original(ctx)

        monkeypatch.setattr(encoder_module, "encode_next", counting)
        with caplog.at_level(logging.WARNING, logger="metaphone3"):
            for word in SAMPLE_WORDS:
                calls.clear()
                result = encode(word, max_key_length=MAX_KEY_ALLOCATION, encode_vowels=True)
                assert len(calls) <= len(result.word)
                assert calls == sorted(set(calls))
        assert "No progress" not in caplog.text


# =============================================================================
# Concurrency
# =============================================================================


class TestConcurrency:
    WORDS = ["Knight", "Metaphone", "Thompson", "Schmidt", "Smith", "banana", "Pizza", "Swanson"]

    def test_encode_function_across_threads(self):
        expected = {word: encode(word) for word in self.WORDS}
        expected_vowels = {word: encode(word, encode_vowels=True) for word in self.WORDS}

        def worker(offset):
            mismatches = []
            for i in range(200):
                word = self.WORDS[(i + offset) % len(self.WORDS)]
                if encode(word) != expected[word]:
                    mismatches.append(word)
                if encode(word, encode_vowels=True) != expected_vowels[word]:
                    mismatches.append(word)
            return mismatches

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(worker, range(8)))

        assert results == [[]] * 8

    def test_encoder_per_thread(self):
        expected = {word: encode(word) for word in self.WORDS}

        def worker(offset):
            encoder = Metaphone3()
            return [
                encoder.encode_word(word) == expected[word]
                for word in self.WORDS[offset:] + self.WORDS[:offset]
            ]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(worker, range(4)))

        assert all(all(row) for row in results)


# =============================================================================
# Worked Examples
# =============================================================================


class TestWorkedExamples:
    @pytest.mark.parametrize(
        "word,primary,alternate",
        [
            ("Metaphone", "MTFN", ""),
            ("Meehan", "MHN", ""),
            ("Mary", "MR", ""),
            ("Knight", "NT", ""),
            ("Smith", "SM0", "XMT"),
            ("Swanson", "SNSN", "SVNSN"),
            ("Pizza", "PTS", "PS"),
            ("Mozart", "MTSRT", ""),
            ("Thumb", "0M", ""),
            ("Hugh", "H", ""),
            ("Hour", "AR", ""),
            ("Herb", "HRP", "ARP"),
            ("Often", "AFN", "AFTN"),
            ("Yves", "AF", ""),
            ("Phone", "FN", ""),
            ("Mr", "MSTR", ""),
            ("Mrs", "MSS", ""),
        ],
    )
    def test_default_settings(self, encoder: Metaphone3, word, primary, alternate):
        result = encoder.encode_word(word)
        assert (result.primary, result.alternate) == (primary, alternate)

    def test_thompson_th_is_t(self, encoder: Metaphone3):
        primary = encoder.encode_word("Thompson").primary
        assert primary.startswith("T")
        assert "0" not in primary

    def test_knight_has_no_k(self, encoder: Metaphone3):
        result = encoder.encode_word("Knight")
        assert "K" not in result.primary
        assert "H" not in result.primary

    def test_island_s_is_silent(self, encoder: Metaphone3):
        assert "S" not in encoder.encode_word("Island").primary

    def test_vowel_encoding_changes_key(self, encoder: Metaphone3, vowel_encoder: Metaphone3):
        plain = encoder.encode_word("banana").primary
        vowels = vowel_encoder.encode_word("banana").primary
        assert plain == "PNN"
        assert vowels == "PANANA"
        assert plain != vowels

    def test_vowel_encoding_mr(self, vowel_encoder: Metaphone3):
        assert vowel_encoder.encode_word("Mr").primary == "MASTAR"

    def test_exact_voicing(self, encoder: Metaphone3, exact_encoder: Metaphone3):
        assert encoder.encode_word("Bob").primary == "PP"
        assert exact_encoder.encode_word("Bob").primary == "BB"

    @pytest.mark.parametrize(
        "word,primary",
        [
            ("ß", "S"),
            ("ça", "S"),
            ("Ñ", "N"),
            ("þor", "0R"),
            ("Šá", "X"),
            ("Ž", "S"),
        ],
    )
    def test_extended_letters(self, encoder: Metaphone3, word, primary):
        assert encoder.encode_word(word).primary == primary
