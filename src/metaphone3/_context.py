"""
Scan state shared by every Metaphone 3 letter rule.

A ``ScanContext`` holds one normalized word, the cursor walking it, the
two key buffers being built, and the read-only encoder settings. Rule
functions take the context as their only argument, mutate it, and
return ``True`` when they consumed input.

All lookups are total: reading outside the word yields an empty string
and ``string_at`` answers ``False`` for windows that do not fit, so no
rule guard can fault at the edges of a word.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from metaphone3._normalize import SENTINEL, normalize_word

__all__ = [
    "DEFAULT_MAX_KEY_LENGTH",
    "MAX_KEY_ALLOCATION",
    "VOWEL_PLACEHOLDER",
    "EncoderConfig",
    "ScanContext",
    "is_vowel",
    "root_or_inflections",
]

# Hard ceiling on key length
MAX_KEY_ALLOCATION = 32

# Key length used when none is configured
DEFAULT_MAX_KEY_LENGTH = 8

# Every symbol emitted for a vowel sound
VOWEL_PLACEHOLDER = "A"

_VOWELS = frozenset("AEIOUYÀÁÂÃÄÅÆÈÉÊËÌÍÎÏÒÓÔÕÖŒØÙÚÛÜÝŸ")


def is_vowel(char: str) -> bool:
    """Check if an uppercased character is a vowel (Y included, W not)."""
    return char in _VOWELS


def root_or_inflections(word: str, root: str) -> bool:
    """
    Check whether ``word`` is ``root`` or a regular English inflection of it.

    Matches e.g. "ACHE", "ACHES", "ACHED", "ACHING", "ACHINGLY", "ACHY"
    for the root "ACHE", and nothing else that merely contains the root.
    """
    if word == root or word == root + "S":
        return True

    ends_in_e = root.endswith("E")

    if not ends_in_e and word == root + "ES":
        return True

    if word == (root + "D" if ends_in_e else root + "ED"):
        return True

    stem = root[:-1] if ends_in_e else root
    return word in (stem + "ING", stem + "INGLY", stem + "Y")


@dataclass(frozen=True)
class EncoderConfig:
    """Settings read by the rules during a pass."""

    max_key_length: int = DEFAULT_MAX_KEY_LENGTH
    encode_vowels: bool = False
    encode_exact: bool = False


@dataclass
class ScanContext:
    """
    Mutable state for one encoding pass over one word.

    Attributes:
        word: Normalized word, sentinel included
        length: Number of real characters (sentinel excluded)
        last: Index of the last real character
        current: Cursor; only ever moves forward
        primary: Primary key under construction
        secondary: Alternate key under construction
        flag_al_inversion: Set once a vowel/liquid transposition has
            already been encoded for the syllable at the cursor
    """

    word: str
    config: EncoderConfig = field(default_factory=EncoderConfig)
    current: int = 0
    primary: str = ""
    secondary: str = ""
    flag_al_inversion: bool = False

    def __post_init__(self) -> None:
        if not self.word.endswith(SENTINEL):
            self.word = normalize_word(self.word)
        self.length = len(self.word) - len(SENTINEL)
        self.last = self.length - 1
        # Word without the sentinel, for whole-word comparisons
        self.text = self.word[: self.length]

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    @property
    def encode_vowels(self) -> bool:
        return self.config.encode_vowels

    @property
    def encode_exact(self) -> bool:
        return self.config.encode_exact

    # -------------------------------------------------------------------------
    # Reading the word
    # -------------------------------------------------------------------------

    def char_at(self, at: int) -> str:
        """Character at ``at``; the sentinel at ``length``, '' outside."""
        if 0 <= at < len(self.word):
            return self.word[at]
        return ""

    def string_at(self, start: int, length: int, *patterns: str) -> bool:
        """
        Test the window ``[start, start + length)`` against literal patterns.

        The window must lie inside the real word; the sentinel never
        takes part in a match. Returns ``True`` if any pattern matches.
        """
        if start < 0 or start > self.last or start + length - 1 > self.last:
            return False

        window = self.word[start : start + length]
        for pattern in patterns:
            if pattern[:length] == window:
                return True
        return False

    def is_vowel_at(self, at: int) -> bool:
        """Check if the character at ``at`` is a vowel; ``False`` outside."""
        if at < 0 or at >= self.length:
            return False
        return is_vowel(self.word[at])

    def front_vowel(self, at: int) -> bool:
        """Check for a close front vowel (E, I or Y) at ``at``."""
        return self.char_at(at) in ("E", "I", "Y")

    def slavo_germanic(self) -> bool:
        """Detect words beginning with spellings typical of German or Slavic names."""
        return (
            self.string_at(0, 3, "SCH")
            or self.string_at(0, 2, "SW")
            or self.char_at(0) == "J"
            or self.char_at(0) == "W"
        )

    def root_or_inflections(self, root: str, start: int = 0) -> bool:
        """Check the word (from ``start``) against ``root`` and its inflections."""
        return root_or_inflections(self.text[max(start, 0) :], root)

    # -------------------------------------------------------------------------
    # Moving the cursor
    # -------------------------------------------------------------------------

    def skip_vowels(self, at: int) -> int:
        """
        Return the position of the next consonant at or after ``at``.

        W is skipped along with the vowels, as is the H of a WH that is
        not the start of another word ("-WHOUSE" is skipped, "-WHOLE" is
        not). Slavic -WICZ/-WITZ/-EWSKI endings stop the skip at the W.
        """
        if at < 0:
            return 0
        if at >= self.length:
            return self.length

        char = self.char_at(at)
        while is_vowel(char) or char == "W":
            if (
                self.string_at(at, 4, "WICZ", "WITZ", "WIAK")
                or self.string_at(at - 1, 5, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
                or (self.string_at(at, 5, "WICKI", "WACKI") and at + 4 == self.last)
            ):
                break

            at += 1
            if (
                self.char_at(at - 1) == "W"
                and self.char_at(at) == "H"
                and not (
                    self.string_at(at, 3, "HOP")
                    or self.string_at(at, 4, "HIDE", "HARD", "HEAD", "HAWK", "HERD",
                                      "HOOK", "HAND", "HOLE")
                    or self.string_at(at, 5, "HEART", "HOUSE", "HOUND")
                    or self.string_at(at, 6, "HAMMER")
                )
            ):
                at += 1
            char = self.char_at(at)

        return at

    def advance_counter(self, if_not_encode_vowels: int, if_encode_vowels: int) -> None:
        """Advance the cursor by an amount that depends on vowel encoding."""
        if not self.encode_vowels:
            self.current += if_not_encode_vowels
        else:
            self.current += if_encode_vowels

    # -------------------------------------------------------------------------
    # Emitting key symbols
    # -------------------------------------------------------------------------

    def add(self, main: str, alt: str | None = None) -> None:
        """
        Append ``main`` to the primary key and ``alt`` to the alternate key.

        With ``alt`` omitted both keys receive ``main``. A vowel
        placeholder is never appended directly after another one.
        """
        if alt is None:
            alt = main

        if not (main.startswith(VOWEL_PLACEHOLDER) and self.primary.endswith(VOWEL_PLACEHOLDER)):
            self.primary += main

        if not (alt.startswith(VOWEL_PLACEHOLDER) and self.secondary.endswith(VOWEL_PLACEHOLDER)):
            self.secondary += alt

    def add_exact_approx(self, main_exact: str, main: str) -> None:
        """Append ``main_exact`` in exact-voicing mode, ``main`` otherwise."""
        if self.encode_exact:
            self.add(main_exact)
        else:
            self.add(main)

    def add_exact_approx_alt(
        self, main_exact: str, alt_exact: str, main: str, alt: str
    ) -> None:
        """Two-key form of ``add_exact_approx``."""
        if self.encode_exact:
            self.add(main_exact, alt_exact)
        else:
            self.add(main, alt)

    def keys_full(self) -> bool:
        """True once either key has grown past the configured length."""
        limit = self.config.max_key_length
        return len(self.primary) > limit or len(self.secondary) > limit
