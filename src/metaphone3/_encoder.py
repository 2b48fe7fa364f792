"""
Metaphone 3 encoder.

Walks a normalized word left to right, handing each position to the
rule group for the letter found there, and collects a primary key and
an alternate key. The alternate key carries a competing pronunciation
(Anglicized versus native, Germanic versus Romance, ...) and is empty
when no rule produced one.

Example:
    >>> from metaphone3 import Metaphone3
    >>> encoder = Metaphone3("Metaphone")
    >>> encoder.encode()
    >>> encoder.primary_key
    'MTFN'

    >>> from metaphone3 import encode
    >>> encode("Meehan").primary
    'MHN'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from metaphone3._context import (
    DEFAULT_MAX_KEY_LENGTH,
    MAX_KEY_ALLOCATION,
    EncoderConfig,
    ScanContext,
)
from metaphone3._normalize import normalize_word
from metaphone3.rules import encode_next

__all__ = ["EncodingResult", "Metaphone3", "encode", "run_encoding"]

logger = logging.getLogger(__name__)

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class EncodingResult:
    """Keys produced for one word."""

    word: str
    primary: str
    alternate: str = ""

    @property
    def keys(self) -> tuple[str, ...]:
        """Primary key, followed by the alternate key when there is one."""
        if self.alternate:
            return (self.primary, self.alternate)
        return (self.primary,)


# =============================================================================
# Encoder
# =============================================================================


class Metaphone3:
    """
    Reusable Metaphone 3 encoder.

    Configuration (key length, vowel encoding, exact voicing) persists
    across words; each call to :meth:`encode` starts a fresh pass over
    the word last given to :meth:`set_word`.

    Instances are not safe to share between threads. Give each thread
    its own encoder.

    Example:
        >>> encoder = Metaphone3()
        >>> encoder.set_encode_vowels(True)
        >>> encoder.encode_word("banana").primary
        'PANANA'
    """

    def __init__(
        self,
        word: Optional[str] = None,
        *,
        max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
        encode_vowels: bool = False,
        encode_exact: bool = False,
    ) -> None:
        self._config = EncoderConfig(encode_vowels=encode_vowels, encode_exact=encode_exact)
        self.set_max_key_length(max_key_length)

        self._word = normalize_word("")
        self._primary = ""
        self._secondary = ""
        if word is not None:
            self.set_word(word)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def config(self) -> EncoderConfig:
        return self._config

    @property
    def max_key_length(self) -> int:
        return self._config.max_key_length

    @property
    def encode_vowels(self) -> bool:
        return self._config.encode_vowels

    @property
    def encode_exact(self) -> bool:
        return self._config.encode_exact

    @staticmethod
    def get_maximum_key_length() -> int:
        """Hard ceiling accepted by :meth:`set_max_key_length`."""
        return MAX_KEY_ALLOCATION

    def set_max_key_length(self, length: int) -> bool:
        """
        Set the length both keys are truncated to.

        Values below 1 are raised to 1 and values above the ceiling are
        lowered to it.

        Args:
            length: Requested key length

        Returns:
            True if the requested length was used as given, False if it
            had to be clamped
        """
        clamped = min(max(length, 1), MAX_KEY_ALLOCATION)
        if clamped != length:
            logger.debug("Key length %d out of range, using %d", length, clamped)

        self._config = replace(self._config, max_key_length=clamped)
        return clamped == length

    def set_encode_vowels(self, flag: bool) -> None:
        """Encode non-initial vowels as 'A' (initial vowels always are)."""
        self._config = replace(self._config, encode_vowels=bool(flag))

    def set_encode_exact(self, flag: bool) -> None:
        """Keep voiced and unvoiced consonants apart (B/P, D/T, G/K, V/F...)."""
        self._config = replace(self._config, encode_exact=bool(flag))

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    @property
    def word(self) -> str:
        """The normalized word to be encoded, without its sentinel."""
        return self._word[:-1]

    def set_word(self, text: str) -> None:
        """Normalize and store the next word to encode."""
        self._word = normalize_word(text)

    def encode(self) -> None:
        """Run one encoding pass; read the results from the key properties."""
        self._primary, self._secondary = run_encoding(
            ScanContext(self._word, config=self._config)
        )

    @property
    def primary_key(self) -> str:
        return self._primary

    @property
    def alternate_key(self) -> str:
        """Alternate key, or '' when the word has only one encoding."""
        return self._secondary

    def encode_word(self, text: str) -> EncodingResult:
        """
        Set, encode and return the keys for a single word.

        Args:
            text: Raw word

        Returns:
            EncodingResult holding the normalized word and both keys
        """
        self.set_word(text)
        self.encode()
        return EncodingResult(word=self.word, primary=self._primary, alternate=self._secondary)


# =============================================================================
# Driver Loop
# =============================================================================


def run_encoding(ctx: ScanContext) -> tuple[str, str]:
    """
    Drive the rule groups over a fresh scan context.

    Args:
        ctx: Context for one word, positioned at its first letter

    Returns:
        (primary, alternate) truncated to the configured key length,
        with the alternate emptied when it equals the primary
    """
    while not ctx.keys_full() and ctx.current < ctx.length:
        start = ctx.current
        encode_next(ctx)
        if ctx.current <= start:
            logger.warning("No progress encoding %r at position %d", ctx.text, start)
            ctx.current = start + 1

    limit = ctx.config.max_key_length
    primary = ctx.primary[:limit]
    secondary = ctx.secondary[:limit]

    # Keys can become identical once truncated
    if primary == secondary:
        secondary = ""

    logger.debug("Encoded %r as %r / %r", ctx.text, primary, secondary)
    return primary, secondary


# =============================================================================
# Convenience Functions
# =============================================================================


def encode(
    text: str,
    *,
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
    encode_vowels: bool = False,
    encode_exact: bool = False,
) -> EncodingResult:
    """
    Encode one word with Metaphone 3.

    Convenience function; every call works on its own scan context, so
    it may be called from several threads at once.

    Args:
        text: Raw word
        max_key_length: Key length, clamped to 1..32
        encode_vowels: Encode non-initial vowels
        encode_exact: Keep voiced and unvoiced consonants apart

    Returns:
        EncodingResult with the primary and alternate keys

    Example:
        >>> encode("Mary").primary
        'MR'
    """
    config = EncoderConfig(
        max_key_length=min(max(max_key_length, 1), MAX_KEY_ALLOCATION),
        encode_vowels=encode_vowels,
        encode_exact=encode_exact,
    )
    word = normalize_word(text)
    primary, alternate = run_encoding(ScanContext(word, config=config))
    return EncodingResult(word=word[:-1], primary=primary, alternate=alternate)
