"""
Input normalization for the Metaphone 3 encoder.

Uppercases a word over the working alphabet (basic Latin plus the
Latin-1 supplement and the handful of Windows-1252 letters Metaphone 3
knows about) and appends the sentinel that terminates every scan.

Uppercasing goes through an explicit translation table rather than
``str.upper()``: the encoder dispatches on 'ß' directly, and
``"ß".upper()`` would expand it to "SS".
"""

from __future__ import annotations

__all__ = ["SENTINEL", "normalize_word", "uppercase_word"]

# Trailing character appended to every normalized word. Lookahead of one
# position past the last real letter always lands here.
SENTINEL = " "


def _build_uppercase_table() -> dict[int, int]:
    table: dict[int, int] = {}
    # Basic Latin a-z
    for code in range(ord("a"), ord("z") + 1):
        table[code] = code - 0x20
    # Latin-1 supplement à..þ -> À..Þ, skipping the division sign
    for code in range(0xE0, 0xFF):
        if code == 0xF7:
            continue
        table[code] = code - 0x20
    # Caron-accented Slavic letters and the ligature between them
    table[ord("š")] = ord("Š")
    table[ord("œ")] = ord("Œ")
    table[ord("ž")] = ord("Ž")
    # y with diaeresis lives outside Latin-1 in its uppercase form
    table[ord("ÿ")] = ord("Ÿ")
    return table


_UPPERCASE_TABLE = _build_uppercase_table()


def uppercase_word(text: str) -> str:
    """
    Uppercase a word over the encoder's working alphabet.

    Characters outside the table (digits, punctuation, other scripts)
    pass through unchanged.

    Example:
        >>> uppercase_word("Müller")
        'MÜLLER'
        >>> uppercase_word("straße")
        'STRAßE'
    """
    return text.translate(_UPPERCASE_TABLE)


def normalize_word(text: str) -> str:
    """
    Prepare a raw word for scanning: uppercase it and append the sentinel.

    Args:
        text: Raw input word

    Returns:
        The uppercased word followed by a single sentinel space
    """
    return uppercase_word(text) + SENTINEL
