"""
metaphone3: Metaphone 3 phonetic encoding.

Encodes English words and American names so that words which sound
alike get the same key. Where a spelling has two plausible
pronunciations an alternate key is produced as well.

Basic usage:
    >>> from metaphone3 import encode
    >>> encode("Knight").primary
    'NT'

Reusing one encoder with custom settings:
    >>> from metaphone3 import Metaphone3
    >>> encoder = Metaphone3(encode_vowels=True, encode_exact=True)
    >>> result = encoder.encode_word("Metaphone")
"""

from metaphone3._context import (
    DEFAULT_MAX_KEY_LENGTH,
    MAX_KEY_ALLOCATION,
    EncoderConfig,
    ScanContext,
)
from metaphone3._encoder import EncodingResult, Metaphone3, encode
from metaphone3._normalize import normalize_word, uppercase_word

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_MAX_KEY_LENGTH",
    "MAX_KEY_ALLOCATION",
    "EncoderConfig",
    "EncodingResult",
    "Metaphone3",
    "ScanContext",
    "encode",
    "metaphone",
    "normalize_word",
    "uppercase_word",
]


def metaphone(text: str) -> tuple[str, str]:
    """
    Return the (primary, alternate) keys for a word with default settings.

    Args:
        text: Raw word

    Returns:
        Tuple of primary key and alternate key ('' when there is none)
    """
    result = encode(text)
    return result.primary, result.alternate


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "MetaphoneComponent":
        try:
            from metaphone3.spacy import MetaphoneComponent
            return MetaphoneComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install metaphone3[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
