"""Shared fixtures for metaphone3 tests."""

import pytest

from metaphone3 import EncoderConfig, Metaphone3, ScanContext

# Words exercising most letter groups, used for invariant checks
SAMPLE_WORDS = [
    "Metaphone", "Thompson", "Knight", "Meehan", "Mary", "Smith", "Schmidt",
    "Swanson", "Pizza", "Mozart", "Thumb", "Hugh", "Herb", "Hour", "Often",
    "Yves", "Island", "banana", "Bob", "bristle", "Christmas", "Xavier",
    "Wright", "Jose", "Guillermo", "Caesar", "Michael", "Tchaikovsky",
    "Filipowicz", "Brzezinski", "Nietzsche", "Gallagher", "Laughter",
    "Zbigniew", "Übermensch", "Ñandú", "Þórr", "straße", "Mr", "Mrs",
    "Aaron", "aeiou", "queue", "", "123", "O'Brien", "van Gogh",
]


@pytest.fixture
def encoder() -> Metaphone3:
    """Return a fresh encoder with default settings."""
    return Metaphone3()


@pytest.fixture
def vowel_encoder() -> Metaphone3:
    """Return a fresh encoder that encodes non-initial vowels."""
    return Metaphone3(encode_vowels=True)


@pytest.fixture
def exact_encoder() -> Metaphone3:
    """Return a fresh encoder that keeps voiced and unvoiced consonants apart."""
    return Metaphone3(encode_exact=True)


@pytest.fixture
def make_context():
    """Build a scan context for a raw word."""

    def _make(word: str, **options) -> ScanContext:
        return ScanContext(word, config=EncoderConfig(**options))

    return _make
