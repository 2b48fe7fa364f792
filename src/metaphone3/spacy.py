"""
spaCy integration for metaphone3.

Provides a pipeline component that stores Metaphone 3 keys on tokens.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("en")
    >>> nlp.add_pipe("metaphone3")
    >>> doc = nlp("Mary Meehan")
    >>> [token._.metaphone for token in doc]
    ['MR', 'MHN']
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from metaphone3._context import DEFAULT_MAX_KEY_LENGTH
from metaphone3._encoder import Metaphone3

__all__ = [
    "MetaphoneComponent",
    "create_metaphone_component",
    "get_metaphone_pipe",
]


# =============================================================================
# Metaphone Component
# =============================================================================


@Language.factory(
    "metaphone3",
    default_config={
        "max_key_length": DEFAULT_MAX_KEY_LENGTH,
        "encode_vowels": False,
        "encode_exact": False,
    },
    assigns=["token._.metaphone", "token._.metaphone_alt"],
)
def create_metaphone_component(
    nlp: Language,
    name: str,
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
    encode_vowels: bool = False,
    encode_exact: bool = False,
) -> "MetaphoneComponent":
    """Create a Metaphone 3 pipeline component."""
    return MetaphoneComponent(
        nlp,
        name,
        max_key_length=max_key_length,
        encode_vowels=encode_vowels,
        encode_exact=encode_exact,
    )


class MetaphoneComponent:
    """
    spaCy pipeline component for Metaphone 3 keys.

    Tokens without any letters (punctuation, numbers, whitespace) get an
    empty primary key.

    Extensions:
        - Token._.metaphone: Primary key.
        - Token._.metaphone_alt: Alternate key ('' when there is none).
        - Doc._.metaphone: Primary keys of all tokens, space separated.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
        encode_vowels: bool = False,
        encode_exact: bool = False,
    ) -> None:
        self.name = name
        self._encoder = Metaphone3(
            max_key_length=max_key_length,
            encode_vowels=encode_vowels,
            encode_exact=encode_exact,
        )

        if not Doc.has_extension("metaphone"):
            Doc.set_extension("metaphone", default=None)
        if not Token.has_extension("metaphone"):
            Token.set_extension("metaphone", default=None)
        if not Token.has_extension("metaphone_alt"):
            Token.set_extension("metaphone_alt", default=None)

    def __call__(self, doc: Doc) -> Doc:
        keys = []
        for token in doc:
            result = self._encoder.encode_word(token.text)
            token._.metaphone = result.primary
            token._.metaphone_alt = result.alternate
            if result.primary:
                keys.append(result.primary)

        doc._.metaphone = " ".join(keys)
        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "MetaphoneComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "MetaphoneComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_metaphone_pipe(nlp: Language) -> Optional[MetaphoneComponent]:
    """Get the Metaphone 3 component from a pipeline."""
    if "metaphone3" in nlp.pipe_names:
        return nlp.get_pipe("metaphone3")
    return None
