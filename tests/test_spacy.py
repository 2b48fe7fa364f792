"""Tests for the spaCy pipeline component."""

import pytest

spacy = pytest.importorskip("spacy")

import metaphone3.spacy  # noqa: E402,F401  registers the factory


@pytest.fixture(autouse=True)
def _clean_extensions():
    """Remove custom extensions between tests to avoid conflicts."""
    from spacy.tokens import Doc, Token

    yield

    if Doc.has_extension("metaphone"):
        Doc.remove_extension("metaphone")
    for ext in ["metaphone", "metaphone_alt"]:
        if Token.has_extension(ext):
            Token.remove_extension(ext)


class TestMetaphoneComponent:
    def test_factory_registered(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3")
        assert "metaphone3" in nlp.pipe_names

    def test_token_keys(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3")
        doc = nlp("Mary Meehan")
        assert [token._.metaphone for token in doc] == ["MR", "MHN"]

    def test_token_alternate(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3")
        doc = nlp("Smith")
        assert doc[0]._.metaphone == "SM0"
        assert doc[0]._.metaphone_alt == "XMT"

    def test_no_alternate_is_empty(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3")
        doc = nlp("Mary")
        assert doc[0]._.metaphone_alt == ""

    def test_doc_keys_skip_punctuation(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3")
        doc = nlp("Mary, Meehan!")
        assert doc._.metaphone == "MR MHN"
        assert doc[1]._.metaphone == ""

    def test_config(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3", config={"encode_vowels": True, "max_key_length": 4})
        doc = nlp("banana")
        assert doc[0]._.metaphone == "PANA"

    def test_exact_config(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3", config={"encode_exact": True})
        doc = nlp("Bob")
        assert doc[0]._.metaphone == "BB"

    def test_get_pipe(self):
        from metaphone3.spacy import MetaphoneComponent, get_metaphone_pipe

        nlp = spacy.blank("en")
        assert get_metaphone_pipe(nlp) is None
        nlp.add_pipe("metaphone3")
        assert isinstance(get_metaphone_pipe(nlp), MetaphoneComponent)

    def test_serialization_roundtrip(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("metaphone3")
        data = nlp.to_bytes()
        nlp2 = spacy.blank("en")
        nlp2.add_pipe("metaphone3")
        nlp2.from_bytes(data)
        assert nlp2("Meehan")[0]._.metaphone == "MHN"


class TestLazyImport:
    def test_component_from_package(self):
        from metaphone3 import MetaphoneComponent
        from metaphone3.spacy import MetaphoneComponent as Direct

        assert MetaphoneComponent is Direct

    def test_unknown_attribute(self):
        import metaphone3

        with pytest.raises(AttributeError):
            metaphone3.not_a_thing
