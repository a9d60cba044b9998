"""
Unit tests for the lexicon and custom vocabulary loading.
"""

import pytest

from scholarcheck.exceptions import ConfigurationError
from scholarcheck.spelling.lexicon import (
    DEFAULT_LEXICON,
    KNOWN_MISSPELLINGS,
    Lexicon,
    english_dictionary,
    load_lexicon,
)


class TestDefaultLexicon:
    """Tests for the built-in lexicon."""

    def test_word_classes(self, lexicon):
        """Each class holds its representative words."""
        assert "the" in lexicon.common
        assert "algorithm" in lexicon.technical
        assert "serendipity" in lexicon.rare_valid

    def test_words_is_union(self, lexicon):
        """words covers all three classes and the base dictionary."""
        curated = lexicon.common | lexicon.technical | lexicon.rare_valid
        assert lexicon.words == curated | lexicon.dictionary
        assert len(lexicon) == len(lexicon.words)

    def test_contains(self, lexicon):
        """Membership checks the union."""
        assert "serendipity" in lexicon
        assert "teh" not in lexicon

    def test_ordered_words_sorted(self, lexicon):
        """The suggestion scan covers the word classes in sorted order."""
        curated = lexicon.common | lexicon.technical | lexicon.rare_valid
        assert list(lexicon.ordered_words) == sorted(curated)

    def test_lookup_tables(self, lexicon):
        """Typo and context tables carry their curated entries."""
        assert lexicon.typos["teh"] == "the"
        assert lexicon.context_patterns["recieve"] == ("receive",)
        assert lexicon.context_patterns["there"] == ("their", "they're")
        assert "doesn't" in lexicon.contractions

    def test_tables_are_read_only(self, lexicon):
        """The shared lookup tables cannot be mutated."""
        with pytest.raises(TypeError):
            lexicon.typos["new"] = "value"
        with pytest.raises(TypeError):
            lexicon.context_patterns["new"] = ("value",)

    def test_lexicon_is_frozen(self, lexicon):
        """Lexicon attributes cannot be reassigned."""
        with pytest.raises(AttributeError):
            lexicon.common = frozenset()


class TestEnglishDictionary:
    """Tests for the base English dictionary."""

    def test_loaded_once(self):
        """Repeated calls return the same shared set."""
        assert english_dictionary() is english_dictionary()
        assert DEFAULT_LEXICON.dictionary is english_dictionary()

    def test_everyday_words(self):
        """Ordinary words outside the curated classes are present."""
        for word in ("quick", "brown", "fox", "dog", "near", "wrong", "river"):
            assert word in english_dictionary(), word

    def test_misspellings_excluded(self):
        """Curated misspellings never count as dictionary words."""
        assert "teh" in KNOWN_MISSPELLINGS
        assert "recieve" in KNOWN_MISSPELLINGS
        assert not KNOWN_MISSPELLINGS & english_dictionary()

    def test_typo_keys_that_are_words_kept(self):
        """Real words that happen to be typo-table keys stay known."""
        assert "form" not in KNOWN_MISSPELLINGS
        assert "backup" not in KNOWN_MISSPELLINGS

    def test_not_scanned_for_suggestions(self, lexicon):
        """Dictionary-only words are known but not suggestion candidates."""
        assert "fox" in lexicon
        assert "fox" not in lexicon.ordered_words

    def test_carried_through_extension(self):
        """Extended lexicons keep the base dictionary."""
        lex = DEFAULT_LEXICON.extended(technical={"kubectl"})
        assert lex.dictionary is DEFAULT_LEXICON.dictionary


class TestExtended:
    """Tests for Lexicon.extended()."""

    def test_adds_words_without_mutating(self):
        """Extension returns a new lexicon and leaves the receiver alone."""
        lex = DEFAULT_LEXICON.extended(technical={"Kubectl"}, rare_valid=["quixotry"])

        assert "kubectl" in lex.technical
        assert "quixotry" in lex.rare_valid
        assert "kubectl" not in DEFAULT_LEXICON
        assert "quixotry" not in DEFAULT_LEXICON

    def test_merges_tables(self):
        """Typos and context patterns are merged over the existing ones."""
        lex = DEFAULT_LEXICON.extended(
            typos={"Kubctl": "kubectl"},
            context_patterns={"datas": ["data"]},
        )

        assert lex.typos["kubctl"] == "kubectl"
        assert lex.typos["teh"] == "the"
        assert lex.context_patterns["datas"] == ("data",)

    def test_blank_words_ignored(self):
        """Empty and whitespace-only entries are dropped."""
        lex = Lexicon(common=frozenset(), technical=frozenset(), rare_valid=frozenset())
        extended = lex.extended(common=["", "  ", " Word "])
        assert extended.common == frozenset({"word"})


class TestLoadLexicon:
    """Tests for load_lexicon()."""

    def test_no_extension_returns_base(self):
        """Nothing to add returns the shared default."""
        assert load_lexicon() is DEFAULT_LEXICON

    def test_additional_vocabulary(self):
        """Extra words join the technical class."""
        lex = load_lexicon(additional_vocabulary={"nginx"})
        assert "nginx" in lex.technical

    def test_yaml_file(self, tmp_path):
        """A YAML file extends every section it names."""
        path = tmp_path / "lexicon.yaml"
        path.write_text(
            "technical:\n"
            "  - kubectl\n"
            "rare_valid:\n"
            "  - quixotry\n"
            "typos:\n"
            "  kubctl: kubectl\n"
            "context_patterns:\n"
            "  datas: [data]\n",
            encoding="utf-8",
        )

        lex = load_lexicon(path)

        assert "kubectl" in lex.technical
        assert "quixotry" in lex.rare_valid
        assert lex.typos["kubctl"] == "kubectl"
        assert lex.context_patterns["datas"] == ("data",)

    def test_empty_yaml_file(self, tmp_path):
        """An empty file adds nothing."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        lex = load_lexicon(path)
        assert lex.words == DEFAULT_LEXICON.words

    def test_missing_file(self, tmp_path):
        """A missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_lexicon(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Unparsable YAML is a configuration error."""
        path = tmp_path / "bad.yaml"
        path.write_text("technical: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_lexicon(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        """A bare list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- kubectl\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_lexicon(path)

    def test_unknown_key(self, tmp_path):
        """Unexpected sections are rejected."""
        path = tmp_path / "unknown.yaml"
        path.write_text("slang: [gonna]\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Unknown lexicon keys"):
            load_lexicon(path)

    def test_word_section_must_be_list(self, tmp_path):
        """Word classes must be lists."""
        path = tmp_path / "scalar.yaml"
        path.write_text("technical: kubectl\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="technical"):
            load_lexicon(path)
