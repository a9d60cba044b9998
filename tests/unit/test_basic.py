"""
Basic tests for ScholarCheck package structure.

These tests verify the public API is importable and
basic configuration works correctly.
"""


class TestImports:
    """Test that the public API is importable."""

    def test_import_package(self):
        """Can import the main package."""
        import scholarcheck

        assert scholarcheck.__version__ == "0.1.0"

    def test_import_main_functions(self):
        """Can import the main entry points."""
        from scholarcheck import analyze_plagiarism, check_spelling, read_text

        assert callable(check_spelling)
        assert callable(analyze_plagiarism)
        assert callable(read_text)

    def test_import_config(self):
        """Can import configuration classes."""
        from scholarcheck import PlagiarismConfig, SpellCheckConfig

        assert SpellCheckConfig().acceptance_threshold == 0.75
        assert PlagiarismConfig().min_similarity == 0.3

    def test_import_enums(self):
        """Enum values are the serialized strings."""
        from scholarcheck import ErrorKind, MatchType

        assert ErrorKind.TYPO.value == "typo"
        assert MatchType.PARAPHRASED.value == "paraphrased"

    def test_all_exports_exist(self):
        """Every name in __all__ is importable."""
        import scholarcheck

        for name in scholarcheck.__all__:
            assert hasattr(scholarcheck, name), name

    def test_exception_hierarchy(self):
        """All library errors share one base class."""
        from scholarcheck import (
            AnalysisError,
            ConfigurationError,
            ExtractionError,
            ScholarCheckError,
            SearchError,
            UnsupportedFormatError,
        )

        for error in (
            AnalysisError,
            ConfigurationError,
            ExtractionError,
            SearchError,
            UnsupportedFormatError,
        ):
            assert issubclass(error, ScholarCheckError)
