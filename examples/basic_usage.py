#!/usr/bin/env python3
"""
Basic ScholarCheck Usage Example

This example demonstrates the core workflow:
1. Spell check a text and apply corrections
2. Validate single words
3. Check a text for plagiarism against a search provider
4. Read input from a file
"""

from pathlib import Path

from scholarcheck import (
    PlagiarismConfig,
    SearchResult,
    SpellChecker,
    SpellCheckConfig,
    StaticSearchProvider,
    analyze_plagiarism,
    apply_suggestion,
    check_spelling,
    read_text,
)

ESSAY = (
    "Machine learning algorithms have revolutionized teh way we process data. "
    "Neural networks are computational models inspired by biological neural networks "
    "that constitute animal brains."
)


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Spell Checking
    # ─────────────────────────────────────────────────────────────────────────

    result = check_spelling(ESSAY)

    print(f"Tokens: {result.total_tokens}, unknown: {result.error_count}")
    for finding in result.findings:
        print(
            f"  {finding.token.text!r} -> {finding.best.word!r} "
            f"({finding.error_kind.value}, confidence {finding.confidence:.2f})"
        )
    print(f"Corrected: {result.corrected_text}")

    # Apply one suggestion at a time instead of taking the whole rewrite
    if result.findings:
        first = result.findings[0]
        print(apply_suggestion(ESSAY, first.token, first.best.word))

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Word Validation
    # ─────────────────────────────────────────────────────────────────────────

    checker = SpellChecker(config=SpellCheckConfig(additional_vocabulary={"kubectl"}))

    for word in ("algorithm", "serendipity", "kubectl", "recieve"):
        validation = checker.validate_word(word)
        print(f"{word}: valid={validation.is_valid} suggestions={validation.suggestions}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Plagiarism Analysis
    # ─────────────────────────────────────────────────────────────────────────

    # A real deployment implements SearchProvider against a web search API
    provider = StaticSearchProvider(
        [
            SearchResult(
                "https://wikipedia.org/neural-network",
                "Neural network",
                "Neural networks are computational models inspired by biological neural "
                "networks that constitute animal brains.",
            ),
        ]
    )

    config = PlagiarismConfig(deep_scan=True, include_academic=False, search_timeout=5.0)
    analysis = analyze_plagiarism(ESSAY, provider, config)

    print(f"Similarity: {analysis.overall_similarity:.1f}%")
    print(f"Originality: {analysis.originality_score:.1f}%")
    for match in analysis.matches:
        print(f"  [{match.match_type.value}] {match.source_id} ({match.similarity:.2f})")
    for segment in analysis.suspicious_segments:
        print(f"  suspicious: {segment.text!r} at {segment.start_offset}")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Reading Files
    # ─────────────────────────────────────────────────────────────────────────

    path = Path("path/to/essay.pdf")
    if path.exists():
        text = read_text(path)
        print(check_spelling(text).to_dict())


if __name__ == "__main__":
    main()
