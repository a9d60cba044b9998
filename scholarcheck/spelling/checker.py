"""
Spell-check orchestrator.

Tokenizes text and walks the tokens left to right:
- known words are skipped
- rare-but-valid words are recorded as preserved and never corrected
- unknown words are ranked, scored and, above the acceptance threshold,
  reported and rewritten in the corrected text

Every unknown token counts towards `error_count`, even when no finding is
reported for it (no suggestions, or confidence below the threshold).
A correction is applied to every whole-word occurrence of the token, so
the same misspelling is always corrected the same way.
"""

from __future__ import annotations

import logging
import re

from scholarcheck.config import DEFAULT_SPELLCHECK_CONFIG, SpellCheckConfig
from scholarcheck.models import SpellCheckResult, SpellFinding, Token, WordValidation
from scholarcheck.spelling.lexicon import Lexicon, load_lexicon
from scholarcheck.spelling.ranker import SuggestionRanker
from scholarcheck.spelling.scoring import ConfidenceModel, error_subtype
from scholarcheck.spelling.validator import TokenValidator, normalize_token

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Words with an optional internal apostrophe ("don't", "editor's")
TOKEN_PATTERN = re.compile(r"\b\w+(?:'\w+)?\b")

SENTENCE_END_PATTERN = re.compile(r"[.!?]+")

# Characters either side of a token used when no sentence can be found
CONTEXT_WINDOW = 50

# Suggestions offered by validate_word()
VALIDATION_SUGGESTIONS = 5


# =============================================================================
# HELPERS
# =============================================================================


def tokenize(text: str) -> list[Token]:
    """
    Split text into word tokens with their character offsets.

    Example:
        >>> [t.text for t in tokenize("It's teh end.")]
        ["It's", 'teh', 'end']
    """
    return [
        Token(text=m.group(), normalized=normalize_token(m.group()), start_offset=m.start())
        for m in TOKEN_PATTERN.finditer(text)
    ]


def sentence_context(text: str, position: int) -> str:
    """
    The sentence containing a character position.

    Falls back to a window of CONTEXT_WINDOW characters either side
    when the position does not fall inside a non-empty sentence.
    """
    start = 0
    sentence = ""
    for m in SENTENCE_END_PATTERN.finditer(text):
        if m.end() <= position:
            start = m.end()
            continue
        sentence = text[start : m.start()].strip()
        break
    else:
        sentence = text[start:].strip()

    if sentence:
        return sentence
    return text[max(0, position - CONTEXT_WINDOW) : position + CONTEXT_WINDOW]


def replace_word(text: str, word: str, replacement: str) -> str:
    """Replace every whole-word occurrence of `word` in `text`."""
    pattern = re.compile(rf"\b{re.escape(word)}\b")
    return pattern.sub(lambda _: replacement, text)


def apply_suggestion(text: str, token: Token, replacement: str) -> str:
    """
    Replace a single token occurrence, leaving other occurrences alone.

    Args:
        text: The text the token was found in.
        token: Token to replace (its offsets must still be valid).
        replacement: The chosen correction.

    Returns:
        Text with the token replaced.

    Raises:
        ValueError: If the text no longer contains the token at its offset.
    """
    end = token.end_offset
    if text[token.start_offset : end] != token.text:
        raise ValueError(
            f"Token {token.text!r} not found at offset {token.start_offset}; "
            f"was the text modified?"
        )
    return text[: token.start_offset] + replacement + text[end:]


# =============================================================================
# SPELL CHECKER
# =============================================================================


class SpellChecker:
    """
    Checks and corrects spelling in plain text.

    Attributes:
        config: SpellCheckConfig controlling thresholds and vocabulary.
        lexicon: Lexicon shared by the validator, ranker and model.
        validator: TokenValidator for known-word checks.
        ranker: SuggestionRanker producing candidate corrections.
        model: ConfidenceModel scoring and classifying findings.

    Example:
        >>> checker = SpellChecker()
        >>> result = checker.check("Machine learning has changed teh world.")
        >>> result.corrected_text
        'Machine learning has changed the world.'
        >>> [f.token.text for f in result.findings]
        ['teh']
    """

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        config: SpellCheckConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the checker.

        Args:
            lexicon: Lexicon to use. Defaults to the built-in lexicon extended
                by config.lexicon_path and config.additional_vocabulary.
            config: Thresholds and vocabulary options.
            logger: Logger receiving per-token decisions (DEBUG) and summaries (INFO).
        """
        self.config = config or DEFAULT_SPELLCHECK_CONFIG
        if lexicon is None:
            lexicon = load_lexicon(self.config.lexicon_path, self.config.additional_vocabulary)
        self.lexicon = lexicon
        self.validator = TokenValidator(lexicon)
        self.ranker = SuggestionRanker(lexicon)
        self.model = ConfidenceModel(lexicon)
        self.logger = logger or logging.getLogger(__name__)

    def is_known(self, word: str) -> bool:
        """Check if a word is known to the lexicon."""
        return self.validator.is_known(word)

    def check(self, text: str) -> SpellCheckResult:
        """
        Spell check a text.

        Args:
            text: Plain text to check.

        Returns:
            SpellCheckResult with findings and the corrected text.

        Raises:
            ValueError: If text is None.
        """
        if text is None:
            raise ValueError("Input text cannot be None")

        if not text.strip():
            return SpellCheckResult(corrected_text=text)

        log = self.logger
        threshold = self.config.acceptance_threshold
        tokens = tokenize(text)
        log.debug("Starting spell check on %d tokens", len(tokens))

        findings: list[SpellFinding] = []
        preserved: list[str] = []
        corrected_text = text
        error_count = 0
        total_confidence = 0.0

        for token in tokens:
            if token.normalized in self.lexicon.rare_valid:
                preserved.append(token.text)
                log.debug("Preserved rare word %r", token.text)
                continue

            if self.validator.is_known(token.text):
                continue

            error_count += 1
            suggestions = self.ranker.rank(token.text, self.config.max_suggestions)
            if not suggestions:
                log.debug("No suggestions for %r", token.text)
                continue

            context = sentence_context(text, token.start_offset)
            candidates = [s.word for s in suggestions]
            confidence = self.model.confidence(token.text, candidates, context)

            if confidence < threshold:
                log.debug(
                    "Skipped %r -> %r: confidence %.2f below %.2f",
                    token.text,
                    candidates[0],
                    confidence,
                    threshold,
                )
                continue

            best = candidates[0]
            findings.append(
                SpellFinding(
                    token=token,
                    suggestions=suggestions,
                    confidence=confidence,
                    error_kind=self.model.classify(token.text, context),
                    error_subtype=error_subtype(token.text, best),
                    is_preserved_rare=False,
                    context=context,
                )
            )
            corrected_text = replace_word(corrected_text, token.text, best)
            total_confidence += confidence
            log.debug("Corrected %r -> %r (confidence %.2f)", token.text, best, confidence)

        overall = total_confidence / len(findings) if findings else 1.0
        log.info(
            "Spell check complete: %d findings, %d unknown tokens out of %d",
            len(findings),
            error_count,
            len(tokens),
        )

        return SpellCheckResult(
            findings=findings,
            corrected_text=corrected_text,
            overall_confidence=overall,
            preserved_rare_words=preserved,
            total_tokens=len(tokens),
            error_count=error_count,
        )

    def validate_word(self, word: str, context: str = "") -> WordValidation:
        """
        Validate a single word, with suggestions if it is unknown.

        Args:
            word: Word to validate.
            context: Sentence the word appears in, used for confidence.

        Returns:
            WordValidation; known and rare-valid words are valid with confidence 1.
        """
        if self.validator.is_known(word) or normalize_token(word) in self.lexicon.rare_valid:
            return WordValidation(word=word, is_valid=True, suggestions=[], confidence=1.0)

        suggestions = self.ranker.suggest(word, VALIDATION_SUGGESTIONS)
        return WordValidation(
            word=word,
            is_valid=False,
            suggestions=suggestions,
            confidence=self.model.confidence(word, suggestions, context),
        )

    def check_batch(self, texts: list[str]) -> list[SpellCheckResult]:
        """
        Spell check several texts, returning results in input order.

        Args:
            texts: Texts to check.

        Returns:
            One SpellCheckResult per text.
        """
        self.logger.info("Processing batch of %d texts", len(texts))
        return [self.check(text) for text in texts]


_default_checker: SpellChecker | None = None


def check_spelling(text: str, config: SpellCheckConfig | None = None) -> SpellCheckResult:
    """
    Spell check text with a default or configured checker.

    Without a config, a shared checker over the built-in lexicon is reused
    across calls.

    Args:
        text: Plain text to check.
        config: Optional configuration.

    Returns:
        SpellCheckResult for the text.
    """
    global _default_checker

    if config is not None:
        return SpellChecker(config=config).check(text)

    if _default_checker is None:
        _default_checker = SpellChecker()
    return _default_checker.check(text)
