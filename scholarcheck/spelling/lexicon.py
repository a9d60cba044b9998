"""
Lexicon: the classified word sets and lookup tables behind spell checking.

The lexicon is read-only data. A single DEFAULT_LEXICON is built at import
time and shared by every checker; custom vocabularies produce a new
Lexicon through `Lexicon.extended()` or `load_lexicon()` rather than
mutating the shared one.

Word classes:
- common: everyday English, boosted when ranking suggestions
- technical: programming, science and academic vocabulary
- rare_valid: rare but legitimate words that are preserved, never corrected

Beyond the classes, pyspellchecker's English word list backs the
known-word check so ordinary prose is not flagged.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from spellchecker import SpellChecker as PySpellChecker

from scholarcheck.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# =============================================================================
# WORD SETS
# =============================================================================

COMMON_WORDS = frozenset(
    {
        # Basic common words
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for",
        "not", "on", "with", "he", "as", "you", "do", "at", "this", "but", "his", "by",
        "from", "they", "we", "say", "her", "she", "or", "an", "will", "my", "one",
        "all", "would", "there", "their", "what", "so", "up", "out", "if", "about",
        "who", "get", "which", "go", "me", "when", "make", "can", "like", "time", "no",
        "just", "him", "know", "take", "people", "into", "year", "your", "good", "some",
        "could", "them", "see", "other", "than", "then", "now", "look", "only", "come",
        "its", "over", "think", "also", "back", "after", "use", "two", "how", "our",
        "work", "first", "well", "way", "even", "new", "want", "because", "any",
        "these", "give", "day", "most", "us", "through", "where", "much", "before",
        "move", "right", "boy", "old", "too", "same", "tell", "does", "set", "three",
        "must", "here", "life", "never", "world", "still", "hand", "high", "keep",
        "last",
        # Extended common words
        "find", "asked", "going", "house", "point", "school", "number", "part", "turn",
        "came", "against", "place", "such", "again", "great", "put", "end", "why",
        "try", "kind", "help", "every", "home", "large", "another", "small", "though",
        "men", "long", "little", "very", "own", "called", "upon", "play", "live",
        "off", "means", "show", "might", "ask", "water", "form", "air", "away", "name",
        "sentence", "man", "line", "differ", "cause", "picture", "change", "spell",
        "found", "study", "learn", "should", "america",
        # Function words and auxiliaries
        "is", "are", "was", "were", "been", "being", "has", "had", "did", "done",
        "am", "may", "shall", "cannot", "each", "few", "many", "more", "less",
        "both", "either", "neither", "between", "among", "during", "without",
        "within", "while", "until", "since", "although", "however", "therefore",
        "thus", "whether", "whose", "whom", "those", "yet", "nor", "per", "via",
        "across", "along", "around", "behind", "below", "beside", "beyond",
        "under", "above", "toward", "towards", "onto", "instead", "rather",
        "often", "always", "sometimes", "usually", "already", "almost", "enough",
        "quite", "really", "perhaps", "together", "today", "tomorrow", "yesterday",
        # Everyday nouns
        "thing", "things", "fact", "idea", "question", "answer", "problem",
        "example", "result", "reason", "case", "group", "area", "level", "order",
        "power", "money", "family", "child", "children", "woman", "women", "friend",
        "city", "country", "state", "government", "company", "market", "business",
        "service", "system", "program", "book", "paper", "story", "word", "words",
        "text", "page", "essay", "student", "teacher", "class",
        "course", "history", "language", "information", "knowledge", "community",
        "society", "nature", "health", "education", "process", "method", "model",
        "field", "issue", "source", "sources", "article", "author",
        "writing", "reader", "face", "head", "eye", "body", "mind", "heart",
        "door", "room", "road", "car", "food", "music", "art", "game", "team",
        "war", "peace", "law", "rule", "age", "week", "month", "morning", "night",
        "minute", "hour", "moment", "period", "future", "past", "present",
        "piece", "side", "top", "bottom", "front", "center", "rest", "lot",
        # Everyday verbs
        "become", "became", "begin", "began", "believe", "bring", "build", "buy",
        "call", "carry", "check", "choose", "consider", "continue", "create",
        "decide", "describe", "develop", "die", "discuss", "drive", "eat",
        "explain", "fall", "feel", "follow", "happen", "hear", "hold", "improve",
        "include", "increase", "introduce", "involve", "lead", "leave", "let",
        "lose", "love", "meet", "need", "offer", "pay", "plan", "produce",
        "provide", "reach", "read", "receive", "remain", "remember", "report",
        "require", "run", "seem", "sell", "send", "serve", "sit", "speak", "spend",
        "stand", "start", "stay", "stop", "suggest", "support", "talk", "teach",
        "understand", "wait", "walk", "watch", "win", "write", "written", "wrote",
        "made", "said", "told", "thought", "took", "gave", "given", "known", "seen",
        "shown", "left", "felt", "kept", "held", "brought", "taken", "went", "gone",
        "revolutionize", "transform", "analyze", "examine", "compare", "measure",
        # Everyday adjectives and adverbs
        "able", "bad", "best", "better", "big", "certain", "clear", "close",
        "common", "different", "early", "easy", "free", "full", "general",
        "hard", "human", "important", "late", "likely", "main", "major",
        "modern", "natural", "necessary", "next", "open", "possible", "public",
        "real", "recent", "second", "short", "similar", "simple", "social",
        "special", "strong", "sure", "true", "whole", "young", "significant",
        "various", "several", "original", "final", "local", "national",
        "quickly", "simply", "especially", "finally", "directly", "recently",
        "particularly", "actually", "probably", "certainly", "relatively",
    }
)

TECHNICAL_WORDS = frozenset(
    {
        # Programming and tech terms
        "algorithm", "authentication", "database", "implementation", "programming",
        "javascript", "typescript", "react", "component", "function", "variable",
        "parameter", "asynchronous", "synchronous", "api", "endpoint", "middleware",
        "framework", "library", "repository", "deployment", "environment",
        "configuration", "optimization", "debugging", "refactoring", "inheritance",
        "polymorphism", "encapsulation", "abstraction", "recursion", "iteration",
        "validation", "serialization", "deserialization", "container", "docker",
        "kubernetes", "microservices", "serverless", "blockchain", "machine",
        "learning", "artificial", "intelligence", "neural", "network", "data",
        "science", "analytics", "visualization", "business", "software", "hardware",
        "computer", "code", "server", "client", "interface", "protocol", "compiler",
        "python", "processing", "technology", "digital", "internet", "online",
        # Science and academic terms
        "research", "analysis", "hypothesis", "experiment", "methodology",
        "statistical", "correlation", "coefficient", "regression", "distribution",
        "probability", "variance", "deviation", "significance",
        "confidence", "interval", "theory", "evidence", "literature", "journal",
        "citation", "abstract", "conclusion", "introduction", "discussion",
        "dataset", "statistics", "sample", "survey", "empirical",
        "quantitative", "qualitative", "paradigm", "thesis",
    }
)

RARE_VALID_WORDS = frozenset(
    {
        # Literary and sophisticated words
        "serendipity", "ephemeral", "ubiquitous", "mellifluous", "perspicacious",
        "sesquipedalian", "defenestration", "petrichor", "saudade", "hygge",
        "schadenfreude", "zeitgeist", "wanderlust", "fernweh", "hiraeth", "ubuntu",
        "ikigai", "lagom", "kalopsia", "vellichor", "apricity", "phosphenes",
        "eigengrau", "kenopsia", "liberosis", "onism", "zenosyne", "sonder",
        "lachesism", "altschmerz", "jouska", "chrysalism", "vemödalen", "adronitis",
        "ellipsism", "kuebiko", "limerence",
        # Record-length words
        "antidisestablishmentarianism", "pneumonoultramicroscopicsilicovolcanoconiosis",
        "floccinaucinihilipilification", "hippopotomonstrosesquippedaliophobia",
        "pseudopseudohypoparathyroidism", "supercalifragilisticexpialidocious",
    }
)


# =============================================================================
# LOOKUP TABLES
# =============================================================================

# Curated keyboard typos with a single high-confidence correction
COMMON_TYPOS = {
    "adn": "and",
    "nad": "and",
    "ajd": "and",
    "hte": "the",
    "teh": "the",
    "het": "the",
    "fo": "of",
    "fro": "for",
    "ofr": "for",
    "ot": "to",
    "oteh": "other",
    "othe": "other",
    "whih": "which",
    "wich": "which",
    "whcih": "which",
    "taht": "that",
    "htat": "that",
    "jsut": "just",
    "jstu": "just",
    "woth": "with",
    "wiht": "with",
    "wtih": "with",
    "form": "from",
    "fomr": "from",
    "bean": "been",
    "dose": "does",
    "deos": "does",
    "wnat": "want",
    "waht": "what",
    "hwat": "what",
    "whta": "what",
    "peopel": "people",
    "peolpe": "people",
    "poeple": "people",
    "becuase": "because",
    "becase": "because",
    "becasue": "because",
    "sicne": "since",
    "sinse": "since",
    "thru": "through",
    "thorugh": "through",
    "throuhg": "through",
    "alot": "a lot",
    "alright": "all right",
    "everytime": "every time",
    "incase": "in case",
    "inspite": "in spite",
    "atleast": "at least",
    "aswell": "as well",
    "eachother": "each other",
    "setup": "set up",
    "login": "log in",
    "backup": "back up",
}

# Frequent misspellings with high-confidence corrections
MISSPELLING_PATTERNS = {
    "teh": ("the",),
    "recieve": ("receive",),
    "occured": ("occurred",),
    "seperate": ("separate",),
    "definately": ("definitely",),
    "neccessary": ("necessary",),
    "accomodate": ("accommodate",),
    "embarass": ("embarrass",),
    "begining": ("beginning",),
    "writting": ("writing",),
    "commited": ("committed",),
    "existance": ("existence",),
    "maintainance": ("maintenance",),
    "independant": ("independent",),
    "concious": ("conscious",),
    "consciense": ("conscience",),
    "beleive": ("believe",),
    "acheive": ("achieve",),
    "wierd": ("weird",),
    "freind": ("friend",),
    "peice": ("piece",),
    "thier": ("their",),
    "publically": ("publicly",),
    "priviledge": ("privilege",),
    "difinately": ("definitely",),
    "goverment": ("government",),
    "enviroment": ("environment",),
    "recomend": ("recommend",),
    "tommorow": ("tomorrow",),
    "occassion": ("occasion",),
    "excercise": ("exercise",),
    "apparantly": ("apparently",),
    "occurance": ("occurrence",),
    "liason": ("liaison",),
    "maintainence": ("maintenance",),
    "independance": ("independence",),
    "posession": ("possession",),
    "profesional": ("professional",),
    "sucessful": ("successful",),
    "transfered": ("transferred",),
    "recieved": ("received",),
    "bussiness": ("business",),
    "adress": ("address",),
    "comittee": ("committee",),
    "embarrasing": ("embarrassing",),
    "harrass": ("harass",),
    "millenium": ("millennium",),
    "perseverence": ("perseverance",),
    "questionaire": ("questionnaire",),
    "restaraunt": ("restaurant",),
    "seperation": ("separation",),
    "twelth": ("twelfth",),
    "untill": ("until",),
    "villian": ("villain",),
}

# Homophones and confusables; may list several candidates
HOMOPHONE_PATTERNS = {
    "there": ("their", "they're"),
    "your": ("you're",),
    "its": ("it's",),
    "affect": ("effect",),
    "accept": ("except",),
    "loose": ("lose",),
    "brake": ("break",),
    "weather": ("whether",),
    "piece": ("peace",),
    "principle": ("principal",),
    "compliment": ("complement",),
    "capitol": ("capital",),
    "stationary": ("stationery",),
    "desert": ("dessert",),
    "council": ("counsel",),
    "advise": ("advice",),
    "license": ("licence",),
    "practice": ("practise",),
    "than": ("then",),
    "who": ("whom",),
    "lay": ("lie",),
    "further": ("farther",),
    "less": ("fewer",),
    "amount": ("number",),
    "bring": ("take",),
    "lend": ("borrow",),
    "emigrate": ("immigrate",),
    "imply": ("infer",),
    "comprise": ("compose",),
    "disinterested": ("uninterested",),
    "continual": ("continuous",),
    "historic": ("historical",),
    "economic": ("economical",),
    "ensure": ("insure", "assure"),
    "elicit": ("illicit",),
}

CONTEXT_PATTERNS = {**MISSPELLING_PATTERNS, **HOMOPHONE_PATTERNS}

# Soundex-like letter classes
PHONETIC_MAP = {
    "ph": "f",
    "gh": "f",
    "ck": "k",
    "qu": "kw",
    "x": "ks",
    "z": "s",
    "c": "k",
    "j": "g",
    "y": "i",
    "w": "u",
}

CONTRACTIONS = frozenset(
    {
        "don't", "won't", "can't", "shouldn't", "wouldn't", "couldn't", "mustn't",
        "needn't", "daren't", "mayn't", "mightn't", "oughtn't", "shan't", "isn't",
        "aren't", "wasn't", "weren't", "hasn't", "haven't", "hadn't", "doesn't",
        "didn't", "you're", "we're", "they're", "i'm", "he's", "she's", "it's",
        "we've", "you've", "they've", "i've", "you'll", "we'll", "they'll", "i'll",
        "he'll", "she'll", "it'll", "you'd", "we'd", "they'd", "i'd", "he'd",
        "she'd", "it'd",
    }
)

# Typo-table keys that are also real words; these stay in the base dictionary
TYPO_TABLE_WORDS = frozenset(
    {"het", "fro", "form", "bean", "dose", "thru", "alright", "setup", "login", "backup"}
)

# Never accepted as known, whatever the base dictionary contains
KNOWN_MISSPELLINGS = frozenset(MISSPELLING_PATTERNS) | (frozenset(COMMON_TYPOS) - TYPO_TABLE_WORDS)

# Dictionary entries are kept only when they are already plain word tokens
DICTIONARY_WORD_PATTERN = re.compile(r"^[\w']+$")


# =============================================================================
# BASE DICTIONARY
# =============================================================================


@lru_cache(maxsize=None)
def english_dictionary() -> frozenset[str]:
    """
    Return the base English word list, loaded once.

    Words come from pyspellchecker's English frequency list, minus the
    curated misspellings so the correction tables still fire for them.
    """
    spell = PySpellChecker(language="en", distance=1)
    words = _normalize_words(spell.word_frequency.keys())
    words = frozenset(w for w in words if DICTIONARY_WORD_PATTERN.match(w)) - KNOWN_MISSPELLINGS
    logger.debug("Loaded base English dictionary with %d words", len(words))
    return words


_WORD_SET_KEYS = ("common", "technical", "rare_valid")
_LEXICON_KEYS = (*_WORD_SET_KEYS, "typos", "context_patterns")


# =============================================================================
# LEXICON
# =============================================================================


def _normalize_words(words: Iterable[str]) -> frozenset[str]:
    return frozenset(w.strip().lower() for w in words if w and w.strip())


@dataclass(frozen=True)
class Lexicon:
    """
    Immutable, classified word lists plus the spelling lookup tables.

    Attributes:
        common: Everyday words (boosted when ranking suggestions).
        technical: Domain vocabulary.
        rare_valid: Rare words preserved rather than corrected.
        typos: Misspelling -> single correction.
        context_patterns: Word -> ordered candidate corrections.
        phonetic: Letter sequence -> phonetic class.
        contractions: Contracted forms accepted as valid.
        dictionary: Base English word list; known, but neither boosted nor
            scanned for suggestions.

    Example:
        >>> lex = DEFAULT_LEXICON.extended(technical={"kubectl"})
        >>> "kubectl" in lex
        True
        >>> "kubectl" in DEFAULT_LEXICON
        False
    """

    common: frozenset[str]
    technical: frozenset[str]
    rare_valid: frozenset[str]
    typos: Mapping[str, str] = field(default_factory=dict)
    context_patterns: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    phonetic: Mapping[str, str] = field(default_factory=dict)
    contractions: frozenset[str] = frozenset()
    dictionary: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Freeze the lookup tables."""
        object.__setattr__(self, "typos", MappingProxyType(dict(self.typos)))
        object.__setattr__(
            self,
            "context_patterns",
            MappingProxyType({k: tuple(v) for k, v in self.context_patterns.items()}),
        )
        object.__setattr__(self, "phonetic", MappingProxyType(dict(self.phonetic)))
        curated = self.common | self.technical | self.rare_valid
        object.__setattr__(self, "_words", curated | self.dictionary)
        object.__setattr__(self, "_ordered_words", tuple(sorted(curated)))

    @property
    def words(self) -> frozenset[str]:
        """Every known word: the three word classes plus the base dictionary."""
        return self._words  # type: ignore[attr-defined]

    @property
    def ordered_words(self) -> tuple[str, ...]:
        """The three word classes in sorted order, scanned for suggestions."""
        return self._ordered_words  # type: ignore[attr-defined]

    def __contains__(self, word: object) -> bool:
        return word in self._words  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return len(self._words)  # type: ignore[attr-defined]

    def extended(
        self,
        common: Iterable[str] = (),
        technical: Iterable[str] = (),
        rare_valid: Iterable[str] = (),
        typos: Mapping[str, str] | None = None,
        context_patterns: Mapping[str, Iterable[str]] | None = None,
    ) -> Lexicon:
        """
        Return a new lexicon with additional entries.

        The receiver is left untouched.
        """
        merged_typos = dict(self.typos)
        merged_typos.update({k.lower(): v for k, v in (typos or {}).items()})

        merged_patterns = dict(self.context_patterns)
        for key, candidates in (context_patterns or {}).items():
            merged_patterns[key.lower()] = tuple(candidates)

        return Lexicon(
            common=self.common | _normalize_words(common),
            technical=self.technical | _normalize_words(technical),
            rare_valid=self.rare_valid | _normalize_words(rare_valid),
            typos=merged_typos,
            context_patterns=merged_patterns,
            phonetic=self.phonetic,
            contractions=self.contractions,
            dictionary=self.dictionary,
        )


DEFAULT_LEXICON = Lexicon(
    common=COMMON_WORDS,
    technical=TECHNICAL_WORDS,
    rare_valid=RARE_VALID_WORDS,
    typos=COMMON_TYPOS,
    context_patterns=CONTEXT_PATTERNS,
    phonetic=PHONETIC_MAP,
    contractions=CONTRACTIONS,
    dictionary=english_dictionary(),
)


def _parse_lexicon_data(data: Any, source: str) -> dict[str, Any]:
    """Check the shape of a parsed lexicon document."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Lexicon file {source} must contain a mapping at top level")

    unknown = set(data) - set(_LEXICON_KEYS)
    if unknown:
        raise ConfigurationError(
            f"Unknown lexicon keys in {source}: {sorted(unknown)}. "
            f"Expected any of {list(_LEXICON_KEYS)}"
        )

    for key in _WORD_SET_KEYS:
        if key in data and not isinstance(data[key], list):
            raise ConfigurationError(f"'{key}' in {source} must be a list of words")
    if "typos" in data and not isinstance(data["typos"], dict):
        raise ConfigurationError(f"'typos' in {source} must map misspellings to corrections")
    if "context_patterns" in data:
        patterns = data["context_patterns"]
        if not isinstance(patterns, dict) or not all(
            isinstance(v, list) for v in patterns.values()
        ):
            raise ConfigurationError(
                f"'context_patterns' in {source} must map words to lists of candidates"
            )
    return data


def load_lexicon(
    path: str | Path | None = None,
    additional_vocabulary: Iterable[str] = (),
    base: Lexicon = DEFAULT_LEXICON,
) -> Lexicon:
    """
    Build a lexicon from the defaults plus an optional YAML file.

    The YAML file may contain any of `common`, `technical`, `rare_valid`
    (lists of words), `typos` (mapping) and `context_patterns` (mapping to
    lists). `additional_vocabulary` words are added to the technical class.

    Args:
        path: Optional YAML file extending the base lexicon.
        additional_vocabulary: Extra words to treat as known.
        base: Lexicon to extend.

    Returns:
        The base lexicon itself when there is nothing to add, otherwise a
        new extended Lexicon.

    Raises:
        ConfigurationError: If the file is missing, unparsable or malformed.
    """
    extra = list(additional_vocabulary)
    if path is None and not extra:
        return base

    data: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read lexicon file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in lexicon file {path}: {e}") from e
        data = _parse_lexicon_data(raw, str(path))

    lexicon = base.extended(
        common=data.get("common", ()),
        technical=[*data.get("technical", ()), *extra],
        rare_valid=data.get("rare_valid", ()),
        typos=data.get("typos"),
        context_patterns=data.get("context_patterns"),
    )
    logger.info("Loaded lexicon with %d words (base had %d)", len(lexicon), len(base))
    return lexicon
