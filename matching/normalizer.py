"""
Name normalization for fuzzy matching.

Turns free-text names into comparable token strings:

- Lowercase (locale-invariant)
- Strip everything except a-z, 0-9, whitespace and '&'
- Expand abbreviations, in order
- Remove titles and corporate stopwords
- Collapse whitespace

Rules run left-to-right on the output of the previous rule, so expansions
cascade into stopword removal ("limited" -> "ltd" -> removed,
"co" -> "company" -> removed).
"""

import re
from typing import Iterable, Optional

# Ordered (word, replacement) pairs. Order is significant.
REPLACEMENT_RULES: tuple[tuple[str, str], ...] = (
    ("&", "and"),
    ("co", "company"),
    ("corp", "corporation"),
    ("intl", "international"),
    ("mfg", "manufacturing"),
    ("plc", "public limited company"),
    ("limited", "ltd"),
)

STOPWORDS: tuple[str, ...] = (
    "mr", "mrs", "ms", "dr", "prof", "sir", "madam",
    "pty", "ltd", "inc", "co", "company", "cc", "the",
)

# Boundaries only apply at letter/digit edges, so "&" is replaced everywhere.
_WORD_CHARS = "a-z0-9"
_INVALID_CHARS = re.compile(r"[^a-z0-9\s&]")
_WHITESPACE = re.compile(r"\s+")


def _word_pattern(word: str) -> re.Pattern:
    before = rf"(?<![{_WORD_CHARS}])" if word[:1].isalnum() else ""
    after = rf"(?![{_WORD_CHARS}])" if word[-1:].isalnum() else ""
    return re.compile(before + re.escape(word) + after, re.IGNORECASE)


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


class Normalizer:
    """
    Deterministic name canonicalizer.

    Usage:
        normalizer = Normalizer()
        normalizer.normalize("Acme & Co. Ltd")  # -> "acme and"

    Args:
        replacements: Ordered (word, replacement) pairs applied as whole words
        stopwords: Words removed as whole words after replacements
    """

    def __init__(
        self,
        replacements: Iterable[tuple[str, str]] = REPLACEMENT_RULES,
        stopwords: Iterable[str] = STOPWORDS,
    ):
        self.replacements = tuple(replacements)
        self.stopwords = tuple(stopwords)
        self._replacement_patterns = [
            (_word_pattern(word), replacement) for word, replacement in self.replacements
        ]
        self._stopword_patterns = [_word_pattern(word) for word in self.stopwords]

    def normalize(self, text: Optional[str]) -> str:
        """Normalize a raw name. Never fails; may return an empty string."""
        if not text or not text.strip():
            return ""

        # str.lower() is locale-independent
        normalized = text.lower()
        normalized = _INVALID_CHARS.sub(" ", normalized)
        normalized = _collapse(normalized)

        for pattern, replacement in self._replacement_patterns:
            # literal replacement text
            normalized = pattern.sub(lambda _m, r=replacement: r, normalized)

        for pattern in self._stopword_patterns:
            normalized = pattern.sub("", normalized)

        return _collapse(normalized)

    __call__ = normalize


_default_normalizer = Normalizer()


def normalize(text: Optional[str]) -> str:
    """Normalize text with the default rules."""
    return _default_normalizer.normalize(text)
