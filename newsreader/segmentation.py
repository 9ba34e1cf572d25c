"""
Sentence and word splitting for extracted article text.

Both splitters are configured at construction and never raise: empty or
whitespace-only input simply yields an empty list.
"""

from __future__ import annotations
import re
from typing import Iterable, List

# matched by exact capitalization, always followed by "."
DEFAULT_ABBREVIATIONS = frozenset({"Mr", "Mrs", "Ms", "Dr", "Prof", "Sr", "Jr"})

# stripped from anywhere in a sentence, including inside contractions
DEFAULT_PUNCTUATION = frozenset(".,!?;:'\"()")

_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")
_WHITESPACE = re.compile(r"\s+")

# private-use code point standing in for a masked abbreviation period
_MASK = "\ue000"


class SentenceSegmenter:
    """
    Splits text on ".", "!" or "?" followed by whitespace.

    The terminator stays with the sentence it ends. A period that closes
    one of the configured abbreviations ("Mr.", "Dr.") is masked first so
    it never ends a sentence.
    """

    def __init__(self, abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS):
        self.abbreviations = frozenset(abbreviations)
        if self.abbreviations:
            # longest first so "Mrs" is tried before "Mr"
            names = sorted(self.abbreviations, key=len, reverse=True)
            self._abbrev_re = re.compile(
                r"\b(" + "|".join(re.escape(a) for a in names) + r")\."
            )
        else:
            self._abbrev_re = None

    def segment(self, text: str) -> List[str]:
        if not text or not text.strip():
            return []
        masked = text
        if self._abbrev_re is not None:
            masked = self._abbrev_re.sub(lambda m: m.group(1) + _MASK, masked)
        pieces = _SENTENCE_BREAK.split(masked)
        out = []
        for piece in pieces:
            sentence = piece.replace(_MASK, ".").strip()
            if sentence:
                out.append(sentence)
        return out

    __call__ = segment


class WordTokenizer:
    """Removes punctuation characters anywhere in the text, then splits on whitespace."""

    def __init__(self, punctuation: Iterable[str] = DEFAULT_PUNCTUATION):
        self.punctuation = frozenset(punctuation)
        self._table = str.maketrans("", "", "".join(self.punctuation))

    def tokenize(self, sentence_text: str) -> List[str]:
        if not sentence_text:
            return []
        stripped = sentence_text.translate(self._table)
        return [w for w in _WHITESPACE.split(stripped) if w]

    __call__ = tokenize
