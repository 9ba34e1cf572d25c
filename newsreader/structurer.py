from __future__ import annotations
import re
from typing import List, Optional

from .extractor import ContentExtractor
from .schemas import ParsedArticle, ParsedParagraph, ParsedSentence
from .segmentation import SentenceSegmenter, WordTokenizer

# one or more blank (or whitespace-only) lines
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def split_paragraphs(body_text: str) -> List[str]:
    return [p for p in _PARAGRAPH_BREAK.split(body_text or "") if p.strip()]


class ArticleStructurer:
    """
    Turns raw HTML into a ParsedArticle: paragraphs -> sentences -> words.

    Order is kept at every level and nothing is filtered here; ExtractionError
    from the extractor propagates as is.
    """

    def __init__(
        self,
        extractor: Optional[ContentExtractor] = None,
        segmenter: Optional[SentenceSegmenter] = None,
        tokenizer: Optional[WordTokenizer] = None,
    ):
        self.extractor = extractor or ContentExtractor()
        self.segmenter = segmenter or SentenceSegmenter()
        self.tokenizer = tokenizer or WordTokenizer()

    def structure_text(self, text: str) -> List[ParsedParagraph]:
        paragraphs = []
        for para in split_paragraphs(text):
            sentences = [
                ParsedSentence(text=s, words=self.tokenizer.tokenize(s))
                for s in self.segmenter.segment(para)
            ]
            paragraphs.append(ParsedParagraph(sentences=sentences))
        return paragraphs

    def structure(self, html: str, url: str) -> ParsedArticle:
        extracted = self.extractor.extract(html, url)
        return ParsedArticle(
            title=extracted.title,
            source=extracted.source_domain,
            paragraphs=self.structure_text(extracted.body_text),
        )


def parse_article(html: str, url: str) -> ParsedArticle:
    return ArticleStructurer().structure(html, url)
