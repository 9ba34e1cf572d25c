from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# what the extractor hands to the structurer
class ExtractedContent(_Frozen):
    title: str
    body_text: str          # plain text, paragraphs separated by a blank line
    source_domain: str      # host part of the article URL

# one sentence, verbatim, plus its words in order
class ParsedSentence(_Frozen):
    text: str
    words: List[str] = []

class ParsedParagraph(_Frozen):
    sentences: List[ParsedSentence] = []

# what the API returns for /api/article
class ParsedArticle(_Frozen):
    title: str
    source: str
    paragraphs: List[ParsedParagraph] = []

# model's gloss of a word in context
class WordMeaning(_Frozen):
    meaning: str
    pos: str
    example: str

# what the user sends to /api/word; fields are optional so a missing one is a 400, not a 422
class WordRequest(BaseModel):
    word: Optional[str] = None
    context: Optional[str] = None

# what the user sends to /api/translate
class TranslateRequest(BaseModel):
    sentence: Optional[str] = None

class TranslateResponse(BaseModel):
    translation: str

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    ok: bool
    time: str
