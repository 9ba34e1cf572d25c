from __future__ import annotations
import json, logging
from typing import Any, Optional

from pydantic import ValidationError

from .config import OPENAI_API_KEY, LOOKUP_MODEL, LOOKUP_TIMEOUT
from .errors import LookupFailedError
from .schemas import WordMeaning

log = logging.getLogger("uvicorn.error")

_WORD_SYSTEM = "You are an English-Japanese dictionary assistant."
_WORD_PROMPT = (
    'Given the word "{word}" in the context: "{context}"\n\n'
    "Return a JSON object with:\n"
    "- meaning: Japanese meaning appropriate for this context\n"
    "- pos: Part of speech in Japanese (名詞, 動詞, 形容詞, etc.)\n"
    "- example: A simple example sentence using the word\n\n"
    "Return ONLY valid JSON, no other text."
)

_TRANSLATE_SYSTEM = "You translate English news sentences into natural Japanese."
_TRANSLATE_PROMPT = (
    "Translate the following English sentence to natural Japanese.\n"
    "Return ONLY the translation, no other text.\n\n"
    '"{sentence}"'
)

def _strip_fences(text: str) -> str:
    # models sometimes wrap JSON in ```json ... ``` even when asked not to
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


class LookupGateway:
    """
    Word glosses and sentence translations from an OpenAI chat model.

    Every call is a single request: no retries, no streaming. Any failure,
    including an answer in the wrong shape, raises LookupFailedError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Any = None,
    ):
        self.api_key = OPENAI_API_KEY if api_key is None else api_key
        self.model = model or LOOKUP_MODEL
        self.timeout = LOOKUP_TIMEOUT if timeout is None else timeout
        self._client = client

    def _get_client(self):
        if self._client is not None:
            return self._client
        if not self.api_key:
            raise LookupFailedError("API key is required")
        from openai import OpenAI
        self._client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    def _complete(self, system_msg: str, user_msg: str, json_mode: bool = False) -> str:
        client = self._get_client()
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            resp = client.chat.completions.create(
                model=self.model,
                temperature=0.2,
                messages=[
                    {"role": "system", "content": system_msg},
                    {"role": "user", "content": user_msg},
                ],
                **kwargs,
            )
            content = resp.choices[0].message.content
        except Exception as e:
            log.warning(f"lookup request failed: {e}")
            raise LookupFailedError("Lookup request failed", details={"error": str(e)}) from e
        content = (content or "").strip()
        if not content:
            raise LookupFailedError("Lookup returned an empty answer")
        return content

    def get_word_meaning(self, word: str, context: str) -> WordMeaning:
        content = self._complete(
            _WORD_SYSTEM, _WORD_PROMPT.format(word=word, context=context), json_mode=True
        )
        try:
            return WordMeaning.model_validate(json.loads(_strip_fences(content)))
        except (json.JSONDecodeError, ValidationError) as e:
            log.warning(f"unexpected word lookup answer: {content[:200]!r}")
            raise LookupFailedError(
                "Failed to parse word meaning", details={"response": content}
            ) from e

    def translate_sentence(self, sentence: str) -> str:
        return self._complete(_TRANSLATE_SYSTEM, _TRANSLATE_PROMPT.format(sentence=sentence))
