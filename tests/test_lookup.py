import json
from types import SimpleNamespace

import pytest

from newsreader.errors import LookupFailedError
from newsreader.lookup import LookupGateway
from newsreader.schemas import WordMeaning

MEANING = {"meaning": "統合する", "pos": "動詞", "example": "They consolidated their resources."}


class _Completions:
    def __init__(self, content=None, exc=None):
        self.content = content
        self.exc = exc
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _gateway(content=None, exc=None):
    completions = _Completions(content, exc)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return LookupGateway(api_key="test-key", model="test-model", client=client), completions


def test_word_meaning():
    gateway, completions = _gateway(json.dumps(MEANING, ensure_ascii=False))
    result = gateway.get_word_meaning("consolidate", "The company will consolidate its operations.")
    assert result == WordMeaning(**MEANING)
    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["response_format"] == {"type": "json_object"}
    prompt = call["messages"][-1]["content"]
    assert '"consolidate"' in prompt
    assert "The company will consolidate its operations." in prompt

def test_word_meaning_in_code_fence():
    gateway, _ = _gateway("```json\n" + json.dumps(MEANING) + "\n```")
    assert gateway.get_word_meaning("consolidate", "context").pos == "動詞"

def test_word_meaning_not_json():
    gateway, _ = _gateway("consolidate means 統合する")
    with pytest.raises(LookupFailedError):
        gateway.get_word_meaning("consolidate", "context")

def test_word_meaning_wrong_shape():
    gateway, _ = _gateway(json.dumps({"meaning": "統合する"}))
    with pytest.raises(LookupFailedError):
        gateway.get_word_meaning("consolidate", "context")

def test_upstream_failure():
    gateway, _ = _gateway(exc=RuntimeError("500 from upstream"))
    with pytest.raises(LookupFailedError) as err:
        gateway.get_word_meaning("test", "context")
    assert "500 from upstream" in err.value.details["error"]

def test_single_attempt_only():
    gateway, completions = _gateway(exc=RuntimeError("boom"))
    with pytest.raises(LookupFailedError):
        gateway.translate_sentence("Hello.")
    assert len(completions.calls) == 1

def test_translate_sentence():
    gateway, completions = _gateway("  その会社は事業を統合する予定だ。\n")
    result = gateway.translate_sentence("The company will consolidate its operations.")
    assert result == "その会社は事業を統合する予定だ。"
    assert "response_format" not in completions.calls[0]

def test_translate_empty_answer():
    gateway, _ = _gateway("   ")
    with pytest.raises(LookupFailedError):
        gateway.translate_sentence("Hello.")

def test_missing_api_key():
    gateway = LookupGateway(api_key="")
    with pytest.raises(LookupFailedError, match="API key is required"):
        gateway.translate_sentence("Hello.")
