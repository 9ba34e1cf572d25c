from __future__ import annotations
import ipaddress, re
from typing import Optional
from urllib.parse import urlsplit

_LABEL = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$")

def host_of(url: str) -> Optional[str]:
    """
    Host component of an absolute http(s) URL, lower-cased and without port.
    None when the URL has another scheme or no syntactically valid host.
    """
    if not url:
        return None
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return None
    if parts.scheme not in ("http", "https") or not host:
        return None
    try:
        ipaddress.ip_address(host)
        return host
    except ValueError:
        pass
    host = host.rstrip(".")
    if not host or len(host) > 253:
        return None
    if not all(_LABEL.match(label) for label in host.split(".")):
        return None
    return host

def is_valid_url(url: str) -> bool:
    return host_of(url) is not None

def validate_text_length(text: str, max_length: int) -> bool:
    return len(text) <= max_length

def validate_word(word: Optional[str]) -> bool:
    return bool(word and word.strip())

def validate_sentence(sentence: Optional[str]) -> bool:
    return bool(sentence and sentence.strip())
