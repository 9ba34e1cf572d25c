"""
Fetching article pages and pulling the readable text out of them.

fetch_html is the only network access in the pipeline. ContentExtractor is
pure: it takes HTML that was already downloaded and returns the title, the
body as blank-line separated paragraphs, and the source host.
"""

from __future__ import annotations
import logging, re
from typing import List, Optional

import httpx, trafilatura
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from readability import Document
from readability.readability import Unparseable

from .config import FETCH_TIMEOUT, FETCH_USER_AGENT
from .errors import ExtractionError, FetchError
from .schemas import ExtractedContent
from .validation import host_of

log = logging.getLogger("uvicorn.error")

UA = FETCH_USER_AGENT

# readability-lxml's placeholder when the page has no <title>
_NO_TITLE = "[no-title]"

# block elements of the readable subtree; each one starts a new paragraph
BLOCK_TAGS = [
    "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "li", "blockquote", "pre", "td", "th", "dd", "dt", "figcaption",
]

# containers that never join their children into one paragraph
_BREAK_TAGS = BLOCK_TAGS + [
    "html", "body", "div", "article", "section", "main", "header", "footer", "aside",
    "nav", "ul", "ol", "dl", "table", "thead", "tbody", "tfoot", "tr", "figure",
]

async def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    timeout = FETCH_TIMEOUT if timeout is None else timeout
    try:
        async with httpx.AsyncClient(follow_redirects=True, headers={"User-Agent": UA}, timeout=timeout) as c:
            r = await c.get(url)
            r.raise_for_status()
            return r.text
    except httpx.TimeoutException as e:
        raise FetchError(f"timed out after {timeout}s fetching {url}", timed_out=True,
                         details={"error": str(e)}) from e
    except httpx.HTTPStatusError as e:
        raise FetchError(f"{url} answered {e.response.status_code}",
                         status_code=e.response.status_code) from e
    except httpx.HTTPError as e:
        raise FetchError(f"could not fetch {url}: {e}", details={"error": str(e)}) from e

def _clean(s: Optional[str]) -> str:
    if not s: return ""
    return re.sub(r"\s+", " ", s).strip()

def _blocks(summary_html: str) -> List[str]:
    soup = BeautifulSoup(summary_html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")

    blocks = []
    _walk(soup, blocks)
    return blocks

def _walk(node, blocks: List[str]) -> None:
    # loose text between nested blocks forms paragraphs of its own
    run = []

    def flush():
        text = _clean("".join(run))
        if text:
            blocks.append(text)
        run.clear()

    for child in node.children:
        if isinstance(child, Tag):
            if child.name in _BREAK_TAGS or child.find(_BREAK_TAGS) is not None:
                flush()
                _walk(child, blocks)
            else:
                run.append(child.get_text())
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            run.append(str(child))
    flush()


class ContentExtractor:
    """
    Readability-based main content extraction.

    The page is scored with readability-lxml (text density, with penalties
    for navigation, comment and ad-like containers); its cleaned summary is
    flattened to one paragraph per block element, with loose text around
    nested blocks kept as paragraphs of its own.
    """

    def __init__(self, min_text_length: int = 25, retry_length: int = 250):
        self.min_text_length = min_text_length
        self.retry_length = retry_length

    def extract(self, html: str, url: str) -> ExtractedContent:
        if not html or not html.strip():
            raise ExtractionError("HTML content is required")

        domain = host_of(url)
        if domain is None:
            raise ExtractionError(f"not an absolute http(s) URL: {url!r}", details={"url": url})

        doc = Document(html, min_text_length=self.min_text_length, retry_length=self.retry_length)
        try:
            summary = doc.summary(html_partial=True)
            title = _clean(doc.title())
        except Unparseable as e:
            raise ExtractionError("Failed to parse article", details={"error": str(e)}) from e

        if not title or title == _NO_TITLE:
            meta = trafilatura.extract_metadata(html)
            title = _clean(meta.title if meta else None)

        blocks = _blocks(summary)
        # the article's own headline usually repeats the page title
        if len(blocks) > 1 and title and blocks[0] == title:
            blocks = blocks[1:]
        if not blocks:
            raise ExtractionError("Failed to parse article: no readable content", details={"url": url})

        log.debug(f"extracted {len(blocks)} blocks from {domain}")
        return ExtractedContent(title=title, body_text="\n\n".join(blocks), source_domain=domain)


def extract_article(html: str, url: str) -> ExtractedContent:
    return ContentExtractor().extract(html, url)
