"""
Exceptions raised by the article pipeline and its collaborators.

  - ExtractionError   -> no article could be extracted; nothing partial is returned.
  - FetchError        -> the article HTML could not be downloaded.
  - LookupFailedError -> the language model call failed or answered in the wrong shape.

None of them is retried here; the API layer turns each into an error response.
"""

from typing import Optional


class NewsReaderError(Exception):
    """Base exception for all newsreader errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ExtractionError(NewsReaderError):
    """Raised when the HTML is empty, unparseable or has no main content block."""
    pass


class FetchError(NewsReaderError):
    """Raised when downloading the article page fails."""

    def __init__(
        self,
        message: str,
        timed_out: bool = False,
        status_code: Optional[int] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.timed_out = timed_out
        self.status_code = status_code  # upstream HTTP status, when there was one


class LookupFailedError(NewsReaderError):
    """Raised when a word or sentence lookup does not produce a usable answer."""
    pass
