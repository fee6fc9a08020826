"""
Crawler Errors

Every error here is fatal to the whole crawl. Private profiles and non-200
responses are not errors and never raise.
"""


class CrawlerError(Exception):
    """Base class for all crawl failures."""


class InputFileError(CrawlerError):
    """Raised when the player id file cannot be opened or parsed."""


class OutputFileError(CrawlerError):
    """Raised when an output table cannot be created or written."""


class FetchError(CrawlerError):
    """Raised when a profile request fails at the transport level."""


class ExtractionError(CrawlerError):
    """Raised when a matched profile field cannot be decoded."""


class RunAborted(CrawlerError):
    """Raised by the crawler when any player task failed."""

    def __init__(self, identifier: str, cause: BaseException):
        super().__init__(f"Crawl aborted while processing {identifier!r}: {cause}")
        self.identifier = identifier
        self.cause = cause
