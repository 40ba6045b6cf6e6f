"""Exception hierarchy for the lookup pipeline.

"Not found" is never an exception: every stage returns ``None`` (or an empty
list) when the page simply does not carry the entry. The classes below are
reserved for inputs we cannot work with at all and for transport failures.
"""


class LinguaError(Exception):
    """Base class for every error raised by linguainrete."""


class MalformedDocumentError(LinguaError):
    """Raised when the supplied document is not a usable parsed tree."""


class FetchError(LinguaError):
    """Raised when a reference page could not be downloaded."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url


class ConfigurationError(LinguaError):
    """Raised when configuration validation fails."""
