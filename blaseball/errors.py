"""
Feed error taxonomy.

Recoverable errors (``UnrecognizedFrame``, ``ParseError``) cost one frame and
the update loop moves on. Transport errors end the loop.
"""


class FeedError(Exception):
    """Base class for everything the feed raises."""


class RecoverableError(FeedError):
    """The current frame is dropped; the stream is still usable."""


class UnrecognizedFrame(RecoverableError):
    """Frame does not match any known envelope shape."""


class ParseError(RecoverableError):
    """Frame matched an envelope but its JSON body did not decode."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class TransportClosed(FeedError):
    """Connection terminated. The loop treats this as a clean shutdown."""


class TransportError(FeedError):
    """Any other transport failure. Surfaced to the caller."""

