"""Exception types raised by mboxview.

Fatal load errors abort startup; decode errors are recovered per value.
"""

from __future__ import annotations


class MboxViewError(Exception):
    """Base class for all mboxview errors."""


class MailStoreError(MboxViewError):
    """The mail-store file could not be opened or read."""


class MessageParseError(MboxViewError):
    """One mailbox entry could not be turned into a message."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"message #{index}: {reason}")
        self.index = index
        self.reason = reason


class HeaderDecodeError(MboxViewError):
    """A header value could not be decoded to plain text."""


class BodyDecodeError(MboxViewError):
    """A body part payload could not be decoded to text."""


__all__ = [
    "BodyDecodeError",
    "HeaderDecodeError",
    "MailStoreError",
    "MboxViewError",
    "MessageParseError",
]
