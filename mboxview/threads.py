"""Reply-thread relations between messages.

Every lookup is a fresh linear scan over the store; nothing is indexed.
Absent or undecodable headers resolve to ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .mailstore import MailMessage

MESSAGE_ID_HEADER = "Message-ID"
IN_REPLY_TO_HEADER = "In-Reply-To"


def _header(message: MailMessage, name: str) -> str | None:
    value = message.header_text(name)
    if value is None:
        return None
    return value.strip()


def message_id(message: MailMessage) -> str | None:
    return _header(message, MESSAGE_ID_HEADER)


def in_reply_to(message: MailMessage) -> str | None:
    return _header(message, IN_REPLY_TO_HEADER)


def _first_match(
    messages: Sequence[MailMessage],
    start: int,
    stop: int,
    header: str,
    wanted: str,
) -> int | None:
    for idx in range(max(0, start), min(stop, len(messages))):
        if _header(messages[idx], header) == wanted:
            return idx
    return None


def find_parent(messages: Sequence[MailMessage], index: int) -> int | None:
    """Return the index of the message ``index`` replies to."""
    if not 0 <= index < len(messages):
        return None
    target = in_reply_to(messages[index])
    if target is None:
        return None
    return _first_match(messages, 0, len(messages), MESSAGE_ID_HEADER, target)


def find_child(messages: Sequence[MailMessage], index: int) -> int | None:
    """Return the first reply to ``index`` at or after its own position."""
    if not 0 <= index < len(messages):
        return None
    target = message_id(messages[index])
    if target is None:
        return None
    # The window starts at ``index`` itself; only a self-reply can match there.
    return _first_match(messages, index, len(messages), IN_REPLY_TO_HEADER, target)


def find_prev_sibling(messages: Sequence[MailMessage], index: int) -> int | None:
    """Return the earliest message before ``index`` replying to the same parent."""
    if not 0 <= index < len(messages):
        return None
    target = in_reply_to(messages[index])
    if target is None:
        return None
    return _first_match(messages, 0, index, IN_REPLY_TO_HEADER, target)


def find_next_sibling(messages: Sequence[MailMessage], index: int) -> int | None:
    """Return the nearest message after ``index`` replying to the same parent."""
    if not 0 <= index < len(messages):
        return None
    target = in_reply_to(messages[index])
    if target is None:
        return None
    return _first_match(messages, index + 1, len(messages), IN_REPLY_TO_HEADER, target)


__all__ = [
    "IN_REPLY_TO_HEADER",
    "MESSAGE_ID_HEADER",
    "find_child",
    "find_next_sibling",
    "find_parent",
    "find_prev_sibling",
    "in_reply_to",
    "message_id",
]
