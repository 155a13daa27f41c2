"""Flatten a message into the text shown in the detail pane."""

from __future__ import annotations

import logging

from ..errors import BodyDecodeError
from ..mailstore import BodyPart, HeaderValue, MailMessage

logger = logging.getLogger(__name__)

SUMMARY_HEADERS = ("From", "Date")


def _header_line(value: HeaderValue) -> str:
    return f"{value.name}: {value.display_text()}\n"


def _part_text(part: BodyPart) -> str:
    try:
        text = part.decoded_body_string()
    except BodyDecodeError as exc:
        logger.debug("cannot decode %s part: %s", part.content_type, exc)
        text = f"Error decoding body: {exc}\n"
    if text and not text.endswith("\n"):
        text += "\n"
    return text


def flatten_body(part: BodyPart) -> str:
    """Return decoded text of ``part`` and its descendants in pre-order.

    A part that cannot be decoded contributes an inline error line instead of
    its body; its children are still rendered.
    """
    return "".join(_part_text(node) for node in part.walk())


def display_message(message: MailMessage) -> str:
    """Return the summary header block, a blank line, then all body text."""
    out: list[str] = []
    for name in SUMMARY_HEADERS:
        value = message.get(name)
        if value is not None:
            out.append(_header_line(value))
    if "Content-Type" in message.headers:
        out.append(f"Content-Type: {message.body.content_type}\n")
    out.append("\n")
    out.append(flatten_body(message.body))
    return "".join(out)


__all__ = ["display_message", "flatten_body"]
