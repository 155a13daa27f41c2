"""Read-only message store: mbox ingestion, parsing, and the message model."""

from __future__ import annotations

from .mbox import iter_raw_entries, load_store, subject_label
from .parse import parse_message
from .types import (
    MISSING_SUBJECT,
    BodyPart,
    HeaderMap,
    HeaderValue,
    MailMessage,
    MessageStore,
)

__all__ = [
    "MISSING_SUBJECT",
    "BodyPart",
    "HeaderMap",
    "HeaderValue",
    "MailMessage",
    "MessageStore",
    "iter_raw_entries",
    "load_store",
    "parse_message",
    "subject_label",
]
