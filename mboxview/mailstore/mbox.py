"""Mail-store ingestion: raw mbox entries in file order."""

from __future__ import annotations

import logging
import mailbox
import time
from collections.abc import Iterator
from pathlib import Path

from ..errors import MailStoreError
from .parse import parse_message
from .types import MISSING_SUBJECT, MailMessage, MessageStore

logger = logging.getLogger(__name__)


def iter_raw_entries(path: Path) -> Iterator[bytes]:
    """Yield each entry's bytes (without the ``From `` separator line)."""
    if not path.is_file():
        raise MailStoreError(f"Mailbox not found: {path}")
    try:
        box = mailbox.mbox(str(path), create=False)
    except (OSError, mailbox.Error) as exc:
        raise MailStoreError(f"Cannot open mailbox {path}: {exc}") from exc
    try:
        for key in box.iterkeys():
            yield box.get_bytes(key)
    except (OSError, mailbox.Error) as exc:
        raise MailStoreError(f"Cannot read mailbox {path}: {exc}") from exc
    finally:
        box.close()


def subject_label(message: MailMessage) -> str:
    """Single-line subject for the list pane."""
    value = message.get("Subject")
    if value is None:
        return MISSING_SUBJECT
    return value.display_text()


def load_store(path: Path) -> MessageStore:
    """Read and parse every entry of the mbox at ``path``.

    A single unparsable entry aborts the whole load with ``MessageParseError``.
    """
    started = time.monotonic()
    messages = tuple(parse_message(data, index) for index, data in enumerate(iter_raw_entries(path)))
    subjects = tuple(subject_label(message) for message in messages)
    logger.info(
        "loaded %d messages from %s in %.3fs",
        len(messages),
        path,
        time.monotonic() - started,
    )
    return MessageStore(messages=messages, subjects=subjects)


__all__ = ["iter_raw_entries", "load_store", "subject_label"]
