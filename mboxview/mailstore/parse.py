"""Turn raw mailbox entries into ``MailMessage`` trees."""

from __future__ import annotations

from email import policy
from email.errors import MessageError
from email.generator import BytesGenerator
from email.message import Message
from email.parser import BytesParser
from io import BytesIO

from ..errors import MessageParseError
from .types import BodyPart, HeaderMap, MailMessage


def _container_body(part: Message) -> str:
    """Return the body of a multipart container as it appears on the wire.

    That is the preamble, every boundary line, each sub-part with its own
    headers, and the epilogue.
    """
    buffer = BytesIO()
    BytesGenerator(buffer, mangle_from_=False, policy=part.policy).flatten(part)
    raw = buffer.getvalue()
    if raw.startswith(b"\n"):
        body = raw[1:]
    else:
        _head, _sep, body = raw.partition(b"\n\n")
    return body.decode("utf-8", "surrogateescape")


def build_body_part(part: Message) -> BodyPart:
    """Mirror a stdlib message part as an immutable ``BodyPart`` tree."""
    if part.is_multipart():
        payload = _container_body(part)
        children = tuple(build_body_part(child) for child in part.get_payload())
    else:
        raw = part.get_payload()
        payload = raw if isinstance(raw, str) else ""
        children = ()
    encoding = part.get("Content-Transfer-Encoding")
    return BodyPart(
        maintype=part.get_content_maintype(),
        subtype=part.get_content_subtype(),
        payload=payload,
        charset=part.get_content_charset(),
        transfer_encoding=str(encoding).strip().lower() if encoding else None,
        children=children,
        source=part,
    )


def parse_message(data: bytes | None, index: int = 0) -> MailMessage:
    """Parse one entry; ``index`` is only used to label failures.

    Raises ``MessageParseError`` when the entry is empty or unparsable.
    """
    if not data:
        raise MessageParseError(index, "entry has no data")
    # compat32 keeps raw header text and tolerates real-world malformed mail.
    parser = BytesParser(policy=policy.compat32)
    try:
        parsed = parser.parsebytes(data)
        body = build_body_part(parsed)
    except (MessageError, LookupError, ValueError) as exc:
        raise MessageParseError(index, str(exc)) from exc
    return MailMessage(headers=HeaderMap(parsed.raw_items()), body=body)


__all__ = ["build_body_part", "parse_message"]
