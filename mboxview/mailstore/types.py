"""Immutable message model shared by the store, resolver, and renderer."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from email.errors import HeaderParseError
from email.header import decode_header
from email.message import Message

from ..errors import BodyDecodeError, HeaderDecodeError

MISSING_SUBJECT = "MISSING SUBJECT"
DEFAULT_BODY_CHARSET = "utf-8"

_FOLD_RE = re.compile(r"\r?\n(?=[ \t])")


def _has_surrogates(text: str) -> bool:
    return any("\udc80" <= ch <= "\udcff" for ch in text)


@dataclass(frozen=True)
class HeaderValue:
    """One raw header value as it appeared in the message source."""

    name: str
    raw: str

    def decode_as_string(self) -> str:
        """Return the unfolded value with RFC 2047 encoded-words decoded.

        Raises ``HeaderDecodeError`` for 8-bit bytes that are not UTF-8 and
        for encoded-words in unknown or mismatched charsets.
        """
        text = _FOLD_RE.sub("", self.raw)
        if _has_surrogates(text):
            try:
                text = text.encode("ascii", "surrogateescape").decode("utf-8")
            except UnicodeError as exc:
                raise HeaderDecodeError(f"{self.name}: non-UTF-8 bytes in header") from exc
        try:
            chunks = decode_header(text)
        except HeaderParseError as exc:
            raise HeaderDecodeError(f"{self.name}: {exc}") from exc
        out: list[str] = []
        for chunk, charset in chunks:
            if isinstance(chunk, str):
                out.append(chunk)
                continue
            try:
                if charset is None:
                    # decode_header hands back unencoded runs as raw-unicode-escape bytes.
                    out.append(chunk.decode("raw-unicode-escape"))
                else:
                    out.append(chunk.decode(charset))
            except (LookupError, UnicodeError) as exc:
                raise HeaderDecodeError(f"{self.name}: {exc}") from exc
        return "".join(out)

    def display_text(self) -> str:
        """Single-line value for display; undecodable bytes become U+FFFD."""
        try:
            text = self.decode_as_string()
        except HeaderDecodeError:
            text = self.raw.encode("utf-8", "surrogateescape").decode("utf-8", errors="replace")
        return " ".join(text.split())

    def __str__(self) -> str:
        return f"{self.name}: {self.raw}"


class HeaderMap:
    """Case-insensitive header name to ordered raw values."""

    def __init__(self, items: Sequence[tuple[str, str]] = ()) -> None:
        self._values: dict[str, list[HeaderValue]] = {}
        for name, raw in items:
            self._values.setdefault(name.lower(), []).append(HeaderValue(name=name, raw=raw))

    def get(self, name: str) -> HeaderValue | None:
        """Return the first value for ``name`` or ``None`` when absent."""
        values = self._values.get(name.lower())
        return values[0] if values else None

    def get_all(self, name: str) -> list[HeaderValue]:
        return list(self._values.get(name.lower(), ()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._values

    def __len__(self) -> int:
        return sum(len(values) for values in self._values.values())


@dataclass(frozen=True)
class BodyPart:
    """One node of a message's MIME tree.

    ``payload`` is the still-encoded body text. A multipart container carries
    its whole serialized body (boundaries and raw sub-parts included) as
    payload and its parsed sub-parts in ``children``.
    """

    maintype: str
    subtype: str
    payload: str
    charset: str | None = None
    transfer_encoding: str | None = None
    children: tuple[BodyPart, ...] = ()
    source: Message | None = field(default=None, repr=False, compare=False)

    @property
    def content_type(self) -> str:
        return f"{self.maintype}/{self.subtype}"

    @property
    def is_multipart(self) -> bool:
        return self.maintype == "multipart"

    def decoded_body_string(self) -> str:
        """Decode the transfer encoding and charset of this part's own body."""
        if self.is_multipart or self.source is None:
            data = self.payload.encode("utf-8", "surrogateescape")
        else:
            data = self.source.get_payload(decode=True)
            if data is None:
                return ""
        charset = self.charset or DEFAULT_BODY_CHARSET
        try:
            return data.decode(charset)
        except LookupError as exc:
            raise BodyDecodeError(f"unknown charset {charset!r}") from exc
        except UnicodeDecodeError as exc:
            raise BodyDecodeError(f"{charset}: {exc.reason} at byte {exc.start}") from exc

    def walk(self) -> Iterator[BodyPart]:
        """Yield this part and all descendants in depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class MailMessage:
    """A parsed message: headers plus the root of its body-part tree."""

    headers: HeaderMap
    body: BodyPart

    def get(self, name: str) -> HeaderValue | None:
        return self.headers.get(name)

    def header_text(self, name: str) -> str | None:
        """Return the decoded value of ``name``, or ``None`` when absent or undecodable."""
        value = self.headers.get(name)
        if value is None:
            return None
        try:
            return value.decode_as_string()
        except HeaderDecodeError:
            return None


@dataclass(frozen=True)
class MessageStore:
    """Ordered, read-only messages with their pre-extracted subject labels."""

    messages: tuple[MailMessage, ...] = ()
    subjects: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.messages)

    def __getitem__(self, index: int) -> MailMessage:
        return self.messages[index]

    def __iter__(self) -> Iterator[MailMessage]:
        return iter(self.messages)
