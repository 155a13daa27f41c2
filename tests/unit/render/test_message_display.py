"""Tests for flattening messages into detail-pane text."""

from __future__ import annotations

import unittest

from mail_fixtures import raw_message
from mboxview.mailstore import parse_message
from mboxview.render import display_message, flatten_body

MULTIPART = b"""From: Alice <alice@example.com>
Date: Thu, 1 Jan 2026 00:00:00 +0000
Content-Type: multipart/alternative; boundary="XYZ"

preamble text
--XYZ
Content-Type: text/plain; charset=utf-8

plain part
--XYZ
Content-Type: text/html; charset=utf-8

<p>html part</p>
--XYZ--
"""


class DisplayMessageTests(unittest.TestCase):
    def test_summary_headers_then_blank_line_then_body(self) -> None:
        message = parse_message(
            raw_message("hello\n", From="a@example.com", Date="Thu, 1 Jan 2026", Subject="ignored")
        )

        self.assertEqual(
            display_message(message),
            "From: a@example.com\nDate: Thu, 1 Jan 2026\n\nhello\n",
        )

    def test_headerless_message_is_blank_line_then_body(self) -> None:
        message = parse_message(b"\nonly body\n")

        self.assertEqual(display_message(message), "\nonly body\n")

    def test_content_type_line_appears_when_header_present(self) -> None:
        message = parse_message(raw_message("x\n", Content_Type="text/plain; charset=us-ascii"))

        self.assertEqual(display_message(message), "Content-Type: text/plain\n\nx\n")

    def test_encoded_header_is_decoded(self) -> None:
        message = parse_message(raw_message(From="=?utf-8?q?J=C3=B6rg?= <j@example.com>"))

        self.assertTrue(display_message(message).startswith("From: Jörg <j@example.com>\n"))

    def test_multipart_flattens_parts_in_order(self) -> None:
        text = display_message(parse_message(MULTIPART))

        self.assertIn("Content-Type: multipart/alternative\n", text)
        preamble = text.index("preamble text")
        plain = text.index("plain part")
        html = text.index("<p>html part</p>")
        self.assertLess(preamble, plain)
        self.assertLess(plain, html)

    def test_quoted_printable_body_is_decoded(self) -> None:
        raw = raw_message(
            "caf=C3=A9\n",
            Content_Type="text/plain; charset=utf-8",
            Content_Transfer_Encoding="quoted-printable",
        )

        self.assertTrue(display_message(parse_message(raw)).endswith("café\n"))


class FlattenBodyErrorTests(unittest.TestCase):
    def test_unknown_charset_renders_inline_error(self) -> None:
        raw = raw_message("abc\n", Content_Type="text/plain; charset=x-no-such-charset")

        text = flatten_body(parse_message(raw).body)

        self.assertTrue(text.startswith("Error decoding body: "))
        self.assertIn("x-no-such-charset", text)

    def test_invalid_bytes_render_inline_error(self) -> None:
        raw = b"Content-Type: text/plain; charset=utf-8\n\n\xff\xfe broken\n"

        text = flatten_body(parse_message(raw).body)

        self.assertTrue(text.startswith("Error decoding body: "))

    def test_undecodable_container_still_renders_children(self) -> None:
        raw = (
            b"Content-Type: multipart/mixed; boundary=b1\n\n"
            b"--b1\nContent-Type: text/plain; charset=iso-8859-1\n\nna\xefve\n"
            b"--b1--\n"
        )

        text = flatten_body(parse_message(raw).body)

        self.assertTrue(text.startswith("Error decoding body: "))
        self.assertTrue(text.endswith("naïve\n"))

    def test_body_without_trailing_newline_gets_one(self) -> None:
        message = parse_message(b"Subject: s\n\nno newline")

        self.assertEqual(flatten_body(message.body), "no newline\n")


if __name__ == "__main__":
    unittest.main()
