"""Pagination cursor codec.

The API returns the next page as a full URL whose ``cursor`` query value is
base64 text. Decoded, the text ends with a zero-padded decimal offset and the
``__next`` suffix, for example::

    ...:0000000050__next      # second page of a 50-item listing

The offset in the first ``next`` cursor equals the page size. Replacing the
offset digits (keeping the padded width) and re-encoding yields a valid
cursor for any other page, which is what makes parallel fan-out possible
without waiting for the server to hand out each cursor.

This encoding is undocumented. Anything unexpected raises ``CursorError`` so
callers can fall back to following ``next`` links.
"""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from ...core.exceptions import CursorError

CURSOR_PARAM = "cursor"
NEXT_SUFFIX = "__next"
DEFAULT_PAGE_SIZE = 50

# One leading character, a zero-padding run, then the offset digits
_MARKER = re.compile(r".(0+[0-9]+)" + re.escape(NEXT_SUFFIX) + r"$")


@dataclass(frozen=True)
class DecodedCursor:
    """Decoded cursor text and the offset marker found in it.

    Attributes:
        text: Base64-decoded cursor
        position: Offset encoded in the marker, None when there is no marker
        run_start: Index where the padded offset run begins (-1 without marker)
        run_end: Index just past the run, where the suffix starts (-1 without marker)
    """

    text: str
    position: int | None = None
    run_start: int = -1
    run_end: int = -1

    @property
    def page_size(self) -> int:
        """Page-size hint: the offset of a first-page cursor, or the default."""
        if self.position is None:
            return DEFAULT_PAGE_SIZE
        return self.position

    @property
    def width(self) -> int:
        """Width of the zero-padded offset run."""
        if self.position is None:
            return 0
        return self.run_end - self.run_start


def cursor_from_url(url: str | None) -> str | None:
    """Extract the raw ``cursor`` query value from a ``next`` URL.

    ``+`` is kept as-is (base64 alphabet), only percent-escapes are decoded.
    """
    if not url:
        return None
    for part in urlsplit(url).query.split("&"):
        key, sep, value = part.partition("=")
        if sep and key == CURSOR_PARAM and value:
            return unquote(value)
    return None


def decode_cursor(value: str) -> DecodedCursor:
    """Decode a cursor and locate its offset marker.

    Raises:
        CursorError: If the value is empty or not base64-encoded UTF-8 text
    """
    if not value:
        raise CursorError("Empty cursor")
    normalized = value.strip().replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    try:
        text = base64.b64decode(normalized, validate=True).decode("utf-8")
    except ValueError as e:
        raise CursorError(f"Cursor is not base64 text: {e}") from e

    match = _MARKER.search(text)
    if match is None:
        return DecodedCursor(text=text)
    return DecodedCursor(
        text=text,
        position=int(match.group(1)),
        run_start=match.start(1),
        run_end=match.end(1),
    )


def encode_cursor(text: str) -> str:
    """Base64-encode cursor text (standard alphabet, padded)."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _digits(value: int) -> int:
    return len(str(abs(value)))


def synthesize_cursor(
    template: DecodedCursor,
    source_position: int,
    target_position: int,
    page_size: int,
) -> str:
    """Build the encoded cursor for ``target_position`` from a decoded cursor.

    The padded token ``"0" * (digits(target) - digits(page_size)) + source``
    ends the template's offset run; it is swapped for the target offset so the
    run keeps its width. Equal digit counts mean no padding is consumed.

    Raises:
        CursorError: If the template has no marker or the target does not fit
    """
    if template.position is None:
        raise CursorError("Cursor has no offset marker to substitute")
    if target_position < 0:
        raise CursorError(f"Invalid target position: {target_position}")

    padding = max(_digits(target_position) - _digits(page_size), 0)
    token = "0" * padding + str(source_position)
    run = template.text[template.run_start : template.run_end]
    if len(token) >= len(run) or not run.endswith(token):
        raise CursorError(
            f"Position {target_position} does not fit cursor offset run {run!r}"
        )

    cut = template.run_end - len(token)
    text = template.text[:cut] + str(target_position) + template.text[template.run_end :]
    return encode_cursor(text)
