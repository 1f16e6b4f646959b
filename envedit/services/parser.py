from __future__ import annotations

import logging

from envedit.domain.errors import ParseError
from envedit.domain.models import Blank, Comment, Line, Pair

logger = logging.getLogger(__name__)


def parse_line(raw: str, lineno: int) -> Line:
    """
    Classify one raw line. Surrounding whitespace is trimmed first, then:
    `#...` is a comment, empty is blank, anything else must be `key=value`.
    """
    line = raw.strip()
    if line.startswith("#"):
        return Comment(line)
    if not line:
        return Blank()
    try:
        return Pair.from_text(line)
    except ValueError:
        raise ParseError(lineno, raw) from None


def parse_lines(text: str, *, strict: bool = True) -> list[Line]:
    """
    Parse `text` into one Line per `\\n`-separated input line.

    Only `\\n` separates lines; `\\r` is ordinary whitespace to the per-line
    trim. A trailing newline produces a final Blank.

    With strict=False, lines without `=` are dropped (and logged) instead of
    raising ParseError.
    """
    lines: list[Line] = []
    for lineno, raw in enumerate(text.split("\n"), start=1):
        try:
            lines.append(parse_line(raw, lineno))
        except ParseError as exc:
            if strict:
                raise
            logger.warning("Skipping malformed %s", exc)
    return lines
