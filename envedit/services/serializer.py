from __future__ import annotations

from collections.abc import Iterable

from envedit.domain.models import Blank, Comment, Line, Pair


def render_line(line: Line) -> str:
    if isinstance(line, Blank):
        return ""
    if isinstance(line, Comment):
        return line.text
    if isinstance(line, Pair):
        return f"{line.key}={line.value}"
    raise TypeError(f"Not an env line: {line!r}")


def render_lines(lines: Iterable[Line]) -> str:
    """Join rendered lines with `\\n`; no trailing newline is added."""
    return "\n".join(render_line(line) for line in lines)
