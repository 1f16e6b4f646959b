from __future__ import annotations


class ParseError(ValueError):
    """
    A non-blank, non-comment line has no `=` delimiter.

    Attributes:
        lineno: 1-based line number in the parsed text.
        text: the offending line exactly as it appeared (untrimmed).
    """

    def __init__(self, lineno: int, text: str) -> None:
        self.lineno = lineno
        self.text = text
        super().__init__(f"line {lineno}: missing '=' in {text!r}")
