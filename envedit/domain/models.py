from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class Pair:
    """
    A `key=value` line. Both sides are raw, unescaped text.

    Only pairs that render back to the same pair are accepted: the key has
    no `=` or newline and neither starts with whitespace nor `#`; the value
    has no newline and no trailing whitespace. Violations raise ValueError.
    """

    key: str
    value: str

    def __post_init__(self) -> None:
        key, value = self.key, self.value
        if "=" in key or "\n" in key:
            raise ValueError(f"key may not contain '=' or a newline: {key!r}")
        if key != key.lstrip() or key.startswith("#"):
            raise ValueError(f"key may not start with whitespace or '#': {key!r}")
        if "\n" in value:
            raise ValueError(f"value may not contain a newline: {value!r}")
        if value != value.rstrip():
            raise ValueError(f"value may not end with whitespace: {value!r}")

    @classmethod
    def from_text(cls, text: str) -> Pair:
        """Split on the first `=` only; the value may itself contain `=`."""
        if "=" not in text:
            raise ValueError(f"missing '=' in {text!r}")
        key, value = text.split("=", 1)
        return cls(key=key, value=value)


@dataclass(frozen=True)
class Blank:
    """Empty or whitespace-only line."""


@dataclass(frozen=True)
class Comment:
    text: str  # trimmed, including the leading '#'


Line = Union[Blank, Pair, Comment]


class ChangeKind(Enum):
    ADDED = "added"
    UPDATED = "updated"
    SKIPPED = "skipped"
    REMOVED = "removed"


@dataclass(frozen=True)
class Change:
    """
    Outcome of a mutation on an env document.

    Mutations return these instead of preformatted strings; `str(change)`
    gives the human-readable status line shown by the CLI.
    """

    kind: ChangeKind
    key: str
    value: str = ""
    path: Path | None = None
    count: int = 0
    reason: str = ""

    def __str__(self) -> str:
        where = str(self.path) if self.path is not None else "<string>"
        if self.kind is ChangeKind.ADDED:
            return f"{where}: Added {self.key}={self.value}"
        if self.kind is ChangeKind.UPDATED:
            return f"{where}: Updated {self.key}={self.value}"
        if self.kind is ChangeKind.SKIPPED:
            return f"{where}: {self.key} {self.reason}"
        return f"{where}: Removed {self.key}"
