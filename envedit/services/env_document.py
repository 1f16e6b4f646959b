from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from envedit.domain.interfaces import IFileService
from envedit.domain.models import Blank, Change, ChangeKind, Comment, Line, Pair
from envedit.services.file_service import FileService
from envedit.services.parser import parse_lines
from envedit.services.serializer import render_lines

logger = logging.getLogger(__name__)


class EnvDocument:
    """
    Ordered, format-preserving view of a dotenv file.

    Holds the parsed lines (blanks, comments and pairs in file order), the
    path the document belongs to and a `modified` flag set by any mutation.
    Nothing is written to disk until `save()` / `save_if_modified()`.

    Duplicate keys are kept as-is: lookups and `add` act on the first match,
    `remove` drops all of them.
    """

    def __init__(
        self,
        lines: Iterable[Line] = (),
        path: Path | None = None,
        *,
        modified: bool = False,
        files: IFileService | None = None,
    ) -> None:
        self._lines: list[Line] = list(lines)
        self._path = Path(path) if path is not None else None
        self._modified = modified
        self._files: IFileService = files or FileService()

    # ---------- Construction ----------

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        path: Path | None = None,
        strict: bool = True,
        files: IFileService | None = None,
    ) -> EnvDocument:
        return cls(parse_lines(text, strict=strict), path, files=files)

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        strict: bool = True,
        files: IFileService | None = None,
    ) -> EnvDocument:
        """Read and parse `path`. OSError from the read propagates unchanged."""
        files = files or FileService()
        p = Path(path)
        text = files.read_text(p)
        logger.debug("Loaded %s", p)
        return cls.parse(text, path=p, strict=strict, files=files)

    def clone_to_path(self, path: str | Path) -> EnvDocument:
        """
        Copy this document onto a new target path. The copy starts out
        modified so `save_if_modified()` always writes it.
        """
        return EnvDocument(self._lines, Path(path), modified=True, files=self._files)

    # ---------- State ----------

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def modified(self) -> bool:
        return self._modified

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"EnvDocument(path={self._path!r}, lines={len(self._lines)}, modified={self._modified})"

    # ---------- Queries ----------

    def _pairs(self) -> Iterator[Pair]:
        return (line for line in self._lines if isinstance(line, Pair))

    def lookup(self, key: str) -> str | None:
        """Value of the first pair named `key`, or None."""
        for pair in self._pairs():
            if pair.key == key:
                return pair.value
        return None

    def has_key(self, key: str) -> bool:
        return any(pair.key == key for pair in self._pairs())

    def has_value(self, key: str) -> bool:
        """True only if a pair named `key` exists with a non-empty value."""
        return any(pair.key == key and pair.value for pair in self._pairs())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def iter(self) -> Iterator[tuple[str, str]]:
        """Fresh iterator of (key, value) over the pairs, in file order."""
        return ((pair.key, pair.value) for pair in self._pairs())

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.iter()

    def keys(self) -> list[str]:
        return [key for key, _ in self.iter()]

    # ---------- Mutations ----------

    def add(self, key: str, value: str) -> Change | None:
        """
        Insert or update `key`.

        Only the first pair with this key is considered. Returns None when it
        already holds `value`. An empty `value` never overwrites a non-empty
        one (reported as SKIPPED). A missing key is appended at the end.

        Raises ValueError, leaving the document untouched, if the pair could
        not be read back as written (see `Pair`).
        """
        new = Pair(key, value)
        for i, line in enumerate(self._lines):
            if not isinstance(line, Pair) or line.key != key:
                continue
            if line.value == value:
                return None
            if not value and line.value:
                return Change(ChangeKind.SKIPPED, key, path=self._path, reason="already exists")
            self._lines[i] = new
            self._modified = True
            return Change(ChangeKind.UPDATED, key, value, path=self._path)

        self._lines.append(new)
        self._modified = True
        return Change(ChangeKind.ADDED, key, value, path=self._path)

    def remove(self, key: str) -> Change | None:
        """Drop every pair named `key`. Comments and blanks are kept."""
        kept = [line for line in self._lines if not (isinstance(line, Pair) and line.key == key)]
        removed = len(self._lines) - len(kept)
        if not removed:
            return None
        self._lines = kept
        self._modified = True
        return Change(ChangeKind.REMOVED, key, path=self._path, count=removed)

    def reorder_based_on(self, template: EnvDocument) -> list[Change]:
        """
        Rebuild this document in the shape of `template`.

        Blanks and comments come from the template verbatim; each template
        pair takes this document's current value, or "" if the key is
        missing here. Anything present only in this document is dropped.
        Returns an ADDED change for every key that had to be filled in.
        """
        added: list[Change] = []
        new_lines: list[Line] = []
        for line in template._lines:
            if isinstance(line, (Blank, Comment)):
                new_lines.append(line)
            elif isinstance(line, Pair):
                value = self.lookup(line.key)
                if value is None:
                    change = Change(ChangeKind.ADDED, line.key, "", path=self._path)
                    logger.info("%s", change)
                    added.append(change)
                new_lines.append(Pair(line.key, value or ""))
            else:
                raise TypeError(f"Not an env line: {line!r}")
        self._lines = new_lines
        self._modified = True
        return added

    # ---------- Serialization ----------

    def render(self) -> str:
        return render_lines(self._lines)

    def __str__(self) -> str:
        return self.render()

    def save(self) -> None:
        """Write the rendered text to `path`. OSError propagates unchanged."""
        if self._path is None:
            raise ValueError("Document has no path to save to")
        self._files.write_text(self._path, self.render())
        self._modified = False
        logger.debug("Saved %s", self._path)

    def save_if_modified(self) -> bool:
        """Save only when something changed; returns whether a write happened."""
        if not self._modified:
            return False
        self.save()
        return True


# --- Module-level constructors -----------------------------------------------


def parse(text: str, *, strict: bool = True) -> EnvDocument:
    """Parse an in-memory string into a document with no path."""
    return EnvDocument.parse(text, strict=strict)


def load(
    path: str | Path, *, strict: bool = True, files: IFileService | None = None
) -> EnvDocument:
    return EnvDocument.from_path(path, strict=strict, files=files)


read = load
