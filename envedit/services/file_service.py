from __future__ import annotations

import errno
from pathlib import Path

from envedit.domain.interfaces import IFileService


class FileService(IFileService):
    """UTF-8 text reads/writes with line endings left untouched."""

    def read_text(self, path: Path) -> str:
        # newline="" disables universal newlines, so '\r' survives the read
        try:
            with path.open("r", encoding="utf-8", newline="") as fh:
                return fh.read()
        except UnicodeDecodeError as exc:
            raise OSError(
                errno.EILSEQ, f"Not valid UTF-8 (byte {exc.start})", str(path)
            ) from exc

    def write_text(self, path: Path, text: str) -> None:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
