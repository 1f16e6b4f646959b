from __future__ import annotations
from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Read/write text files. Failures, undecodable content included, surface as OSError."""

    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Sectioned key/value configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def app_version(self) -> str: ...


class IAppConfig(Protocol):
    """Application-level settings used by the command line front end."""

    def get_version(self) -> str: ...
    def default_file(self) -> Path: ...
    def strict(self) -> bool: ...
    def log_level(self) -> str: ...
