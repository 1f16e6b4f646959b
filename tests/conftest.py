from __future__ import annotations

from pathlib import Path

import pytest

from envedit.services.file_service import FileService

SAMPLE = "# Database\nDB_HOST=localhost\nDB_PORT=5432\n\n# Secrets\nAPI_KEY=\n"


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path: Path) -> Path:
    """Keep the real ~/.config/envedit out of every test."""
    cfg_dir = tmp_path / "usercfg"
    monkeypatch.setattr(
        "envedit.services.config.ini_config_service.user_config_dir",
        lambda appname: str(cfg_dir),
        raising=True,
    )
    return cfg_dir


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def env_path(tmp_path: Path) -> Path:
    p = tmp_path / ".env"
    p.write_text(SAMPLE, encoding="utf-8")
    return p
