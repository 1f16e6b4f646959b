from __future__ import annotations

import re
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from envedit.domain.interfaces import IAppConfig
from envedit.services.config.ini_config_service import IniConfigService
from envedit.utils.constants import DEFAULT_ENV_FILE, DEFAULT_LOG_LEVEL, DIST_NAME

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _installed_version() -> str | None:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Typed view over IniConfigService for the command line front end.

    Recognised settings:
      [envedit] default_file = .env     file edited when --file is omitted
      [envedit] strict = true           reject lines without '='
      [logging] level = WARNING

    Precedence for version:
      1) installed distribution metadata
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"
    """

    ini: IniConfigService

    def get_version(self) -> str:
        v = _installed_version()
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    def default_file(self) -> Path:
        raw = (self.ini.get("envedit", "default_file", DEFAULT_ENV_FILE) or "").strip()
        return Path(raw or DEFAULT_ENV_FILE).expanduser()

    def strict(self) -> bool:
        value = self.ini.get_bool("envedit", "strict", True)
        return True if value is None else value

    def log_level(self) -> str:
        level = (self.ini.get("logging", "level", DEFAULT_LOG_LEVEL) or "").strip().upper()
        return level if level in _LOG_LEVELS else DEFAULT_LOG_LEVEL

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or Path.cwd()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
