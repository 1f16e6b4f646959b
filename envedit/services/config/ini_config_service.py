# envedit/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from envedit.domain.interfaces import IConfigService
from envedit.utils.constants import APP_DIR, CONFIG_FILE

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


def config_candidates(explicit_path: Optional[Path], project_root: Optional[Path]) -> list[Path]:
    r"""
    Config files to try, in priority order:
      1. Explicit path (`envedit --config`)
      2. User config dir (e.g., ~/.config/envedit/config.ini or %APPDATA%\envedit\config.ini)
      3. <project_root>/config/config.ini
    """
    candidates: list[Path] = []
    if explicit_path:
        candidates.append(explicit_path)
    candidates.append(Path(user_config_dir(APP_DIR)) / CONFIG_FILE)
    if project_root:
        candidates.append(project_root / "config" / CONFIG_FILE)
    return candidates


class IniConfigService(IConfigService):
    """
    Reads the first usable config.ini among `config_candidates()`.

    Unreadable or malformed files are logged and skipped; with no usable file
    every lookup returns its default.
    """

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        for path in config_candidates(explicit_path, project_root):
            if not path.exists():
                continue
            parser = configparser.ConfigParser()
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, UnicodeDecodeError, configparser.Error) as exc:
                logger.warning("Ignoring config %s: %s", path, exc)
                continue
            self._parser = parser
            self._loaded_from = path
            break

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if not self._parser.has_section(section):
            return default
        return self._parser[section].get(key, default)

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        val = self.get(section, key, None)
        if val is None:
            return default
        s = val.strip().lower()
        if s in _TRUTHY:
            return True
        if s in _FALSY:
            return False
        return default

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics (`envedit --verbose` logs it)."""
        return self._loaded_from
