from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pytxt.domain.interfaces import IAppConfig
from pytxt.services.config.ini_config_service import IniConfigService
from pytxt.services.gemini_client import GeminiSettings
from pytxt.utils.constants import (
    API_KEY_ENV,
    GEMINI_BASE_URL,
    GEMINI_MODEL,
    LOG_LEVEL_ENV,
    MODEL_ENV,
)

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Project root that also works in PyInstaller:
      - onefile/onedir bundles expose sys._MEIPASS
      - dev mode walks up from this file (pytxt/services/config/app_config.py)
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService and layers the process environment on top.

    Version precedence: <project_root>/version, then [app] version, then "0.0.0".
    The Gemini API key is only ever read from the environment.
    """

    ini: IniConfigService
    project_root: Path
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v
        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2
        return "0.0.0"

    def gemini_settings(self) -> GeminiSettings:
        model = (
            self.environ.get(MODEL_ENV)
            or self.ini.get("gemini", "model", GEMINI_MODEL)
            or GEMINI_MODEL
        )
        return GeminiSettings(
            api_key=(self.environ.get(API_KEY_ENV) or "").strip(),
            model=model.strip(),
            base_url=self.ini.get("gemini", "base_url", GEMINI_BASE_URL) or GEMINI_BASE_URL,
            timeout=self.ini.get_float("gemini", "timeout", None),
        )

    def log_level(self) -> str:
        return self.environ.get(LOG_LEVEL_ENV) or self.ini.get("log", "level", "INFO") or "INFO"

    # ---- delegate IniConfigService ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_float(self, section: str, key: str, default: float | None = None) -> float | None:
        return self.ini.get_float(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()


def build_app_config(
    *,
    explicit_ini: Path | None = None,
    project_root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    if environ is None:
        return AppConfig(ini=ini, project_root=root)
    return AppConfig(ini=ini, project_root=root, environ=environ)
