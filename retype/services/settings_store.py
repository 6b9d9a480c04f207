from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from retype.domain.enums import PracticeSettings, SettingKey

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide a typed view (PracticeSettings) with defaults for missing keys

    Notes:
      - Unknown keys are preserved on save so other tools can share the file.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings %s: %s", self._path, e)

    def get_practice_settings(self) -> PracticeSettings:
        s = self.load()
        defaults = PracticeSettings()

        def _bval(key: SettingKey, default: bool) -> bool:
            v = s.get(key.value, default)
            return v if isinstance(v, bool) else bool(default)

        def _ival(key: SettingKey, default: int) -> int:
            v = s.get(key.value, default)
            if isinstance(v, (int, float)) and not isinstance(v, bool):
                return int(v) if int(v) > 0 else int(default)
            return int(default)

        level = s.get(SettingKey.LOG_LEVEL.value, defaults.log_level)
        level = str(level).strip().upper() if isinstance(level, str) else defaults.log_level
        if level not in _LOG_LEVELS:
            level = defaults.log_level

        return PracticeSettings(
            fold_ascii_case=_bval(SettingKey.FOLD_ASCII_CASE, defaults.fold_ascii_case),
            show_hint=_bval(SettingKey.SHOW_HINT, defaults.show_hint),
            font_point_size=_ival(SettingKey.FONT_POINT_SIZE, defaults.font_point_size),
            log_level=level,
        )

    def set_value(self, key: SettingKey, value: Any) -> None:
        s = self.load()
        s[key.value] = value
        self.save(s)

    def set_show_hint(self, value: bool) -> None:
        self.set_value(SettingKey.SHOW_HINT, bool(value))

    def set_fold_ascii_case(self, value: bool) -> None:
        self.set_value(SettingKey.FOLD_ASCII_CASE, bool(value))
