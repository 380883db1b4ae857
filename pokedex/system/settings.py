from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from pokedex.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".pokedex_settings.json"

@dataclass
class SettingsData:
    log_level: str = "INFO"            # DEBUG / INFO / WARN / ERROR
    starting_money: int = 1_000_000    # balance of a newly created trainer
    max_storage: int = 100             # storage box capacity per trainer

    def normalize(self):
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LEVELS:
            self.log_level = "INFO"
        self.log_level = self.log_level.upper()
        if not isinstance(self.starting_money, int) or self.starting_money < 0:
            self.starting_money = 1_000_000
        if not isinstance(self.max_storage, int) or self.max_storage < 1:
            self.max_storage = 100

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls) -> "Settings":
        path = cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields (older files)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def apply(self):
        """Push settings that affect process-wide state (the log threshold)."""
        logger.set_level(self.data.log_level)
