"""Engine configuration and the JSON settings file behind it."""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from .errors import ConfigError

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

# Kept lowercase inside a title, capitalized as the first word
DEFAULT_EXCEPTIONS = frozenset({
    "a", "an", "and", "as", "at", "but", "by", "for", "from", "in",
    "nor", "of", "on", "or", "so", "the", "to", "up", "vs", "with", "yet",
})

DEFAULT_VIDEO_EXTENSIONS = frozenset({
    "mkv", "mp4", "avi", "mov", "wmv", "flv", "webm", "mpeg", "mpg",
    "ts", "m2ts", "vob",
})


def _normalize_words(values: Iterable[str], key: str) -> frozenset[str]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ConfigError(f"'{key}' must be a list of strings")
    words = set()
    for value in values:
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' must contain only strings, got {value!r}")
        value = value.strip().lower()
        if key == "video_extensions":
            value = value.lstrip(".")
        if value:
            words.add(value)
    return frozenset(words)


@dataclass(frozen=True)
class EngineConfig:
    """Options the rename engine is constructed with.

    Both sets are stored lowercase; extensions are stored without the
    leading dot.
    """
    exceptions: frozenset[str] = field(default=DEFAULT_EXCEPTIONS)
    video_extensions: frozenset[str] = field(default=DEFAULT_VIDEO_EXTENSIONS)

    def __post_init__(self):
        object.__setattr__(
            self, "exceptions", _normalize_words(self.exceptions, "exceptions")
        )
        object.__setattr__(
            self,
            "video_extensions",
            _normalize_words(self.video_extensions, "video_extensions"),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        kwargs = {}
        for key in ("exceptions", "video_extensions"):
            if data.get(key) is not None:
                kwargs[key] = data[key]
        return cls(**kwargs)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "exceptions": sorted(self.exceptions),
            "video_extensions": sorted(self.video_extensions),
        }


# ---------------------------------------------------------------------------
# Platform-appropriate settings directory
# ---------------------------------------------------------------------------

def settings_dir() -> Path:
    """Return the platform settings directory (not created)."""
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home()))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "eprename"


DEFAULT_SETTINGS: dict[str, Any] = {
    "exceptions": sorted(DEFAULT_EXCEPTIONS),
    "video_extensions": sorted(DEFAULT_VIDEO_EXTENSIONS),
    # GUI state
    "last_folder": "",
}


# ---------------------------------------------------------------------------
# SettingsManager -- single authority for reading / writing settings
# ---------------------------------------------------------------------------

class SettingsManager:
    """Settings store backed by a JSON file.

    Usage:
        mgr = SettingsManager()
        config = mgr.engine_config()
        mgr.set("exceptions", ["of", "the"])
        mgr.save()
    """

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path else settings_dir() / "settings.json"
        self._data = self._load()

    # -- public API -------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        fallback = DEFAULT_SETTINGS.get(key, default)
        return self._data.get(key, fallback)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def save(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            return True
        except OSError as e:
            log.error("Could not save settings to %s: %s", self.path, e)
            return False

    def all(self) -> dict[str, Any]:
        """Return a merged view: defaults + saved values."""
        merged = DEFAULT_SETTINGS.copy()
        merged.update(self._data)
        return merged

    def reload(self) -> None:
        self._data = self._load()

    def engine_config(self) -> EngineConfig:
        return EngineConfig.from_dict(self.all())

    # -- private ----------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring settings file %s: not a JSON object", self.path)
            return {}
        return data
