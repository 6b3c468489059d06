"""Configuration management.

``Settings`` is a **metaclass-based singleton**: the first call to
``Settings.load()`` creates the instance; every later call returns
the same object.  Use ``update()`` to change paths at runtime, or
``reload()`` to re-read everything from disk.

User-editable configuration lives in ``.metadata/settings.yaml``::

    db_path: readinglist.db     # SQLite file with entries and roundups
    export_dir: roundups        # where exported roundups are written

Relative paths are resolved against the base directory.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.yaml"


# ---------------------------------------------------------------------------
# Singleton metaclass
# ---------------------------------------------------------------------------

class _SettingsMeta(type):
    """Metaclass that enforces a process-wide singleton for *Settings*.

    * First ``Settings(...)`` creates and caches the instance.
    * Later ``Settings(...)`` calls return the cached instance (args ignored).
    """

    _instances: dict[type, Any] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


# ---------------------------------------------------------------------------
# Settings dataclass (singleton)
# ---------------------------------------------------------------------------

@dataclass
class Settings(metaclass=_SettingsMeta):
    """Application settings, a singleton with runtime-mutable paths.

    Usage::

        settings = Settings.load()          # first call → create
        settings = Settings.load()          # later → same object
        settings.update(db_path=Path(...))  # runtime change
        settings = Settings.reload()        # re-read from disk
    """

    db_path: Path = Path("readinglist.db")
    metadata_dir: Path = Path(".metadata")
    export_dir: Path = Path("roundups")

    @property
    def settings_path(self) -> Path:
        return self.metadata_dir / SETTINGS_FILE

    def update(self, **kwargs: Any) -> None:
        """Mutate settings fields at runtime.

        >>> Settings.load().update(db_path=Path("/tmp/test.db"))
        """
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"Settings has no field '{key}'")
            setattr(self, key, value)

    @classmethod
    def load(cls, base_dir: Optional[Path] = None) -> "Settings":
        """Load or return the singleton Settings instance.

        On first call the singleton is created; subsequent calls return
        the cached instance.  Pass *base_dir* to override the project
        root (defaults to the current working directory).
        """
        if cls in _SettingsMeta._instances:
            return _SettingsMeta._instances[cls]  # type: ignore[return-value]

        if base_dir is None:
            base_dir = Path.cwd()

        metadata_dir = base_dir / ".metadata"
        data = _load_yaml(metadata_dir / SETTINGS_FILE)

        return cls(
            db_path=_resolve(base_dir, data.get("db_path"), "readinglist.db"),
            metadata_dir=metadata_dir,
            export_dir=_resolve(base_dir, data.get("export_dir"), "roundups"),
        )

    @classmethod
    def reload(cls, base_dir: Optional[Path] = None) -> "Settings":
        """Discard the current singleton and re-load from disk."""
        cls.reset()
        return cls.load(base_dir)

    @classmethod
    def reset(cls) -> None:
        """Discard the singleton so the next ``load()`` re-creates it."""
        _SettingsMeta._instances.pop(cls, None)


# ---------------------------------------------------------------------------
# YAML helpers
# ---------------------------------------------------------------------------

def _resolve(base_dir: Path, value: Any, default: str) -> Path:
    path = Path(str(value)) if value else Path(default)
    return path if path.is_absolute() else base_dir / path


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load ``settings.yaml``; a missing file means all defaults."""
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping", path)
        return {}
    return data


def save_settings(settings: Settings) -> Path:
    """Persist the settings paths to ``.metadata/settings.yaml``."""
    settings.metadata_dir.mkdir(parents=True, exist_ok=True)
    path = settings.settings_path
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Reading list settings\n")
        yaml.dump(
            {
                "db_path": str(settings.db_path),
                "export_dir": str(settings.export_dir),
            },
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
    return path
