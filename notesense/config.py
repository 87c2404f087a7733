"""Configuration and logging helpers for notesense."""
from __future__ import annotations

import logging
import logging.config
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import yaml

DEFAULT_CONFIG_NAME = "config.yaml"
PACKAGE_DEFAULT_PATH = "defaults/config.yaml"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
SYSTEM_CONFIG_DIR = Path("/etc/notesense")

log = logging.getLogger(__name__)


@dataclass(slots=True)
class Config:
    """Strongly-typed view of configuration content."""

    data: Dict[str, Any]

    @classmethod
    def load(cls, path: Path | None = None, *, layered: bool = True) -> "Config":
        """Load configuration from a specific path or using the layered strategy."""
        if path is not None:
            return cls(data=_deep_merge(_load_package_defaults(), _load_yaml(Path(path))))
        if layered:
            data, _ = load_layered_config()
            return cls(data=data)
        return cls(data=_load_yaml(Path(DEFAULT_CONFIG_NAME)))

    def get(self, key: str, default: Any | None = None) -> Any:
        return self.data.get(key, default)

    def section(self, key: str) -> Dict[str, Any]:
        value = self.data.get(key)
        return value if isinstance(value, dict) else {}


def load_package_config() -> Config:
    """Load only the defaults bundled with the package."""
    return Config(data=_load_package_defaults())


def load_layered_config() -> Tuple[Dict[str, Any], List[str]]:
    """Return the effective layered configuration and the sources applied."""
    sources: List[str] = []
    data: Dict[str, Any] = {}

    package_defaults = _load_package_defaults()
    if package_defaults:
        data = package_defaults
        sources.append("package:" + PACKAGE_DEFAULT_PATH)

    for path in _default_overlay_paths():
        overlay = _load_yaml(path)
        if overlay:
            data = _deep_merge(data, overlay)
            sources.append(str(path))

    env_path = os.environ.get("NOTESENSE_CONFIG")
    if env_path:
        overlay = _load_yaml(Path(env_path))
        if overlay:
            data = _deep_merge(data, overlay)
            sources.append(env_path)

    env_overlay = _environment_overrides()
    if env_overlay:
        data = _deep_merge(data, env_overlay)
        sources.append("env:NOTESENSE_*")

    return data, sources


def setup_logging(config: Config | None = None) -> None:
    """Configure logging from a dictConfig YAML file if one is set, else basicConfig."""
    logging_config = config.section("logging") if config is not None else {}
    config_path = logging_config.get("config")
    if config_path:
        loaded = _load_yaml(Path(config_path))
        if loaded:
            try:
                logging.config.dictConfig(loaded)
                return
            except (ValueError, TypeError, AttributeError, ImportError) as exc:
                log.warning("Ignoring logging config %s: %s", config_path, exc)
    level = str(logging_config.get("level") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def _load_package_defaults() -> Dict[str, Any]:
    resource = resources.files("notesense").joinpath(PACKAGE_DEFAULT_PATH)
    if not resource.is_file():  # pragma: no cover - packaging guard
        return {}
    with resource.open("r", encoding="utf-8") as handle:
        return _as_mapping(yaml.safe_load(handle), "package:" + PACKAGE_DEFAULT_PATH)


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Read one overlay; a missing, unreadable or malformed file contributes nothing."""
    if not path.is_file():
        return {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Skipping config overlay %s: %s", path, exc)
        return {}
    return _as_mapping(loaded, str(path))


def _as_mapping(loaded: Any, source: str) -> Dict[str, Any]:
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        log.warning("Skipping config overlay %s: top level is not a mapping", source)
        return {}
    return loaded


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {**base}
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _default_overlay_paths() -> List[Path]:
    """System, user and working-directory overlays, lowest precedence first."""
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_root = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return [
        SYSTEM_CONFIG_DIR / DEFAULT_CONFIG_NAME,
        user_root / "notesense" / DEFAULT_CONFIG_NAME,
        Path.cwd() / DEFAULT_CONFIG_NAME,
    ]


def _environment_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_var, section, key, caster in ENV_OVERRIDES:
        raw_value = os.environ.get(env_var)
        if raw_value is None:
            continue
        try:
            value = caster(raw_value)
        except ValueError:
            log.debug("Ignoring malformed %s=%r", env_var, raw_value)
            continue
        overrides.setdefault(section, {})[key] = value
    return overrides


def _parse_positive_int(raw: str) -> int:
    value = int(raw.strip())
    if value <= 0:
        raise ValueError(f"expected a positive integer, got {raw!r}")
    return value


def _parse_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(f"unknown log level {raw!r}")
    return level


ENV_OVERRIDES: Tuple[Tuple[str, str, str, Callable[[str], Any]], ...] = (
    ("NOTESENSE_MAX_TEXT_LENGTH", "detection", "max_text_length", _parse_positive_int),
    ("NOTESENSE_MEMOIZE_SIZE", "detection", "memoize_size", _parse_positive_int),
    ("NOTESENSE_LOG_LEVEL", "logging", "level", _parse_level),
    ("NOTESENSE_LOG_CONFIG", "logging", "config", str),
)
