"""Configuration loading for llmsgen (.llmsgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .paths import DEFAULT_LOCALES

CONFIG_FILENAME = ".llmsgen.yml"
DEFAULT_PROJECT_NAME = "Personal Website & Blog"
DEFAULT_PROJECT_DESCRIPTION = (
    "A collection of blog posts, research articles, and app descriptions covering "
    "software development, algorithms, and technical tutorials."
)
DEFAULT_EXCLUDES: tuple[str, ...] = ("node_modules/**", ".next/**", "out/**")

_PATH_KEYS = ("content_dir", "output_dir", "templates_dir")


class ConfigError(RuntimeError):
    """Raised when the configuration is missing required options or cannot be parsed."""


@dataclass
class GeneratorConfig:
    """Options for a single generation run."""

    content_dir: Path
    output_dir: Path
    base_url: str = ""
    project_name: str = DEFAULT_PROJECT_NAME
    project_description: str = DEFAULT_PROJECT_DESCRIPTION
    exclude_paths: List[str] = field(default_factory=list)
    locales: List[str] = field(default_factory=lambda: list(DEFAULT_LOCALES))
    templates_dir: Optional[Path] = None

    @property
    def ignore_patterns(self) -> List[str]:
        """Built-in exclusions followed by the user supplied ones."""
        return [*DEFAULT_EXCLUDES, *self.exclude_paths]


def load_config(
    config_path: Path, overrides: Mapping[str, Any] | None = None
) -> GeneratorConfig:
    """Load configuration from disk and apply ``overrides`` on top.

    Relative paths inside the file resolve against the file's directory.
    Override values of ``None`` are ignored so unset CLI flags keep file values.
    """
    config_file = _resolve_config_path(config_path)
    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)
        root = config_file.parent
        for key in _PATH_KEYS:
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                data[key] = root / value

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value
    return build_config(data)


def build_config(data: Mapping[str, Any]) -> GeneratorConfig:
    """Coerce a raw mapping into :class:`GeneratorConfig`."""
    content_dir = _as_path(data.get("content_dir"))
    if content_dir is None:
        raise ConfigError("content_dir is required")
    output_dir = _as_path(data.get("output_dir"))
    if output_dir is None:
        raise ConfigError("output_dir is required")

    locales = data.get("locales")
    return GeneratorConfig(
        content_dir=content_dir,
        output_dir=output_dir,
        base_url=_as_str(data.get("base_url")) or "",
        project_name=_as_str(data.get("project_name")) or DEFAULT_PROJECT_NAME,
        project_description=_as_str(data.get("project_description"))
        or DEFAULT_PROJECT_DESCRIPTION,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        locales=list(DEFAULT_LOCALES) if locales is None else _as_str_list(locales),
        templates_dir=_as_path(data.get("templates_dir")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_path(value: Any) -> Optional[Path]:
    if isinstance(value, Path):
        return value
    if isinstance(value, str) and value.strip():
        return Path(value.strip())
    return None


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_str_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if isinstance(item, (str, int, float)) and str(item).strip()]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_EXCLUDES",
    "DEFAULT_PROJECT_DESCRIPTION",
    "DEFAULT_PROJECT_NAME",
    "GeneratorConfig",
    "build_config",
    "load_config",
]
