from __future__ import annotations

import codecs
import logging
import os
from dataclasses import asdict, dataclass
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from jsonschema import Draft202012Validator

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SAMPLEKIT_CONFIG"

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "max_stalled_draws": {"type": ["integer", "null"], "minimum": 1},
        "separator": {"type": "string"},
        "dash_width": {"type": "integer", "minimum": 0},
        "encoding": {"type": "string", "minLength": 1},
    },
    "required": ["max_stalled_draws", "separator", "dash_width", "encoding"],
    "additionalProperties": False,
}


@dataclass(frozen=True)
class SampleKitConfig:
    """Runtime settings shared by the fill, print and file helpers.

    - max_stalled_draws: consecutive no-progress draws tolerated by
      uniqueness-based fills; None means no ceiling.
    - separator: default separator written after each printed item.
    - dash_width: number of dashes in the line closing a printout.
    - encoding: text encoding used by the text file helpers.
    """

    max_stalled_draws: Optional[int] = 100_000
    separator: str = " "
    dash_width: int = 77
    encoding: str = "utf-8"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_yaml(text: str, source: str) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse config {source}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {source} must be a mapping, got {type(raw).__name__}")
    return raw


def _validate(data: Dict[str, Any], source: str) -> None:
    errors = sorted(Draft202012Validator(CONFIG_SCHEMA).iter_errors(data), key=lambda e: list(e.path))
    if errors:
        lines = []
        for err in errors:
            where = "/".join(str(p) for p in err.path) or "<root>"
            lines.append(f"{where}: {err.message}")
        raise ConfigError(f"Invalid config {source}:\n  " + "\n  ".join(lines))
    try:
        codecs.lookup(data["encoding"])
    except LookupError as exc:
        raise ConfigError(f"Invalid config {source}: unknown encoding {data['encoding']!r}") from exc


def load_default_mapping() -> Dict[str, Any]:
    """Return the embedded default settings as a plain mapping."""
    text = resource_files("samplekit").joinpath("defaults.yaml").read_text(encoding="utf-8")
    return _parse_yaml(text, "<embedded defaults>")


def load_config(path: Optional[Union[str, Path]] = None) -> SampleKitConfig:
    """Load settings from YAML.

    If path is None, the SAMPLEKIT_CONFIG environment variable is consulted;
    without it only the embedded defaults are used. Keys present in the file
    override the defaults.
    """
    data = load_default_mapping()
    source = "<embedded defaults>"

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    if path is not None:
        source = str(path)
        config_path = Path(path)
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not read config file %s: %s", config_path, exc)
            raise ConfigError(f"Config file not readable: {config_path}") from exc
        overrides = _parse_yaml(text, source)
        data.update(overrides)
        logger.debug("Loaded config overrides from %s: %s", config_path, sorted(overrides))

    _validate(data, source)
    # jsonschema counts 5.0 as an integer
    data["dash_width"] = int(data["dash_width"])
    if data["max_stalled_draws"] is not None:
        data["max_stalled_draws"] = int(data["max_stalled_draws"])
    cfg = SampleKitConfig(**data)
    logger.debug("Effective config from %s: %s", source, cfg)
    return cfg


_current: Optional[SampleKitConfig] = None


def get_config() -> SampleKitConfig:
    """Return the process-wide config, loading it on first use."""
    global _current
    if _current is None:
        _current = load_config()
    return _current


def set_config(cfg: Optional[SampleKitConfig]) -> None:
    """Replace the process-wide config. None forces a reload on next use."""
    global _current
    _current = cfg


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_SCHEMA",
    "SampleKitConfig",
    "get_config",
    "load_config",
    "load_default_mapping",
    "set_config",
]
