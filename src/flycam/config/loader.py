"""YAML configuration for the free-fly camera.

A config file holds up to three mappings, ``camera``, ``controller``
and ``display``; each value present overrides the matching
``FlyCamConfig`` default. Values are checked and coerced as they are
merged, so a loaded config can always build a
:class:`~flycam.camera.camera.Camera` and
:class:`~flycam.camera.controller.CameraController`.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import yaml

from flycam.config.schema import FlyCamConfig

logger = logging.getLogger(__name__)

_VECTOR_KEYS = frozenset({"position", "world_up", "target"})
_FLOAT_KEYS = frozenset({
    "aspect", "fovy_deg", "znear", "zfar",
    "move_speed", "mouse_sensitivity", "zoom_sensitivity",
})


class ConfigError(ValueError):
    """Raised when a config value cannot be used."""


def _as_vec3(value: Any, where: str) -> tuple[float, float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ConfigError(
            f"{where} must be a list of 3 numbers, got {value!r}"
        )
    try:
        x, y, z = (float(v) for v in value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{where} must be numeric, got {value!r}") from exc
    return x, y, z


def _coerce(key: str, value: Any, where: str) -> Any:
    if key in _VECTOR_KEYS:
        return _as_vec3(value, where)
    if key in _FLOAT_KEYS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{where} must be a number, got {value!r}")
        return float(value)
    return value


def _merge_section(section: Any, name: str, data: Any) -> None:
    if not isinstance(data, dict):
        raise ConfigError(f"{name} must be a mapping, got {data!r}")
    known = {f.name for f in dataclasses.fields(section)}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown config key %s.%s", name, key)
            continue
        setattr(section, key, _coerce(key, value, f"{name}.{key}"))


def validate_config(config: FlyCamConfig) -> None:
    """Check cross-field constraints of a merged config.

    Raises:
        ConfigError: If the camera target coincides with its position.
    """
    cam = config.camera
    if tuple(cam.target) == tuple(cam.position):
        raise ConfigError(
            f"camera.target {cam.target} equals camera.position; "
            "the camera needs a direction to look in"
        )


def load_config(path: str | Path | None = None) -> FlyCamConfig:
    """Load a configuration from a YAML file.

    If *path* is ``None``, returns the default configuration.

    Args:
        path: Optional path to a YAML configuration file.

    Returns:
        Defaults overridden by the file's values.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigError: If a section or value is malformed.
    """
    config = FlyCamConfig()
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    for name, values in data.items():
        section = getattr(config, name, None)
        if not dataclasses.is_dataclass(section):
            logger.warning("Ignoring unknown config section %r", name)
            continue
        _merge_section(section, name, values)

    validate_config(config)
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: FlyCamConfig, path: str | Path) -> None:
    """Write *config* as YAML, creating parent directories.

    Vectors are written as plain lists so the file stays readable by
    ``yaml.safe_load``.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        name: {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in section.items()
        }
        for name, section in dataclasses.asdict(config).items()
    }
    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
