"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.schema import DashboardConfig


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load and validate config from a YAML file.

    With no path, returns the built-in defaults.
    """
    if path is None:
        return DashboardConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return DashboardConfig(**raw)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'weather.forecast_days'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(
    config: DashboardConfig, dotted_key: str, value: Any
) -> DashboardConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new DashboardConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float) or (
            old_value is None and dotted_key.endswith(".timeout")
        ):
            value = None if value.lower() == "none" else float(value)
    target[parts[-1]] = value
    return DashboardConfig(**data)


def save_config(config: DashboardConfig, path: str | Path) -> None:
    """Write config back to a YAML file, keeping a .bak of the previous one."""
    path = Path(path)
    if path.exists():
        path.with_suffix(path.suffix + ".bak").write_text(path.read_text())
    with open(path, "w") as f:
        yaml.safe_dump(
            config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False
        )
