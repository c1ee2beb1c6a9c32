from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml


def load_config(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        msg = "Configuration file must contain a mapping at top level."
        raise ValueError(msg)
    return data


def get_section(cfg: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    """Return ``cfg[name]`` as a mapping, treating a missing or null entry as empty."""
    section = cfg.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        msg = f"Configuration section '{name}' must be a mapping."
        raise ValueError(msg)
    return section
