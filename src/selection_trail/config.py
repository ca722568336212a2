from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "selection_trail.yml"


class TrailConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.document = data.get("document", {}) or {}
        self.debug = bool(data.get("debug", False))


def load_config(path: Optional[Union[str, Path]] = None) -> TrailConfig:
    """
    Read the YAML configuration.

    An explicitly given ``path`` must exist. The default file is optional;
    without it the built-in defaults apply.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return TrailConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return TrailConfig(data)


_config_cache: Optional[TrailConfig] = None


def get_config() -> TrailConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
