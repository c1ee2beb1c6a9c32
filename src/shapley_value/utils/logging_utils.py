from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Mapping

import yaml

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def configure_logging(config_path: Path | None = None, level: int = logging.INFO) -> None:
    if config_path is None or not config_path.exists():
        logging.basicConfig(level=level, format=DEFAULT_FORMAT)
        return

    with config_path.open("r", encoding="utf-8") as f:
        config: Mapping[str, Any] = yaml.safe_load(f)
    if not isinstance(config, dict):
        msg = f"Logging configuration {config_path} must contain a mapping."
        raise ValueError(msg)
    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
