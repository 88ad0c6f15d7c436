"""
Shared Utilities
=================
Settings loading, the project logger and small filesystem helpers used by
the quiz engine, the lead store and both hosts.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml


# Ships inside the package so installed copies find it too.
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

LOGGER_NAME = "creator_burnout"


def load_config(config_path: Optional[str] = None) -> dict:
    """Read assessment settings from YAML.

    With no argument the bundled ``creator_burnout/config.yaml`` is used.
    An explicit path that does not exist raises FileNotFoundError.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.is_file():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """Return the ``creator_burnout`` logger, attaching a console handler once."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s:%(module)s] %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level is not None:
        logger.setLevel(level)
    return logger


def apply_log_level(config: dict) -> None:
    """Honour ``logging.level`` from the settings (INFO when absent)."""
    name = (config.get("logging") or {}).get("level", "INFO")
    setup_logging(logging.getLevelName(str(name).upper()))


def ensure_dir(path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
