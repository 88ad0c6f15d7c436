"""Shared utilities — config loading, logging, helpers."""

from creator_burnout.utils.helpers import (
    apply_log_level,
    ensure_dir,
    load_config,
    setup_logging,
)

__all__ = ["load_config", "setup_logging", "apply_log_level", "ensure_dir"]
