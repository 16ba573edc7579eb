"""Utility modules for termfolio."""

from termfolio.utils.logging import close_logging, configure_logging, get_current_log_path

__all__ = ["configure_logging", "close_logging", "get_current_log_path"]
