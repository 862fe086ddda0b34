"""Central configuration and environment bootstrap for the report.

Responsibilities:
- bootstrap environment from payreport/.env (python-dotenv)
- resolve the log level from PAYREPORT_LOG_LEVEL
- provide small logging configuration helper
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# Public settings
APPLICATION_NAME = os.getenv("APPLICATION_NAME", "payreport")
DEFAULT_LOG_LEVEL = "WARNING"


def bootstrap_env(app_root: Optional[str] = None) -> None:
    """Load .env file located in payreport/ if present and configure logging.

    This function is safe to call multiple times.
    """
    if app_root is None:
        # package path (this file lives in payreport/config)
        app_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    env_path = os.path.join(app_root, ".env")
    loaded = False
    if os.path.exists(env_path):
        load_dotenv(env_path, override=False)
        loaded = True

    configure_logging(get_log_level())

    if loaded:
        _logger.info(f"Loaded .env from: {env_path}")
    else:
        _logger.debug("No .env file found next to the package")


def get_log_level() -> int:
    """Return the logging level named by PAYREPORT_LOG_LEVEL (default WARNING)."""
    name = os.getenv("PAYREPORT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        _logger.warning(f"Unknown PAYREPORT_LOG_LEVEL {name!r}, using {DEFAULT_LOG_LEVEL}")
        return logging.WARNING
    return level


def configure_logging(level: int = logging.INFO) -> None:
    """Basic logging configuration used by the report.

    Sets a short timestamped format if no handlers are configured yet.
    Records go to stderr so stdout only carries the report.
    """
    if logging.getLogger().handlers:
        # Assume logging already configured
        return
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _logger.debug("Logging initialised")


__all__ = [
    "bootstrap_env",
    "configure_logging",
    "get_log_level",
    "APPLICATION_NAME",
]
