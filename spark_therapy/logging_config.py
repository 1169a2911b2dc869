"""
Logging configuration for the spark_therapy client.

Sinks are configured once at startup by ``configure_logging``. The TUI owns
the terminal, so console output is off unless asked for.
"""

import os
import sys
from typing import Any, Dict, Mapping, Optional

from loguru import logger

SENSITIVE_KEYS = {
    "password", "token", "secret", "auth", "credential", "api_key",
    "email", "phone", "address",
}


def mask_sensitive_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Mask sensitive fields in route params before logging them.

    Args:
        params: Route params

    Returns:
        Copy of params with sensitive values replaced
    """
    masked = dict(params)
    for key in masked:
        if any(sensitive in str(key).lower() for sensitive in SENSITIVE_KEYS):
            masked[key] = "***MASKED***"
    return masked


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None:
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


def configure_logging(level: Optional[str] = None,
                      log_file: Optional[str] = None,
                      console: Optional[bool] = None) -> Dict[str, Any]:
    """
    Configure loguru sinks.

    Explicit arguments win, then SPARK_LOG_* environment variables, then the
    [logging] config section.

    Returns:
        The effective settings
    """
    from .config import get_cli_section

    section = get_cli_section("logging")
    settings = {
        "level": level or os.environ.get("SPARK_LOG_LEVEL") or section.get("log_level", "INFO"),
        "log_file": log_file or os.environ.get("SPARK_LOG_FILE") or section.get("log_filename", "spark_therapy.log"),
        "console": console if console is not None else _env_flag("SPARK_LOG_CONSOLE"),
        "rotation": section.get("rotation", "10 MB"),
        "retention": section.get("retention", "7 days"),
    }
    if settings["console"] is None:
        settings["console"] = bool(section.get("console", False))

    logger.remove()  # Remove default handler
    logger.add(
        sink=settings["log_file"],
        level=settings["level"],
        rotation=settings["rotation"],
        retention=settings["retention"],
        compression="zip",
    )
    if settings["console"]:
        logger.add(sink=sys.stderr, level=settings["level"], colorize=True)

    logger.info(f"Logging configured: level={settings['level']}, file={settings['log_file']}")
    return settings
