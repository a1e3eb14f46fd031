#!/usr/bin/env python3
"""
Purpose:
    Configures the loguru sink used by objectschema from a log level or a
    loaded configuration mapping.
"""
from __future__ import annotations

import sys
from typing import Any, Dict, Optional

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} - {message}"


def configure_logging(level: str = "INFO", *, sink: Any = None) -> int:
    """
    Replace loguru's default handler with a single sink at `level`.

    Returns:
        The loguru handler id, so callers can remove the sink again.
    """
    logger.remove()
    return logger.add(sink or sys.stderr, level=level.upper(), format=LOG_FORMAT)


def configure_from_config(config: Optional[Dict[str, Any]], *, sink: Any = None) -> int:
    """Configure logging from the `logging.level` key of a loaded config."""
    level = ((config or {}).get("logging") or {}).get("level", "INFO")
    return configure_logging(str(level), sink=sink)
