# ==============================================
# Logging Setup
# ==============================================
#
# All operator-facing messages go to stderr through the root
# logger. Level comes from LoggingConfig (MIMESELECT_LOG).
#
# ==============================================

import logging
import sys
from typing import Union

from mimeselect.config import LoggingConfig

LOG_FORMAT = "%(levelname)-5s %(name)s > %(message)s"


def resolve_level(level: Union[str, int]) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger to write to stderr.

    Args:
        config: Logging configuration with the level name
    """
    root = logging.getLogger()
    root.setLevel(resolve_level(config.level))

    # Remove existing handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
