"""Logging setup for the command line tools. The library itself only emits."""

import logging
import os
import sys

LOG_LEVEL_ENV = "PCIRESOLVE_LOG_LEVEL"

_CONFIGURED_ATTR = "_pciresolve_logging_configured"


def setup_logging(level: int = logging.WARNING, *, force: bool = False) -> None:
    """Send log records to stderr.

    Args:
        level: Logging level (default: WARNING)
        force: If True, rebuild handlers even if already set up

    PCIRESOLVE_LOG_LEVEL overrides `level`; it accepts a number or a level
    name such as "DEBUG".
    """
    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        if env_level.isdigit():
            level = int(env_level)
        else:
            level = getattr(logging, env_level.upper(), level)

    root_logger = logging.getLogger()
    if getattr(root_logger, _CONFIGURED_ATTR, False) and not force:
        # Allow runtime level bumps without rebuilding handlers
        root_logger.setLevel(level)
        return

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    setattr(root_logger, _CONFIGURED_ATTR, True)
