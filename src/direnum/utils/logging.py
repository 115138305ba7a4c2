"""Logging setup with console output and optional syslog integration.

Modules log through ``logging.getLogger(__name__)``. This module only
configures the root logger for the command-line entry point; library use
of direnum leaves logging configuration to the host application.
"""

import logging
import logging.handlers
import sys
from typing import Final

# Log format constants
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SYSLOG_LOG_FORMAT: Final[str] = "direnum[%(process)d]: %(levelname)s - %(name)s - %(message)s"

DEFAULT_SYSLOG_ADDRESS: Final[str] = "/dev/log"


def configure_logging(
    *,
    log_level: str = "WARNING",
    enable_syslog: bool = False,
    syslog_address: str = DEFAULT_SYSLOG_ADDRESS,
    enable_console: bool = True,
) -> None:
    """Configure root logging handlers.

    Existing root handlers are removed first so repeated calls do not
    duplicate output.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_syslog: Add a syslog handler on ``syslog_address``
        syslog_address: Syslog socket address
        enable_console: Add a stderr stream handler

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logging.getLogger("direnum").debug("Listing opened")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    if enable_syslog:
        try:
            syslog_handler = logging.handlers.SysLogHandler(
                address=syslog_address,
                facility=logging.handlers.SysLogHandler.LOG_USER,
            )
            syslog_handler.setFormatter(logging.Formatter(SYSLOG_LOG_FORMAT))
            root_logger.addHandler(syslog_handler)
        except OSError as exc:
            # Syslog not available (e.g. containers, macOS without /dev/log)
            print(
                f"Warning: Could not connect to syslog at {syslog_address}: {exc}",
                file=sys.stderr,
            )

    if enable_console:
        # stderr keeps log lines out of listing output on stdout
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        root_logger.addHandler(console_handler)
