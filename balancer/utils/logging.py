"""
Centralized logging configuration.

Configures Python's standard logging once per process and hands out
loggers under the "balancer." namespace, so an embedding application can
filter or silence the scheduler separately from its own output.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

_CONFIGURED = False


def setup_logging(level: str = "INFO",
                  log_file: Optional[Path] = None,
                  verbose: bool = False
                  ) -> None:
    """
    Configure the global logging system for balancer.

    Safe to call multiple times - subsequent calls are ignored so handlers
    are never registered twice.

    :param level: Logging level name ("DEBUG", "INFO", ...). Case-insensitive.
    :param log_file: Optional file to log to in addition to stdout. The
                    parent directory is created if needed.
    :param verbose: If True, include logger name and line number in each
                   message.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if verbose:
        fmt = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
    else:
        fmt = "%(asctime)s | %(levelname)-8s | %(message)s"

    datefmt = "%Y-%m-%d %H:%M:%S"

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=fmt,
        datefmt=datefmt,
        handlers=handlers,
    )

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """
    Create a namespaced logger for balancer components.

    :param name: Component name, e.g. "engine" or "config". The
                "balancer." prefix is added automatically.
    :return: logging.Logger under the "balancer." namespace.
    """
    return logging.getLogger(f"balancer.{name}")
