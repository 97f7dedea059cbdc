#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging setup for juldate.

The library itself only emits records. Applications that want to see them
call setup_logger() once.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from juldate.config import log_level, log_format, log_datefmt

ROOT = "juldate"


def setup_logger(
    name: str = ROOT,
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return a logger.

    Parameters
    ----------
    name : str
        Logger name.
    level : int or str, optional
        Logging level. Defaults to the configured level.
    log_file : Path, optional
        Also log to this file.

    Returns
    -------
    logging.Logger
        The configured logger. Calling again returns it unchanged.
    """
    log = logging.getLogger(name)
    if any(not isinstance(h, logging.NullHandler) for h in log.handlers):
        return log

    log.setLevel(log_level if level is None else level)
    fmt = logging.Formatter(log_format, datefmt=log_datefmt)

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log


def get_logger(name: str = ROOT) -> logging.Logger:
    """Return a logger in the juldate hierarchy."""
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)


logging.getLogger(ROOT).addHandler(logging.NullHandler())
