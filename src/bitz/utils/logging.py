# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import logging
import logging.handlers
import os
from typing import Optional, Union

from bitz.constants import DEFAULT_LOGGER_DIR

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _has_handler(logger: logging.Logger, kind: type, filename: Optional[str] = None) -> bool:
    for handler in logger.handlers:
        if type(handler) is not kind:
            continue
        if filename is None or getattr(handler, "baseFilename", None) == filename:
            return True
    return False


def build_logger(
    logger_name: str,
    logger_filename: Optional[str] = None,
    logger_dir: Optional[str] = None,
    level: Optional[Union[int, str]] = None,
    console: bool = False,
) -> logging.Logger:
    """
    Returns the named logger, attaching handlers on first use.

    Without a filename and without ``console`` the logger only gets a
    ``NullHandler``, so importing the library stays silent.

    :param logger_name: Name passed to ``logging.getLogger``.
    :param logger_filename: Optional log file name, rotated daily.
    :param logger_dir: Directory for ``logger_filename``.
    :param level: Optional level, as an int or a level name such as ``"DEBUG"``.
    :param console: Also log to stderr.
    """
    logger = logging.getLogger(logger_name)
    if level is not None:
        if isinstance(level, str):
            level = level.upper()
        logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if console and not _has_handler(logger, logging.StreamHandler):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if logger_filename:
        logger_dir = logger_dir or DEFAULT_LOGGER_DIR
        os.makedirs(logger_dir, exist_ok=True)
        filename = os.path.abspath(os.path.join(logger_dir, logger_filename))
        if not _has_handler(logger, logging.handlers.TimedRotatingFileHandler, filename):
            file_handler = logging.handlers.TimedRotatingFileHandler(
                filename, when="D", utc=True, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
