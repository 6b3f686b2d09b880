# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class InvalidPath(ValueError):
    """Raised for path strings that do not parse to at least one key."""
    pass


class TooDeep(RecursionError):
    """Raised when a tree nests deeper than the configured traversal limit."""
    pass


class ChangeFormatError(ValueError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for applications using pathtree.

    Sets the log level for all pathtree loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_pathtree_log_level(level, set_main=True):
    """Set a log level for pathtree loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('pathtree')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
