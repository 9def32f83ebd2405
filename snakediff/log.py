# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


# Level names accepted by --log-level and the Global.log_level config
LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class DiffFormatError(ValueError):
    "Raised for malformed edit scripts and sequence diffs."
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for snakediff entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for the root logger to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def level_from_name(name):
    "Translate a level name from LOG_LEVELS to a logging level."
    if name not in LOG_LEVELS:
        raise ValueError('Unknown log level %r, expected one of %r' % (name, LOG_LEVELS))
    return getattr(logging, name)


def set_snakediff_log_level(level, set_main=True):
    """Set a log level for snakediff loggers

    If `set_main` is true, the root logger gets the same level.
    """
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('snakediff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
