"""
General-purpose helpers.

Miscellaneous utilities that do not yet have a dedicated home: logging
context helpers and the switch between verbose and debug log levels used
by the public entry points.

Methods
-------
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
log_context(logger, verbose, debug)
    Pick the logging context for a call from its `verbose` / `debug` flags.
"""

import logging
from contextlib import contextmanager, nullcontext


@contextmanager
def temp_log_level(logger, level):
    """
    Temporarily sets the logging level of a logger within a context.

    Parameters
    ----------
    logger : logging.Logger
        The logger whose level will be temporarily changed.
    level : int
        The logging level to set (e.g., logging.INFO, logging.DEBUG).

    Usage
    -----
    >>> import logging
    >>> logger = logging.getLogger("surveycorr")
    >>> with temp_log_level(logger, logging.INFO):
    ...     logger.info("This will be shown if logger level was lower before")

    Notes
    -----
    After exiting the context, the original log level is always restored,
    even if an exception occurs.
    """
    old_level = logger.level
    logger.setLevel(level)
    try:
        yield
    finally:
        logger.setLevel(old_level)


def log_context(logger, verbose: bool = False, debug: bool = False):
    """
    Return the logging context matching the `verbose` / `debug` flags.

    `debug` takes precedence over `verbose`. With neither flag set a
    ``nullcontext`` is returned and the logger level is left alone.
    """
    if debug:
        return temp_log_level(logger, level=logging.DEBUG)
    if verbose:
        return temp_log_level(logger, level=logging.INFO)
    return nullcontext()
