"""
Utilities for the report output path.

The report of a source file is written next to it as ``<source>.md``. This
module derives that path, checks it before anything is written and logs
filesystem errors of the writing function. These tools are intended for
internal use in surveycorr.

Functions
---------
convert_filepath(path, default_filename)
    Ensure a given path always points to a file,
    appending a default filename if necessary.
report_path_for(source)
    Derive the Markdown report path (``<source>.md``) for a source file.
validate_path(path, overwrite_check=True)
    Check that a report file can be written at `path`.
enable_io_logs(logger)
    Decorator for I/O functions to log filesystem errors before they
    propagate.

Examples
--------
>>> from surveycorr._utils.io import report_path_for, validate_path
>>> path = report_path_for("survey.csv")
>>> path
PosixPath('survey.csv.md')
>>> validate_path(path, overwrite_check=False)
"""

import os
import logging
from pathlib import Path
from typing import Callable
import functools

logger = logging.getLogger(__name__)


def convert_filepath(path: str | Path, default_filename: str) -> Path:
    """
    Convert a given path into a full file path with a specified filename.

    If the input `path` has no suffix it is treated as a directory and
    `default_filename` is appended. Otherwise it is returned unchanged.

    Parameters
    ----------
    path : str or Path
        The input path, which can be either a directory or a file path.
    default_filename : str
        The filename to append if `path` is a directory (has no suffix).

    Returns
    -------
    Path
        A `Path` object pointing to a file.

    Examples
    --------
    >>> convert_filepath("output", "report.md")
    PosixPath('output/report.md')

    >>> convert_filepath("output/report.md", "ignored.md")
    PosixPath('output/report.md')
    """
    path_pl = Path(path)
    if path_pl.suffix == "":
        return path_pl / default_filename
    return path_pl


def report_path_for(source: str | Path) -> Path:
    """
    Return the report path for a source file: the source name with ``.md``
    appended (``survey.csv`` -> ``survey.csv.md``).
    """
    source_pl = Path(source)
    return source_pl.with_name(f"{source_pl.name}.md")


def validate_path(path: str | Path, overwrite_check: bool = True):
    """
    Check that a report file can be written at `path`.

    Nothing is created: the directory of the report must already exist,
    as it does for ``<source>.md`` next to a readable source.

    Parameters
    ----------
    path : str or Path
        Full path of the report file.
    overwrite_check : bool, default=True
        If True, raises a `FileExistsError` when the file already exists.

    Raises
    ------
    IsADirectoryError
        If `path` is an existing directory.
    FileExistsError
        If `overwrite_check` is True and the file already exists.
    FileNotFoundError
        If the directory of `path` does not exist.
    PermissionError
        If the file or its directory is not writable.
    """
    path_pl = Path(path)
    directory = path_pl.parent

    if path_pl.is_dir():
        raise IsADirectoryError(f"Path '{path}' is a directory.")
    if overwrite_check and path_pl.exists():
        raise FileExistsError(f"Path '{path}' already exists.")
    if not directory.is_dir():
        raise FileNotFoundError(f"Directory '{directory}' does not exist.")
    target = path_pl if path_pl.exists() else directory
    if not os.access(target, os.W_OK):
        raise PermissionError(f"No write permissions for path '{target}'")


def enable_io_logs(io_logger: logging.Logger = None) -> Callable:
    """
    Decorator factory for logging I/O errors with a specified logger.

    Wraps an I/O function to catch filesystem exceptions, log them at DEBUG
    level with the name of the failing function, and re-raise. Callers turn
    the exception into the diagnostic shown to the user.

    Parameters
    ----------
    io_logger : logging.Logger, optional
        Logger instance to emit messages through. Defaults to the logger of
        this module.

    Returns
    -------
    Callable
        A decorator to wrap I/O functions.

    Examples
    --------
    >>> import logging
    >>> logger = logging.getLogger("surveycorr.reports.renderers")
    >>> @enable_io_logs(logger)
    ... def _save_markdown(document, path):
    ...     with open(path, "w", encoding="utf-8") as f:
    ...         f.write(document)
    """
    if io_logger is None:
        io_logger = logger

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except PermissionError as e:
                io_logger.debug("Permission denied in %s: %s", fn.__name__, e)
                raise
            except FileExistsError as e:
                io_logger.debug("File already exists in %s: %s", fn.__name__, e)
                raise
            except OSError as e:
                io_logger.debug("IO error in %s: %s", fn.__name__, e)
                raise

        return wrapper

    return decorator
