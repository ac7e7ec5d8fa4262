"""
Internal utilities for surveycorr.

This module provides low-level utilities for data conversion, validation,
configuration reading and I/O safety. These are internal APIs and may change
without notice.

Methods
-------
convert_dataframe(data)
    Convert an input dataset to a pandas DataFrame.
convert_float_vector(values)
    Cast raw cells to a float64 vector, substituting ``0.0`` for failures.
validate_string_flag(arg, supported_values, err_msg)
    Validate a string flag against a set of supported values.
validate_lengths_match(array1, array2, err_msg)
    Validate that two sequences have matching lengths.
validate_unique_column_names(dataset, err_msg)
    Validate that a DataFrame has unique column names.
validate_columns_exist(dataset, columns, err_msg)
    Validate that names exist as columns of a DataFrame.
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
log_context(logger, verbose, debug)
    Pick the logging context matching `verbose` / `debug` flags.
read_config(name)
    Read and cache JSON configuration files.
convert_filepath(path, default_filename)
    Ensure a given path always points to a file.
report_path_for(source)
    Derive the ``<source>.md`` report path.
validate_path(path, overwrite_check=True)
    Check that a report file can be written at `path`.
enable_io_logs(logger)
    Decorator for I/O functions to log filesystem errors.

Notes
-----
- These utilities are for internal framework use only
- Use public APIs from main modules for stable functionality
"""

from .conversion import convert_dataframe, convert_float_vector
from .helpers import log_context, temp_log_level
from .readers import read_config
from .io import convert_filepath, enable_io_logs, report_path_for, validate_path
from .validation import (
    validate_columns_exist,
    validate_lengths_match,
    validate_string_flag,
    validate_unique_column_names,
)

__all__ = [
    "convert_dataframe",
    "convert_float_vector",
    "validate_string_flag",
    "validate_lengths_match",
    "validate_unique_column_names",
    "validate_columns_exist",
    "temp_log_level",
    "log_context",
    "read_config",
    "enable_io_logs",
    "validate_path",
    "convert_filepath",
    "report_path_for",
]
