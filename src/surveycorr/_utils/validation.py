"""
Data validation and integrity checking utilities.

This module provides functions for validating flags, vector lengths and
column names across surveycorr.

Methods
-------
validate_string_flag(arg, supported_values, err_msg)
    Validate that a string flag is among a set of supported values.
validate_lengths_match(array1, array2, err_msg)
    Check that two one-dimensional sequences have the same length.
validate_unique_column_names(dataset, err_msg)
    Ensure that a ``pandas.DataFrame`` has unique column labels.
validate_columns_exist(dataset, columns, err_msg)
    Ensure that every name in `columns` is a column of `dataset`.

Examples
--------
>>> import surveycorr._utils as utils

>>> arg = "spearman"
>>> supported_methods = {"pearson", "kendall"}

>>> utils.validate_string_flag(arg,
...                            supported_values=supported_methods,
...                            err_msg=(f"Unsupported method '{arg}'. "
...                                     f"Choose from: {supported_methods}."))
ValueError: Unsupported method 'spearman'. Choose from: {'pearson', 'kendall'}.
"""

from typing import Iterable, Sequence

import pandas as pd

from surveycorr.exceptions import UnknownColumnError


def validate_string_flag(
    arg: str, supported_values: Iterable[str], err_msg: str
) -> None:
    """
    Validate a string flag against a set of supported values.

    Parameters
    ----------
    arg : str
        The string flag to validate.
    supported_values : Iterable[str]
        An iterable containing all supported flag values.
    err_msg : str
        The error message used in the raised ``ValueError`` if validation fails.

    Raises
    ------
    ValueError
        If `arg` is not found in `supported_values`.

    Examples
    --------
    >>> validate_string_flag(
        "pearson", {"pearson", "kendall"}, "Method 'pearson' not supported")
    >>> validate_string_flag(
        "spearman", {"pearson", "kendall"}, "Method 'spearman' not supported")
    Traceback (most recent call last):
        ...
    ValueError: Method 'spearman' not supported
    """
    if arg not in supported_values:
        raise ValueError(err_msg)


def validate_lengths_match(array1: Sequence, array2: Sequence, err_msg: str) -> None:
    """
    Validate that two one-dimensional sequences have the same length.

    Parameters
    ----------
    array1, array2 : Sequence
        Sequences to compare (lists, NumPy arrays, pandas Series).
    err_msg : str
        Error message used in the raised ``ValueError``.

    Raises
    ------
    ValueError
        If the lengths differ.
    """
    if len(array1) != len(array2):
        raise ValueError(err_msg)


def validate_unique_column_names(dataset: pd.DataFrame, err_msg: str) -> None:
    """
    Validate that a DataFrame has unique column names.

    Raises
    ------
    ValueError
        If `dataset` contains duplicated column labels.
    """
    if dataset.columns.duplicated().any():
        raise ValueError(err_msg)


def validate_columns_exist(
    dataset: pd.DataFrame, columns: Iterable[str], err_msg: str = None
) -> None:
    """
    Validate that every name in `columns` is a column of `dataset`.

    Parameters
    ----------
    dataset : pandas.DataFrame
        Dataset to look names up in.
    columns : Iterable[str]
        Names that must exist.
    err_msg : str, optional
        Message template with one ``{}`` placeholder for the missing name.

    Raises
    ------
    UnknownColumnError
        For the first name that is not a column of `dataset`.
    """
    for column in columns:
        if column not in dataset.columns:
            message = err_msg.format(column) if err_msg else None
            raise UnknownColumnError(column, message)
