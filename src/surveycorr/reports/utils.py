"""
Utility helpers for surveycorr reports.

Functions
---------
normalize_table(data)
    Normalize tabular data into a standardized `TableResult` object.

Examples
--------
>>> from surveycorr.reports.utils import normalize_table
>>> normalize_table({"a": [1, 2]}).table.shape
(2, 1)
"""

from typing import Any, Mapping, Sequence

import pandas as pd

from .._utils import convert_dataframe
from ..types import TableResult


def normalize_table(
    data: (
        Sequence[float]
        | Sequence[Sequence[float]]
        | Mapping[str, Sequence[Any]]
        | TableResult
    ),
) -> TableResult:
    """
    Normalize tabular data into a standardized TableResult object.

    This function converts input data of various formats (sequences of
    columns, mappings, DataFrames or `TableResult`) into a `TableResult`
    instance containing a pandas DataFrame. This ensures consistent handling
    of tabular results across surveycorr reports.

    Parameters
    ----------
    data : Sequence, Mapping, pandas.DataFrame or TableResult
        Tabular data to normalize. `TableResult` instances are returned
        unchanged. MultiIndex rows or columns are not supported.

    Returns
    -------
    TableResult
        A standardized container wrapping a pandas DataFrame.

    Raises
    ------
    ValueError
        If the input DataFrame has a MultiIndex in rows or columns.

    Examples
    --------
    >>> data = {"col1": [1, 2, 3], "col2": [4, 5, 6]}
    >>> table_result = normalize_table(data)
    >>> isinstance(table_result, TableResult)
    True
    >>> table_result.table.shape
    (3, 2)
    """
    if isinstance(data, TableResult):
        return data
    df = convert_dataframe(data)
    if isinstance(df.index, pd.MultiIndex):
        raise ValueError("MultiIndex in rows is not supported in normalize_table.")
    if isinstance(df.columns, pd.MultiIndex):
        raise ValueError("MultiIndex in columns is not supported in normalize_table.")

    return TableResult(table=df)
