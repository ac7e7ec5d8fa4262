"""
Conversion utilities for data transformation and standardization.

This module provides low-level conversion functions used across the
framework: building DataFrames from heterogeneous tabular inputs and casting
raw survey cells to dense floating point vectors.

Methods
-------
convert_dataframe(data)
    Convert an input data to a pandas DataFrame.
convert_float_vector(values)
    Cast a sequence of raw cells to a float64 NumPy array, replacing
    missing or non-numeric cells with ``0.0``.

Notes
-----
- All conversion functions return copies of data rather than modifying in-place

Examples
--------
>>> from surveycorr._utils import convert_float_vector

>>> vector, substituted = convert_float_vector(["1", "2.5", "N/A", None])
>>> vector
array([1. , 2.5, 0. , 0. ])
>>> substituted
2
"""

from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

MISSING_SENTINEL = 0.0


def convert_dataframe(data: Sequence[Sequence] | Mapping) -> pd.DataFrame:
    """
    Convert an input data to a pandas DataFrame.

    If the input is a pandas DataFrame, a copy is returned. A mapping is
    interpreted as ``{column_name: values}``. Any other sequence of sequences
    is interpreted column-wise: each nested sequence becomes one column.

    Parameters
    ----------
    data : Sequence[Sequence] or Mapping or pandas.DataFrame
        The data to convert.

    Returns
    -------
    pandas.DataFrame
        Converted data.

    Examples
    --------
    >>> convert_dataframe([[1, 0, 1], [9, 1, 2]])
       0  1
    0  1  9
    1  0  1
    2  1  2
    """
    if data is None:
        return pd.DataFrame()
    if isinstance(data, pd.DataFrame):
        return data.copy()
    if isinstance(data, pd.Series):
        return data.to_frame()
    if isinstance(data, Mapping):
        return pd.DataFrame(dict(data))
    return pd.DataFrame({i: list(column) for i, column in enumerate(data)})


def convert_float_vector(values: Sequence[Any] | pd.Series) -> tuple[np.ndarray, int]:
    """
    Cast raw cells to a float64 vector, substituting ``0.0`` for failures.

    Parameters
    ----------
    values : Sequence or pandas.Series
        Raw cells. Numbers, numeric strings and booleans are cast; missing
        values and strings that do not parse are replaced with ``0.0``.

    Returns
    -------
    tuple[numpy.ndarray, int]
        The float64 vector (same length as `values`) and the number of cells
        that were substituted.

    Raises
    ------
    TypeError
        If a cell holds an object pandas cannot interpret as a scalar
        (e.g. a list).
    ValueError
        If the cast to float64 is impossible for the column as a whole
        (e.g. complex numbers).

    Notes
    -----
    - Substitution is silent by design of the extraction contract; the count
      is returned so callers can log it.
    - Infinite values are kept as they are.
    """
    series = values if isinstance(values, pd.Series) else pd.Series(list(values))
    if pd.api.types.is_bool_dtype(series):
        series = series.map({True: 1.0, False: 0.0})
    numeric = pd.to_numeric(series, errors="coerce")
    if pd.api.types.is_complex_dtype(numeric):
        raise ValueError("complex values have no floating point representation")
    numeric = numeric.astype("float64")
    missing = numeric.isna()
    vector = numeric.fillna(MISSING_SENTINEL).to_numpy(dtype=np.float64, copy=True)
    return vector, int(missing.sum())
