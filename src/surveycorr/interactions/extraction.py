"""
Column extraction for the association engine.

Turns named raw dataset columns into dense ``float64`` vectors. A cell that
is missing or does not parse as a number is replaced with ``0.0``; this
substitution is silent and never an error, but it does change the resulting
coefficients, so the number of substituted cells is logged.

Functions
---------
extract_column(dataset, name)
    Extract one named column as a float64 vector.
extract_columns(dataset, names=None, n_jobs=None)
    Extract several columns concurrently, preserving the requested order.

Examples
--------
>>> import pandas as pd
>>> from surveycorr.interactions import extract_column
>>> df = pd.DataFrame({"q1": ["1", "N/A", "3"]})
>>> extract_column(df, "q1")
array([1., 0., 3.])
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Hashable, Sequence

import numpy as np
import pandas as pd

from surveycorr._utils import (
    convert_float_vector,
    read_config,
    validate_columns_exist,
    validate_unique_column_names,
)
from surveycorr.exceptions import CastError

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]
_warns = read_config("messages")["warns"]


def extract_column(dataset: pd.DataFrame, name: Hashable) -> np.ndarray:
    """
    Extract a named dataset column as a float64 vector.

    Parameters
    ----------
    dataset : pandas.DataFrame
        Source dataset.
    name : Hashable
        Column name.

    Returns
    -------
    numpy.ndarray
        Vector of length ``len(dataset)``. Missing and non-numeric cells are
        ``0.0``.

    Raises
    ------
    UnknownColumnError
        If `name` is not a column of `dataset`.
    CastError
        If the column as a whole has no floating point representation
        (e.g. cells holding lists or complex numbers).
    """
    validate_columns_exist(dataset, [name], err_msg=_errors["unknown_column_f"])
    try:
        vector, substituted = convert_float_vector(dataset[name])
    except (TypeError, ValueError) as e:
        raise CastError(_errors["cast_failure_f"].format(name, e)) from e
    if substituted:
        logger.debug(
            _warns["substituted_cells_f"].format(name, substituted, len(vector))
        )
    return vector


def extract_columns(
    dataset: pd.DataFrame, names: Sequence[Hashable] = None, n_jobs: int = None
) -> pd.DataFrame:
    """
    Extract several columns concurrently.

    Every column is independent of the others, so extraction runs on a
    thread pool. Results are collected in the order of `names`, whatever the
    completion order of the workers.

    Parameters
    ----------
    dataset : pandas.DataFrame
        Source dataset. Column names must be unique.
    names : Sequence[Hashable], optional
        Columns to extract. Defaults to all columns in dataset order.
    n_jobs : int, optional
        Number of worker threads. ``None`` lets the executor decide,
        ``1`` extracts sequentially.

    Returns
    -------
    pandas.DataFrame
        float64 frame with the requested columns in the requested order and
        the index of `dataset`.

    Raises
    ------
    UnknownColumnError
        If any name is not a column of `dataset`. Checked before any work
        is scheduled.
    CastError
        If a column cannot be cast to floating point.
    """
    validate_unique_column_names(
        dataset, _errors["duplicate_column_names_f"].format("dataset")
    )
    names = list(dataset.columns) if names is None else list(names)
    validate_columns_exist(dataset, names, err_msg=_errors["unknown_column_f"])

    if n_jobs == 1 or len(names) <= 1:
        vectors = [extract_column(dataset, name) for name in names]
    else:
        with ThreadPoolExecutor(max_workers=n_jobs) as executor:
            vectors = list(executor.map(lambda n: extract_column(dataset, n), names))

    logger.debug("Extracted %d columns", len(names))
    return pd.DataFrame(
        {name: vector for name, vector in zip(names, vectors)},
        index=dataset.index,
        columns=names,
        dtype="float64",
    )
