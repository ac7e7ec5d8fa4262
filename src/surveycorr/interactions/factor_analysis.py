"""
Factor loadings for designated survey columns.

The numeric work is delegated to ``statsmodels`` through the shared
:class:`~surveycorr.interactions.backend.StatisticsBackend`; this module
extracts the columns unless they are already extracted, bounds the number
of factors and shapes the result into a loadings table keyed by the column
names passed in.

Functions
---------
factor_analyze(data, columns=None, n_factors=2, rotation="varimax", backend=None,
               n_jobs=None, extracted=False)
    Loadings, communality and uniqueness of each column.
"""

import logging
from typing import Hashable, Sequence

import pandas as pd

from surveycorr._utils import convert_dataframe, read_config, validate_columns_exist
from surveycorr.interactions.backend import StatisticsBackend, get_default_backend
from surveycorr.interactions.extraction import extract_columns

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]
_warns = read_config("messages")["warns"]


def factor_analyze(
    data: pd.DataFrame,
    columns: Sequence[Hashable] = None,
    n_factors: int = 2,
    rotation: str = "varimax",
    backend: StatisticsBackend = None,
    n_jobs: int = None,
    extracted: bool = False,
) -> pd.DataFrame:
    """
    Compute factor loadings with principal axis factoring.

    Parameters
    ----------
    data : pandas.DataFrame
        Raw survey data.
    columns : Sequence[Hashable], optional
        Columns to analyze. Defaults to all columns of `data`.
    n_factors : int, default=2
        Number of factors. With ``k`` columns at most ``k - 1`` factors are
        extracted; a larger request is clipped with a warning.
    rotation : str or None, default='varimax'
        Orthogonal or oblique rotation supported by statsmodels. Ignored
        when a single factor is extracted.
    backend : StatisticsBackend, optional
        Backend to use. Defaults to the shared process-wide backend.
    n_jobs : int, optional
        Worker threads for column extraction.
    extracted : bool, default=False
        If True, `data` already holds float64 columns from
        :func:`~surveycorr.interactions.extraction.extract_columns` and the
        selected columns are used as is.

    Returns
    -------
    pandas.DataFrame
        Indexed by the analyzed column names, with columns ``factor_1`` ...
        ``factor_m``, ``communality`` and ``uniqueness``.

    Raises
    ------
    ValueError
        If fewer than 2 columns are given or `n_factors` is not positive.
    UnknownColumnError
        If a name is not a column of `data`.
    ProviderError
        If statsmodels fails.

    Examples
    --------
    >>> loadings = factor_analyze(df, ["q1", "q2", "q3", "q4"], n_factors=2)
    >>> list(loadings.columns)
    ['factor_1', 'factor_2', 'communality', 'uniqueness']
    """
    data_df = convert_dataframe(data)
    names = list(data_df.columns) if columns is None else list(columns)
    if len(names) < 2:
        raise ValueError(f"Factor analysis needs at least 2 columns, got {len(names)}")
    if n_factors < 1:
        raise ValueError(f"'n_factors' must be a positive integer, got {n_factors}")
    if n_factors > len(names) - 1:
        logger.warning(
            _warns["n_factors_clipped_f"].format(
                n_factors, len(names), len(names) - 1
            )
        )
        n_factors = len(names) - 1

    if extracted:
        validate_columns_exist(data_df, names, err_msg=_errors["unknown_column_f"])
        frame = data_df[names].astype("float64")
    else:
        frame = extract_columns(data_df, names, n_jobs=n_jobs)
    backend = backend if backend is not None else get_default_backend()
    logger.info(
        "Running factor analysis: %d columns, %d factors, rotation=%s",
        len(names),
        n_factors,
        rotation,
    )
    results = backend.factor_analyze(frame, n_factors=n_factors, rotation=rotation)

    table = pd.DataFrame(
        results["loadings"],
        index=names,
        columns=[f"factor_{i + 1}" for i in range(n_factors)],
    )
    table["communality"] = results["communality"]
    table["uniqueness"] = results["uniqueness"]
    return table
