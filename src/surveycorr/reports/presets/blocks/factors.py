"""
Factor loadings block preset.

Functions
---------
get_factors_block(data, columns, n_factors=2, rotation="varimax",
                  round_digits=5, backend=None, n_jobs=None, extracted=False)
    Build a Block with the factor loadings of designated columns.
"""

from typing import Hashable, Sequence

import pandas as pd

from ...._utils import read_config
from ....interactions import StatisticsBackend, factor_analyze
from ....types import TableResult
from ...core.block import Block, BlockConfig

_report = read_config("report")


def get_factors_block(
    data: pd.DataFrame,
    columns: Sequence[Hashable],
    n_factors: int = 2,
    rotation: str = "varimax",
    round_digits: int = 5,
    backend: StatisticsBackend = None,
    n_jobs: int = None,
    extracted: bool = False,
) -> Block:
    """
    Build a `Block` with factor loadings.

    Parameters
    ----------
    data : pandas.DataFrame
        Raw survey data.
    columns : Sequence[Hashable]
        Designated columns, at least 2.
    n_factors : int, default=2
        Requested number of factors (clipped to ``len(columns) - 1``).
    rotation : str or None, default='varimax'
        Rotation method.
    round_digits : int, default=5
        Decimal places of the table.
    backend : StatisticsBackend, optional
        Backend running statsmodels.
    n_jobs : int, optional
        Worker threads for column extraction.
    extracted : bool, default=False
        If True, `data` already holds the extracted float64 columns.

    Returns
    -------
    Block
        Block titled "Factor loadings" with one row per designated column.

    Raises
    ------
    ProviderError
        If factor analysis fails.
    """
    loadings = factor_analyze(
        data,
        columns,
        n_factors=n_factors,
        rotation=rotation,
        backend=backend,
        n_jobs=n_jobs,
        extracted=extracted,
    )
    n_fitted = loadings.shape[1] - 2
    block = Block(
        BlockConfig(
            title=_report["titles"]["factors"],
            description=_report["descriptions"]["factors_f"].format(
                rotation if rotation and n_fitted > 1 else "no"
            ),
        )
    )
    block.add_metric("factors", int(n_fitted))
    block.add_table(
        TableResult(
            loadings.round(round_digits), render_extra={"index_label": "column"}
        )
    )
    return block
