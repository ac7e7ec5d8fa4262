"""
Descriptive statistics block preset.

Summarizes every dataset column with ``pandas.DataFrame.describe`` plus a
``null_count`` row. Statistics are computed on the raw cells coerced to
numbers; cells that are missing or do not parse count as nulls here and are
excluded from the moments. (The association matrices substitute ``0.0`` for
them instead.)

Functions
---------
get_describe_block(data, percentiles=None, round_digits=5)
    Build a Block with the descriptive statistics table.

Examples
--------
>>> import pandas as pd
>>> from surveycorr.reports.presets.blocks import get_describe_block
>>> block = get_describe_block(pd.DataFrame({"q1": [1, 2, None]}))
>>> block.block_config.tables[0].table.loc["null_count", "q1"]
1.0
"""

from typing import Any, Mapping, Sequence

import pandas as pd

from ...._utils import convert_dataframe, read_config
from ....types import TableResult
from ...core.block import Block, BlockConfig

_report = read_config("report")


def get_describe_block(
    data: pd.DataFrame | Mapping[str, Sequence[Any]],
    percentiles: Sequence[float] = None,
    round_digits: int = 5,
) -> Block:
    """
    Build a `Block` with descriptive statistics of every column.

    Parameters
    ----------
    data : pandas.DataFrame or Mapping[str, Sequence[Any]]
        Raw survey data.
    percentiles : Sequence[float], optional
        Percentiles to include, in (0, 1). Defaults to
        ``[0.05, 0.25, 0.5, 0.75, 0.95]``.
    round_digits : int, default=5
        Decimal places of the statistics.

    Returns
    -------
    Block
        Block titled "Descriptive statistics" with one table: statistics
        as rows (``count``, ``null_count``, ``mean``, ``std``, ``min``,
        percentiles, ``max``) and columns in dataset order.
    """
    df = convert_dataframe(data)
    percentiles = list(percentiles or _report["percentiles"])
    block = Block(BlockConfig(title=_report["titles"]["describe"]))
    block.add_metric("rows", int(df.shape[0]))
    block.add_metric("columns", int(df.shape[1]))
    if df.shape[1] == 0:
        return block

    numeric = df.apply(pd.to_numeric, errors="coerce").astype("float64")
    stats = numeric.describe(percentiles=percentiles)
    null_count = numeric.isna().sum().astype("float64").rename("null_count")
    stats = pd.concat(
        [stats.iloc[:1], null_count.to_frame().T, stats.iloc[1:]], axis=0
    )
    stats = stats.round(round_digits)
    block.add_table(
        TableResult(stats, render_extra={"index_label": "statistic"})
    )
    return block
