"""
Association matrix block preset.

Wraps one association matrix (see
:func:`surveycorr.interactions.corr_matrix`) into a report `Block`, with the
cells rendered by :func:`surveycorr.reports.formatting.format_matrix`.

Functions
---------
get_association_block(matrix, method=None, emphasize=False,
                      significance_level=0.05, precision=5)
    Build a Block holding one rendered association matrix.
"""

import pandas as pd

from ...._utils import read_config
from ....types import TableResult
from ...core.block import Block, BlockConfig
from ...formatting import format_matrix

_report = read_config("report")


def get_association_block(
    matrix: pd.DataFrame,
    method: str = None,
    emphasize: bool = False,
    significance_level: float = 0.05,
    precision: int = 5,
) -> Block:
    """
    Build a `Block` for one association matrix.

    Parameters
    ----------
    matrix : pandas.DataFrame
        Matrix of `AssociationResult` / `NOT_APPLICABLE` cells.
    method : {'pearson', 'kendall'}, optional
        Statistic of the matrix. Defaults to ``matrix.attrs["method"]``.
        Selects the block title ("Pearson" / "Kendall") and description.
    emphasize : bool, default=False
        Render cells with a positive coefficient and significance below
        `significance_level` in bold.
    significance_level : float, default=0.05
        Threshold of the emphasis rule.
    precision : int, default=5
        Decimal digits of rendered numbers.

    Returns
    -------
    Block
        Block with a ``columns`` metric and the rendered matrix table.

    Examples
    --------
    >>> block = get_association_block(matrices["pearson"], emphasize=True)
    >>> block.block_config.title
    'Pearson'
    """
    method = method or matrix.attrs.get("method", "pearson")
    description = _report["descriptions"][method]
    if emphasize:
        description += " " + _report["descriptions"]["emphasis_f"].format(
            significance_level
        )
    block = Block(
        BlockConfig(title=_report["titles"][method], description=description)
    )
    block.add_metric("columns", int(matrix.shape[0]))
    block.add_table(
        TableResult(
            format_matrix(
                matrix,
                emphasize=emphasize,
                precision=precision,
                significance_level=significance_level,
            )
        )
    )
    return block
