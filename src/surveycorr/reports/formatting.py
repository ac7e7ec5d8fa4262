"""
Significance-aware rendering of association cells.

Functions
---------
format_association(cell, emphasize=False, precision=5, significance_level=0.05)
    Render one matrix cell as display text.
format_matrix(matrix, emphasize=False, precision=5, significance_level=0.05)
    Render every cell of an association matrix.

Notes
-----
- Formatting never changes the stored numeric values; emphasis only affects
  the rendered text.
- Templates and the not-applicable marker are read from
  ``config/report.json``.

Examples
--------
>>> from surveycorr.types import AssociationResult, NOT_APPLICABLE
>>> format_association(AssociationResult(0.5, 0.01))
'r: 0.50000<br>p value: 0.01000'
>>> format_association(AssociationResult(0.5, 0.01), emphasize=True)
'**r: 0.50000<br>p value: 0.01000**'
>>> format_association(NOT_APPLICABLE)
'N/A'
"""

import numpy as np
import pandas as pd

from surveycorr._utils import read_config
from surveycorr.types import AssociationResult, NotApplicable

_cells = read_config("report")["cells"]


def format_association(
    cell: AssociationResult | NotApplicable,
    emphasize: bool = False,
    precision: int = 5,
    significance_level: float = 0.05,
) -> str:
    """
    Render one association cell as text.

    Parameters
    ----------
    cell : AssociationResult or NotApplicable
        The matrix cell.
    emphasize : bool, default=False
        Wrap the text in bold markers when the coefficient is positive and
        the significance is below `significance_level`.
    precision : int, default=5
        Decimal digits of both numbers.
    significance_level : float, default=0.05
        Threshold of the emphasis rule. The comparison is strict.

    Returns
    -------
    str
        The not-applicable marker, or
        ``"r: <coefficient><br>p value: <significance>"``.

    Raises
    ------
    TypeError
        If `cell` is neither an `AssociationResult` nor `NOT_APPLICABLE`.
    """
    if isinstance(cell, NotApplicable):
        return _cells["not_applicable"]
    if not isinstance(cell, AssociationResult):
        raise TypeError(
            f"Expected AssociationResult or NOT_APPLICABLE, got {type(cell).__name__}"
        )
    text = _cells["association_f"].format(
        coefficient=cell.coefficient,
        significance=cell.significance,
        precision=precision,
    )
    if emphasize and cell.is_significant(significance_level):
        text = _cells["emphasis_f"].format(text)
    return text


def format_matrix(
    matrix: pd.DataFrame,
    emphasize: bool = False,
    precision: int = 5,
    significance_level: float = 0.05,
) -> pd.DataFrame:
    """
    Render every cell of an association matrix.

    Returns
    -------
    pandas.DataFrame
        Frame of strings with the labels of `matrix`.
    """
    cells = matrix.to_numpy(dtype=object)
    rendered = np.empty(cells.shape, dtype=object)
    for (i, j), cell in np.ndenumerate(cells):
        rendered[i, j] = format_association(
            cell,
            emphasize=emphasize,
            precision=precision,
            significance_level=significance_level,
        )
    return pd.DataFrame(rendered, index=matrix.index, columns=matrix.columns)
