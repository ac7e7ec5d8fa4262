"""
Atomic block presets for surveycorr reports.

Functions
---------
get_describe_block(data, percentiles=None, round_digits=5)
    Descriptive statistics of every column.
get_association_block(matrix, method=None, emphasize=False, ...)
    One rendered association matrix.
get_factors_block(data, columns, n_factors=2, rotation="varimax", ...)
    Factor loadings of designated columns.
"""

from .associations import get_association_block
from .describe import get_describe_block
from .factors import get_factors_block

__all__ = [
    "get_describe_block",
    "get_association_block",
    "get_factors_block",
]
