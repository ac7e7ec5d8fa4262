"""
surveycorr report presets.

This module aggregates preset functions for quickly building survey reports.
It exposes both atomic blocks and the report builder.

Functions
---------
get_survey_blocks(data, registry=None, **kwargs)
    Build the blocks of a survey report.
get_survey_report(data, registry=None, title=None, **kwargs)
    Build the survey report.
get_describe_block(data, percentiles=None, round_digits=5)
    Descriptive statistics of every column.
get_association_block(matrix, method=None, emphasize=False, ...)
    One rendered association matrix.
get_factors_block(data, columns, n_factors=2, rotation="varimax", ...)
    Factor loadings of designated columns.
"""

from .blocks import get_association_block, get_describe_block, get_factors_block
from .survey import get_survey_blocks, get_survey_report

__all__ = [
    "get_survey_blocks",
    "get_survey_report",
    "get_describe_block",
    "get_association_block",
    "get_factors_block",
]
