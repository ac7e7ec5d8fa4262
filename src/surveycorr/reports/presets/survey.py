"""
Survey report preset.

This module composes the survey report out of the atomic block presets. It
does not implement statistics itself: it builds the association matrices,
decides which sections apply and puts the blocks in document order.

Functions
---------
get_survey_blocks(data, registry=None, **kwargs)
    Build the blocks of a survey report.
get_survey_report(data, registry=None, title=None, **kwargs)
    Build the survey report.

Notes
-----
Document order is fixed:

1. Descriptive statistics.
2. Association matrices: "Pearson" then "Kendall" with a registry, or a
   single matrix of ``default_method`` without one.
3. Factor loadings, only with a registry that flags at least 2 columns
   with ``factor``.

Examples
--------
>>> from surveycorr.reports.presets import get_survey_report
>>> report = get_survey_report(df, title="survey.csv")
>>> [b.block_config.title for b in report]
['Descriptive statistics', 'Pearson']
"""

import logging
from typing import Sequence

import pandas as pd

from ..._utils import convert_dataframe, read_config
from ...interactions import (
    FieldRegistry,
    StatisticsBackend,
    corr_matrices,
    extract_columns,
)
from ..core.block import Block
from ..core.report import Report
from .blocks import get_association_block, get_describe_block, get_factors_block

logger = logging.getLogger(__name__)

_warns = read_config("messages")["warns"]


def get_survey_blocks(
    data: pd.DataFrame,
    registry: FieldRegistry = None,
    provider_kind: str = "in_process",
    default_method: str = "pearson",
    emphasize: bool = False,
    significance_level: float = 0.05,
    n_jobs: int = None,
    reuse_symmetric: bool = False,
    n_factors: int = 2,
    rotation: str = "varimax",
    percentiles: Sequence[float] = None,
    backend: StatisticsBackend = None,
) -> list[Block]:
    """
    Build the blocks of a survey report.

    Parameters
    ----------
    data : pandas.DataFrame
        Raw survey data.
    registry : FieldRegistry, optional
        Column classification. Enables the Pearson / Kendall split and the
        factor-loading section.
    provider_kind : {'in_process', 'delegated'}, default='in_process'
        Association provider strategy.
    default_method : {'pearson', 'kendall'}, default='pearson'
        Statistic of the single matrix built without a registry.
    emphasize : bool, default=False
        Bold cells with a positive coefficient below `significance_level`.
    significance_level : float, default=0.05
        Threshold of the emphasis rule.
    n_jobs : int, optional
        Worker threads for extraction and matrix cells.
    reuse_symmetric : bool, default=False
        Compute each unordered pair once.
    n_factors : int, default=2
        Requested number of factors.
    rotation : str or None, default='varimax'
        Factor rotation.
    percentiles : Sequence[float], optional
        Percentiles of the descriptive statistics.
    backend : StatisticsBackend, optional
        Backend for delegated statistics and factor analysis.

    Returns
    -------
    list[Block]
        Blocks in document order.

    Raises
    ------
    UnknownColumnError
        If the registry names a column the dataset does not have.
    CastError, ProviderError
        Propagated from the association engine.
    """
    df = convert_dataframe(data)
    columns = extract_columns(df, n_jobs=n_jobs)
    matrices = corr_matrices(
        columns,
        registry=registry,
        provider_kind=provider_kind,
        default_method=default_method,
        reuse_symmetric=reuse_symmetric,
        n_jobs=n_jobs,
        backend=backend,
        extracted=True,
    )

    blocks = [get_describe_block(df, percentiles=percentiles)]
    for method, matrix in matrices.items():
        blocks.append(
            get_association_block(
                matrix,
                method=method,
                emphasize=emphasize,
                significance_level=significance_level,
            )
        )

    if registry is not None:
        factor_columns = registry.factor_columns(list(df.columns))
        if len(factor_columns) >= 2:
            blocks.append(
                get_factors_block(
                    columns,
                    factor_columns,
                    n_factors=n_factors,
                    rotation=rotation,
                    backend=backend,
                    n_jobs=n_jobs,
                    extracted=True,
                )
            )
        elif factor_columns:
            logger.warning(
                _warns["too_few_factor_columns_f"].format(len(factor_columns))
            )
    return blocks


def get_survey_report(
    data: pd.DataFrame,
    registry: FieldRegistry = None,
    title: str = None,
    description: str = None,
    **kwargs,
) -> Report:
    """
    Build the survey report.

    Parameters
    ----------
    data : pandas.DataFrame
        Raw survey data.
    registry : FieldRegistry, optional
        Column classification.
    title : str, optional
        Report title, typically the source file name.
    description : str, optional
        Text rendered under the title.
    **kwargs
        Forwarded to :func:`get_survey_blocks`.

    Returns
    -------
    Report
    """
    blocks = get_survey_blocks(data, registry=registry, **kwargs)
    return Report(blocks, title=title, description=description)
