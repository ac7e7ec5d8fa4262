"""
Module provides tools for constructing pairwise association matrices over the
columns of a survey dataset. This module is intended to be used via the
`surveycorr.interactions` facade but can also be used directly.

A matrix is square and labeled by column name in dataset order. Every cell
off the diagonal holds the `AssociationResult` of its row and column; the
diagonal holds `NOT_APPLICABLE` and never reaches the provider.

Main class
----------
CorrelationMatrices
    A collection of static methods for building association matrices from
    numeric column frames and raw datasets.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

import numpy as np
import pandas as pd

from surveycorr._utils import (
    convert_dataframe,
    read_config,
    validate_string_flag,
    validate_unique_column_names,
)
from surveycorr.interactions.backend import StatisticsBackend
from surveycorr.interactions.classification import FieldRegistry
from surveycorr.interactions.extraction import extract_columns
from surveycorr.interactions.providers import (
    AssociationProvider,
    SCALE_METHODS,
    get_provider,
)
from surveycorr.types import NOT_APPLICABLE, Scale

logger = logging.getLogger(__name__)


class CorrelationMatrices:
    """
    A collection of static methods for building association matrices.

    Methods
    -------
    corr_matrix(columns, provider, reuse_symmetric=False, n_jobs=None)
        Build one square matrix over all columns of an extracted numeric frame.
    corr_matrices(dataset, registry=None, provider_kind="in_process",
                  default_method="pearson", ...)
        Extract the dataset and build one matrix per scale group, or a single
        matrix when no registry is given.

    Notes
    -----
    - All methods are static and can be called directly via the class without
      instantiation.
    - Duplicate column names raise a ValueError.
    """

    _errors = read_config("messages")["errors"]

    @staticmethod
    def corr_matrix(
        columns: pd.DataFrame,
        provider: AssociationProvider,
        reuse_symmetric: bool = False,
        n_jobs: int = None,
    ) -> pd.DataFrame:
        """
        Build a square association matrix over the columns of `columns`.

        Parameters
        ----------
        columns : pandas.DataFrame
            Extracted float64 columns, one per variable.
        provider : AssociationProvider
            Provider called for every pair of distinct columns.
        reuse_symmetric : bool, default=False
            If True and ``provider.symmetric`` is set, each unordered pair is
            computed once and mirrored across the diagonal. Otherwise both
            ``(x, y)`` and ``(y, x)`` are computed.
        n_jobs : int, optional
            Number of worker threads for cell computation. ``None`` or ``1``
            computes cells sequentially.

        Returns
        -------
        pandas.DataFrame
            Object frame with ``index == columns ==`` the column labels in
            input order. Diagonal cells are ``NOT_APPLICABLE``; the others
            are ``AssociationResult``. ``attrs["method"]`` names the
            statistic.

        Raises
        ------
        ValueError
            If column names are not unique.

        Examples
        --------
        >>> import pandas as pd
        >>> from surveycorr.interactions import corr_matrix, get_provider
        >>> df = pd.DataFrame({"a": [1., 2., 3., 4.], "b": [2., 1., 4., 3.]})
        >>> m = corr_matrix(df, get_provider("pearson"))
        >>> m.loc["a", "a"]
        NOT_APPLICABLE
        >>> round(m.loc["a", "b"].coefficient, 2)
        0.6
        """
        validate_unique_column_names(
            columns,
            CorrelationMatrices._errors["duplicate_column_names_f"].format("columns"),
        )
        labels = list(columns.columns)
        vectors = [columns[label].to_numpy(dtype=np.float64) for label in labels]
        k = len(labels)
        mirror = reuse_symmetric and provider.symmetric

        pairs = [
            (i, j)
            for i in range(k)
            for j in range(k)
            if i != j and (not mirror or i < j)
        ]

        def compute(pair):
            i, j = pair
            return provider.correlate(vectors[i], vectors[j])

        if n_jobs is None or n_jobs == 1 or len(pairs) <= 1:
            results = [compute(pair) for pair in pairs]
        else:
            with ThreadPoolExecutor(max_workers=n_jobs) as executor:
                results = list(executor.map(compute, pairs))

        cells = np.empty((k, k), dtype=object)
        for i in range(k):
            cells[i, i] = NOT_APPLICABLE
        for (i, j), result in zip(pairs, results):
            cells[i, j] = result
            if mirror:
                cells[j, i] = result

        logger.debug(
            "Built %dx%d %s matrix with %d provider calls",
            k,
            k,
            provider.method,
            len(pairs),
        )
        matrix = pd.DataFrame(cells, index=labels, columns=labels, dtype=object)
        matrix.attrs["method"] = provider.method
        return matrix

    @staticmethod
    def corr_matrices(
        dataset: pd.DataFrame | Sequence[Sequence],
        registry: FieldRegistry = None,
        provider_kind: str = "in_process",
        default_method: str = "pearson",
        reuse_symmetric: bool = False,
        n_jobs: int = None,
        backend: StatisticsBackend = None,
        extracted: bool = False,
    ) -> dict[str, pd.DataFrame]:
        """
        Build the association matrices of a dataset.

        Without a registry every column lands in one matrix computed with
        `default_method`. With a registry, ordinal columns form the Pearson
        matrix and nominal columns the Kendall matrix; both are always
        present, even when empty or 1x1.

        Parameters
        ----------
        dataset : pandas.DataFrame or Sequence[Sequence]
            Raw survey data. Cells are extracted with
            :func:`~surveycorr.interactions.extraction.extract_columns`.
        registry : FieldRegistry, optional
            Column classification. Enables the two-matrix mode.
        provider_kind : {'in_process', 'delegated'}, default='in_process'
            Provider strategy.
        default_method : {'pearson', 'kendall'}, default='pearson'
            Statistic of the single matrix built without a registry.
        reuse_symmetric : bool, default=False
            Forwarded to :meth:`corr_matrix`.
        n_jobs : int, optional
            Worker threads for extraction and cell computation.
        backend : StatisticsBackend, optional
            Backend used by delegated providers.
        extracted : bool, default=False
            If True, `dataset` is the float64 frame returned by
            :func:`~surveycorr.interactions.extraction.extract_columns` and
            is used without extracting it again.

        Returns
        -------
        dict[str, pandas.DataFrame]
            ``{"pearson": ..., "kendall": ...}`` with a registry,
            ``{default_method: ...}`` without.

        Raises
        ------
        ValueError
            If `default_method` or `provider_kind` is not supported, or
            column names are not unique.
        UnknownColumnError
            If the registry names a column the dataset does not have.
        CastError
            If a column cannot be cast to floating point.
        """
        dataset_df = convert_dataframe(dataset)
        validate_unique_column_names(
            dataset_df,
            CorrelationMatrices._errors["duplicate_column_names_f"].format("dataset"),
        )
        supported_methods = set(SCALE_METHODS.values())
        validate_string_flag(
            default_method,
            supported_methods,
            CorrelationMatrices._errors["unsupported_method_f"].format(
                default_method, sorted(supported_methods)
            ),
        )
        labels = list(dataset_df.columns)

        if registry is None:
            groups = {default_method: labels}
        else:
            registry.check_columns(labels)
            groups = {
                SCALE_METHODS[scale]: registry.group(labels, scale)
                for scale in (Scale.ORDINAL, Scale.NOMINAL)
            }

        if extracted:
            columns = dataset_df.astype("float64")
        else:
            columns = extract_columns(dataset_df, labels, n_jobs=n_jobs)
        matrices = {}
        for method, group in groups.items():
            logger.info("Computing %s matrix over %d columns", method, len(group))
            provider = get_provider(method, kind=provider_kind, backend=backend)
            matrices[method] = CorrelationMatrices.corr_matrix(
                columns[group],
                provider,
                reuse_symmetric=reuse_symmetric,
                n_jobs=n_jobs,
            )
        return matrices
