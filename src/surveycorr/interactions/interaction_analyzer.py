"""
Module for analyzing associations between survey columns.

This module binds the public functions of the interactions subpackage to
short module-level names, so callers do not have to know which class or
module implements them.

Available functions
-------------------
extract_column(dataset, name)
    Extracts one raw column as a float64 vector (non-numeric cells -> 0.0).

extract_columns(dataset, names=None, n_jobs=None)
    Extracts several columns concurrently, preserving order.

corr_matrix(columns, provider, reuse_symmetric=False, n_jobs=None)
    Builds one square association matrix over extracted columns.

corr_matrices(dataset, registry=None, provider_kind="in_process", ...)
    Builds the Pearson / Kendall matrices of a dataset, or a single matrix
    when no classification is given.

factor_analyze(data, columns=None, n_factors=2, rotation="varimax")
    Computes factor loadings for designated columns.

get_provider(method, kind="in_process", backend=None)
    Builds an association provider.
"""

from surveycorr.interactions.correlation_matrices import CorrelationMatrices
from surveycorr.interactions.extraction import extract_column, extract_columns
from surveycorr.interactions.factor_analysis import factor_analyze
from surveycorr.interactions.providers import get_provider, method_for_scale

corr_matrix = CorrelationMatrices.corr_matrix
corr_matrices = CorrelationMatrices.corr_matrices

__all__ = [
    "extract_column",
    "extract_columns",
    "corr_matrix",
    "corr_matrices",
    "factor_analyze",
    "get_provider",
    "method_for_scale",
]
