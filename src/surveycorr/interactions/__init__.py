"""
Facade for survey association analysis.

This subpackage provides top-level access to the association engine:
column extraction, field classification, association providers, matrix
construction and factor analysis.

Functions available at the top level include:
- extract_column, extract_columns: raw cells -> float64 vectors
- corr_matrix, corr_matrices: pairwise association matrices
- factor_analyze: factor loadings of designated columns
- get_provider, method_for_scale: provider selection
"""

from .backend import StatisticsBackend, get_default_backend
from .classification import FieldRegistry, parse_field_records
from .interaction_analyzer import (
    corr_matrices,
    corr_matrix,
    extract_column,
    extract_columns,
    factor_analyze,
    get_provider,
    method_for_scale,
)
from .providers import (
    AssociationProvider,
    DelegatedProvider,
    InProcessKendall,
    InProcessPearson,
)

__all__ = [
    "extract_column",
    "extract_columns",
    "corr_matrix",
    "corr_matrices",
    "factor_analyze",
    "get_provider",
    "method_for_scale",
    "FieldRegistry",
    "parse_field_records",
    "StatisticsBackend",
    "get_default_backend",
    "AssociationProvider",
    "InProcessPearson",
    "InProcessKendall",
    "DelegatedProvider",
]
