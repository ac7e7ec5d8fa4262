"""
surveycorr: association matrices and Markdown reports for survey datasets.

Features include:
- Numeric extraction of raw survey columns
- Nominal / Ordinal field classification from a JSON descriptor
- Pearson and Kendall association matrices with significance
- Factor loadings for designated columns
- Markdown report rendering
"""
import logging

from .types import AssociationResult, DisplayConfig, Field, NOT_APPLICABLE, Scale
from .pipeline import AnalysisConfig, build_report, generate_report

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "AssociationResult",
    "DisplayConfig",
    "Field",
    "NOT_APPLICABLE",
    "Scale",
    "build_report",
    "generate_report",
]

logger = logging.getLogger("surveycorr")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
