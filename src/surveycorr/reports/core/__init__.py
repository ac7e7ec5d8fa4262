"""
Core (low-level) module for surveycorr reports.

Classes
-------
BlockConfig
    Dataclass for storing the content of a report block.
Block
    Report section initialized from a `BlockConfig`.
Report
    Ordered container of blocks rendered as one document.
"""

from .block import Block, BlockConfig
from .report import Report

__all__ = [
    "Block",
    "BlockConfig",
    "Report",
]
