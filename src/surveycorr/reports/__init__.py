"""
Facade for surveycorr reporting functionality.

This package provides a unified interface for constructing and rendering
survey reports. It exposes the building blocks (`Block`, `BlockConfig`,
`Report`), the cell formatter and the Markdown rendering entry points.

The reports module is designed around the concept of *blocks*: independent
report sections combining a title, a description, metrics and tables.
Blocks are aggregated into a `Report` and rendered as one document.

Classes
-------
Block(block_config)
    Core report building unit representing a single report section.
BlockConfig
    Configuration dataclass defining the content of a `Block`.
Report
    Container aggregating blocks into a single document.

Functions
---------
render_markdown(data, path=None, display=None, **kwargs)
    Render a `Block` or `Report` into Markdown, optionally saving it.
render_block_markdown(block, display=None, heading_level=2)
    Render a single `Block` into a Markdown fragment.
format_association(cell, emphasize=False, precision=5, significance_level=0.05)
    Render one association cell as text.
format_matrix(matrix, emphasize=False, precision=5, significance_level=0.05)
    Render every cell of an association matrix.
normalize_table(data)
    Normalize tabular data into a `TableResult`.
"""

from .core import Block, BlockConfig, Report
from .formatting import format_association, format_matrix
from .renderers import render_block_markdown, render_markdown
from .utils import normalize_table

__all__ = [
    "Block",
    "BlockConfig",
    "Report",
    "format_association",
    "format_matrix",
    "render_markdown",
    "render_block_markdown",
    "normalize_table",
]
