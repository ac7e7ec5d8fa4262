"""
Renderers for surveycorr reports.

Functions
---------
render_markdown(data, path=None, display=None, **kwargs)
    Render a `Block` or `Report` object into a Markdown document.
render_block_markdown(block, display=None, heading_level=2)
    Render a single `Block` into a Markdown fragment.
"""

from .markdown import render_block_markdown, render_markdown

__all__ = ["render_markdown", "render_block_markdown"]
