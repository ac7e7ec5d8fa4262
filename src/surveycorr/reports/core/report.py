"""
Report module of surveycorr reports.

Classes
-------
Report(blocks=None, title=None, description=None)
    Ordered container of blocks rendered as one document.

Examples
--------
>>> from surveycorr.reports import Block, BlockConfig, Report
>>> report = Report(blocks=[Block({"title": "Pearson"})], title="survey.csv")
>>> report += Block({"title": "Kendall"})
>>> [b.block_config.title for b in report]
['Pearson', 'Kendall']
"""

from copy import deepcopy

from ...types import DisplayConfig
from ..renderers import render_markdown
from .block import Block


class Report:
    """
    Aggregates report blocks into a single document.

    Parameters
    ----------
    blocks : list[Block], optional
        Initial blocks, in document order. They are deep-copied.
    title : str, optional
        Title of the report, rendered as the top-level heading.
    description : str, optional
        Short description rendered under the title.

    Methods
    -------
    render_markdown(path=None, display=None, **kwargs)
        Render the report to Markdown.
    insert_block(block, index)
        Insert a block at the specified index in the report.
    remove_block(index)
        Remove a block at the specified index.
    __iadd__(other)
        Add a Block or list of Blocks to the report in-place using `+=`.
    __len__()
        Return the number of blocks in the report.
    __iter__()
        Iterate over the blocks in the report.
    """

    def __init__(
        self,
        blocks: list[Block] = None,
        title: str = None,
        description: str = None,
    ):
        self.blocks = deepcopy(blocks or [])
        self.title = title
        self.description = description

    def __iadd__(self, other: Block | list[Block]):
        """
        Add a Block or a list of Blocks to the report in-place.

        Raises
        ------
        TypeError
            If `other` is neither a `Block` nor a list of `Block`.
        """
        if isinstance(other, Block):
            self.blocks.append(other)
        elif isinstance(other, list) and all(isinstance(b, Block) for b in other):
            self.blocks.extend(other)
        else:
            raise TypeError("Can only add a Block or a list of Blocks")
        return self

    def __len__(self):
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    @property
    def typename(self):
        """Return the class name ('Report')."""
        return self.__class__.__name__

    def insert_block(self, block: Block, index: int):
        """Insert `block` at `index` (``list.insert`` semantics)."""
        self.blocks.insert(index, block)

    def remove_block(self, index: int) -> Block:
        """
        Remove a block from the report at the specified index.

        Raises
        ------
        IndexError
            If the index is out of range.
        """
        try:
            return self.blocks.pop(index)
        except IndexError as e:
            raise IndexError(f"No block at index {index}") from e

    def render_markdown(
        self, path: str = None, display: DisplayConfig = None, **kwargs
    ) -> str:
        """
        Render the report to Markdown.

        Thin wrapper around
        :func:`surveycorr.reports.renderers.markdown.render_markdown`.
        """
        return render_markdown(self, path=path, display=display, **kwargs)
