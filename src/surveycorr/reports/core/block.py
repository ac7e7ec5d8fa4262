"""
Block module of surveycorr reports.

This module provides the `Block` class, the building unit of a surveycorr
report. A block is one document section: a title, a description, a list of
scalar metrics and a list of tables.

Classes
-------
Block(block_config=None)
    A container for a report section.
BlockConfig
    Dataclass for storing the content of a block: title, description,
    metrics and tables.

Notes
-----
- `Block` wraps a `BlockConfig` instance and normalizes all tables into
  `TableResult` objects for consistent rendering.
- `Block.render_markdown` is a thin wrapper around the Markdown renderer.

Examples
--------
>>> from surveycorr.reports import Block, BlockConfig
>>> block = Block(BlockConfig(
...     title="Example Block",
...     description="A minimal example of Block usage.",
...     metrics=[{"name": "rows", "value": 120}],
... ))
>>> block.add_table({"mean": [3.1, 4.2]}, title="Means")
>>> print(block.render_markdown())
## Example Block
...
"""

from typing import Any, Hashable, Mapping, Sequence
from dataclasses import dataclass, field

from ...types import DisplayConfig, TableResult
from ..utils import normalize_table
from ..renderers import render_markdown


@dataclass
class BlockConfig:
    """
    Content container for a single report block.

    Attributes
    ----------
    title : str
        The title of the block, rendered as a section heading.
    description : str
        Text rendered under the heading.
    metrics : list of dict
        Metric dictionaries with keys ``name``, ``value`` and optional
        ``description``.
    tables : list of array-like, mapping, DataFrame or TableResult
        Tables of the block. Raw inputs are normalized into `TableResult`
        when a `Block` is created; a `TableResult` keeps its own ``title``
        and ``description``.

    Notes
    -----
    - ``BlockConfig`` itself does not perform validation or normalization;
      this responsibility belongs to the `Block` class.
    """

    title: str = ""
    description: str = ""
    metrics: list[dict[str, Any]] = field(default_factory=list)
    tables: list[
        Sequence[Sequence[Any]] | Mapping[str, Sequence[Any]] | TableResult
    ] = field(default_factory=list)


class Block:
    """
    A container for a report block.

    Parameters
    ----------
    block_config : dict or BlockConfig, optional
        Configuration for the block.
        - If `dict` -> converted to `BlockConfig`.
        - If `BlockConfig` -> used as-is.
        - If `None` -> a new empty `BlockConfig` is created.

    Attributes
    ----------
    block_config : BlockConfig
        Content of the block with tables normalized to `TableResult`.

    Methods
    -------
    add_metric(name, value, description=None)
        Add a scalar metric to the block.
    remove_metric(index)
        Remove a metric from the block at a given index.
    add_table(table, title=None, description=None)
        Add a table to the block.
    insert_table(index, table, title=None, description=None)
        Insert a table into the block at a given position.
    remove_table(index)
        Remove and return a table from the block by index.
    render_markdown(path=None, display=None, **kwargs)
        Render the block to Markdown.
    typename : str
        The name of the class, always 'Block'.
    """

    def __init__(self, block_config=None):
        if block_config is None:
            self.block_config = BlockConfig()
        elif isinstance(block_config, dict):
            self.block_config = BlockConfig(**block_config)
        elif isinstance(block_config, BlockConfig):
            self.block_config = block_config
        else:
            raise ValueError("'block_config' must be a dict or dataclass")

        self.block_config.tables = [
            normalize_table(table) for table in self.block_config.tables or []
        ]
        self.block_config.metrics = list(self.block_config.metrics or [])

    @property
    def typename(self):
        """
        Return the class name.

        Examples
        --------
        >>> Block().typename
        'Block'
        """
        return self.__class__.__name__

    def add_metric(self, name: Hashable, value: Hashable, description: Hashable = None):
        """
        Add a scalar metric to the block.

        Parameters
        ----------
        name : Hashable
            Metric name. Must be hashable and renderable as text.
        value : Hashable
            Metric value.
        description : Hashable, optional
            Optional metric description.

        Raises
        ------
        TypeError
            If ``name``, ``description`` or ``value`` are not hashable.
        """
        metric = {"name": name, "value": value, "description": description}
        for key in ("name", "value", "description"):
            if metric[key] is not None and not isinstance(metric[key], Hashable):
                raise TypeError(
                    f"Expected `{key}` to be hashable, "
                    f"got {type(metric[key]).__name__}"
                )
        self.block_config.metrics.append(metric)

    def remove_metric(self, index: int) -> dict:
        """Remove and return the metric at `index`."""
        try:
            return self.block_config.metrics.pop(index)
        except IndexError as e:
            raise IndexError(f"No metric at index {index}") from e

    def add_table(
        self,
        table: Sequence[Any] | Mapping[str, Sequence] | TableResult,
        title: str = None,
        description: str = None,
    ):
        """
        Add a table to the block.

        The table is normalized into a :class:`TableResult`. If `title` or
        `description` are given they overwrite the ones of a `TableResult`.

        Examples
        --------
        >>> block.add_table(
        ...     {"mean": [1.2], "std": [0.3]},
        ...     title="Summary statistics"
        ... )
        """
        self.insert_table(len(self.block_config.tables), table, title, description)

    def insert_table(
        self,
        index: int,
        table: Sequence[Any] | Mapping[str, Sequence] | TableResult,
        title: str = None,
        description: str = None,
    ):
        """
        Insert a table into the block at a given position.

        Index handling follows standard Python ``list.insert`` semantics.
        """
        tr = normalize_table(table)
        if title is not None:
            tr.title = title
        if description is not None:
            tr.description = description
        self.block_config.tables.insert(index, tr)

    def remove_table(self, index: int) -> TableResult:
        """
        Remove and return a table from the block by index.

        Raises
        ------
        IndexError
            If no table exists at the given index.
        """
        try:
            return self.block_config.tables.pop(index)
        except IndexError as e:
            raise IndexError(f"No table at index {index}") from e

    def render_markdown(
        self, path: str = None, display: DisplayConfig = None, **kwargs
    ) -> str:
        """
        Render the block to Markdown.

        Thin wrapper around
        :func:`surveycorr.reports.renderers.markdown.render_markdown`; all
        parameters are forwarded unchanged.

        Returns
        -------
        str
            Rendered Markdown.
        """
        return render_markdown(self, path=path, display=display, **kwargs)
