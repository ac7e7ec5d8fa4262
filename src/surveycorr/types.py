"""
Type utilities and containers used throughout surveycorr.

This module defines the shared value types of the correlation engine and the
report layer. They are plain, immutable where possible, and safe for direct
user interaction.

Classes
-------
Scale
    Measurement scale of a survey column: ``NOMINAL`` or ``ORDINAL``.
Field
    One record of a field descriptor: column name, scale and whether the
    column takes part in factor analysis.
AssociationResult
    Coefficient and two-sided significance of one column pair.
NotApplicable
    Type of the ``NOT_APPLICABLE`` sentinel used for self-pairs.
TableResult
    Standardized container for tabular results in reports.
DisplayConfig
    Formatting switches for rendered tables.

Notes
-----
- ``NOT_APPLICABLE`` is a singleton; compare with ``is``.
- Matrices built by :mod:`surveycorr.interactions` hold
  ``AssociationResult`` or ``NOT_APPLICABLE`` cells.

Examples
--------
>>> from surveycorr.types import Scale, AssociationResult, NOT_APPLICABLE
>>> Scale.parse("Ordinal")
<Scale.ORDINAL: 'ordinal'>
>>> AssociationResult(0.5, 0.01).is_significant()
True
>>> NOT_APPLICABLE
NOT_APPLICABLE
"""

import math
from enum import Enum
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

import pandas as pd


class Scale(str, Enum):
    """
    Measurement scale of a survey column.

    The scale decides which association statistic applies:
    ``ORDINAL`` columns are compared with Pearson's r,
    ``NOMINAL`` columns with Kendall's tau.
    """

    NOMINAL = "nominal"
    ORDINAL = "ordinal"

    @classmethod
    def parse(cls, value) -> "Scale":
        """
        Parse a scale from its name, case-insensitively.

        Raises
        ------
        ValueError
            If `value` names no scale.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown scale {value!r}. Choose from: {[s.value for s in cls]}."
        )


@dataclass(frozen=True)
class Field:
    """
    One field descriptor record.

    Attributes
    ----------
    name : str
        Column name; must exist in the dataset.
    scale : Scale
        Measurement scale of the column.
    factor : bool, default=False
        Whether the column is included in the factor-loading section.
    """

    name: str
    scale: Scale
    factor: bool = False


@dataclass(frozen=True)
class AssociationResult:
    """
    Association between two distinct columns.

    Attributes
    ----------
    coefficient : float
        Correlation coefficient in [-1, 1], or NaN when undefined.
    significance : float
        Two-sided p value in [0, 1], or NaN when undefined.
    """

    coefficient: float
    significance: float

    @property
    def is_defined(self) -> bool:
        """False when the statistic could not be computed (NaN)."""
        return not (math.isnan(self.coefficient) or math.isnan(self.significance))

    def is_significant(self, level: float = 0.05) -> bool:
        """True for a positive coefficient with significance below `level`."""
        return self.is_defined and self.coefficient > 0 and self.significance < level


class NotApplicable:
    """Marker type for the diagonal of an association matrix."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NOT_APPLICABLE"

    def __reduce__(self):
        return (NotApplicable, ())


NOT_APPLICABLE = NotApplicable()


@dataclass
class TableResult:
    """
    Standardized container for tabular results in surveycorr reports.

    Parameters
    ----------
    table : pandas.DataFrame
        Tabular data with a flat structure: no MultiIndex on rows or columns.
    title : str, optional
        Short human-readable title describing the table contents.
    description : str, optional
        Longer description providing context for the table.
    render_extra : dict, optional
        Optional dictionary controlling rendering behavior for this table.
        Keys may include:
        - ``show_index`` : bool, default True - whether to display the row index.
        - ``index_label`` : str, default "" - header of the index column.

    Examples
    --------
    >>> import pandas as pd
    >>> from surveycorr.types import TableResult
    >>> table = TableResult(
    ...     table=pd.DataFrame({"mean": [3.2, 4.1]}, index=["q1", "q2"]),
    ...     title="Item means",
    ... )
    """

    table: pd.DataFrame
    title: Optional[str] = None
    description: Optional[str] = None
    render_extra: Optional[dict] = field(default_factory=dict)


@dataclass(frozen=True)
class DisplayConfig:
    """
    Formatting switches for tables in rendered reports.

    The configuration is passed explicitly to the renderer; nothing is read
    from or written to process-wide state.

    Attributes
    ----------
    max_rows : int, default=65535
        Maximum number of table rows rendered; the rest is replaced with a
        single ellipsis row.
    max_cols : int, default=65535
        Maximum number of table columns rendered (index excluded); the rest
        is replaced with a single ellipsis column.
    string_length_limit : int, default=65535
        Cell text longer than this is cut and suffixed with an ellipsis.
    table_style : str, default="pipe"
        ``tabulate`` table format used for Markdown tables
        (``"pipe"`` or ``"github"``).
    hide_types : bool, default=True
        If False, column headers carry the column dtype.
    hide_shape_info : bool, default=True
        If False, each table is preceded by a ``shape: (rows, cols)`` line.
    """

    max_rows: int = 65535
    max_cols: int = 65535
    string_length_limit: int = 65535
    table_style: str = "pipe"
    hide_types: bool = True
    hide_shape_info: bool = True

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "DisplayConfig":
        """
        Build a configuration from a mapping, ignoring ``None`` values.

        Raises
        ------
        TypeError
            If `options` contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise TypeError(f"Unknown display options: {sorted(unknown)}")
        return cls(**{k: v for k, v in options.items() if v is not None})
