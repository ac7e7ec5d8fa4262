"""
Field classification registry.

Maps dataset column names to a measurement :class:`~surveycorr.types.Scale`.
The scale decides which association statistic a column takes part in and
therefore which matrix it lands in. A registry is built once from the records
of a field descriptor and is read-only afterwards.

Classes
-------
FieldRegistry(fields, default_scale=Scale.ORDINAL)
    Immutable name -> Field lookup with scale grouping helpers.

Functions
---------
parse_field_records(records)
    Validate raw descriptor records and turn them into `Field` objects.

Notes
-----
- A descriptor entry naming a column that is absent from the dataset is a
  configuration error and raises `UnknownColumnError`.
- Dataset columns the descriptor does not mention resolve to
  `default_scale`; a warning lists them.

Examples
--------
>>> from surveycorr.interactions import FieldRegistry
>>> from surveycorr.types import Scale
>>> registry = FieldRegistry.from_records(
...     [{"name": "age", "scale": "ordinal"}, {"name": "region", "scale": "nominal"}],
...     columns=["age", "region", "income"],
... )
>>> registry.resolve("region")
<Scale.NOMINAL: 'nominal'>
>>> registry.group(["age", "region", "income"], Scale.ORDINAL)
['age', 'income']
"""

import logging
from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping, Sequence

from surveycorr._utils import read_config
from surveycorr.exceptions import DescriptorParseError, UnknownColumnError
from surveycorr.types import Field, Scale

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]
_warns = read_config("messages")["warns"]


def parse_field_records(records: Iterable[Mapping[str, Any] | Field]) -> list[Field]:
    """
    Turn raw descriptor records into `Field` objects.

    Parameters
    ----------
    records : Iterable[Mapping or Field]
        Each record is a mapping with a string ``name``, a ``scale`` of
        ``"nominal"`` or ``"ordinal"`` (case-insensitive) and an optional
        boolean ``factor``. `Field` instances are passed through.

    Returns
    -------
    list[Field]
        Parsed fields in record order.

    Raises
    ------
    DescriptorParseError
        If a record is malformed, names an unknown scale, or a name is
        declared twice.
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
        raise DescriptorParseError(
            _errors["descriptor_record_f"].format("list", type(records).__name__)
        )
    fields = []
    seen = set()
    for i, record in enumerate(records):
        if isinstance(record, Field):
            field = record
        else:
            field = _parse_record(i, record)
        if field.name in seen:
            raise DescriptorParseError(
                _errors["descriptor_duplicate_f"].format(field.name)
            )
        seen.add(field.name)
        fields.append(field)
    return fields


def _parse_record(index: int, record: Any) -> Field:
    if (
        not isinstance(record, Mapping)
        or not isinstance(record.get("name"), str)
        or "scale" not in record
    ):
        raise DescriptorParseError(
            _errors["descriptor_record_f"].format(index, repr(record))
        )
    try:
        scale = Scale.parse(record["scale"])
    except ValueError as e:
        raise DescriptorParseError(
            _errors["descriptor_scale_f"].format(
                record["scale"], record["name"], [s.value for s in Scale]
            )
        ) from e
    factor = record.get("factor", False)
    if not isinstance(factor, bool):
        raise DescriptorParseError(
            _errors["descriptor_record_f"].format(index, repr(record))
        )
    return Field(name=record["name"], scale=scale, factor=factor)


class FieldRegistry:
    """
    Read-only mapping from column names to measurement scales.

    Parameters
    ----------
    fields : Iterable[Field]
        Field records. Names must be unique.
    default_scale : Scale, default=Scale.ORDINAL
        Scale of columns that have no record.

    Attributes
    ----------
    fields : Mapping[str, Field]
        Read-only view of the records, keyed by name.
    default_scale : Scale
        Scale used for unclassified columns.

    Methods
    -------
    from_records(records, columns=None, default_scale=Scale.ORDINAL)
        Parse descriptor records and optionally check them against the
        dataset columns.
    check_columns(columns)
        Raise for records naming absent columns, warn for unclassified ones.
    resolve(name)
        Scale of one column.
    group(columns, scale)
        Columns of one scale, in the given order.
    factor_columns(columns)
        Columns designated for factor analysis, in the given order.
    """

    def __init__(self, fields: Iterable[Field], default_scale: Scale = Scale.ORDINAL):
        fields = parse_field_records(fields)
        self._fields = MappingProxyType({f.name: f for f in fields})
        self._default_scale = Scale.parse(default_scale)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any] | Field],
        columns: Sequence[Hashable] = None,
        default_scale: Scale = Scale.ORDINAL,
    ) -> "FieldRegistry":
        """
        Build a registry from raw descriptor records.

        Parameters
        ----------
        records : Iterable[Mapping or Field]
            Descriptor records, see :func:`parse_field_records`.
        columns : Sequence[Hashable], optional
            Dataset columns. If given, the records are checked against them
            with :meth:`check_columns`.
        default_scale : Scale, default=Scale.ORDINAL
            Scale of columns that have no record.

        Raises
        ------
        DescriptorParseError
            If the records are malformed.
        UnknownColumnError
            If `columns` is given and a record names a column not in it.
        """
        registry = cls(parse_field_records(records), default_scale=default_scale)
        if columns is not None:
            registry.check_columns(columns)
        return registry

    @property
    def fields(self) -> Mapping[str, Field]:
        return self._fields

    @property
    def default_scale(self) -> Scale:
        return self._default_scale

    def __contains__(self, name) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self):
        return iter(self._fields.values())

    def __repr__(self):
        return f"FieldRegistry({list(self._fields.values())!r})"

    def check_columns(self, columns: Sequence[Hashable]) -> None:
        """
        Check the records against dataset columns.

        Raises
        ------
        UnknownColumnError
            For the first record (in descriptor order) whose name is not in
            `columns`.

        Warns
        -----
        Logs a warning listing the columns without a record.
        """
        present = set(columns)
        for name in self._fields:
            if name not in present:
                raise UnknownColumnError(
                    name, _errors["unknown_descriptor_column_f"].format(name)
                )
        unclassified = [c for c in columns if c not in self._fields]
        if unclassified:
            logger.warning(
                _warns["unclassified_columns_f"].format(
                    unclassified, self._default_scale.value
                )
            )

    def resolve(self, name: Hashable) -> Scale:
        """Return the scale of `name`, or `default_scale` if it has no record."""
        field = self._fields.get(name)
        return field.scale if field is not None else self._default_scale

    def group(self, columns: Sequence[Hashable], scale: Scale) -> list:
        """
        Return the columns of `scale`, preserving the order of `columns`.

        Examples
        --------
        >>> registry = FieldRegistry([Field("b", Scale.NOMINAL)])
        >>> registry.group(["a", "b", "c"], Scale.ORDINAL)
        ['a', 'c']
        """
        scale = Scale.parse(scale)
        return [c for c in columns if self.resolve(c) == scale]

    def factor_columns(self, columns: Sequence[Hashable]) -> list:
        """Return the columns flagged ``factor``, preserving the order of `columns`."""
        return [
            c for c in columns if c in self._fields and self._fields[c].factor
        ]
