"""
Loading of survey datasets and field descriptors.

CSV parsing and schema inference are delegated to ``pandas.read_csv``; the
field descriptor is a JSON array parsed with the standard ``json`` module.
Every failure is translated into the typed errors of
:mod:`surveycorr.exceptions` with the underlying message attached.

Functions
---------
load_dataset(path, **read_csv_kws)
    Read a CSV file into a DataFrame.
load_field_descriptor(path)
    Read a JSON field descriptor into a list of `Field` records.
load_registry(path, columns=None, default_scale=Scale.ORDINAL)
    Read a field descriptor into a `FieldRegistry`.

Examples
--------
>>> from surveycorr.loaders import load_dataset, load_registry
>>> dataset = load_dataset("survey.csv")
>>> registry = load_registry("fields.json", columns=dataset.columns)

The descriptor format::

    [
        {"name": "age", "scale": "ordinal"},
        {"name": "region", "scale": "nominal"},
        {"name": "q1", "scale": "ordinal", "factor": true}
    ]
"""

import json
import logging
from pathlib import Path
from typing import Hashable, Sequence

import pandas as pd

from surveycorr._utils import read_config
from surveycorr.exceptions import (
    DescriptorParseError,
    InputUnavailableError,
    SchemaInferenceError,
)
from surveycorr.interactions.classification import FieldRegistry, parse_field_records
from surveycorr.types import Field, Scale

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]


def load_dataset(path: str | Path, **read_csv_kws) -> pd.DataFrame:
    """
    Read a CSV survey dataset.

    Parameters
    ----------
    path : str or Path
        CSV file with a header row.
    **read_csv_kws
        Extra keyword arguments for ``pandas.read_csv``.

    Returns
    -------
    pandas.DataFrame
        The dataset with columns in file order.

    Raises
    ------
    InputUnavailableError
        If the file is missing or cannot be read.
    SchemaInferenceError
        If the file is empty, has no columns, is not valid text or rows do
        not fit the header.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("Source file '%s' not found", path)
        raise InputUnavailableError(
            _errors["source_unavailable_f"].format(path, "no such file")
        )
    try:
        dataset = pd.read_csv(path, **read_csv_kws)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        logger.debug("Unable to parse '%s': %s", path, e)
        raise SchemaInferenceError(
            _errors["source_unparseable_f"].format(path, e)
        ) from e
    except OSError as e:
        logger.debug("Unable to read '%s': %s", path, e)
        raise InputUnavailableError(
            _errors["source_unavailable_f"].format(path, e)
        ) from e
    if dataset.shape[1] == 0:
        raise SchemaInferenceError(_errors["source_empty_f"].format(path))
    logger.info("Loaded '%s': %d rows, %d columns", path, *dataset.shape)
    return dataset


def load_field_descriptor(path: str | Path) -> list[Field]:
    """
    Read a JSON field descriptor.

    Parameters
    ----------
    path : str or Path
        JSON file holding an array of ``{"name", "scale", "factor"?}``
        records.

    Returns
    -------
    list[Field]
        Records in file order.

    Raises
    ------
    InputUnavailableError
        If the file is missing or cannot be read.
    DescriptorParseError
        If the file is not valid JSON or does not follow the record schema.
        The parser's message is part of the error.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        logger.debug("Invalid JSON in '%s': %s", path, e)
        raise DescriptorParseError(
            _errors["descriptor_unparseable_f"].format(path, e)
        ) from e
    except UnicodeDecodeError as e:
        raise DescriptorParseError(
            _errors["descriptor_unparseable_f"].format(path, e)
        ) from e
    except OSError as e:
        logger.debug("Unable to read '%s': %s", path, e)
        raise InputUnavailableError(
            _errors["descriptor_unavailable_f"].format(path, e)
        ) from e
    if not isinstance(records, list):
        raise DescriptorParseError(
            _errors["descriptor_unparseable_f"].format(
                path, f"expected a JSON array, got {type(records).__name__}"
            )
        )
    return parse_field_records(records)


def load_registry(
    path: str | Path,
    columns: Sequence[Hashable] = None,
    default_scale: Scale = Scale.ORDINAL,
) -> FieldRegistry:
    """
    Read a field descriptor into a `FieldRegistry`.

    If `columns` is given, the records are checked against them and a record
    naming an absent column raises `UnknownColumnError`.
    """
    return FieldRegistry.from_records(
        load_field_descriptor(path), columns=columns, default_scale=default_scale
    )
