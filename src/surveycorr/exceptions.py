"""
Exception hierarchy of surveycorr.

Every failure that aborts a report run derives from `SurveyCorrError`, so
callers (the CLI in particular) can report it as a one-line diagnostic.
Programming errors, such as comparing vectors of different lengths, stay
plain `ValueError` / `TypeError`.

Classes
-------
SurveyCorrError
    Base class of all run-aborting errors.
InputUnavailableError
    Source file or field descriptor is missing or unreadable.
SchemaInferenceError
    The CSV source cannot be parsed into a consistent table.
DescriptorParseError
    The field descriptor is not valid JSON or does not follow its schema.
UnknownColumnError
    A column name does not exist in the dataset.
CastError
    A column cannot be cast to floating point at all.
ProviderError
    The statistics backend failed while computing a result.
OutputWriteError
    The report destination cannot be written.

Notes
-----
- A non-numeric cell is never an error: extraction replaces it with ``0.0``.
"""


class SurveyCorrError(Exception):
    """Base class for errors that abort a surveycorr run."""


class InputUnavailableError(SurveyCorrError):
    """Source file or field descriptor is missing or unreadable."""


class SchemaInferenceError(SurveyCorrError):
    """Tabular parsing cannot determine a consistent schema."""


class DescriptorParseError(SurveyCorrError):
    """Field descriptor is not valid per its schema."""


class UnknownColumnError(SurveyCorrError, LookupError):
    """
    A column name does not exist in the dataset.

    Parameters
    ----------
    column : str
        The name that failed to resolve.
    message : str, optional
        Full message; a generic one is built from `column` if omitted.
    """

    def __init__(self, column, message: str = None):
        self.column = column
        super().__init__(message or f"Column '{column}' does not exist in the dataset.")


class CastError(SurveyCorrError):
    """A column cannot be cast to floating point."""


class ProviderError(SurveyCorrError):
    """The statistics backend failed."""


class OutputWriteError(SurveyCorrError):
    """The report destination cannot be written."""
