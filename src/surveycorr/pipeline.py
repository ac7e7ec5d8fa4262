"""
One-shot report pipeline.

Loads a CSV dataset and an optional field descriptor, builds the survey
report and writes it to ``<source>.md``. A single `AnalysisConfig` decides
between the one-matrix and the classification mode (``registry``) and
between in-process and delegated statistics (``provider``).

Classes
-------
AnalysisConfig
    Options of one report run.

Functions
---------
build_report(dataset, config=None, title=None)
    Build the `Report` of an in-memory dataset.
generate_report(source, descriptor=None, config=None, verbose=False, debug=False)
    Run the whole pipeline and write the Markdown document.

Notes
-----
- The document is rendered completely in memory before the output file is
  opened; any failure before that point leaves no file behind.
- All failures are fatal and surface as `SurveyCorrError` subclasses.

Examples
--------
>>> from surveycorr import AnalysisConfig, generate_report
>>> generate_report("survey.csv", "fields.json",
...                 config=AnalysisConfig(emphasize=True))
PosixPath('survey.csv.md')
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from surveycorr._utils import log_context, read_config, report_path_for
from surveycorr.exceptions import OutputWriteError
from surveycorr.interactions import FieldRegistry, StatisticsBackend
from surveycorr.interactions.providers import PROVIDER_KINDS, SCALE_METHODS
from surveycorr.loaders import load_dataset, load_field_descriptor
from surveycorr.reports import Report, render_markdown
from surveycorr.reports.presets import get_survey_report
from surveycorr.types import DisplayConfig, Scale

logger = logging.getLogger(__name__)
package_logger = logging.getLogger("surveycorr")

_errors = read_config("messages")["errors"]


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Options of one report run.

    Attributes
    ----------
    registry : FieldRegistry, optional
        Column classification. ``None`` selects the one-matrix mode.
    provider : {'in_process', 'delegated'}, default='in_process'
        Association provider strategy.
    default_method : {'pearson', 'kendall'}, default='pearson'
        Statistic of the single matrix built without a registry.
    default_scale : Scale, default=Scale.ORDINAL
        Scale of columns missing from the descriptor.
    emphasize : bool, default=False
        Bold cells with a positive coefficient and significance below
        `significance_level`.
    significance_level : float, default=0.05
        Threshold of the emphasis rule.
    n_jobs : int, optional
        Worker threads for extraction and matrix cells.
    reuse_symmetric : bool, default=False
        Compute each unordered pair once.
    n_factors : int, default=2
        Requested number of factors.
    rotation : str or None, default='varimax'
        Factor rotation.
    percentiles : Sequence[float], optional
        Percentiles of the descriptive statistics.
    display : DisplayConfig
        Table formatting switches of the renderer.
    backend : StatisticsBackend, optional
        Backend for delegated statistics and factor analysis.
    """

    registry: Optional[FieldRegistry] = None
    provider: str = "in_process"
    default_method: str = "pearson"
    default_scale: Scale = Scale.ORDINAL
    emphasize: bool = False
    significance_level: float = 0.05
    n_jobs: Optional[int] = None
    reuse_symmetric: bool = False
    n_factors: int = 2
    rotation: Optional[str] = "varimax"
    percentiles: Optional[Sequence[float]] = None
    display: DisplayConfig = field(default_factory=DisplayConfig)
    backend: Optional[StatisticsBackend] = None

    def __post_init__(self):
        if self.provider not in PROVIDER_KINDS:
            raise ValueError(
                _errors["unsupported_method_f"].format(
                    self.provider, list(PROVIDER_KINDS)
                )
            )
        methods = sorted(set(SCALE_METHODS.values()))
        if self.default_method not in methods:
            raise ValueError(
                _errors["unsupported_method_f"].format(self.default_method, methods)
            )
        if not 0 < self.significance_level < 1:
            raise ValueError(
                f"'significance_level' must be in (0, 1), got {self.significance_level}"
            )
        if self.n_jobs is not None and self.n_jobs < 1:
            raise ValueError(f"'n_jobs' must be a positive integer, got {self.n_jobs}")
        if self.n_factors < 1:
            raise ValueError(
                f"'n_factors' must be a positive integer, got {self.n_factors}"
            )


def build_report(
    dataset: pd.DataFrame, config: AnalysisConfig = None, title: str = None
) -> Report:
    """
    Build the survey report of an in-memory dataset.

    Parameters
    ----------
    dataset : pandas.DataFrame
        Raw survey data.
    config : AnalysisConfig, optional
        Run options. Defaults to ``AnalysisConfig()``.
    title : str, optional
        Report title.

    Returns
    -------
    Report

    Raises
    ------
    UnknownColumnError
        If the registry names a column the dataset does not have.
    CastError, ProviderError
        Propagated from the association engine.
    """
    config = config if config is not None else AnalysisConfig()
    return get_survey_report(
        dataset,
        registry=config.registry,
        title=title,
        provider_kind=config.provider,
        default_method=config.default_method,
        emphasize=config.emphasize,
        significance_level=config.significance_level,
        n_jobs=config.n_jobs,
        reuse_symmetric=config.reuse_symmetric,
        n_factors=config.n_factors,
        rotation=config.rotation,
        percentiles=config.percentiles,
        backend=config.backend,
    )


def generate_report(
    source: str | Path,
    descriptor: str | Path = None,
    config: AnalysisConfig = None,
    verbose: bool = False,
    debug: bool = False,
) -> Path:
    """
    Generate the Markdown report of a CSV survey dataset.

    Parameters
    ----------
    source : str or Path
        CSV dataset.
    descriptor : str or Path, optional
        JSON field descriptor. Selects the classification mode and replaces
        ``config.registry``.
    config : AnalysisConfig, optional
        Run options. Defaults to ``AnalysisConfig()``.
    verbose : bool, default=False
        Enables info-level logging of the ``surveycorr`` logger.
    debug : bool, default=False
        Enables debug-level logging. Takes precedence over `verbose`.

    Returns
    -------
    Path
        The written report, ``<source>.md``.

    Raises
    ------
    InputUnavailableError, SchemaInferenceError
        If the source cannot be read or parsed.
    InputUnavailableError, DescriptorParseError
        If the descriptor cannot be read or parsed.
    UnknownColumnError
        If the descriptor names a column the dataset does not have.
    CastError, ProviderError
        Propagated from the association engine.
    OutputWriteError
        If the report cannot be written.
    """
    config = config if config is not None else AnalysisConfig()
    with log_context(package_logger, verbose=verbose, debug=debug):
        dataset = load_dataset(source)
        if descriptor is not None:
            registry = FieldRegistry.from_records(
                load_field_descriptor(descriptor),
                default_scale=config.default_scale,
            )
            config = replace(config, registry=registry)
            logger.info("Classification mode: %d fields", len(registry))

        output = report_path_for(source)
        report = build_report(dataset, config=config, title=Path(source).name)
        try:
            render_markdown(
                report,
                path=output,
                display=config.display,
                report_name=output.stem,
            )
        except OSError as e:
            raise OutputWriteError(
                _errors["output_unwritable_f"].format(output, e)
            ) from e
        logger.info("Report written to '%s'", output)
    return output
