"""
Command-line interface of surveycorr.

Usage::

    surveycorr SOURCE [DESCRIPTOR] [OPTIONS]

With only SOURCE every column lands in one matrix, Pearson unless
``--method kendall`` is given. A DESCRIPTOR (JSON field descriptor)
switches to classification mode: ordinal columns form the Pearson matrix,
nominal columns the Kendall matrix, and columns flagged ``factor`` get a
factor-loading section.

The report is written to ``SOURCE.md``. The process exits with ``0`` on
success and ``1`` on any failure, including a missing argument, with a
one-line diagnostic on stderr.
"""

import logging

import click

from surveycorr import __version__
from surveycorr.exceptions import SurveyCorrError
from surveycorr.pipeline import AnalysisConfig, generate_report
from surveycorr.types import DisplayConfig

logger = logging.getLogger(__name__)

ROTATIONS = ["varimax", "quartimax", "equamax", "oblimin", "promax", "none"]


class SurveyCommand(click.Command):
    """Command whose usage errors exit with status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.command(cls=SurveyCommand)
@click.version_option(version=__version__, prog_name="surveycorr")
@click.argument("source", type=click.Path(dir_okay=False))
@click.argument("descriptor", type=click.Path(dir_okay=False), required=False)
@click.option(
    "--method",
    "default_method",
    type=click.Choice(["pearson", "kendall"]),
    default="pearson",
    show_default=True,
    help="Statistic of the single matrix built without a DESCRIPTOR.",
)
@click.option(
    "--provider",
    type=click.Choice(["in_process", "delegated"]),
    default="in_process",
    show_default=True,
    help="Compute statistics in-process or delegate them to scipy.",
)
@click.option(
    "--emphasize/--plain",
    default=False,
    help="Bold cells with r > 0 and p below the significance level.",
)
@click.option(
    "--alpha",
    type=click.FloatRange(0, 1, min_open=True, max_open=True),
    default=0.05,
    show_default=True,
    help="Significance level of the emphasis rule.",
)
@click.option(
    "--factors",
    "n_factors",
    type=click.IntRange(min=1),
    default=2,
    show_default=True,
    help="Number of factors for the factor-loading section.",
)
@click.option(
    "--rotation",
    type=click.Choice(ROTATIONS),
    default="varimax",
    show_default=True,
    help="Factor rotation ('none' disables it).",
)
@click.option(
    "--jobs",
    "n_jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Worker threads for extraction and matrix cells.",
)
@click.option(
    "--symmetric",
    is_flag=True,
    help="Compute each unordered column pair once.",
)
@click.option(
    "--table-style",
    type=click.Choice(["pipe", "github"]),
    default="pipe",
    show_default=True,
    help="Markdown table format.",
)
@click.option("--max-rows", type=click.IntRange(min=1), default=None)
@click.option("--max-cols", type=click.IntRange(min=1), default=None)
@click.option("--show-types", is_flag=True, help="Show column dtypes in headers.")
@click.option("--show-shape", is_flag=True, help="Show table shapes.")
@click.option("--verbose", "-v", is_flag=True, help="Info-level logging.")
@click.option("--debug", is_flag=True, help="Debug-level logging.")
def cli(
    source,
    descriptor,
    default_method,
    provider,
    emphasize,
    alpha,
    n_factors,
    rotation,
    n_jobs,
    symmetric,
    table_style,
    max_rows,
    max_cols,
    show_types,
    show_shape,
    verbose,
    debug,
):
    """
    Build association matrices of a CSV survey dataset.

    SOURCE: CSV file with a header row.

    DESCRIPTOR: optional JSON array of {"name", "scale", "factor"} records,
    scale being "nominal" or "ordinal".
    """
    display = DisplayConfig.from_mapping(
        {
            "max_rows": max_rows,
            "max_cols": max_cols,
            "table_style": table_style,
            "hide_types": not show_types,
            "hide_shape_info": not show_shape,
        }
    )
    config = AnalysisConfig(
        provider=provider,
        default_method=default_method,
        emphasize=emphasize,
        significance_level=alpha,
        n_jobs=n_jobs,
        reuse_symmetric=symmetric,
        n_factors=n_factors,
        rotation=None if rotation == "none" else rotation,
        display=display,
    )
    try:
        output = generate_report(
            source, descriptor, config=config, verbose=verbose, debug=debug
        )
    except SurveyCorrError as e:
        logger.debug("Run failed", exc_info=True)
        raise click.ClickException(str(e)) from e
    click.echo(str(output))


def main(args=None):
    """Console script entry point."""
    cli.main(args=args, prog_name="surveycorr")
