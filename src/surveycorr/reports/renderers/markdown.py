"""
Markdown renderers for surveycorr reports and blocks.

This module renders `Block` and `Report` objects into Markdown documents.
Tables are rendered with ``pandas.DataFrame.to_markdown`` (backed by
``tabulate``) under the explicit :class:`~surveycorr.types.DisplayConfig`
passed by the caller; no process-wide display options are read or changed.

Functions
---------
render_markdown(data, path=None, display=None, **kwargs)
    Render a `Block` or `Report` into a Markdown document and optionally
    save it. Main public entry point.
render_block_markdown(block, display=None, heading_level=2)
    Render a single `Block` into a Markdown fragment.

Notes
-----
- The whole document is rendered in memory before anything is written, so a
  failure while rendering never leaves a partial file behind.
- A report title becomes the ``#`` heading, block titles ``##`` and table
  titles ``###``.

Examples
--------
>>> from surveycorr.reports import Block, Report
>>> from surveycorr.reports.renderers import render_markdown
>>> block = Block({"title": "Means", "tables": [{"q1": [3.5]}]})
>>> document = render_markdown(Report([block], title="survey.csv"))
>>> document.splitlines()[:3]
['# survey.csv', '', '## Means']
"""

import logging
from pathlib import Path

import pandas as pd

from surveycorr._utils import (
    convert_filepath,
    enable_io_logs,
    log_context,
    read_config,
    validate_path,
    validate_string_flag,
)
from surveycorr.types import DisplayConfig, TableResult

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]

SUPPORTED_TABLE_STYLES = ("pipe", "github")
ELLIPSIS = "..."


def render_markdown(
    data, path: str | Path = None, display: DisplayConfig = None, **kwargs
) -> str:
    """
    Render a `Block` or `Report` into a Markdown document.

    Parameters
    ----------
    data : Block or Report
        Object to render.
    path : str or Path, optional
        Directory or ``.md`` file path to save the document to. If a
        directory is given, the file is named ``f"{report_name}.md"``.
        If None, nothing is written.
    display : DisplayConfig, optional
        Table formatting switches. Defaults to ``DisplayConfig()``.

    Other parameters
    ----------------
    report_name : str, default='report'
        File name stem used when `path` is a directory, and in log messages.
    overwrite : bool, default=True
        If False, an existing file at the destination raises
        ``FileExistsError``.
    verbose : bool, default=False
        Enables info-level logging during the function execution.
    debug : bool, default=False
        Enables debug-level logging. Takes precedence over `verbose`.

    Returns
    -------
    str
        The rendered document.

    Raises
    ------
    TypeError
        If `data` is neither a `Block` nor a `Report`.
    ValueError
        If ``display.table_style`` is not supported.
    OSError
        If the document cannot be written to `path` (``PermissionError``,
        ``FileExistsError``, ``IsADirectoryError``, ...).
    """
    if not (hasattr(data, "typename") and data.typename in {"Block", "Report"}):
        raise TypeError(f"Expected Block or Report, got {type(data).__name__}")
    display = display if display is not None else DisplayConfig()
    validate_string_flag(
        display.table_style,
        SUPPORTED_TABLE_STYLES,
        _errors["unsupported_table_style_f"].format(
            display.table_style, list(SUPPORTED_TABLE_STYLES)
        ),
    )
    params = {
        "report_name": kwargs.get("report_name", "report"),
        "overwrite": kwargs.get("overwrite", True),
        "verbose": kwargs.get("verbose", False),
        "debug": kwargs.get("debug", False),
    }

    with log_context(logger, verbose=params["verbose"], debug=params["debug"]):
        logger.info("Rendering '%s' in markdown", params["report_name"])
        if data.typename == "Block":
            document = render_block_markdown(data, display=display)
        else:
            parts = []
            if data.title:
                parts.append(f"# {data.title}")
            if data.description:
                parts.append(data.description)
            for i, block in enumerate(data.blocks):
                parts.append(render_block_markdown(block, display=display))
                logger.debug("Block %d ('%s') rendered", i, block.block_config.title)
            if not data.blocks:
                logger.warning("Report '%s' has no blocks", params["report_name"])
            document = "\n\n".join(parts)
        document += "\n"

        if path is not None:
            _save_markdown(
                document,
                path,
                overwrite=params["overwrite"],
                report_name=params["report_name"],
            )
        logger.info("'%s' was successfully rendered", params["report_name"])
    return document


def render_block_markdown(
    block, display: DisplayConfig = None, heading_level: int = 2
) -> str:
    """
    Render a single Block into a Markdown fragment.

    Parameters
    ----------
    block : Block
        Block to render.
    display : DisplayConfig, optional
        Table formatting switches. Defaults to ``DisplayConfig()``.
    heading_level : int, default=2
        Heading level of the block title. Table titles use the next level.

    Returns
    -------
    str
        Markdown fragment without a trailing newline.
    """
    display = display if display is not None else DisplayConfig()
    cfg = block.block_config
    parts = []
    if cfg.title:
        parts.append(f"{'#' * heading_level} {cfg.title}")
    if cfg.description:
        parts.append(cfg.description)
    if cfg.metrics:
        lines = []
        for metric in cfg.metrics:
            line = f"- **{metric.get('name', '')}**: {metric.get('value', '')}"
            if metric.get("description"):
                line += f" *{metric['description']}*"
            lines.append(line)
        parts.append("\n".join(lines))
    for table_result in cfg.tables:
        parts.extend(
            _render_table(table_result, display, heading_level=heading_level + 1)
        )
    return "\n\n".join(parts)


def _render_table(
    table_result: TableResult, display: DisplayConfig, heading_level: int
) -> list[str]:
    parts = []
    if table_result.title:
        parts.append(f"{'#' * heading_level} {table_result.title}")
    if table_result.description:
        parts.append(f"*{table_result.description}*")
    table = table_result.table
    if not display.hide_shape_info:
        parts.append(f"shape: {table.shape}")
    if table.shape[1] == 0:
        parts.append("*(empty)*")
        return parts
    extra = table_result.render_extra or {}
    prepared = _prepare_table(
        table,
        display,
        show_index=extra.get("show_index", True),
        index_label=extra.get("index_label", ""),
    )
    parts.append(prepared.to_markdown(index=False, tablefmt=display.table_style))
    return parts


def _prepare_table(
    table: pd.DataFrame,
    display: DisplayConfig,
    show_index: bool = True,
    index_label: str = "",
) -> pd.DataFrame:
    """
    Apply `display` limits to a copy of `table` and move its index into the
    first column.
    """
    df = table.copy()
    if not display.hide_types:
        df.columns = [f"{c} ({dtype})" for c, dtype in zip(df.columns, df.dtypes)]
    else:
        df.columns = [str(c) for c in df.columns]

    if df.shape[1] > display.max_cols:
        df = df.iloc[:, : display.max_cols].astype(object)
        df[ELLIPSIS] = ELLIPSIS
    truncated_rows = df.shape[0] > display.max_rows
    if truncated_rows:
        df = df.iloc[: display.max_rows].astype(object)

    labels = [str(i) for i in df.index]
    df = df.reset_index(drop=True)
    if truncated_rows:
        df.loc[len(df)] = [ELLIPSIS] * df.shape[1]
        labels.append(ELLIPSIS)
    if show_index:
        df.insert(0, index_label, labels, allow_duplicates=True)

    limit = display.string_length_limit

    def cut(value):
        if isinstance(value, str) and len(value) > limit:
            return value[:limit] + ELLIPSIS
        return value

    for position in range(df.shape[1]):
        column = df.iloc[:, position]
        if column.dtype == object or pd.api.types.is_string_dtype(column.dtype):
            df.iloc[:, position] = column.map(cut)
    return df


@enable_io_logs(logger)
def _save_markdown(
    document: str,
    path: str | Path,
    overwrite: bool = True,
    report_name: str = "report",
):
    """
    Save a Markdown document to the specified path.

    Parameters
    ----------
    document : str
        Markdown content to save.
    path : str or Path
        Directory or full ``.md`` file path.
    overwrite : bool, default=True
        If False, raises `FileExistsError` when the target file exists.
    report_name : str, default='report'
        File name stem used when `path` is a directory.

    Raises
    ------
    ValueError
        If `path` is a file path not ending with ``.md``.
    FileExistsError
        If `overwrite=False` and the target file already exists.
    FileNotFoundError
        If the directory of the target file does not exist.

    Notes
    -----
    - Logging is enabled via the `@enable_io_logs` decorator.
    """
    path = convert_filepath(path, f"{report_name}.md")
    if path.suffix != ".md":
        raise ValueError("'path' must be a directory or have .md extension")
    validate_path(path, overwrite_check=not overwrite)

    with open(path, "w", encoding="utf-8") as f:
        f.write(document)
    logger.debug("Written %d characters to '%s'", len(document), path)
