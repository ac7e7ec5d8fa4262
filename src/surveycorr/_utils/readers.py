"""
Configuration reading utilities.

This module provides utilities for reading the JSON configuration files
shipped with surveycorr. Results are cached, so repeated lookups of error
templates or report labels do not hit the file system.

Methods
-------
read_config
    Read and cache JSON configuration files from the package's config directory.

Notes
-----
- All functions use LRU caching to avoid repeated file I/O

Examples
--------
>>> from surveycorr._utils import read_config

>>> read_config("messages")["errors"]["unknown_column_f"]
"Column '{}' does not exist in the dataset."
"""

import json
import pathlib
from functools import lru_cache


@lru_cache(maxsize=2)
def read_config(name) -> dict:
    """
    Read and cache JSON configuration files.

    This function reads JSON files from the package's `config/` directory
    and caches the results to avoid repeated file system access. The cache
    can hold up to 2 different configurations simultaneously.

    Parameters
    ----------
    name : str
        The name of the configuration file (without .json extension).
        File is located at `config/{name}.json` relative to the package root.

    Returns
    -------
    dict
        The parsed JSON content of the configuration file.

    Raises
    ------
    FileNotFoundError
        If the requested configuration file does not exist.

    Notes
    -----
    - The cache size is set to 2 because surveycorr ships 2 configuration
      files: ``messages`` and ``report``.
    """
    path = pathlib.Path(__file__).resolve().parent.parent / f"config/{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
