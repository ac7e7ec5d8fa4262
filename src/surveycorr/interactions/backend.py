"""
Statistics backend.

`StatisticsBackend` is the single entry point to the external numeric stack
(``scipy.stats`` for association statistics, ``statsmodels`` for factor
analysis). Every call is serialized through one ``threading.Lock``, so the
matrix builder may run cells in parallel while the backend itself is
treated as a non-reentrant shared resource.

Warnings raised by scipy or statsmodels during a call are logged at DEBUG
level instead of being printed.

Classes
-------
StatisticsBackend()
    Mutex-guarded facade over scipy / statsmodels.

Functions
---------
get_default_backend()
    Process-wide backend instance shared by delegated providers.

Examples
--------
>>> from surveycorr.interactions.backend import StatisticsBackend
>>> backend = StatisticsBackend()
>>> backend.correlate("pearson", [1, 2, 3, 4], [2, 4, 6, 8])
(1.0, 0.0)
"""

import logging
import threading
import warnings
from typing import Sequence

import numpy as np
import pandas as pd
from scipy import stats
from statsmodels.multivariate.factor import Factor

from surveycorr._utils import read_config, validate_string_flag
from surveycorr.exceptions import ProviderError

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]


class StatisticsBackend:
    """
    Mutex-guarded access to scipy and statsmodels.

    Attributes
    ----------
    supported_methods : frozenset[str]
        Association statistics available through :meth:`correlate`.
    calls : int
        Number of completed backend calls. Useful in tests and debug logs.

    Methods
    -------
    correlate(method, x, y)
        Coefficient and two-sided p value of one pair.
    factor_analyze(frame, n_factors, rotation)
        Principal axis factoring of the columns of `frame`.
    """

    supported_methods = frozenset({"pearson", "kendall"})

    def __init__(self):
        self._lock = threading.Lock()
        self.calls = 0

    def correlate(
        self, method: str, x: Sequence[float], y: Sequence[float]
    ) -> tuple[float, float]:
        """
        Compute an association statistic with scipy.

        Parameters
        ----------
        method : {'pearson', 'kendall'}
            ``'pearson'`` calls ``scipy.stats.pearsonr``; ``'kendall'`` calls
            ``scipy.stats.kendalltau`` (tau-b, asymptotic p value).
        x, y : Sequence[float]
            Equal-length numeric vectors.

        Returns
        -------
        tuple[float, float]
            ``(coefficient, significance)``.

        Raises
        ------
        ValueError
            If `method` is not supported.
        ProviderError
            If scipy fails on the input.
        """
        validate_string_flag(
            method,
            self.supported_methods,
            _errors["unsupported_method_f"].format(
                method, sorted(self.supported_methods)
            ),
        )
        with self._lock, warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                if method == "pearson":
                    result = stats.pearsonr(x, y)
                else:
                    result = stats.kendalltau(x, y, method="asymptotic")
            except (ValueError, TypeError, FloatingPointError) as e:
                logger.debug("scipy %s failed: %s", method, e)
                raise ProviderError(
                    _errors["provider_failure_f"].format(method, e)
                ) from e
            finally:
                _log_caught(caught, method)
            self.calls += 1
        return float(result.statistic), float(result.pvalue)

    def factor_analyze(
        self, frame: pd.DataFrame, n_factors: int = 2, rotation: str = "varimax"
    ) -> dict[str, np.ndarray]:
        """
        Run principal axis factoring with ``statsmodels``.

        Parameters
        ----------
        frame : pandas.DataFrame
            float64 data, one column per variable.
        n_factors : int, default=2
            Number of factors to extract.
        rotation : str or None, default='varimax'
            Rotation passed to ``FactorResults.rotate``. Applied only when
            more than one factor is extracted.

        Returns
        -------
        dict
            ``{"loadings": (k, n_factors) array, "communality": (k,) array,
            "uniqueness": (k,) array}``.

        Raises
        ------
        ProviderError
            If statsmodels fails (singular correlation matrix, unknown
            rotation, ...).
        """
        with self._lock, warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                model = Factor(
                    frame.to_numpy(dtype=np.float64),
                    n_factor=n_factors,
                    method="pa",
                    endog_names=[str(c) for c in frame.columns],
                )
                results = model.fit()
                if rotation and n_factors > 1:
                    results.rotate(rotation)
            except (ValueError, np.linalg.LinAlgError, FloatingPointError) as e:
                logger.debug("statsmodels factor analysis failed: %s", e)
                raise ProviderError(
                    _errors["provider_failure_f"].format("factor_analyze", e)
                ) from e
            finally:
                _log_caught(caught, "factor_analyze")
            self.calls += 1
        return {
            "loadings": np.asarray(results.loadings, dtype=np.float64),
            "communality": np.asarray(results.communality, dtype=np.float64),
            "uniqueness": np.asarray(results.uniqueness, dtype=np.float64),
        }


def _log_caught(caught, call):
    for w in caught:
        logger.debug("%s warning in %s: %s", w.category.__name__, call, w.message)


_default_backend = None
_default_backend_lock = threading.Lock()


def get_default_backend() -> StatisticsBackend:
    """Return the shared process-wide backend, creating it on first use."""
    global _default_backend
    with _default_backend_lock:
        if _default_backend is None:
            _default_backend = StatisticsBackend()
        return _default_backend
