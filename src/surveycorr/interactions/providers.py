"""
Association providers.

An association provider computes the coefficient and two-sided significance
of one pair of equal-length numeric vectors through a uniform contract,
``correlate(x, y) -> AssociationResult``. Ordinal columns are compared with
Pearson's r, nominal columns with Kendall's tau-b.

Two interchangeable strategies are available:

- ``in_process``: the statistic is computed here with numpy, and only the
  tail probabilities come from ``scipy.stats`` distributions.
- ``delegated``: the whole computation is handed to
  :class:`~surveycorr.interactions.backend.StatisticsBackend`, which calls
  ``scipy.stats.pearsonr`` / ``scipy.stats.kendalltau`` under a lock.

Both give the same results within floating point tolerance.

Classes
-------
AssociationProvider
    Abstract base implementing validation and degenerate-input handling.
InProcessPearson, InProcessKendall
    numpy implementations.
DelegatedProvider(method, backend=None)
    Backend-delegating implementation.

Functions
---------
get_provider(method, kind="in_process", backend=None)
    Provider factory.
method_for_scale(scale)
    Statistic used for a measurement scale.

Notes
-----
- Fewer than 3 observations, a constant vector or a non-finite value make
  both statistics undefined; the result is ``AssociationResult(nan, nan)``
  and nothing is computed.
- Providers never see self-pairs; the matrix builder intercepts them.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np
from scipy import stats

from surveycorr._utils import read_config, validate_lengths_match, validate_string_flag
from surveycorr.interactions.backend import StatisticsBackend, get_default_backend
from surveycorr.types import AssociationResult, Scale

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]

SCALE_METHODS = {Scale.ORDINAL: "pearson", Scale.NOMINAL: "kendall"}
PROVIDER_KINDS = ("in_process", "delegated")


class AssociationProvider(ABC):
    """
    Base class of association providers.

    Subclasses implement :meth:`_compute`; :meth:`correlate` wraps it with
    the shared contract: length validation, degenerate-input handling and
    clipping to the documented ranges.

    Attributes
    ----------
    method : str
        Name of the statistic (``'pearson'`` or ``'kendall'``).
    symmetric : bool
        True if ``correlate(x, y) == correlate(y, x)``. The matrix builder
        may then compute each unordered pair once.
    """

    method: str = None
    symmetric: bool = True

    def correlate(self, x: Sequence[float], y: Sequence[float]) -> AssociationResult:
        """
        Compute the association between `x` and `y`.

        Parameters
        ----------
        x, y : Sequence[float]
            Numeric vectors of equal length.

        Returns
        -------
        AssociationResult
            Coefficient in [-1, 1] and significance in [0, 1], or both NaN
            when the statistic is undefined for the input.

        Raises
        ------
        ValueError
            If the lengths of `x` and `y` differ. Both vectors always come
            from one dataset, so this is a programming error.
        """
        validate_lengths_match(
            x, y, _errors["arrays_lens_mismatch_f"].format("x", "y")
        )
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if x.size < 3 or _is_degenerate(x) or _is_degenerate(y):
            return AssociationResult(math.nan, math.nan)
        coefficient, significance = self._compute(x, y)
        return AssociationResult(
            float(np.clip(coefficient, -1.0, 1.0)),
            float(np.clip(significance, 0.0, 1.0)),
        )

    @abstractmethod
    def _compute(self, x: np.ndarray, y: np.ndarray) -> tuple[float, float]:
        """Return ``(coefficient, significance)`` for non-degenerate input."""

    def __repr__(self):
        return f"{type(self).__name__}(method={self.method!r})"


def _is_degenerate(vector: np.ndarray) -> bool:
    if not np.isfinite(vector).all():
        return True
    return bool(vector.min() == vector.max())


class InProcessPearson(AssociationProvider):
    """
    Pearson product-moment correlation computed with numpy.

    The two-sided p value uses Student's t distribution with ``n - 2``
    degrees of freedom.
    """

    method = "pearson"

    def _compute(self, x, y):
        xm = x - x.mean()
        ym = y - y.mean()
        xm /= np.linalg.norm(xm)
        ym /= np.linalg.norm(ym)
        r = float(np.clip(np.dot(xm, ym), -1.0, 1.0))
        df = x.size - 2
        if abs(r) == 1.0:
            return r, 0.0
        t = r * math.sqrt(df / ((1.0 - r) * (1.0 + r)))
        return r, float(2 * stats.t.sf(abs(t), df))


class InProcessKendall(AssociationProvider):
    """
    Kendall's tau-b computed with numpy.

    Ties in either vector are accounted for in the denominator and in the
    variance of the statistic. The two-sided p value uses the normal
    approximation.

    Discordant pairs are counted with a bottom-up merge over the vectors
    sorted by ``(x, y)``, so one pair of columns costs ``O(n log n)``.
    """

    method = "kendall"

    def _compute(self, x, y):
        n = x.size
        order = np.lexsort((y, x))
        xs, ys = x[order], y[order]

        total = n * (n - 1) / 2
        xtie, x0, x1 = _tie_terms(x)
        ytie, y0, y1 = _tie_terms(y)
        joint = np.r_[True, (xs[1:] != xs[:-1]) | (ys[1:] != ys[:-1]), True]
        counts = np.diff(np.flatnonzero(joint)).astype(np.float64)
        ntie = float((counts * (counts - 1) / 2).sum())
        # concordant minus discordant pairs
        s = total - xtie - ytie + ntie - 2 * _discordant_pairs(ys)
        tau = s / math.sqrt(total - xtie) / math.sqrt(total - ytie)

        m = n * (n - 1.0)
        var = (
            (m * (2 * n + 5) - x1 - y1) / 18
            + (2 * xtie * ytie) / m
            + x0 * y0 / (9 * m * (n - 2))
        )
        z = s / math.sqrt(var)
        return tau, float(2 * stats.norm.sf(abs(z)))


def _discordant_pairs(ys: np.ndarray) -> float:
    """
    Count pairs ``i < j`` with ``ys[i] > ys[j]``.

    `ys` must be ordered by ``(x, y)``, so pairs tied in x never count.
    Each level merges neighbouring sorted blocks of `width` elements with a
    stable sort over already sorted runs.
    """
    values = np.unique(ys, return_inverse=True)[1].reshape(-1).astype(np.int64)
    n = values.size
    positions = np.arange(n)
    span = int(values.max()) + 1 if n else 1
    discordant = 0
    width = 1
    while width < n:
        pair = positions // (2 * width)
        right = (positions // width) % 2
        keys = (pair * span + values) * 2 + right
        merged = np.argsort(keys, kind="stable")
        is_right = right[merged] == 1
        left_seen = np.r_[0, np.cumsum(~is_right)]
        end = np.minimum((pair + 1) * 2 * width, n)
        # left elements after a right element in merged order are greater
        discordant += int((left_seen[end] - left_seen[positions])[is_right].sum())
        values = values[merged]
        width *= 2
    return float(discordant)


def _tie_terms(vector: np.ndarray) -> tuple[float, float, float]:
    _, counts = np.unique(vector, return_counts=True)
    counts = counts.astype(np.float64)
    return (
        float((counts * (counts - 1) / 2).sum()),
        float((counts * (counts - 1) * (counts - 2)).sum()),
        float((counts * (counts - 1) * (2 * counts + 5)).sum()),
    )


class DelegatedProvider(AssociationProvider):
    """
    Provider that hands the computation to a `StatisticsBackend`.

    Parameters
    ----------
    method : {'pearson', 'kendall'}
        Statistic to request.
    backend : StatisticsBackend, optional
        Backend to call. Defaults to the shared process-wide backend.
    """

    def __init__(self, method: str, backend: StatisticsBackend = None):
        validate_string_flag(
            method,
            StatisticsBackend.supported_methods,
            _errors["unsupported_method_f"].format(
                method, sorted(StatisticsBackend.supported_methods)
            ),
        )
        self.method = method
        self.backend = backend if backend is not None else get_default_backend()

    def _compute(self, x, y):
        return self.backend.correlate(self.method, x, y)


_IN_PROCESS = {"pearson": InProcessPearson, "kendall": InProcessKendall}


def get_provider(
    method: str, kind: str = "in_process", backend: StatisticsBackend = None
) -> AssociationProvider:
    """
    Build an association provider.

    Parameters
    ----------
    method : {'pearson', 'kendall'}
        Statistic.
    kind : {'in_process', 'delegated'}, default='in_process'
        Implementation strategy.
    backend : StatisticsBackend, optional
        Backend for ``kind='delegated'``; ignored otherwise.

    Returns
    -------
    AssociationProvider

    Raises
    ------
    ValueError
        If `method` or `kind` is not supported.

    Examples
    --------
    >>> get_provider("kendall")
    InProcessKendall(method='kendall')
    >>> get_provider("pearson", kind="delegated")
    DelegatedProvider(method='pearson')
    """
    validate_string_flag(
        kind,
        PROVIDER_KINDS,
        _errors["unsupported_method_f"].format(kind, list(PROVIDER_KINDS)),
    )
    if kind == "delegated":
        return DelegatedProvider(method, backend=backend)
    validate_string_flag(
        method,
        _IN_PROCESS,
        _errors["unsupported_method_f"].format(method, sorted(_IN_PROCESS)),
    )
    return _IN_PROCESS[method]()


def method_for_scale(scale: Scale) -> str:
    """Return the statistic used for columns of `scale`."""
    return SCALE_METHODS[Scale.parse(scale)]
