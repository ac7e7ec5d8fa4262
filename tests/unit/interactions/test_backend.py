import threading

import numpy as np
import pandas as pd
import pytest

from surveycorr.exceptions import ProviderError
from surveycorr.interactions import StatisticsBackend, get_default_backend
from surveycorr.interactions import backend as backend_module


@pytest.fixture
def two_factor_frame():
    rng = np.random.default_rng(11)
    f1 = rng.normal(size=300)
    f2 = rng.normal(size=300)
    noise = lambda: rng.normal(scale=0.4, size=300)
    return pd.DataFrame({
        "a1": f1 + noise(),
        "a2": f1 + noise(),
        "a3": f1 + noise(),
        "b1": f2 + noise(),
        "b2": f2 + noise(),
        "b3": f2 + noise(),
    })


# -------------------------------
# Tests for StatisticsBackend.correlate
# -------------------------------

def test_backend_correlate_perfect():
    backend = StatisticsBackend()
    r, p = backend.correlate("pearson", [1, 2, 3, 4], [2, 4, 6, 8])
    assert r == pytest.approx(1.0)
    assert p == pytest.approx(0.0, abs=1e-12)
    assert backend.calls == 1

def test_backend_correlate_returns_floats():
    r, p = StatisticsBackend().correlate("kendall", [1, 2, 3, 4], [1, 3, 2, 4])
    assert isinstance(r, float)
    assert isinstance(p, float)

def test_backend_correlate_unsupported_method():
    with pytest.raises(ValueError, match="Unsupported method 'spearman'"):
        StatisticsBackend().correlate("spearman", [1, 2, 3], [1, 2, 3])

def test_backend_wraps_scipy_failures(monkeypatch):
    def failing_pearsonr(x, y):
        raise ValueError("boom")

    monkeypatch.setattr(backend_module.stats, "pearsonr", failing_pearsonr)
    backend = StatisticsBackend()
    with pytest.raises(ProviderError, match="boom"):
        backend.correlate("pearson", [1, 2, 3], [3, 2, 1])
    assert backend.calls == 0

def test_backend_serializes_concurrent_calls():
    backend = StatisticsBackend()
    x = list(range(50))
    y = [v % 7 for v in x]

    def work():
        for _ in range(20):
            backend.correlate("kendall", x, y)

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert backend.calls == 80

def test_get_default_backend_is_shared():
    assert get_default_backend() is get_default_backend()

# -------------------------------
# Tests for StatisticsBackend.factor_analyze
# -------------------------------

def test_backend_factor_analyze_shapes(two_factor_frame):
    result = StatisticsBackend().factor_analyze(
        two_factor_frame, n_factors=2, rotation="varimax"
    )
    assert result["loadings"].shape == (6, 2)
    assert result["communality"].shape == (6,)
    assert result["uniqueness"].shape == (6,)

def test_backend_factor_analyze_without_rotation(two_factor_frame):
    result = StatisticsBackend().factor_analyze(
        two_factor_frame, n_factors=1, rotation=None
    )
    assert result["loadings"].shape == (6, 1)
