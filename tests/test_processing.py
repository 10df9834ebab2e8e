import numpy as np
import pytest
from lofrank import processing as proc
from lofrank._decorators import timeit
from lofrank import Point, compute_outlier_scores
from lofrank.exceptions import ConfigurationError

rng = np.random.default_rng(3)
cloud = [Point(str(i+1), c) for i, c in enumerate(rng.uniform(size=(30, 2)))]


def test_timeit():
    @timeit
    def add(a, b=1):
        """adds"""
        return a + b

    times = {}
    assert add(1, b=2, log_time=times) == 3
    assert list(times) == ["ADD"]
    assert times["ADD"] >= 0
    assert add(4, log_time=times, log_name="second") == 5
    assert "second" in times
    assert add(1) == 2
    assert add.__name__ == "add"
    assert add.__doc__ == "adds"


def test_sweep_k():
    result = proc.sweep_k(cloud, ks=(2, 5, 40, 1))
    assert result.ks == [2, 5]
    assert len(result) == 2
    assert list(result.timings) == [2, 5]
    assert all(t >= 0 for t in result.timings.values())
    assert result.total >= 0
    assert result.scores[2] == compute_outlier_scores(cloud, 2)
    assert result.last == compute_outlier_scores(cloud, 5)
    assert repr(result).startswith("SweepResult(ks=[2, 5]")


def test_sweep_default():
    result = proc.sweep_k(cloud, progress=True)
    assert result.ks == [5, 6, 7, 9, 12, 15, 20, 25]
    for k in result.ks:
        assert len(result.scores[k]) == 30


def test_sweep_no_valid_k():
    with pytest.raises(ConfigurationError):
        proc.sweep_k(cloud[:4], ks=[5, 6])
    with pytest.raises(ConfigurationError):
        proc.sweep_k([], ks=[2])
