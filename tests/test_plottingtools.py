import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pytest
from lofrank import plottingtools as pl
from lofrank import Point, compute_outlier_scores

pts = [Point(str(i), c) for i, c in
       enumerate([[0, 0], [0, 1], [1, 0], [1, 1], [0.5, 0.5], [6, 6]])]
scores = compute_outlier_scores(pts, 3)


def teardown_function():
    plt.close("all")


def test_plot_scores():
    ax, bars = pl.plot_scores(scores)
    assert len(bars) == 6
    assert ax.get_ylabel() == "LOF"
    labels = [t.get_text() for t in ax.get_xticklabels()]
    assert labels == [i for i, _ in scores]
    _, ax2 = plt.subplots()
    ax3, bars = pl.plot_scores(scores, ax=ax2, top=2)
    assert ax3 is ax2
    assert len(bars) == 2


def test_plot_scores_infinite():
    ax, bars = pl.plot_scores([("x", np.inf), ("a", 2.), ("b", 1.)])
    heights = [b.get_height() for b in bars]
    assert heights == [2., 2., 1.]


def test_plot_points():
    ax, sc = pl.plot_points(pts, scores)
    np.testing.assert_almost_equal(sc.get_offsets()[-1], [6, 6])
    assert ax.get_xlabel() == "x0"
    with pytest.raises(ValueError):
        pl.plot_points([Point("a", [1.])], [("a", 1.)])
