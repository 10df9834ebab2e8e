"""
Module for plotting shortcut functions

Functions
---------
plot_scores
    Bar chart of a ranking
plot_points
    Scatter plot of two coordinates, coloured by lof
"""
# Basic 3rd party packages
import numpy as np
import matplotlib.pyplot as plt


def plot_scores(scores, ax=None, top=None):
    """
    Plot a ranking as a bar chart

    Parameters
    ----------
    scores : list of (str, float)
        (id, lof) pairs in ranking order
    ax : matplotlib Axis object, optional
        If you want to plot on an existing axis instead of
        creating a new figure.
    top : int, optional
        Only plot the first `top` points of the ranking

    Returns
    -------
    ax : matplotlib Axis object
    bars : the bar container
    """
    if ax is None:
        _, ax = plt.subplots()
    if top is not None:
        scores = scores[:top]
    ids = [i for i, _ in scores]
    lofs = np.array([lof for _, lof in scores], dtype=float)
    # infinite scores are drawn at the height of the largest finite one
    finite = lofs[np.isfinite(lofs)]
    cap = finite.max() if finite.size else 1.
    bars = ax.bar(np.arange(len(ids)), np.where(np.isfinite(lofs), lofs, cap))
    ax.set_xticks(np.arange(len(ids)))
    ax.set_xticklabels(ids, rotation=90)
    ax.axhline(1., color="grey", linestyle="--", linewidth=1)
    ax.set_xlabel("Point")
    ax.set_ylabel("LOF")
    return ax, bars


def plot_points(points, scores, ax=None, dims=(0, 1), cmap="viridis"):
    """
    Scatter plot of a point set coloured by local outlier factor

    Parameters
    ----------
    points : list of Point
        The dataset
    scores : list of (str, float)
        Ranking of the same dataset
    ax : matplotlib Axis object, optional
        If you want to plot on an existing axis instead of
        creating a new figure.
    dims : 2-tuple of int, optional
        Which coordinates to use for the x and y axis
    cmap : str, optional
        Matplotlib colormap name

    Returns
    -------
    ax : matplotlib Axis object
    sc : the scatter plot itself
    """
    if ax is None:
        _, ax = plt.subplots()
    dx, dy = dims
    dim = points[0].dimension
    if max(dx, dy) >= dim:
        raise ValueError(f"Can not plot dimensions {dims} of {dim}D points")
    lookup = dict(scores)
    x = np.array([p.coordinates[dx] for p in points])
    y = np.array([p.coordinates[dy] for p in points])
    c = np.array([lookup[p.id] for p in points], dtype=float)
    finite = c[np.isfinite(c)]
    c[~np.isfinite(c)] = finite.max() if finite.size else 1.
    sc = ax.scatter(x, y, c=c, cmap=cmap)
    ax.figure.colorbar(sc, ax=ax, label="LOF")
    ax.set_xlabel(f"x{dx}")
    ax.set_ylabel(f"x{dy}")
    return ax, sc
