"""
Reading datasets into points and writing out rankings

Functions
---------
make_points
    Build points from an array of rows
read_points
    Read a CSV file with a header row into points
read_point_directory
    Read every CSV file in a directory
format_score
    Format a lof value with a fixed maximum precision
format_scores
    Format a ranking as lines of text
scores_to_frame
    Convert a ranking to a pandas DataFrame
write_scores
    Write a ranking to a csv or excel file
"""

# Base modules
import logging
from pathlib import Path

# Basic 3rd party packages
import numpy as np
import pandas as pd

# My own modules
from .datatypes.point import Point

# Initialize the Logger
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)

DEFAULT_PRECISION = 4


def make_points(rows, ids=None):
    """
    Create a list of points from a 2D array-like

    Parameters
    ----------
    rows : array-like, PxD
        One row of coordinates per point
    ids : sequence of str, optional
        Identifiers of the rows. By default rows are numbered
        "1", "2", ... in order.

    Returns
    -------
    points : list of Point
    """
    rows = np.asarray(rows, dtype=float)
    if rows.ndim != 2:
        raise ValueError("Expected a 2D array with one row per point")
    if ids is None:
        ids = [str(i+1) for i in range(rows.shape[0])]
    elif len(ids) != rows.shape[0]:
        raise ValueError(f"Got {len(ids)} identifiers for "
                         f"{rows.shape[0]} rows")
    return [Point(i, r) for i, r in zip(ids, rows)]


def read_points(filepath, id_column=None):
    """
    Read a CSV file into a list of points

    The first line of the file is a header. Every column except the
    identifier column must be numeric.

    Parameters
    ----------
    filepath : str or Path
        Path to the csv file
    id_column : str, optional
        Column holding the point identifiers. If not provided the rows
        are numbered from 1.

    Returns
    -------
    points : list of Point
    """
    filepath = Path(filepath)
    try:
        df = pd.read_csv(str(filepath))
    except pd.errors.EmptyDataError:
        raise ValueError(f"{filepath} is empty") from None
    if df.empty:
        raise ValueError(f"{filepath} contains no data rows")
    ids = None
    if id_column is not None:
        if id_column not in df.columns:
            raise ValueError(f"Column {id_column} not found in {filepath}")
        ids = df.pop(id_column).astype(str).tolist()
    numeric = df.select_dtypes(include=[np.number])
    bad = [c for c in df.columns if c not in numeric.columns]
    if bad:
        raise ValueError(f"Non-numeric columns in {filepath}: {bad}")
    if numeric.shape[1] == 0:
        raise ValueError(f"No coordinate columns found in {filepath}")
    points = make_points(numeric.to_numpy(dtype=float), ids=ids)
    logger.debug(f"Read {len(points)} points with {numeric.shape[1]} "
                 f"coordinates from {filepath}")
    return points


def read_point_directory(dirpath, pattern="*.csv", id_column=None):
    """
    Read all files in a directory that match a pattern

    Files that can not be read are logged and skipped.

    Parameters
    ----------
    dirpath : str or Path
        Directory to scan (not recursive)
    pattern : str, optional
        Glob pattern of the files. Defaults to "*.csv".
    id_column : str, optional
        See read_points

    Returns
    -------
    datasets : dict
        file name -> list of Point, in sorted file name order
    """
    dirpath = Path(dirpath)
    if not dirpath.is_dir():
        raise ValueError(f"{dirpath} is not a directory")
    datasets = {}
    for f in sorted(dirpath.glob(pattern)):
        if not f.is_file():
            continue
        try:
            datasets[f.name] = read_points(f, id_column=id_column)
        except (ValueError, OSError) as e:
            logger.error(f"Could not read {f}, skipping: {e}")
    if not datasets:
        logger.warning(f"No readable {pattern} files found in {dirpath}")
    return datasets


def format_score(lof, precision=DEFAULT_PRECISION):
    """
    Format a lof with at most `precision` decimals

    Trailing zeros are removed, so 1.0 becomes "1" and 0.83333 becomes
    "0.8333". The infinite sentinel becomes "inf".
    """
    return np.format_float_positional(lof, precision=precision, trim="-")


def format_scores(scores, precision=DEFAULT_PRECISION):
    """Format (id, lof) pairs as "<id>  <lof>" lines, keeping the order"""
    return [f"{i}  {format_score(lof, precision)}" for i, lof in scores]


def scores_to_frame(scores):
    """
    Convert a ranking to a DataFrame

    Returns
    -------
    df : pandas.DataFrame
        Columns "rank" (starting at 1), "id" and "lof", in ranking order
    """
    df = pd.DataFrame(list(scores), columns=["id", "lof"])
    df.insert(0, "rank", np.arange(1, len(df)+1))
    return df


def write_scores(scores, filepath):
    """
    Write a ranking to a .csv or .xlsx file

    Parameters
    ----------
    scores : list of (str, float)
        The ranking
    filepath : str or Path
        Output file. The suffix determines the format.

    Returns
    -------
    filepath : Path
    """
    filepath = Path(filepath)
    df = scores_to_frame(scores)
    suffix = filepath.suffix.lower()
    if suffix == ".csv":
        df.to_csv(str(filepath), index=False)
    elif suffix == ".xlsx":
        df.to_excel(str(filepath), index=False)
    else:
        raise ValueError(f"Unsupported output format {suffix}, "
                         f"use .csv or .xlsx")
    logger.debug(f"Wrote {len(df)} scores to {filepath}")
    return filepath
