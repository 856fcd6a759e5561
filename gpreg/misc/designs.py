## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import numpy as np
from scipy.stats import qmc

import gpreg.num as gnp


def scale(sample_standard, box):
    """
    Map a standard sample in [0, 1]^dim to the given box.

    Parameters
    ----------
    sample_standard : numpy.ndarray
        Array of points in the standard sample.
    box : list of lists
        List of lists containing the lower and upper bounds of the box.

    Returns
    -------
    numpy.ndarray
        Sample points mapped to the given box.
    """
    l_bounds, u_bounds = box[0], box[1]
    sample_box = qmc.scale(sample_standard, l_bounds, u_bounds)
    return sample_box


def regulargrid(dim, n, box):
    """
    Build a regular grid in the dim-dimensional hyperrectangle.

    If n is an integer, a grid of size n^dim is built;

    If n is a list of length dim, a grid of size prod(n) is built,
    with n_i points on coordinate i.

    The dim-dimensional hyperrectangle is specified by the argument
    box, which is a 2 x dim array where box_(1, i) and box_(2, i) are
    the lower- and upper-bound of the interval on the i^th coordinate.

    Parameters
    ----------
    dim : int
        Number of dimensions.
    n : int or list
        Number of points per dimension or a list with the number of points per dimension.
    box : list of lists
        List of lists containing the lower and upper bounds of the box.

    Returns
    -------
    x : numpy.ndarray, shape (N, dim)
        Regular grid in the dim-dimensional hyperrectangle.
    """
    if not isinstance(n, list):
        n = [n for i in range(dim)]

    xmin, xmax = box[0], box[1]
    levels = [np.linspace(xmin[i], xmax[i], n[i]) for i in range(dim)]

    # full factorial design, first coordinate varies slowest
    Xv = np.meshgrid(*levels, copy=True, sparse=False, indexing="ij")
    return np.stack([v.reshape(-1) for v in Xv], axis=1)


def linrange(start, stop, step):
    """Column of points start, start + step, ... up to stop (inclusive).

    The number of points is floor((stop - start) / step) + 1.

    Returns
    -------
    numpy.ndarray, shape (n, 1)
    """
    if step <= 0:
        raise ValueError("step must be positive")
    n = int(np.floor((stop - start) / step)) + 1
    return (start + step * np.arange(n, dtype=float)).reshape(-1, 1)


def randunif(dim, n, box, rng=None):
    """
    Generate a random uniform sample in the specified box.

    Parameters
    ----------
    dim : int
        Number of dimensions.
    n : int
        Number of points in the sample.
    box : list of lists
        List of lists containing the lower and upper bounds of the box.
    rng : numpy.random.Generator, optional
        Defaults to the global generator of gpreg.num.

    Returns
    -------
    numpy.ndarray
        Random uniform sample in the specified box.
    """
    sample = gnp.rand(n, dim, rng=rng)
    return scale(sample, box)
