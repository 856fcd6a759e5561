# coding: utf-8
## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import math
from collections import namedtuple

import numpy as np

import gpreg.num as gnp
from . import designs


def sin(x):
    """Sine, z = sin(x). Returns shape (n,)."""
    return np.sin(x).reshape([-1])


def expcos_sin(x):
    """
    Computes z = exp(cos(x)) sin(x).

    Parameters
    ----------
    x : numpy.ndarray
        Input array of shape (n,) or (n, 1)

    Returns
    -------
    numpy.ndarray
        Output array of shape (n,)
    """
    z = np.exp(np.cos(x)) * np.sin(x)
    return z.reshape([-1])


def normal_pdf(x):
    """Standard normal density."""
    z = 1.0 / math.sqrt(2 * math.pi) * np.exp(-0.5 * x**2)
    return z.reshape([-1])


def sigmoid(x):
    """Logistic function 1 / (1 + exp(-x))."""
    z = 1.0 / (1.0 + np.exp(-x))
    return z.reshape([-1])


def identity(x):
    return np.asarray(x, dtype=float).reshape([-1])


Example = namedtuple("Example", ["name", "x_range", "xt_range", "fn"])

EXAMPLES = {
    "sin": Example("sin(x)", (-math.pi, math.pi), (-4 * math.pi, 4 * math.pi), sin),
    "expcos_sin": Example("exp(cos(x)) sin(x)", (0.0, 10.0), (-2.0, 12.0), expcos_sin),
    "normal_pdf": Example("Normal distribution PDF", (-5.0, 5.0), (-5.0, 5.0), normal_pdf),
    "sigmoid": Example("Sigmoid function", (-5.0, 5.0), (-10.0, 10.0), sigmoid),
    "point": Example("Point", (-0.05, 0.05), (-4.0, 4.0), identity),
}


def make_example(name, n=8, nt=200, noise_std=0.0, random_x=False, rng=None):
    """
    Build a 1D regression dataset from one of the registered examples.

    Parameters
    ----------
    name : str
        Key of EXAMPLES.
    n : int
        Number of observations (n >= 2 when random_x is False).
    nt : int
        Number of prediction points (nt >= 2).
    noise_std : float
        Standard deviation of the Gaussian noise added to observations.
    random_x : bool
        Draw observation points uniformly instead of on a regular grid.
    rng : numpy.random.Generator, optional

    Returns
    -------
    xi : ndarray, shape (n, 1)
    zi : ndarray, shape (n,)
    xt : ndarray, shape (nt, 1)
    zt : ndarray, shape (nt,)
    """
    try:
        example = EXAMPLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown example '{name}'. Available: {sorted(EXAMPLES)}"
        ) from None

    box = [[example.x_range[0]], [example.x_range[1]]]
    if random_x:
        xi = designs.randunif(1, n, box, rng=rng)
    else:
        xi = designs.regulargrid(1, n, box)
    xt = designs.regulargrid(1, nt, [[example.xt_range[0]], [example.xt_range[1]]])

    zi = example.fn(xi) + noise_std * gnp.randn(n, rng=rng)
    zt = example.fn(xt)
    return xi, zi, xt, zt
