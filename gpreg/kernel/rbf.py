# gpreg/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp


def rbf_kernel(h2):
    """Squared exponential kernel.

    .. math::
        k(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h2 : gnp.array
        Squared scaled distances between points.

    Returns
    -------
    gnp.array
        Kernel values, same shape as `h2`.
    """
    return gnp.exp(-0.5 * h2)


def rbf_covariance_ii_or_tt(x, variance, lengthscale, pairwise=False):
    """Covariance of the points x with themselves.

    .. math::
        K_{ij} = v^2 \\exp\\left(-\\frac{\\|x_i - x_j\\|^2}{2 l^2}\\right)

    Parameters
    ----------
    x : gnp.array, shape (n, d)
    variance : float
        Signal scale v.
    lengthscale : float
        Length-scale l.
    pairwise : bool
        If True, return diag vector; else full covariance.

    Returns
    -------
    gnp.array
        (n,n) matrix or (n,) vector if pairwise.
    """
    sigma2 = variance * variance
    if pairwise:
        return sigma2 * gnp.ones((x.shape[0],))
    H2 = gnp.squared_scaled_distance(1.0 / lengthscale, x, x)
    return sigma2 * rbf_kernel(H2)


def rbf_covariance_it(x, y, variance, lengthscale, pairwise=False):
    """Cross-covariance between points x and y.

    Parameters
    ----------
    x : gnp.array, shape (nx, d)
    y : gnp.array, shape (ny, d)
    variance : float
    lengthscale : float
    pairwise : bool
        If True, return elementwise k(x_i, y_i); else (nx, ny).

    Returns
    -------
    gnp.array
        (nx, ny) matrix or (n,) vector if pairwise.
    """
    sigma2 = variance * variance
    invrho = 1.0 / lengthscale
    if pairwise:
        H2 = gnp.squared_scaled_distance_elementwise(invrho, x, y)
    else:
        H2 = gnp.squared_scaled_distance(invrho, x, y)
    return sigma2 * rbf_kernel(H2)


def rbf_covariance(x, y, variance, lengthscale, pairwise=False):
    """RBF covariance. Wrapper.

    Both the symmetric case (``y is x`` or ``y is None``) and the cross
    case use the same squared-distance formula, so
    ``rbf_covariance(a, b, ...)[i, j] == rbf_covariance(b, a, ...)[j, i]``.

    Parameters
    ----------
    x : gnp.array, shape (nx, d)
    y : gnp.array or None
    variance : float
    lengthscale : float
    pairwise : bool

    Returns
    -------
    gnp.array
    """
    if y is x or y is None:
        return rbf_covariance_ii_or_tt(x, variance, lengthscale, pairwise)
    return rbf_covariance_it(x, y, variance, lengthscale, pairwise)
