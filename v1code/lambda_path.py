# -*- coding: utf-8 -*-

import numpy as np

from enet_errors import InvalidInputError

# Ridge (alpha=0) has no finite lambda_max; this floor stands in for alpha=0 only.
ALPHA_FLOOR = 1e-3


def lambda_max(Xs, ys, alpha):
    """
    Smallest lambda at which every penalized coefficient is exactly zero.

    With the zero vector as the current solution the coordinate update is
    S(X_j'y/n, lambda*alpha), so all coordinates stay at zero as soon as
    lambda*alpha >= max_j |X_j'y|/n.
    """
    n = Xs.shape[0]
    gmax = np.max(np.abs(Xs.T @ ys)) / n
    # cover the rounding error of X_j'y (bounded by n·eps·Σ|x_ij·y_i|) so the zero test holds
    gmax += np.finfo(float).eps * np.max(np.abs(Xs).T @ np.abs(ys))
    a = alpha if alpha > 0 else ALPHA_FLOOR
    lmax = gmax / a
    while lmax * a < gmax:
        lmax = np.nextafter(lmax, np.inf)
    return float(lmax)


def lambda_path(Xs, ys, alpha, nlambda=100, lambda_min_ratio=1e-4):
    """
    Decreasing, log-spaced lambda sequence from lambda_max to lambda_max*lambda_min_ratio.

    A response with no variation around its mean gives lambda_max = 0; the path is
    then the single value 0.
    """
    lmax = lambda_max(Xs, ys, alpha)
    if lmax <= 0:
        return np.zeros(1)
    if nlambda == 1:
        return np.array([lmax])
    path = np.geomspace(lmax, lmax * lambda_min_ratio, int(nlambda))
    path[0] = lmax
    return path


def check_lambdas(lambdas):
    """Validate a user-supplied lambda (scalar or sequence); return it sorted decreasing."""
    lam = np.atleast_1d(np.asarray(lambdas, dtype=float)).ravel()
    if lam.size == 0:
        raise InvalidInputError("Empty lambda sequence")
    if not np.all(np.isfinite(lam)) or np.any(lam < 0):
        raise InvalidInputError("lambda values must be finite and non-negative")
    return np.sort(lam)[::-1].copy()
