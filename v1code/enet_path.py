# -*- coding: utf-8 -*-

"""
enet_path.py - Elastic-net regularization path by warm-started coordinate descent

Fits ridge (alpha=0), lasso (alpha=1) or any elastic-net mix in between over a
decreasing lambda sequence. Each lambda starts from the solution at the previous,
larger lambda, so the path is reproducible for identical inputs and lambdas.

Objective (per lambda, on standardized predictors):
    (1/2n)·RSS + lambda·( alpha·||b||₁ + (1-alpha)/2·||b||₂² )

The returned fit is a dict of read-only arrays on the original predictor scale:
    'lambda'    (m,)    decreasing lambda sequence
    'a0'        (m,)    intercepts
    'beta'      (p, m)  coefficients, one column per lambda
    'df'        (m,)    number of non-zero coefficients
    'n_iter'    (m,)    coordinate-descent sweeps used
    'converged' (m,)    False where max_iter was hit
plus 'alpha', 'nobs', 'nvars', 'names', 'fit_intercept', 'standardize'.
"""

import warnings
import numpy as np
import pandas as pd

from cd_enet import cd_enet
from enet_errors import InvalidInputError, ConvergenceWarning
from lambda_path import lambda_path, check_lambdas
from parse_config import parse_config
from standardize import standardize, unstandardize


DEFAULTS = {
    'alpha': 1.0, 'lambdas': None, 'nlambda': 100, 'lambda_min_ratio': 1e-4,
    'standardize': True, 'fit_intercept': True,
    'tol': 1e-7, 'max_iter': 100000, 'verbose': False
}


def check_xy(X, y):
    """Coerce X (n×p) and y (n,) to float arrays; raise InvalidInputError on bad shapes/values."""
    names = [str(c) for c in X.columns] if isinstance(X, pd.DataFrame) else None
    X = np.asarray(X, dtype=float); y = np.asarray(y, dtype=float).ravel()
    X = X.reshape(-1, 1) if X.ndim == 1 else X
    if X.ndim != 2:
        raise InvalidInputError(f"X must be 2-dimensional, got shape {X.shape}")
    n, p = X.shape
    if n == 0:
        raise InvalidInputError("X has no observations")
    if p == 0:
        raise InvalidInputError("X has no predictors")
    if n != len(y):
        raise InvalidInputError(f"Dimension mismatch: X has {n} rows, y has {len(y)}")
    if not (np.all(np.isfinite(X)) and np.all(np.isfinite(y))):
        raise InvalidInputError("X and y must not contain NaN or infinite values")
    return X, y, names


def enet_path(X, y, params=None):
    p = parse_config(params, DEFAULTS)
    X, y, names = check_xy(X, y)
    n, nvars = X.shape
    alpha, verbose = float(p['alpha']), p['verbose']

    Xs, ys, x_mean, x_scale, y_mean = standardize(X, y, p['standardize'], p['fit_intercept'], verbose)
    Xs = np.asfortranarray(Xs)
    if p['lambdas'] is None:
        lambdas = lambda_path(Xs, ys, alpha, p['nlambda'], p['lambda_min_ratio'])
    else:
        lambdas = check_lambdas(p['lambdas'])
    m = len(lambdas)

    xsq = np.einsum('ij,ij->j', Xs, Xs) / n
    beta, a0 = np.zeros((nvars, m)), np.zeros(m)
    n_iter, converged = np.zeros(m, dtype=int), np.ones(m, dtype=bool)
    b = np.zeros(nvars)
    if verbose: print(f"Elastic net path: alpha={alpha:g}, {m} lambdas, n={n}, p={nvars}")
    for i, lam in enumerate(lambdas):
        b, n_iter[i], converged[i] = cd_enet(Xs, ys, lam, alpha, b, p['tol'], p['max_iter'], xsq)
        a0[i], beta[:, i] = unstandardize(b, x_mean, x_scale, y_mean, p['fit_intercept'])
        if not converged[i]:
            warnings.warn(f"Coordinate descent did not converge at lambda={lam:.6g} "
                          f"after {p['max_iter']} iterations", ConvergenceWarning)
        if verbose: print(f"  {i+1}/{m}\tlambda={lam:.4g}\tnonzero={int(np.sum(b != 0))}\tsweeps={n_iter[i]}")

    fit = {
        'lambda': lambdas, 'a0': a0, 'beta': beta, 'df': np.sum(beta != 0, axis=0),
        'n_iter': n_iter, 'converged': converged,
        'alpha': alpha, 'nobs': n, 'nvars': nvars, 'names': names,
        'fit_intercept': p['fit_intercept'], 'standardize': p['standardize']
    }
    for v in fit.values():
        if isinstance(v, np.ndarray): v.flags.writeable = False
    return fit


def enet_coef(fit, s=None):
    """
    Coefficients (a0, beta) along the path, or at penalties `s`.

    Values of `s` between path points are linearly interpolated in lambda;
    values outside the path are clamped to its ends.
    """
    if s is None:
        return fit['a0'], fit['beta']
    s = np.atleast_1d(np.asarray(s, dtype=float)).ravel()
    if not np.all(np.isfinite(s)) or np.any(s < 0):
        raise InvalidInputError("lambda values must be finite and non-negative")
    lam = fit['lambda']
    if len(lam) == 1:
        return np.repeat(fit['a0'], len(s)), np.repeat(fit['beta'], len(s), axis=1)
    xp = lam[::-1]
    sc = np.clip(s, xp[0], xp[-1])
    a0 = np.interp(sc, xp, fit['a0'][::-1])
    beta = np.vstack([np.interp(sc, xp, row[::-1]) for row in fit['beta']])
    return a0, beta


def enet_predict(fit, X, s=None):
    """Predictions (n_new × m) for every lambda on the path, or for the penalties `s`."""
    X = np.asarray(X, dtype=float).reshape(-1, fit['nvars'])
    a0, beta = enet_coef(fit, s)
    return X @ beta + a0


def coef_table(fit, names=None):
    """Coefficient table: one row per lambda, intercept followed by one column per predictor."""
    names = names or fit['names'] or [f'x{j+1}' for j in range(fit['nvars'])]
    if len(names) != fit['nvars']:
        raise InvalidInputError(f"Expected {fit['nvars']} predictor names, got {len(names)}")
    df = pd.DataFrame(fit['beta'].T, columns=list(names), index=pd.Index(fit['lambda'], name='lambda'))
    df.insert(0, '(Intercept)', fit['a0'])
    return df
