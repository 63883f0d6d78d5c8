# -*- coding: utf-8 -*-

"""
standardize.py - Column centering/scaling before the penalized fit and the inverse map

standardize(X, y, standardize=True, fit_intercept=True, verbose=False)
    -> (Xs, ys, x_mean, x_scale, y_mean)
unstandardize(beta_s, x_mean, x_scale, y_mean, fit_intercept=True) -> (a0, beta)

Notes
-----
• Centering (X and y) is tied to the intercept: without an intercept nothing is centered.
• Scales use the population standard deviation (ddof=0).
• Constant (zero-range) columns keep scale 1, so they are treated as already standardized.
"""

import numpy as np


def standardize(X, y, standardize=True, fit_intercept=True, verbose=False):
    X = np.asarray(X, dtype=float); y = np.asarray(y, dtype=float).ravel()
    p = X.shape[1]
    if fit_intercept:
        x_mean, y_mean = X.mean(axis=0), float(y.mean())
    else:
        x_mean, y_mean = np.zeros(p), 0.0
    Xs, ys = X - x_mean, y - y_mean

    x_scale = np.ones(p)
    if standardize:
        s = X.std(axis=0, ddof=0)
        flat = np.ptp(X, axis=0) == 0
        if np.any(flat) and verbose:
            print(f"Zero-variance column(s) {np.where(flat)[0].tolist()}: using scale 1")
        s[flat] = 1.0
        x_scale = s
        Xs = Xs / x_scale
    return Xs, ys, x_mean, x_scale, y_mean


def unstandardize(beta_s, x_mean, x_scale, y_mean, fit_intercept=True):
    """Map standardized-scale coefficients back to the original predictor scale."""
    beta = np.asarray(beta_s, dtype=float) / x_scale
    a0 = float(y_mean - x_mean @ beta) if fit_intercept else 0.0
    return a0, beta
