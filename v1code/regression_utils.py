# -*- coding: utf-8 -*-

"""
regression_utils.py — Reference least squares and prediction-error measures

Purpose
-------
  • `ols_fit`: ordinary least squares (optionally with intercept) via
    `scipy.linalg.lstsq`, used as the unpenalized reference for ridge/lasso fits.
  • `mse`, `mae`: column-wise prediction errors; with y of shape (n,) and
    predictions of shape (n, m) they return one value per lambda.
  • `r_squared`: centered R² of a single prediction vector.
"""

import numpy as np
from scipy.linalg import lstsq


def ols_fit(X, y, fit_intercept=True):
    X = np.asarray(X, dtype=float);  X = X.reshape(-1,1) if X.ndim==1 else X
    y = np.asarray(y, dtype=float).ravel()
    if X.shape[0] != y.shape[0]: raise ValueError(f"Dimension mismatch: y={y.shape[0]}, X={X.shape[0]}")
    Xi = np.column_stack((np.ones(len(y)), X)) if fit_intercept else X
    bhat = lstsq(Xi, y)[0]
    return (float(bhat[0]), bhat[1:]) if fit_intercept else (0.0, bhat)


def _as_cols(y, yhat):
    y = np.asarray(y, dtype=float).ravel(); yhat = np.asarray(yhat, dtype=float)
    return y, (yhat.reshape(-1,1) if yhat.ndim==1 else yhat)


def mse(y, yhat):
    y, yhat = _as_cols(y, yhat)
    return np.mean((yhat - y[:,None])**2, axis=0)


def mae(y, yhat):
    y, yhat = _as_cols(y, yhat)
    return np.mean(np.abs(yhat - y[:,None]), axis=0)


def r_squared(y, yhat):
    y = np.asarray(y, dtype=float).ravel(); yhat = np.asarray(yhat, dtype=float).ravel()
    tss = np.sum((y - y.mean())**2); rss = np.sum((y - yhat)**2)
    return 1 - rss/tss if tss>0 else 0.0


ERROR_MEASURES = {'mse': mse, 'mae': mae}
