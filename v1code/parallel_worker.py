# -*- coding: utf-8 -*-

"""
parallel_worker.py - Separate module for the per-fold cross-validation job

This module contains the function that is parallelized using joblib.
Keeping it in a separate module avoids serialization issues.
"""

import numpy as np

from enet_path import enet_path, enet_predict
from regression_utils import ERROR_MEASURES


def fit_fold(X, y, test_idx, params, measure='mse'):
    """
    Fit the elastic-net path on every row outside `test_idx` and score it on the held-out rows.

    The lambda sequence in `params['lambdas']` is shared by all folds, so the
    returned error vector (one entry per lambda) lines up across folds.
    """
    n = X.shape[0]
    train_idx = np.setdiff1d(np.arange(n), test_idx)
    fit = enet_path(X[train_idx], y[train_idx], params)
    pred = enet_predict(fit, X[test_idx])
    return ERROR_MEASURES[measure](y[test_idx], pred)
