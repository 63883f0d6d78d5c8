# -*- coding: utf-8 -*-

"""
data_utils.py — Loading, simulating and splitting regression data
----------------------------------------------------------------
  load_csv(filename, response, predictors=None) -> (X DataFrame, y Series)
  simulate_data(n, beta, noise, seed)           -> (X DataFrame, y Series)
  train_test_split(X, y, test_frac, seed)       -> (X_train, X_test, y_train, y_test)

Rows with missing values in the used columns are dropped; more than 25%
missing rows is treated as a data problem.
"""

import numpy as np
import pandas as pd


def load_csv(filename, response, predictors=None):
    """
    Load a regression dataset from CSV.

    Parameters
    ----------
    filename : str or Path
    response : str
        Name of the response column.
    predictors : list[str], optional
        Predictor columns; defaults to every numeric column except the response.

    Returns
    -------
    X : pd.DataFrame
    y : pd.Series
    """
    DATA = pd.read_csv(filename)
    if response not in DATA.columns:
        raise ValueError(f"Response column '{response}' not found in {filename}")
    if predictors is None:
        predictors = [c for c in DATA.select_dtypes(include=[np.number]).columns if c != response]
    missing = [c for c in predictors if c not in DATA.columns]
    if missing:
        raise ValueError(f"Predictor column(s) not found: {', '.join(missing)}")

    complete_rows = DATA[[response] + list(predictors)].notna().all(axis=1)
    n_complete = int(complete_rows.sum())
    if n_complete < 0.75 * len(DATA):
        raise ValueError(
            f"More than 25% of observations need to be dropped! "
            f"({len(DATA) - n_complete} / {len(DATA)})"
        )
    if n_complete < len(DATA):
        print(f"Dropped {len(DATA) - n_complete} rows with missing values.")
    DATA_clean = DATA.loc[complete_rows].reset_index(drop=True)

    X = DATA_clean[list(predictors)].astype(float)
    y = DATA_clean[response].astype(float)
    print(f"Loaded {len(y)} observations with {X.shape[1]} predictors from {filename}.")
    return X, y


def simulate_data(n=100, beta=(2.0, -1.0, 0.0), noise=1.0, seed=0):
    """Independent standard-normal predictors and y = X·beta + N(0, noise²) errors."""
    rs = np.random.RandomState(seed)
    beta = np.asarray(beta, dtype=float)
    X = rs.standard_normal((n, len(beta)))
    y = X @ beta + noise * rs.standard_normal(n)
    cols = [f"x{j+1}" for j in range(len(beta))]
    return pd.DataFrame(X, columns=cols), pd.Series(y, name="y")


def train_test_split(X, y, test_frac=0.2, seed=0):
    n = len(y)
    if not 0 < test_frac < 1:
        raise ValueError(f"test_frac must lie in (0, 1), got {test_frac}")
    n_test = int(round(n * test_frac))
    if n_test == 0 or n_test == n:
        raise ValueError(f"Cannot split {n} observations with test_frac={test_frac}")
    perm = np.random.RandomState(seed).permutation(n)
    idx_test, idx_train = np.sort(perm[:n_test]), np.sort(perm[n_test:])
    take = lambda d, idx: d.iloc[idx].reset_index(drop=True) if hasattr(d, 'iloc') else np.asarray(d)[idx]
    return take(X, idx_train), take(X, idx_test), take(y, idx_train), take(y, idx_test)
