# -*- coding: utf-8 -*-

"""
cross_validate.py — k-fold cross-validation of the elastic-net path

Purpose
-------
Selects lambda for a fixed alpha. The full data is fitted once to fix the
lambda sequence; every fold then refits the whole path on its training rows
(warm-started across lambda) and scores each lambda on its held-out rows.
Per-lambda fold errors are aggregated into a mean and a standard error.

Partitioning
------------
  - 'random'     : plain random folds from RandomState(seed) (default).
  - 'contiguous' : contiguous blocks, for ordered data.
  - foldid       : explicit fold label per observation (overrides the above).

I/O
---
cv_enet(X, y, params) -> cv dict
  'lambda', 'cvm', 'cvsd', 'cvup', 'cvlo', 'nzero'  : per-lambda arrays
  'lambda_min', 'index_min'  : minimum mean error
  'lambda_1se', 'index_1se'  : largest lambda within one s.e. of the minimum
  'a0_min', 'coef_min', 'a0_1se', 'coef_1se' : full-data coefficients at those lambdas
  'fold_errors' (k×m), 'foldid' (n,), 'fit' (full-data path), 'measure'

Notes
-----
• Folds are independent; with n_jobs != 1 they run through joblib.Parallel.
• s.e. = sample std of the k fold errors / sqrt(k).
"""

from typing import Dict
import numpy as np
import pandas as pd
from joblib import Parallel, delayed
from tqdm import tqdm

from cvpartition import cvpartition_random, cvpartition_contiguous, partition_from_foldid, foldid_from_partition
from enet_errors import InvalidInputError
from enet_path import DEFAULTS, check_xy, enet_path
from parallel_worker import fit_fold
from parse_config import parse_config
from regression_utils import ERROR_MEASURES


CV_DEFAULTS = dict(DEFAULTS, kfold=10, seed=0, foldid=None, partition='random',
                   measure='mse', n_jobs=1, backend=None)


def cv_enet(X, y, params=None) -> Dict:
    p = parse_config(params, CV_DEFAULTS)
    X, y, names = check_xy(X, y)
    n = len(y)
    if p['measure'] not in ERROR_MEASURES:
        raise InvalidInputError(f"Unknown error measure: {p['measure']}")
    parts = _partition(n, p)
    k = len(parts)

    fit_params = {key: p[key] for key in DEFAULTS}
    fit = enet_path(pd.DataFrame(X, columns=names) if names else X, y, fit_params)
    fold_params = dict(fit_params, lambdas=fit['lambda'], verbose=False)

    if p['verbose']:
        print(f"Cross-validating alpha={fit['alpha']:g}: {k} folds x {len(fit['lambda'])} lambdas")
    if p['n_jobs'] == 1:
        errs = [fit_fold(X, y, idx, fold_params, p['measure'])
                for idx in tqdm(parts, desc="CV folds", disable=not p['verbose'])]
    else:
        errs = Parallel(n_jobs=p['n_jobs'], backend=p['backend'])(
            delayed(fit_fold)(X, y, idx, fold_params, p['measure']) for idx in parts)
    fold_errors = np.vstack(errs)

    cvm = fold_errors.mean(axis=0)
    cvsd = fold_errors.std(axis=0, ddof=1) / np.sqrt(k)
    # argmin returns the first (largest-lambda) minimizer on ties
    i_min = int(np.argmin(cvm))
    i_1se = int(np.where(cvm <= cvm[i_min] + cvsd[i_min])[0][0])

    lam = fit['lambda']
    cv = {
        'lambda': lam, 'cvm': cvm, 'cvsd': cvsd, 'cvup': cvm + cvsd, 'cvlo': cvm - cvsd,
        'nzero': fit['df'], 'measure': p['measure'],
        'lambda_min': float(lam[i_min]), 'index_min': i_min,
        'lambda_1se': float(lam[i_1se]), 'index_1se': i_1se,
        'a0_min': float(fit['a0'][i_min]), 'coef_min': fit['beta'][:, i_min],
        'a0_1se': float(fit['a0'][i_1se]), 'coef_1se': fit['beta'][:, i_1se],
        'fold_errors': fold_errors, 'foldid': foldid_from_partition(parts, n), 'fit': fit
    }
    for v in cv.values():
        if isinstance(v, np.ndarray): v.flags.writeable = False
    if p['verbose']:
        print(f"  lambda.min={cv['lambda_min']:.4g} (CV {p['measure']}={cvm[i_min]:.4g}), "
              f"lambda.1se={cv['lambda_1se']:.4g}")
    return cv


def _partition(n, p):
    if p['foldid'] is not None:
        foldid = np.asarray(p['foldid']).ravel()
        if len(foldid) != n:
            raise InvalidInputError(f"foldid has length {len(foldid)}, expected {n}")
        return partition_from_foldid(foldid)
    mode = p['partition']
    if   mode == 'random':     return cvpartition_random(n, int(p['kfold']), p['seed'])
    elif mode == 'contiguous': return cvpartition_contiguous(n, int(p['kfold']))
    else: raise InvalidInputError(f"Unknown partition method: {mode}")


def cv_table(cv) -> pd.DataFrame:
    """Cross-validation table: one row per lambda with mean error, s.e. band and non-zero count."""
    return pd.DataFrame({'cvm': cv['cvm'], 'cvsd': cv['cvsd'], 'cvup': cv['cvup'],
                         'cvlo': cv['cvlo'], 'nzero': cv['nzero']},
                        index=pd.Index(cv['lambda'], name='lambda'))
