# -*- coding: utf-8 -*-

"""
enet_main.py — Ridge, lasso and elastic-net walk-through on one dataset
----------------------------------------------------------------------
Goal:
    Load a regression dataset (CSV or simulated), split it into train/test,
    fit the penalized path for ridge (alpha=0), lasso (alpha=1) and an
    elastic-net mix, select lambda by k-fold CV on the training rows, and
    report coefficients and test error next to the OLS reference.

Inputs:
    cfg (dict, optional): 'csv' + 'response' (+ 'predictors') or simulation
                          settings, split fraction, CV settings, plotting flags.

Outputs:
    - Console summaries of coefficients and test MSE per model
    - Coefficient-path and CV-curve figures in 'results_export/' (if enabled)
    - Returned dict of results per model
"""

import numpy as np

from cross_validate import cv_enet
from data_utils import load_csv, simulate_data, train_test_split
from enet_path import enet_predict, coef_table
from regression_utils import ols_fit, mse, r_squared


def main(cfg=None):
    if cfg is None:
        cfg = {
            'csv': None,                  # path to a CSV file; simulated data when None
            'response': 'y',
            'predictors': None,
            'n': 100, 'beta': (2.0, -1.0, 0.0), 'noise': 1.0,
            'test_frac': 0.2,
            'models': {'ridge': 0.0, 'lasso': 1.0, 'elasticnet': 0.5},
            'kfold': 10, 'nlambda': 100, 'n_jobs': 1, 'seed': 0,
            'results_export': True,
            'show_plot': False
        }

    if cfg.get('csv'):
        X, y = load_csv(cfg['csv'], cfg['response'], cfg.get('predictors'))
    else:
        X, y = simulate_data(cfg.get('n', 100), cfg.get('beta', (2.0, -1.0, 0.0)),
                             cfg.get('noise', 1.0), cfg.get('seed', 0))
        print(f"Simulated {len(y)} observations, true beta = {list(cfg.get('beta', (2.0, -1.0, 0.0)))}")
    names = list(X.columns)

    X_tr, X_te, y_tr, y_te = train_test_split(X, y, cfg.get('test_frac', 0.2), cfg.get('seed', 0))
    print(f"Train: {len(y_tr)} rows | Test: {len(y_te)} rows | Predictors: {len(names)}")

    a0_ols, b_ols = ols_fit(X_tr, y_tr)
    ols_mse = float(mse(y_te, X_te.values @ b_ols + a0_ols)[0])
    results = {'ols': {'a0': a0_ols, 'beta': b_ols, 'test_mse': ols_mse}}

    for label, alpha in cfg.get('models', {'ridge': 0.0, 'lasso': 1.0, 'elasticnet': 0.5}).items():
        print(f"\n=== {label} (alpha={alpha:g}) ===")
        cv = cv_enet(X_tr, y_tr, {'alpha': alpha, 'kfold': cfg.get('kfold', 10),
                                  'nlambda': cfg.get('nlambda', 100), 'seed': cfg.get('seed', 0),
                                  'n_jobs': cfg.get('n_jobs', 1)})
        pred = enet_predict(cv['fit'], X_te, [cv['lambda_min'], cv['lambda_1se']])
        test_mse = mse(y_te, pred)
        results[label] = {
            'alpha': alpha, 'cv': cv, 'coef_table': coef_table(cv['fit'], names),
            'test_mse_min': float(test_mse[0]), 'test_mse_1se': float(test_mse[1]),
            'test_r2_min': r_squared(y_te, pred[:, 0])
        }
        _print_summary(label, cv, names, results[label])
        if cfg.get('results_export', False) or cfg.get('show_plot', False):
            _plot(label, cv, cfg)

    _print_comparison(results, names)
    print("\nDone!")
    return results


def _plot(label, cv, cfg):
    from plot_paths import plot_coef_paths, plot_cv_curve
    p = {'results_export': cfg.get('results_export', False), 'show_plot': cfg.get('show_plot', False),
         'export_dir': cfg.get('export_dir', 'results_export')}
    plot_coef_paths(cv['fit'], p, f"{label}_coefficients_paths.png", lambda_opt=cv['lambda_min'])
    plot_cv_curve(cv, p, f"{label}_cv_curve.png")


def _print_summary(label, cv, names, res):
    i = cv['index_min']
    print(f"  lambda.min: {cv['lambda_min']:.4g}  (CV MSE {cv['cvm'][i]:.4f} ± {cv['cvsd'][i]:.4f})")
    print(f"  lambda.1se: {cv['lambda_1se']:.4g}")
    print(f"  Non-zero coefficients at lambda.min: {int(cv['nzero'][i])} / {len(names)}")
    print(f"  Intercept: {cv['a0_min']:.4f}")
    for nm, b in zip(names, cv['coef_min']):
        print(f"    {nm:>12s}: {b: .4f}")
    print(f"  Test MSE: {res['test_mse_min']:.4f} (lambda.min), {res['test_mse_1se']:.4f} (lambda.1se)")


def _print_comparison(results, names):
    print("\n" + "="*60)
    print("COEFFICIENTS AT lambda.min")
    print("="*60)
    labels = [k for k in results if k != 'ols']
    print(f"{'':>12s} " + " ".join(f"{k:>11s}" for k in ['ols'] + labels))
    rows = [('(Intercept)', [results['ols']['a0']] + [results[k]['cv']['a0_min'] for k in labels])]
    rows += [(nm, [results['ols']['beta'][j]] + [results[k]['cv']['coef_min'][j] for k in labels])
             for j, nm in enumerate(names)]
    rows += [('test MSE', [results['ols']['test_mse']] + [results[k]['test_mse_min'] for k in labels])]
    for nm, vals in rows:
        print(f"{nm:>12s} " + " ".join(f"{v:11.4f}" for v in np.asarray(vals, dtype=float)))
    print("="*60)


if __name__ == "__main__":
    main()
