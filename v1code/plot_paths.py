# -*- coding: utf-8 -*-

"""
plot_paths.py — Coefficient-path and CV-curve figures for elastic-net fits
--------------------------------------------------------------------------
Renders the tables produced by enet_path / cv_enet; no numerics of its own.

  plot_coef_paths(fit, p, fname, lambda_opt=None) : coefficients vs log(lambda)
  plot_cv_curve(cv, p, fname)                     : CV error ± 1 s.e. vs log(lambda)

`p` carries the export flags: 'results_export' (save under p['export_dir'],
default 'results_export') and 'show_plot'.
"""

import os
import numpy as np
import matplotlib.pyplot as plt


def plot_coef_paths(fit, p, fname="coefficients_paths.png", lambda_opt=None):
    names = fit['names'] or [f"x{j+1}" for j in range(fit['nvars'])]
    lam = np.asarray(fit['lambda'])
    fig, ax = plt.subplots(figsize=(5, 5))
    maxl = min(p.get("max_legends", 20), fit['nvars'])
    I = np.argsort(-np.abs(fit['beta'][:, -1]))
    for rank, i in enumerate(I):
        ax.plot(lam, fit['beta'][i, :], linewidth=1.5, label=names[i] if rank < maxl else None)
    if np.all(lam > 0): ax.set_xscale("log")
    if lambda_opt is not None: ax.axvline(lambda_opt, color="k", ls="--", alpha=0.7)
    ax.axhline(0, color="0.6", lw=0.6)
    ax.invert_xaxis()
    _add_grid(ax)
    ax.set_xlabel(r"$\lambda$")
    ax.set_ylabel("Coefficient")
    ax.set_title(p.get("title", rf"Coefficient paths ($\alpha$ = {fit['alpha']:g})"), fontsize=11)
    ax.legend(loc="best", fontsize=8)
    return _save_show(fig, p, fname)


def plot_cv_curve(cv, p, fname="cv_curve.png"):
    lam = np.asarray(cv['lambda'])
    fig, ax = plt.subplots(figsize=(5, 5))
    ax.errorbar(lam, cv['cvm'], yerr=cv['cvsd'], fmt="o", ms=3, color="tab:red",
                ecolor="0.6", elinewidth=1, capsize=2, label=f"CV {cv['measure'].upper()}")
    ax.axvline(cv['lambda_min'], color="k", ls="--", alpha=0.7, label=r"$\lambda_{min}$")
    ax.axvline(cv['lambda_1se'], color="k", ls=":", alpha=0.7, label=r"$\lambda_{1se}$")
    if np.all(lam > 0): ax.set_xscale("log")
    ax.invert_xaxis()
    _add_grid(ax)
    ax.set_xlabel(r"$\lambda$")
    ax.set_ylabel(f"Held-out {cv['measure'].upper()}")
    ax.set_title(p.get("title", rf"{len(cv['fold_errors'])}-fold CV ($\alpha$ = {cv['fit']['alpha']:g})"), fontsize=11)
    ax.legend(loc="upper left", fontsize=9)
    return _save_show(fig, p, fname)


def _add_grid(ax):
    ax.grid(True, which="major", axis="both", linestyle="-", color="0.85", linewidth=0.5)


def _save_show(fig, p, fname):
    out_path = None
    if p.get("results_export", False):
        out_dir = p.get("export_dir", "results_export")
        os.makedirs(out_dir, exist_ok=True)
        out_path = os.path.join(out_dir, fname)
        fig.savefig(out_path, dpi=p.get("dpi", 150), bbox_inches="tight")
        print(f"Saved: {out_path}")
    plt.show() if p.get("show_plot", False) else plt.close(fig)
    return out_path
