# -*- coding: utf-8 -*-

"""
cd_enet.py — Cyclic coordinate descent for the elastic-net problem at one lambda

Minimizes
    (1/2n)·||y - Xb||² + lambda·( alpha·||b||₁ + (1-alpha)/2·||b||₂² )
on already centered/scaled data (no intercept column).

Coordinate update
-----------------
    b_j ← S( (1/n)·x_j'r + (1/n)·||x_j||²·b_j , lambda·alpha ) / ( (1/n)·||x_j||² + lambda·(1-alpha) )
where r is the full residual y - Xb, kept up to date after every change.

Stopping
--------
  • converged when max_j |Δb_j| over one full sweep falls below `tol`;
  • otherwise stops after `max_iter` sweeps and reports converged=False.

Inputs / outputs
----------------
  cd_enet(Xs, ys, lam, alpha, beta0=None, tol=1e-7, max_iter=100000, xsq=None)
      → (b, n_iter, converged)
    • beta0 : warm start (copied, never modified).
    • xsq   : optional precomputed (1/n)·||x_j||², shared across a lambda path.
"""

import numpy as np
from typing import Optional, Tuple

from soft_threshold import soft_threshold


def cd_enet(Xs: np.ndarray, ys: np.ndarray, lam: float, alpha: float,
            beta0: Optional[np.ndarray]=None, tol: float=1e-7, max_iter: int=100000,
            xsq: Optional[np.ndarray]=None) -> Tuple[np.ndarray,int,bool]:
    n,p = Xs.shape
    if xsq is None: xsq = np.einsum('ij,ij->j', Xs, Xs) / n
    b = np.zeros(p) if beta0 is None else np.array(beta0, dtype=float)
    l1, denom = lam*alpha, xsq + lam*(1.0 - alpha)
    # all-zero columns with no ridge term have no unique solution; pin them at 0
    b[denom <= 0] = 0.0
    r = ys - Xs @ b
    converged, it = False, 0
    while it < max_iter:
        it += 1; dmax = 0.0
        for j in range(p):
            if denom[j] <= 0: continue
            xj, bj = Xs[:,j], b[j]
            z = (xj @ r) / n + xsq[j]*bj
            bnew = soft_threshold(z, l1) / denom[j]
            d = bnew - bj
            if d != 0.0:
                r -= d*xj; b[j] = bnew
                if abs(d) > dmax: dmax = abs(d)
        if dmax < tol:
            converged = True; break
    return b, it, converged
