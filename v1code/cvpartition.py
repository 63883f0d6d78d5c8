# -*- coding: utf-8 -*-

import numpy as np

from enet_errors import InvalidInputError


def _check_nk(n, k):
    if k < 2 or k > n:
        raise InvalidInputError(f"Number of folds must lie in [2, n={n}], got {k}")


def cvpartition_random(n, k, seed=0):
    """
    Random partition of range(n) into k folds for cross-validation.

    Fold sizes differ by at most one. The same (n, k, seed) always gives the
    same folds.

    Parameters:
    - n: Number of observations
    - k: Number of folds
    - seed: Seed for the permutation

    Returns:
    - indices: List of k sorted index arrays, one per fold
    """
    _check_nk(n, k)
    perm = np.random.RandomState(seed).permutation(n)
    foldid = np.empty(n, dtype=int)
    foldid[perm] = np.arange(n) % k
    return partition_from_foldid(foldid)


def cvpartition_contiguous(n, k):
    """
    Contiguous partitions for ordered (e.g. time-indexed) data, where random
    folds would mix neighbouring, highly correlated observations.
    The last fold gets the remaining observations.
    """
    _check_nk(n, k)
    s = n // k
    indices = [np.arange(s*i, s*(i+1)) for i in range(k-1)]
    indices.append(np.arange(s*(k-1), n))
    return indices


def partition_from_foldid(foldid):
    """Split a length-n vector of fold labels into one index array per distinct label."""
    foldid = np.asarray(foldid).ravel()
    labels = np.unique(foldid)
    if len(labels) < 2:
        raise InvalidInputError("foldid must contain at least two distinct folds")
    return [np.where(foldid == f)[0] for f in labels]


def foldid_from_partition(parts, n):
    """Inverse of partition_from_foldid: fold number (0..k-1) of every observation."""
    foldid = np.full(n, -1, dtype=int)
    for f, idx in enumerate(parts):
        foldid[idx] = f
    return foldid
