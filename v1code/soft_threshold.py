# -*- coding: utf-8 -*-

import numpy as np

from enet_errors import InvalidInputError


def soft_threshold(z, gamma):
    """
    Soft-thresholding operator S(z, γ) = sign(z) · max(|z| − γ, 0).

    Closed-form minimizer of the one-dimensional lasso problem. Works on
    scalars (returns float) and arrays (returns array of the same shape).
    """
    if gamma < 0:
        raise InvalidInputError(f"Threshold must be non-negative, got {gamma}")
    if np.ndim(z) == 0:
        z = float(z)
        if z > gamma:
            return z - gamma
        if z < -gamma:
            return z + gamma
        return 0.0
    z = np.asarray(z, dtype=float)
    return np.sign(z) * np.maximum(np.abs(z) - gamma, 0.0)
