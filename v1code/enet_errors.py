# -*- coding: utf-8 -*-

"""
enet_errors.py - Error and warning categories raised by the elastic-net solver

InvalidInputError  : bad dimensions, out-of-range options, empty input (fatal).
ConvergenceWarning : coordinate descent hit its iteration cap; the best-effort
                     coefficients are still returned.
"""


class InvalidInputError(ValueError):
    """Raised before fitting when inputs or options cannot be used."""


class ConvergenceWarning(UserWarning):
    """Issued when coordinate descent stops at max_iter without meeting tol."""
