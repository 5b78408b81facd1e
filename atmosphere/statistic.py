# atmosphere/statistic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sufficient statistics of samples, used by the likelihood functions.
"""
import numpy as np

from atmosphere.exceptions import InvalidArgumentError


class GeneralizedInverseGaussianStatistic:
    """
    Sufficient statistic of the generalized inverse Gaussian distribution.

    Parameters
    ----------
    sample : array_like, shape (n,)
        Positive, finite observations.
    weights : array_like, shape (n,), optional
        Nonnegative weights with a positive sum. They are normalized to
        sum to one. Uniform weights are used by default.

    Attributes
    ----------
    mean : float
        Weighted mean of ``x``.
    meani : float
        Weighted mean of ``1 / x``.
    meanl : float
        Weighted mean of ``log(x)``.
    """

    def __init__(self, sample, weights=None):
        x = np.asarray(sample, dtype=float).reshape(-1)
        if x.shape[0] == 0:
            raise InvalidArgumentError("sample must not be empty.")
        if not np.all(np.isfinite(x)) or not np.all(x > 0):
            raise InvalidArgumentError("sample values must be positive and finite.")

        if weights is None:
            w = np.full(x.shape, 1.0 / x.shape[0])
        else:
            w = np.asarray(weights, dtype=float).reshape(-1)
            if w.shape != x.shape:
                raise InvalidArgumentError(
                    f"weights has length {w.shape[0]}, sample has length {x.shape[0]}."
                )
            if not np.all(np.isfinite(w)) or np.any(w < 0):
                raise InvalidArgumentError("weights must be nonnegative and finite.")
            s = w.sum()
            if not s > 0:
                raise InvalidArgumentError("weights must have a positive sum.")
            w = w / s

        self.mean = float(w @ x)
        self.meani = float(w @ (1.0 / x))
        self.meanl = float(w @ np.log(x))

    def __repr__(self):
        return (
            f"GeneralizedInverseGaussianStatistic(mean={self.mean}, "
            f"meani={self.meani}, meanl={self.meanl})"
        )
