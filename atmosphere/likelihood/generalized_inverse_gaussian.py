# atmosphere/likelihood/generalized_inverse_gaussian.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import math

from scipy.special import kve

from atmosphere.exceptions import InvalidArgumentError
from atmosphere.statistic import GeneralizedInverseGaussianStatistic
from atmosphere.utils import check_finite, check_positive


def proper_generalized_inverse_gaussian_likelihood(
    lambda_, eta, omega, sample, weights=None
):
    """
    Normalized log-likelihood of the generalized inverse Gaussian distribution.

    Parameters
    ----------
    lambda_ : float
        Index parameter.
    eta : float
        Scale parameter, positive.
    omega : float
        Concentration parameter, positive.
    sample : array_like or GeneralizedInverseGaussianStatistic
        Observations, or their precomputed statistic.
    weights : array_like, optional
        Observation weights. Not allowed together with a precomputed
        statistic.

    Returns
    -------
    float
        Weighted mean of the log-density over the sample.

    Notes
    -----
    Uses the eta/omega parameterization of
    :class:`atmosphere.pdf.GeneralizedInverseGaussianPDF`. The Bessel
    function is exponentially scaled, which removes the ``exp(-omega)``
    factor from the normalization.
    """
    lambda_ = check_finite("lambda_", lambda_)
    eta = check_positive("eta", eta)
    omega = check_positive("omega", omega)

    if isinstance(sample, GeneralizedInverseGaussianStatistic):
        if weights is not None:
            raise InvalidArgumentError("weights cannot be combined with a precomputed statistic.")
        stat = sample
    else:
        stat = GeneralizedInverseGaussianStatistic(sample, weights)

    return (
        -math.log(2 * eta * float(kve(lambda_, omega)))
        + (lambda_ - 1) * (stat.meanl - math.log(eta))
        + omega * (1 - (stat.mean / eta + stat.meani * eta) / 2)
    )
