# atmosphere/pdf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Probability density functions.

Defined objects
---------------
PDF
    Abstract density: ``pdf(x)`` returns a nonnegative real, zero outside
    the support, NaN for NaN input.
FunctionPDF, to_pdf
    Adapter from a plain callable.
NormalPDF, GammaPDF, InverseGammaPDF, GeneralizedGammaPDF,
InverseGaussianPDF, GeneralizedInverseGaussianPDF
    Closed-form densities, typically fed to
    :class:`atmosphere.cdf.NumericCDF`.

Notes
-----
Densities are scalar callables evaluated in log space. They are meant to be
called many times by ``scipy.integrate.quad`` and avoid overflow errors of
the ``math`` module for extreme arguments.
"""

import math
from abc import ABC, abstractmethod

from scipy.special import gammaln, kve

from atmosphere.exceptions import InvalidArgumentError
from atmosphere.num import safe_exp
from atmosphere.utils import check_finite, check_positive, convert_to

_LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


class PDF(ABC):
    """Probability density function interface."""

    @abstractmethod
    def __call__(self, x: float) -> float:
        """Evaluate the density at ``x``."""


class FunctionPDF(PDF):
    """PDF backed by a plain callable."""

    def __init__(self, func):
        self.func = func

    def __call__(self, x: float) -> float:
        return float(self.func(x))

    def __repr__(self):
        return f"FunctionPDF({self.func!r})"


def to_pdf(func) -> PDF:
    """Convert a callable to a :class:`PDF` (PDF instances are returned as is)."""
    return convert_to(PDF, func, FunctionPDF)


class NormalPDF(PDF):
    """Normal density with mean ``mu`` and standard deviation ``sigma``."""

    def __init__(self, mu: float = 0.0, sigma: float = 1.0):
        self.mu = check_finite("mu", mu)
        self.sigma = check_positive("sigma", sigma)
        self._log_norm = math.log(self.sigma) + _LOG_SQRT_2PI

    def __call__(self, x: float) -> float:
        z = (float(x) - self.mu) / self.sigma
        return safe_exp(-0.5 * z * z - self._log_norm)


class GammaPDF(PDF):
    """Gamma density with shape ``shape`` and scale ``scale``."""

    def __init__(self, shape: float, scale: float):
        self.shape = check_positive("shape", shape)
        self.scale = check_positive("scale", scale)
        self._log_norm = math.log(self.scale) + float(gammaln(self.shape))

    def __call__(self, x: float) -> float:
        x = float(x)
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 0.0
        z = x / self.scale
        if z == 0:
            if self.shape == 1:
                return 1.0 / self.scale
            return 0.0 if self.shape > 1 else math.inf
        return safe_exp((self.shape - 1) * math.log(z) - z - self._log_norm)


class InverseGammaPDF(PDF):
    """Inverse-gamma density with shape ``shape`` and scale ``scale``."""

    def __init__(self, shape: float, scale: float):
        self.shape = check_positive("shape", shape)
        self.scale = check_positive("scale", scale)
        self._log_norm = float(gammaln(self.shape)) - self.shape * math.log(self.scale)

    def __call__(self, x: float) -> float:
        x = float(x)
        if x < 0:
            return 0.0
        if x == 0 or math.isinf(x):
            return 0.0
        return safe_exp(
            -(self.shape + 1) * math.log(x) - self.scale / x - self._log_norm
        )


class GeneralizedGammaPDF(PDF):
    """
    Generalized gamma density.

    Parameters
    ----------
    shape : float
        Shape parameter ``a > 0``.
    power : float
        Power parameter ``p``, finite and non-zero.
    scale : float, optional
        Scale parameter ``s > 0``.

    Notes
    -----
    ``f(x) = |p| (x/s)^(a p - 1) exp(-(x/s)^p) / (s Gamma(a))`` for ``x > 0``.
    """

    def __init__(self, shape: float, power: float, scale: float = 1.0):
        self.shape = check_positive("shape", shape)
        self.power = check_finite("power", power)
        if self.power == 0:
            raise InvalidArgumentError("power must be non-zero.")
        self.scale = check_positive("scale", scale)
        self._log_norm = (
            math.log(self.scale) + float(gammaln(self.shape)) - math.log(abs(self.power))
        )

    def __call__(self, x: float) -> float:
        x = float(x)
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 0.0
        if x == 0:
            if self.power < 0:
                return 0.0
            k = self.shape * self.power - 1
            if k == 0:
                return math.exp(-self._log_norm)
            return 0.0 if k > 0 else math.inf
        log_z = math.log(x / self.scale)
        zp = safe_exp(self.power * log_z)
        return safe_exp(
            (self.shape * self.power - 1) * log_z - zp - self._log_norm
        )


class InverseGaussianPDF(PDF):
    """Inverse-Gaussian (Wald) density with mean ``mean`` and shape ``shape``."""

    def __init__(self, mean: float, shape: float):
        self.mean = check_positive("mean", mean)
        self.shape = check_positive("shape", shape)

    def __call__(self, x: float) -> float:
        x = float(x)
        if x < 0:
            return 0.0
        if x == 0 or math.isinf(x):
            return 0.0
        d = x - self.mean
        return safe_exp(
            0.5 * (math.log(self.shape) - 3 * math.log(x))
            - _LOG_SQRT_2PI
            - self.shape * d * d / (2 * self.mean * self.mean * x)
        )


class GeneralizedInverseGaussianPDF(PDF):
    """
    Generalized inverse Gaussian density, eta/omega parameterization.

    Parameters
    ----------
    lambda_ : float
        Index parameter.
    eta : float
        Scale parameter, ``eta > 0``.
    omega : float
        Concentration parameter, ``omega > 0``.

    Notes
    -----
    ``f(x) = (x/eta)^(lambda-1) exp(-omega/2 (x/eta + eta/x)) / (2 eta K_lambda(omega))``.
    The Bessel function is evaluated exponentially scaled (``scipy.special.kve``).
    """

    def __init__(self, lambda_: float, eta: float, omega: float):
        self.lambda_ = check_finite("lambda_", lambda_)
        self.eta = check_positive("eta", eta)
        self.omega = check_positive("omega", omega)
        k = float(kve(self.lambda_, self.omega))
        if not (math.isfinite(k) and k > 0):
            raise InvalidArgumentError(
                f"Bessel K normalization is not positive and finite for "
                f"lambda={self.lambda_}, omega={self.omega}."
            )
        self._log_norm = math.log(2 * self.eta) + math.log(k) - self.omega

    def __call__(self, x: float) -> float:
        x = float(x)
        if x < 0:
            return 0.0
        if x == 0 or math.isinf(x):
            return 0.0
        z = x / self.eta
        return safe_exp(
            (self.lambda_ - 1) * math.log(z)
            - 0.5 * self.omega * (z + 1 / z)
            - self._log_norm
        )


__all__ = [
    "PDF",
    "FunctionPDF",
    "to_pdf",
    "NormalPDF",
    "GammaPDF",
    "InverseGammaPDF",
    "GeneralizedGammaPDF",
    "InverseGaussianPDF",
    "GeneralizedInverseGaussianPDF",
]
