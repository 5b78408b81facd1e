# atmosphere/quantile.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Quantile functions.

Defined objects
---------------
Quantile
    Abstract quantile function. Calling it checks that the probability
    lies in [0, 1] and raises :class:`atmosphere.exceptions.DomainError`
    otherwise.
FunctionQuantile, to_quantile
    Adapter from a plain callable.
NumericQuantile
    Quantile computed as the root of ``cdf(y) - p`` with
    ``scipy.optimize.brentq``.
QuantileObjective
    The objective handed to the root finder.
GammaQuantile, InverseGammaQuantile, GeneralizedGammaQuantile
    Closed-form quantiles based on the inverse regularized incomplete gamma
    functions.
"""

import math
from abc import ABC, abstractmethod

from scipy.special import gammainccinv, gammaincinv

from atmosphere.cdf import to_cdf
from atmosphere.exceptions import DomainError, InvalidArgumentError, NumericFailure
from atmosphere.num import find_root, fmax, safe_exp
from atmosphere.utils import check_finite, check_positive, convert_to


def check_probability(p: float) -> float:
    """Return ``p`` as a float, raising DomainError unless ``0 <= p <= 1``."""
    try:
        p = float(p)
    except (TypeError, ValueError) as exc:
        raise DomainError("p must be a real number.") from exc
    if not 0.0 <= p <= 1.0:
        raise DomainError(f"p must be in [0, 1], got {p}.")
    return p


class Quantile(ABC):
    """Quantile function interface."""

    def __call__(self, p: float) -> float:
        return self._evaluate(check_probability(p))

    @abstractmethod
    def _evaluate(self, p: float) -> float:
        """Evaluate the quantile at a probability already checked to be in [0, 1]."""


class FunctionQuantile(Quantile):
    """Quantile backed by a plain callable."""

    def __init__(self, func):
        self.func = func

    def _evaluate(self, p: float) -> float:
        return float(self.func(p))

    def __repr__(self):
        return f"FunctionQuantile({self.func!r})"


def to_quantile(func) -> Quantile:
    """Convert a callable to a :class:`Quantile` (Quantile instances are returned as is)."""
    return convert_to(Quantile, func, FunctionQuantile)


# ==============================================================
#                     Numeric quantile
# ==============================================================


class QuantileObjective:
    """
    Objective ``y -> cdf(y) - p`` handed to the root finder.

    Only finite points may be evaluated and the value is never NaN; both
    violations raise :class:`NumericFailure`.
    """

    __slots__ = ("cdf", "p")

    def __init__(self, cdf, p: float):
        self.cdf = cdf
        self.p = p

    def __call__(self, y: float) -> float:
        if not math.isfinite(y):
            raise NumericFailure(f"Quantile objective evaluated at non-finite point {y}.")
        value = float(self.cdf(y)) - self.p
        if math.isnan(value):
            raise NumericFailure(f"CDF returned NaN at finite point {y}.")
        return value


class NumericQuantile(Quantile):
    """
    Quantile function computed as the root of its CDF.

    Parameters
    ----------
    cdf : CDF or callable
        The CDF to invert. It is assumed nondecreasing on ``[a, b]``.
    a : float, optional
        Lower end of the bracket, the most negative finite float by default.
    b : float, optional
        Upper end of the bracket, the largest finite float by default.

    Raises
    ------
    InvalidArgumentError
        If the bracket is not finite or ``a >= b``.

    Notes
    -----
    Calling the quantile raises :class:`DomainError` for ``p`` outside
    [0, 1] and :class:`NumericFailure` when ``cdf - p`` does not change
    sign over ``[a, b]`` or when brentq does not converge. The result is
    never NaN.

    With the default bracket, ``find_root`` first bisects the interval
    until its width is a finite float. A finite bracket close to the
    support saves these steps.

    Examples
    --------
    >>> from atmosphere import NormalPDF, NumericCDF, NumericQuantile
    >>> qf = NumericQuantile(NumericCDF(NormalPDF(), [-3, -1, 0, 1, 3]))
    >>> round(qf(0.3), 3)
    -0.524
    """

    def __init__(self, cdf, a: float = -fmax, b: float = fmax):
        self.cdf = to_cdf(cdf)
        self.a = check_finite("a", a)
        self.b = check_finite("b", b)
        if not self.a < self.b:
            raise InvalidArgumentError(f"Bracket must satisfy a < b, got ({self.a}, {self.b}).")

    def _evaluate(self, p: float) -> float:
        return find_root(QuantileObjective(self.cdf, p), self.a, self.b)

    def __repr__(self):
        return f"NumericQuantile(cdf={self.cdf!r}, a={self.a}, b={self.b})"


# ==============================================================
#                   Closed-form quantiles
# ==============================================================


def _pow(t: float, e: float) -> float:
    """``t ** e`` for ``t >= 0`` with limits at 0 and inf and no OverflowError."""
    if t == 0:
        return 0.0 if e > 0 else math.inf
    if math.isinf(t):
        return math.inf if e > 0 else 0.0
    return safe_exp(e * math.log(t))


class GammaQuantile(Quantile):
    """Gamma quantile, ``scale * P^-1(shape, p)``."""

    def __init__(self, shape: float, scale: float):
        self.shape = check_positive("shape", shape)
        self.scale = check_positive("scale", scale)

    def _evaluate(self, p: float) -> float:
        return self.scale * float(gammaincinv(self.shape, p))


class InverseGammaQuantile(Quantile):
    """Inverse-gamma quantile, ``scale / Q^-1(shape, p)``."""

    def __init__(self, shape: float, scale: float):
        self.shape = check_positive("shape", shape)
        self.scale = check_positive("scale", scale)

    def _evaluate(self, p: float) -> float:
        t = float(gammainccinv(self.shape, p))
        if t == 0:
            return math.inf
        return self.scale / t


class GeneralizedGammaQuantile(Quantile):
    """
    Generalized gamma quantile.

    ``scale * P^-1(shape, p)^(1/power)`` for a positive power and
    ``scale * Q^-1(shape, p)^(1/power)`` for a negative one.
    """

    def __init__(self, shape: float, power: float, scale: float = 1.0):
        self.shape = check_positive("shape", shape)
        self.power = check_finite("power", power)
        if self.power == 0:
            raise InvalidArgumentError("power must be non-zero.")
        self.scale = check_positive("scale", scale)

    def _evaluate(self, p: float) -> float:
        if self.power > 0:
            t = float(gammaincinv(self.shape, p))
        else:
            t = float(gammainccinv(self.shape, p))
        return self.scale * _pow(t, 1 / self.power)


__all__ = [
    "Quantile",
    "FunctionQuantile",
    "to_quantile",
    "check_probability",
    "QuantileObjective",
    "NumericQuantile",
    "GammaQuantile",
    "InverseGammaQuantile",
    "GeneralizedGammaQuantile",
]
