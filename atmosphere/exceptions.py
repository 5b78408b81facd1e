# atmosphere/exceptions.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Errors raised by atmosphere."""


class AtmosphereError(Exception):
    """Base error for the package."""


class InvalidArgumentError(AtmosphereError, ValueError):
    """Malformed construction parameters (breakpoints, shapes, scales, brackets)."""


class DomainError(AtmosphereError, ValueError):
    """Evaluation input outside the declared domain, e.g. a probability not in [0, 1]."""


class NumericFailure(AtmosphereError, ArithmeticError):
    """Integration or root finding could not produce a result."""


__all__ = ["AtmosphereError", "InvalidArgumentError", "DomainError", "NumericFailure"]
