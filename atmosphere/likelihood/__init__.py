# atmosphere/likelihood/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Normalized log-likelihood functions.
"""

from .generalized_inverse_gaussian import proper_generalized_inverse_gaussian_likelihood

__all__ = ["proper_generalized_inverse_gaussian_likelihood"]
