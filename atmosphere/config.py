# atmosphere/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import sys
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _AtmosphereConfig:
    def __init__(self):
        self.version = __version__
        # integration (scipy.integrate.quad)
        self.rtol = 1e-6
        self.atol = 0.0
        self.quad_limit = 50
        # root finding (scipy.optimize.brentq)
        self.xtol = 2e-12
        self.root_rtol = 4 * sys.float_info.epsilon
        self.maxiter = 10000
        # logger lives in config
        self.logger = logging.getLogger("atmosphere")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"AtmosphereConfig("
            f"version={self.version}, "
            f"rtol={self.rtol}, "
            f"atol={self.atol}, "
            f"quad_limit={self.quad_limit}, "
            f"xtol={self.xtol}, "
            f"maxiter={self.maxiter})"
        )

    def __repr__(self):
        return (
            f"<AtmosphereConfig "
            f"version={self.version!r}, "
            f"rtol={self.rtol!r}, "
            f"atol={self.atol!r}, "
            f"quad_limit={self.quad_limit!r}, "
            f"xtol={self.xtol!r}, "
            f"root_rtol={self.root_rtol!r}, "
            f"maxiter={self.maxiter!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration entry {k!r}")
            setattr(self, k, v)
        return self


_config = _AtmosphereConfig()


def get_config():
    return _config


def set_tolerances(rtol=None, atol=None):
    """Set the default integration tolerances used by engines built afterwards."""
    if rtol is not None:
        _config.rtol = float(rtol)
    if atol is not None:
        _config.atol = float(atol)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
