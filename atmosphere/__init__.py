# atmosphere/__init__.py

from . import config
from . import num
from . import pdf
from . import cdf
from . import quantile
from . import likelihood
from .config import __version__
from .exceptions import AtmosphereError, InvalidArgumentError, DomainError, NumericFailure
from .pdf import (
    PDF,
    to_pdf,
    NormalPDF,
    GammaPDF,
    InverseGammaPDF,
    GeneralizedGammaPDF,
    InverseGaussianPDF,
    GeneralizedInverseGaussianPDF,
)
from .cdf import (
    CDF,
    to_cdf,
    NumericCDF,
    NumericCCDF,
    GammaCDF,
    InverseGammaCDF,
    GeneralizedGammaCDF,
)
from .quantile import (
    Quantile,
    to_quantile,
    NumericQuantile,
    GammaQuantile,
    InverseGammaQuantile,
    GeneralizedGammaQuantile,
)
from .statistic import GeneralizedInverseGaussianStatistic
from .likelihood import proper_generalized_inverse_gaussian_likelihood

__all__ = [
    "pdf",
    "cdf",
    "quantile",
    "likelihood",
    "PDF",
    "CDF",
    "Quantile",
    "to_pdf",
    "to_cdf",
    "to_quantile",
    "NumericCDF",
    "NumericCCDF",
    "NumericQuantile",
    "NormalPDF",
    "GammaPDF",
    "InverseGammaPDF",
    "GeneralizedGammaPDF",
    "InverseGaussianPDF",
    "GeneralizedInverseGaussianPDF",
    "GammaCDF",
    "InverseGammaCDF",
    "GeneralizedGammaCDF",
    "GammaQuantile",
    "InverseGammaQuantile",
    "GeneralizedGammaQuantile",
    "GeneralizedInverseGaussianStatistic",
    "proper_generalized_inverse_gaussian_likelihood",
    "AtmosphereError",
    "InvalidArgumentError",
    "DomainError",
    "NumericFailure",
    "__version__",
]
