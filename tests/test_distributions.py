import math

import pytest
from scipy.integrate import quad

from atmosphere.cdf import (
    CDF,
    FunctionCDF,
    GammaCDF,
    InverseGammaCDF,
    GeneralizedGammaCDF,
    to_cdf,
)
from atmosphere.exceptions import InvalidArgumentError
from atmosphere.pdf import (
    PDF,
    FunctionPDF,
    NormalPDF,
    GammaPDF,
    InverseGammaPDF,
    GeneralizedGammaPDF,
    InverseGaussianPDF,
    GeneralizedInverseGaussianPDF,
    to_pdf,
)

POSITIVE_DENSITIES = [
    GammaPDF(3.0, 2.0),
    GammaPDF(1.0, 0.5),
    InverseGammaPDF(3.0, 2.0),
    GeneralizedGammaPDF(3.0, 2.0, 1.5),
    GeneralizedGammaPDF(2.0, -1.5, 0.7),
    InverseGaussianPDF(1.5, 2.0),
    GeneralizedInverseGaussianPDF(0.5, 1.5, 2.0),
    GeneralizedInverseGaussianPDF(-1.2, 0.8, 0.6),
]


def test_normal_pdf():
    pdf = NormalPDF()
    assert pdf(0.0) == pytest.approx(0.3989422804014327)
    assert NormalPDF(1.0, 2.0)(1.0) == pytest.approx(0.3989422804014327 / 2.0)
    assert pdf(math.inf) == 0.0
    assert pdf(1e200) == 0.0
    assert math.isnan(pdf(math.nan))


def test_normal_pdf_integrates_to_one():
    value, _ = quad(NormalPDF(-1.0, 0.3), -math.inf, math.inf)
    assert value == pytest.approx(1.0, rel=1e-8)


@pytest.mark.parametrize("pdf", POSITIVE_DENSITIES, ids=lambda p: type(p).__name__)
def test_integrates_to_one(pdf):
    value, _ = quad(pdf, 0.0, math.inf, limit=200)
    assert value == pytest.approx(1.0, rel=1e-7)


@pytest.mark.parametrize("pdf", POSITIVE_DENSITIES, ids=lambda p: type(p).__name__)
def test_outside_support(pdf):
    assert pdf(-1.0) == 0.0
    assert pdf(-math.inf) == 0.0
    assert math.isnan(pdf(math.nan))
    assert pdf(math.inf) == 0.0
    assert pdf(1e300) == 0.0
    assert pdf(2.0) > 0.0


def test_gamma_pdf_at_zero():
    assert GammaPDF(3.0, 2.0)(0.0) == 0.0
    assert GammaPDF(1.0, 0.5)(0.0) == 2.0
    assert GammaPDF(0.5, 1.0)(0.0) == math.inf


def test_gamma_pdf_value():
    # shape 2, scale 1: x exp(-x)
    assert GammaPDF(2.0, 1.0)(1.5) == pytest.approx(1.5 * math.exp(-1.5), rel=1e-12)


def test_generalized_gamma_reduces_to_gamma():
    gg = GeneralizedGammaPDF(2.5, 1.0, 3.0)
    g = GammaPDF(2.5, 3.0)
    for x in [0.1, 1.0, 4.0, 12.0]:
        assert gg(x) == pytest.approx(g(x), rel=1e-12)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: NormalPDF(sigma=0.0),
        lambda: NormalPDF(mu=math.inf),
        lambda: GammaPDF(-1.0, 2.0),
        lambda: GammaPDF(1.0, math.nan),
        lambda: InverseGammaPDF(0.0, 1.0),
        lambda: GeneralizedGammaPDF(1.0, 0.0),
        lambda: GeneralizedGammaPDF(1.0, math.inf),
        lambda: InverseGaussianPDF(1.0, -2.0),
        lambda: GeneralizedInverseGaussianPDF(0.5, 0.0, 1.0),
        lambda: GeneralizedInverseGaussianPDF(math.nan, 1.0, 1.0),
        lambda: GammaCDF(0.0, 1.0),
        lambda: InverseGammaCDF(1.0, -1.0),
        lambda: GeneralizedGammaCDF(1.0, 0.0),
        lambda: GeneralizedGammaCDF(1.0, 1.0, math.inf),
    ],
)
def test_invalid_parameters(factory):
    with pytest.raises(InvalidArgumentError):
        factory()


@pytest.mark.parametrize(
    "cdf",
    [
        GammaCDF(3.0, 2.0),
        InverseGammaCDF(3.0, 2.0),
        GeneralizedGammaCDF(3.0, 2.0, 1.5),
        GeneralizedGammaCDF(3.0, -1.5, 1.5),
    ],
    ids=lambda c: f"{type(c).__name__}",
)
def test_closed_form_cdf_limits(cdf):
    assert cdf(-1.0) == 0.0
    assert cdf(0.0) == 0.0
    assert cdf(math.inf) == 1.0
    assert math.isnan(cdf(math.nan))
    values = [cdf(0.25 * k) for k in range(1, 80)]
    assert all(lo <= hi for lo, hi in zip(values, values[1:]))
    assert 0.0 < values[10] < 1.0


def test_closed_form_cdf_matches_density():
    pairs = [
        (GammaCDF(3.0, 2.0), GammaPDF(3.0, 2.0)),
        (InverseGammaCDF(3.0, 2.0), InverseGammaPDF(3.0, 2.0)),
        (GeneralizedGammaCDF(3.0, 2.0, 1.5), GeneralizedGammaPDF(3.0, 2.0, 1.5)),
        (GeneralizedGammaCDF(3.0, -1.5, 1.5), GeneralizedGammaPDF(3.0, -1.5, 1.5)),
    ]
    for cdf, pdf in pairs:
        for x in [0.5, 1.7, 4.0]:
            value, _ = quad(pdf, 0.0, x, epsabs=1e-13)
            assert cdf(x) == pytest.approx(value, rel=1e-7, abs=1e-12)


def test_to_pdf():
    pdf = to_pdf(lambda x: 0.5)
    assert isinstance(pdf, FunctionPDF)
    assert isinstance(pdf, PDF)
    assert pdf(3.0) == 0.5
    normal = NormalPDF()
    assert to_pdf(normal) is normal
    with pytest.raises(InvalidArgumentError):
        to_pdf(None)


def test_to_cdf():
    cdf = to_cdf(lambda x: 0.25)
    assert isinstance(cdf, FunctionCDF)
    assert isinstance(cdf, CDF)
    assert cdf(0.0) == 0.25
    gamma = GammaCDF(1.0, 1.0)
    assert to_cdf(gamma) is gamma
    with pytest.raises(InvalidArgumentError):
        to_cdf([0.1, 0.2])


def test_abstract_interfaces():
    with pytest.raises(TypeError):
        PDF()
    with pytest.raises(TypeError):
        CDF()
