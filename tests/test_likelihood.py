import math
import unittest

import numpy as np

import atmosphere as atm
from atmosphere.exceptions import InvalidArgumentError
from atmosphere.likelihood import proper_generalized_inverse_gaussian_likelihood
from atmosphere.pdf import GeneralizedInverseGaussianPDF
from atmosphere.statistic import GeneralizedInverseGaussianStatistic


class TestGeneralizedInverseGaussianLikelihood(unittest.TestCase):
    def test_weights_01(self):
        l = proper_generalized_inverse_gaussian_likelihood(1.0, 2.0, 3.0, [1.0, 2.0, 2.0])
        m = proper_generalized_inverse_gaussian_likelihood(
            1.0, 2.0, 3.0, [1.0, 2.0], [2.0, 4.0]
        )
        self.assertAlmostEqual(l, m, places=12)

    def test_weights_02(self):
        sample = [0.3, 1.1, 2.4]
        l = proper_generalized_inverse_gaussian_likelihood(0.5, 1.0, 1.5, sample)
        m = proper_generalized_inverse_gaussian_likelihood(
            0.5, 1.0, 1.5, sample, [7.0, 7.0, 7.0]
        )
        self.assertAlmostEqual(l, m, places=12)

    def test_mean_log_density(self):
        lambda_, eta, omega = 0.7, 1.3, 2.1
        sample = np.array([0.5, 1.2, 2.0, 3.5])
        pdf = GeneralizedInverseGaussianPDF(lambda_, eta, omega)
        expected = np.mean([math.log(pdf(x)) for x in sample])
        l = proper_generalized_inverse_gaussian_likelihood(lambda_, eta, omega, sample)
        self.assertAlmostEqual(l, expected, places=10)

    def test_precomputed_statistic(self):
        sample = [0.5, 1.2, 2.0, 3.5]
        stat = GeneralizedInverseGaussianStatistic(sample)
        l = proper_generalized_inverse_gaussian_likelihood(-0.4, 0.9, 1.7, stat)
        m = atm.proper_generalized_inverse_gaussian_likelihood(-0.4, 0.9, 1.7, sample)
        self.assertEqual(l, m)
        with self.assertRaises(InvalidArgumentError):
            proper_generalized_inverse_gaussian_likelihood(-0.4, 0.9, 1.7, stat, [1.0] * 4)

    def test_invalid_parameters(self):
        with self.assertRaises(InvalidArgumentError):
            proper_generalized_inverse_gaussian_likelihood(1.0, -2.0, 3.0, [1.0])
        with self.assertRaises(InvalidArgumentError):
            proper_generalized_inverse_gaussian_likelihood(1.0, 2.0, 0.0, [1.0])


class TestGeneralizedInverseGaussianStatistic(unittest.TestCase):
    def test_unweighted(self):
        stat = GeneralizedInverseGaussianStatistic([1.0, 2.0, 4.0])
        self.assertAlmostEqual(stat.mean, 7.0 / 3.0)
        self.assertAlmostEqual(stat.meani, (1.0 + 0.5 + 0.25) / 3.0)
        self.assertAlmostEqual(stat.meanl, math.log(8.0) / 3.0)

    def test_weighted(self):
        stat = GeneralizedInverseGaussianStatistic([1.0, 4.0], [3.0, 1.0])
        self.assertAlmostEqual(stat.mean, 1.75)
        self.assertAlmostEqual(stat.meani, 0.8125)
        self.assertAlmostEqual(stat.meanl, 0.25 * math.log(4.0))

    def test_invalid_sample(self):
        for sample, weights in [
            ([], None),
            ([1.0, -2.0], None),
            ([1.0, math.inf], None),
            ([1.0, 2.0], [1.0]),
            ([1.0, 2.0], [1.0, -1.0]),
            ([1.0, 2.0], [0.0, 0.0]),
        ]:
            with self.assertRaises(InvalidArgumentError):
                GeneralizedInverseGaussianStatistic(sample, weights)


if __name__ == "__main__":
    unittest.main()
