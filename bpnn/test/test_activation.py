import unittest

import numpy

from bpnn.activation import (
    ACTIVATIONS, get_activation, logistic, logistic_derivative, tanh,
    tanh_derivative)


class TestActivation(unittest.TestCase):

    def setUp(self):
        self.z = numpy.linspace(-6, 6, 101)

    def test_tanh(self):

        self.assertLess(numpy.abs(tanh(self.z) - numpy.tanh(self.z)).max(),
                        1e-15)

    def test_logistic(self):

        expected = 1.0 / (1.0 + numpy.exp(-self.z))
        self.assertLess(numpy.abs(logistic(self.z) - expected).max(), 1e-15)
        self.assertEqual(0.5, logistic(0.0))

    def test_derivatives_match_finite_differences(self):

        eps = 1e-6

        for name in ACTIVATIONS:
            f, df, _ = get_activation(name)
            numeric = (f(self.z + eps) - f(self.z - eps)) / (2 * eps)

            self.assertLess(numpy.abs(df(f(self.z)) - numeric).max(), 1e-8)

    def test_derivative_values_at_zero(self):

        self.assertEqual(1.0, tanh_derivative(tanh(0.0)))
        self.assertEqual(0.25, logistic_derivative(logistic(0.0)))

    def test_extreme_inputs_do_not_overflow(self):

        z = numpy.r_[-1e308, -1e4, 1e4, 1e308]

        with numpy.errstate(over='raise'):
            t = tanh(z)
            s = logistic(z)

        self.assertTrue(numpy.isfinite(t).all())
        self.assertTrue(numpy.isfinite(s).all())
        self.assertTrue((numpy.diff(s) >= 0).all())

    def test_bounds(self):

        for name in ACTIVATIONS:
            f, _, (low, high) = get_activation(name)
            a = f(self.z)
            self.assertTrue(((a > low) & (a < high)).all())

    def test_unknown(self):

        with self.assertRaises(ValueError):
            get_activation('softplus')


if __name__ == '__main__':
    unittest.main()
