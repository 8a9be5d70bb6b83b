import unittest

import numpy as np

from touchnet.domain import ShapeMismatchError
from touchnet.infrastructure import (
    GradientDescent,
    LeakyRelu,
    Relu,
    Sigmoid,
    Softmax,
    SoftPlus,
    StepDecayScheduler,
)

OPT = GradientDescent()
SCHED = StepDecayScheduler(0.1)


def _backward(layer, x, up):
    return layer.backward(x, up, OPT, SCHED, 0)


class TestRelu(unittest.TestCase):
    def test_forward(self):
        x = np.array([[-1.0, 0.0, 2.0]])
        np.testing.assert_array_equal(Relu()(x), [[0.0, 0.0, 2.0]])

    def test_backward_gates_on_input(self):
        x = np.array([[-1.0, 0.0, 2.0]])
        up = np.array([[5.0, 5.0, 5.0]])
        np.testing.assert_array_equal(_backward(Relu(), x, up), [[0.0, 0.0, 5.0]])

    def test_backward_shape_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            _backward(Relu(), np.zeros((1, 3)), np.zeros((1, 2)))

    def test_info_and_copy(self):
        self.assertEqual(Relu().info(), "Relu()")
        self.assertIsInstance(Relu().copy(), Relu)


class TestLeakyRelu(unittest.TestCase):
    def test_forward_and_backward(self):
        layer = LeakyRelu(alpha=0.1)
        x = np.array([[-2.0, 3.0]])
        np.testing.assert_allclose(layer(x), [[-0.2, 3.0]])
        np.testing.assert_allclose(
            _backward(layer, x, np.array([[1.0, 1.0]])), [[0.1, 1.0]]
        )

    def test_copy_keeps_alpha(self):
        clone = LeakyRelu(alpha=0.3).copy()
        self.assertEqual(clone.alpha, 0.3)
        self.assertEqual(clone.info(), "LeakyRelu(alpha=0.3)")

    def test_negative_alpha_rejected(self):
        with self.assertRaises(ValueError):
            LeakyRelu(alpha=-0.1)


class TestSigmoid(unittest.TestCase):
    def test_forward(self):
        x = np.array([[0.0, 2.0]])
        np.testing.assert_allclose(Sigmoid()(x), [[0.5, 1 / (1 + np.exp(-2.0))]])
        np.testing.assert_allclose(
            Sigmoid(zoom=2.0)(x), [[0.5, 1 / (1 + np.exp(-1.0))]]
        )

    def test_forward_extremes_are_finite(self):
        out = Sigmoid()(np.array([[-1000.0, 1000.0]]))
        np.testing.assert_allclose(out, [[0.0, 1.0]])

    def test_backward_multiplier_uses_given_array(self):
        x = np.array([[0.25, 0.5]])
        up = np.array([[2.0, 2.0]])
        np.testing.assert_allclose(
            _backward(Sigmoid(zoom=2.0), x, up), [[2.0 * 0.1875 / 2.0, 2.0 * 0.25 / 2.0]]
        )

    def test_invalid_zoom(self):
        with self.assertRaises(ValueError):
            Sigmoid(zoom=0.0)


class TestSoftPlus(unittest.TestCase):
    def test_forward_base_two(self):
        x = np.array([[0.0, 3.0]])
        out = SoftPlus(base=2.0)(x)
        np.testing.assert_allclose(out, [[1.0, np.log2(9.0)]], rtol=1e-7)

    def test_forward_is_clipped(self):
        out = SoftPlus(base=2.0, max_clip=10.0)(np.array([[1e6]]))
        np.testing.assert_allclose(out, [[np.log2(1.0 + 2.0**10)]], rtol=1e-7)

    def test_backward_gate(self):
        x = np.array([[0.0, 1.0]])
        up = np.array([[1.0, 1.0]])
        np.testing.assert_allclose(
            _backward(SoftPlus(base=2.0), x, up), [[0.5, 0.5 / 1.5]]
        )

    def test_invalid_configuration(self):
        with self.assertRaises(ValueError):
            SoftPlus(base=1.0)
        with self.assertRaises(ValueError):
            SoftPlus(max_clip=0.0)


class TestSoftmax(unittest.TestCase):
    def test_rows_sum_to_one_for_extreme_inputs(self):
        x = np.array(
            [
                [1000.0, 1000.0, -1000.0],
                [-1e6, 0.0, 1e6],
                [0.0, 0.0, 0.0],
                [-750.0, -751.0, -752.0],
            ]
        )
        out = Softmax()(x)
        self.assertTrue(np.isfinite(out).all())
        np.testing.assert_allclose(out.sum(axis=1), np.ones(4))
        np.testing.assert_allclose(out[0], [0.5, 0.5, 0.0], atol=1e-12)
        np.testing.assert_allclose(out[2], [1 / 3, 1 / 3, 1 / 3])

    def test_backward_matches_explicit_jacobian(self):
        rng = np.random.default_rng(0)
        x = rng.normal(size=(3, 4))
        up = rng.normal(size=(3, 4))
        layer = Softmax()
        got = _backward(layer, x, up)

        s = layer(x)
        for row in range(3):
            jac = np.diag(s[row]) - np.outer(s[row], s[row])
            np.testing.assert_allclose(got[row], jac @ up[row], atol=1e-12)

    def test_backward_of_uniform_upstream_is_zero(self):
        x = np.array([[0.3, -1.2, 2.0]])
        got = _backward(Softmax(), x, np.ones((1, 3)))
        np.testing.assert_allclose(got, np.zeros((1, 3)), atol=1e-12)


if __name__ == "__main__":
    unittest.main()
