import unittest

import numpy as np

from touchnet.domain import (
    NumericalDivergenceError,
    ShapeMismatchError,
    UnsupportedConfigurationError,
    UsageOrderError,
)


class TestShapeMismatchError(unittest.TestCase):
    def test_is_value_error_and_keeps_shapes(self):
        err = ShapeMismatchError("MSE.loss", (2, 3), [3, 2])
        self.assertIsInstance(err, ValueError)
        self.assertEqual(err.expected, (2, 3))
        self.assertEqual(err.actual, (3, 2))
        self.assertEqual(err.op, "MSE.loss")
        self.assertIn("MSE.loss", str(err))
        self.assertIn("(2, 3)", str(err))


class TestNumericalDivergenceError(unittest.TestCase):
    def test_is_runtime_error_and_keeps_activations(self):
        acts = [np.zeros((1, 2)), np.full((1, 1), np.nan)]
        err = NumericalDivergenceError(float("nan"), acts)
        self.assertIsInstance(err, RuntimeError)
        self.assertTrue(np.isnan(err.loss))
        self.assertEqual(len(err.activations), 2)

    def test_activations_default_to_empty(self):
        err = NumericalDivergenceError(float("nan"))
        self.assertEqual(err.activations, ())


class TestUsageOrderError(unittest.TestCase):
    def test_message_names_layer(self):
        err = UsageOrderError("Dropout", "backward called before forward")
        self.assertIsInstance(err, RuntimeError)
        self.assertEqual(err.layer, "Dropout")
        self.assertTrue(str(err).startswith("Dropout:"))


class TestUnsupportedConfigurationError(unittest.TestCase):
    def test_is_value_error_and_keeps_name(self):
        err = UnsupportedConfigurationError("foo", "Unsupported initializer name: 'foo'")
        self.assertIsInstance(err, ValueError)
        self.assertEqual(err.name, "foo")


if __name__ == "__main__":
    unittest.main()
