import unittest

import numpy as np

from touchnet.infrastructure.utils.weight_initializer import (
    ConstantInitialize,
    OneInitialize,
    ZeroInitialize,
)


class TestConstantInitializers(unittest.TestCase):
    def test_zero_fills_weight_and_bias(self):
        init = ZeroInitialize()
        w = init.get_weight(3, 4)
        b = init.get_bias(3, 4)
        self.assertEqual(w.shape, (3, 4))
        self.assertEqual(b.shape, (4,))
        self.assertEqual(w.dtype, np.float64)
        self.assertTrue((w == 0.0).all())
        self.assertTrue((b == 0.0).all())

    def test_one_fills_weight_and_bias(self):
        init = OneInitialize()
        self.assertTrue((init.get_weight(2, 2) == 1.0).all())
        self.assertTrue((init.get_bias(2, 7) == 1.0).all())

    def test_constant_uses_value(self):
        init = ConstantInitialize(-0.25)
        np.testing.assert_array_equal(init.get_weight(1, 3), [[-0.25, -0.25, -0.25]])
        self.assertEqual(init.get_config(), {"value": -0.25})

    def test_non_positive_fans_rejected(self):
        init = ZeroInitialize()
        with self.assertRaises(ValueError):
            init.get_weight(0, 3)
        with self.assertRaises(ValueError):
            init.get_bias(3, -1)


if __name__ == "__main__":
    unittest.main()
