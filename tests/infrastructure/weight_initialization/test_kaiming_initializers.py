import math
import unittest

from touchnet.infrastructure.utils.weight_initializer import (
    HeNormalInitialize,
    HeUniformInitialize,
)


class TestHeInitializers(unittest.TestCase):
    def test_he_uniform_within_bound(self):
        fan_in, fan_out = 16, 8
        bound = math.sqrt(6.0 / fan_in)
        init = HeUniformInitialize(rng=0)
        w = init.get_weight(fan_in, fan_out)
        self.assertEqual(w.shape, (fan_in, fan_out))
        self.assertLessEqual(float(abs(w).max()), bound)
        self.assertLessEqual(float(abs(init.get_bias(fan_in, fan_out)).max()), bound)

    def test_he_normal_std(self):
        fan_in, fan_out = 400, 300
        expected = math.sqrt(2.0 / fan_in)
        w = HeNormalInitialize(rng=2).get_weight(fan_in, fan_out)
        self.assertAlmostEqual(float(w.std()), expected, delta=expected * 0.05)

    def test_bias_shape(self):
        self.assertEqual(HeNormalInitialize(rng=0).get_bias(10, 4).shape, (4,))


if __name__ == "__main__":
    unittest.main()
