import unittest

import numpy as np

from touchnet.domain import UnsupportedConfigurationError
from touchnet.infrastructure.utils.weight_initializer import (
    HeUniformInitialize,
    Initialize,
    WeightInitializer,
)


class TestWeightInitializerRegistry(unittest.TestCase):
    def test_available_contains_builtin_initializers(self):
        names = WeightInitializer.available()
        for name in (
            "zero",
            "one",
            "constant",
            "uniform",
            "normal",
            "xavier_uniform",
            "xavier_normal",
            "he_uniform",
            "he_normal",
        ):
            self.assertIn(name, names)

    def test_get_returns_registered_class(self):
        self.assertIs(WeightInitializer.get("he_uniform"), HeUniformInitialize)

    def test_unknown_initializer_raises(self):
        with self.assertRaises(UnsupportedConfigurationError) as ctx:
            WeightInitializer("___does_not_exist___")
        msg = str(ctx.exception)
        self.assertIn("Unsupported initializer name", msg)
        self.assertIn("Available:", msg)
        self.assertEqual(ctx.exception.name, "___does_not_exist___")

    def test_register_initializer_no_overwrite_by_default(self):
        name = "__unit_test_initializer__"

        @WeightInitializer.register_initializer(name, overwrite=True)
        class InitA(Initialize):
            def _sample(self, shape, fan_in, fan_out):
                return np.zeros(shape)

        with self.assertRaises(ValueError):

            @WeightInitializer.register_initializer(name)
            class InitB(Initialize):
                def _sample(self, shape, fan_in, fan_out):
                    return np.zeros(shape)

    def test_register_initializer_overwrite_true(self):
        name = "__unit_test_initializer_overwrite__"

        @WeightInitializer.register_initializer(name, overwrite=True)
        class InitA(Initialize):
            def _sample(self, shape, fan_in, fan_out):
                return np.zeros(shape)

        @WeightInitializer.register_initializer(name, overwrite=True)
        class InitB(Initialize):
            def _sample(self, shape, fan_in, fan_out):
                return np.ones(shape)

        self.assertIs(WeightInitializer.get(name), InitB)

    def test_dispatch_forwards_kwargs_and_shapes(self):
        init = WeightInitializer("constant", value=2.5)
        w = init.get_weight(3, 5)
        b = init.get_bias(3, 5)
        self.assertEqual(w.shape, (3, 5))
        self.assertEqual(b.shape, (5,))
        self.assertTrue((w == 2.5).all())
        self.assertTrue((b == 2.5).all())
        self.assertEqual(init.get_config(), {"name": "constant", "value": 2.5})

    def test_create_with_seed_is_reproducible(self):
        a = WeightInitializer.create("he_normal", rng=7).get_weight(4, 3)
        b = WeightInitializer.create("he_normal", rng=7).get_weight(4, 3)
        np.testing.assert_array_equal(a, b)

    def test_empty_name_rejected(self):
        with self.assertRaises(ValueError):
            WeightInitializer.register_initializer("")


if __name__ == "__main__":
    unittest.main()
