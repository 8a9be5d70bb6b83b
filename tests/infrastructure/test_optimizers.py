import unittest

import numpy as np

from touchnet.domain import ShapeMismatchError
from touchnet.infrastructure import (
    Adam,
    ExponentialScheduler,
    GradientDescent,
    Momentum,
    StepDecayScheduler,
)


class TestGradientDescent(unittest.TestCase):
    def test_single_step(self):
        opt = GradientDescent()
        w = np.array([[1.0, 2.0], [3.0, 4.0]])
        g = np.array([[0.5, -0.5], [1.0, 0.0]])
        out = opt.optimize_w(w, g, StepDecayScheduler(0.1), 0)
        np.testing.assert_allclose(out, w - 0.1 * g)
        # input untouched
        np.testing.assert_array_equal(w, [[1.0, 2.0], [3.0, 4.0]])

    def test_learning_rate_follows_epoch(self):
        opt = GradientDescent()
        sched = ExponentialScheduler(1.0, drop_rate=0.5)
        out = opt.optimize_b(np.array([1.0]), np.array([1.0]), sched, 2)
        np.testing.assert_allclose(out, [0.75])

    def test_shape_mismatch_raises(self):
        with self.assertRaises(ShapeMismatchError):
            GradientDescent().optimize_w(
                np.zeros((2, 2)), np.zeros((2, 3)), StepDecayScheduler(0.1), 0
            )


class TestMomentum(unittest.TestCase):
    def test_velocity_accumulates(self):
        opt = Momentum(beta=0.9)
        sched = StepDecayScheduler(1.0)
        p = np.array([0.0])
        g = np.array([1.0])

        p1 = opt.optimize_b(p, g, sched, 0)
        np.testing.assert_allclose(p1, [-0.1])
        np.testing.assert_allclose(opt.state("bias")["v"], [0.1])

        p2 = opt.optimize_b(p1, g, sched, 0)
        # v = 0.9 * 0.1 + 0.1 = 0.19
        np.testing.assert_allclose(p2, [-0.1 - 0.19])

    def test_beta_zero_is_gradient_descent(self):
        sched = StepDecayScheduler(0.5)
        w = np.array([[1.0, -1.0]])
        g = np.array([[2.0, 4.0]])
        np.testing.assert_allclose(
            Momentum(beta=0.0).optimize_w(w, g, sched, 0),
            GradientDescent().optimize_w(w, g, sched, 0),
        )

    def test_invalid_beta(self):
        with self.assertRaises(ValueError):
            Momentum(beta=1.0)
        with self.assertRaises(ValueError):
            Momentum(beta=-0.1)


class TestAdam(unittest.TestCase):
    def test_single_step_bias_correction(self):
        # after one step m_hat == g and v_hat == g**2 for any betas
        for beta1, beta2 in ((0.9, 0.999), (0.5, 0.5), (0.1, 0.99)):
            with self.subTest(beta1=beta1, beta2=beta2):
                opt = Adam(beta1=beta1, beta2=beta2, epsilon=1e-5)
                lr = 0.01
                p = np.array([[1.0, -2.0, 0.5]])
                g = np.array([[0.3, -4.0, 2.0]])
                out = opt.optimize_w(p, g, StepDecayScheduler(lr), 0)
                expected = p - lr * g / (np.abs(g) + 1e-5)
                np.testing.assert_allclose(out, expected, rtol=1e-10)

    def test_gradient_is_clipped(self):
        opt = Adam(max_grad_bound=1.0)
        opt.optimize_b(np.zeros(2), np.array([50.0, -50.0]), StepDecayScheduler(0.1), 0)
        st = opt.state("bias")
        np.testing.assert_allclose(st["m"], [0.1, -0.1])
        np.testing.assert_allclose(st["v"], [0.001, 0.001])

    def test_groups_have_independent_counters(self):
        opt = Adam()
        sched = StepDecayScheduler(0.01)
        w = np.zeros((2, 2))
        g = np.ones((2, 2))
        for _ in range(3):
            w = opt.optimize_w(w, g, sched, 0)
        opt.optimize_b(np.zeros(2), np.ones(2), sched, 0)

        self.assertEqual(opt.state("weight")["t"], 3)
        self.assertEqual(opt.state("bias")["t"], 1)

    def test_scheduler_error_does_not_advance_counter(self):
        opt = Adam()
        sched = StepDecayScheduler(0.01)
        p = np.array([[1.0, -2.0]])
        g = np.array([[0.5, 3.0]])

        with self.assertRaises(ValueError):
            opt.optimize_w(p, g, sched, -1)
        self.assertEqual(opt.state("weight"), {})

        out = opt.optimize_w(p, g, sched, 0)
        self.assertEqual(opt.state("weight")["t"], 1)
        # first real step still sees the full bias correction
        expected = p - 0.01 * g / (np.abs(g) + 1e-5)
        np.testing.assert_allclose(out, expected, rtol=1e-10)

    def test_state_snapshot_is_detached(self):
        opt = Adam()
        opt.optimize_b(np.zeros(1), np.ones(1), StepDecayScheduler(0.01), 0)
        snap = opt.state("bias")
        snap["m"][0] = 123.0
        self.assertNotEqual(opt.state("bias")["m"][0], 123.0)
        self.assertEqual(opt.state("weight"), {})

    def test_unknown_group_rejected(self):
        with self.assertRaises(ValueError):
            Adam().state("gamma")

    def test_copy_has_same_config_and_no_state(self):
        opt = Adam(beta1=0.8, beta2=0.95, epsilon=1e-6, max_grad_bound=10.0)
        opt.optimize_b(np.zeros(1), np.ones(1), StepDecayScheduler(0.01), 0)

        clone = opt.copy()
        self.assertIsInstance(clone, Adam)
        self.assertIsNot(clone, opt)
        self.assertEqual(clone.get_config(), opt.get_config())
        self.assertEqual(clone.state("bias"), {})

    def test_invalid_hyperparameters(self):
        with self.assertRaises(ValueError):
            Adam(beta1=1.0)
        with self.assertRaises(ValueError):
            Adam(beta2=0.0)
        with self.assertRaises(ValueError):
            Adam(epsilon=0.0)
        with self.assertRaises(ValueError):
            Adam(max_grad_bound=-1.0)

    def test_shape_mismatch_raises(self):
        with self.assertRaises(ShapeMismatchError):
            Adam().optimize_b(np.zeros(3), np.zeros(2), StepDecayScheduler(0.1), 0)


if __name__ == "__main__":
    unittest.main()
