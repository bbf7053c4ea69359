import importlib.util
import os
import unittest

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "examples")


def load_example(name):
    path = os.path.join(EXAMPLES_DIR, name + ".py")
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestExamples(unittest.TestCase):
    def tearDown(self):
        plt.close("all")

    def test_01(self):
        kernels = load_example("gpmusic_example01_kernels").main(show=False)
        self.assertEqual(len(kernels), 3)

    def test_02(self):
        zpm, zpstd = load_example("gpmusic_example02_melody_regression").main(show=False)
        self.assertEqual(zpm.shape, zpstd.shape)
        self.assertTrue(np.all(zpstd >= 0.0))

    def test_03(self):
        melodies = load_example("gpmusic_example03_posterior_melodies").main(
            show=False, n_samples=3
        )
        self.assertEqual(melodies.shape, (3, 17))
        # anchors are (almost) hit
        np.testing.assert_array_equal(melodies[:, 0], 60)

    def test_04(self):
        walk = load_example("gpmusic_example04_kernel_walk").main(show=False)
        self.assertEqual(walk.ndim, 1)


if __name__ == "__main__":
    unittest.main()
