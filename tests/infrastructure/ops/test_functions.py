import math
import unittest
from unittest import TestCase

import numpy as np

from numxx.domain._complex import Complex
from numxx.domain._dtype import DType
from numxx.infrastructure.matrix import Matrix
from numxx.infrastructure.narray import NArray
from numxx.infrastructure.ops import functions as fn


class TestElementwiseFunctions(TestCase):
    def test_array_input(self):
        out = fn.sqrt(NArray([1.0, 4.0]))
        self.assertIsInstance(out, NArray)
        self.assertEqual(out.tolist(), [1.0, 2.0])

    def test_matrix_input_is_rewrapped(self):
        out = fn.exp(Matrix([[0.0, 0.0]]))
        self.assertIsInstance(out, Matrix)
        self.assertEqual(out.tolist(), [[1.0, 1.0]])

    def test_sequence_input(self):
        np.testing.assert_allclose(fn.sin([0.0, math.pi / 2]).to_numpy(), [0.0, 1.0])

    def test_scalar_inputs(self):
        self.assertEqual(fn.sqrt(9.0), 3.0)
        self.assertEqual(fn.sqrt(Complex(-4, 0)), Complex(0.0, 2.0))
        self.assertEqual(fn.abs(Complex(3, 4)), 5.0)
        self.assertEqual(fn.conj(1 + 2j), Complex(1.0, -2.0))
        with self.assertRaises(ValueError):
            fn.sqrt(-1.0)

    def test_aliases(self):
        self.assertIs(fn.pow, fn.power)
        self.assertIs(fn.abs, fn.absolute)
        self.assertIs(fn.arg, fn.angle)
        self.assertEqual(fn.exp.__name__, "exp")

    def test_component_functions(self):
        a = NArray([3 + 4j])
        self.assertEqual(fn.real(a).item(), 3.0)
        self.assertEqual(fn.imag(a).item(), 4.0)
        self.assertEqual(fn.absolute(a).item(), 5.0)
        self.assertIs(fn.angle(a).dtype, DType.FLOAT64)


class TestPowerAndReductions(TestCase):
    def test_power(self):
        self.assertEqual(fn.power(NArray([1, 2]), 3).tolist(), [1, 8])
        self.assertEqual(fn.power(2.0, 10), 1024.0)
        self.assertEqual(fn.power(2, NArray([1, 2])).tolist(), [2, 4])
        self.assertEqual(fn.power([1.0, 3.0], 2).tolist(), [1.0, 9.0])
        self.assertIsInstance(fn.power(Matrix([[2, 2]]), 2), Matrix)

    def test_isinf(self):
        self.assertEqual(fn.isinf(NArray([1.0, math.inf, -math.inf])).tolist(), [False, True, True])
        self.assertTrue(fn.isinf(Complex(0.0, math.inf)))
        self.assertTrue(fn.isinf(-math.inf))
        self.assertFalse(fn.isinf(10**400))
        self.assertFalse(fn.isinf(1.0))

    def test_sum_mean_diff(self):
        self.assertEqual(fn.sum([[1, 2], [3, 4]]), 10)
        self.assertEqual(fn.sum(Matrix([[1, 2], [3, 4]]), axis=0).tolist(), [4, 6])
        self.assertEqual(fn.mean(NArray([1, 2])), 1.5)
        self.assertEqual(fn.diff([1, 3, 6]).tolist(), [2, 3])


if __name__ == "__main__":
    unittest.main()
