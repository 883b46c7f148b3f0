import math
import unittest
from unittest import TestCase

import numpy as np

from numxx.domain import _complex_math as cm
from numxx.domain._complex import Complex
from numxx.domain._dtype import DType
from numxx.infrastructure.narray import NArray

_METHODS = [
    "exp", "log", "log10", "sqrt",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "atanh",
]


class TestRealUnary(TestCase):
    def test_matches_numpy(self):
        x = np.array([0.1, 0.25, 0.5])
        a = NArray(x)
        expected = {
            "exp": np.exp, "log": np.log, "log10": np.log10, "sqrt": np.sqrt,
            "sin": np.sin, "cos": np.cos, "tan": np.tan,
            "asin": np.arcsin, "acos": np.arccos, "atan": np.arctan,
            "sinh": np.sinh, "cosh": np.cosh, "tanh": np.tanh,
            "asinh": np.arcsinh, "atanh": np.arctanh,
        }
        for name in _METHODS:
            with self.subTest(method=name):
                out = getattr(a, name)()
                self.assertIs(out.dtype, DType.FLOAT64)
                np.testing.assert_allclose(out.to_numpy(), expected[name](x))

    def test_integral_inputs_become_float64(self):
        out = NArray([1, 4, 9]).sqrt()
        self.assertIs(out.dtype, DType.FLOAT64)
        np.testing.assert_array_equal(out.to_numpy(), [1.0, 2.0, 3.0])

    def test_float32_is_kept(self):
        self.assertIs(NArray([1.0], dtype="float32").exp().dtype, DType.FLOAT32)

    def test_domain_errors_give_nan(self):
        out = NArray([-1.0]).sqrt()
        self.assertTrue(math.isnan(out.item()))
        self.assertEqual(NArray([0.0]).log().item(), -math.inf)

    def test_components_of_real_arrays(self):
        a = NArray([-1.5, 2.0])
        self.assertEqual(a.absolute().tolist(), [1.5, 2.0])
        self.assertEqual(a.real().tolist(), [-1.5, 2.0])
        self.assertEqual(a.imag().tolist(), [0.0, 0.0])
        self.assertEqual(a.conj().tolist(), [-1.5, 2.0])
        np.testing.assert_allclose(a.angle().to_numpy(), [math.pi, 0.0])

    def test_absolute_keeps_integer_type(self):
        self.assertIs(NArray([-3]).absolute().dtype, DType.INT64)


class TestComplexUnary(TestCase):
    def test_elementwise_matches_scalar_functions(self):
        values = [Complex(0.5, 0.25), Complex(-1.0, 2.0)]
        a = NArray(values)
        for name in _METHODS + ["acosh", "conj"]:
            with self.subTest(method=name):
                out = getattr(a, name)()
                self.assertIs(out.dtype, DType.COMPLEX128)
                fn = getattr(cm, name)
                for got, z in zip(out.get_data_as_vector(), values):
                    self.assertEqual(got, fn(z))

    def test_component_accessors_return_real_types(self):
        a = NArray([3 + 4j, -1j], dtype="complex64")
        self.assertIs(a.absolute().dtype, DType.FLOAT32)
        np.testing.assert_allclose(a.absolute().to_numpy(), [5.0, 1.0])
        np.testing.assert_allclose(a.real().to_numpy(), [3.0, 0.0])
        np.testing.assert_allclose(a.imag().to_numpy(), [4.0, -1.0])
        np.testing.assert_allclose(a.angle().to_numpy(), [math.atan2(4, 3), -math.pi / 2], rtol=1e-6)

    def test_abs_operator(self):
        self.assertEqual(abs(NArray([3 + 4j])).item(), 5.0)


if __name__ == "__main__":
    unittest.main()
