import unittest
from unittest import TestCase

import numpy as np

from numxx.domain._complex import Complex
from numxx.domain._dtype import DType
from numxx.domain._errors import ShapeError
from numxx.infrastructure.narray import NArray


class TestElementwiseArithmetic(TestCase):
    def test_addition(self):
        out = NArray([1, 2, 3]) + NArray([4, 5, 6])
        self.assertTrue(out.array_equal(NArray([5, 7, 9])))

    def test_mismatched_shapes_raise(self):
        with self.assertRaises(ShapeError) as ctx:
            NArray([1, 2, 3]) + NArray([1, 2, 3, 4])
        self.assertEqual(
            str(ctx.exception),
            "Unable to add arrays. Cannot add shapes (3,) and (4,).",
        )
        with self.assertRaises(ShapeError):
            NArray([[1, 2]]) * NArray([1, 2])

    def test_scalars_on_either_side(self):
        a = NArray([1.0, 2.0])
        np.testing.assert_array_equal((a + 1).to_numpy(), [2.0, 3.0])
        np.testing.assert_array_equal((10 - a).to_numpy(), [9.0, 8.0])
        np.testing.assert_array_equal((2 * a).to_numpy(), [2.0, 4.0])
        np.testing.assert_array_equal((1 / a).to_numpy(), [1.0, 0.5])

    def test_multiplication_is_elementwise(self):
        a = NArray([[1, 2], [3, 4]])
        b = NArray([[1, 0], [0, 1]])
        self.assertEqual((a * b).tolist(), [[1, 0], [0, 4]])

    def test_promotion(self):
        i = NArray([1, 2], dtype="int32")
        f = NArray([0.5, 0.5], dtype="float32")
        self.assertIs((i + f).dtype, DType.FLOAT32)
        self.assertIs((i + 1.5).dtype, DType.FLOAT64)
        self.assertIs((i + i).dtype, DType.INT32)
        self.assertIs((f * 1j).dtype, DType.COMPLEX128)
        b = NArray([True, False])
        self.assertIs((b + b).dtype, DType.INT32)

    def test_true_division_of_integers_is_float(self):
        out = NArray([1, 2, 3]) / NArray([2, 2, 2])
        self.assertIs(out.dtype, DType.FLOAT64)
        np.testing.assert_array_equal(out.to_numpy(), [0.5, 1.0, 1.5])

    def test_division_by_zero_follows_ieee(self):
        out = NArray([1.0, -1.0, 0.0]) / 0.0
        values = out.to_numpy()
        self.assertEqual(values[0], np.inf)
        self.assertEqual(values[1], -np.inf)
        self.assertTrue(np.isnan(values[2]))

    def test_floor_division(self):
        out = NArray([7, -7]) // 2
        self.assertEqual(out.tolist(), [3, -4])
        with self.assertRaises(TypeError):
            NArray([1j]) // 2

    def test_power_real(self):
        self.assertEqual((NArray([1, 2, 3]) ** 2).tolist(), [1, 4, 9])
        np.testing.assert_allclose((2 ** NArray([0.0, 1.0])).to_numpy(), [1.0, 2.0])

    def test_integer_power_with_negative_exponent(self):
        out = NArray([1, 2, 4]) ** -1
        self.assertIs(out.dtype, DType.FLOAT64)
        np.testing.assert_allclose(out.to_numpy(), [1.0, 0.5, 0.25])

        out = NArray([2, 3]).power(NArray([2, -1]))
        self.assertIs(out.dtype, DType.FLOAT64)
        np.testing.assert_allclose(out.to_numpy(), [4.0, 1.0 / 3.0])

        out = 2 ** NArray([-2, 3])
        self.assertIs(out.dtype, DType.FLOAT64)
        np.testing.assert_allclose(out.to_numpy(), [0.25, 8.0])

    def test_integer_power_keeps_integers_for_non_negative_exponents(self):
        out = NArray([2, 3], dtype="int32") ** NArray([0, 2], dtype="int32")
        self.assertIs(out.dtype, DType.INT32)
        self.assertEqual(out.tolist(), [1, 9])

    def test_power_complex_matches_scalar(self):
        a = NArray([Complex(1, 1), Complex(0, 2)])
        out = a ** 2
        self.assertIs(out.dtype, DType.COMPLEX128)
        self.assertEqual(out.item(0), Complex(1, 1) ** 2)
        self.assertEqual(out.item(1), Complex(0, 2) ** 2)

    def test_complex_arithmetic(self):
        a = NArray([1 + 2j, 3 - 1j])
        out = a * Complex(0, 1)
        self.assertEqual(out.get_data_as_vector(), [Complex(-2, 1), Complex(1, 3)])

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            NArray([1, 2]) + "x"


class TestInPlaceArithmetic(TestCase):
    def test_iadd_writes_into_shared_buffer(self):
        a = NArray([1.0, 2.0])
        alias = a.copy()
        a += 1
        self.assertEqual(alias.tolist(), [2.0, 3.0])

    def test_in_place_keeps_element_type(self):
        a = NArray([1, 2, 3])
        a *= 2
        a /= 2
        self.assertIs(a.dtype, DType.INT64)
        self.assertEqual(a.tolist(), [1, 2, 3])

    def test_in_place_on_row_view(self):
        m = NArray([[1, 2], [3, 4]])
        row = m[1]
        row -= NArray([1, 1])
        self.assertEqual(m.tolist(), [[1, 2], [2, 3]])


class TestUnaryOperators(TestCase):
    def test_negation_and_abs(self):
        a = NArray([1, -2])
        self.assertEqual((-a).tolist(), [-1, 2])
        self.assertEqual(abs(a).tolist(), [1, 2])
        self.assertIs((-NArray([True])).dtype, DType.INT32)

    def test_positive_is_a_copy(self):
        a = NArray([1, 2])
        b = +a
        self.assertFalse(b.shares_buffer(a))
        self.assertTrue(b.array_equal(a))

    def test_matmul_operator(self):
        a = NArray([[1, 2], [3, 4]])
        self.assertEqual((a @ NArray([[1, 0], [0, 1]])).tolist(), [[1, 2], [3, 4]])


if __name__ == "__main__":
    unittest.main()
