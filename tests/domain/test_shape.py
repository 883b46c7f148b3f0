import unittest
from unittest import TestCase

from numxx.domain._errors import ArrayIndexError, ArrayValueError, ShapeError
from numxx.domain._shape import MatmulType, Shape


class TestShapeBasics(TestCase):
    def test_total_size_is_product_of_extents(self):
        for dims in [(), (0,), (3,), (2, 3), (2, 3, 4), (5, 1, 2, 1)]:
            expected = 1
            for d in dims:
                expected *= d
            self.assertEqual(Shape(*dims).total_size, expected)

    def test_rank_zero_shape(self):
        s = Shape()
        self.assertEqual(s.ndim, 0)
        self.assertEqual(s.total_size, 1)
        self.assertEqual(s.dimensions, ())

    def test_accepts_iterable_or_separate_extents(self):
        self.assertEqual(Shape(2, 3), Shape((2, 3)))
        self.assertEqual(Shape([2, 3]), Shape(Shape(2, 3)))

    def test_rejects_negative_or_non_integer_extents(self):
        with self.assertRaises(ArrayValueError):
            Shape(2, -1)
        with self.assertRaises(ArrayValueError):
            Shape(2.5)
        with self.assertRaises(ArrayValueError):
            Shape(True)

    def test_equality_with_tuples_and_lists(self):
        s = Shape(2, 3)
        self.assertEqual(s, (2, 3))
        self.assertEqual(s, [2, 3])
        self.assertNotEqual(s, (3, 2))
        self.assertEqual(hash(s), hash(Shape(2, 3)))

    def test_repr_and_str(self):
        self.assertEqual(repr(Shape(2, 3)), "Shape(2, 3)")
        self.assertEqual(str(Shape(4)), "(4,)")


class TestShapeIndexing(TestCase):
    def test_negative_indices_wrap_once(self):
        s = Shape(2, 3, 4)
        self.assertEqual(s[0], 2)
        self.assertEqual(s[-1], 4)
        self.assertEqual(s[-3], 2)

    def test_out_of_range_index_raises(self):
        s = Shape(2, 3)
        with self.assertRaises(ArrayIndexError):
            s[2]
        with self.assertRaises(ArrayIndexError):
            s[-3]

    def test_index_error_is_builtin_index_error(self):
        with self.assertRaises(IndexError):
            Shape(1)[5]


class TestShapeGeometry(TestCase):
    def test_transpose_rank1_becomes_row(self):
        self.assertEqual(Shape(4).transpose(), (1, 4))

    def test_transpose_rank2_swaps(self):
        self.assertEqual(Shape(2, 5).transpose(), (5, 2))

    def test_transpose_other_ranks_raise(self):
        with self.assertRaises(ShapeError):
            Shape().transpose()
        with self.assertRaises(ShapeError):
            Shape(2, 2, 2).transpose()

    def test_flatten(self):
        self.assertEqual(Shape(2, 3, 4).flatten(), (24,))

    def test_reshape_mutates_in_place(self):
        s = Shape(2, 3)
        out = s.reshape(3, 2)
        self.assertIs(out, s)
        self.assertEqual(s, (3, 2))

    def test_insert_dimension(self):
        s = Shape(2, 3)
        s.insert_dimension(5)
        self.assertEqual(s, (5, 2, 3))
        s.insert_dimension(7, pos=3)
        self.assertEqual(s, (5, 2, 3, 7))
        s.insert_dimension(1, pos=-1)
        self.assertEqual(s, (5, 2, 3, 1, 7))

    def test_insert_dimension_out_of_range(self):
        with self.assertRaises(ArrayIndexError):
            Shape(2).insert_dimension(3, pos=3)

    def test_strides_are_row_major(self):
        self.assertEqual(Shape(2, 3, 4).compute_strides(), (12, 4, 1))
        self.assertEqual(Shape().compute_strides(), ())

    def test_copy_is_independent(self):
        s = Shape(2, 3)
        c = s.copy()
        c.reshape(6)
        self.assertEqual(s, (2, 3))

    def test_is_square(self):
        self.assertTrue(Shape(3, 3).is_square())
        self.assertTrue(Shape(1).is_square())
        self.assertTrue(Shape().is_square())
        self.assertFalse(Shape(2, 3).is_square())
        self.assertFalse(Shape(3).is_square())
        self.assertFalse(Shape(1, 1, 1).is_square())


class TestMatmulClassification(TestCase):
    def test_dot_iff_rank1_equal_lengths(self):
        self.assertEqual(Shape.get_matmul_type((3,), (3,)), MatmulType.DOT)
        self.assertEqual(Shape.get_matmul_type((3,), (4,)), MatmulType.INVALID)

    def test_mat_mat_iff_inner_extents_match(self):
        self.assertEqual(Shape.get_matmul_type((2, 3), (3, 4)), MatmulType.MAT_MAT)
        self.assertEqual(Shape.get_matmul_type((2, 3), (2, 3)), MatmulType.INVALID)

    def test_row_mat_and_mat_col(self):
        self.assertEqual(Shape.get_matmul_type((2,), (2, 5)), MatmulType.ROW_MAT)
        self.assertEqual(Shape.get_matmul_type((4, 2), (2,)), MatmulType.MAT_COL)
        self.assertEqual(Shape.get_matmul_type((3,), (2, 5)), MatmulType.INVALID)

    def test_higher_ranks_are_invalid(self):
        self.assertEqual(Shape.get_matmul_type((2, 2, 2), (2, 2)), MatmulType.INVALID)
        self.assertEqual(Shape.get_matmul_type((), (2,)), MatmulType.INVALID)

    def test_invalid_is_falsy(self):
        self.assertFalse(MatmulType.INVALID)
        self.assertTrue(MatmulType.DOT)

    def test_product_shapes(self):
        self.assertEqual(Shape.get_product_shape((3,), (3,)), (1,))
        self.assertEqual(Shape.get_product_shape((2,), (2, 5)), (5,))
        self.assertEqual(Shape.get_product_shape((4, 2), (2,)), (4,))
        self.assertEqual(Shape.get_product_shape((2, 3), (3, 4)), (2, 4))

    def test_product_shape_of_invalid_pair_raises(self):
        with self.assertRaises(ShapeError) as ctx:
            Shape.get_product_shape((3,), (4,))
        self.assertIn("Cannot multiply shapes (3,) and (4,)", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
