import copy
import unittest
from unittest import TestCase

import numpy as np

from numxx.domain._dtype import DType
from numxx.domain._errors import (
    ArrayIndexError,
    ArrayValueError,
    ConversionError,
    ShapeError,
)
from numxx.infrastructure.narray import NArray


class TestIndexingViews(TestCase):
    def test_row_view_aliases_source(self):
        a = NArray([1, 2, 3, 4]).reshape(2, 2)
        b = a[0]
        b[0] = 100
        self.assertEqual(a.tolist(), [[100, 2], [3, 4]])

    def test_writes_through_source_visible_in_view(self):
        a = NArray([[1, 2], [3, 4]])
        row = a[1]
        a[1, 0] = -3
        self.assertEqual(row.tolist(), [-3, 4])

    def test_rank1_indexing_gives_rank0_view(self):
        a = NArray([1.0, 2.0, 3.0])
        e = a[-1]
        self.assertEqual(e.shape, ())
        self.assertEqual(float(e), 3.0)
        e.assign(7.0)
        self.assertEqual(a.item(2), 7.0)

    def test_tuple_index(self):
        a = NArray([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
        self.assertEqual(a[1, 0].tolist(), [5, 6])
        self.assertEqual(a[1, 1, 1].item(), 8)

    def test_view_offsets(self):
        a = NArray([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(a[1].offset, 3)
        self.assertTrue(a[1].shares_buffer(a))

    def test_out_of_range_index(self):
        a = NArray([[1, 2], [3, 4]])
        with self.assertRaises(ArrayIndexError):
            a[2]
        with self.assertRaises(ArrayIndexError):
            a[-3]
        with self.assertRaises(ArrayIndexError):
            a[0.5]

    def test_rank0_cannot_be_indexed_or_iterated(self):
        a = NArray(1)
        with self.assertRaises(ArrayIndexError):
            a[0]
        with self.assertRaises(TypeError):
            len(a)
        with self.assertRaises(TypeError):
            list(a)

    def test_iteration_yields_rows(self):
        a = NArray([[1, 2], [3, 4]])
        self.assertEqual([row.tolist() for row in a], [[1, 2], [3, 4]])
        self.assertEqual(len(a), 2)
        self.assertEqual(list(a.flat), [1, 2, 3, 4])


class TestCopies(TestCase):
    def test_copy_shares_buffer(self):
        a = NArray([1, 2, 3])
        b = a.copy()
        b[0] = 9
        self.assertEqual(a.item(0), 9)
        self.assertIs(copy.copy(a).buffer, a.buffer)

    def test_deepcopy_is_independent(self):
        a = NArray([1, 2, 3])
        b = copy.deepcopy(a)
        b[0] = 9
        self.assertEqual(a.item(0), 1)

    def test_astype(self):
        a = NArray([1.7, -2.2])
        b = a.astype("int32")
        self.assertIs(b.dtype, DType.INT32)
        self.assertEqual(b.tolist(), [1, -2])
        self.assertIs(NArray([1]).astype(complex).dtype, DType.COMPLEX128)

    def test_astype_complex_to_real_raises(self):
        with self.assertRaises(ConversionError):
            NArray([1j]).astype(DType.FLOAT64)


class TestInPlaceWrites(TestCase):
    def test_assign_keeps_buffer(self):
        a = NArray([[1, 2], [3, 4]])
        alias = a.ravel()
        a.assign([[5, 6], [7, 8]])
        self.assertEqual(alias.tolist(), [5, 6, 7, 8])

    def test_assign_reads_row_major_regardless_of_shape(self):
        a = NArray([[0, 0], [0, 0]])
        a.assign([1, 2, 3, 4])
        self.assertEqual(a.tolist(), [[1, 2], [3, 4]])

    def test_assign_casts_to_existing_type(self):
        a = NArray([0, 0])
        a.assign([1.9, 2.1])
        self.assertIs(a.dtype, DType.INT64)
        self.assertEqual(a.tolist(), [1, 2])

    def test_assign_size_mismatch(self):
        with self.assertRaises(ArrayValueError):
            NArray([1, 2, 3]).assign([1, 2])
        with self.assertRaises(ArrayValueError):
            NArray([1, 2, 3]).assign(5)

    def test_assign_complex_into_real(self):
        with self.assertRaises(ConversionError):
            NArray([1.0]).assign(1j)

    def test_fill_and_put(self):
        a = NArray([[1, 2], [3, 4]])
        a[0].fill(0)
        a.put(-1, 9)
        self.assertEqual(a.tolist(), [[0, 0], [3, 9]])


class TestShapeOperations(TestCase):
    def test_transpose_is_a_copy(self):
        m = NArray([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        self.assertEqual(t.shape, (3, 2))
        self.assertEqual(t.tolist(), [[1, 4], [2, 5], [3, 6]])
        self.assertFalse(t.shares_buffer(m))

    def test_transpose_twice_is_identity(self):
        m = NArray(np.arange(12.0).reshape(3, 4))
        tt = m.T.T
        self.assertEqual(tt.shape, m.shape)
        self.assertTrue(tt.array_equal(m))

    def test_transpose_rank1_gives_row(self):
        self.assertEqual(NArray([1, 2, 3]).T.shape, (1, 3))

    def test_transpose_rank3_raises(self):
        with self.assertRaises(ShapeError):
            NArray(np.zeros((2, 2, 2))).transpose()

    def test_flatten_copies_and_ravel_views(self):
        a = NArray([[1, 2], [3, 4]])
        flat = a.flatten()
        rav = a.ravel()
        self.assertEqual(flat.shape, (4,))
        self.assertFalse(flat.shares_buffer(a))
        self.assertTrue(rav.shares_buffer(a))

    def test_reshape_is_a_view(self):
        a = NArray([1, 2, 3, 4, 5, 6])
        r = a.reshape((3, 2))
        r[2, 1] = 60
        self.assertEqual(a.item(5), 60)
        self.assertEqual(a.reshape(2, 3).shape, (2, 3))

    def test_reshape_size_mismatch(self):
        with self.assertRaises(ArrayValueError):
            NArray([1, 2, 3]).reshape(2, 2)


if __name__ == "__main__":
    unittest.main()
