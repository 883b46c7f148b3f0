import gc
import unittest
from unittest import TestCase

import numpy as np

from numxx.domain._dtype import DType
from numxx.domain._errors import ArrayValueError, ConversionError
from numxx.infrastructure.buffer import Buffer
from numxx.infrastructure.narray import NArray


class TestBufferAllocation(TestCase):
    def test_allocate_zeros(self):
        buf = Buffer.allocate(4, DType.INT32)
        self.assertEqual(buf.size, 4)
        self.assertIs(buf.dtype, DType.INT32)
        np.testing.assert_array_equal(buf.data, np.zeros(4, dtype=np.int32))

    def test_allocate_with_fill(self):
        buf = Buffer.allocate(3, DType.FLOAT64, fill=2.5)
        np.testing.assert_array_equal(buf.data, [2.5, 2.5, 2.5])

    def test_complex_fill_into_real_raises(self):
        with self.assertRaises(ConversionError):
            Buffer.allocate(2, DType.FLOAT64, fill=1j)

    def test_rejects_non_flat_storage(self):
        with self.assertRaises(ArrayValueError):
            Buffer(np.zeros((2, 2)))

    def test_from_numpy_without_copy_shares_memory(self):
        src = np.arange(6, dtype=np.float64)
        buf = Buffer.from_numpy(src, copy=False)
        src[0] = 42.0
        self.assertEqual(buf.data[0], 42.0)

    def test_from_numpy_normalizes_dtype(self):
        buf = Buffer.from_numpy(np.arange(3, dtype=np.int16))
        self.assertIs(buf.dtype, DType.INT32)
        self.assertEqual(buf.data.dtype, np.int32)


class TestBufferRefcount(TestCase):
    def test_fresh_buffer_has_no_handles(self):
        buf = Buffer.allocate(2, DType.FLOAT64)
        self.assertEqual(buf.refcount, 0)
        self.assertFalse(buf.released)

    def test_incref_decref_release(self):
        buf = Buffer.allocate(2, DType.FLOAT64)
        buf.incref()
        buf.incref()
        buf.decref()
        self.assertFalse(buf.released)
        buf.decref()
        self.assertTrue(buf.released)
        self.assertEqual(buf.size, 0)

    def test_released_buffer_cannot_be_attached(self):
        buf = Buffer.allocate(2, DType.FLOAT64)
        buf.incref()
        buf.decref()
        with self.assertRaises(ArrayValueError):
            buf.incref()

    def test_views_count_as_handles(self):
        a = NArray([[1, 2], [3, 4]])
        buf = a.buffer
        self.assertEqual(buf.refcount, 1)
        row = a[0]
        alias = a.copy()
        self.assertEqual(buf.refcount, 3)
        del row, alias
        gc.collect()
        self.assertEqual(buf.refcount, 1)

    def test_view_keeps_buffer_alive_after_source_is_dropped(self):
        a = NArray([1.0, 2.0, 3.0])
        buf = a.buffer
        view = a.ravel()
        del a
        gc.collect()
        self.assertFalse(buf.released)
        np.testing.assert_array_equal(view.to_numpy(), [1.0, 2.0, 3.0])
        del view
        gc.collect()
        self.assertTrue(buf.released)

    def test_deepcopy_has_independent_buffer(self):
        a = NArray([1, 2, 3])
        b = a.deepcopy()
        self.assertIsNot(a.buffer, b.buffer)
        self.assertEqual(a.buffer.refcount, 1)
        self.assertEqual(b.buffer.refcount, 1)


if __name__ == "__main__":
    unittest.main()
