import os
import unittest
from unittest import TestCase, mock

from numxx.domain._dtype import DType
from numxx.domain._errors import ArrayValueError
from numxx.infrastructure._config import DEFAULT_DTYPE_ENV, get_default_dtype


class TestDefaultDType(TestCase):
    def setUp(self):
        get_default_dtype.cache_clear()
        self.addCleanup(get_default_dtype.cache_clear)

    def test_defaults_to_float64(self):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(DEFAULT_DTYPE_ENV, None)
            get_default_dtype.cache_clear()
            self.assertIs(get_default_dtype(), DType.FLOAT64)

    def test_reads_environment(self):
        with mock.patch.dict(os.environ, {DEFAULT_DTYPE_ENV: "int32"}):
            self.assertIs(get_default_dtype(), DType.INT32)

    def test_value_is_cached(self):
        with mock.patch.dict(os.environ, {DEFAULT_DTYPE_ENV: "complex64"}):
            first = get_default_dtype()
        with mock.patch.dict(os.environ, {DEFAULT_DTYPE_ENV: "int64"}):
            self.assertIs(get_default_dtype(), first)

    def test_invalid_name(self):
        with mock.patch.dict(os.environ, {DEFAULT_DTYPE_ENV: "quaternion"}):
            with self.assertRaises(ArrayValueError):
                get_default_dtype()


if __name__ == "__main__":
    unittest.main()
