import unittest
from unittest import TestCase

from numxx.domain._errors import (
    ArgumentError,
    ArrayIndexError,
    ArrayValueError,
    ConversionError,
    NumxxError,
    ShapeError,
)


class TestErrorHierarchy(TestCase):
    def test_builtin_bases(self):
        self.assertTrue(issubclass(ShapeError, ValueError))
        self.assertTrue(issubclass(ArrayValueError, ValueError))
        self.assertTrue(issubclass(ArrayIndexError, IndexError))
        self.assertTrue(issubclass(ConversionError, TypeError))
        self.assertTrue(issubclass(ArgumentError, OSError))

    def test_common_base(self):
        for cls in (ShapeError, ArrayValueError, ArrayIndexError, ConversionError, ArgumentError):
            self.assertTrue(issubclass(cls, NumxxError))


class TestErrorMessages(TestCase):
    def test_shape_error_for_operation(self):
        err = ShapeError.for_operation((3,), (4,), "add")
        self.assertEqual(
            str(err), "Unable to add arrays. Cannot add shapes (3,) and (4,)."
        )
        self.assertEqual(err.lshape, (3,))
        self.assertEqual(err.rshape, (4,))
        self.assertEqual(err.operation, "add")

    def test_conversion_error(self):
        err = ConversionError((2,), "float")
        self.assertEqual(str(err), "Unable to convert array of shape (2,) to float.")
        self.assertEqual(err.shape, (2,))
        self.assertEqual(err.target, "float")


if __name__ == "__main__":
    unittest.main()
