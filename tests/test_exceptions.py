import io
import unittest

from boundedio import BoundedIOError, MissingStreamError, UnsupportedOperationError, InvalidArgumentError


class ExceptionsTest(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(MissingStreamError, BoundedIOError))
        self.assertTrue(issubclass(MissingStreamError, TypeError))
        self.assertTrue(issubclass(UnsupportedOperationError, BoundedIOError))
        self.assertTrue(issubclass(UnsupportedOperationError, io.UnsupportedOperation))
        self.assertTrue(issubclass(InvalidArgumentError, BoundedIOError))
        self.assertTrue(issubclass(InvalidArgumentError, ValueError))

    def test_unsupported_operation_message(self):
        exc = UnsupportedOperationError("Cannot set the length of a fixed substream.")
        self.assertEqual("Cannot set the length of a fixed substream.", str(exc))

    def test_invalid_argument_context(self):
        exc = InvalidArgumentError("Count cannot be less than zero.", 'count', -3, 0)
        self.assertEqual("Count cannot be less than zero. (parameter 'count')", str(exc))
        self.assertEqual('count', exc.parameter)
        self.assertEqual(-3, exc.value)
        self.assertEqual(0, exc.bound)
