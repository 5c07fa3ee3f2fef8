import io
import unittest

from boundedio import BoundedView


class WrappedStream:
    """Passes everything on to the raw stream, so that subclasses can take away or change a single capability."""

    def __init__(self, raw):
        self.raw = raw

    def __getattr__(self, item):
        return getattr(self.raw, item)


class UnseekableStream(WrappedStream):
    def seekable(self):
        return False

    def seek(self, a, b=0):
        raise io.UnsupportedOperation()


class ReadOnlyStream(WrappedStream):
    def writable(self):
        return False


class WriteOnlyStream(WrappedStream):
    def readable(self):
        return False


class NoReadintoStream(WrappedStream):
    def __getattr__(self, item):
        if item == 'readinto':
            raise AttributeError(item)
        return super().__getattr__(item)


class ShortReadStream(WrappedStream):
    """Never transfers more than chunk bytes per call, like a pipe or socket would."""

    def __init__(self, raw, chunk):
        super().__init__(raw)
        self.chunk = chunk

    def readinto(self, b):
        return self.raw.readinto(memoryview(b)[:self.chunk])


class NonBlockingStream(WrappedStream):
    """Behaves like a non-blocking raw stream that has no data available and can not accept any."""

    def read(self, size=-1):
        return None

    def readline(self, size=-1):
        return None

    def readinto(self, b):
        return None

    def write(self, b):
        return None


class NonBlockingNoReadintoStream(NoReadintoStream):
    def read(self, size=-1):
        return None


class ShortWriteStream(WrappedStream):
    """Never accepts more than chunk bytes per call."""

    def __init__(self, raw, chunk):
        super().__init__(raw)
        self.chunk = chunk

    def write(self, b):
        return self.raw.write(memoryview(b)[:self.chunk])


class TimeoutStream(WrappedStream):
    can_timeout = True
    read_timeout = 30
    write_timeout = 60


class FlushCountingStream(WrappedStream):
    def __init__(self, raw):
        super().__init__(raw)
        self.flushes = 0

    def flush(self):
        self.flushes += 1


class BoundedViewTestCase(unittest.TestCase):
    DATA = bytes([1, 2, 3, 4, 5, 6, 7, 8])

    def make_view(self, offset, length, data=DATA, wrapper=None):
        raw = io.BytesIO(data)
        view = BoundedView(raw if wrapper is None else wrapper(raw), offset, length)
        return raw, view

    def assertUntouched(self, view, raw, position, raw_position):
        self.assertEqual(position, view.position)
        self.assertEqual(raw_position, raw.tell())
