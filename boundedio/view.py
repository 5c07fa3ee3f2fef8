import enum
import io
import logging
import operator
import sys

from .exceptions import InvalidArgumentError, MissingStreamError, UnsupportedOperationError
from .streams import _PurePythonIOImplementationMixin

logger = logging.getLogger(__name__)


class SeekOrigin(enum.IntEnum):
    BEGIN = io.SEEK_SET
    CURRENT = io.SEEK_CUR
    END = io.SEEK_END


def _capable(raw, name):
    """Returns whether the raw stream claims a capability, by calling e.g. its ``readable()``. Streams that do not
    implement the check are assumed not to have the capability.
    """
    try:
        check = getattr(raw, name)
    except AttributeError:
        return False
    return bool(check())


def _narrow(value, name):
    # transfer sizes are limited to index-sized integers, as they are in io itself
    if value > sys.maxsize:
        raise OverflowError("The {} of the substream ({}) does not fit in an index-sized integer.".format(name, value))
    return value


class BoundedView(_PurePythonIOImplementationMixin):
    """Represents a fixed region of a seekable stream as a stream of its own, with its own positions starting at zero.

    No operation on the view reads, writes or seeks outside ``[offset, offset + length)`` of the raw stream. Reads and
    writes that would cross the end of the region are silently truncated.

    The raw stream is not owned by the view: closing the view does not close it, and the position of the raw stream
    after any operation on the view is only meaningful to the view. Views sharing a raw stream must not be used
    concurrently without external locking.
    """

    def __init__(self, raw, offset, length):
        """

        :param raw: The raw underlying stream. Must be seekable.
        :param offset: The absolute offset of the region in the raw stream.
        :param length: The length of the region.
        """

        if raw is None:
            raise MissingStreamError("Can not initialize a BoundedView without an underlying stream.")
        if not _capable(raw, 'seekable'):
            raise UnsupportedOperationError("Stream does not support seeking.")

        offset = operator.index(offset)
        length = operator.index(length)
        if offset < 0:
            raise InvalidArgumentError("Offset cannot be less than zero.", 'offset', offset, 0)
        if length < 0:
            raise InvalidArgumentError("Length cannot be less than zero.", 'length', length, 0)

        self.raw = raw
        self._offset = offset
        self._length = length
        self._position = 0

        logger.debug("Created view on [%d, %d) of %r", offset, offset + length, raw)

    def __len__(self):
        return self._length

    def __repr__(self):
        return "<{} offset={} length={} position={}>".format(
            self.__class__.__name__, self._offset, self._length, self._position)

    @property
    def offset(self):
        return self._offset

    @property
    def length(self):
        return self._length

    @property
    def position(self):
        return self._position

    @position.setter
    def position(self, value):
        self._set_position(value, 'position')

    def _set_position(self, value, parameter):
        """Internal: the only place where an absolute local position is validated and assigned."""
        value = operator.index(value)
        if value < 0:
            raise InvalidArgumentError("Position cannot be less than zero.", parameter, value, 0)
        if value > self._length:
            raise InvalidArgumentError("Position cannot be greater than the length of the substream.",
                                       parameter, value, self._length)

        self.raw.seek(self._offset + value)
        self._position = value

    def _seek_raw(self):
        """Internal: called at the start of all transfers, as the raw stream may have been moved by others."""
        self.raw.seek(self._offset + self._position)

    def _cap_amount_of_bytes(self, size):
        # Unfortunately this does not gracefully handle positions beyond sys.maxsize, but raises OverflowError.
        max_to_transfer = max(0, _narrow(self._length, 'length') - _narrow(self._position, 'position'))

        if size is None:
            return max_to_transfer
        size = operator.index(size)
        if size < 0:
            return max_to_transfer
        if size > max_to_transfer:
            logger.debug("Truncating transfer of %d bytes to %d bytes at the end of %r", size, max_to_transfer, self)
            return max_to_transfer
        return size

    def _buffer_window(self, buffer, buffer_offset, count):
        """Internal: validates the part of the buffer that a caller wants to transfer and returns it as a memoryview,
        together with the validated count.
        """
        view = memoryview(buffer).cast('B')

        buffer_offset = operator.index(buffer_offset)
        if buffer_offset < 0:
            raise InvalidArgumentError("Buffer offset cannot be less than zero.", 'buffer_offset', buffer_offset, 0)
        if buffer_offset > len(view):
            raise InvalidArgumentError("Buffer offset cannot be greater than the size of the buffer.",
                                       'buffer_offset', buffer_offset, len(view))

        if count is None:
            count = len(view) - buffer_offset
        count = operator.index(count)
        if count < 0:
            raise InvalidArgumentError("Count cannot be less than zero.", 'count', count, 0)
        if buffer_offset + count > len(view):
            raise InvalidArgumentError("Count cannot exceed the size of the buffer after the buffer offset.",
                                       'count', count, len(view) - buffer_offset)

        return view[buffer_offset:buffer_offset + count], count

    def _check_readable(self):
        if not self.readable():
            raise UnsupportedOperationError("Underlying stream does not support reading.")

    def _check_writable(self):
        if not self.writable():
            raise UnsupportedOperationError("Underlying stream does not support writing.")

    # reading

    def _read(self, size, method):
        self._check_readable()
        size = self._cap_amount_of_bytes(size)
        self._seek_raw()
        result = getattr(self.raw, method)(size)
        if result is None:  # non-blocking raw stream without data available
            return None
        self._position += len(result)
        return result

    def read(self, size=-1):
        return self._read(size, 'read')

    def readline(self, size=-1):
        return self._read(size, 'readline')

    def readinto(self, buffer, buffer_offset=0, count=None):
        """Reads at most *count* bytes into *buffer*, starting at *buffer_offset* in the buffer. If *count* is not
        provided, the remainder of the buffer is used. The part of the buffer that is not read into is left untouched.

        :return: The amount of bytes actually read, which is less than *count* when the end of the region (or of the
            raw stream) is reached.
        """
        self._check_readable()
        window, count = self._buffer_window(buffer, buffer_offset, count)
        window = window[:self._cap_amount_of_bytes(count)]
        self._seek_raw()

        if hasattr(self.raw, 'readinto'):
            n = self.raw.readinto(window)
        else:
            data = self.raw.read(len(window))
            n = None if data is None else len(data)
            if n:
                window[:n] = data

        if n is None:  # non-blocking raw stream without data available
            n = 0
        self._position += n
        return n

    # writing

    def write(self, buffer, buffer_offset=0, count=None):
        """Writes at most *count* bytes from *buffer*, starting at *buffer_offset* in the buffer. Bytes that do not fit
        in the region are dropped.

        :return: The amount of bytes actually written.
        """
        self._check_writable()
        window, count = self._buffer_window(buffer, buffer_offset, count)
        window = window[:self._cap_amount_of_bytes(count)]
        self._seek_raw()

        n = self.raw.write(window)

        if n is None:  # non-blocking raw stream that could not accept data
            n = 0
        self._position += n
        return n

    def set_length(self, value):
        raise UnsupportedOperationError("Cannot set the length of a fixed substream.")

    def truncate(self, size=None):
        return self.set_length(size)

    def flush(self):
        return self.raw.flush()

    # seeking

    def seek(self, offset, whence=SeekOrigin.BEGIN):
        offset = operator.index(offset)
        try:
            origin = SeekOrigin(whence)
        except ValueError:
            raise InvalidArgumentError("Unsupported whence value.", 'whence', whence) from None

        if origin == SeekOrigin.BEGIN:
            self._set_position(offset, 'offset')

        elif origin == SeekOrigin.END:
            if offset > 0:
                raise InvalidArgumentError("Offset cannot be greater than zero when seeking from the end.",
                                           'offset', offset, 0)
            if offset < -self._length:
                raise InvalidArgumentError("Offset cannot be less than the negated length of the substream.",
                                           'offset', offset, -self._length)
            self.raw.seek(self._offset + self._length + offset)
            self._position = self._length + offset

        else:
            if self._position + offset < 0:
                raise UnsupportedOperationError("Attempted to seek before the start of the substream.")
            if self._position + offset > self._length:
                raise UnsupportedOperationError("Attempted to seek beyond the end of the substream.")
            # absolute, as the raw stream may have been moved by others since our last operation
            self.raw.seek(self._offset + self._position + offset)
            self._position += offset

        return self._position

    def tell(self):
        return self._position

    # capabilities, all of which are those of the raw stream

    def readable(self):
        return _capable(self.raw, 'readable')

    def writable(self):
        return _capable(self.raw, 'writable')

    def seekable(self):
        return _capable(self.raw, 'seekable')

    @property
    def can_read(self):
        return self.readable()

    @property
    def can_write(self):
        return self.writable()

    @property
    def can_seek(self):
        return self.seekable()

    @property
    def can_timeout(self):
        return bool(getattr(self.raw, 'can_timeout', False))

    def _raw_timeout(self, name):
        try:
            return getattr(self.raw, name)
        except AttributeError:
            raise UnsupportedOperationError("Underlying stream does not support timeouts.") from None

    @property
    def read_timeout(self):
        return self._raw_timeout('read_timeout')

    @read_timeout.setter
    def read_timeout(self, value):
        raise UnsupportedOperationError("Cannot set the read timeout of a substream.")

    @property
    def write_timeout(self):
        return self._raw_timeout('write_timeout')

    @write_timeout.setter
    def write_timeout(self, value):
        raise UnsupportedOperationError("Cannot set the write timeout of a substream.")


def region(stream, offset, length):
    """Shortcut for ``BoundedView(stream, offset, length)``."""
    return BoundedView(stream, offset, length)
