import io


class BoundedIOError(Exception):
    pass


class MissingStreamError(BoundedIOError, TypeError):
    pass


class UnsupportedOperationError(BoundedIOError, io.UnsupportedOperation):
    """Raised when an operation can not be performed on a bounded view, regardless of its arguments."""

    def __init__(self, message):
        # io.UnsupportedOperation is an OSError, which interprets multiple arguments as errno and strerror
        super().__init__(message)


class InvalidArgumentError(BoundedIOError, ValueError):
    """Raised when a numeric argument is outside the range the view accepts.

    :param parameter: The name of the offending parameter.
    :param value: The value that was passed.
    :param bound: The bound that was violated, if there is a single one.
    """

    def __init__(self, message, parameter, value=None, bound=None):
        super().__init__("{} (parameter {!r})".format(message, parameter))
        self.parameter = parameter
        self.value = value
        self.bound = bound
