from boundedio.exceptions import BoundedIOError, MissingStreamError, UnsupportedOperationError, InvalidArgumentError
from boundedio.view import BoundedView, SeekOrigin, region


__version__ = '0.1.0'
