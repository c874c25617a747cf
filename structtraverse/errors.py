"""
structtraverse.errors — Error taxonomy.

Every failure raised by a Traverse node derives from TraverseError, so
callers can catch one specific kind or all of them:

    TraverseError
    ├── TraverseParameterError        bad argument to an assertion
    ├── TraverseTypeError             wrong kind, or unexpected None
    ├── TraverseFormatError           string fails a lexical rule
    ├── TraverseParseError            JSON decoding failed
    ├── TraverseSizeError             list length constraint violated
    ├── TraverseKeyNotFoundError      key lookup failed
    ├── TraverseIndexOutOfRangeError  positional lookup failed
    └── TraverseValueOutOfRangeError  threshold constraint violated

Messages embed the structural path, e.g.
    Invalid object type (path="/server/port").
"""


class TraverseError(Exception):
    """Base class of all traverse errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class TraverseParameterError(TraverseError):
    """Raised when an assertion receives an invalid argument."""
    pass


class TraverseTypeError(TraverseError):
    """Raised when the wrapped value has the wrong kind or is None."""
    pass


class TraverseFormatError(TraverseError):
    """Raised when a wrapped string violates a content rule."""
    pass


class TraverseParseError(TraverseError):
    """Raised when the wrapped string cannot be decoded."""
    pass


class TraverseSizeError(TraverseError):
    """Raised when a list is too short or too long."""
    pass


class TraverseKeyNotFoundError(TraverseError):
    """Raised when a key (or membership) lookup fails."""
    pass


class TraverseIndexOutOfRangeError(TraverseError):
    """
    Raised when a positional lookup falls outside a list.

    Deliberately NOT a subclass of TraverseValueOutOfRangeError, so
    array-bound failures can be told apart from threshold failures.
    """
    pass


class TraverseValueOutOfRangeError(TraverseError):
    """Raised when a value violates a min/max threshold."""
    pass
