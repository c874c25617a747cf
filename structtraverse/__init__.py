"""
structtraverse
==============

Fluent, chainable validation and navigation of tree data (parsed JSON,
nested dicts and lists), with errors that name the path of the failing
value.

    from structtraverse import wrap

    payload = wrap(json.loads(body))
    name = payload.sub("name").not_null().string().string_validate(ALNUM).unwrap()
    port = payload.optional_sub("port", 8080).integer().range(1, 65535).unwrap()

    payload.sub("tags").array_max_length(16).array_for_each(check_tag)

Failures raise a subclass of TraverseError:
    Value is too large (path="/port", require='<=', threshold=65535).
"""

import logging

from structtraverse.core import (
    # Nodes
    Traverse,
    wrap,
    loads,
    # Ordering & iteration
    Comparator,
    DEFAULT_COMPARATOR,
    IterationControl,
    ROOT_PATH,
)
from structtraverse.errors import (
    TraverseError,
    TraverseParameterError,
    TraverseTypeError,
    TraverseFormatError,
    TraverseParseError,
    TraverseSizeError,
    TraverseKeyNotFoundError,
    TraverseIndexOutOfRangeError,
    TraverseValueOutOfRangeError,
)
from structtraverse.kinds import ValueKind, is_instance_of, is_same_type, kind_of
from structtraverse.detector import is_integer, is_numeric_strict, parse_integer, validate_string

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "Traverse", "wrap", "loads",
    "Comparator", "DEFAULT_COMPARATOR", "IterationControl", "ROOT_PATH",
    "TraverseError", "TraverseParameterError", "TraverseTypeError",
    "TraverseFormatError", "TraverseParseError", "TraverseSizeError",
    "TraverseKeyNotFoundError", "TraverseIndexOutOfRangeError",
    "TraverseValueOutOfRangeError",
    "ValueKind", "is_instance_of", "is_same_type", "kind_of",
    "is_integer", "is_numeric_strict", "parse_integer", "validate_string",
]
