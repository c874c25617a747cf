"""
structtraverse.formats — JSON bridging for tree data.

Supported conversions:
    • JSON text → Python objects   (strict: NaN/Infinity literals rejected)
    • Python objects → compact JSON text
    • Any value → short JSON-like representation for paths and messages
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

# Compact output, same shape as a browser's JSON.stringify().
JSON_SEPARATORS = (",", ":")

# Stand-in text for values that have no JSON representation.
UNSERIALIZABLE = "(unserializable)"

_CIRCULAR_REFERENCE = "Circular reference detected"


# ═══════════════════════════════════════════════════════════════════
#  JSON TEXT ↔ PYTHON OBJECTS
# ═══════════════════════════════════════════════════════════════════

def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def load_json(text: str) -> Any:
    """
    Parse a JSON string into plain Python objects.

    Raises ValueError (json.JSONDecodeError for syntax errors) when the
    text is not strict JSON.
    """
    return json.loads(text, parse_constant=_reject_constant)


def dump_json(value: Any) -> str:
    """
    Convert a Python object into compact JSON text.

    Raises:
        TypeError:      the value holds an object json cannot encode
        ValueError:     reference cycle, or a non-finite float
        RecursionError: nesting too deep for the encoder
    """
    return json.dumps(
        value,
        separators=JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )


def is_type_failure(error: Exception) -> bool:
    """
    Whether an encoding failure is about the TYPE of the data.

    Unencodable objects raise TypeError; reference cycles raise a
    ValueError from the encoder's cycle check.  Both mean the value is
    not JSON-shaped, as opposed to a JSON-shaped value that could not be
    written (NaN, over-deep nesting).
    """
    if isinstance(error, TypeError):
        return True
    return isinstance(error, ValueError) and str(error).startswith(_CIRCULAR_REFERENCE)


# ═══════════════════════════════════════════════════════════════════
#  REPRESENTATION
# ═══════════════════════════════════════════════════════════════════

def representation(value: Any) -> str:
    """
    Short JSON-like text for `value`:

        42      → 42
        "key"   → "key"
        (1, 2)  → [1,2]
        object()→ (unserializable)
    """
    try:
        return dump_json(value)
    except (TypeError, ValueError, RecursionError) as error:
        logger.debug("No JSON representation for %s: %s", type(value).__name__, error)
        return UNSERIALIZABLE
