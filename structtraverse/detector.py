"""
structtraverse.detector — Lexical testers for strings.

Two strict number grammars and a character-table check:

    is_integer("-7")          → True
    is_integer("007")         → False   (redundant leading zero)
    is_numeric_strict("-0.2") → True
    is_numeric_strict(".2")   → False   (no integer part)
    validate_string("abc", "abcdef") → True
"""

import re


# ═══════════════════════════════════════════════════════════════════
#  GRAMMARS
# ═══════════════════════════════════════════════════════════════════

# ASCII digits only; \d would also accept other Unicode digits.
_INTEGER = re.compile(r"-?(?:0|[1-9][0-9]*)")
_NUMERIC_STRICT = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?")


def is_integer(text: str) -> bool:
    """
    Check whether `text` is an integer literal.

        • A leading "-" is allowed, and "-0" counts as an integer.
        • A positive number starting with "0" (other than "0") does not.
    """
    return _INTEGER.fullmatch(text) is not None


def is_numeric_strict(text: str) -> bool:
    """
    Check whether `text` is a strict numeric literal.

    Same integer part as is_integer(), optionally followed by "." and
    at least one digit.  A bare leading "." is rejected.

        "0"     → True
        "1000"  → True
        "0111"  → False
        "-0.2"  → True
        ".2"    → False
    """
    return _NUMERIC_STRICT.fullmatch(text) is not None


# int() refuses strings longer than sys.get_int_max_str_digits() (4300 by
# default), so long literals are folded in chunks below that limit.
_CHUNK_DIGITS = 1000


def parse_integer(text: str) -> int:
    """
    Convert a string accepted by is_integer() to an int, at any length.

        parse_integer("-7")       → -7
        parse_integer("1" * 5000) → 111...1 (5000 digits)
    """
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if negative else value


# ═══════════════════════════════════════════════════════════════════
#  CHARACTER TABLE
# ═══════════════════════════════════════════════════════════════════

def validate_string(text: str, char_table: str) -> bool:
    """True if every character of `text` appears in `char_table`."""
    allowed = set(char_table)
    return all(ch in allowed for ch in text)
