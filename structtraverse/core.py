"""
structtraverse.core — Chainable validation over tree data
==========================================================

A Traverse node wraps one value of a parsed JSON document (or any nested
dict/list structure) together with the PATH that led to it:

    config = wrap(json_payload)
    port = config.sub("server").sub("port").not_null().integer().range(1, 65535).unwrap()

Every operation either validates the wrapped value and returns the same
node (so assertions chain), or derives a NEW node for a child value with
an extended path.  When an assertion fails, the raised error names the
path:

    TraverseValueOutOfRangeError:
        Value is too large (path="/server/port", require='<=', threshold=65535).


§1  PATHS
─────────

The root path is "/".  Child segments are joined with "/":

    /server/port         sub("server").sub("port")
    /users/[0]/name      sub("users").array_get_item(0).sub("name")
    /[JSON(Load)]/id     json_load().sub("id")
    /count/[str->int]    sub("count").string_to_integer()

Paths are diagnostics only, they are never parsed back.


§2  NULL HANDLING
─────────────────

None is a legal value for every node.  Assertions treat it as vacuously
valid, so optional fields validate without special cases (custom_rule is
the exception: its predicate sees None and decides):

    wrap({"ttl": None}).sub("ttl").integer().min(0)      # passes

Operations that cannot produce anything from None (sub, array_length,
string_to_integer, ...) require a non-null value and raise
TraverseTypeError.  Chain not_null() to make a field mandatory.


§3  MEMOIZATION
───────────────

A node remembers the outcome of not_null() and of each type_of() kind it
was checked against, so repeated checks in a chain cost a dict lookup.
This is sound because a node never changes WHICH value it holds: the
mutators (object_set, array_*_item) change the contents of the
referenced container, never the node's own value slot.


§4  ITERATION
─────────────

array_for_each() hands each element to a callback together with an
IterationControl.  control.delete() removes the current element right
after the callback returns; control.stop() ends the loop after that.
Both may be used in the same call.

    def prune(item, control):
        if item.unwrap() <= 0:
            control.stop()
        if item.unwrap() % 2 == 0:
            control.delete()

    wrap(values).array_for_each(prune, reverse=True)
"""

import logging
import re
import reprlib
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .detector import is_integer, is_numeric_strict, parse_integer, validate_string
from .errors import (
    TraverseError,
    TraverseFormatError,
    TraverseIndexOutOfRangeError,
    TraverseKeyNotFoundError,
    TraverseParameterError,
    TraverseParseError,
    TraverseSizeError,
    TraverseTypeError,
    TraverseValueOutOfRangeError,
)
from .formats import dump_json, is_type_failure, load_json, representation
from .kinds import (
    KindDescriptor,
    ValueKind,
    is_instance_of,
    is_same_type,
    is_valid_kind,
)

logger = logging.getLogger(__name__)

# Path of a freshly wrapped value.
ROOT_PATH = "/"

_MISSING = object()


# ═══════════════════════════════════════════════════════════════════
#  COMPARATOR
# ═══════════════════════════════════════════════════════════════════

class Comparator:
    """
    Ordering used by the range assertions (min, max, range, ...).

    The default compares with the native operators.  Subclass it to order
    structured values by a derived key:

        class ByVersion(Comparator):
            def lt(self, a, b):
                return a.version < b.version
            ...
    """

    def eq(self, a: Any, b: Any) -> bool:
        return a == b

    def le(self, a: Any, b: Any) -> bool:
        return a <= b

    def lt(self, a: Any, b: Any) -> bool:
        return a < b

    def ge(self, a: Any, b: Any) -> bool:
        return a >= b

    def gt(self, a: Any, b: Any) -> bool:
        return a > b


DEFAULT_COMPARATOR = Comparator()


# ═══════════════════════════════════════════════════════════════════
#  ITERATION CONTROL
# ═══════════════════════════════════════════════════════════════════

class IterationControl:
    """Verbs available to an array_for_each() callback."""
    __slots__ = ("stopped", "deleted")

    def __init__(self) -> None:
        self.stopped = False
        self.deleted = False

    def stop(self) -> None:
        """End the iteration after the current element."""
        self.stopped = True

    def delete(self) -> None:
        """Remove the current element once the callback returns."""
        self.deleted = True


def _kind_name(kind: KindDescriptor) -> str:
    if isinstance(kind, ValueKind):
        return kind.name.lower()
    return kind.__name__


def _is_offset(offset: Any) -> bool:
    return isinstance(offset, int) and not isinstance(offset, bool)


def _is_hashable(value: Any) -> bool:
    # A tuple is Hashable by type but fails to hash when it holds a list.
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _contains_same_kind(items, value: Any) -> bool:
    return any(is_same_type(value, item) and value == item for item in items)


# ═══════════════════════════════════════════════════════════════════
#  TRAVERSE NODE
# ═══════════════════════════════════════════════════════════════════

class Traverse:
    """
    A value plus the path it was reached by.

    Build one with wrap(); navigate and assert by chaining.
    """
    __slots__ = ("_inner", "_path", "_passed_not_null", "_passed_type_checks")

    def __init__(self, inner: Any, path: str) -> None:
        self._inner = inner
        self._path = path
        self._passed_not_null = False
        self._passed_type_checks: dict = {}

    @property
    def path(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Traverse(path={self._path!r}, value={reprlib.repr(self._inner)})"

    def _sub_path(self, name: str) -> str:
        if not self._path or self._path.endswith("/"):
            return self._path + name
        return self._path + "/" + name

    def _child(self, value: Any, name: str) -> "Traverse":
        return Traverse(value, self._sub_path(name))

    def unwrap(self) -> Any:
        """The raw wrapped value."""
        return self._inner

    # ───────────────────────────────────────────────────────────────
    #  Type & shape
    # ───────────────────────────────────────────────────────────────

    def is_null(self) -> bool:
        return self._inner is None

    def not_null(self) -> "Traverse":
        """Raise TraverseTypeError if the value is None."""
        if self._passed_not_null:
            return self
        if self._inner is None:
            raise TraverseTypeError(
                f'Value should not be None (path="{self._path}").'
            )
        self._passed_not_null = True
        return self

    def type_of(self, kind: KindDescriptor) -> "Traverse":
        """
        Assert the value is of `kind` (a ValueKind or a class).

        None passes.  The outcome is memoized per kind on this node.
        """
        if not is_valid_kind(kind):
            raise TraverseParameterError(f"Not a kind descriptor: {kind!r}.")

        passed = self._passed_type_checks.get(kind)
        if passed is None:
            passed = self._inner is None or is_instance_of(self._inner, kind)
            self._passed_type_checks[kind] = passed

        if not passed:
            raise TraverseTypeError(
                f'Invalid object type (path="{self._path}", '
                f"expect={_kind_name(kind)}, got={type(self._inner).__name__})."
            )
        return self

    def numeric(self) -> "Traverse":
        return self.type_of(ValueKind.NUMERIC)

    def boolean(self) -> "Traverse":
        return self.type_of(ValueKind.BOOLEAN)

    def string(self) -> "Traverse":
        return self.type_of(ValueKind.STRING)

    def integer(self) -> "Traverse":
        """Assert the value is a whole number (an int, or a float like 3.0)."""
        if self._inner is not None:
            self.numeric()
            if type(self._inner) is float and not self._inner.is_integer():
                raise TraverseTypeError(
                    f'Value should be an integer (path="{self._path}").'
                )
        return self

    # ───────────────────────────────────────────────────────────────
    #  Strings
    # ───────────────────────────────────────────────────────────────

    def string_validate(self, char_table: str) -> "Traverse":
        """Assert every character of the string appears in `char_table`."""
        if type(char_table) is not str:
            raise TraverseParameterError("Invalid character table.")
        if self._inner is not None:
            self.string()
            if not validate_string(self._inner, char_table):
                raise TraverseFormatError(
                    f'String is invalid (allowed="{char_table}", path="{self._path}").'
                )
        return self

    def string_validate_by_regexp(self, pattern: "re.Pattern") -> "Traverse":
        """Assert the WHOLE string matches a compiled regular expression."""
        if not isinstance(pattern, re.Pattern):
            raise TraverseParameterError("Invalid regular expression object.")
        if self._inner is not None:
            self.string()
            if pattern.fullmatch(self._inner) is None:
                raise TraverseFormatError(
                    f'String is invalid (regexp="{pattern.pattern}", path="{self._path}").'
                )
        return self

    def string_to_integer(self) -> "Traverse":
        """Parse a strict integer string ("-7", "0"; not "007" or "7.0")."""
        self.not_null().string()
        if not is_integer(self._inner):
            raise TraverseFormatError(
                f'Not a valid integer string (path="{self._path}").'
            )
        return self._child(parse_integer(self._inner), "[str->int]")

    def string_to_float(self) -> "Traverse":
        """Parse a strict numeric string ("-0.2", "10"; not ".2" or "0111")."""
        self.not_null().string()
        if not is_numeric_strict(self._inner):
            raise TraverseFormatError(
                f'Not a valid float string (path="{self._path}").'
            )
        return self._child(float(self._inner), "[str->float]")

    # ───────────────────────────────────────────────────────────────
    #  JSON
    # ───────────────────────────────────────────────────────────────

    def json_load(self) -> "Traverse":
        """Decode the wrapped JSON text.  None decodes to None."""
        sub_path = self._sub_path("[JSON(Load)]")
        if self._inner is None:
            return Traverse(None, sub_path)

        self.string()
        try:
            parsed = load_json(self._inner)
        except (ValueError, RecursionError) as error:
            logger.debug("JSON decode failed at %s: %s", sub_path, error)
            raise TraverseParseError(
                f'Unable to parse JSON object (error="{error}", path="{sub_path}").'
            ) from error
        return Traverse(parsed, sub_path)

    def json_save(self) -> "Traverse":
        """Encode the wrapped value as compact JSON text."""
        sub_path = self._sub_path("[JSON(Save)]")
        try:
            serialized = dump_json(self._inner)
        except (TypeError, ValueError, RecursionError) as error:
            logger.debug("JSON encode failed at %s: %s", sub_path, error)
            message = f'Unable to serialize to JSON (error="{error}", path="{sub_path}").'
            if is_type_failure(error):
                raise TraverseTypeError(message) from error
            raise TraverseError(message) from error
        return Traverse(serialized, sub_path)

    # ───────────────────────────────────────────────────────────────
    #  Mappings
    # ───────────────────────────────────────────────────────────────

    def _lookup(self, key: Any) -> Any:
        """The child stored under `key`, or _MISSING."""
        self.not_null()
        inner = self._inner

        if is_instance_of(inner, ValueKind.MAP):
            return inner[key] if key in inner else _MISSING

        if is_instance_of(inner, ValueKind.OBJECT):
            if type(key) is not str:
                raise TraverseParameterError(
                    "Key must be a string when the value is a plain mapping."
                )
            return inner[key] if key in inner else _MISSING

        raise TraverseTypeError(
            f'Invalid inner type (expect=map/object, path="{self._path}").'
        )

    def sub(self, key: Any) -> "Traverse":
        """Navigate to the child under `key`."""
        child = self._lookup(key)
        if child is _MISSING:
            raise TraverseKeyNotFoundError(
                f'Sub path doesn\'t exist (path="{self._sub_path(str(key))}").'
            )
        return self._child(child, str(key))

    def optional_sub(self, key: Any, default: Any = None) -> "Traverse":
        """Like sub(), but a missing key yields a node wrapping `default`."""
        child = self._lookup(key)
        if child is _MISSING:
            child = default
        return self._child(child, str(key))

    def object_has(self, key: Any) -> bool:
        self.not_null().type_of(ValueKind.OBJECT)
        return key in self._inner

    def object_for_each(self, callback: Callable[["Traverse"], Any]) -> "Traverse":
        """Call `callback(child)` for every entry of a plain mapping."""
        return self.object_for_each_ex(lambda child, key: callback(child))

    def object_for_each_ex(self, callback: Callable[["Traverse", Any], Any]) -> "Traverse":
        """
        Call `callback(child, key)` for every entry of a plain mapping.

        Keys are taken from a snapshot: keys the callback adds are not
        visited, keys it removes before their turn are skipped.
        """
        if self._inner is not None:
            self.type_of(ValueKind.OBJECT)
            inner = self._inner
            for key in list(inner):
                if key not in inner:
                    continue
                callback(self._child(inner[key], str(key)), key)
        return self

    def object_set(self, key: Any, value: Any) -> "Traverse":
        """Set `key` on the wrapped mapping, in place."""
        if self._inner is not None:
            self.type_of(ValueKind.OBJECT)
            self._inner[key] = value
        return self

    # ───────────────────────────────────────────────────────────────
    #  Lists
    # ───────────────────────────────────────────────────────────────

    def array_length(self) -> int:
        self.not_null().type_of(ValueKind.SEQUENCE)
        return len(self._inner)

    def array_get_item(self, offset: int) -> "Traverse":
        self.not_null().type_of(ValueKind.SEQUENCE)
        if not _is_offset(offset):
            raise TraverseParameterError("Offset must be an integer.")
        if offset < 0 or offset >= len(self._inner):
            raise TraverseIndexOutOfRangeError(
                f'Offset is out of range (path="{self._path}", offset={offset}).'
            )
        return self._child(self._inner[offset], f"[{offset}]")

    def array_set_item(self, offset: int, value: Any) -> "Traverse":
        """
        Replace the element at `offset`, in place.

        An offset equal to the current length appends.
        """
        if not _is_offset(offset):
            raise TraverseParameterError("Offset must be an integer.")
        if offset < 0:
            raise TraverseIndexOutOfRangeError(
                f'Offset is out of range (path="{self._path}", offset={offset}).'
            )
        if self._inner is not None:
            self.type_of(ValueKind.SEQUENCE)
            length = len(self._inner)
            if offset > length:
                raise TraverseIndexOutOfRangeError(
                    f'Offset is out of range (path="{self._path}", offset={offset}).'
                )
            if offset == length:
                self._inner.append(value)
            else:
                self._inner[offset] = value
        return self

    def array_push_item(self, value: Any) -> "Traverse":
        if self._inner is not None:
            self.type_of(ValueKind.SEQUENCE)
            self._inner.append(value)
        return self

    def array_unshift_item(self, value: Any) -> "Traverse":
        if self._inner is not None:
            self.type_of(ValueKind.SEQUENCE)
            self._inner.insert(0, value)
        return self

    def array_pop_item(self) -> "Traverse":
        """Remove the last element and return a node for it."""
        self.not_null().type_of(ValueKind.SEQUENCE)
        if not self._inner:
            raise TraverseIndexOutOfRangeError(f'Array is empty (path="{self._path}").')
        item = self._inner.pop()
        return self._child(item, f"[{len(self._inner)}]")

    def array_shift_item(self) -> "Traverse":
        """Remove the first element and return a node for it."""
        self.not_null().type_of(ValueKind.SEQUENCE)
        if not self._inner:
            raise TraverseIndexOutOfRangeError(f'Array is empty (path="{self._path}").')
        return self._child(self._inner.pop(0), "[0]")

    def array_for_each(
        self,
        callback: Callable[["Traverse", IterationControl], Any],
        reverse: bool = False,
    ) -> "Traverse":
        """
        Call `callback(item, control)` for each element.

        control.delete() drops the current element after the callback
        returns; control.stop() then ends the loop.
        """
        if self._inner is None:
            return self
        self.type_of(ValueKind.SEQUENCE)
        inner = self._inner
        control = IterationControl()

        if reverse:
            cursor = len(inner) - 1
            while cursor >= 0:
                callback(self._child(inner[cursor], f"[{cursor}]"), control)
                if control.deleted:
                    del inner[cursor]
                    control.deleted = False
                if control.stopped:
                    break
                cursor -= 1
        else:
            cursor = 0
            while cursor < len(inner):
                callback(self._child(inner[cursor], f"[{cursor}]"), control)
                if control.deleted:
                    # The next element slid into `cursor`.
                    del inner[cursor]
                    control.deleted = False
                else:
                    cursor += 1
                if control.stopped:
                    break
        return self

    def array_for_each_with_deletion(
        self, callback: Callable[["Traverse"], bool]
    ) -> "Traverse":
        """Older form of array_for_each(): a truthy return deletes the element."""
        if self._inner is not None:
            self.type_of(ValueKind.SEQUENCE)
            inner = self._inner
            cursor = 0
            while cursor < len(inner):
                if callback(self._child(inner[cursor], f"[{cursor}]")):
                    del inner[cursor]
                else:
                    cursor += 1
        return self

    def array_min_length(self, min_length: int) -> "Traverse":
        if self._inner is not None:
            self.type_of(ValueKind.SEQUENCE)
            current = len(self._inner)
            if current < min_length:
                raise TraverseSizeError(
                    f"Array should have at least {min_length} item(s) "
                    f'(path="{self._path}", current={current}).'
                )
        return self

    def array_max_length(self, max_length: int) -> "Traverse":
        if self._inner is not None:
            self.type_of(ValueKind.SEQUENCE)
            current = len(self._inner)
            if current > max_length:
                raise TraverseSizeError(
                    f"Array should have at most {max_length} item(s) "
                    f'(path="{self._path}", current={current}).'
                )
        return self

    # ───────────────────────────────────────────────────────────────
    #  Selection (the wrapped value is the key)
    # ───────────────────────────────────────────────────────────────

    def select_from_array(self, sequence: Any) -> "Traverse":
        """Use the wrapped integer as an index into `sequence`."""
        if not isinstance(sequence, (list, tuple)):
            raise TraverseParameterError("Expect a list or tuple to select from.")
        try:
            self.not_null().integer().min(0).max_exclusive(len(sequence))
        except TraverseValueOutOfRangeError as error:
            raise TraverseIndexOutOfRangeError(error.message) from error
        index = int(self._inner)
        return self._child(sequence[index], f"[{index}]")

    def _object_source(self, source: Any) -> str:
        self.not_null().string()
        if not isinstance(source, Mapping):
            raise TraverseParameterError(
                f'Expect a mapping to select from (path="{self._path}").'
            )
        return self._inner

    def select_from_object(self, source: Mapping) -> "Traverse":
        """Use the wrapped string as a key into `source`."""
        key = self._object_source(source)
        if key not in source:
            raise TraverseKeyNotFoundError(
                f'"{key}" doesn\'t exist (path="{self._path}").'
            )
        return self._child(source[key], key)

    def select_from_object_optional(self, source: Mapping, default: Any = None) -> "Traverse":
        key = self._object_source(source)
        return self._child(source.get(key, default), key)

    def _map_source(self, source: Any) -> Any:
        if not isinstance(source, Mapping):
            raise TraverseParameterError(
                f'Expect a mapping to select from (path="{self._path}").'
            )
        if not _is_hashable(self._inner):
            raise TraverseTypeError(
                f'Value is not usable as a key (path="{self._path}").'
            )
        return self._inner

    def select_from_map(self, source: Mapping) -> "Traverse":
        """Use the wrapped value, of any hashable type, as a key into `source`."""
        key = self._map_source(source)
        if key not in source:
            raise TraverseKeyNotFoundError(
                f'{representation(key)} doesn\'t exist (path="{self._path}").'
            )
        return self._child(source[key], representation(key))

    def select_from_map_optional(self, source: Mapping, default: Any = None) -> "Traverse":
        key = self._map_source(source)
        value = source[key] if key in source else default
        return self._child(value, representation(key))

    # ───────────────────────────────────────────────────────────────
    #  Ranges
    # ───────────────────────────────────────────────────────────────

    def _check_comparable(self, threshold: Any) -> None:
        if not is_same_type(self._inner, threshold):
            raise TraverseParameterError(
                f'Uncomparable type (path="{self._path}").'
            )

    def _violates(self, predicate: Callable[[Any, Any], bool], threshold: Any) -> bool:
        """Apply a comparator predicate to (value, threshold)."""
        self._check_comparable(threshold)
        try:
            return predicate(self._inner, threshold)
        except TypeError as error:
            # Same kind but no ordering, e.g. two dicts.
            raise TraverseParameterError(
                f'Uncomparable type (path="{self._path}", error="{error}").'
            ) from error

    def min(self, threshold: Any, comparator: Optional[Comparator] = None) -> "Traverse":
        """Assert value >= threshold."""
        if self._inner is not None:
            comparator = comparator or DEFAULT_COMPARATOR
            if self._violates(comparator.lt, threshold):
                raise TraverseValueOutOfRangeError(
                    f'Value is too small (path="{self._path}", require=\'>=\', '
                    f"threshold={representation(threshold)})."
                )
        return self

    def min_exclusive(self, threshold: Any, comparator: Optional[Comparator] = None) -> "Traverse":
        """Assert value > threshold."""
        if self._inner is not None:
            comparator = comparator or DEFAULT_COMPARATOR
            if self._violates(comparator.le, threshold):
                raise TraverseValueOutOfRangeError(
                    f'Value is too small (path="{self._path}", require=\'>\', '
                    f"threshold={representation(threshold)})."
                )
        return self

    def max(self, threshold: Any, comparator: Optional[Comparator] = None) -> "Traverse":
        """Assert value <= threshold."""
        if self._inner is not None:
            comparator = comparator or DEFAULT_COMPARATOR
            if self._violates(comparator.gt, threshold):
                raise TraverseValueOutOfRangeError(
                    f'Value is too large (path="{self._path}", require=\'<=\', '
                    f"threshold={representation(threshold)})."
                )
        return self

    def max_exclusive(self, threshold: Any, comparator: Optional[Comparator] = None) -> "Traverse":
        """Assert value < threshold."""
        if self._inner is not None:
            comparator = comparator or DEFAULT_COMPARATOR
            if self._violates(comparator.ge, threshold):
                raise TraverseValueOutOfRangeError(
                    f'Value is too large (path="{self._path}", require=\'<\', '
                    f"threshold={representation(threshold)})."
                )
        return self

    def range(
        self,
        min_value: Any,
        max_value: Any,
        comparator: Optional[Comparator] = None,
    ) -> "Traverse":
        """Assert min_value <= value <= max_value."""
        return self.min(min_value, comparator).max(max_value, comparator)

    # ───────────────────────────────────────────────────────────────
    #  Membership & custom rules
    # ───────────────────────────────────────────────────────────────

    def one_of(self, selections: Any) -> "Traverse":
        """
        Assert the value is among `selections`.

        Sets and mappings test membership by hash (mappings by key);
        lists and tuples are scanned.  Either way a match must be of the
        same kind, so True is found neither in [1] nor in {1}.
        """
        if self._inner is None:
            return self
        value = self._inner

        if isinstance(selections, (set, frozenset, Mapping)):
            # A hash hit may be a bool/number look-alike; confirm the kind.
            found = (
                _is_hashable(value)
                and value in selections
                and _contains_same_kind(selections, value)
            )
        elif isinstance(selections, (list, tuple)):
            found = _contains_same_kind(selections, value)
        else:
            raise TraverseParameterError(
                "Unsupported selections type (only set/mapping/list/tuple is valid)."
            )

        if not found:
            raise TraverseKeyNotFoundError(
                f'{representation(value)} is not available (path="{self._path}").'
            )
        return self

    def custom_rule(self, predicate: Callable[[Any], bool]) -> "Traverse":
        """
        Assert `predicate(value)` returns True.

        The predicate is called for None too, so it can reject a missing
        value itself.
        """
        if not callable(predicate):
            raise TraverseParameterError("Expect a callable.")

        conformed = predicate(self._inner)
        if type(conformed) is not bool:
            raise TraverseParameterError(
                f'Predicate should return a bool (path="{self._path}").'
            )
        if not conformed:
            raise TraverseError(
                f'The value doesn\'t conform to the custom rule (path="{self._path}").'
            )
        return self


# Error kinds and the comparator, reachable from the node class.
Traverse.Error = TraverseError
Traverse.ParameterError = TraverseParameterError
Traverse.TypeError = TraverseTypeError
Traverse.FormatError = TraverseFormatError
Traverse.ParseError = TraverseParseError
Traverse.SizeError = TraverseSizeError
Traverse.KeyNotFoundError = TraverseKeyNotFoundError
Traverse.IndexOutOfRangeError = TraverseIndexOutOfRangeError
Traverse.ValueOutOfRangeError = TraverseValueOutOfRangeError
Traverse.Comparator = Comparator
Traverse.DEFAULT_COMPARATOR = DEFAULT_COMPARATOR


# ═══════════════════════════════════════════════════════════════════
#  ENTRY POINTS
# ═══════════════════════════════════════════════════════════════════

def wrap(value: Any, force: bool = False) -> Traverse:
    """
    Wrap `value` in a root node.

    An existing Traverse is returned as-is unless `force` is set, in which
    case the node itself becomes the wrapped value.
    """
    if isinstance(value, Traverse) and not force:
        return value
    return Traverse(value, ROOT_PATH)


def loads(text: str) -> Traverse:
    """Decode JSON text and wrap the result (path "/[JSON(Load)]")."""
    return wrap(text).json_load()
