"""
Defines the container types that support keyed assignment.

Two variants share one capability, ``set_item(key, value) -> bool``:

  - MappingContainer: string keys, grows on insert, overwrites on reassign.
  - SequenceContainer: zero-based integer positions, never changes length.

A rejected key is a normal outcome, reported as ``False``; nothing is raised.
"""

from collections import UserDict
from typing import Any, List, Optional
import collections.abc


# =================================================================
# Keys
# =================================================================

def key_kind(key: Any) -> Optional[str]:
    """Classifies a key as 'str', 'int', or None when no container accepts it.

    bool is an int subclass in Python but is never treated as a position.
    """
    match key:
        case bool():
            return None
        case str():
            return 'str'
        case int():
            return 'int'
        case _:
            return None


# =================================================================
# Containers
# =================================================================

class MappingContainer(UserDict):
    """A string-keyed mapping whose values may be anything, including containers."""

    def __setitem__(self, key: Any, value: Any):
        if key_kind(key) != 'str':
            raise TypeError(f"MappingContainer key must be a str, not {type(key)}")
        self.data[key] = value

    def set_item(self, key: Any, value: Any) -> bool:
        """Stores value under a string key. Any other key leaves the mapping untouched."""
        if key_kind(key) != 'str':
            return False
        self.data[key] = value
        return True

    def __repr__(self):
        from polyset.polyset_printer import Printer
        return Printer().pformat_inline(self)

    def __str__(self):
        from polyset.polyset_printer import Printer
        return Printer().pformat(self)


class SequenceContainer(collections.abc.MutableSequence):
    """An integer-indexed sequence of values of any type."""

    def __init__(self, values: Optional[List[Any]] = None):
        self.data = list(values) if values is not None else []

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, value):
        self.data[index] = value

    def __delitem__(self, index):
        del self.data[index]

    def __len__(self) -> int:
        return len(self.data)

    def insert(self, index, value):
        self.data.insert(index, value)

    def set_item(self, key: Any, value: Any) -> bool:
        """Overwrites the element at position key when 0 <= key < len(self).

        Negative positions are rejected rather than counted from the end, and
        the sequence is never extended.
        """
        if key_kind(key) != 'int' or not 0 <= key < len(self.data):
            return False
        self.data[key] = value
        return True

    def __eq__(self, other):
        if isinstance(other, SequenceContainer):
            return self.data == other.data
        if isinstance(other, list):
            return self.data == other
        return NotImplemented

    def __repr__(self):
        from polyset.polyset_printer import Printer
        return Printer().pformat_inline(self)

    def __str__(self):
        from polyset.polyset_printer import Printer
        return Printer().pformat(self)


def is_container(value: Any) -> bool:
    """True when value is one of the two container variants."""
    return isinstance(value, (MappingContainer, SequenceContainer))


# =================================================================
# Conversion to and from plain Python values
# =================================================================

def from_builtin(obj: Any) -> Any:
    """Recursively wraps mappings and sequences into containers.

    Mapping keys are converted with str(). Strings and bytes are scalars.
    """
    if isinstance(obj, collections.abc.Mapping):
        return MappingContainer({str(k): from_builtin(v) for k, v in obj.items()})
    if isinstance(obj, collections.abc.Sequence) and not isinstance(obj, (str, bytes, bytearray)):
        return SequenceContainer([from_builtin(x) for x in obj])
    return obj


def to_builtin(obj: Any) -> Any:
    """Recursively unwraps containers into plain dicts and lists."""
    if isinstance(obj, collections.abc.Mapping):
        return {k: to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (SequenceContainer, list, tuple)):
        return [to_builtin(x) for x in obj]
    return obj
