"""
Keyed assignment over either container variant.

set_item() looks at the runtime class of its target and hands the key and
value to that container's own set_item(). Targets that are not containers
are ignored.
"""

from typing import Any

from polyset.polyset_datatypes import MappingContainer, SequenceContainer


def set_item(target: Any, key: Any, value: Any) -> bool:
    """Sets target[key] = value and reports whether the write happened.

    Returns exactly what the container's own set_item() returns. Plain dicts
    and lists, numbers, None and other objects are not containers and yield
    False without being touched.
    """
    match target:
        case MappingContainer():
            return target.set_item(key, value)
        case SequenceContainer():
            return target.set_item(key, value)
        case _:
            return False


__all__ = [
    "set_item",
]
