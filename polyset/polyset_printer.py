"""
A pretty-printer for containers and their values.
"""
import collections.abc

from polyset.polyset_datatypes import MappingContainer, SequenceContainer


class Printer:
    """Formats containers and scalar values into readable text."""

    def __init__(self, indent_width=2):
        self._indent_char = " " * indent_width
        self._handlers = self._create_handlers()
        # ids of containers currently being formatted, for self-reference
        self._active = set()

    def pformat(self, obj, level=0):
        """Public entry point to format an object as an indented block."""
        handler = self._get_handler(obj)
        return handler(obj, level)

    def pformat_inline(self, obj):
        """Formats an object on a single line with unquoted strings."""
        match obj:
            case bool() | None:
                return self.pformat(obj)
            case str():
                return obj
            case collections.abc.Mapping():
                return self._guard(obj, "{...}", lambda: "{" + ", ".join(
                    f"{k}: {self.pformat_inline(v)}" for k, v in obj.items()) + "}")
            case SequenceContainer() | list() | tuple():
                return self._guard(obj, "[...]", lambda: "[" + ", ".join(
                    self.pformat_inline(x) for x in obj) + "]")
            case _:
                return self.pformat(obj)

    def _get_handler(self, obj):
        """Dispatcher to find the correct formatting method."""
        obj_type = type(obj)
        if obj_type in self._handlers:
            return self._handlers[obj_type]
        # Fallback for subclasses and plain Python containers
        if isinstance(obj, str): return self._pformat_str
        if isinstance(obj, collections.abc.Mapping): return self._pformat_dict
        if isinstance(obj, (SequenceContainer, list, tuple)): return self._pformat_list
        # Default to Python's repr for unknown types
        return lambda o, l: repr(o)

    def _create_handlers(self):
        return {
            str: self._pformat_str,
            int: self._pformat_primitive,
            float: self._pformat_primitive,
            bool: self._pformat_bool,
            type(None): self._pformat_none,
            MappingContainer: self._pformat_dict,
            SequenceContainer: self._pformat_list,
        }

    def _pformat_primitive(self, obj, level):
        return str(obj)

    def _pformat_str(self, obj, level):
        # Basic string formatting, does not handle complex escapes
        return f"'{obj}'"

    def _pformat_bool(self, obj, level):
        return 'true' if obj else 'false'

    def _pformat_none(self, obj, level):
        return 'none'

    def _pformat_block(self, entries, level, open_char, close_char):
        if not entries:
            return f"{open_char}{close_char}"

        outer_indent = self._indent_char * level
        inner_level = level + 1
        inner_indent = self._indent_char * inner_level

        lines = []
        for prefix, value in entries:
            arg_lines = self.pformat(value, inner_level).splitlines() or [""]
            # Nested blocks already indent their own continuation lines.
            first_line = inner_indent + prefix + arg_lines[0]
            lines.append("\n".join([first_line] + arg_lines[1:]))

        return f"{open_char}\n" + "\n".join(lines) + f"\n{outer_indent}{close_char}"

    def _guard(self, obj, placeholder, render):
        """Returns placeholder when obj already encloses the value being formatted."""
        key = id(obj)
        if key in self._active:
            return placeholder
        self._active.add(key)
        try:
            return render()
        finally:
            self._active.discard(key)

    def _pformat_dict(self, obj, level):
        entries = [(f"{key}: ", value) for key, value in obj.items()]
        return self._guard(obj, "{...}", lambda: self._pformat_block(entries, level, '{', '}'))

    def _pformat_list(self, obj, level):
        entries = [("", value) for value in obj]
        return self._guard(obj, "[...]", lambda: self._pformat_block(entries, level, '[', ']'))
