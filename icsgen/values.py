"""Property value types and RFC 5545 escaping."""

from collections.abc import Iterable
from enum import Enum

_TEXT_ESCAPES = {
    "\\": "\\\\",
    ";": "\\;",
    ",": "\\,",
    "\n": "\\n",
}

_TEXT_UNESCAPES = {
    "\\": "\\",
    ";": ";",
    ",": ",",
    "n": "\n",
    "N": "\n",
}


def escape_text(value: str) -> str:
    """Escape a TEXT value.

    Backslash, semicolon and comma get a leading backslash; any newline
    (CRLF, CR or LF) becomes the two-character sequence ``\\n``.
    """
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    return "".join(_TEXT_ESCAPES.get(ch, ch) for ch in value)


def unescape_text(value: str) -> str:
    """Inverse of :func:`escape_text`."""
    out = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        out.append(_TEXT_UNESCAPES.get(nxt, "\\" + nxt))
    return "".join(out)


def flatten_newlines(value: str) -> str:
    """Replace each line break (CRLF, CR or LF) with a single space."""
    return value.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def escape_param_value(value: str) -> str:
    """Render a parameter value, quoting it when it contains ``:``, ``;`` or ``,``.

    RFC 5545 has no escape for DQUOTE inside a parameter value, so it is
    replaced with a single quote. Newlines are flattened to spaces.
    """
    value = value.replace('"', "'")
    value = flatten_newlines(value)
    if any(ch in value for ch in ":;,"):
        return f'"{value}"'
    return value


class PropertyValue:
    """Base class for values that know how to render themselves."""

    def to_ical(self) -> str:
        raise NotImplementedError


class TextValue(PropertyValue):
    """A TEXT value, escaped on output."""

    def __init__(self, value):
        self.value = str(value)

    def to_ical(self) -> str:
        return escape_text(self.value)

    def __eq__(self, other):
        return isinstance(other, TextValue) and other.value == self.value

    def __repr__(self):
        return f"TextValue({self.value!r})"


class RawValue(PropertyValue):
    """A structured value emitted verbatim (dates, durations, RRULE, GEO, URIs).

    Nothing is escaped, but line breaks are flattened to spaces so the value
    stays on its own content line.
    """

    def __init__(self, value):
        self.value = str(value)

    def to_ical(self) -> str:
        return flatten_newlines(self.value)

    def __eq__(self, other):
        return isinstance(other, RawValue) and other.value == self.value

    def __repr__(self):
        return f"RawValue({self.value!r})"


class ListValue(PropertyValue):
    """A multi-valued property, items rendered in order and joined by ``separator``."""

    def __init__(self, values: Iterable, separator: str = ","):
        self.values = [to_value(v) for v in values]
        self.separator = separator

    def to_ical(self) -> str:
        return self.separator.join(v.to_ical() for v in self.values)

    def __eq__(self, other):
        return (
            isinstance(other, ListValue)
            and other.values == self.values
            and other.separator == self.separator
        )

    def __repr__(self):
        return f"ListValue({self.values!r}, separator={self.separator!r})"


def to_value(value) -> PropertyValue:
    """Coerce a plain Python value into a :class:`PropertyValue`.

    Strings are TEXT, lists and tuples are comma-separated multi-values,
    booleans render as ``TRUE``/``FALSE`` and numbers verbatim.
    """
    if isinstance(value, PropertyValue):
        return value
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return RawValue("TRUE" if value else "FALSE")
    if isinstance(value, (int, float)):
        return RawValue(value)
    if isinstance(value, (list, tuple)):
        return ListValue(value)
    return TextValue(value)
