"""Ordered property storage for a single component."""

import re
from collections.abc import Iterator, Mapping

from icsgen.exceptions import InvalidPropertyError
from icsgen.values import PropertyValue, escape_param_value, to_value

# iana-token / x-name from RFC 5545 section 3.1
_NAME_RE = re.compile(r"[A-Za-z0-9-]+")


def validate_name(name: str, kind: str = "Property") -> str:
    """Return ``name`` upper-cased, or raise if it is not a valid name token."""
    if not name:
        raise InvalidPropertyError(f"{kind} name cannot be empty")
    if not isinstance(name, str) or not _NAME_RE.fullmatch(name):
        raise InvalidPropertyError(f"Invalid {kind.lower()} name: {name!r}")
    return name.upper()


class Property:
    """One content line: a name, a value and optional parameters."""

    def __init__(self, name: str, value, params: Mapping | None = None):
        if value is None:
            raise InvalidPropertyError(f"Property {name!r} has no value")
        self.name = validate_name(name, "Property")
        self.value: PropertyValue = to_value(value)
        self.params: dict[str, str | list[str]] = {}
        for param_name, param_value in (params or {}).items():
            self.params[validate_name(param_name, "Parameter")] = param_value

    def to_line(self) -> str:
        """Render as an unfolded ``NAME;PARAM=VAL:VALUE`` line."""
        parts = [self.name]
        for param_name, param_value in self.params.items():
            if isinstance(param_value, (list, tuple)):
                rendered = ",".join(escape_param_value(str(v)) for v in param_value)
            else:
                rendered = escape_param_value(str(param_value))
            parts.append(f"{param_name}={rendered}")
        return f"{';'.join(parts)}:{self.value.to_ical()}"

    def __repr__(self):
        return f"Property({self.name!r}, {self.value!r}, params={self.params!r})"


class PropertyBag:
    """Ordered mapping of property names to one or more :class:`Property` entries.

    Names are case-insensitive and kept upper-case. The position of a name is
    fixed by its first insertion: ``set`` replaces the entries in place and
    ``add`` appends to the existing group, so output order is deterministic.
    """

    def __init__(self):
        self._entries: dict[str, list[Property]] = {}

    def set(self, name: str, value, params: Mapping | None = None) -> "PropertyBag":
        """Store ``value`` under ``name``, replacing any previous entries."""
        prop = Property(name, value, params)
        self._entries[prop.name] = [prop]
        return self

    def add(self, name: str, value, params: Mapping | None = None) -> "PropertyBag":
        """Append another entry for ``name``; rendered as its own line."""
        prop = Property(name, value, params)
        self._entries.setdefault(prop.name, []).append(prop)
        return self

    def get(self, name: str) -> Property | None:
        """Return the first entry for ``name``, or None."""
        entries = self._entries.get(name.upper())
        return entries[0] if entries else None

    def get_all(self, name: str) -> list[Property]:
        return list(self._entries.get(name.upper(), []))

    def remove(self, name: str) -> None:
        self._entries.pop(name.upper(), None)

    def names(self) -> list[str]:
        return list(self._entries)

    def render(self) -> list[str]:
        """Return the unfolded content lines, one per entry."""
        return [prop.to_line() for prop in self]

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name.upper() in self._entries

    def __iter__(self) -> Iterator[Property]:
        for entries in self._entries.values():
            yield from entries

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())

    def __repr__(self):
        return f"PropertyBag({list(self)!r})"
