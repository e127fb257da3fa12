"""Render a component tree into iCalendar text."""

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from icsgen.folding import LineFolder

if TYPE_CHECKING:
    from icsgen.component import Component

logger = logging.getLogger(__name__)


class Renderer:
    """Depth-first, pre-order serializer for :class:`~icsgen.component.Component` trees."""

    def __init__(self, folder: LineFolder | None = None):
        self.folder = folder or LineFolder()

    def iter_lines(self, component: "Component") -> Iterator[str]:
        """Yield the folded, CRLF-terminated physical lines of ``component``."""
        properties = component.build_properties()
        yield from self.folder.fold(f"BEGIN:{component.component_type}")
        for line in properties.render():
            yield from self.folder.fold(line)
        for child in component.children():
            yield from self.iter_lines(child)
        yield from self.folder.fold(f"END:{component.component_type}")

    def render(self, component: "Component") -> str:
        """Render the whole tree rooted at ``component``."""
        lines = list(self.iter_lines(component))
        logger.debug(f"Rendered {component.component_type} tree to {len(lines)} lines")
        return "".join(lines)

    def render_bytes(self, component: "Component") -> bytes:
        """Render as UTF-8 encoded bytes."""
        return self.render(component).encode("utf-8")
