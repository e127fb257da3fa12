"""Abstract component contract shared by every calendar component."""

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from icsgen.exceptions import InvalidArgumentError
from icsgen.property_bag import PropertyBag
from icsgen.renderer import Renderer

_default_renderer = Renderer()


class Component(BaseModel, ABC):
    """A ``BEGIN``/``END`` block with properties and nested child components.

    Subclasses set ``component_type`` and implement :meth:`build_properties`,
    which must be a pure function of the current field values: the bag is
    rebuilt on every render and never stored. Children computed from fields
    (such as the timezone a calendar refers to) come from
    :meth:`derived_components` and are likewise rebuilt per render.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    component_type: ClassVar[str]

    _components: list["Component"] = PrivateAttr(default_factory=list)
    _parent: "Component | None" = PrivateAttr(default=None)

    # components are tree nodes; compare by identity
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    @abstractmethod
    def build_properties(self) -> PropertyBag:
        """Return the properties of this component in output order."""

    def derived_components(self) -> list["Component"]:
        """Children implied by field values, rendered before explicit children."""
        return []

    def add_component(self, component: "Component"):
        """Append ``component`` as the last explicit child."""
        self._adopt(component)
        self._components.append(component)
        return self

    def set_components(self, components: list["Component"]):
        """Replace all explicit children."""
        for child in self._components:
            child._parent = None
        self._components = []
        for component in components:
            self.add_component(component)
        return self

    @property
    def components(self) -> list["Component"]:
        """Explicit children in insertion order."""
        return list(self._components)

    def children(self) -> list["Component"]:
        """All children in render order: derived first, then explicit."""
        return self.derived_components() + self._components

    def render(self) -> str:
        return _default_renderer.render(self)

    def to_ical(self) -> bytes:
        return _default_renderer.render_bytes(self)

    def __str__(self) -> str:
        return self.render()

    def _adopt(self, component: "Component") -> None:
        if not isinstance(component, Component):
            raise InvalidArgumentError(
                f"Expected a Component, got {type(component).__name__}"
            )
        if component is self:
            raise InvalidArgumentError("A component cannot contain itself")
        if component._parent is not None:
            raise InvalidArgumentError(
                f"{component.component_type} already belongs to a "
                f"{component._parent.component_type}"
            )
        component._parent = self
