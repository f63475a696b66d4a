"""Parent and child links between entities, with change notification."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .ecs import Component, ECSError


class HierarchyListener(ABC):
    """Something that wants to hear when a hierarchy component changes."""

    def __init__(self, hierarchy):
        self.hierarchy = hierarchy

    @abstractmethod
    def on_hierarchy_change(self):
        """Called after the parent of the watched hierarchy has changed."""


class HierarchyComponent(Component):
    """Holds an entity's parent and children in the scene tree."""

    def __init__(self, entity):
        super().__init__(entity)
        self.parent = None
        self.children = []
        self._listeners = []

    def set_parent(self, new_parent):
        """Move under ``new_parent`` (or detach with None) and notify listeners."""
        if self.parent is not None:
            self.parent.children[:] = [c for c in self.parent.children if c is not self]
        self.parent = new_parent
        if new_parent is not None:
            new_parent.children.append(self)
        for listener in list(self._listeners):
            listener.on_hierarchy_change()

    def register_listener(self, listener):
        self._listeners.append(listener)

    def copy_from(self, other):
        """Copy every child of ``other`` into this entity's ECS and adopt the copies."""
        if not isinstance(other, HierarchyComponent):
            raise ECSError(f"Tried to copy {type(self).__name__} from different type!")
        for child in other.children:
            copied = child.entity.copy_to_other_ecs(self.entity.ecs)
            new_child = copied.get_component(HierarchyComponent)
            new_child.parent = self
            self.children.append(new_child)


class HierarchicalComponent(Component, HierarchyListener):
    """A component that follows its entity's hierarchy.

    Creating one adds a ``HierarchyComponent`` to the entity when it has none.
    """

    def __init__(self, entity):
        Component.__init__(self, entity)
        if entity.has_component(HierarchyComponent):
            hierarchy = entity.get_component(HierarchyComponent)
        else:
            hierarchy = entity.add_component(HierarchyComponent)
        HierarchyListener.__init__(self, hierarchy)
        hierarchy.register_listener(self)

    def copy_from(self, other):
        """Copy the state of ``other`` while keeping this entity's own hierarchy."""
        hierarchy = self.hierarchy
        super().copy_from(other)
        self.hierarchy = hierarchy

    @abstractmethod
    def on_hierarchy_change(self):
        """React to a change of the entity's parent."""