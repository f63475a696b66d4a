"""A tree view of the entities in an ECS, built from hierarchy components."""

from __future__ import annotations

from dataclasses import dataclass

from .ecs import Entity
from .hierarchy import HierarchyComponent


@dataclass(frozen=True)
class TreeNode:
    """One entity in the tree together with its child nodes."""

    entity: Entity
    children: tuple = ()

    def has_children(self):
        return bool(self.children)

    def __iter__(self):
        return iter(self.children)


class SceneHierarchy:
    """The forest of root entities of an ECS; call ``rebuild`` after changes."""

    def __init__(self, ecs):
        self.ecs = ecs
        self.roots = []

    @staticmethod
    def _build_node(entity):
        children = ()
        if entity.has_component(HierarchyComponent):
            children = tuple(
                SceneHierarchy._build_node(child.entity)
                for child in entity.get_component(HierarchyComponent).children
            )
        return TreeNode(entity, children)

    def rebuild(self):
        """Recompute the roots: every living entity without a parent."""
        self.roots = [
            self._build_node(entity)
            for entity in self.ecs
            if not entity.has_component(HierarchyComponent)
            or entity.get_component(HierarchyComponent).parent is None
        ]

    def __iter__(self):
        return iter(self.roots)