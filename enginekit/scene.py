"""A scene: an ECS, its hierarchy view and the main camera."""

from __future__ import annotations

from .ecs import ECS, Entity
from .scene_hierarchy import SceneHierarchy


class Scene:
    """Entities of one scene and the tree built from them."""

    def __init__(self):
        self.ecs = ECS()
        self.scene_hierarchy = SceneHierarchy(self.ecs)
        self.main_camera = Entity()

    def instantiate_entity(self, entity):
        """Copy ``entity`` (from any ECS) into this scene and return the copy."""
        instance = entity.copy_to_other_ecs(self.ecs)
        self.scene_hierarchy.rebuild()
        return instance