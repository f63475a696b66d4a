"""Behaviour scripts attached to entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .ecs import Component, ECSError


class Script(ABC):
    """Per-entity behaviour driven by the owning ``ScriptComponent``."""

    def __init__(self, entity):
        self.entity = entity
        self.started = False
        self.created = False
        self.destroyed = False
        self.last_clock = None

    def on_create(self):
        """Called right after the script is attached; marks it as created."""
        self.created = True

    def on_destroy(self):
        """Called when the owning component goes away; marks it as destroyed."""
        self.destroyed = True

    def on_start(self):
        """Called before the first update; marks the script as started."""
        self.started = True

    def on_update(self, clock):
        """Called once per update with the engine clock, which is kept."""
        self.last_clock = clock

    @abstractmethod
    def clone(self, target_component):
        """Attach an equivalent script to ``target_component``."""


class ScriptComponent(Component):
    """Holds the scripts of one entity and runs them."""

    def __init__(self, entity):
        super().__init__(entity)
        self.scripts = []

    def instantiate_script(self, script_type, *args):
        """Create a ``script_type`` for this entity, run its creation hook and keep it."""
        script = script_type(self.entity, *args)
        script.on_create()
        self.scripts.append(script)
        return script

    def update_scripts(self, clock):
        """Start scripts that have not started yet, then update every script."""
        for script in self.scripts:
            if not script.started:
                script.on_start()
                script.started = True
            script.on_update(clock)

    def on_destroy(self):
        for script in self.scripts:
            script.on_destroy()
        self.scripts.clear()

    def copy_from(self, other):
        """Attach clones of every script of ``other``."""
        if not isinstance(other, ScriptComponent):
            raise ECSError(f"Tried to copy {type(self).__name__} from different type!")
        for script in other.scripts:
            script.clone(self)