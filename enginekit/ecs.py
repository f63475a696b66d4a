"""Entity-component system with bit flags per entity."""

from __future__ import annotations

import copy as _copy
from typing import ClassVar

MAX_COMPONENT_NUMBER = 60
MAX_ENTITY_NUMBER = 1 << 16
ALIVE_FLAG = 1 << 63
ACTIVE_FLAG = 1 << 62
INVALID_ENTITY = 0xFFFF


class ECSError(Exception):
    """Raised for invalid operations on entities or components."""


def _entity_id(entity):
    if isinstance(entity, Entity):
        return entity.id
    return int(entity)


class Component:
    """Base class of all components; each belongs to one entity."""

    def __init__(self, entity):
        self.entity = entity
        self.frames_updated = 0

    def update(self):
        """Per-frame hook; by default it only counts the frames it has seen."""
        self.frames_updated += 1

    def copy_from(self, other):
        """Take over the state of ``other``, which must be of the same type."""
        if not isinstance(other, type(self)):
            raise ECSError(f"Tried to copy {type(self).__name__} from different type!")
        for name, value in vars(other).items():
            if name != "entity":
                setattr(self, name, _copy.copy(value))

    def on_destroy(self):
        """Called when the component is removed from its entity."""


class Entity:
    """A handle pairing an entity id with the ECS that owns it."""

    __slots__ = ("id", "ecs")

    def __init__(self, entity_id=INVALID_ENTITY, ecs=None):
        self.id = entity_id
        self.ecs = ecs

    def _owner(self):
        if self.ecs is None:
            raise ECSError("Entity does not belong to any ECS")
        return self.ecs

    def add_component(self, component_type):
        return self._owner().add_component(self.id, component_type)

    def get_component(self, component_type):
        return self._owner().get_component(self.id, component_type)

    def has_component(self, component_type):
        return self._owner().has_component(self.id, component_type)

    def remove_component(self, component_type):
        self._owner().remove_component(self.id, component_type)

    def get_components(self):
        return self._owner().get_components(self.id)

    def destroy(self):
        self._owner().destroy_entity(self.id)

    def is_alive(self):
        return self.ecs is not None and self.ecs.is_alive(self.id)

    def set_active(self, active=True):
        self._owner().set_active(self.id, active)

    def is_active(self):
        return self._owner().is_active(self.id)

    def duplicate(self):
        return self._owner().duplicate_entity(self.id)

    def copy_to_other_ecs(self, other_ecs):
        return other_ecs.copy_from_other_ecs(self.id, self._owner())

    def in_other_ecs(self, other_ecs):
        """The entity with the same id in ``other_ecs``."""
        return Entity(self.id, other_ecs)

    def __eq__(self, other):
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id and self.ecs is other.ecs

    def __hash__(self):
        return hash((self.id, id(self.ecs)))

    def __repr__(self):
        return f"Entity({self.id})"


class ECS:
    """Stores entities and their components.

    Component types get global ids through ``register_component``; an entity
    carries one flag bit per component type plus alive and active bits.
    """

    _component_ids: ClassVar[dict[type, int]] = {}
    _component_types: ClassVar[list[type]] = []

    def __init__(self):
        self._flags: dict[int, int] = {}
        self._first_free = 0
        self._unused_ids: list[int] = []
        self._stores: dict[int, dict[int, Component]] = {}

    @staticmethod
    def register_component(component_type):
        """Give ``component_type`` a global id; registering twice is harmless."""
        if component_type in ECS._component_ids:
            return ECS._component_ids[component_type]
        if len(ECS._component_types) >= MAX_COMPONENT_NUMBER:
            raise ECSError("Maximum number of component types reached!")
        cid = len(ECS._component_types)
        ECS._component_ids[component_type] = cid
        ECS._component_types.append(component_type)
        return cid

    @staticmethod
    def _require_registered(component_type):
        cid = ECS._component_ids.get(component_type)
        if cid is None:
            raise ECSError(f"Component type {component_type.__name__} is not registered!")
        return cid

    def _create_id(self):
        if self._unused_ids:
            new_id = self._unused_ids.pop()
        elif self._first_free < MAX_ENTITY_NUMBER:
            new_id = self._first_free
            self._first_free += 1
        else:
            raise ECSError("Tried to create a new entity when max number was reached!")
        self._flags[new_id] = ALIVE_FLAG | ACTIVE_FLAG
        return new_id

    def _require_alive(self, entity_id, message):
        if not self._flags.get(entity_id, 0) & ALIVE_FLAG:
            raise ECSError(message)

    def create_entity(self):
        """Create a new alive, active entity, reusing freed ids first."""
        return Entity(self._create_id(), self)

    def duplicate_entity(self, entity):
        return self.copy_from_other_ecs(entity, self)

    def destroy_entity(self, entity):
        """Remove all components of the entity and free its id."""
        e = _entity_id(entity)
        self._require_alive(e, "Tried to destroy a dead entity!")
        flags = self._flags.pop(e)
        for cid in range(len(ECS._component_types)):
            if flags & (1 << cid):
                component = self._stores[cid].pop(e, None)
                if component is not None:
                    component.on_destroy()
        self._unused_ids.append(e)

    def add_component(self, entity, component_type):
        """Create a component of ``component_type`` on the entity and return it."""
        e = _entity_id(entity)
        cid = self._require_registered(component_type)
        self._require_alive(e, "Tried to attach component to dead entity!")
        bit = 1 << cid
        if self._flags[e] & bit:
            raise ECSError("Tried to attach same component twice!")
        store = self._stores.setdefault(cid, {})
        self._flags[e] |= bit
        try:
            component = component_type(Entity(e, self))
        except BaseException:
            self._flags[e] &= ~bit
            raise
        store[e] = component
        return component

    def get_component(self, entity, component_type):
        e = _entity_id(entity)
        cid = self._require_registered(component_type)
        self._require_alive(e, "Tried to query component off dead entity!")
        if not self._flags[e] & (1 << cid):
            raise ECSError("Tried to query component the entity does not have!")
        return self._stores[cid][e]

    def has_component(self, entity, component_type):
        cid = ECS._component_ids.get(component_type)
        if cid is None or cid not in self._stores:
            return False
        return bool(self._flags.get(_entity_id(entity), 0) & (1 << cid))

    def remove_component(self, entity, component_type):
        e = _entity_id(entity)
        cid = self._require_registered(component_type)
        self._require_alive(e, "Tried to remove component off dead entity!")
        if not self._flags[e] & (1 << cid):
            raise ECSError("Tried to remove component the entity does not have!")
        component = self._stores[cid].pop(e)
        self._flags[e] &= ~(1 << cid)
        component.on_destroy()

    def set_active(self, entity, active=True):
        e = _entity_id(entity)
        self._require_alive(e, "Tried to change activity of dead entity!")
        if active:
            self._flags[e] |= ACTIVE_FLAG
        else:
            self._flags[e] &= ~ACTIVE_FLAG

    def is_active(self, entity):
        return bool(self._flags.get(_entity_id(entity), 0) & ACTIVE_FLAG)

    def is_alive(self, entity):
        e = _entity_id(entity)
        return e != INVALID_ENTITY and bool(self._flags.get(e, 0) & ALIVE_FLAG)

    def get_components(self, entity):
        """All components of the entity, in order of component id."""
        e = _entity_id(entity)
        if not self.is_alive(e):
            return []
        flags = self._flags[e]
        return [
            self._stores[cid][e]
            for cid in range(len(ECS._component_types))
            if flags & (1 << cid) and cid in self._stores
        ]

    def filter_entities(self, *component_types, only_active=True):
        """Tuples of the requested components for every entity holding all of them."""
        ids = [ECS._component_ids.get(t) for t in component_types]
        if any(cid is None for cid in ids):
            return []
        mask = ALIVE_FLAG
        for cid in ids:
            mask |= 1 << cid
        result = []
        for e in range(self._first_free):
            flags = self._flags.get(e, 0)
            if flags & mask == mask and (not only_active or flags & ACTIVE_FLAG):
                result.append(tuple(self._stores[cid][e] for cid in ids))
        return result

    def __iter__(self):
        for e in range(self._first_free):
            if self._flags.get(e, 0) & ALIVE_FLAG:
                yield Entity(e, self)

    def copy_from_other_ecs(self, entity, other_ecs):
        """Create an entity here holding copies of the components of ``entity`` in ``other_ecs``."""
        source_id = _entity_id(entity)
        if not other_ecs.is_alive(source_id):
            raise ECSError("Tried to copy a dead entity!")
        new_id = self._create_id()
        source_flags = other_ecs._flags[source_id]
        for cid, component_type in enumerate(ECS._component_types):
            if not (source_flags & (1 << cid) and cid in other_ecs._stores):
                continue
            if self.has_component(new_id, component_type):
                target = self.get_component(new_id, component_type)
            else:
                target = self.add_component(new_id, component_type)
            target.copy_from(other_ecs.get_component(source_id, component_type))
        if not source_flags & ACTIVE_FLAG:
            self.set_active(new_id, False)
        return Entity(new_id, self)

    def copy(self, other_ecs):
        """Copy every entity of ``other_ecs``; children come along with their root."""
        from .hierarchy import HierarchyComponent

        for entity in list(other_ecs):
            if (
                other_ecs.has_component(entity, HierarchyComponent)
                and other_ecs.get_component(entity, HierarchyComponent).parent is not None
            ):
                continue
            self.copy_from_other_ecs(entity, other_ecs)