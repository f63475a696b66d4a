# enginekit

Building blocks for a small game engine, in plain Python with no third-party
dependencies: an entity-component system with a scene tree and scripts, a
per-type asset cache, matrices, vectors and quaternions, a frame clock, a
section profiler and aligned console logging.

## Modules

### `enginekit.ecs`

- `ECS` stores entities and their components. Component classes get a global
  id with `ECS.register_component(cls)` (at most 60 types; registering twice is
  harmless). An `ECS` holds at most 65536 entities at once; freed ids are
  reused.
- `ECS.create_entity()` returns an `Entity` handle that is alive and active.
  `add_component`, `get_component`, `has_component`, `remove_component`,
  `get_components`, `set_active`, `is_active`, `is_alive`, `destroy`,
  `duplicate`, `copy_to_other_ecs` and `in_other_ecs` are available on the
  handle; the `ECS` has the same operations taking an entity or an id.
- `ECS.filter_entities(*types, only_active=True)` returns a list of tuples,
  one per living entity that has every requested component.
- Iterating over an `ECS` yields its living entities in id order.
- `ECS.copy_from_other_ecs(entity, other)` creates a new entity holding copies
  of the components of `entity` in `other`; `ECS.copy(other)` copies every
  root entity of `other` (children come along through their hierarchy).
- `Component` is the base class of components. Its `copy_from` copies the
  attributes of another component of the same type; its `on_destroy` hook runs
  when the component is removed or its entity destroyed.
- Misuse (dead entities, unregistered types, adding a component twice,
  querying a missing component, running out of ids) raises `ECSError`.

### `enginekit.hierarchy`

- `HierarchyComponent` keeps an entity's `parent` and `children`.
  `set_parent(parent)` moves it (or detaches it with `None`) and calls every
  listener registered with `register_listener`. Copying a hierarchy component
  copies its child entities into the target ECS.
- `HierarchyListener` is the abstract listener with `on_hierarchy_change()`.
- `HierarchicalComponent` is a component that is also a listener: creating it
  adds a `HierarchyComponent` to its entity if there is none and registers
  itself on it.

### `enginekit.script`

- Subclass `Script` and implement `clone(target_component)`. The hooks
  `on_create`, `on_start`, `on_update(clock)` and `on_destroy` may be
  overridden.
- `ScriptComponent.instantiate_script(cls, *args)` builds the script for the
  component's entity, calls `on_create` and keeps it.
  `update_scripts(clock)` starts scripts that have not started yet and then
  updates all of them.

### `enginekit.scene_hierarchy` and `enginekit.scene`

- `SceneHierarchy(ecs).rebuild()` computes `roots`: a `TreeNode` for every
  living entity without a parent, each holding its child nodes. Both the
  hierarchy and its nodes are iterable; `TreeNode.has_children()` tells
  whether a node has children.
- `Scene` owns an `ecs`, a `scene_hierarchy` and a `main_camera` entity
  handle. `Scene.instantiate_entity(entity)` copies an entity from any ECS into
  the scene and rebuilds the tree.

### `enginekit.asset_manager`

- `AssetLoader(parser, converter, path_for=None, root="res")` reads the bytes
  of `root / path_for(name)`, passes them to `parser` and the result to
  `converter`. `path_for` defaults to using the name itself.
- `AssetCache(destroyer=None)` keeps assets by name; `clear()` passes each
  asset to the destroyer before emptying.
- `TypeManager(loader, cache)` loads an asset on its first request and serves
  it from the cache afterwards; `cleanup()` clears the cache.
- `AssetManager` holds one manager per asset type:
  `register_asset_type(type, manager)`, `register_loader(type, loader, cache)`,
  `is_registered(type)` and `load_asset(type, name)`.
- Unreadable files and unregistered types raise `AssetError`.

### `enginekit.matrix`, `enginekit.vector`, `enginekit.quaternion`, `enginekit.transformations`

- `Matrix(rows, cols, values)` takes its values row by row. It supports `+`,
  `-` and `/` with scalars or same-shaped matrices, `*` as the matrix product
  (or scaling by a scalar), in-place `+=`, `-=`, `*=` (entry by entry) and
  `/=`, `transposed()`, `inverse()` and `invert()` (a singular matrix raises
  `ValueError`), `max_entry()`, `min_entry()`, `row(i)`, `m[row, col]`
  indexing, `Matrix.identity(n)`, `Matrix.zero(r, c)`, `Matrix.one(r, c)`, and
  `to_json()` / `Matrix.from_json(r, c, obj)` with column-major `data`.
  Equality of non-integer entries is within 1e-7.
- `Vector(1, 2, 3)` (or `Vector([1, 2, 3])`) is an n x 1 matrix. Multiplying
  two vectors gives the dot product; there are `length()`, `sqr_magnitude()`,
  `normalized()`, `normalize()`, `cross()`, `volume()`, the properties `x`,
  `y`, `z`, `w` and the assignable swizzles `xy`, `xz`, `yz`, `xyz`, `xyzw`.
  `str(v)` gives `{1, 2, 3}`. `dimension(...)` builds a vector of unsigned
  32-bit integers.
- `Quaternion(w, x, y, z)` with products, `conjugate()`, `normalized()`,
  `xyz()`, `Quaternion.look_at(position, target, up)`, `euler_angles()`,
  `Quaternion.from_euler_angles(v)`, `rotation_matrix()` and
  `to_json()` / `Quaternion.from_json(obj)`.
- `transformations` provides `look_at`, `perspective(near, far, fov,
  aspect_ratio)` (field of view in degrees), `rodrigues_rotation(axis,
  theta)`, `rotate(axis, theta, center=None)`, `rotate_around_axis(axis,
  theta)` and `rotate_by_quaternion(point, rotation)`.

### `enginekit.clock`

`Clock.start()` marks time zero; each `update()` sets `time` (seconds since
start, microsecond resolution) and `delta_time` (seconds since the previous
update).

### `enginekit.profiling`

`ProfileSession.timer(title)` is a context manager that records a `Profile`
(name, start and duration in microseconds) when its block ends.
`ProfileWriter(path).write_session(profiles)` writes them as an array of
trace-event objects; with no profiles it writes nothing. `format_profile`
renders a single one.

### `enginekit.console_log`

`print_message`, `print_success`, `print_warning` and `print_error` print a
coloured line with the sender right-aligned in a sixteen-character column,
followed by the message filled in with `str.format`. `format_aligned` returns
the same line without colour.

## Example

    from enginekit.ecs import ECS, Component
    from enginekit.clock import Clock
    from enginekit.script import Script, ScriptComponent

    class Position(Component):
        def __init__(self, entity):
            super().__init__(entity)
            self.y = 0.0

    class Rise(Script):
        def on_update(self, clock):
            self.entity.get_component(Position).y += clock.delta_time

        def clone(self, target_component):
            target_component.instantiate_script(Rise)

    ECS.register_component(Position)
    ECS.register_component(ScriptComponent)

    world = ECS()
    entity = world.create_entity()
    entity.add_component(Position)
    entity.add_component(ScriptComponent).instantiate_script(Rise)

    clock = Clock()
    clock.start()
    clock.update()
    for (scripts,) in world.filter_entities(ScriptComponent):
        scripts.update_scripts(clock)

## What it does not do

There is no window, input handling, renderer or GPU code, and no main loop:
the package gives the data structures and the caller drives them. The asset
manager knows no file formats of its own; parsers, converters and destroyers
for textures, meshes, shaders or scenes are supplied by the caller.

## Installing and testing

    pip install .
    pip install ".[test]"
    pytest