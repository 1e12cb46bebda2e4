# pengin

The core data structures of a small 2D game engine, in plain Python with no
third-party dependencies.

## What is in it

| Module | Contents |
| --- | --- |
| `pengin.entity_id` | `EntityId`, `NULL_ENTITY_ID` and `entity_id_to_string` (`"NULL"` for the null id) |
| `pengin.sparse_set` | `SparseSet`: values stored densely in insertion order; `remove` moves the last value into the freed slot |
| `pengin.ecs` | `ECS` and `ComponentView` |
| `pengin.systems` | `BaseSystem`, `SystemRegistry`, `SystemManager` |
| `pengin.field_serializer` | `FieldSerializer`, `SerializationType`, `parse_json_object` |
| `pengin.serialization_registry` | `SerializationRegistry` |
| `pengin.components` | `UUIDComponent`, `PlayerComponent`, `BodyComponent`, `RectColliderComponent`, `FPSCounterComponent`, `DebugDrawComponent`, `register_components` |
| `pengin.grid` | `GridCellData`, `GridComponent` |
| `pengin.animation` | `AnimationData`, `AnimationComponent`, `FrameChoice` |
| `pengin.scene_data` | `SceneData`: a scene name and the player entity UUID assigned to each user |
| `pengin.util` | `Rect`, `is_point_in_rect`, `is_colliding_aabb`, `random_number` |
| `pengin.thread_safe_queue` | `ThreadSafeQueue` |
| `pengin.game_time` | `GameTime` |
| `pengin.input_keys` | `KeyboardKey`, `ControllerButton`, `InputState`, `parse_key` |
| `pengin.sound_data` | `SoundType`, `SoundData` |

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Entities and components

Each component is stored under its own type. `ECS.destroy_entity` and
`ECS.remove_component` only schedule the work. `ECS.clean_up_destroys` carries
it out: first the destructions, then the removals.

```python
from pengin.ecs import ECS
from pengin.components import BodyComponent

ecs = ECS()
entity = ecs.create_entity()
ecs.add_component(entity, BodyComponent(velocity=(1.0, 0.0, 0.0)))

for entity_id, body in ecs.get_components(BodyComponent).items():
    print(entity_id, body.velocity)

ecs.destroy_entity(entity)
assert ecs.exists(entity)          # still there until clean-up
ecs.clean_up_destroys()
assert not ecs.exists(entity)
```

`ECS.get_component` and `ComponentView.get_component` raise `KeyError` when
the entity has no component of that type.

## Systems

A system subclasses `BaseSystem` and overrides `update`, `fixed_update` or
`render`. Each default hook only counts its calls. `SystemManager` keeps at
most one system per type. If a type is registered a second time, it returns
the system already registered. On every pass, a system's dependencies run
before it, and no system runs twice.

```python
from pengin.systems import BaseSystem, SystemManager

class Physics(BaseSystem):
    def fixed_update(self):
        ...

class Mover(BaseSystem):
    def update(self):
        ...

manager = SystemManager()
physics = manager.register_system(Physics, Physics())
manager.register_system(Mover, Mover(), [physics])
manager.update()
manager.fixed_update()
```

## Field serialization

`FieldSerializer.serialize_field` appends `"name":value` to a `bytearray`
that starts with `{`. It writes a comma before every field after the first.
`parse_json_object` splits an object or array into its members' raw text.
`deserialize_field` reads one member back as a given kind: `int`, `float`,
`bool`, `str`, an enum, a class with a `deserialize` method, or a
parameterised `list`, `tuple` or `dict`.

```python
from pengin.field_serializer import FieldSerializer, parse_json_object

serializer = FieldSerializer()
out = bytearray(b"{")
serializer.serialize_field("Rows", 3, None, out)
serializer.serialize_field("Scale", [1.5, 2.0], None, out)
out.extend(b"}")
# out == b'{"Rows":3,"Scale":[1.5,2]}'

fields = parse_json_object(out)
serializer.deserialize_field("Scale", list[float], fields, None)  # [1.5, 2.0]
```

`SerializationRegistry` maps component types to their serialize and
deserialize functions, and keeps the first function registered for each type.
`register_components` registers `BodyComponent`, `RectColliderComponent`,
`FPSCounterComponent`, `GridComponent` and `AnimationComponent`.

## Other pieces

- `GridComponent`: a row-major grid of `GridCellData` cells. Methods for
  cells out of bounds raise `IndexError`.
- `AnimationComponent.change_animation`: switches animation. The frame to show
  is a `FrameChoice` (`FIRST`, `KEEP_CURRENT`, `LAST`) or an explicit frame
  number.
- `ThreadSafeQueue`: `try_pop` raises `queue.Empty` when the queue is empty.
  `wait_and_pop` blocks, and raises `queue.Empty` if its timeout runs out.
- `GameTime`: takes an optional clock function. It builds up lag in 20 ms
  fixed steps (`is_lag`, `process_lag`), and `sleep_time` reports the time
  left in a 16 ms frame.
- `parse_key`: looks up a `KeyboardKey` by name, ignoring case and
  underscores.

## What it does not do

This package holds the engine's data and bookkeeping only. It opens no window
and does no rendering, reads no keyboard or controller, plays no sound, and
loads no textures or fonts. It has no scene manager and no game loop. It
reads and writes no scene or entity files: `FieldSerializer` turns fields into
text and back, and storing that text is left to the caller.