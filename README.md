# sfmsession

Build Source Filmmaker sessions from Python and save them as DMX text
(keyvalues2) documents.

A session holds film clips, track groups, tracks, a camera, scene nodes,
game models with bones, attachments and flex controller operators,
particle systems with control points, and animation sets whose controls
drive channels with values logged over time. The default session settings
(render, movie, poster, time selection, procedural presets, graph editor)
carry the values the filmmaker uses for a new session.

## Installation

```
pip install sfmsession
```

The package has no runtime dependencies. To run the tests:

```
pip install "sfmsession[test]"
pytest
```

## Usage

```python
from sfmsession.session import Session, create_clip

session = Session()
shot = create_clip(session)  # "SFM" clip with sound tracks and a "shot1" film clip

shot.camera.transform.position = (200.0, 0.0, 150.0)

animation_set = shot.create_animation_set_for_model(
    "hero", "models/heroes/hero/hero.vmdl", shot.scene
)
model = animation_set.game_model
bone = model.create_bone(animation_set, "pelvis", 0, (0.0, 0.0, 40.0), (0.0, 0.0, 0.0, 1.0))
model.add_child(bone)

# A flex control driving a flex controller operator of the model.
operator = model.create_global_flex_controller_operator("jawOpen", 0.0)
control = animation_set.create_control("jawOpen")
control.channel.to_element = operator
control.channel.to_attribute = "flexWeight"
control.channel.log.get_layer("float log").set_value(0.0, 0.5)

# Put the animation set's channels on the shot's channel track.
channels_track = shot.track_groups[0].tracks[0]  # "animSetEditorChannels"
channels_track.add_channels_clip("hero").add_animation_set(animation_set)

session.write_text_file("my_session.dmx")
```

`Session.to_text()` returns the same document as a string.

A channel is written out only when both its `from_element` and its
`to_element` are set and exportable. A log layer with no keys writes its
`default_value` at time 0.

Parenting a model to another with `GameModel.set_parent_model` makes each
bone whose name (ignoring case) also exists in the parent follow the
parent's bone: it exports an identity transform and its transform control
is left out. `GameParticleSystem.set_parent_model` ties control points to
the bones named by the parent model's attachments.

### Modules

- `sfmsession.dmx`: the generic element model (`DmElement`, `Attribute`,
  `AttributeType`), the `Serializer` that turns the object graph into
  elements, and `serialize_text` for the keyvalues2 text format.
- `sfmsession.logs`: `Log`, `LogLayer` and `LogValueKind`.
- `sfmsession.channel`: `Channel`, `Control`, `TransformControl`,
  `ControlValue`.
- `sfmsession.controlgroup` and `sfmsession.animationgroups`: the control
  group tree, and the mapping from control names to a group path and colour.
  `load_animation_groups(text)` reads a keyvalues document with a
  `groupFile` block and registers its groups; `get_animation_group(name)`
  returns the registered group, or an `"Unknown"` group.
- `sfmsession.animationset`, `sfmsession.clips`, `sfmsession.nodes`,
  `sfmsession.gamemodel`, `sfmsession.particles`, `sfmsession.preset`,
  `sfmsession.settings`, `sfmsession.transform`, `sfmsession.types`: the
  scene, timeline and settings objects.
- `sfmsession.session`: `Session`, `SessionSettings`, the shared preset group
  settings, and `create_clip`.

## What the package does not do

- It writes text DMX only; it does not write binary DMX and does not read
  DMX files.
- It does not read game models, skeletons, animations or particle systems
  from game files. Bones, attachments, flex controllers and animation keys
  are given by the caller.
- It ships no default animation group file. Until `load_animation_groups`
  has been called, every control goes into the `"Unknown"` control group.
- It has no command-line tool.