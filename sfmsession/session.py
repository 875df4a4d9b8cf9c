"""Sessions: the clip bin, the active clip and the session-wide settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from .clips import FilmClip, TrackGroup
from .dmx import AttributeType, DmElement, Element, Serializer, serialize_text
from .nodes import Node
from .settings import (
    GraphEditorState,
    MovieSettings,
    PosterSettings,
    ProceduralPresetSettings,
    RenderSettings,
    TimeSelection,
)
from .transform import Transform
from .types import ClipType, Time


@dataclass(eq=False)
class PresetGroupInfo(Element):
    """Describes a shared preset group file and the preset groups it holds."""

    name: str
    filename_base: str = ""
    preset_groups: list[Element] = field(default_factory=list)

    def add_preset_group(self, preset_group: Element) -> None:
        """Append a preset group."""
        self.preset_groups.append(preset_group)

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmePresetGroupInfo")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        groups = dm.create_array("presetGroupInfos", AttributeType.ELEMENT_ARRAY)
        for preset_group in self.preset_groups:
            groups.push(serializer.get_element(preset_group))


@dataclass(eq=False)
class SharedPresetGroupSettings(Element):
    """The preset group files shared by every animation set of a session."""

    name: str = "sharedPresetGroupSettings"
    preset_group_infos: list[PresetGroupInfo] = field(default_factory=list)

    def add_preset_group_info(self, info: PresetGroupInfo) -> None:
        """Append an existing preset group info."""
        self.preset_group_infos.append(info)

    def create_preset_group_info(self, name: str, filename_base: str) -> PresetGroupInfo:
        """Create a preset group info, append it and return it."""
        info = PresetGroupInfo(name, filename_base)
        self.preset_group_infos.append(info)
        return info

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        infos = dm.create_array("presetGroupInfos", AttributeType.ELEMENT_ARRAY)
        for info in self.preset_group_infos:
            infos.push(serializer.get_element(info))


@dataclass(eq=False)
class SessionSettings(Element):
    """All the settings elements of a session."""

    name: str = "sessionSettings"
    time_selection: TimeSelection = field(default_factory=TimeSelection)
    graph_editor_state: GraphEditorState = field(default_factory=GraphEditorState)
    procedural_preset_settings: ProceduralPresetSettings = field(default_factory=ProceduralPresetSettings)
    render_settings: RenderSettings = field(default_factory=RenderSettings)
    poster_settings: PosterSettings = field(default_factory=PosterSettings)
    movie_settings: MovieSettings = field(default_factory=MovieSettings)
    shared_preset_group_settings: SharedPresetGroupSettings = field(
        default_factory=SharedPresetGroupSettings
    )

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("timeSelection", AttributeType.ELEMENT, serializer.get_element(self.time_selection))
        dm.set_attribute(
            "graphEditorState", AttributeType.ELEMENT, serializer.get_element(self.graph_editor_state)
        )
        dm.set_attribute(
            "proceduralPresets", AttributeType.ELEMENT, serializer.get_element(self.procedural_preset_settings)
        )
        dm.set_attribute("renderSettings", AttributeType.ELEMENT, serializer.get_element(self.render_settings))
        dm.set_attribute("posterSettings", AttributeType.ELEMENT, serializer.get_element(self.poster_settings))
        dm.set_attribute("movieSettings", AttributeType.ELEMENT, serializer.get_element(self.movie_settings))
        dm.set_attribute(
            "sharedPresetGroupSettings",
            AttributeType.ELEMENT,
            serializer.get_element(self.shared_preset_group_settings),
        )


class Session(Element):
    """A session: the clips of its bin, which one is active, and its settings."""

    def __init__(self, name: str = "session") -> None:
        self.name = name
        self._clips: dict[Element, None] = {}
        self.active_clip: Element | None = None
        self.settings = SessionSettings()

    def __repr__(self) -> str:
        return f"Session({self.name!r})"

    @property
    def clips(self) -> list[Element]:
        """The clips of the bin, in the order they were created."""
        return list(self._clips)

    def create_film_clip(self, name: str) -> FilmClip:
        """Create a film clip in the bin; the first clip created becomes active."""
        clip = FilmClip(name)
        self._clips[clip] = None
        if self.active_clip is None:
            self.active_clip = clip
        return clip

    def set_active_clip(self, clip: Element) -> None:
        """Make ``clip`` active; raises ValueError if it is not in this session."""
        if clip not in self._clips:
            raise ValueError("clip doesn't belong to this session")
        self.active_clip = clip

    def to_text(self) -> str:
        """Serialize the session as keyvalues2 text."""
        root = Serializer().serialize(self)
        if root is None:
            raise ValueError("session is not exportable")
        return serialize_text(root)

    def write_text_file(self, path: str | PathLike[str]) -> None:
        """Write the session as keyvalues2 text to ``path``."""
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            stream.write(self.to_text())

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("activeClip", AttributeType.ELEMENT, serializer.get_element(self.active_clip))
        dm.set_attribute("settings", AttributeType.ELEMENT, serializer.get_element(self.settings))
        clip_bin = dm.create_array("clipBin", AttributeType.ELEMENT_ARRAY)
        for clip in self._clips:
            clip_bin.push(serializer.get_element(clip))


class _Camera(Element):
    """A scene camera with its lens and render parameters."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.transform = Transform("")
        self.visible = True
        self.field_of_view = 45.0
        self.z_near = 10.0
        self.z_far = 20000.0
        self.mic_distance = 0.0
        self.eye_offset = 0.0
        self.focal_distance = 72.0
        self.aperture = 0.2
        self.shutter_speed: Time = 0.0208
        self.tone_map_scale = 1.0
        self.ssao_bias = 0.5
        self.ssao_strength = 2.0
        self.ssao_radius = 30.0
        self.depth_of_field_samples = 64
        self.motion_blur_samples = 8

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeCamera")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("transform", AttributeType.ELEMENT, serializer.get_element(self.transform))
        dm.set_attribute("visible", AttributeType.BOOL, self.visible)
        dm.set_attribute("fieldOfView", AttributeType.FLOAT, self.field_of_view)
        dm.set_attribute("znear", AttributeType.FLOAT, self.z_near)
        dm.set_attribute("zfar", AttributeType.FLOAT, self.z_far)
        dm.set_attribute("eyeOffset", AttributeType.FLOAT, self.eye_offset)
        dm.set_attribute("focalDistance", AttributeType.FLOAT, self.focal_distance)
        dm.set_attribute("aperture", AttributeType.FLOAT, self.aperture)
        dm.set_attribute("shutterSpeed", AttributeType.TIME, self.shutter_speed)
        dm.set_attribute("toneMapScale", AttributeType.FLOAT, self.tone_map_scale)
        dm.set_attribute("SSAOBias", AttributeType.FLOAT, self.ssao_bias)
        dm.set_attribute("SSAOStrength", AttributeType.FLOAT, self.ssao_strength)
        dm.set_attribute("SSAORadius", AttributeType.FLOAT, self.ssao_radius)
        dm.set_attribute("depthOfFieldSamples", AttributeType.INT, self.depth_of_field_samples)
        dm.set_attribute("motionBlurSamples", AttributeType.INT, self.motion_blur_samples)


def create_clip(session: Session) -> FilmClip:
    """Lay out the standard session timeline and return its first shot.

    The session gets an "SFM" film clip with sound and overlay track groups and a
    film track holding "shot1", which has a camera, an empty scene and a channel track.
    """
    clip = session.create_film_clip("SFM")

    sound = clip.create_track_group("Sound")
    clip.create_track_group("Overlay")
    sound.create_track("Dialog", ClipType.SOUND)
    sound.create_track("Music", ClipType.SOUND)
    sound.create_track("Effects", ClipType.SOUND)

    clip.sub_clip_track_group = TrackGroup("subClipTrackGroup")
    film_track = clip.sub_clip_track_group.create_track("Film", ClipType.FILM)

    shot = FilmClip("shot1")
    channel_track_group = shot.create_track_group("channelTrackGroup")
    channel_track_group.create_track("animSetEditorChannels", ClipType.CHANNEL)
    film_track.add_child(shot)
    shot.camera = _Camera("camera1")
    shot.scene = Node("scene")
    return shot