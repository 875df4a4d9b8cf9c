"""Clips, tracks, track groups and bookmark sets of a session timeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .animationset import (
    AnimationSet,
    create_animation_set_for_model,
    create_animation_set_for_particle_system,
)
from .channel import Channel
from .dmx import AttributeType, DmElement, Element, Serializer
from .nodes import Node
from .transform import TimeFrame
from .types import ClipType, Color, Time


@dataclass(eq=False)
class TrackGroup(Element):
    """A named group of tracks."""

    name: str
    tracks: list[Track] = field(default_factory=list)
    visible: bool = True
    mute: bool = False
    display_scale: float = 1.0
    minimized: bool = False
    volume: float = 0.0
    force_multi_track: bool = False

    def add_track(self, track: Track) -> None:
        """Append an existing track."""
        self.tracks.append(track)

    def create_track(self, name: str, clip_type: ClipType) -> Track:
        """Create a track holding clips of ``clip_type``, append it and return it."""
        track = Track(name, clip_type)
        self.tracks.append(track)
        return track

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeTrackGroup")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("mute", AttributeType.BOOL, self.mute)
        dm.set_attribute("visible", AttributeType.BOOL, self.visible)
        dm.set_attribute("minimized", AttributeType.BOOL, self.minimized)
        dm.set_attribute("forcemultitrack", AttributeType.BOOL, self.force_multi_track)
        dm.set_attribute("displayScale", AttributeType.FLOAT, self.display_scale)
        dm.set_attribute("volume", AttributeType.FLOAT, self.volume)
        tracks = dm.create_array("tracks", AttributeType.ELEMENT_ARRAY)
        for track in self.tracks:
            tracks.push(serializer.get_element(track))


@dataclass(eq=False)
class Clip(Element):
    """Fields shared by every clip; concrete clips name the element type they export as."""

    _element_type: ClassVar[str] = "DmeClip"

    name: str
    time_frame: TimeFrame = field(default_factory=TimeFrame)
    color: Color = (0, 0, 0, 0)
    text: str = ""
    mute: bool = False
    track_groups: list[TrackGroup] = field(default_factory=list)
    display_scale: float = 0.0
    global_state: Element | None = None
    fade_in: Time = 0.0
    fade_out: Time = 0.0
    background_color: Color = (64, 64, 64, 255)
    background_fx_clip: Element | None = None
    sub_clip_track_group: TrackGroup | None = None

    def add_track_group(self, track_group: TrackGroup) -> None:
        """Append an existing track group."""
        self.track_groups.append(track_group)

    def create_track_group(self, name: str) -> TrackGroup:
        """Create a track group, append it and return it."""
        track_group = TrackGroup(name)
        self.track_groups.append(track_group)
        return track_group

    @property
    def duration(self) -> Time:
        """Duration of the clip's time frame."""
        return self.time_frame.duration

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        dm = DmElement(self.name, self._element_type)
        dm.set_attribute("timeFrame", AttributeType.ELEMENT, serializer.get_element(self.time_frame))
        dm.set_attribute("color", AttributeType.COLOR, self.color)
        dm.set_attribute("text", AttributeType.STRING, self.text)
        dm.set_attribute("mute", AttributeType.BOOL, self.mute)
        track_groups = dm.create_array("trackGroups", AttributeType.ELEMENT_ARRAY)
        for track_group in self.track_groups:
            track_groups.push(serializer.get_element(track_group))
        dm.set_attribute(
            "subClipTrackGroup", AttributeType.ELEMENT, serializer.get_element(self.sub_clip_track_group)
        )
        return dm


@dataclass(eq=False)
class ChannelsClip(Clip):
    """A clip holding channels, directly or through animation sets."""

    _element_type: ClassVar[str] = "DmeChannelsClip"

    _channels: dict[Channel, None] = field(default_factory=dict, init=False, repr=False)
    _animation_sets: dict[AnimationSet, None] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.time_frame.start = -5.0
        self.time_frame.duration = 70.0

    @property
    def channels(self) -> list[Channel]:
        """Channels added directly, in the order they were added."""
        return list(self._channels)

    @property
    def animation_sets(self) -> list[AnimationSet]:
        """Animation sets whose channels this clip holds."""
        return list(self._animation_sets)

    def add_channel(self, channel: Channel) -> None:
        """Add a channel; adding it again has no effect."""
        self._channels[channel] = None

    def add_animation_set(self, animation_set: AnimationSet) -> None:
        """Add the channels of an animation set; adding it again has no effect."""
        self._animation_sets[animation_set] = None

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        channels = dm.create_array("channels", AttributeType.ELEMENT_ARRAY)
        for channel in self._channels:
            channels.push(serializer.get_element(channel))
        for animation_set in self._animation_sets:
            for channel in animation_set.channels():
                channels.push(serializer.get_element(channel))


@dataclass(eq=False)
class BookmarkSet(Element):
    """A set of bookmarks; it exports as an empty element."""

    name: str = ""
    color: Color = (0, 0, 0, 0)
    text: str = ""
    mute: bool = False
    display_scale: float = 0.0
    map_name: str = ""
    camera: Element | None = None
    scene: Node | None = None
    global_state: Element | None = None
    fade_in: Time = 0.0
    fade_out: Time = 0.0
    background_color: Color = (0, 0, 0, 0)
    background_fx_clip: Element | None = None
    controls: list[Element] = field(default_factory=list)
    track_groups: list[TrackGroup] = field(default_factory=list)
    operators: list[Element] = field(default_factory=list)
    animation_sets: list[AnimationSet] = field(default_factory=list)
    bookmark_sets: list[BookmarkSet] = field(default_factory=list)

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement("", "DmeAnimationSet")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        pass


@dataclass(eq=False)
class FilmClip(Clip):
    """A shot: a scene, a camera and the animation sets playing in it."""

    _element_type: ClassVar[str] = "DmeFilmClip"

    scene: Node | None = None
    camera: Element | None = None
    map_name: str = ""
    bookmark_sets: list[BookmarkSet] = field(default_factory=list)
    active_bookmark_set: int = -1
    operators: list[Element] = field(default_factory=list)
    _animation_sets: dict[AnimationSet, None] = field(default_factory=dict, init=False, repr=False)

    @property
    def animation_sets(self) -> list[AnimationSet]:
        """Animation sets of the clip, in the order they were created."""
        return list(self._animation_sets)

    def _attach(self, animation_set: AnimationSet, name: str, node: Node, parent: Node | None) -> None:
        dag = Node(name)
        dag.add_child(node)
        if parent is not None:
            parent.add_child(dag)
        self._animation_sets[animation_set] = None

    def create_animation_set_for_model(self, name: str, filename: str, parent: Node | None) -> AnimationSet:
        """Create a model animation set, placing its model under a new node of ``parent``."""
        animation_set = create_animation_set_for_model(name, filename)
        self._attach(animation_set, name, animation_set.game_model, parent)
        return animation_set

    def create_animation_set_for_particle_system(
        self, name: str, system_name: str, parent: Node | None
    ) -> AnimationSet:
        """Create a particle animation set, placing its system under a new node of ``parent``."""
        animation_set = create_animation_set_for_particle_system(name, system_name)
        self._attach(animation_set, name, animation_set.particle_system, parent)
        return animation_set

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("scene", AttributeType.ELEMENT, serializer.get_element(self.scene))
        dm.set_attribute("camera", AttributeType.ELEMENT, serializer.get_element(self.camera))
        dm.set_attribute("mapname", AttributeType.STRING, self.map_name)
        animation_sets = dm.create_array("animationSets", AttributeType.ELEMENT_ARRAY)
        for animation_set in self._animation_sets:
            animation_sets.push(serializer.get_element(animation_set))
        dm.set_attribute("activeBookmarkSet", AttributeType.INT, self.active_bookmark_set)
        bookmark_sets = dm.create_array("bookmarkSets", AttributeType.ELEMENT_ARRAY)
        for bookmark_set in self.bookmark_sets:
            bookmark_sets.push(serializer.get_element(bookmark_set))
        operators = dm.create_array("operators", AttributeType.ELEMENT_ARRAY)
        for operator in self.operators:
            operators.push(serializer.get_element(operator))


@dataclass(eq=False)
class Track(Element):
    """A track holding clips of one type."""

    name: str
    clip_type: ClipType = ClipType.UNKNOWN
    children: list[Element] = field(default_factory=list)
    collapsed: bool = False
    mute: bool = False
    synched: bool = True
    volume: float = 1.0
    display_scale: float = 1.0

    def add_child(self, child: Element) -> None:
        """Append a clip to the track."""
        self.children.append(child)

    def add_channels_clip(self, name: str) -> ChannelsClip:
        """Create a channels clip, append it and return it."""
        clip = ChannelsClip(name)
        self.add_child(clip)
        return clip

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeTrack")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("synched", AttributeType.BOOL, self.synched)
        dm.set_attribute("clipType", AttributeType.INT, int(self.clip_type))
        dm.set_attribute("volume", AttributeType.FLOAT, self.volume)
        dm.set_attribute("displayScale", AttributeType.FLOAT, self.display_scale)
        children = dm.create_array("children", AttributeType.ELEMENT_ARRAY)
        for child in self.children:
            children.push(serializer.get_element(child))