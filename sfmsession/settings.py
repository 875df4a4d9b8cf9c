"""Session-wide settings elements: rendering, export and editor state."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dmx import AttributeType, DmElement, Element, Serializer
from .types import Time


@dataclass(eq=False)
class GraphEditorState(Element):
    """State of the graph editor."""

    name: str = "graphEditorState"
    display_grid: bool = True

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeGraphEditorState")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("displayGrid", AttributeType.BOOL, self.display_grid)


@dataclass(eq=False)
class MovieSettings(Element):
    """Targets and size of an exported movie."""

    name: str = "movieSettings"
    video_target: int = 6
    audio_target: int = 2
    stereoscopic: bool = False
    stereo_single_file: bool = False
    clear_decals: bool = False
    width: int = 1280
    height: int = 720
    filename: str = ""

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("videoTarget", AttributeType.INT, self.video_target)
        dm.set_attribute("audioTarget", AttributeType.INT, self.audio_target)
        dm.set_attribute("stereoscopic", AttributeType.BOOL, self.stereoscopic)
        dm.set_attribute("stereoSingleFile", AttributeType.BOOL, self.stereo_single_file)
        dm.set_attribute("clearDecals", AttributeType.BOOL, self.clear_decals)
        dm.set_attribute("width", AttributeType.INT, self.width)
        dm.set_attribute("height", AttributeType.INT, self.height)
        dm.set_attribute("filename", AttributeType.STRING, self.filename)


@dataclass(eq=False)
class PosterSettings(Element):
    """Size and resolution of an exported poster."""

    name: str = "posterSettings"
    width: int = 1920
    height: int = 1080
    dpi: int = 300
    units: int = 0
    constrain_aspect: bool = True
    height_in_pixels: bool = True
    width_in_pixels: bool = True

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("width", AttributeType.INT, self.width)
        dm.set_attribute("height", AttributeType.INT, self.height)
        dm.set_attribute("DPI", AttributeType.INT, self.dpi)
        dm.set_attribute("units", AttributeType.INT, self.units)
        dm.set_attribute("constrainAspect", AttributeType.BOOL, self.constrain_aspect)
        dm.set_attribute("heightInPixels", AttributeType.BOOL, self.height_in_pixels)
        dm.set_attribute("widthInPixels", AttributeType.BOOL, self.width_in_pixels)


@dataclass(eq=False)
class ProceduralPresetSettings(Element):
    """Parameters of the procedural jitter, smooth and stagger presets."""

    name: str = "proceduralPresets"
    jitter_scale: float = 1.0
    smooth_scale: float = 1.0
    jitter_scale_vector: float = 2.5
    smooth_scale_vector: float = 2.5
    jitter_iterations: int = 5
    smooth_iterations: int = 5
    stagger_interval: Time = 0.0833

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeProceduralPresetSettings")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("jitterscale", AttributeType.FLOAT, self.jitter_scale)
        dm.set_attribute("smoothscale", AttributeType.FLOAT, self.smooth_scale)
        dm.set_attribute("jitterscale_vector", AttributeType.FLOAT, self.jitter_scale_vector)
        dm.set_attribute("smoothscale_vector", AttributeType.FLOAT, self.smooth_scale_vector)
        dm.set_attribute("jitteriterations", AttributeType.INT, self.jitter_iterations)
        # The exported smooth iteration count mirrors the jitter iteration count.
        dm.set_attribute("smoothiterations", AttributeType.INT, self.jitter_iterations)
        dm.set_attribute("staggerinterval", AttributeType.TIME, self.stagger_interval)


@dataclass(eq=False)
class ProgressiveRefinementSettings(Element):
    """Progressive refinement options of the renderer."""

    name: str = "ProgressiveRefinementSettings"
    on: bool = False
    use_depth_of_field: bool = True
    override_depth_of_field_samples: bool = False
    override_depth_of_field_samples_value: int = 64
    use_motion_blur: bool = True
    override_motion_blur_samples: bool = False
    override_motion_blur_samples_value: int = 8
    use_antialiasing: bool = True
    override_shutter_speed: bool = False
    override_shutter_speed_value: float = 1.0 / 48

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("on", AttributeType.BOOL, self.on)
        dm.set_attribute("useDepthOfField", AttributeType.BOOL, self.use_depth_of_field)
        dm.set_attribute(
            "overrideDepthOfFieldSamples", AttributeType.BOOL, self.override_depth_of_field_samples
        )
        dm.set_attribute(
            "overrideDepthOfFieldSamplesValue",
            AttributeType.INT,
            self.override_depth_of_field_samples_value,
        )
        dm.set_attribute("useMotionBlur", AttributeType.BOOL, self.use_motion_blur)
        dm.set_attribute("overrideMotionBlurSamples", AttributeType.BOOL, self.override_motion_blur_samples)
        dm.set_attribute(
            "overrideMotionBlurSamplesValue", AttributeType.INT, self.override_motion_blur_samples_value
        )
        dm.set_attribute("useAntialiasing", AttributeType.BOOL, self.use_antialiasing)
        dm.set_attribute("overrideShutterSpeed", AttributeType.BOOL, self.override_shutter_speed)
        dm.set_attribute("overrideShutterSpeedValue", AttributeType.FLOAT, self.override_shutter_speed_value)


@dataclass(eq=False)
class RenderSettings(Element):
    """Viewport and render options, holding the progressive refinement settings."""

    name: str = "renderSettings"
    width: int = 1280
    height: int = 720
    frame_rate: float = 24.0
    ambient_occlusion_mode: int = 1
    show_ambient_occlusion: int = 0
    draw_game_renderables_mask: int = 63
    draw_tool_renderables_mask: int = 31
    tone_map_scale: float = 1.0
    global_light_shadow_enabled: bool = True
    playback_clamp_frame_count: int = 5
    ignore_alpha_fade: bool = True
    draw_grid: bool = True
    progressive_refinement: ProgressiveRefinementSettings | None = field(
        default_factory=ProgressiveRefinementSettings
    )

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("width", AttributeType.INT, self.width)
        dm.set_attribute("height", AttributeType.INT, self.height)
        dm.set_attribute("frameRate", AttributeType.FLOAT, self.frame_rate)
        dm.set_attribute("ambientOcclusionMode", AttributeType.INT, self.ambient_occlusion_mode)
        dm.set_attribute("showAmbientOcclusion", AttributeType.INT, self.show_ambient_occlusion)
        dm.set_attribute("drawGameRenderablesMask", AttributeType.INT, self.draw_game_renderables_mask)
        dm.set_attribute("drawToolRenderablesMask", AttributeType.INT, self.draw_tool_renderables_mask)
        dm.set_attribute("toneMapScale", AttributeType.FLOAT, self.tone_map_scale)
        dm.set_attribute("globalLightShadowEnabled", AttributeType.BOOL, self.global_light_shadow_enabled)
        dm.set_attribute("playbackClampFrameCount", AttributeType.INT, self.playback_clamp_frame_count)
        dm.set_attribute("ignoreAlphaFade", AttributeType.BOOL, self.ignore_alpha_fade)
        dm.set_attribute("drawGrid", AttributeType.BOOL, self.draw_grid)
        dm.set_attribute(
            "ProgressiveRefinement",
            AttributeType.ELEMENT,
            serializer.get_element(self.progressive_refinement),
        )


@dataclass(eq=False)
class TimeSelection(Element):
    """The time selection used when editing animation."""

    name: str = "timeSelection"
    enabled: bool = True
    relative: bool = False
    falloff_left: Time = -214748.3647
    falloff_right: Time = 214748.3647
    hold_left: Time = -214748.3647
    hold_right: Time = 214748.3647
    interpolator_left: int = 6
    interpolator_right: int = 6
    threshold: float = 0.0005
    resample_interval: Time = 0.0100
    recording_state: int = 2

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeTimeSelection")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("enabled", AttributeType.BOOL, self.enabled)
        dm.set_attribute("relative", AttributeType.BOOL, self.relative)
        dm.set_attribute("falloff_left", AttributeType.TIME, self.falloff_left)
        dm.set_attribute("falloff_right", AttributeType.TIME, self.falloff_right)
        dm.set_attribute("hold_left", AttributeType.TIME, self.hold_left)
        dm.set_attribute("hold_right", AttributeType.TIME, self.hold_right)
        dm.set_attribute("interpolator_left", AttributeType.INT, self.interpolator_left)
        dm.set_attribute("interpolator_right", AttributeType.INT, self.interpolator_right)
        dm.set_attribute("threshold", AttributeType.FLOAT, self.threshold)
        dm.set_attribute("resampleinterval", AttributeType.TIME, self.resample_interval)
        dm.set_attribute("recordingstate", AttributeType.INT, self.recording_state)