"""Small value types shared across the session model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Time = float
Color = tuple[int, int, int, int]
Vector3 = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]

ROOT_TRANSFORM = "rootTransform"

ZERO_VECTOR3: Vector3 = (0.0, 0.0, 0.0)
ZERO_QUATERNION: Quaternion = (0.0, 0.0, 0.0, 0.0)
IDENTITY_QUATERNION: Quaternion = (0.0, 0.0, 0.0, 1.0)


class ClipType(IntEnum):
    """Kind of clip a track holds."""

    UNKNOWN = -1
    CHANNEL = 0
    SOUND = 1
    FX = 2
    FILM = 3


@dataclass
class Attachment:
    """A named attachment point, offset from its parent bone."""

    name: str
    parent_bone: str = ""
    position: Vector3 = ZERO_VECTOR3
    orientation: Quaternion = ZERO_QUATERNION