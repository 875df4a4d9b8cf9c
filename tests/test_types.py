import pytest

from sfmsession.types import Attachment, ClipType


def test_clip_type_from_value():
    assert [ClipType(v) for v in (-1, 0, 1, 2, 3)] == [
        ClipType.UNKNOWN,
        ClipType.CHANNEL,
        ClipType.SOUND,
        ClipType.FX,
        ClipType.FILM,
    ]


def test_clip_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        ClipType(4)


def test_attachment_defaults():
    attachment = Attachment("mouth")
    assert attachment.parent_bone == ""
    assert attachment.position == (0.0, 0.0, 0.0)
    assert attachment.orientation == (0.0, 0.0, 0.0, 0.0)


def test_attachment_equality():
    a = Attachment("hand", "wrist", (1.0, 2.0, 3.0), (0.0, 0.0, 0.0, 1.0))
    b = Attachment("hand", "wrist", (1.0, 2.0, 3.0), (0.0, 0.0, 0.0, 1.0))
    assert a == b
    b.parent_bone = "elbow"
    assert a != b and a.parent_bone == "wrist"