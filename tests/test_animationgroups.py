import pytest

from sfmsession.animationgroups import (
    UNKNOWN_GROUP,
    AnimationGroup,
    get_animation_group,
    load_animation_groups,
    parse_keyvalues,
)

GROUP_FILE = """
// default groups
"groupFile"
{
    "Body"
    {
        "Legs"
        {
            "groupColor" "255 128 32 255"
            "control" "agTest_thigh_L"
            "control" "agTest_thigh_R"
        }
        "Arms"
        {
            "control" "agTest_arm_L"
        }
    }
    Face
    {
        "control" "agTest_jaw"
    }
}
"""


def test_parse_keyvalues_nested_and_repeated_keys():
    parsed = parse_keyvalues('"a" "1"\n"a" "2"\nb { c "d" }')
    assert parsed == [("a", "1"), ("a", "2"), ("b", [("c", "d")])]


def test_parse_keyvalues_skips_comments_and_conditions():
    parsed = parse_keyvalues('// note\n"k" "v" [$WIN32]\n"x" "y"')
    assert parsed == [("k", "v"), ("x", "y")]


def test_parse_keyvalues_escapes():
    parsed = parse_keyvalues(r'"k" "say \"hi\""')
    assert parsed == [("k", 'say "hi"')]


@pytest.mark.parametrize("text", ['"a" { "b" "c"', '"a" }', '"a"', '"a" "unterminated', "{ }"])
def test_parse_keyvalues_errors(text):
    with pytest.raises(ValueError):
        parse_keyvalues(text)


def test_load_builds_paths():
    loaded = load_animation_groups(GROUP_FILE)
    assert loaded["agTest_thigh_L"].root == ("Body", "Legs")
    assert loaded["agTest_thigh_R"] == loaded["agTest_thigh_L"]
    assert loaded["agTest_arm_L"].root == ("Body", "Arms")
    assert loaded["agTest_jaw"].root == ("Face",)


def test_load_colours():
    loaded = load_animation_groups(GROUP_FILE)
    assert loaded["agTest_thigh_L"].color == (0, 128, 255, 255)
    assert loaded["agTest_arm_L"].color == (255, 255, 255, 255)


def test_loaded_groups_are_registered():
    loaded = load_animation_groups(GROUP_FILE)
    assert get_animation_group("agTest_jaw") == loaded["agTest_jaw"]


def test_unknown_control_gives_unknown_group():
    group = get_animation_group("agTest_no_such_control")
    assert group == UNKNOWN_GROUP
    assert group.root == ("Unknown",)
    assert group.color == (0, 128, 255, 255)


def test_missing_group_file_raises():
    with pytest.raises(KeyError):
        load_animation_groups('"other" { "control" "agTest_x" }')


def test_malformed_control_stops_its_subtree_only():
    text = """
    "groupFile"
    {
        "Bad" { "control" "agTest_before" "control" { "x" "y" } "control" "agTest_after" }
        "Good" { "control" "agTest_good" }
    }
    """
    loaded = load_animation_groups(text)
    assert "agTest_before" in loaded
    assert "agTest_after" not in loaded
    assert loaded["agTest_good"] == AnimationGroup(("Good",), (255, 255, 255, 255))