"""Default animation groups: which control group path and colour a control belongs to."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from .types import Color

KeyValues = list[tuple[str, Union[str, "KeyValues"]]]

_DECLARED_COLOR: Color = (0, 128, 255, 255)
_UNDECLARED_COLOR: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class AnimationGroup:
    """Path of nested control groups for a control, and the colour of the last one."""

    root: tuple[str, ...]
    color: Color


UNKNOWN_GROUP = AnimationGroup(("Unknown",), (0, 128, 255, 255))

_registry: dict[str, AnimationGroup] = {}

_LEXEME_PATTERN = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<comment>//[^\n]*)
    | (?P<condition>\[[^\]\n]*\])
    | (?P<brace>[{}])
    | "(?P<quoted>(?:[^"\\]|\\.)*)"
    | (?P<bare>[^\s{}"]+)
    | (?P<unterminated>")
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", lambda m: _ESCAPES.get(m.group(1), m.group(1)), text, flags=re.DOTALL)


def _lex(text: str) -> Iterator[tuple[str, str]]:
    for match in _LEXEME_PATTERN.finditer(text):
        kind = match.lastgroup
        if kind in ("space", "comment", "condition"):
            continue
        if kind == "unterminated":
            raise ValueError("unterminated quoted string")
        if kind == "brace":
            yield ("open" if match.group("brace") == "{" else "close"), match.group("brace")
        elif kind == "quoted":
            yield "string", _unescape(match.group("quoted"))
        else:
            yield "string", match.group("bare")


def _parse_block(lexemes: Iterator[tuple[str, str]], nested: bool) -> KeyValues:
    entries: KeyValues = []
    for kind, key in lexemes:
        if kind == "close":
            if not nested:
                raise ValueError("unexpected '}'")
            return entries
        if kind == "open":
            raise ValueError("block without a key")
        value_kind, value = next(lexemes, (None, ""))
        if value_kind is None:
            raise ValueError(f"key {key!r} has no value")
        if value_kind == "open":
            entries.append((key, _parse_block(lexemes, True)))
        elif value_kind == "string":
            entries.append((key, value))
        else:
            raise ValueError(f"key {key!r} is followed by '}}'")
    if nested:
        raise ValueError("unterminated block")
    return entries


def parse_keyvalues(text: str) -> KeyValues:
    """Parse keyvalues text into a list of (key, value) pairs.

    A value is a string or, for a block, a nested list of pairs. Keys may repeat.
    """
    return _parse_block(_lex(text), False)


class _InvalidControl(ValueError):
    pass


def _children(value: str | KeyValues) -> KeyValues:
    return value if isinstance(value, list) else []


def _add_group(entries: KeyValues, path: tuple[str, ...], out: dict[str, AnimationGroup]) -> None:
    # A group that declares a groupColor gets the default blue; any other gets white.
    declared = any(key == "groupColor" and isinstance(value, str) for key, value in entries)
    group = AnimationGroup(path, _DECLARED_COLOR if declared else _UNDECLARED_COLOR)
    for key, value in entries:
        if key != "control":
            continue
        if not isinstance(value, str):
            raise _InvalidControl(f"control of group {path[-1]!r} is not a string")
        out[value] = group


def _collect(key: str, value: str | KeyValues, path: tuple[str, ...], out: dict[str, AnimationGroup]) -> None:
    path = (*path, key)
    entries = _children(value)
    if any(child_key == "control" for child_key, _ in entries):
        _add_group(entries, path, out)
        return
    for child_key, child_value in entries:
        _collect(child_key, child_value, path, out)


def load_animation_groups(text: str) -> dict[str, AnimationGroup]:
    """Register the groups of a ``groupFile`` keyvalues document and return them by control name.

    A top-level group holding a malformed control stops being read at that control.
    Raises KeyError when the document has no ``groupFile``.
    """
    entries = parse_keyvalues(text)
    group_file = next((value for key, value in entries if key == "groupFile"), None)
    if group_file is None:
        raise KeyError("groupFile")
    loaded: dict[str, AnimationGroup] = {}
    for key, value in _children(group_file):
        try:
            _collect(key, value, (), loaded)
        except _InvalidControl:
            continue
    _registry.update(loaded)
    return loaded


def get_animation_group(name: str) -> AnimationGroup:
    """Return the registered group of control ``name``, or the unknown group."""
    return _registry.get(name, UNKNOWN_GROUP)