"""Datamodel elements, the serializer that builds them and a keyvalues2 text writer."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

TEXT_HEADER = "<!-- dmx encoding keyvalues2 1 format sfm_session 22 -->"


class AttributeType(Enum):
    """Attribute types of a datamodel element, named as in keyvalues2 text."""

    ELEMENT = "element"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    TIME = "time"
    COLOR = "color"
    VECTOR3 = "vector3"
    QUATERNION = "quaternion"
    UINT64 = "uint64"
    ELEMENT_ARRAY = "element_array"
    INT_ARRAY = "int_array"
    FLOAT_ARRAY = "float_array"
    BOOL_ARRAY = "bool_array"
    STRING_ARRAY = "string_array"
    TIME_ARRAY = "time_array"
    COLOR_ARRAY = "color_array"
    VECTOR3_ARRAY = "vector3_array"
    QUATERNION_ARRAY = "quaternion_array"

    @property
    def is_array(self) -> bool:
        return self.value.endswith("_array")

    @property
    def item_type(self) -> AttributeType:
        """The type of one item of an array type; a scalar type is its own item type."""
        if self.is_array:
            return AttributeType(self.value.removesuffix("_array"))
        return self


def _check_item(item_type: AttributeType, value: Any) -> None:
    if item_type is AttributeType.ELEMENT and value is not None and not isinstance(value, DmElement):
        raise TypeError(f"element attribute expects a DmElement or None, got {type(value).__name__}")


@dataclass(eq=False)
class Attribute:
    """A typed attribute value; array attributes hold a list."""

    type: AttributeType
    value: Any

    def push(self, value: Any) -> None:
        """Append one item to an array attribute."""
        if not self.type.is_array:
            raise TypeError(f"cannot push to a {self.type.value} attribute")
        _check_item(self.type.item_type, value)
        self.value.append(value)


@dataclass(eq=False)
class DmElement:
    """One datamodel element: a name, a type, a unique id and ordered attributes."""

    name: str
    type: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    attributes: dict[str, Attribute] = field(default_factory=dict)

    def set_attribute(self, name: str, attribute_type: AttributeType, value: Any) -> Attribute:
        """Create or replace an attribute and return it."""
        if attribute_type.is_array:
            items = list(value)
            for item in items:
                _check_item(attribute_type.item_type, item)
            attribute = Attribute(attribute_type, items)
        else:
            _check_item(attribute_type, value)
            attribute = Attribute(attribute_type, value)
        self.attributes[name] = attribute
        return attribute

    def create_array(self, name: str, attribute_type: AttributeType) -> Attribute:
        """Create an empty array attribute and return it."""
        if not attribute_type.is_array:
            raise ValueError(f"{attribute_type.value} is not an array type")
        return self.set_attribute(name, attribute_type, [])

    def __getitem__(self, name: str) -> Any:
        return self.attributes[name].value

    def __contains__(self, name: object) -> bool:
        return name in self.attributes


class Element(ABC):
    """Something that can be turned into a datamodel element by a Serializer."""

    @abstractmethod
    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        """Create the bare element carrying this object's name and type."""

    @abstractmethod
    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        """Fill the attributes of the element created for this object."""

    def _is_exportable(self) -> bool:
        return True


class Serializer:
    """Builds datamodel elements from objects, one element per object."""

    def __init__(self) -> None:
        self._elements: dict[int, tuple[Element, DmElement]] = {}
        self._queue: list[Element] = []

    def serialize(self, element: Element) -> DmElement | None:
        """Build the element for ``element`` and everything it references."""
        self._queue = []
        root = self.get_element(element)
        while self._queue:
            pending = self._queue.pop()
            pending._to_dm_element(self, self._elements[id(pending)][1])
        return root

    def get_element(self, element: Element | None) -> DmElement | None:
        """Return the element for ``element``, creating it on first use.

        None and objects that are not exportable give None.
        """
        if element is None or not element._is_exportable():
            return None
        known = self._elements.get(id(element))
        if known is not None:
            return known[1]
        dm = element._create_dm_element(self)
        self._elements[id(element)] = (element, dm)
        self._queue.append(element)
        return dm


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _format_float(value: float) -> str:
    return f"{float(value):.10g}"


def _format_value(item_type: AttributeType, value: Any) -> str:
    match item_type:
        case AttributeType.STRING:
            return str(value)
        case AttributeType.INT | AttributeType.UINT64:
            return str(int(value))
        case AttributeType.FLOAT:
            return _format_float(value)
        case AttributeType.BOOL:
            return "1" if value else "0"
        case AttributeType.TIME:
            return f"{float(value):.4f}"
        case AttributeType.COLOR:
            return " ".join(str(int(c)) for c in value)
        case AttributeType.VECTOR3 | AttributeType.QUATERNION:
            return " ".join(_format_float(c) for c in value)
    raise ValueError(f"cannot format a {item_type.value} value")


class _TextWriter:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self._written: set[str] = set()

    def element(self, dm: DmElement, depth: int, key: str | None, trailing: str) -> None:
        indent = "\t" * depth
        head = _quote(dm.type) if key is None else f"{_quote(key)} {_quote(dm.type)}"
        self.lines.append(indent + head)
        self.lines.append(indent + "{")
        self._written.add(dm.id)
        inner = indent + "\t"
        self.lines.append(f'{inner}"id" "elementid" {_quote(dm.id)}')
        self.lines.append(f'{inner}"name" "string" {_quote(dm.name)}')
        for name, attribute in dm.attributes.items():
            self.attribute(name, attribute, depth + 1)
        self.lines.append(indent + "}" + trailing)

    def attribute(self, name: str, attribute: Attribute, depth: int) -> None:
        indent = "\t" * depth
        if attribute.type is AttributeType.ELEMENT:
            target = attribute.value
            if target is None:
                self.lines.append(f'{indent}{_quote(name)} "element" ""')
            elif target.id in self._written:
                self.lines.append(f'{indent}{_quote(name)} "element" {_quote(target.id)}')
            else:
                self.element(target, depth, name, "")
            return
        if not attribute.type.is_array:
            text = _format_value(attribute.type, attribute.value)
            self.lines.append(f"{indent}{_quote(name)} {_quote(attribute.type.value)} {_quote(text)}")
            return
        self.lines.append(f"{indent}{_quote(name)} {_quote(attribute.type.value)}")
        self.lines.append(indent + "[")
        inner = indent + "\t"
        items = attribute.value
        for position, item in enumerate(items):
            trailing = "," if position < len(items) - 1 else ""
            if attribute.type is AttributeType.ELEMENT_ARRAY:
                if item is None:
                    self.lines.append(f'{inner}"element" ""{trailing}')
                elif item.id in self._written:
                    self.lines.append(f'{inner}"element" {_quote(item.id)}{trailing}')
                else:
                    self.element(item, depth + 1, None, trailing)
            else:
                text = _format_value(attribute.type.item_type, item)
                self.lines.append(f"{inner}{_quote(text)}{trailing}")
        self.lines.append(indent + "]")


def serialize_text(root: DmElement) -> str:
    """Write ``root`` and the elements it references as keyvalues2 text.

    An element is written in full where it is first met and by id afterwards.
    """
    writer = _TextWriter()
    writer.lines.append(TEXT_HEADER)
    writer.element(root, 0, None, "")
    return "\n".join(writer.lines) + "\n"