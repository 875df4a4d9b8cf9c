"""Animation logs: keyed values over time, grouped in named layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .dmx import AttributeType, DmElement, Element, Serializer
from .types import ZERO_QUATERNION, ZERO_VECTOR3


class LogValueKind(Enum):
    """Kind of value a log records."""

    BOOL = ("bool", "DmeBoolLog", AttributeType.BOOL_ARRAY)
    FLOAT = ("float", "DmeFloatLog", AttributeType.FLOAT_ARRAY)
    VECTOR3 = ("vector3", "DmeVector3Log", AttributeType.VECTOR3_ARRAY)
    QUATERNION = ("quaternion", "DmeQuaternionLog", AttributeType.QUATERNION_ARRAY)

    @property
    def log_name(self) -> str:
        return f"{self.value[0]} log"

    @property
    def log_type(self) -> str:
        return self.value[1]

    @property
    def layer_type(self) -> str:
        return self.value[1] + "Layer"

    @property
    def array_type(self) -> AttributeType:
        return self.value[2]

    @property
    def zero(self) -> Any:
        match self:
            case LogValueKind.BOOL:
                return False
            case LogValueKind.FLOAT:
                return 0.0
            case LogValueKind.VECTOR3:
                return ZERO_VECTOR3
            case _:
                return ZERO_QUATERNION


@dataclass(eq=False)
class LogLayer(Element):
    """Values keyed by time; without keys it exports its default value at time 0."""

    kind: LogValueKind
    default_value: Any = None
    times: list[float] = field(default_factory=list)
    curve_types: list[int] = field(default_factory=list)
    values: dict[float, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.default_value is None:
            self.default_value = self.kind.zero

    def set_value(self, time: float, value: Any) -> None:
        """Record ``value`` at ``time``, replacing an earlier value at that time."""
        self.times.append(time)
        self.values[time] = value

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.kind.log_name, self.kind.layer_type)

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        times = dm.create_array("times", AttributeType.TIME_ARRAY)
        values = dm.create_array("values", self.kind.array_type)
        keys = sorted(self.values)
        if not keys:
            times.push(0.0)
            values.push(self.default_value)
            return
        for time in keys:
            times.push(time)
            values.push(self.values[time])


@dataclass(eq=False)
class Log(Element):
    """Named layers of one value kind."""

    kind: LogValueKind
    layers: dict[str, LogLayer] = field(default_factory=dict)

    def add_layer(self, name: str) -> LogLayer:
        """Create a new layer under ``name``, replacing any existing one."""
        layer = LogLayer(self.kind)
        self.layers[name] = layer
        return layer

    def get_layer(self, name: str) -> LogLayer:
        """Return the layer called ``name``, creating it if needed."""
        if name in self.layers:
            return self.layers[name]
        return self.add_layer(name)

    def set_layer(self, name: str, layer: LogLayer) -> None:
        """Put ``layer`` under ``name``; its kind must match the log's."""
        if not isinstance(layer, LogLayer) or layer.kind is not self.kind:
            raise TypeError("can't convert log layer to correct type")
        self.layers[name] = layer

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.kind.log_name, self.kind.log_type)

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        layers = dm.create_array("layers", AttributeType.ELEMENT_ARRAY)
        for layer in self.layers.values():
            layers.push(serializer.get_element(layer))