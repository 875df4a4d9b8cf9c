"""Build Source Filmmaker sessions and write them as DMX keyvalues2 text."""

__version__ = "0.1.0"
__all__ = [
    "animationgroups",
    "animationset",
    "channel",
    "clips",
    "controlgroup",
    "dmx",
    "gamemodel",
    "logs",
    "nodes",
    "particles",
    "preset",
    "session",
    "settings",
    "transform",
    "types",
]