"""Enumerations for the velo builder."""

from enum import IntEnum, auto


class PartKind(IntEnum):
    """Production steps a builder exposes, in full-featured assembly order."""

    GUIDON = auto()  # handlebar
    CADRE = auto()   # frame
    ROUE = auto()    # wheel
