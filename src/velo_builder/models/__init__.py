"""Data models for the velo builder."""

from velo_builder.models.enums import PartKind
from velo_builder.models.velo import Velo

__all__ = [
    "PartKind",
    "Velo",
]
