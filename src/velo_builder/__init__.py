"""Velo builder — the Builder pattern applied to assembling bicycles."""

from velo_builder.builders import CustomShopBuilder, DecathlonBuilder, VeloBuilder
from velo_builder.director import Director
from velo_builder.exceptions import (
    BuilderContractError,
    BuilderNotSetError,
    UnknownBuilderError,
    UnknownPartError,
    VeloBuilderError,
)
from velo_builder.models import PartKind, Velo

__all__ = [
    "BuilderContractError",
    "BuilderNotSetError",
    "CustomShopBuilder",
    "DecathlonBuilder",
    "Director",
    "PartKind",
    "UnknownBuilderError",
    "UnknownPartError",
    "Velo",
    "VeloBuilder",
    "VeloBuilderError",
]

__version__ = "0.1.0"
