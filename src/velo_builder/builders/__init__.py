"""Builders — production steps that assemble a Velo."""

from velo_builder.builders.base import VeloBuilder
from velo_builder.builders.custom_shop import CustomShopBuilder
from velo_builder.builders.decathlon import DecathlonBuilder

__all__ = ["CustomShopBuilder", "DecathlonBuilder", "VeloBuilder"]
