"""Shared test fixtures: builders, a wired director, a recording builder."""

from __future__ import annotations

import pytest

from velo_builder.builders.base import VeloBuilder
from velo_builder.builders.custom_shop import CustomShopBuilder
from velo_builder.builders.decathlon import DecathlonBuilder
from velo_builder.director import Director
from velo_builder.registry import BuilderRegistry


class RecordingBuilder(VeloBuilder):
    """Builder that records which steps were called, for director tests."""

    builder_id = "recording"

    def __init__(self) -> None:
        self.calls: list[str] = []

    def produce_guidon(self) -> None:
        self.calls.append("guidon")

    def produce_cadre(self) -> None:
        self.calls.append("cadre")

    def produce_roue(self) -> None:
        self.calls.append("roue")


@pytest.fixture
def decathlon() -> DecathlonBuilder:
    return DecathlonBuilder()


@pytest.fixture
def custom_shop() -> CustomShopBuilder:
    return CustomShopBuilder()


@pytest.fixture
def director(decathlon: DecathlonBuilder) -> Director:
    """Director already wired to the ``decathlon`` fixture."""
    d = Director()
    d.set_builder(decathlon)
    return d


@pytest.fixture
def recording_builder() -> RecordingBuilder:
    return RecordingBuilder()


@pytest.fixture
def registry() -> BuilderRegistry:
    r = BuilderRegistry()
    r.discover_builders()
    return r
