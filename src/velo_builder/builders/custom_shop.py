"""Custom shop builder — a second, independent builder variant."""

from __future__ import annotations

import logging

from velo_builder.builders.base import VeloBuilder
from velo_builder.models.velo import Velo

logger = logging.getLogger(__name__)


class CustomShopBuilder(VeloBuilder):
    """Builds velos out of the A2/B2/C2 part range.

    Shares the step contract with DecathlonBuilder but none of its state.
    """

    builder_id = "custom_shop"
    description = "Custom shop parts (A2/B2/C2)"

    def __init__(self) -> None:
        self._velo = Velo()

    def reset(self) -> None:
        self._velo = Velo()

    def produce_guidon(self) -> None:
        self._velo.append("PartA2")
        logger.debug("%s produced guidon", self.builder_id)

    def produce_cadre(self) -> None:
        self._velo.append("PartB2")
        logger.debug("%s produced cadre", self.builder_id)

    def produce_roue(self) -> None:
        self._velo.append("PartC2")
        logger.debug("%s produced roue", self.builder_id)

    def get_product(self) -> Velo:
        result = self._velo
        self.reset()
        return result
