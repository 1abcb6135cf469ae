"""Decathlon builder — the reference concrete builder."""

from __future__ import annotations

import logging

from velo_builder.builders.base import VeloBuilder
from velo_builder.models.velo import Velo

logger = logging.getLogger(__name__)


class DecathlonBuilder(VeloBuilder):
    """Builds velos out of the A1/B1/C1 part range.

    A fresh builder holds a blank Velo; every production step works on that
    same instance until ``get_product()`` hands it over.
    """

    builder_id = "decathlon"
    description = "Decathlon stock parts (A1/B1/C1)"

    def __init__(self) -> None:
        self._velo = Velo()

    def reset(self) -> None:
        """Start a new build cycle with an empty Velo."""
        self._velo = Velo()

    def produce_guidon(self) -> None:
        self._velo.append("PartA1")
        logger.debug("%s produced guidon", self.builder_id)

    def produce_cadre(self) -> None:
        self._velo.append("PartB1")
        logger.debug("%s produced cadre", self.builder_id)

    def produce_roue(self) -> None:
        self._velo.append("PartC1")
        logger.debug("%s produced roue", self.builder_id)

    def get_product(self) -> Velo:
        """Hand over the finished Velo and reset for the next build cycle.

        Returns an empty Velo if no production step ran since the last reset.
        """
        result = self._velo
        self.reset()
        logger.debug("%s delivered %d part(s)", self.builder_id, len(result))
        return result
