"""Director — runs builder production steps in predefined sequences."""

from __future__ import annotations

import logging

from velo_builder.builders.base import VeloBuilder
from velo_builder.exceptions import BuilderNotSetError

logger = logging.getLogger(__name__)


class Director:
    """Executes building steps in a particular order.

    The Director works with whatever builder the client passes in, so the
    client decides which kind of velo comes out. It never creates, resets or
    retrieves products itself; the client keeps the builder and collects the
    result from it.

    Usage::

        builder = DecathlonBuilder()
        director = Director()
        director.set_builder(builder)
        director.build_full_featured_product()
        velo = builder.get_product()
    """

    def __init__(self) -> None:
        self._builder: VeloBuilder | None = None

    @property
    def builder(self) -> VeloBuilder | None:
        """The builder currently driven, or None before set_builder()."""
        return self._builder

    def set_builder(self, builder: VeloBuilder) -> None:
        """Drive *builder* from now on, replacing any previous one."""
        self._builder = builder
        logger.debug("Director now drives %s", getattr(builder, "builder_id", type(builder).__name__))

    def build_minimal_viable_product(self) -> None:
        """Frame only."""
        builder = self._require_builder()
        builder.produce_cadre()

    def build_full_featured_product(self) -> None:
        """Handlebar, frame and wheel, in that order."""
        builder = self._require_builder()
        builder.produce_guidon()
        builder.produce_cadre()
        builder.produce_roue()

    def _require_builder(self) -> VeloBuilder:
        if self._builder is None:
            raise BuilderNotSetError()
        return self._builder
