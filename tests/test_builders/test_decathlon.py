"""Tests for DecathlonBuilder — production steps and product retrieval."""

from __future__ import annotations

import pytest

from velo_builder.builders.base import VeloBuilder
from velo_builder.builders.decathlon import DecathlonBuilder
from velo_builder.exceptions import UnknownPartError
from velo_builder.models.enums import PartKind
from velo_builder.models.velo import Velo


class TestProductionSteps:
    def test_guidon_label(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_guidon()
        assert decathlon.get_product().list_parts() == ("PartA1",)

    def test_cadre_label(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_cadre()
        assert decathlon.get_product().list_parts() == ("PartB1",)

    def test_roue_label(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_roue()
        assert decathlon.get_product().list_parts() == ("PartC1",)

    def test_parts_follow_call_order(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_roue()
        decathlon.produce_guidon()
        decathlon.produce_roue()
        decathlon.produce_cadre()
        assert decathlon.get_product().list_parts() == (
            "PartC1", "PartA1", "PartC1", "PartB1",
        )

    def test_direct_calls_without_director(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_guidon()
        decathlon.produce_roue()
        assert decathlon.get_product().list_parts() == ("PartA1", "PartC1")

    @pytest.mark.parametrize(
        "kind, label",
        [
            (PartKind.GUIDON, "PartA1"),
            (PartKind.CADRE, "PartB1"),
            (PartKind.ROUE, "PartC1"),
        ],
    )
    def test_produce_dispatches_by_kind(
        self, decathlon: DecathlonBuilder, kind: PartKind, label: str,
    ) -> None:
        decathlon.produce(kind)
        assert decathlon.get_product().list_parts() == (label,)

    def test_produce_rejects_unknown_kind(self, decathlon: DecathlonBuilder) -> None:
        with pytest.raises(UnknownPartError):
            decathlon.produce(7)  # type: ignore[arg-type]
        assert decathlon.get_product().list_parts() == ()


class TestGetProduct:
    def test_empty_retrieval_is_not_an_error(self, decathlon: DecathlonBuilder) -> None:
        velo = decathlon.get_product()
        assert isinstance(velo, Velo)
        assert velo.list_parts() == ()

    def test_second_retrieval_is_empty(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_cadre()
        decathlon.get_product()
        assert decathlon.get_product().list_parts() == ()

    def test_returned_product_is_not_touched_by_next_cycle(
        self, decathlon: DecathlonBuilder,
    ) -> None:
        decathlon.produce_guidon()
        first = decathlon.get_product()
        decathlon.produce_roue()
        second = decathlon.get_product()
        assert first.list_parts() == ("PartA1",)
        assert second.list_parts() == ("PartC1",)
        assert first is not second

    def test_mutating_returned_product_does_not_leak_back(
        self, decathlon: DecathlonBuilder,
    ) -> None:
        decathlon.produce_guidon()
        velo = decathlon.get_product()
        velo.append("Sticker")
        assert decathlon.get_product().list_parts() == ()


class TestReset:
    def test_reset_discards_parts(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_guidon()
        decathlon.produce_cadre()
        decathlon.reset()
        assert decathlon.get_product().list_parts() == ()

    def test_reset_is_idempotent(self, decathlon: DecathlonBuilder) -> None:
        decathlon.produce_roue()
        decathlon.reset()
        decathlon.reset()
        decathlon.produce_cadre()
        assert decathlon.get_product().list_parts() == ("PartB1",)


class TestBuilderContract:
    def test_is_a_velo_builder(self, decathlon: DecathlonBuilder) -> None:
        assert isinstance(decathlon, VeloBuilder)
        assert decathlon.builder_id == "decathlon"

    def test_abstract_base_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            VeloBuilder()  # type: ignore[abstract]

    def test_builders_do_not_share_products(self) -> None:
        a, b = DecathlonBuilder(), DecathlonBuilder()
        a.produce_guidon()
        assert b.get_product().list_parts() == ()
        assert a.get_product().list_parts() == ("PartA1",)
