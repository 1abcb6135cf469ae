"""Abstract base class for all velo builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from velo_builder.exceptions import UnknownPartError
from velo_builder.models.enums import PartKind

if TYPE_CHECKING:
    from velo_builder.models.velo import Velo


class VeloBuilder(ABC):
    """Contract for objects that assemble a Velo step by step.

    The production steps are independent: they may be called in any order,
    any number of times. Ordering is the Director's concern, not the
    builder's. Each call appends exactly one part label to the builder's
    current product.

    The base class holds no state. Every concrete builder owns its own
    product and decides how it is handed back to the caller, so retrieval
    is not part of this contract (see RetrievableBuilder).

    Subclasses must define:
        builder_id: unique registry key (e.g. "decathlon")
        description: one-line label shown by the CLI and dashboard
        produce_guidon(), produce_cadre(), produce_roue()
    """

    builder_id: str
    description: str = ""

    @abstractmethod
    def produce_guidon(self) -> None:
        """Add a handlebar part."""
        ...

    @abstractmethod
    def produce_cadre(self) -> None:
        """Add a frame part."""
        ...

    @abstractmethod
    def produce_roue(self) -> None:
        """Add a wheel part."""
        ...

    def produce(self, kind: PartKind) -> None:
        """Run the production step matching *kind*.

        Raises UnknownPartError if *kind* is not a PartKind value.
        """
        try:
            part = PartKind(kind)
        except ValueError:
            raise UnknownPartError(str(kind)) from None
        steps = {
            PartKind.GUIDON: self.produce_guidon,
            PartKind.CADRE: self.produce_cadre,
            PartKind.ROUE: self.produce_roue,
        }
        steps[part]()


@runtime_checkable
class RetrievableBuilder(Protocol):
    """A builder the client can drive end to end and collect a Velo from."""

    builder_id: str

    def produce_guidon(self) -> None: ...

    def produce_cadre(self) -> None: ...

    def produce_roue(self) -> None: ...

    def produce(self, kind: PartKind) -> None: ...

    def get_product(self) -> Velo: ...
