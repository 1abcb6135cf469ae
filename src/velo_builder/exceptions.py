"""Custom exception hierarchy for the velo builder."""

from __future__ import annotations


class VeloBuilderError(Exception):
    """Base exception for all velo_builder errors."""


class BuilderNotSetError(VeloBuilderError):
    """A Director build sequence was run before a builder was assigned."""

    def __init__(self, message: str = "Director has no builder; call set_builder() first") -> None:
        super().__init__(message)


class UnknownBuilderError(VeloBuilderError):
    """No builder is registered under the requested id."""

    def __init__(self, builder_id: str, known: list[str] | None = None) -> None:
        known_ids = ", ".join(known or []) or "none"
        super().__init__(f"Unknown builder {builder_id!r} (known: {known_ids})")
        self.builder_id = builder_id


class UnknownPartError(VeloBuilderError):
    """A production step name does not match any PartKind."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown part {name!r}")
        self.name = name


class BuilderContractError(VeloBuilderError):
    """A registered builder cannot hand over its product (no get_product)."""

    def __init__(self, builder_id: str) -> None:
        super().__init__(f"Builder {builder_id!r} does not provide get_product()")
        self.builder_id = builder_id
