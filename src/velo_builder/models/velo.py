"""Velo — the product assembled by a builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Velo:
    """An ordered collection of part labels.

    Parts only grow during a build cycle and keep the order in which the
    production steps were called. Builders hand a Velo over on
    ``get_product()`` and start a new one, so a returned Velo is never
    touched by its builder again.
    """

    parts: list[str] = field(default_factory=list)

    def append(self, part: str) -> None:
        """Append one part label."""
        self.parts.append(part)

    def list_parts(self) -> tuple[str, ...]:
        """Return a read-only snapshot of the parts in insertion order."""
        return tuple(self.parts)

    def describe(self) -> str:
        """Human-readable parts line, e.g. ``Product parts: PartA1, PartC1``."""
        return f"Product parts: {', '.join(self.parts)}"

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self.parts))
