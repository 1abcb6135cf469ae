"""Builder registry with auto-discovery of VeloBuilder subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from pathlib import Path

from velo_builder.builders.base import RetrievableBuilder, VeloBuilder
from velo_builder.exceptions import BuilderContractError, UnknownBuilderError

logger = logging.getLogger(__name__)


class BuilderRegistry:
    """Discovers and manages all VeloBuilder implementations.

    Auto-discovers builders by scanning the builders/ package for concrete
    subclasses of VeloBuilder. A new variant is added by placing a .py file
    in that package.

    Builders handed out by create() must also provide get_product(). The
    client collects finished velos through it (see RetrievableBuilder).
    """

    def __init__(self) -> None:
        self._builders: dict[str, type[VeloBuilder]] = {}

    def discover_builders(self) -> None:
        """Scan the builders package and register all VeloBuilder subclasses."""
        import velo_builder.builders as builders_pkg

        builders_path = Path(builders_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(builders_pkg.__name__, str(builders_path))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        for _importer, module_name, _is_pkg in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, VeloBuilder)
                    and attr is not VeloBuilder
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr)

    def register(self, builder_cls: type[VeloBuilder]) -> None:
        """Register a builder class by its builder_id."""
        self._builders[builder_cls.builder_id] = builder_cls
        logger.debug("Registered builder %s", builder_cls.builder_id)

    def get(self, builder_id: str) -> type[VeloBuilder] | None:
        """Retrieve a builder class by its builder_id."""
        return self._builders.get(builder_id)

    def create(self, builder_id: str) -> RetrievableBuilder:
        """Instantiate a fresh builder.

        Raises UnknownBuilderError if *builder_id* is not registered and
        BuilderContractError if the builder cannot hand over a product.
        """
        builder_cls = self.get(builder_id)
        if builder_cls is None:
            raise UnknownBuilderError(builder_id, self.builder_ids)
        builder = builder_cls()
        if not isinstance(builder, RetrievableBuilder):
            raise BuilderContractError(builder_id)
        return builder

    @property
    def builder_ids(self) -> list[str]:
        """List all registered builder ids, sorted."""
        return sorted(self._builders)
