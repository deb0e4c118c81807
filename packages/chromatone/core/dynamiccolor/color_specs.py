"""Registry mapping spec versions to their resolution strategies."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from chromatone.core.dynamiccolor.color_spec import ColorSpec
from chromatone.core.dynamiccolor.color_spec_2021 import ColorSpec2021
from chromatone.core.dynamiccolor.color_spec_2025 import ColorSpec2025
from chromatone.core.dynamiccolor.color_spec_2026 import ColorSpec2026
from chromatone.core.dynamiccolor.enums import SpecVersion
from chromatone.core.dynamiccolor.errors import SpecNotFoundError

logger = logging.getLogger(__name__)

SpecFactory = Callable[[], ColorSpec]


class ColorSpecs:
    """Lazily built, shared strategy per spec version.

    Each strategy is created on first lookup and reused afterwards, so every
    lookup of a version returns the identical object. Concurrent first
    lookups may both build a strategy but only one is ever published.

    Example:
        >>> specs = ColorSpecs()
        >>> specs.get(SpecVersion.SPEC_2025) is specs.get(SpecVersion.SPEC_2025)
        True
    """

    def __init__(self, factories: dict[SpecVersion, SpecFactory] | None = None) -> None:
        if factories is None:
            factories = {
                SpecVersion.SPEC_2021: ColorSpec2021,
                SpecVersion.SPEC_2025: ColorSpec2025,
                SpecVersion.SPEC_2026: ColorSpec2026,
            }
        self._factories: dict[SpecVersion, SpecFactory] = dict(factories)
        self._instances: dict[SpecVersion, ColorSpec] = {}
        self._lock = threading.Lock()

    def register(self, spec_version: SpecVersion, factory: SpecFactory) -> None:
        """Add a strategy factory for a version not yet served.

        Raises:
            ValueError: If the version already has a factory
        """
        spec_version = SpecVersion(spec_version)
        with self._lock:
            if spec_version in self._factories:
                raise ValueError(f"Spec version {spec_version.value} already registered")
            self._factories[spec_version] = factory

    def get(self, spec_version: SpecVersion | int) -> ColorSpec:
        """Strategy serving ``spec_version``.

        Args:
            spec_version: Version to look up

        Returns:
            The shared strategy instance

        Raises:
            SpecNotFoundError: If no factory is registered for the version
        """
        try:
            version = SpecVersion(spec_version)
        except ValueError as exc:
            raise SpecNotFoundError(f"Unknown spec version {spec_version!r}") from exc

        spec = self._instances.get(version)
        if spec is not None:
            return spec

        factory = self._factories.get(version)
        if factory is None:
            raise SpecNotFoundError(f"No color spec registered for {version.value}")

        with self._lock:
            spec = self._instances.get(version)
            if spec is None:
                spec = self._instances.setdefault(version, factory())
                logger.debug(f"Created color spec {spec!r} for version {version.value}")
        return spec

    def get_default(self) -> ColorSpec:
        """The 2021 strategy."""
        return self.get(SpecVersion.SPEC_2021)

    def __contains__(self, spec_version: object) -> bool:
        return spec_version in self._factories


COLOR_SPECS = ColorSpecs()
"""Process-wide registry used by schemes that are not given one."""
