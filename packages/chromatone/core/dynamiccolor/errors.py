"""Exceptions raised by the dynamic color engine."""

from __future__ import annotations


class ColorConfigurationError(ValueError):
    """Raised when a DynamicColor definition or extension is malformed."""

    pass


class UnsupportedVariantError(ValueError):
    """Raised when a palette generator does not define a variant."""

    def __init__(self, variant: object, spec_version: object) -> None:
        self.variant = variant
        self.spec_version = spec_version
        super().__init__(f"Variant {variant} is not supported in spec {spec_version}")


class DependencyCycleError(RuntimeError):
    """Raised when resolving a color role re-enters itself on the same scheme."""

    pass


class SpecNotFoundError(KeyError):
    """Raised when no resolution strategy is registered for a spec version."""

    pass
