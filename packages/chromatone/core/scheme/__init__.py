"""Scheme factories for every variant."""

from chromatone.core.scheme.cmf import scheme_cmf
from chromatone.core.scheme.factory import (
    create_scheme,
    scheme_content,
    scheme_expressive,
    scheme_fidelity,
    scheme_from_config,
    scheme_fruit_salad,
    scheme_monochrome,
    scheme_neutral,
    scheme_rainbow,
    scheme_tonal_spot,
    scheme_vibrant,
    to_hct,
)

__all__ = [
    "create_scheme",
    "scheme_cmf",
    "scheme_content",
    "scheme_expressive",
    "scheme_fidelity",
    "scheme_from_config",
    "scheme_fruit_salad",
    "scheme_monochrome",
    "scheme_neutral",
    "scheme_rainbow",
    "scheme_tonal_spot",
    "scheme_vibrant",
    "to_hct",
]
