"""Dynamic color roles, versioned resolution strategies and the role facade."""

from chromatone.core.dynamiccolor.color_spec import ColorSpec, role
from chromatone.core.dynamiccolor.color_spec_2021 import ColorSpec2021
from chromatone.core.dynamiccolor.color_spec_2025 import ColorSpec2025, get_contrast_curve
from chromatone.core.dynamiccolor.color_spec_2026 import ColorSpec2026
from chromatone.core.dynamiccolor.color_specs import COLOR_SPECS, ColorSpecs
from chromatone.core.dynamiccolor.contrast_curve import ContrastCurve
from chromatone.core.dynamiccolor.dynamic_color import DynamicColor
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import (
    DeltaConstraint,
    Platform,
    SpecVersion,
    TonePolarity,
    Variant,
)
from chromatone.core.dynamiccolor.errors import (
    ColorConfigurationError,
    DependencyCycleError,
    SpecNotFoundError,
    UnsupportedVariantError,
)
from chromatone.core.dynamiccolor.material_dynamic_colors import (
    ROLE_NAMES,
    MaterialDynamicColors,
)
from chromatone.core.dynamiccolor.tone_delta_pair import ToneDeltaPair

__all__ = [
    # Model
    "ContrastCurve",
    "DynamicColor",
    "DynamicScheme",
    "ToneDeltaPair",
    # Enums
    "DeltaConstraint",
    "Platform",
    "SpecVersion",
    "TonePolarity",
    "Variant",
    # Strategies
    "COLOR_SPECS",
    "ColorSpec",
    "ColorSpec2021",
    "ColorSpec2025",
    "ColorSpec2026",
    "ColorSpecs",
    "get_contrast_curve",
    "role",
    # Facade
    "ROLE_NAMES",
    "MaterialDynamicColors",
    # Errors
    "ColorConfigurationError",
    "DependencyCycleError",
    "SpecNotFoundError",
    "UnsupportedVariantError",
]
