"""Precision settings for path calculations."""

from dataclasses import dataclass
from enum import Enum


class LengthPrecision(int, Enum):
    """Number of linear steps used to approximate a curve's length.

    Higher precision is more expensive to compute.
    """

    LOW = 50
    NORMAL = 100
    HIGH = 150


class PerpendicularPrecision(float, Enum):
    """Maximum spacing between lookup table samples for nearest-point queries.

    Smaller spacing means higher precision and more samples.
    """

    LOW = 15.0
    NORMAL = 5.0
    HIGH = 2.0


@dataclass(frozen=True)
class CalculationSettings:
    """Precision knobs threaded into cache builds.

    Attributes:
        length_precision: Integration steps for quadratic/cubic lengths
        perpendicular_precision: Distance between lookup table samples
    """

    length_precision: LengthPrecision = LengthPrecision.NORMAL
    perpendicular_precision: PerpendicularPrecision = PerpendicularPrecision.NORMAL


# ============================================================================
# PRESETS
# ============================================================================

BEST_PERFORMANCE = CalculationSettings(
    length_precision=LengthPrecision.LOW,
    perpendicular_precision=PerpendicularPrecision.LOW,
)

BALANCED = CalculationSettings(
    length_precision=LengthPrecision.NORMAL,
    perpendicular_precision=PerpendicularPrecision.NORMAL,
)

BEST_QUALITY = CalculationSettings(
    length_precision=LengthPrecision.HIGH,
    perpendicular_precision=PerpendicularPrecision.HIGH,
)

PRESETS: dict[str, CalculationSettings] = {
    "performance": BEST_PERFORMANCE,
    "balanced": BALANCED,
    "quality": BEST_QUALITY,
}


def get_preset(name: str) -> CalculationSettings | None:
    """Get a settings preset by name, or None if not found."""
    return PRESETS.get(name)
