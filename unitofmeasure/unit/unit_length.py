"""Length and distance unit definitions.

This module provides the Length quantity together with its unit and
measurement system enumerations. Lengths are stored in the unit they were
given in; the meter is the base unit every conversion factor refers to.

Measurement systems:
    - Metric: femtometers to kilometers, plus the rarely used decimeter,
      decameter, hectometer and megameter (never picked by normalization).
    - Imperial: inches to miles, plus the microinch.
    - Astronomical: light-seconds to light-years.
    - Nautical: nautical miles and fathoms. Nautical lengths never normalize.

Classes:
    LengthSystem: Measurement systems for lengths.
    LengthUnit: Units of length.
    Length: Length quantity, base unit meter.

Example:
    >>> result = Length(2.1, LengthUnit.METER) + Length(43.4, LengthUnit.INCH)
    >>> print(f"{result:.5f}")  # "3.20236 m"
    >>> result.unit = LengthUnit.FOOT
    >>> print(f"{result:.3fl}")  # "10.506 foot"
"""

from __future__ import annotations

from enum import Enum

from .unit_base import Quantity, UnitEnum

SPEED_OF_LIGHT = 299_792_458.0  # m/s
JULIAN_YEAR = 365.25 * 86_400.0  # s


class LengthSystem(Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    ASTRONOMICAL = "astronomical"
    NAUTICAL = "nautical"


class LengthUnit(UnitEnum):
    """Units of length. Factors are meters per unit."""

    # Metric common
    FEMTOMETER = ("fm", "femtometers", 1e-15, LengthSystem.METRIC, True)
    PICOMETER = ("pm", "picometers", 1e-12, LengthSystem.METRIC, True)
    NANOMETER = ("nm", "nanometers", 1e-9, LengthSystem.METRIC, True)
    MICROMETER = ("µm", "micrometers", 1e-6, LengthSystem.METRIC, True)
    MILLIMETER = ("mm", "millimeters", 1e-3, LengthSystem.METRIC, True)
    CENTIMETER = ("cm", "centimeters", 1e-2, LengthSystem.METRIC, True)
    METER = ("m", "meters", 1.0, LengthSystem.METRIC, True)
    KILOMETER = ("km", "kilometers", 1e3, LengthSystem.METRIC, True)
    # Metric rare
    DECIMETER = ("dm", "decimeters", 1e-1, LengthSystem.METRIC, False)
    DECAMETER = ("dam", "decameters", 1e1, LengthSystem.METRIC, False)
    HECTOMETER = ("hm", "hectometers", 1e2, LengthSystem.METRIC, False)
    MEGAMETER = ("Mm", "megameters", 1e6, LengthSystem.METRIC, False)

    # Imperial common
    INCH = ("in", "inches", 2.54e-2, LengthSystem.IMPERIAL, True)
    FOOT = ("ft", "foot", 0.3048, LengthSystem.IMPERIAL, True)
    YARD = ("yd", "yards", 0.9144, LengthSystem.IMPERIAL, True)
    MILE = ("mi", "miles", 1609.344, LengthSystem.IMPERIAL, True)
    # Imperial rare
    MICROINCH = ("µin", "microinches", 2.54e-8, LengthSystem.IMPERIAL, False)

    # Astronomical
    LIGHT_SECOND = ("ls", "light-seconds", SPEED_OF_LIGHT, LengthSystem.ASTRONOMICAL, True)
    LIGHT_MINUTE = ("lmin", "light-minutes", SPEED_OF_LIGHT * 60, LengthSystem.ASTRONOMICAL, True)
    LIGHT_HOUR = ("lh", "light-hours", SPEED_OF_LIGHT * 3_600, LengthSystem.ASTRONOMICAL, True)
    LIGHT_DAY = ("ld", "light-days", SPEED_OF_LIGHT * 86_400, LengthSystem.ASTRONOMICAL, True)
    LIGHT_WEEK = ("lw", "light-weeks", SPEED_OF_LIGHT * 604_800, LengthSystem.ASTRONOMICAL, True)
    LIGHT_YEAR = ("ly", "light-years", SPEED_OF_LIGHT * JULIAN_YEAR, LengthSystem.ASTRONOMICAL, True)

    # Nautical
    NAUTICAL_MILE = ("nmi", "nautical miles", 1852.0, LengthSystem.NAUTICAL, False)
    FATHOM = ("ftm", "fathoms", 1.8288, LengthSystem.NAUTICAL, False)


class Length(Quantity):
    """Length or distance quantity.

    Binding the unit to the number prevents adding millimeters to inches by
    accident: the right operand is always converted into the unit of the
    left one.

    Attributes:
        SI (LengthUnit): ``LengthUnit.METER``, the base and default unit.

    Example:
        >>> length = Length(1034, LengthUnit.MILLIMETER)
        >>> length.normalize()
        >>> print(length)  # "1.034 m"
        >>> length.is_metric
        True
    """

    __slots__ = ()

    UNIT = LengthUnit
    SYSTEM = LengthSystem
    SI = LengthUnit.METER
    METRIC_SYSTEMS = frozenset({LengthSystem.METRIC})
    IMPERIAL_SYSTEMS = frozenset({LengthSystem.IMPERIAL})

    @property
    def is_astronomical(self) -> bool:
        return self.system is LengthSystem.ASTRONOMICAL

    @property
    def is_nautical(self) -> bool:
        return self.system is LengthSystem.NAUTICAL
