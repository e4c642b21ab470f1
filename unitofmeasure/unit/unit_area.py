"""Area unit definitions.

All area factors refer to the square meter. Metric areas include the
hectare between the square meter and the square kilometer; imperial areas
include the acre between the square yard and the square mile.

Classes:
    AreaSystem: Measurement systems for areas.
    AreaUnit: Units of area.
    Area: Area quantity, base unit square meter.

Example:
    >>> field = Area(25_000, AreaUnit.SQUARE_METER)
    >>> field.normalize()
    >>> print(field)  # "2.5 ha"
"""

from __future__ import annotations

from enum import Enum

from .unit_base import Quantity, UnitEnum


class AreaSystem(Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class AreaUnit(UnitEnum):
    """Units of area. Factors are square meters per unit."""

    # Metric common
    SQUARE_FEMTOMETER = ("fm²", "square femtometers", 1e-30, AreaSystem.METRIC, True)
    SQUARE_PICOMETER = ("pm²", "square picometers", 1e-24, AreaSystem.METRIC, True)
    SQUARE_NANOMETER = ("nm²", "square nanometers", 1e-18, AreaSystem.METRIC, True)
    SQUARE_MICROMETER = ("µm²", "square micrometers", 1e-12, AreaSystem.METRIC, True)
    SQUARE_MILLIMETER = ("mm²", "square millimeters", 1e-6, AreaSystem.METRIC, True)
    SQUARE_CENTIMETER = ("cm²", "square centimeters", 1e-4, AreaSystem.METRIC, True)
    SQUARE_METER = ("m²", "square meters", 1.0, AreaSystem.METRIC, True)
    HECTARE = ("ha", "hectares", 1e4, AreaSystem.METRIC, True)
    SQUARE_KILOMETER = ("km²", "square kilometers", 1e6, AreaSystem.METRIC, True)
    # Metric rare
    SQUARE_DECIMETER = ("dm²", "square decimeters", 1e-2, AreaSystem.METRIC, False)
    SQUARE_DECAMETER = ("dam²", "square decameters", 1e2, AreaSystem.METRIC, False)
    SQUARE_MEGAMETER = ("Mm²", "square megameters", 1e12, AreaSystem.METRIC, False)

    # Imperial
    SQUARE_MICROINCH = ("µin²", "square microinches", 6.4516e-16, AreaSystem.IMPERIAL, True)
    SQUARE_INCH = ("in²", "square inches", 6.4516e-4, AreaSystem.IMPERIAL, True)
    SQUARE_FOOT = ("ft²", "square foot", 0.09290304, AreaSystem.IMPERIAL, True)
    SQUARE_YARD = ("yd²", "square yards", 0.83612736, AreaSystem.IMPERIAL, True)
    ACRE = ("ac", "acres", 4046.8564224, AreaSystem.IMPERIAL, True)
    SQUARE_MILE = ("mi²", "square miles", 2_589_988.110336, AreaSystem.IMPERIAL, True)


class Area(Quantity):
    """Area quantity.

    Attributes:
        SI (AreaUnit): ``AreaUnit.SQUARE_METER``, the base and default unit.
    """

    __slots__ = ()

    UNIT = AreaUnit
    SYSTEM = AreaSystem
    SI = AreaUnit.SQUARE_METER
    METRIC_SYSTEMS = frozenset({AreaSystem.METRIC})
    IMPERIAL_SYSTEMS = frozenset({AreaSystem.IMPERIAL})
