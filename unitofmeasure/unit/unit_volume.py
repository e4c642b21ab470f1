"""Volume unit definitions.

Volume has the richest set of measurement systems: metric and imperial are
each split into a solid family (cubic lengths) and a liquid family (liters,
gallons), and a special family holds the oil barrel. All factors refer to
the cubic meter.

Only solid volumes can be divided by a length to obtain an area; see
:mod:`unitofmeasure.unit.unit_algebra`.

Classes:
    VolumeSystem: Measurement systems for volumes.
    VolumeUnit: Units of volume.
    Volume: Volume quantity, base unit cubic meter.

Example:
    >>> tank = Volume(1500, VolumeUnit.MILLILITER)
    >>> tank.normalize()
    >>> print(tank)  # "1.5 l"
    >>> tank.is_liquid
    True
"""

from __future__ import annotations

from enum import Enum

from .unit_base import Quantity, UnitEnum


class VolumeSystem(Enum):
    METRIC_SOLID = "metric solid"
    METRIC_LIQUID = "metric liquid"
    IMPERIAL_SOLID = "imperial solid"
    IMPERIAL_LIQUID = "imperial liquid"
    SPECIAL = "special"


class VolumeUnit(UnitEnum):
    """Units of volume. Factors are cubic meters per unit."""

    # Metric solid common
    CUBIC_FEMTOMETER = ("fm³", "cubic femtometers", 1e-45, VolumeSystem.METRIC_SOLID, True)
    CUBIC_PICOMETER = ("pm³", "cubic picometers", 1e-36, VolumeSystem.METRIC_SOLID, True)
    CUBIC_NANOMETER = ("nm³", "cubic nanometers", 1e-27, VolumeSystem.METRIC_SOLID, True)
    CUBIC_MICROMETER = ("µm³", "cubic micrometers", 1e-18, VolumeSystem.METRIC_SOLID, True)
    CUBIC_MILLIMETER = ("mm³", "cubic millimeters", 1e-9, VolumeSystem.METRIC_SOLID, True)
    CUBIC_CENTIMETER = ("cm³", "cubic centimeters", 1e-6, VolumeSystem.METRIC_SOLID, True)
    CUBIC_METER = ("m³", "cubic meters", 1.0, VolumeSystem.METRIC_SOLID, True)
    CUBIC_KILOMETER = ("km³", "cubic kilometers", 1e9, VolumeSystem.METRIC_SOLID, True)
    # Metric solid rare
    CUBIC_DECIMETER = ("dm³", "cubic decimeters", 1e-3, VolumeSystem.METRIC_SOLID, False)
    CUBIC_DECAMETER = ("dam³", "cubic decameters", 1e3, VolumeSystem.METRIC_SOLID, False)
    CUBIC_HECTOMETER = ("hm³", "cubic hectometers", 1e6, VolumeSystem.METRIC_SOLID, False)

    # Metric liquid common
    MICROLITER = ("µl", "microliters", 1e-9, VolumeSystem.METRIC_LIQUID, True)
    MILLILITER = ("ml", "milliliters", 1e-6, VolumeSystem.METRIC_LIQUID, True)
    CENTILITER = ("cl", "centiliters", 1e-5, VolumeSystem.METRIC_LIQUID, True)
    DECILITER = ("dl", "deciliters", 1e-4, VolumeSystem.METRIC_LIQUID, True)
    LITER = ("l", "liters", 1e-3, VolumeSystem.METRIC_LIQUID, True)
    HECTOLITER = ("hl", "hectoliters", 1e-1, VolumeSystem.METRIC_LIQUID, True)
    # Metric liquid rare
    DECALITER = ("dal", "decaliters", 1e-2, VolumeSystem.METRIC_LIQUID, False)
    KILOLITER = ("kl", "kiloliters", 1.0, VolumeSystem.METRIC_LIQUID, False)
    MEGALITER = ("Ml", "megaliters", 1e3, VolumeSystem.METRIC_LIQUID, False)
    GIGALITER = ("Gl", "gigaliters", 1e6, VolumeSystem.METRIC_LIQUID, False)

    # Imperial solid
    CUBIC_MICROINCH = ("µin³", "cubic microinches", 1.6387064e-23, VolumeSystem.IMPERIAL_SOLID, True)
    CUBIC_INCH = ("in³", "cubic inches", 1.6387064e-5, VolumeSystem.IMPERIAL_SOLID, True)
    CUBIC_FOOT = ("ft³", "cubic foot", 0.028316846592, VolumeSystem.IMPERIAL_SOLID, True)
    CUBIC_YARD = ("yd³", "cubic yards", 0.764554857984, VolumeSystem.IMPERIAL_SOLID, True)

    # Imperial liquid (UK)
    FLUID_OUNCE = ("fl oz", "fluid ounces", 2.84130625e-5, VolumeSystem.IMPERIAL_LIQUID, True)
    PINT = ("pt", "pints", 5.6826125e-4, VolumeSystem.IMPERIAL_LIQUID, True)
    QUART = ("qt", "quarts", 1.1365225e-3, VolumeSystem.IMPERIAL_LIQUID, True)
    GALLON = ("gal", "gallons", 4.54609e-3, VolumeSystem.IMPERIAL_LIQUID, True)

    # Special
    BARREL = ("bbl", "barrels", 0.158987294928, VolumeSystem.SPECIAL, False)


class Volume(Quantity):
    """Volume quantity.

    A zero volume in either metric family normalizes to cubic meters.

    Attributes:
        SI (VolumeUnit): ``VolumeUnit.CUBIC_METER``, the base and default unit.
    """

    __slots__ = ()

    UNIT = VolumeUnit
    SYSTEM = VolumeSystem
    SI = VolumeUnit.CUBIC_METER
    METRIC_SYSTEMS = frozenset({VolumeSystem.METRIC_SOLID, VolumeSystem.METRIC_LIQUID})
    IMPERIAL_SYSTEMS = frozenset({VolumeSystem.IMPERIAL_SOLID, VolumeSystem.IMPERIAL_LIQUID})

    @property
    def is_solid(self) -> bool:
        return self.system in (VolumeSystem.METRIC_SOLID, VolumeSystem.IMPERIAL_SOLID)

    @property
    def is_liquid(self) -> bool:
        return self.system in (VolumeSystem.METRIC_LIQUID, VolumeSystem.IMPERIAL_LIQUID)

    @property
    def is_metric_solid(self) -> bool:
        return self.system is VolumeSystem.METRIC_SOLID

    @property
    def is_metric_liquid(self) -> bool:
        return self.system is VolumeSystem.METRIC_LIQUID

    @property
    def is_imperial_solid(self) -> bool:
        return self.system is VolumeSystem.IMPERIAL_SOLID

    @property
    def is_imperial_liquid(self) -> bool:
        return self.system is VolumeSystem.IMPERIAL_LIQUID
