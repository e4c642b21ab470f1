"""Velocity unit definitions.

This module provides velocity and speed units. All factors refer to the SI
base unit meters per second (m/s), with units commonly used in road,
aviation, weather and maritime applications.

Measurement systems:
    - Metric: m/s and km/h are the normalization candidates, in that order,
      so normalization prefers km/h whenever the value stays at least one.
      Slower units (mm/h, mm/min, cm/s, ...) are available for conversion.
    - Imperial: mph is the only normalization candidate.
    - Astronomical: multiples of the speed of sound (Mach) and of light.
    - Nautical: knots.

Astronomical and nautical velocities are never normalized.

Classes:
    VelocitySystem: Measurement systems for velocities.
    VelocityUnit: Units of velocity.
    Velocity: Velocity quantity, base unit meters per second.

Example:
    >>> rain = Velocity(0.042, VelocityUnit.INCH_PER_HOUR)
    >>> rain.unit = VelocityUnit.MILLIMETER_PER_HOUR
    >>> print(f"{rain:.4f}")  # "1.0668 mm/h"
"""

from __future__ import annotations

from enum import Enum

from .unit_base import Quantity, UnitEnum

MINUTE = 60.0
HOUR = 3_600.0
MACH_1 = 343.2  # m/s, dry air at 20 °C
LIGHT_SPEED = 299_792_458.0  # m/s


class VelocitySystem(Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    ASTRONOMICAL = "astronomical"
    NAUTICAL = "nautical"


class VelocityUnit(UnitEnum):
    """Units of velocity. Factors are meters per second per unit."""

    # Metric common
    METER_PER_SECOND = ("m/s", "meters per second", 1.0, VelocitySystem.METRIC, True)
    KILOMETER_PER_HOUR = ("km/h", "kilometers per hour", 1e3 / HOUR, VelocitySystem.METRIC, True)
    # Metric rare
    MILLIMETER_PER_MINUTE = ("mm/min", "millimeters per minute", 1e-3 / MINUTE, VelocitySystem.METRIC, False)
    MILLIMETER_PER_SECOND = ("mm/s", "millimeters per second", 1e-3, VelocitySystem.METRIC, False)
    CENTIMETER_PER_MINUTE = ("cm/min", "centimeters per minute", 1e-2 / MINUTE, VelocitySystem.METRIC, False)
    CENTIMETER_PER_SECOND = ("cm/s", "centimeters per second", 1e-2, VelocitySystem.METRIC, False)
    METER_PER_MINUTE = ("m/min", "meters per minute", 1.0 / MINUTE, VelocitySystem.METRIC, False)
    MILLIMETER_PER_HOUR = ("mm/h", "millimeters per hour", 1e-3 / HOUR, VelocitySystem.METRIC, False)

    # Imperial common
    MILE_PER_HOUR = ("mph", "miles per hour", 1609.344 / HOUR, VelocitySystem.IMPERIAL, True)
    # Imperial rare
    INCH_PER_SECOND = ("in/s", "inches per second", 0.0254, VelocitySystem.IMPERIAL, False)
    FOOT_PER_HOUR = ("ft/h", "foot per hour", 0.3048 / HOUR, VelocitySystem.IMPERIAL, False)
    FOOT_PER_MINUTE = ("ft/min", "foot per minute", 0.3048 / MINUTE, VelocitySystem.IMPERIAL, False)
    FOOT_PER_SECOND = ("ft/s", "foot per second", 0.3048, VelocitySystem.IMPERIAL, False)
    MILE_PER_MINUTE = ("mi/min", "miles per minute", 1609.344 / MINUTE, VelocitySystem.IMPERIAL, False)
    INCH_PER_HOUR = ("in/h", "inches per hour", 0.0254 / HOUR, VelocitySystem.IMPERIAL, False)

    # Astronomical
    SPEED_OF_SOUND = ("Ma", "times the speed of sound", MACH_1, VelocitySystem.ASTRONOMICAL, False)
    SPEED_OF_LIGHT = ("c", "times the speed of light", LIGHT_SPEED, VelocitySystem.ASTRONOMICAL, False)

    # Nautical
    KNOT = ("kn", "knots", 1852.0 / HOUR, VelocitySystem.NAUTICAL, False)


class Velocity(Quantity):
    """Velocity or speed quantity.

    Velocities are obtained from a length over a ``timedelta`` and turn back
    into a length when multiplied by one; the units chosen follow the
    measurement system of the operand.

    Attributes:
        SI (VelocityUnit): ``VelocityUnit.METER_PER_SECOND``, the base and default unit.

    Example:
        >>> speed = Velocity(10)
        >>> speed.normalize()
        >>> print(f"{speed:.1f}")  # "36.0 km/h"
    """

    __slots__ = ()

    UNIT = VelocityUnit
    SYSTEM = VelocitySystem
    SI = VelocityUnit.METER_PER_SECOND
    METRIC_SYSTEMS = frozenset({VelocitySystem.METRIC})
    IMPERIAL_SYSTEMS = frozenset({VelocitySystem.IMPERIAL})

    @property
    def is_astronomical(self) -> bool:
        return self.system is VelocitySystem.ASTRONOMICAL

    @property
    def is_nautical(self) -> bool:
        return self.system is VelocitySystem.NAUTICAL
