"""Dimensional algebra between quantity kinds.

This module implements the operators combining quantities of different
kinds. Every rule picks its working units from the measurement system of
the quantity that governs it, so a metric input yields a metric result and
an imperial input an imperial one:

    ==========================  ==================  ===================
    Operation                   Metric              Imperial
    ==========================  ==================  ===================
    Length * Length -> Area     m * m = m²          ft * ft = ft²
    Area * Length -> Volume     m² * m = m³         ft² * ft = ft³
    Length * Area -> Volume     delegates to Area * Length
    Area / Length -> Length     m² / m = m          ft² / ft = ft
    Volume / Length -> Area     m³ / m = m²         ft³ / ft = ft²
    Length / timedelta          km/h or m/s         mph
    Velocity * timedelta        km or m             mi
    ==========================  ==================  ===================

Lengths outside the imperial system multiply in meters. Astronomical lengths
divided by time give multiples of the speed of light and nautical lengths
give knots; the reverse holds for velocities times time. Volume divided by
length is only defined for the solid families. Any system without a rule
raises :class:`~unitofmeasure.errors.UnsupportedOperationError`.

The functions are registered with :func:`register_operation` at import, which
is what makes the ``*`` and ``/`` operators of the quantity classes dispatch
to them.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from ..errors import UnsupportedOperationError
from .unit_area import Area, AreaSystem, AreaUnit
from .unit_base import register_operation
from .unit_length import Length, LengthSystem, LengthUnit
from .unit_velocity import Velocity, VelocitySystem, VelocityUnit
from .unit_volume import Volume, VolumeSystem, VolumeUnit

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3_600.0


def _unsupported(operation: str, system) -> UnsupportedOperationError:
    logger.debug("No rule for %s in system %s", operation, system.name)
    return UnsupportedOperationError(operation, system)


@register_operation("mul", Length, Length)
def multiply_lengths(lhs: Length, rhs: Length) -> Area:
    """Multiply two lengths into an area.

    Imperial lengths multiply in feet giving square feet; every other system
    multiplies in meters giving square meters.
    """
    if lhs.system is LengthSystem.IMPERIAL:
        return Area(lhs.to(LengthUnit.FOOT) * rhs.to(LengthUnit.FOOT), AreaUnit.SQUARE_FOOT)
    return Area(lhs.to(Length.SI) * rhs.to(Length.SI), Area.SI)


@register_operation("mul", Area, Length)
def multiply_area_length(lhs: Area, rhs: Length) -> Volume:
    """Multiply an area by a length into a solid volume.

    Raises:
        UnsupportedOperationError: If the area's system has no rule.
    """
    if lhs.system is AreaSystem.METRIC:
        return Volume(lhs.to(Area.SI) * rhs.to(Length.SI), Volume.SI)
    if lhs.system is AreaSystem.IMPERIAL:
        return Volume(lhs.to(AreaUnit.SQUARE_FOOT) * rhs.to(LengthUnit.FOOT), VolumeUnit.CUBIC_FOOT)
    raise _unsupported("Area * Length", lhs.system)


@register_operation("mul", Length, Area)
def multiply_length_area(lhs: Length, rhs: Area) -> Volume:
    """Multiply a length by an area; the area's system governs the result."""
    return multiply_area_length(rhs, lhs)


@register_operation("truediv", Area, Length)
def divide_area_by_length(lhs: Area, rhs: Length) -> Length:
    """Divide an area by a length.

    Raises:
        UnsupportedOperationError: If the area's system has no rule.
    """
    if lhs.system is AreaSystem.METRIC:
        return Length(lhs.to(Area.SI) / rhs.to(Length.SI), Length.SI)
    if lhs.system is AreaSystem.IMPERIAL:
        return Length(lhs.to(AreaUnit.SQUARE_FOOT) / rhs.to(LengthUnit.FOOT), LengthUnit.FOOT)
    raise _unsupported("Area / Length", lhs.system)


@register_operation("truediv", Volume, Length)
def divide_volume_by_length(lhs: Volume, rhs: Length) -> Area:
    """Divide a solid volume by a length.

    Raises:
        UnsupportedOperationError: For liquid and special volumes, where a
            volume per length has no meaning.
    """
    if lhs.system is VolumeSystem.METRIC_SOLID:
        return Area(lhs.to(VolumeUnit.CUBIC_METER) / rhs.to(LengthUnit.METER), AreaUnit.SQUARE_METER)
    if lhs.system is VolumeSystem.IMPERIAL_SOLID:
        return Area(lhs.to(VolumeUnit.CUBIC_FOOT) / rhs.to(LengthUnit.FOOT), AreaUnit.SQUARE_FOOT)
    raise _unsupported("Volume / Length", lhs.system)


@register_operation("truediv", Length, timedelta)
def divide_length_by_time(lhs: Length, rhs: timedelta) -> Velocity:
    """Average velocity of covering a length in an elapsed time.

    Metric kilometers give km/h and any other metric unit m/s. Imperial
    lengths give mph, astronomical lengths multiples of the speed of light
    and nautical lengths knots.

    Raises:
        ZeroDivisionError: If the elapsed time is zero.
        UnsupportedOperationError: If the length's system has no rule.
    """
    seconds = rhs.total_seconds()
    hours = seconds / SECONDS_PER_HOUR
    system = lhs.system
    if system is LengthSystem.METRIC:
        if lhs.unit is LengthUnit.KILOMETER:
            return Velocity(lhs.magnitude / hours, VelocityUnit.KILOMETER_PER_HOUR)
        return Velocity(lhs.to(LengthUnit.METER) / seconds, VelocityUnit.METER_PER_SECOND)
    if system is LengthSystem.IMPERIAL:
        return Velocity(lhs.to(LengthUnit.MILE) / hours, VelocityUnit.MILE_PER_HOUR)
    if system is LengthSystem.ASTRONOMICAL:
        return Velocity(lhs.to(LengthUnit.LIGHT_SECOND) / seconds, VelocityUnit.SPEED_OF_LIGHT)
    if system is LengthSystem.NAUTICAL:
        return Velocity(lhs.to(LengthUnit.NAUTICAL_MILE) / hours, VelocityUnit.KNOT)
    raise _unsupported("Length / timedelta", lhs.system)


@register_operation("mul", Velocity, timedelta)
def multiply_velocity_time(lhs: Velocity, rhs: timedelta) -> Length:
    """Distance covered at a velocity during an elapsed time.

    The inverse of :func:`divide_length_by_time`: km/h gives kilometers and
    any other metric unit meters, imperial velocities give miles,
    astronomical velocities light-seconds and nautical velocities nautical
    miles. ``timedelta * velocity`` resolves to the same rule.

    Raises:
        UnsupportedOperationError: If the velocity's system has no rule.
    """
    seconds = rhs.total_seconds()
    hours = seconds / SECONDS_PER_HOUR
    system = lhs.system
    if system is VelocitySystem.METRIC:
        if lhs.unit is VelocityUnit.KILOMETER_PER_HOUR:
            return Length(lhs.magnitude * hours, LengthUnit.KILOMETER)
        return Length(lhs.to(VelocityUnit.METER_PER_SECOND) * seconds, LengthUnit.METER)
    if system is VelocitySystem.IMPERIAL:
        return Length(lhs.to(VelocityUnit.MILE_PER_HOUR) * hours, LengthUnit.MILE)
    if system is VelocitySystem.ASTRONOMICAL:
        return Length(lhs.to(VelocityUnit.SPEED_OF_LIGHT) * seconds, LengthUnit.LIGHT_SECOND)
    if system is VelocitySystem.NAUTICAL:
        return Length(lhs.to(VelocityUnit.KNOT) * hours, LengthUnit.NAUTICAL_MILE)
    raise _unsupported("Velocity * timedelta", lhs.system)
