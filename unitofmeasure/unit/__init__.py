"""Type-safe physical quantities bound to explicit units.

This package provides Length, Area, Volume and Velocity quantities. A
quantity keeps its magnitude in the unit it was created with and converts on
demand, so mixing meters and feet, or liters and gallons, can never go
unnoticed.

Architecture:
    The unit system is organized into specialized modules:

    - unit_base: UnitEnum and the generic Quantity (conversion, rescaling,
      normalization, arithmetic, comparison, parsing and formatting)
    - unit_length: Length units (metric, imperial, astronomical, nautical)
    - unit_area: Area units (metric, imperial)
    - unit_volume: Volume units (metric/imperial solid and liquid, special)
    - unit_velocity: Velocity units (metric, imperial, astronomical, nautical)
    - unit_algebra: Operators between kinds (Length * Length -> Area, ...)

Key Features:
    - Type Safety: adding a Length to a Volume raises TypeError
    - Left Operand Scale: ``a + b`` is expressed in the unit of ``a``
    - Normalization: ``1034 mm`` becomes ``1.034 m``, within the same system
    - Dimensional Algebra: system-aware results (feet in, square feet out)
    - Text: ``str``, ``format`` with long names, ``parse``/``try_parse``

Example:
    >>> from datetime import timedelta
    >>> from unitofmeasure.unit import Length, LengthUnit
    >>>
    >>> side = Length(1.45, LengthUnit.METER)
    >>> area = side * side            # Area in m²
    >>> volume = side * area          # Volume in m³
    >>>
    >>> distance = Length(15.3, LengthUnit.KILOMETER)
    >>> speed = distance / timedelta(minutes=13, seconds=25)  # km/h
"""

from .unit_area import Area, AreaSystem, AreaUnit
from .unit_base import Quantity, UnitEnum, convert, register_operation
from .unit_length import Length, LengthSystem, LengthUnit
from .unit_velocity import Velocity, VelocitySystem, VelocityUnit
from .unit_volume import Volume, VolumeSystem, VolumeUnit

# Importing unit_algebra registers the cross-kind operators
from .unit_algebra import (
    divide_area_by_length,
    divide_length_by_time,
    divide_volume_by_length,
    multiply_area_length,
    multiply_length_area,
    multiply_lengths,
    multiply_velocity_time,
)

__all__ = [
    # Base classes
    "Quantity",
    "UnitEnum",
    "convert",
    "register_operation",
    # Length
    "Length",
    "LengthUnit",
    "LengthSystem",
    # Area
    "Area",
    "AreaUnit",
    "AreaSystem",
    # Volume
    "Volume",
    "VolumeUnit",
    "VolumeSystem",
    # Velocity
    "Velocity",
    "VelocityUnit",
    "VelocitySystem",
    # Dimensional algebra
    "multiply_lengths",
    "multiply_area_length",
    "multiply_length_area",
    "divide_area_by_length",
    "divide_volume_by_length",
    "divide_length_by_time",
    "multiply_velocity_time",
]
