"""
Unit of Measure
Strongly-typed Length, Area, Volume and Velocity quantities.
"""

import logging

from .errors import UnitOfMeasureError, UnitParseError, UnsupportedOperationError
from .unit import (
    Area,
    AreaSystem,
    AreaUnit,
    Length,
    LengthSystem,
    LengthUnit,
    Quantity,
    UnitEnum,
    Velocity,
    VelocitySystem,
    VelocityUnit,
    Volume,
    VolumeSystem,
    VolumeUnit,
    convert,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Quantity",
    "UnitEnum",
    "convert",
    "Length",
    "LengthUnit",
    "LengthSystem",
    "Area",
    "AreaUnit",
    "AreaSystem",
    "Volume",
    "VolumeUnit",
    "VolumeSystem",
    "Velocity",
    "VelocityUnit",
    "VelocitySystem",
    "UnitOfMeasureError",
    "UnitParseError",
    "UnsupportedOperationError",
]
