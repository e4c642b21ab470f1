"""Base unit system foundation for type-safe physical quantities.

This module provides the two building blocks every quantity kind is made of:
the :class:`UnitEnum` base for per-kind unit enumerations and the generic
:class:`Quantity` value type. A quantity binds a float magnitude to one unit
of its kind; the magnitude is always interpreted in that unit, never in an
implicit base unit.

The unit system is organized around "kinds" (Length, Area, Volume, Velocity).
Each kind class declares its unit enumeration, its measurement system
enumeration and its base unit. ``Quantity.__init_subclass__`` turns those
declarations into lookup tables once, at class creation:

- ROOT Class: the class declaring ``UNIT`` is the root of its kind; subclasses
  of a kind share the root and interoperate with it.
- Symbol Table: short unit symbol -> unit, used by :meth:`Quantity.parse`.
- Standard Candidates: system -> ordered tuple of units used by
  :meth:`Quantity.normalize`.

Every unit carries its own conversion factor and system tag, so
classification never depends on the order in which units are declared.
Declaration order only matters for normalization, which scans a system's
standard units from the last declared to the first.

Cross-kind operators (``Length * Length -> Area`` and friends) live in
:mod:`unitofmeasure.unit.unit_algebra` and are attached through
:func:`register_operation`.

Classes:
    UnitEnum: Base enumeration for the units of one kind.
    Quantity: Generic magnitude-plus-unit value type.

Functions:
    register_operation: Decorator registering a cross-kind operator.
    convert: Vectorised conversion of raw magnitudes between two units.

Example:
    >>> class Length(Quantity):
    ...     UNIT = LengthUnit       # members carry symbol, name, factor, system
    ...     SYSTEM = LengthSystem
    ...     SI = LengthUnit.METER
    >>> Length(1034, LengthUnit.MILLIMETER).to(LengthUnit.METER)
    1.034
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from math import isclose, isfinite
from typing import Any, ClassVar

import numpy as np

from ..config import ABS_TOL, ARRAY_TYPE, BASE_TYPE, LONG_FORMAT_FLAG, REL_TOL
from ..errors import UnitParseError

logger = logging.getLogger(__name__)

_OPERATIONS: dict[tuple[str, type, type], Callable[[Any, Any], Any]] = {}


class UnitEnum(Enum):
    """Base class for the unit enumeration of a quantity kind.

    Each member value is a tuple ``(symbol, long_name, factor, system,
    standard)`` which is unpacked into attributes of the member.

    Attributes:
        symbol (str): Short unit symbol, e.g. ``"km"``. Unique within a kind.
        long_name (str): Long unit name, e.g. ``"kilometers"``.
        factor (float): Number of base units in one of this unit.
        system (Enum): Measurement system the unit belongs to.
        standard (bool): Whether normalization may select this unit.
    """

    def __init__(
        self, symbol: str, long_name: str, factor: float, system: Enum, standard: bool
    ):
        self.symbol = symbol
        self.long_name = long_name
        self.factor = factor
        self.system = system
        self.standard = standard

    @property
    def ordinal(self) -> int:
        """Position of the unit in declaration order."""
        return type(self)._member_names_.index(self.name)


def register_operation(
    op: str, left: type, right: type
) -> Callable[[Callable[[Any, Any], Any]], Callable[[Any, Any], Any]]:
    """Register a function as the implementation of ``left <op> right``.

    Args:
        op: Operator name, ``"mul"`` or ``"truediv"``.
        left: Root quantity class of the left operand.
        right: Type of the right operand (a quantity root or any other type).

    Returns:
        Decorator storing the function and returning it unchanged.

    Raises:
        ValueError: If an implementation is already registered for the key.
    """

    def decorator(func: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
        key = (op, left, right)
        if key in _OPERATIONS:
            msg = f"Operation {op} already registered for {left.__name__}, {right.__name__}"
            raise ValueError(msg)
        _OPERATIONS[key] = func
        return func

    return decorator


def _lookup_operation(op: str, left: type[Quantity], right: object):
    for klass in type(right).__mro__:
        func = _OPERATIONS.get((op, left.ROOT, klass))
        if func is not None:
            return func
    return None


def convert(values: ARRAY_TYPE, source: UnitEnum, target: UnitEnum) -> ARRAY_TYPE:
    """Convert raw magnitudes from one unit to another of the same kind.

    Args:
        values: Scalar or NumPy array of magnitudes expressed in ``source``.
        source: Unit the values are expressed in.
        target: Unit to express the values in.

    Returns:
        The values expressed in ``target``. Returned untouched when both
        units are the same, otherwise as a NumPy float or array.

    Raises:
        TypeError: If the units belong to different kinds.
    """
    if type(source) is not type(target):
        msg = f"Cannot convert {type(source).__name__} to {type(target).__name__}"
        raise TypeError(msg)
    if source is target:
        return values
    return np.asarray(values, dtype=float) * (source.factor / target.factor)


class Quantity:
    """Base class for a magnitude bound to a unit of one kind.

    A concrete kind subclasses Quantity and declares the class variables
    below. Instances are plain values: copies are independent and the only
    in-place changes are unit assignment (which rescales the magnitude) and
    :meth:`normalize`. Because of that mutability instances are unhashable.

    Attributes:
        ROOT (ClassVar[type[Quantity]]): Root class of the kind.
        UNIT (ClassVar[type[UnitEnum]]): Unit enumeration of the kind.
        SYSTEM (ClassVar[type[Enum]]): Measurement system enumeration.
        SI (ClassVar[UnitEnum]): Base unit, factor 1 and default unit.
        METRIC_SYSTEMS (ClassVar[frozenset]): Systems reported as metric.
        IMPERIAL_SYSTEMS (ClassVar[frozenset]): Systems reported as imperial.
    """

    __slots__ = ("_magnitude", "_unit")
    __array_priority__ = 1000
    __hash__ = None

    ROOT: ClassVar[type[Quantity]]
    UNIT: ClassVar[type[UnitEnum]]
    SYSTEM: ClassVar[type[Enum]]
    SI: ClassVar[UnitEnum]
    METRIC_SYSTEMS: ClassVar[frozenset] = frozenset()
    IMPERIAL_SYSTEMS: ClassVar[frozenset] = frozenset()

    _SYMBOLS: ClassVar[dict[str, UnitEnum]]
    _STANDARD: ClassVar[dict[Enum, tuple[UnitEnum, ...]]]

    def __init_subclass__(cls, **kwargs):
        """Set the ROOT class and build the unit tables of a new kind.

        A class declaring ``UNIT`` becomes the root of its kind and gets its
        symbol and normalization tables built here. Any other subclass takes
        the ROOT of the first ancestor declaring ``UNIT``.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.

        Raises:
            TypeError: If the unit declarations of the kind are inconsistent.
        """
        super().__init_subclass__(**kwargs)
        if "UNIT" in cls.__dict__:
            cls.ROOT = cls
            cls._build_tables()
            return

        for base in cls.mro()[1:]:
            if "UNIT" in base.__dict__:
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _build_tables(cls):
        name = cls.__name__
        if len(cls.UNIT.__members__) != len(cls.UNIT):
            msg = f"{name}: units with identical definitions are aliased"
            raise TypeError(msg)

        symbols: dict[str, UnitEnum] = {}
        standard: dict[Enum, list[UnitEnum]] = {system: [] for system in cls.SYSTEM}
        for unit in cls.UNIT:
            if unit.system not in standard:
                msg = f"{name}: unit {unit.name} has foreign system {unit.system!r}"
                raise TypeError(msg)
            if not (isfinite(unit.factor) and unit.factor > 0):
                msg = f"{name}: unit {unit.name} has invalid factor {unit.factor!r}"
                raise TypeError(msg)
            if unit.symbol in symbols:
                msg = f"{name}: symbol {unit.symbol!r} used by {symbols[unit.symbol].name} and {unit.name}"
                raise TypeError(msg)
            symbols[unit.symbol] = unit
            if unit.standard:
                standard[unit.system].append(unit)

        if cls.SI.factor != 1.0:
            msg = f"{name}: base unit {cls.SI.name} must have factor 1"
            raise TypeError(msg)

        cls._SYMBOLS = symbols
        cls._STANDARD = {system: tuple(units) for system, units in standard.items()}

    @classmethod
    def _check_same_root(cls, other: object):
        """Check that another object is a quantity of the same kind.

        Args:
            other: The object to check compatibility with.

        Raises:
            TypeError: If ``other`` is not a quantity of this kind.
        """
        if not isinstance(other, Quantity) or cls.ROOT is not type(other).ROOT:
            msg = f"Object of {cls.ROOT.__name__} expected, got {type(other).__name__}"
            raise TypeError(msg)

    @classmethod
    def _check_unit(cls, unit: object):
        if not isinstance(unit, cls.UNIT):
            msg = f"{cls.UNIT.__name__} expected, got {unit!r}"
            raise TypeError(msg)

    def __init__(self, magnitude: BASE_TYPE | Quantity = 0.0, unit: UnitEnum | None = None):
        """Create a quantity.

        Args:
            magnitude: Numeric value expressed in ``unit``, or another
                quantity of the same kind to copy.
            unit: Unit of the magnitude. Defaults to the kind's base unit, or
                to the copied quantity's unit.

        Raises:
            TypeError: If the unit is not a unit of this kind, or the copied
                quantity is of another kind.
        """
        if isinstance(magnitude, Quantity):
            self._check_same_root(magnitude)
            if unit is None:
                unit = magnitude.unit
            magnitude = magnitude.to(unit)
        if unit is None:
            unit = self.SI
        self._check_unit(unit)
        self._magnitude = float(magnitude)
        self._unit = unit

    # -------------------------------- Conversion --------------------------------
    @property
    def magnitude(self) -> float:
        """Numeric value, meaningful only together with :attr:`unit`."""
        return self._magnitude

    @property
    def unit(self) -> UnitEnum:
        """Current unit. Assigning a new unit rescales the magnitude in place."""
        return self._unit

    @unit.setter
    def unit(self, value: UnitEnum):
        self._check_unit(value)
        if value is not self._unit:
            logger.debug("Rescaling %s from %s to %s", type(self).__name__, self._unit.symbol, value.symbol)
            self._magnitude *= self._unit.factor / value.factor
            self._unit = value

    def to(self, unit: UnitEnum) -> float:
        """Express the magnitude in another unit of the same kind.

        Args:
            unit: Target unit.

        Returns:
            float: The magnitude in ``unit``. The stored magnitude is returned
            untouched when ``unit`` is the current unit.

        Raises:
            TypeError: If ``unit`` belongs to another kind.
        """
        self._check_unit(unit)
        if unit is self._unit:
            return self._magnitude
        return self._magnitude * (self._unit.factor / unit.factor)

    def with_unit(self, unit: UnitEnum) -> Quantity:
        """Return a new quantity holding the same amount expressed in ``unit``."""
        return type(self)(self.to(unit), unit)

    def copy(self) -> Quantity:
        """Return an independent copy."""
        return type(self)(self._magnitude, self._unit)

    def __copy__(self) -> Quantity:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Quantity:
        return self.copy()

    # -------------------------------- Measurement System --------------------------------
    @property
    def system(self) -> Enum:
        """Measurement system of the current unit."""
        return self._unit.system

    @property
    def is_metric(self) -> bool:
        return self._unit.system in self.METRIC_SYSTEMS

    @property
    def is_imperial(self) -> bool:
        return self._unit.system in self.IMPERIAL_SYSTEMS

    @classmethod
    def units_in(cls, system: Enum) -> tuple[UnitEnum, ...]:
        """Return every unit of a measurement system in declaration order."""
        return tuple(unit for unit in cls.UNIT if unit.system is system)

    def normalize(self) -> None:
        """Switch to the most natural unit of the current measurement system.

        Only the standard units of the current system are candidates. They
        are scanned from the last declared to the first, and the first one
        expressing the magnitude with an absolute value of at least one is
        selected, e.g. ``1034 mm -> 1.034 m`` or ``34.5 in -> 2.875 ft``.

        A system without standard units is never changed. A zero magnitude
        in a metric system is reset to the base unit; zero in any other
        system is left as is. When no candidate qualifies the quantity stays
        unchanged.

        Each candidate is tested on the exact magnitude the unit setter would
        store, and the scan repeats from the new unit until it settles, so a
        second call never changes the result.
        """
        candidates = self._STANDARD[self._unit.system]
        if not candidates:
            return
        if self._magnitude == 0:
            if self.is_metric:
                self._unit = self.SI
            return

        while True:
            f = self._unit.factor
            for candidate in reversed(candidates):
                if abs(self._magnitude * (f / candidate.factor)) >= 1:
                    break
            else:
                return
            if candidate is self._unit:
                return
            logger.debug(
                "Normalizing %r %s to %s", self._magnitude, self._unit.symbol, candidate.symbol
            )
            self.unit = candidate

    def normalized(self) -> Quantity:
        """Return a normalized copy, leaving this quantity untouched."""
        result = self.copy()
        result.normalize()
        return result

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: Quantity) -> Quantity:
        """Add a quantity of the same kind.

        Args:
            other: Quantity to add, converted into this quantity's unit.

        Returns:
            Quantity: Sum expressed in the left operand's unit.

        Raises:
            TypeError: If ``other`` is not a quantity of this kind.
        """
        self._check_same_root(other)
        return type(self)(self._magnitude + other.to(self._unit), self._unit)

    def __sub__(self, other: Quantity) -> Quantity:
        """Subtract a quantity of the same kind.

        Args:
            other: Quantity to subtract, converted into this quantity's unit.

        Returns:
            Quantity: Difference expressed in the left operand's unit.

        Raises:
            TypeError: If ``other`` is not a quantity of this kind.
        """
        self._check_same_root(other)
        return type(self)(self._magnitude - other.to(self._unit), self._unit)

    def __neg__(self) -> Quantity:
        return type(self)(-self._magnitude, self._unit)

    def __pos__(self) -> Quantity:
        return self.copy()

    def __abs__(self) -> Quantity:
        return type(self)(abs(self._magnitude), self._unit)

    def __mul__(self, other: Any) -> Any:
        """Multiply by a scalar, or by another operand with a registered rule.

        Args:
            other: Numeric scalar, or an operand such as another quantity or a
                ``timedelta`` for which a cross-kind rule is registered.

        Returns:
            The scaled quantity, or the cross-kind result.

        Raises:
            UnsupportedOperationError: If the cross-kind rule has no path for
                the operand's measurement system.
        """
        operation = _lookup_operation("mul", type(self), other)
        if operation is not None:
            return operation(self, other)
        if isinstance(other, BASE_TYPE):
            return type(self)(self._magnitude * other, self._unit)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        """Right-side multiplication by a scalar or a registered operand.

        Args:
            other: Numeric scalar or registered operand on the left side.

        Returns:
            The scaled quantity, or the cross-kind result.
        """
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        """Divide by a scalar, or by another operand with a registered rule.

        Args:
            other: Numeric scalar, or an operand for which a cross-kind
                division rule is registered.

        Returns:
            The scaled quantity, or the cross-kind result.

        Raises:
            UnsupportedOperationError: If the cross-kind rule has no path for
                the operand's measurement system.
        """
        operation = _lookup_operation("truediv", type(self), other)
        if operation is not None:
            return operation(self, other)
        if isinstance(other, BASE_TYPE):
            return type(self)(self._magnitude / other, self._unit)
        return NotImplemented

    # -------------------------------- Comparison --------------------------------
    def __eq__(self, other: object) -> bool:
        """Compare after converting ``other`` into this quantity's unit.

        Quantities of another kind and non-quantities are never equal.
        """
        if not isinstance(other, Quantity) or type(other).ROOT is not self.ROOT:
            return NotImplemented
        return self._magnitude == other.to(self._unit)

    def __lt__(self, other: Quantity) -> bool:
        self._check_same_root(other)
        return self._magnitude < other.to(self._unit)

    def __le__(self, other: Quantity) -> bool:
        self._check_same_root(other)
        return self._magnitude <= other.to(self._unit)

    def __gt__(self, other: Quantity) -> bool:
        self._check_same_root(other)
        return self._magnitude > other.to(self._unit)

    def __ge__(self, other: Quantity) -> bool:
        self._check_same_root(other)
        return self._magnitude >= other.to(self._unit)

    def compare_to(self, other: Quantity) -> int:
        """Three-way comparison against a quantity of the same kind.

        Args:
            other: Quantity to compare with, converted into this unit.

        Returns:
            int: -1, 0 or 1 as this quantity is smaller, equal or larger.

        Raises:
            TypeError: If ``other`` is not a quantity of this kind.
        """
        self._check_same_root(other)
        value = other.to(self._unit)
        return (self._magnitude > value) - (self._magnitude < value)

    def is_close(self, other: Quantity, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
        """Approximate equality, tolerant to conversion round-off.

        Args:
            other: Quantity of the same kind.
            rel_tol: Relative tolerance, see :func:`math.isclose`.
            abs_tol: Absolute tolerance in this quantity's unit.

        Raises:
            TypeError: If ``other`` is not a quantity of this kind.
        """
        self._check_same_root(other)
        return isclose(self._magnitude, other.to(self._unit), rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------- Text --------------------------------
    @property
    def unit_symbol(self) -> str:
        """Short symbol of the current unit, e.g. ``"ft²"``."""
        return self._unit.symbol

    @property
    def unit_name(self) -> str:
        """Long name of the current unit, e.g. ``"square foot"``."""
        return self._unit.long_name

    def __str__(self) -> str:
        """Return the magnitude followed by the short unit symbol (e.g. "1.35 m")."""
        return f"{self._magnitude} {self._unit.symbol}"

    def __format__(self, format_spec: str) -> str:
        """Format the magnitude and append the unit text.

        A trailing ``l`` or ``L`` in ``format_spec`` selects the long unit
        name; the rest of the format spec is applied to the magnitude. An
        ``l`` elsewhere, e.g. as a fill character, is left to the magnitude.

        Example:
            >>> f"{Length(1.35):.1f}"
            '1.4 m'
            >>> f"{Length(1.35):.1fL}"
            '1.4 meters'
        """
        if format_spec[-1:].lower() == LONG_FORMAT_FLAG:
            number = format(self._magnitude, format_spec[:-1])
            return f"{number} {self._unit.long_name}"
        return f"{format(self._magnitude, format_spec)} {self._unit.symbol}"

    def __repr__(self) -> str:
        """Return the value in its own unit with the base unit equivalent.

        Returns:
            str: e.g. ``"1034 mm (= 1.034 m)"``.
        """
        return f"{self._magnitude:g} {self._unit.symbol} (= {self.to(self.SI):g} {self.SI.symbol})"

    @classmethod
    def parse(cls, text: str) -> Quantity:
        """Create a quantity from text such as ``"12.5 km"``.

        The text is split at its first letter. The part before is parsed as
        a float and the part after is matched, case-sensitively, against the
        short unit symbols of the kind.

        Args:
            text: Number followed by a unit symbol.

        Returns:
            Quantity: New quantity of this kind.

        Raises:
            TypeError: If ``text`` is not a string.
            UnitParseError: If the number is malformed or the unit unknown.
        """
        if not isinstance(text, str):
            msg = f"parse() argument must be str, not {type(text).__name__}"
            raise TypeError(msg)

        text = text.strip()
        idx = next((i for i, ch in enumerate(text) if ch.isalpha()), len(text))
        number_text = text[:idx].strip()
        unit_text = text[idx:].strip()
        try:
            magnitude = float(number_text)
        except ValueError as exc:
            raise UnitParseError(text, unit_text, f"Invalid number ({number_text})") from exc

        unit = cls._SYMBOLS.get(unit_text)
        if unit is None:
            raise UnitParseError(text, unit_text)
        return cls(magnitude, unit)

    @classmethod
    def try_parse(cls, text: str) -> tuple[bool, Quantity]:
        """Parse without raising.

        Args:
            text: Number followed by a unit symbol.

        Returns:
            tuple[bool, Quantity]: ``(True, quantity)`` on success, otherwise
            ``(False, default quantity)``. Check the flag before using the
            quantity.
        """
        try:
            return True, cls.parse(text)
        except (UnitParseError, TypeError) as exc:
            logger.debug("Could not parse %s: %s", cls.__name__, exc)
            return False, cls()

    @classmethod
    def unit_from_symbol(cls, symbol: str) -> UnitEnum:
        """Look up a unit by its short symbol.

        Raises:
            KeyError: If no unit of this kind uses ``symbol``.
        """
        return cls._SYMBOLS[symbol]
