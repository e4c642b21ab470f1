"""Console demonstration of the unit of measure package.

Run with ``python -m unitofmeasure``. Prints a table of worked examples:
squaring and cubing a length, nautical and imperial units, rescaling a rain
rate and computing an average speed.
"""

from __future__ import annotations

from datetime import timedelta

from rich.console import Console
from rich.table import Table

from .unit import Length, LengthUnit, Velocity, VelocityUnit

CONSOLE = Console()


def build_table() -> Table:
    """Build the table of examples shown by :func:`main`."""
    t = Table(title="Unit of Measure", show_lines=False)
    t.add_column("Expression", style="bold")
    t.add_column("Result")
    t.add_column("Long form")

    side = Length(1.45, LengthUnit.METER)
    area = side * side
    volume = side * area
    t.add_row("l", str(side), f"{side:l}")
    t.add_row("l * l", str(area), f"{area:l}")
    t.add_row("l * l * l", str(volume), f"{volume:l}")

    t.add_section()
    depth = Length(2.4, LengthUnit.FATHOM)
    t.add_row("depth", str(depth), f"{depth.with_unit(LengthUnit.METER):.4fl}")

    rain = Velocity(0.042, VelocityUnit.INCH_PER_HOUR)
    t.add_row("rain", str(rain), f"{rain:l}")
    rain.unit = VelocityUnit.MILLIMETER_PER_HOUR
    t.add_row("rain in mm/h", f"{rain:.4f}", f"{rain:.4fl}")

    t.add_section()
    lhs = Length(2.1, LengthUnit.METER)
    rhs = Length(43.4, LengthUnit.INCH)
    result = lhs + rhs
    t.add_row(f"{lhs} + {rhs}", f"{result:.5f}", f"{result:.5fl}")
    result.unit = LengthUnit.FOOT
    t.add_row("... in feet", f"{result:.5f}", f"{result:.5fl}")

    distance = Length(15.3, LengthUnit.KILOMETER)
    elapsed = timedelta(minutes=13, seconds=25)
    speed = distance / elapsed
    t.add_row(f"{distance} in {elapsed}", f"{speed:.2f}", f"{speed:.2fl}")
    return t


def main() -> None:
    CONSOLE.print(build_table())


if __name__ == "__main__":
    main()
