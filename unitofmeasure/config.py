"""Global configuration and type definitions for the unit of measure package.

This module provides the numeric type aliases and default tolerances shared by
every quantity kind. It establishes which scalar types may scale a quantity,
which inputs the bulk conversion helpers accept, and the defaults used for
approximate comparisons of floating-point magnitudes.

Type Definitions:
    BASE_TYPE: Union of scalar types accepted by quantity arithmetic
               (``quantity * k``, ``quantity / k``). Includes NumPy integer
               and floating scalars so values pulled out of arrays can be
               used directly.
    ARRAY_TYPE: Union of inputs accepted by :func:`unitofmeasure.unit.convert`,
                scalars plus NumPy arrays for vectorised conversion.

Tolerances:
    REL_TOL: Default relative tolerance for ``Quantity.is_close``.
    ABS_TOL: Default absolute tolerance for ``Quantity.is_close``.

Formatting:
    LONG_FORMAT_FLAG: Trailing character of a format spec, in either case,
                      selecting long unit names,
                      e.g. ``format(length, ".2fl")`` -> ``"1.35 meters"``.

Example:
    >>> from unitofmeasure.config import BASE_TYPE
    >>> import numpy as np
    >>> isinstance(np.float64(2.0), BASE_TYPE)
    True
"""

import numpy as np

BASE_TYPE = int | float | np.integer | np.floating
ARRAY_TYPE = int | float | np.integer | np.floating | np.ndarray

REL_TOL = 1e-9
ABS_TOL = 0.0

LONG_FORMAT_FLAG = "l"
