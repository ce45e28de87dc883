"""Unit quantities used for locations and the distances between them.

New quantities only need to name their base unit; pint checks that any
assigned unit has the same dimensionality.
"""

from geosites.base_quantity import BaseQuantity

# ruff:noqa
# fmt: off

class Angle(BaseQuantity): __base_unit__ = "degree"

class Distance(BaseQuantity): __base_unit__ = "meter"
