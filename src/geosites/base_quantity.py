"""This module contains base class for handling pint quantity."""

from typing import Type

import pint

ureg = pint.UnitRegistry()


class BaseQuantity(ureg.Quantity):  # type: ignore
    """Interface for base quantity."""

    __base_unit__ = None
    _REGISTRY = ureg

    def __new__(cls: Type["BaseQuantity"], value, units=None):
        return super().__new__(cls, value, units)  # type: ignore

    def __init_subclass__(cls, **kwargs):
        if not cls.__base_unit__:
            msg = "__base_unit__ should be defined"
            raise TypeError(msg)
        super().__init_subclass__(**kwargs)

    @classmethod
    def from_value(cls, value) -> "BaseQuantity":
        """Return value as this quantity type.

        Plain numbers are taken to be in the base unit. Quantities must have a
        compatible unit and keep the unit they were given in.

        Raises
        ------
        pint.errors.DimensionalityError
            Raised if the unit is not compatible with the base unit.
        """
        if isinstance(value, pint.Quantity):
            if not value.check(cls.__base_unit__):
                raise pint.errors.DimensionalityError(value.units, cls.__base_unit__)
            if type(value) is cls:
                return value
            return cls(value.magnitude, value.units)
        return cls(value, cls.__base_unit__)
