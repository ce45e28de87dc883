"""Defines all exceptions in the package."""


class GSBaseException(Exception):
    """Base class for all exceptions in the package"""


class GSLineFormatError(GSBaseException):
    """Raised if a location line cannot satisfy the line format contract."""


class GSStreamError(GSBaseException):
    """Raised if a binary stream is truncated or holds invalid data."""


class GSNotRegistered(GSBaseException):
    """Raised if no binary codec is registered for the requested type."""
