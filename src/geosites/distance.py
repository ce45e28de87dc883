"""Great-circle distance functions."""

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from geosites.quantities import Angle, Distance

if TYPE_CHECKING:
    from geosites.location import Location


def distance_degrees(long1: ArrayLike, lat1: ArrayLike, long2: ArrayLike, lat2: ArrayLike):
    """Return the great-circle angular distance in degrees between two points.

    Uses the spherical law of cosines. The cosine is clamped to [-1, 1] so that
    coincident and antipodal points do not produce NaN from rounding error.
    Inputs may be scalars or numpy arrays.

    Parameters
    ----------
    long1, lat1 : float | ArrayLike
        Longitude and latitude of the first point, in degrees.
    long2, lat2 : float | ArrayLike
        Longitude and latitude of the second point, in degrees.

    Examples
    --------
    >>> distance_degrees(0.0, 0.0, 180.0, 0.0)
    180.0
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    dlambda = np.radians(np.subtract(long1, long2))
    cos_angle = np.sin(phi1) * np.sin(phi2) + np.cos(phi1) * np.cos(phi2) * np.cos(dlambda)
    angle = np.degrees(np.arccos(np.clip(cos_angle, -1.0, 1.0)))
    if np.ndim(angle) == 0:
        return float(angle)
    return angle


def angular_distance(loc1: "Location", loc2: "Location") -> Angle:
    """Return the angular distance between two locations."""
    return Angle(
        distance_degrees(loc1.longitude, loc1.latitude, loc2.longitude, loc2.latitude),
        "degree",
    )


def great_circle_distance(loc1: "Location", loc2: "Location", radius: Distance) -> Distance:
    """Return the arc length between two locations on a sphere of the given radius."""
    radius = Distance.from_value(radius)
    angle = angular_distance(loc1, loc2).to("radian").magnitude
    return Distance(radius.magnitude * angle, radius.units)
