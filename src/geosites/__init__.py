import importlib.metadata as metadata

from loguru import logger

logger.disable("geosites")

__version__ = metadata.metadata("geosites")["Version"]

from .countries import (
    CountryNameResolver,
    MappingCountryResolver,
    get_country_resolver,
    set_country_resolver,
)
from .distance import distance_degrees, great_circle_distance
from .location import (
    DEFAULT_BORTLE_SCALE_INDEX,
    DEFAULT_PLANET_NAME,
    Location,
    parse_location_lines,
)
from .quantities import Angle, Distance

__all__ = (
    "Angle",
    "CountryNameResolver",
    "DEFAULT_BORTLE_SCALE_INDEX",
    "DEFAULT_PLANET_NAME",
    "Distance",
    "Location",
    "MappingCountryResolver",
    "distance_degrees",
    "get_country_resolver",
    "great_circle_distance",
    "parse_location_lines",
    "set_country_resolver",
)
