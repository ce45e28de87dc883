"""Defines the geographic location record and its tab-separated line format."""

from typing import Iterable

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from typing_extensions import Annotated

from geosites.countries import CountryNameResolver, resolve_country_name
from geosites.distance import angular_distance, distance_degrees
from geosites.exceptions import GSLineFormatError
from geosites.models import GeoSitesBaseModel, make_model_config
from geosites.parsing import (
    INT32_MAX,
    INT32_MIN,
    parse_float_or_zero,
    parse_int,
    parse_int32_or_zero,
)
from geosites.quantities import Angle

DEFAULT_BORTLE_SCALE_INDEX = 2
DEFAULT_PLANET_NAME = "Earth"
DEFAULT_ROLE = "X"

FIELD_SEPARATOR = "\t"
COMMENT_PREFIX = "#"
MANDATORY_FIELD_COUNT = 8
LINE_FIELD_COUNT = 12

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class Location(GeoSitesBaseModel):
    """Specifies a named site on a planet."""

    model_config = make_model_config(frozen=True)

    name: str = ""
    state: str = ""
    country: str = Field(default="", description="Display name of the country")
    role: str = Field(default=DEFAULT_ROLE, description="Single character site role code")
    population: Int32 = 0
    latitude: Annotated[float, Field(ge=-90.0, le=90.0)] = 0.0
    longitude: Annotated[float, Field(ge=-180.0, le=180.0)] = 0.0
    altitude: Int32 = Field(default=0, description="Altitude in meters")
    bortle_scale_index: Annotated[int, Field(ge=1, le=9)] = DEFAULT_BORTLE_SCALE_INDEX
    time_zone: str = ""
    planet_name: str = DEFAULT_PLANET_NAME
    landscape_key: str = ""
    is_user_location: bool = False

    distance_degrees = staticmethod(distance_degrees)

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            return DEFAULT_ROLE
        upper = value[0].upper()
        role = upper if len(upper) == 1 else value[0]
        if ord(role) > 0xFFFF:
            msg = f"role must be a single UTF-16 code unit: {role!r}"
            raise ValueError(msg)
        return role

    @classmethod
    def example(cls) -> "Location":
        return cls(
            name="Paris",
            state="Ile-de-France",
            country="France",
            role="B",
            population=2_138_000,
            latitude=48.8566,
            longitude=2.3522,
            altitude=35,
            bortle_scale_index=8,
            time_zone="Europe/Paris",
        )

    def get_id(self) -> str:
        """Return a human readable identifier for the location."""
        if not self.name:
            return f"{self.latitude:g}, {self.longitude:g}"
        if self.country:
            return f"{self.name}, {self.country}"
        return self.name

    def serialize_to_line(self) -> str:
        """Return the location as one tab-separated line of the location list format.

        Fields are not escaped, so none of them may contain a tab or a newline.
        """
        return FIELD_SEPARATOR.join(
            (
                self.name,
                self.state,
                self.country,
                self.role,
                f"{self.population / 1000:.1f}",
                _format_coordinate(self.latitude, "N", "S"),
                _format_coordinate(self.longitude, "E", "W"),
                str(self.altitude),
                str(self.bortle_scale_index),
                self.time_zone,
                self.planet_name,
                self.landscape_key,
            )
        )

    @classmethod
    def create_from_line(
        cls, raw: str, country_resolver: CountryNameResolver | None = None
    ) -> "Location":
        """Parse a location from a tab-separated line.

        The first eight fields are mandatory; the bortle index, time zone, planet
        and landscape key may be omitted. Malformed numbers in mandatory fields
        parse as zero.

        Parameters
        ----------
        raw : str
            The line to parse.
        country_resolver : CountryNameResolver | None
            Resolver for the country code field. Defaults to the process-wide one.

        Raises
        ------
        GSLineFormatError
            Raised if the line has fewer than eight fields or a coordinate is out
            of range.
        """
        fields = [x.strip() for x in raw.split(FIELD_SEPARATOR)]
        if len(fields) < MANDATORY_FIELD_COUNT:
            msg = (
                f"A location line needs at least {MANDATORY_FIELD_COUNT} tab-separated "
                f"fields, got {len(fields)}: {raw!r}"
            )
            raise GSLineFormatError(msg)

        values = {
            "name": fields[0],
            "state": fields[1],
            "country": resolve_country_name(fields[2], country_resolver),
            "role": fields[3],
            "population": parse_int32_or_zero(fields[4], scale=1000),
            "latitude": _parse_coordinate(fields[5], "S"),
            "longitude": _parse_coordinate(fields[6], "W"),
            "altitude": parse_int32_or_zero(fields[7]),
            "bortle_scale_index": _parse_bortle_scale_index(fields),
        }
        if len(fields) > 9:
            values["time_zone"] = fields[9]
        if len(fields) > 10:
            values["planet_name"] = fields[10]
        if len(fields) > 11:
            values["landscape_key"] = fields[11]

        try:
            return cls(**values)
        except ValidationError as exc:
            msg = f"Invalid location line {raw!r}: {exc}"
            raise GSLineFormatError(msg) from exc

    def angular_distance_to(self, other: "Location") -> Angle:
        """Return the great-circle angular distance to another location."""
        return angular_distance(self, other)

    def to_bytes(self) -> bytes:
        """Encode the location, including is_user_location, in the binary stream format."""
        from geosites.binary_format import location_to_bytes

        return location_to_bytes(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Location":
        """Decode a location produced by to_bytes."""
        from geosites.binary_format import location_from_bytes

        return location_from_bytes(data)


def parse_location_lines(
    lines: Iterable[str], country_resolver: CountryNameResolver | None = None
) -> list[Location]:
    """Parse locations from the lines of a location list.

    Blank lines and lines starting with '#' are skipped.
    """
    locations = []
    for line in lines:
        if not line.strip() or line.lstrip().startswith(COMMENT_PREFIX):
            continue
        locations.append(Location.create_from_line(line, country_resolver))
    logger.debug("Parsed {} locations", len(locations))
    return locations


def _format_coordinate(value: float, positive_suffix: str, negative_suffix: str) -> str:
    if value < 0:
        return f"{-value:.6f}{negative_suffix}"
    return f"{value:.6f}{positive_suffix}"


def _parse_coordinate(text: str, negative_suffix: str) -> float:
    # The last character is the hemisphere suffix.
    value = parse_float_or_zero(text[:-1])
    if text.endswith(negative_suffix):
        return -value
    return value


def _parse_bortle_scale_index(fields: list[str]) -> int:
    if len(fields) <= 8:
        return DEFAULT_BORTLE_SCALE_INDEX
    value, ok = parse_int(fields[8])
    if not ok or not 1 <= value <= 9:
        logger.debug(
            "Invalid bortle scale index {!r}, using {}", fields[8], DEFAULT_BORTLE_SCALE_INDEX
        )
        return DEFAULT_BORTLE_SCALE_INDEX
    return value
