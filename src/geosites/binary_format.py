"""Binary stream encoding for locations.

Values are written sequentially, big-endian, with the layout of a Qt data
stream: strings as a uint32 byte count followed by UTF-16BE code units, the
role as one uint16 code unit, integers as int32, coordinates as float64 and
booleans as one byte. There are no optional fields; every record carries all
thirteen values.
"""

import io
import struct
from typing import Any, BinaryIO, Callable, Type

from loguru import logger

from geosites.exceptions import GSNotRegistered, GSStreamError
from geosites.location import Location

_UINT8 = struct.Struct(">B")
_UINT16 = struct.Struct(">H")
_UINT32 = struct.Struct(">I")
_INT32 = struct.Struct(">i")
_FLOAT64 = struct.Struct(">d")

# Qt writes a null string as this length; it is read back as an empty string.
NULL_STRING_LENGTH = 0xFFFFFFFF
STRING_ENCODING = "utf-16-be"

Writer = Callable[[BinaryIO, Any], None]
Reader = Callable[[BinaryIO], Any]


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        msg = f"Unexpected end of stream: expected {size} bytes, got {len(data)}"
        raise GSStreamError(msg)
    return data


def _unpack(stream: BinaryIO, fmt: struct.Struct) -> Any:
    return fmt.unpack(_read_exact(stream, fmt.size))[0]


def write_string(stream: BinaryIO, value: str) -> None:
    data = value.encode(STRING_ENCODING, errors="surrogatepass")
    stream.write(_UINT32.pack(len(data)))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    length = _unpack(stream, _UINT32)
    if length == NULL_STRING_LENGTH:
        return ""
    if length % 2:
        msg = f"Invalid UTF-16 string length: {length}"
        raise GSStreamError(msg)
    return _read_exact(stream, length).decode(STRING_ENCODING, errors="surrogatepass")


def write_char(stream: BinaryIO, value: str) -> None:
    stream.write(_UINT16.pack(ord(value)))


def read_char(stream: BinaryIO) -> str:
    return chr(_unpack(stream, _UINT16))


def write_int32(stream: BinaryIO, value: int) -> None:
    stream.write(_INT32.pack(value))


def read_int32(stream: BinaryIO) -> int:
    return _unpack(stream, _INT32)


def write_float64(stream: BinaryIO, value: float) -> None:
    stream.write(_FLOAT64.pack(value))


def read_float64(stream: BinaryIO) -> float:
    return _unpack(stream, _FLOAT64)


def write_bool(stream: BinaryIO, value: bool) -> None:
    stream.write(_UINT8.pack(int(value)))


def read_bool(stream: BinaryIO) -> bool:
    return _unpack(stream, _UINT8) != 0


def write_location(stream: BinaryIO, location: Location) -> None:
    """Write all fields of a location to a binary stream."""
    write_string(stream, location.name)
    write_string(stream, location.state)
    write_string(stream, location.country)
    write_char(stream, location.role)
    write_int32(stream, location.population)
    write_float64(stream, location.latitude)
    write_float64(stream, location.longitude)
    write_int32(stream, location.altitude)
    write_int32(stream, location.bortle_scale_index)
    write_string(stream, location.time_zone)
    write_string(stream, location.planet_name)
    write_string(stream, location.landscape_key)
    write_bool(stream, location.is_user_location)


def read_location(stream: BinaryIO) -> Location:
    """Read a location written by write_location.

    Raises
    ------
    GSStreamError
        Raised if the stream ends early or a value fails validation.
    """
    values = {
        "name": read_string(stream),
        "state": read_string(stream),
        "country": read_string(stream),
        "role": read_char(stream),
        "population": read_int32(stream),
        "latitude": read_float64(stream),
        "longitude": read_float64(stream),
        "altitude": read_int32(stream),
        "bortle_scale_index": read_int32(stream),
        "time_zone": read_string(stream),
        "planet_name": read_string(stream),
        "landscape_key": read_string(stream),
        "is_user_location": read_bool(stream),
    }
    try:
        return Location(**values)
    except ValueError as exc:
        msg = f"Invalid location in stream: {exc}"
        raise GSStreamError(msg) from exc


def location_to_bytes(location: Location) -> bytes:
    """Return the binary encoding of a location."""
    buf = io.BytesIO()
    write_location(buf, location)
    return buf.getvalue()


def location_from_bytes(data: bytes) -> Location:
    """Decode a single location. Trailing bytes are an error."""
    buf = io.BytesIO(data)
    location = read_location(buf)
    remaining = len(data) - buf.tell()
    if remaining:
        msg = f"{remaining} unexpected trailing bytes after location"
        raise GSStreamError(msg)
    return location


class BinaryCodecRegistry:
    """Maps types to the functions that write and read them on a binary stream."""

    def __init__(self) -> None:
        self._codecs: dict[Type, tuple[Writer, Reader]] = {}

    def __contains__(self, value_type: Type) -> bool:
        return value_type in self._codecs

    def register(self, value_type: Type, writer: Writer, reader: Reader) -> bool:
        """Register a codec. Returns False if the type already had one."""
        if value_type in self._codecs:
            return False
        self._codecs[value_type] = (writer, reader)
        logger.debug("Registered binary codec for {}", value_type.__name__)
        return True

    def get_codec(self, value_type: Type) -> tuple[Writer, Reader]:
        """Return the (writer, reader) pair for a type."""
        codec = self._codecs.get(value_type)
        if codec is None:
            msg = f"No binary codec is registered for {value_type.__name__}"
            raise GSNotRegistered(msg)
        return codec

    def write_value(self, stream: BinaryIO, value: Any) -> None:
        """Write a value with the codec registered for its type."""
        writer, _ = self.get_codec(type(value))
        writer(stream, value)

    def read_value(self, stream: BinaryIO, value_type: Type) -> Any:
        """Read a value of the given type."""
        _, reader = self.get_codec(value_type)
        return reader(stream)


default_registry = BinaryCodecRegistry()


def register_location_codec(registry: BinaryCodecRegistry | None = None) -> BinaryCodecRegistry:
    """Register the location codec once. Call at application startup.

    Calling it again is harmless.
    """
    if registry is None:
        registry = default_registry
    registry.register(Location, write_location, read_location)
    return registry
