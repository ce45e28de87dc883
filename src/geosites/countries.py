"""Country code to display name resolution.

The location line format stores a country code. Turning it into a display name
is delegated to a resolver so that applications can plug in their own locale
data. The process default resolves nothing until one is configured.
"""

from typing import Mapping, Protocol

from loguru import logger


class CountryNameResolver(Protocol):
    """Callable returning the display name for a country code, or "" if unknown."""

    def __call__(self, code: str) -> str:
        ...


class MappingCountryResolver:
    """Resolves country codes from a mapping. Lookups ignore case."""

    def __init__(self, names: Mapping[str, str] | None = None) -> None:
        self._names = {k.lower(): v for k, v in (names or {}).items()}

    def __call__(self, code: str) -> str:
        return self._names.get(code.strip().lower(), "")

    def __len__(self) -> int:
        return len(self._names)

    def add(self, code: str, name: str) -> None:
        """Add or replace the display name for a code."""
        self._names[code.strip().lower()] = name


def _resolve_nothing(code: str) -> str:
    return ""


_resolver: CountryNameResolver = _resolve_nothing


def get_country_resolver() -> CountryNameResolver:
    """Return the process-wide default resolver."""
    return _resolver


def set_country_resolver(resolver: CountryNameResolver | None) -> None:
    """Set the process-wide default resolver. None restores the empty default."""
    global _resolver
    _resolver = resolver if resolver is not None else _resolve_nothing
    logger.debug("Country resolver set to {}", _resolver)


def resolve_country_name(code: str, resolver: CountryNameResolver | None = None) -> str:
    """Return the display name for code, falling back to the code itself."""
    code = code.strip()
    if resolver is None:
        resolver = _resolver
    name = resolver(code)
    if not name:
        logger.debug("No country name for code {!r}, keeping the code", code)
        return code
    return name
