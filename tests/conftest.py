import pytest
from loguru import logger

from geosites import Location, MappingCountryResolver, set_country_resolver


@pytest.fixture
def paris() -> Location:
    """Creates a fully populated location."""
    return Location(
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
        planet_name="Earth",
        landscape_key="paris",
    )


@pytest.fixture
def country_resolver():
    """Installs a small country resolver for the duration of a test."""
    resolver = MappingCountryResolver({"fr": "France", "au": "Australia", "us": "United States"})
    set_country_resolver(resolver)
    yield resolver
    set_country_resolver(None)


@pytest.fixture
def caplog(caplog):
    """Enable logging for the package"""
    logger.remove()
    logger.enable("geosites")
    handler_id = logger.add(caplog.handler)
    yield caplog
    logger.remove(handler_id)
