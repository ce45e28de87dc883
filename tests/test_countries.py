from geosites import MappingCountryResolver, get_country_resolver, set_country_resolver
from geosites.countries import resolve_country_name


def test_mapping_resolver():
    resolver = MappingCountryResolver({"FR": "France"})
    assert resolver("fr") == "France"
    assert resolver(" Fr ") == "France"
    assert resolver("de") == ""
    resolver.add("de", "Germany")
    assert resolver("DE") == "Germany"
    assert len(resolver) == 2


def test_resolve_country_name_falls_back_to_code(caplog):
    assert resolve_country_name(" zz ") == "zz"
    assert "No country name" in caplog.text


def test_default_resolver(country_resolver):
    assert get_country_resolver() is country_resolver
    assert resolve_country_name("us") == "United States"
    set_country_resolver(None)
    assert resolve_country_name("us") == "us"
