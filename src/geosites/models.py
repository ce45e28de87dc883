"""Base models for the package"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from rich import print as _pprint


def make_model_config(**kwargs: Any) -> ConfigDict:
    """Return a Pydantic config"""
    return ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        validate_default=True,
        extra="forbid",
        use_enum_values=False,
        arbitrary_types_allowed=True,
        populate_by_name=True,
        **kwargs,  # type: ignore
    )


class GeoSitesBaseModel(BaseModel):
    """Base class for all geosites models"""

    model_config = make_model_config()

    def pprint(self):
        return _pprint(self)
