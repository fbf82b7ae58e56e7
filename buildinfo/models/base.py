"""Shared base for build-info document models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BuildInfoModel(BaseModel):
    """Base model whose wire names are camelCase.

    Fields are declared in snake_case and can be populated by either name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
