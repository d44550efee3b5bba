"""
Shared contract bases.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Contract whose JSON form uses camelCase keys; snake_case names are accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OkResponse(CamelModel):
    """Acknowledgement for writes with nothing else to return"""
    ok: bool = True
