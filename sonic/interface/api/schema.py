"""Request body base for the HTTP API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIRequest(BaseModel):
    """Request body accepting camelCase or snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
