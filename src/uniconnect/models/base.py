"""Base API models for uniconnect."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase keys from clients, snake_case in code.

    FastAPI serializes responses by alias, so clients see camelCase both ways.
    """
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
