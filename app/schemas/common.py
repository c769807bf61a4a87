from typing import Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Integral scores serialize as ints, fractional ones as floats
Number = Union[int, float]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    message: str
    errors: list[str] = []
