"""
Shared schema base classes.

Action payloads use camelCase on the wire and snake_case in Python.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Generic, TypeVar


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, accepts either spelling on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        use_enum_values = True


# Largest value an INTEGER column holds
MAX_INT = 2**31 - 1

DataT = TypeVar("DataT")


class ActionResponse(CamelModel, Generic[DataT]):
    """Uniform success envelope returned by every action."""
    success: bool = True
    data: DataT
