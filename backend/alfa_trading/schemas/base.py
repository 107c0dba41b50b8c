"""Shared Pydantic base for camelCase API payloads"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
