"""
Shared Schema Helpers
Response envelope and camelCase output fields
"""

from pydantic import AliasChoices, BaseModel, Field
from typing import List, Optional


def camel_field(name: str, camel: str):
    """
    Field read from the ORM attribute `name` and written as `camel`

    The camelCase spelling is also accepted on input so that dumped
    responses validate again.
    """
    return Field(validation_alias=AliasChoices(name, camel), serialization_alias=camel)


class ErrorResponse(BaseModel):
    """Body of every failed request"""

    error: Optional[str] = None
    result: List[dict] = []
