"""
Common API schemas.
"""

from typing import Any, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema exchanged in camelCase with the portal front end."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class BaseResponse(CamelModel):
    """Base response schema."""

    success: bool = True


class ErrorResponse(CamelModel):
    """Error response schema.

    Contact search errors carry ``found: false`` instead of ``success: false``.
    """

    success: Optional[bool] = False
    found: Optional[bool] = None
    error: str
    details: Optional[Any] = None
