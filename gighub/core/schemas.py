"""
gighub/core/schemas.py

Core Schemas

Defines core Pydantic models used across the application, including:
- The camelCase base model for wire shapes consumed by the browser client.
- Generic message response schema.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for response and request schemas exposed in camelCase
    (`deliveryTime`, `isActive`, `averageRating`, ...). Accepts either
    spelling on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """
    Generic response schema for simple success or informational messages.
    """

    message: str = Field(..., description="Response message")
