"""
Pydantic models for order data.

An order points at a user through ``user_id``.  The reference is checked
against the user service once, when the order is created; deleting the
user later leaves the order in place.
"""

from pydantic import BaseModel, ConfigDict, Field


class OrderBase(BaseModel):
    # No coercion: ``"quantity": "3"`` is a decode error, not ``3``.
    model_config = ConfigDict(strict=True)

    user_id: str = Field("", examples=["1"])
    product: str = Field("", examples=["Laptop"])
    quantity: int = Field(0, examples=[1])
    total: float = Field(0.0, examples=[999.99])


class OrderCreate(OrderBase):
    """Schema for creating (or overwriting) an order."""

    id: str = Field("", examples=["1"])


class OrderUpdate(OrderBase):
    """Schema for replacing an order; a body ``id`` is ignored."""

    id: str = ""


class Order(OrderBase):
    """A stored order record."""

    model_config = ConfigDict(frozen=True)

    id: str
