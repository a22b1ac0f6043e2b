"""Produce domain models and API schemas."""

from __future__ import annotations

from decimal import Decimal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
)


class ProducePayload(BaseModel):
    """Incoming payload for adding a produce entry.

    Values arrive raw; format checks happen in ``src.services.validation``
    so each failure maps to its own error message.
    """

    code: str = Field(..., description="Produce code, e.g. YRT6-72AS-K736-L4AR")
    name: str = Field(..., description="Alphanumeric produce name")
    price: StrictStr | StrictFloat | StrictInt = Field(
        ...,
        description="Price with at most two decimal places, e.g. \"12.12\"",
    )


class Produce(BaseModel):
    """A stored produce entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    price: Decimal = Field(..., gt=0, decimal_places=2)

    @field_validator("code", "name")
    @classmethod
    def _fold_case(cls, value: str) -> str:
        return value.lower()

    @field_serializer("price")
    def _serialize_price(self, price: Decimal) -> str:
        return f"{price:.2f}"
