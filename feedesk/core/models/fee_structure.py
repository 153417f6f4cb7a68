"""Fee structure: named bundle of fee types charged to one class."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from feedesk.core.enums import FeeCategory, FeeFrequency


class FeeType(BaseModel):
    """Single line item (tuition, transport, ...). Owned by one fee structure."""

    id: str
    name: str
    amount: Decimal = Field(..., ge=0)
    frequency: FeeFrequency
    category: FeeCategory


class FeeStructure(BaseModel):
    """Fee types in insertion order.

    total_amount is the value supplied at creation; it is not kept in sync
    with the fee type amounts.
    """

    id: str
    name: str
    class_name: str
    fee_types: List[FeeType] = Field(default_factory=list)
    total_amount: Decimal
