"""Fee structure schemas."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from feedesk.core.enums import FeeCategory, FeeFrequency


class FeeTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., ge=0)
    frequency: FeeFrequency
    category: FeeCategory


class FeeStructureCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    class_name: str = Field(..., min_length=1, max_length=50)
    fee_types: List[FeeTypeCreate] = Field(..., min_length=1)
    total_amount: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Stored as given. When omitted, the sum of fee type amounts is used.",
    )


class FeeTypeResponse(BaseModel):
    id: str
    name: str
    amount: Decimal
    frequency: FeeFrequency
    category: FeeCategory

    class Config:
        from_attributes = True


class FeeStructureResponse(BaseModel):
    id: str
    name: str
    class_name: str
    fee_types: List[FeeTypeResponse]
    total_amount: Decimal

    class Config:
        from_attributes = True
