"""Payment schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from feedesk.core.enums import PaymentMethod, PaymentStatus


class PaymentCreate(BaseModel):
    student_id: str = Field(..., min_length=1)
    fee_type_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    payment_date: date = Field(default_factory=date.today)
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.completed


class PaymentResponse(BaseModel):
    id: str
    student_id: str
    student_name: Optional[str] = None  # None when the student has been deleted
    fee_type_id: str
    fee_type_name: str
    amount: Decimal
    payment_date: date
    method: PaymentMethod
    receipt_number: str
    status: PaymentStatus
