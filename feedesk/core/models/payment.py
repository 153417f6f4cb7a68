"""Payment recorded against a student and a fee type."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from feedesk.core.enums import PaymentMethod, PaymentStatus


class Payment(BaseModel):
    """student_id and fee_type_id are plain references; neither is enforced."""

    id: str
    student_id: str
    fee_type_id: str
    amount: Decimal
    payment_date: date
    method: PaymentMethod
    receipt_number: str
    status: PaymentStatus = PaymentStatus.completed
