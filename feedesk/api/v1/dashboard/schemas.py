from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from feedesk.api.v1.payments.schemas import PaymentResponse
from feedesk.api.v1.students.schemas import StudentResponse


class DashboardStats(BaseModel):
    total_students: int
    total_collected: Decimal = Field(..., description="Sum of completed payments, orphaned ones included")
    total_dues: Decimal
    collection_rate: int = Field(..., description="Percent of collected over collected + dues")
    recent_payments: List[PaymentResponse]
    students_with_dues: List[StudentResponse]
    students_with_dues_count: int
