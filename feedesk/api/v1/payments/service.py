"""Payments service: record, list, search, receipt export."""

from typing import List, Optional, Tuple

from fastapi import status

from feedesk.core.config import settings
from feedesk.core.exceptions import ServiceError
from feedesk.core.invoices import format_receipt, receipt_filename
from feedesk.core.models import Payment
from feedesk.core.store import FeeStore

from .schemas import PaymentCreate, PaymentResponse


def payment_to_response(store: FeeStore, p: Payment) -> PaymentResponse:
    student = store.get_student(p.student_id)
    return PaymentResponse(
        id=p.id,
        student_id=p.student_id,
        student_name=student.name if student else None,
        fee_type_id=p.fee_type_id,
        fee_type_name=store.fee_type_name(p.fee_type_id),
        amount=p.amount,
        payment_date=p.payment_date,
        method=p.method,
        receipt_number=p.receipt_number,
        status=p.status,
    )


async def create_payment(store: FeeStore, payload: PaymentCreate) -> PaymentResponse:
    # References are recorded as given; orphaned student ids are allowed.
    payment = store.add_payment(payload.model_dump())
    return payment_to_response(store, payment)


async def list_payments(
    store: FeeStore,
    search: Optional[str] = None,
    student_id: Optional[str] = None,
) -> List[PaymentResponse]:
    payments = store.payments
    if student_id is not None:
        payments = [p for p in payments if p.student_id == student_id]
    if search:
        term = search.lower()
        filtered = []
        for p in payments:
            student = store.get_student(p.student_id)
            if (student and term in student.name.lower()) or term in p.receipt_number.lower():
                filtered.append(p)
        payments = filtered
    return [payment_to_response(store, p) for p in payments]


async def get_payment(store: FeeStore, payment_id: str) -> Optional[PaymentResponse]:
    payment = store.get_payment(payment_id)
    return payment_to_response(store, payment) if payment else None


async def export_receipt(store: FeeStore, payment_id: str) -> Tuple[str, str]:
    """Return (filename, receipt text) for the payment."""
    payment = store.get_payment(payment_id)
    if not payment:
        raise ServiceError("Payment not found", status.HTTP_404_NOT_FOUND)
    content = format_receipt(
        payment,
        store.get_student(payment.student_id),
        store.fee_type_name(payment.fee_type_id),
        currency=settings.currency_symbol,
    )
    return receipt_filename(payment), content
