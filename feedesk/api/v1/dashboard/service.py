"""Dashboard statistics derived from the store on every call."""

from decimal import ROUND_HALF_UP, Decimal

from feedesk.core.enums import PaymentStatus
from feedesk.core.store import FeeStore

from feedesk.api.v1.payments.service import payment_to_response
from feedesk.api.v1.students.service import student_to_response

from .schemas import DashboardStats

RECENT_PAYMENTS_LIMIT = 5
STUDENTS_WITH_DUES_LIMIT = 5


def collection_rate(total_collected: Decimal, total_dues: Decimal) -> int:
    if total_collected <= 0:
        return 0
    denominator = total_collected + total_dues
    if denominator <= 0:
        return 100
    rate = total_collected / denominator * 100
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


async def get_dashboard_stats(store: FeeStore) -> DashboardStats:
    students = store.students
    total_collected = sum(
        (p.amount for p in store.payments if p.status == PaymentStatus.completed),
        Decimal("0"),
    )
    dues_by_student = {s.id: store.get_student_dues(s.id) for s in students}
    total_dues = sum(dues_by_student.values(), Decimal("0"))

    recent = sorted(store.payments, key=lambda p: p.payment_date, reverse=True)[:RECENT_PAYMENTS_LIMIT]
    with_dues = [s for s in students if dues_by_student[s.id] > 0]

    return DashboardStats(
        total_students=len(students),
        total_collected=total_collected,
        total_dues=total_dues,
        collection_rate=collection_rate(total_collected, total_dues),
        recent_payments=[payment_to_response(store, p) for p in recent],
        students_with_dues=[student_to_response(store, s) for s in with_dues[:STUDENTS_WITH_DUES_LIMIT]],
        students_with_dues_count=len(with_dues),
    )
