"""Plain-text receipts and per-student payment invoices. Pure functions: no store access, no I/O."""

import calendar
import re
import unicodedata
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional
from urllib.parse import quote

from pydantic import BaseModel

from feedesk.core.enums import PaymentStatus
from feedesk.core.models import FeeStructure, Payment, Student

DEFAULT_CURRENCY = "₹"
UNKNOWN_FEE_NAME = "Unknown Fee"


class InvoiceSummary(BaseModel):
    """Numbers printed in the invoice SUMMARY block.

    outstanding and current_dues come from two unrelated formulas and can
    disagree; outstanding is None when the student's class has no structure.
    """

    months_with_payments: int
    total_paid: Decimal
    outstanding: Optional[Decimal] = None
    current_dues: Decimal


def format_amount(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    return f"{currency}{_group_digits(amount)}"


def _group_digits(amount: Decimal) -> str:
    amount = Decimal(amount)
    if amount == amount.to_integral_value():
        return f"{int(amount):,}"
    return f"{amount.normalize():,}"


def _class_label(student: Student) -> str:
    return f"{student.class_name}-{student.section}" if student.section else student.class_name


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def group_payments_by_month(payments: Iterable[Payment]) -> Dict[str, List[Payment]]:
    """Group by YYYY-MM of the payment date; keys come back in ascending order."""
    grouped: Dict[str, List[Payment]] = defaultdict(list)
    for payment in payments:
        grouped[month_key(payment.payment_date)].append(payment)
    return {key: grouped[key] for key in sorted(grouped)}


def summarize_invoice(
    payments: Iterable[Payment],
    fee_structure: Optional[FeeStructure],
) -> InvoiceSummary:
    completed = [p for p in payments if p.status == PaymentStatus.completed]
    months = len(group_payments_by_month(completed))
    total_paid = sum((p.amount for p in completed), Decimal("0"))

    if fee_structure is None:
        return InvoiceSummary(
            months_with_payments=months,
            total_paid=total_paid,
            outstanding=None,
            current_dues=Decimal("0"),
        )

    total = fee_structure.total_amount
    outstanding = max(Decimal("0"), total * months - total_paid)
    divisor = total or Decimal("1")
    current_dues = max(Decimal("0"), total - (total_paid % divisor))
    return InvoiceSummary(
        months_with_payments=months,
        total_paid=total_paid,
        outstanding=outstanding,
        current_dues=current_dues,
    )


def format_receipt(
    payment: Payment,
    student: Optional[Student],
    fee_type_name: str,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    lines = [
        "SCHOOL FEE RECEIPT",
        f"Receipt No: {payment.receipt_number}",
        f"Date: {payment.payment_date.isoformat()}",
        "",
        f"Student: {student.name if student else 'Unknown Student'}",
        f"Class: {_class_label(student) if student else '-'}",
        "",
        f"Fee Type: {fee_type_name}",
        f"Amount: {format_amount(payment.amount, currency)}",
        f"Payment Method: {payment.method.value.upper()}",
        "",
        f"Status: {payment.status.value.upper()}",
    ]
    return "\n".join(lines) + "\n"


def _payment_line(payment: Payment, fee_type_name: str, currency: str) -> str:
    return (
        f"{payment.payment_date.isoformat():<12} "
        f"{fee_type_name:<20} "
        f"{currency}{_group_digits(payment.amount):>10} "
        f"{payment.method.value.upper():<10} "
        f"{payment.receipt_number}"
    )


def format_student_invoice(
    student: Student,
    payments: Iterable[Payment],
    fee_structure: Optional[FeeStructure],
    fee_type_names: Optional[Mapping[str, str]] = None,
    generated_on: Optional[date] = None,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """
    Payment history of one student, grouped by month, followed by a summary.

    Only completed payments belonging to the student are listed. fee_type_names
    maps fee type ids to display names; ids missing from it fall back to the
    structure's own fee types, then to "Unknown Fee".
    """
    names: Dict[str, str] = {}
    if fee_structure is not None:
        names.update({ft.id: ft.name for ft in fee_structure.fee_types})
    if fee_type_names:
        names.update(fee_type_names)
    generated_on = generated_on or date.today()

    completed = [
        p for p in payments
        if p.student_id == student.id and p.status == PaymentStatus.completed
    ]
    by_month = group_payments_by_month(completed)
    summary = summarize_invoice(completed, fee_structure)

    lines = [
        "STUDENT PAYMENT INVOICE",
        f"Generated on: {generated_on.isoformat()}",
        "",
        "Student Details:",
        f"Name: {student.name}",
        f"Roll Number: {student.roll_number}",
        f"Class: {_class_label(student)}",
        f"Parent: {student.parent_name}",
        f"Contact: {student.parent_contact}",
        f"Email: {student.email}",
        f"Admission Date: {student.admission_date.isoformat()}",
        "",
        f"Fee Structure (Class {student.class_name}):",
    ]
    if fee_structure is not None:
        lines.append(f"Structure: {fee_structure.name}")
        for fee_type in fee_structure.fee_types:
            lines.append(
                f"{fee_type.name}: {format_amount(fee_type.amount, currency)} ({fee_type.frequency.value})"
            )
        lines.append(f"Total Monthly Fee: {format_amount(fee_structure.total_amount, currency)}")
    else:
        lines.append("No fee structure assigned to this class.")

    lines += ["", "PAYMENT HISTORY", "==============="]

    if not by_month:
        structure_total = fee_structure.total_amount if fee_structure is not None else Decimal("0")
        lines += [
            "",
            "No payments recorded yet.",
            "",
            f"Outstanding Amount: {format_amount(structure_total, currency)}",
        ]
    for key, month_payments in by_month.items():
        year, month = (int(part) for part in key.split("-"))
        month_name = f"{calendar.month_name[month]} {year}"
        lines += ["", month_name.upper(), "-" * (len(month_name) + 10)]
        month_total = Decimal("0")
        for payment in month_payments:
            lines.append(_payment_line(payment, names.get(payment.fee_type_id, UNKNOWN_FEE_NAME), currency))
            month_total += payment.amount
        lines.append(f"{' ' * 32} Month Total: {format_amount(month_total, currency)}")

    lines += [
        "",
        "SUMMARY",
        "=======",
        f"Total Months with Payments: {summary.months_with_payments}",
        f"Total Amount Paid: {format_amount(summary.total_paid, currency)}",
    ]
    if summary.outstanding is not None:
        lines.append(f"Outstanding Amount: {format_amount(summary.outstanding, currency)}")
    lines.append(f"Current Dues: {format_amount(summary.current_dues, currency)}")
    lines += ["", "Note: This invoice shows all payment records for this student."]
    if not completed:
        lines.append("No payments have been recorded yet.")
    return "\n".join(lines) + "\n"


def receipt_filename(payment: Payment) -> str:
    return f"receipt-{payment.receipt_number}.txt"


def invoice_filename(student: Student, on: Optional[date] = None) -> str:
    on = on or date.today()
    slug = re.sub(r"\s+", "-", student.name)
    return f"invoice-{slug}-{on.isoformat()}.txt"


def content_disposition(filename: str) -> str:
    """
    Attachment header value that survives non-ASCII names.

    HTTP headers are latin-1, so the plain filename= part carries an ASCII
    fallback and filename*= (RFC 5987) carries the UTF-8 name.
    """
    ascii_name = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    ascii_name = re.sub(r'["\\]', "", ascii_name)
    ascii_name = re.sub(r"-{2,}", "-", ascii_name) or "download.txt"
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename, safe='')}"
