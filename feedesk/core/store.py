"""In-memory fee store: students, fee structures, payments and the dues query."""

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional

from feedesk.core.enums import PaymentStatus
from feedesk.core.identifiers import IdGenerator, ReceiptNumberGenerator
from feedesk.core.invoices import UNKNOWN_FEE_NAME
from feedesk.core.models import FeeStructure, FeeType, Payment, Student

logger = logging.getLogger(__name__)


def _to_decimal(val) -> Decimal:
    if val is None:
        return Decimal("0")
    return val if isinstance(val, Decimal) else Decimal(str(val))


class FeeStore:
    """
    Sole owner of the three record collections.

    Lookups that miss return None / False / 0 instead of raising; callers
    decide whether absence is an error. Derived values are recomputed by a
    full scan on every call.
    """

    def __init__(self, receipt_prefix: str = "RCP") -> None:
        self._students: List[Student] = []
        self._fee_structures: List[FeeStructure] = []
        self._payments: List[Payment] = []

        self._student_ids = IdGenerator()
        self._structure_ids = IdGenerator()
        self._fee_type_ids = IdGenerator()
        self._payment_ids = IdGenerator()
        self._receipts = ReceiptNumberGenerator(prefix=receipt_prefix)

    # --- Snapshots ---
    @property
    def students(self) -> List[Student]:
        return list(self._students)

    @property
    def fee_structures(self) -> List[FeeStructure]:
        return list(self._fee_structures)

    @property
    def payments(self) -> List[Payment]:
        return list(self._payments)

    def load(
        self,
        students: Iterable[Student] = (),
        fee_structures: Iterable[FeeStructure] = (),
        payments: Iterable[Payment] = (),
    ) -> None:
        """Insert fully-built records (sample data). Id counters move past the loaded ids."""
        self._students.extend(students)
        self._fee_structures.extend(fee_structures)
        self._payments.extend(payments)

        self._student_ids.advance_past(s.id for s in self._students)
        self._structure_ids.advance_past(fs.id for fs in self._fee_structures)
        self._fee_type_ids.advance_past(ft.id for fs in self._fee_structures for ft in fs.fee_types)
        self._payment_ids.advance_past(p.id for p in self._payments)
        for p in self._payments:
            self._receipts.reserve(p.receipt_number)

    # --- Students ---
    def add_student(self, data: Mapping[str, Any]) -> Student:
        fields = {k: v for k, v in data.items() if k != "id"}
        student = Student(id=self._student_ids.next_id(), **fields)
        self._students.append(student)
        logger.info("Added student %s (%s)", student.id, student.name)
        return student

    def get_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def update_student(self, student_id: str, changes: Mapping[str, Any]) -> Optional[Student]:
        """Shallow-merge changes into the student. Returns None when the id is unknown."""
        for index, student in enumerate(self._students):
            if student.id != student_id:
                continue
            merged = {**student.model_dump(), **{k: v for k, v in changes.items() if k != "id"}}
            updated = Student.model_validate(merged)
            self._students[index] = updated
            logger.info("Updated student %s", student_id)
            return updated
        logger.debug("Update skipped: no student %s", student_id)
        return None

    def delete_student(self, student_id: str) -> bool:
        """Remove the student. Payments referencing it are left as they are."""
        remaining = [s for s in self._students if s.id != student_id]
        if len(remaining) == len(self._students):
            logger.debug("Delete skipped: no student %s", student_id)
            return False
        self._students = remaining
        logger.info("Deleted student %s", student_id)
        return True

    # --- Fee structures ---
    def add_fee_structure(self, data: Mapping[str, Any]) -> FeeStructure:
        """total_amount is stored exactly as given; it is never derived from the fee types."""
        fee_types = []
        for item in data.get("fee_types") or []:
            item = dict(item)
            if not item.get("id"):
                item["id"] = self._fee_type_ids.next_id()
            fee_types.append(FeeType.model_validate(item))
        structure = FeeStructure(
            id=self._structure_ids.next_id(),
            name=data["name"],
            class_name=data["class_name"],
            fee_types=fee_types,
            total_amount=_to_decimal(data.get("total_amount")),
        )
        self._fee_structures.append(structure)
        logger.info(
            "Added fee structure %s for class %s (%d fee types, total %s)",
            structure.id, structure.class_name, len(fee_types), structure.total_amount,
        )
        return structure

    def get_fee_structure(self, structure_id: str) -> Optional[FeeStructure]:
        return next((fs for fs in self._fee_structures if fs.id == structure_id), None)

    def find_structure_for_class(self, class_name: str) -> Optional[FeeStructure]:
        """First structure whose class label matches."""
        return next((fs for fs in self._fee_structures if fs.class_name == class_name), None)

    def find_fee_type(self, fee_type_id: str) -> Optional[FeeType]:
        for structure in self._fee_structures:
            for fee_type in structure.fee_types:
                if fee_type.id == fee_type_id:
                    return fee_type
        return None

    def fee_type_name(self, fee_type_id: str) -> str:
        fee_type = self.find_fee_type(fee_type_id)
        return fee_type.name if fee_type else UNKNOWN_FEE_NAME

    def fee_type_names(self) -> Dict[str, str]:
        """fee_type_id -> name; the first structure containing an id wins."""
        names: Dict[str, str] = {}
        for structure in self._fee_structures:
            for fee_type in structure.fee_types:
                names.setdefault(fee_type.id, fee_type.name)
        return names

    # --- Payments ---
    def add_payment(self, data: Mapping[str, Any]) -> Payment:
        fields = {k: v for k, v in data.items() if k not in ("id", "receipt_number")}
        fields.setdefault("status", PaymentStatus.completed)
        payment = Payment(
            id=self._payment_ids.next_id(),
            receipt_number=self._receipts.next_receipt_number(),
            **fields,
        )
        self._payments.append(payment)
        logger.info(
            "Recorded payment %s (%s) of %s for student %s",
            payment.id, payment.receipt_number, payment.amount, payment.student_id,
        )
        return payment

    def get_payment(self, payment_id: str) -> Optional[Payment]:
        return next((p for p in self._payments if p.id == payment_id), None)

    def payments_for_student(
        self,
        student_id: str,
        status: Optional[PaymentStatus] = None,
    ) -> List[Payment]:
        return [
            p for p in self._payments
            if p.student_id == student_id and (status is None or p.status == status)
        ]

    # --- Derived ---
    def get_student_dues(self, student_id: str) -> Decimal:
        """
        Structure total minus the student's completed payments.

        0 when the student or a structure for its class is missing. The result
        is signed: overpayment gives a negative number.
        """
        student = self.get_student(student_id)
        if not student:
            return Decimal("0")
        structure = self.find_structure_for_class(student.class_name)
        if not structure:
            return Decimal("0")
        paid = sum(
            (p.amount for p in self.payments_for_student(student_id, PaymentStatus.completed)),
            Decimal("0"),
        )
        return structure.total_amount - paid
