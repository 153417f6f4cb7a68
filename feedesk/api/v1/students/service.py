"""Students service: CRUD, search, dues, passout list, invoice export."""

from datetime import date
from typing import List, Optional, Tuple

from fastapi import status

from feedesk.core.config import settings
from feedesk.core.exceptions import ServiceError
from feedesk.core.invoices import format_student_invoice, invoice_filename
from feedesk.core.models import Student
from feedesk.core.store import FeeStore

from feedesk.api.v1.fee_structures.schemas import FeeTypeResponse

from .schemas import StudentCreate, StudentDuesResponse, StudentResponse, StudentUpdate


def student_to_response(store: FeeStore, s: Student) -> StudentResponse:
    return StudentResponse(
        id=s.id,
        name=s.name,
        roll_number=s.roll_number,
        class_name=s.class_name,
        section=s.section,
        parent_name=s.parent_name,
        parent_contact=s.parent_contact,
        email=s.email,
        admission_date=s.admission_date,
        dues=store.get_student_dues(s.id),
    )


def matches_search(student: Student, search: str) -> bool:
    """Name or roll number (case-insensitive) or class label contains the term."""
    term = search.lower()
    return (
        term in student.name.lower()
        or term in student.roll_number.lower()
        or search in student.class_name
    )


async def create_student(store: FeeStore, payload: StudentCreate) -> StudentResponse:
    student = store.add_student(payload.model_dump())
    return student_to_response(store, student)


async def list_students(
    store: FeeStore,
    search: Optional[str] = None,
) -> List[StudentResponse]:
    students = store.students
    if search:
        students = [s for s in students if matches_search(s, search)]
    return [student_to_response(store, s) for s in students]


async def get_student(store: FeeStore, student_id: str) -> Optional[StudentResponse]:
    student = store.get_student(student_id)
    return student_to_response(store, student) if student else None


async def update_student(
    store: FeeStore,
    student_id: str,
    payload: StudentUpdate,
) -> Optional[StudentResponse]:
    changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    student = store.update_student(student_id, changes)
    return student_to_response(store, student) if student else None


async def delete_student(store: FeeStore, student_id: str) -> bool:
    return store.delete_student(student_id)


async def get_student_dues(store: FeeStore, student_id: str) -> StudentDuesResponse:
    """Unknown students report zero dues."""
    return StudentDuesResponse(student_id=student_id, dues=store.get_student_dues(student_id))


async def list_passout_students(
    store: FeeStore,
    reference_year: Optional[int] = None,
    search: Optional[str] = None,
) -> List[StudentResponse]:
    """Students admitted at least `passout_after_years` years before the reference year."""
    year = reference_year or date.today().year
    passed_out = [
        s for s in store.students
        if year - s.admission_date.year >= settings.passout_after_years
    ]
    if search:
        passed_out = [s for s in passed_out if matches_search(s, search)]
    return [student_to_response(store, s) for s in passed_out]


async def list_available_fee_types(store: FeeStore, student_id: str) -> List[FeeTypeResponse]:
    """Fee types of the structure for the student's class; empty when there is none."""
    student = store.get_student(student_id)
    if not student:
        return []
    structure = store.find_structure_for_class(student.class_name)
    if not structure:
        return []
    return [FeeTypeResponse.model_validate(ft, from_attributes=True) for ft in structure.fee_types]


async def export_student_invoice(
    store: FeeStore,
    student_id: str,
    on: Optional[date] = None,
) -> Tuple[str, str]:
    """Return (filename, invoice text) for the student."""
    student = store.get_student(student_id)
    if not student:
        raise ServiceError("Student not found", status.HTTP_404_NOT_FOUND)
    on = on or date.today()
    content = format_student_invoice(
        student,
        store.payments_for_student(student.id),
        store.find_structure_for_class(student.class_name),
        fee_type_names=store.fee_type_names(),
        generated_on=on,
        currency=settings.currency_symbol,
    )
    return invoice_filename(student, on), content
