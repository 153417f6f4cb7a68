"""
Sample data loaded into a fresh store at startup.

Mirrors the records the dashboard shipped with: two class-10 students, one
class-10 fee structure (tuition, transport, library) and one completed payment.
"""
from datetime import date
from decimal import Decimal

from feedesk.core.enums import FeeCategory, FeeFrequency, PaymentMethod, PaymentStatus
from feedesk.core.models import FeeStructure, FeeType, Payment, Student
from feedesk.core.store import FeeStore


SAMPLE_STUDENTS = [
    Student(
        id="1",
        name="John Doe",
        roll_number="2024001",
        class_name="10",
        section="A",
        parent_name="Robert Doe",
        parent_contact="+1234567890",
        email="john.doe@email.com",
        admission_date=date(2024, 1, 15),
    ),
    Student(
        id="2",
        name="Jane Smith",
        roll_number="2024002",
        class_name="10",
        section="B",
        parent_name="Michael Smith",
        parent_contact="+1234567891",
        email="jane.smith@email.com",
        admission_date=date(2024, 1, 16),
    ),
]

SAMPLE_FEE_STRUCTURES = [
    FeeStructure(
        id="1",
        name="Class 10 Fee Structure",
        class_name="10",
        fee_types=[
            FeeType(id="1", name="Tuition Fee", amount=Decimal("5000"), frequency=FeeFrequency.MONTHLY, category=FeeCategory.TUITION),
            FeeType(id="2", name="Transport Fee", amount=Decimal("1500"), frequency=FeeFrequency.MONTHLY, category=FeeCategory.TRANSPORT),
            FeeType(id="3", name="Library Fee", amount=Decimal("500"), frequency=FeeFrequency.YEARLY, category=FeeCategory.LIBRARY),
        ],
        total_amount=Decimal("7000"),
    ),
]

SAMPLE_PAYMENTS = [
    Payment(
        id="1",
        student_id="1",
        fee_type_id="1",
        amount=Decimal("5000"),
        payment_date=date(2024, 1, 15),
        method=PaymentMethod.ONLINE,
        receipt_number="RCP001",
        status=PaymentStatus.completed,
    ),
]


def seed_sample_data(store: FeeStore) -> None:
    """Load the sample records. Records are copied so each store owns its own instances."""
    store.load(
        students=[s.model_copy(deep=True) for s in SAMPLE_STUDENTS],
        fee_structures=[fs.model_copy(deep=True) for fs in SAMPLE_FEE_STRUCTURES],
        payments=[p.model_copy(deep=True) for p in SAMPLE_PAYMENTS],
    )
