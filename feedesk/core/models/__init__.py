from feedesk.core.models.student import Student
from feedesk.core.models.fee_structure import FeeStructure, FeeType
from feedesk.core.models.payment import Payment

__all__ = [
    "Student",
    "FeeType",
    "FeeStructure",
    "Payment",
]
