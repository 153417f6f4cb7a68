"""Student: enrolled pupil whose fees are tracked."""

from datetime import date

from pydantic import BaseModel


class Student(BaseModel):
    """Student profile. `class_name` links the student to a fee structure."""

    id: str
    name: str
    roll_number: str
    class_name: str
    section: str
    parent_name: str
    parent_contact: str
    email: str
    admission_date: date
