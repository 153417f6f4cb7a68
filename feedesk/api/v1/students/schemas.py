from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    roll_number: str = Field(..., min_length=1, max_length=50)
    class_name: str = Field(..., min_length=1, max_length=50)
    section: str = Field(..., max_length=20)
    parent_name: str = Field(..., max_length=200)
    parent_contact: str = Field(..., max_length=50)
    email: str = Field(..., max_length=255)
    admission_date: date


class StudentUpdate(BaseModel):
    """Partial update; only fields present in the request are merged."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    roll_number: Optional[str] = Field(None, min_length=1, max_length=50)
    class_name: Optional[str] = Field(None, min_length=1, max_length=50)
    section: Optional[str] = Field(None, max_length=20)
    parent_name: Optional[str] = Field(None, max_length=200)
    parent_contact: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    admission_date: Optional[date] = None


class StudentResponse(BaseModel):
    id: str
    name: str
    roll_number: str
    class_name: str
    section: str
    parent_name: str
    parent_contact: str
    email: str
    admission_date: date
    dues: Decimal = Field(..., description="Structure total minus completed payments; negative when overpaid")


class StudentDuesResponse(BaseModel):
    student_id: str
    dues: Decimal
