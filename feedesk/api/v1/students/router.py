"""Students router: CRUD, search, dues, passout list, fee types, invoice export."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from feedesk.auth.dependencies import get_current_user
from feedesk.core.exceptions import ServiceError
from feedesk.core.invoices import content_disposition
from feedesk.core.store import FeeStore
from feedesk.db.session import get_store

from feedesk.api.v1.fee_structures.schemas import FeeTypeResponse

from .schemas import StudentCreate, StudentDuesResponse, StudentResponse, StudentUpdate
from . import service

router = APIRouter(
    prefix="/api/v1/students",
    tags=["students"],
    dependencies=[Depends(get_current_user)],
)


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_student(
    payload: StudentCreate,
    store: FeeStore = Depends(get_store),
) -> StudentResponse:
    return await service.create_student(store, payload)


@router.get("", response_model=List[StudentResponse])
async def list_students(
    search: Optional[str] = Query(None, description="Match name, roll number or class"),
    store: FeeStore = Depends(get_store),
) -> List[StudentResponse]:
    return await service.list_students(store, search=search)


@router.get("/passout", response_model=List[StudentResponse])
async def list_passout_students(
    year: Optional[int] = Query(None, description="Reference year; defaults to the current year"),
    search: Optional[str] = Query(None),
    store: FeeStore = Depends(get_store),
) -> List[StudentResponse]:
    return await service.list_passout_students(store, reference_year=year, search=search)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: str,
    store: FeeStore = Depends(get_store),
) -> StudentResponse:
    obj = await service.get_student(store, student_id)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return obj


@router.patch("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: str,
    payload: StudentUpdate,
    store: FeeStore = Depends(get_store),
) -> StudentResponse:
    obj = await service.update_student(store, student_id, payload)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return obj


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(
    student_id: str,
    store: FeeStore = Depends(get_store),
) -> None:
    deleted = await service.delete_student(store, student_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")


@router.get("/{student_id}/dues", response_model=StudentDuesResponse)
async def get_student_dues(
    student_id: str,
    store: FeeStore = Depends(get_store),
) -> StudentDuesResponse:
    return await service.get_student_dues(store, student_id)


@router.get("/{student_id}/fee-types", response_model=List[FeeTypeResponse])
async def list_available_fee_types(
    student_id: str,
    store: FeeStore = Depends(get_store),
) -> List[FeeTypeResponse]:
    return await service.list_available_fee_types(store, student_id)


@router.get("/{student_id}/invoice", response_class=PlainTextResponse)
async def export_student_invoice(
    student_id: str,
    store: FeeStore = Depends(get_store),
) -> PlainTextResponse:
    try:
        filename, content = await service.export_student_invoice(store, student_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": content_disposition(filename)},
    )
