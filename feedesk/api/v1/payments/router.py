"""Payments router: record, list, read, receipt export."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from feedesk.auth.dependencies import get_current_user
from feedesk.core.exceptions import ServiceError
from feedesk.core.invoices import content_disposition
from feedesk.core.store import FeeStore
from feedesk.db.session import get_store

from .schemas import PaymentCreate, PaymentResponse
from . import service

router = APIRouter(
    prefix="/api/v1/payments",
    tags=["payments"],
    dependencies=[Depends(get_current_user)],
)


@router.post(
    "",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_payment(
    payload: PaymentCreate,
    store: FeeStore = Depends(get_store),
) -> PaymentResponse:
    return await service.create_payment(store, payload)


@router.get("", response_model=List[PaymentResponse])
async def list_payments(
    search: Optional[str] = Query(None, description="Match student name or receipt number"),
    student_id: Optional[str] = Query(None),
    store: FeeStore = Depends(get_store),
) -> List[PaymentResponse]:
    return await service.list_payments(store, search=search, student_id=student_id)


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: str,
    store: FeeStore = Depends(get_store),
) -> PaymentResponse:
    obj = await service.get_payment(store, payment_id)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return obj


@router.get("/{payment_id}/receipt", response_class=PlainTextResponse)
async def export_receipt(
    payment_id: str,
    store: FeeStore = Depends(get_store),
) -> PlainTextResponse:
    try:
        filename, content = await service.export_receipt(store, payment_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": content_disposition(filename)},
    )
