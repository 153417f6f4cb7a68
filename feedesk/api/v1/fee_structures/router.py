"""Fee structures router: create, list, read."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from feedesk.auth.dependencies import get_current_user
from feedesk.core.store import FeeStore
from feedesk.db.session import get_store

from .schemas import FeeStructureCreate, FeeStructureResponse
from . import service

router = APIRouter(
    prefix="/api/v1/fee-structures",
    tags=["fee-structures"],
    dependencies=[Depends(get_current_user)],
)


@router.post(
    "",
    response_model=FeeStructureResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_fee_structure(
    payload: FeeStructureCreate,
    store: FeeStore = Depends(get_store),
) -> FeeStructureResponse:
    return await service.create_fee_structure(store, payload)


@router.get("", response_model=List[FeeStructureResponse])
async def list_fee_structures(
    class_name: Optional[str] = Query(None, description="Only structures for this class label"),
    store: FeeStore = Depends(get_store),
) -> List[FeeStructureResponse]:
    return await service.list_fee_structures(store, class_name=class_name)


@router.get("/{structure_id}", response_model=FeeStructureResponse)
async def get_fee_structure(
    structure_id: str,
    store: FeeStore = Depends(get_store),
) -> FeeStructureResponse:
    obj = await service.get_fee_structure(store, structure_id)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fee structure not found")
    return obj
