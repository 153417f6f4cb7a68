from decimal import Decimal
from typing import List, Optional

from feedesk.core.models import FeeStructure
from feedesk.core.store import FeeStore

from .schemas import FeeStructureCreate, FeeStructureResponse


def _structure_to_response(fs: FeeStructure) -> FeeStructureResponse:
    return FeeStructureResponse.model_validate(fs, from_attributes=True)


async def create_fee_structure(
    store: FeeStore,
    payload: FeeStructureCreate,
) -> FeeStructureResponse:
    total_amount = payload.total_amount
    if total_amount is None:
        total_amount = sum((ft.amount for ft in payload.fee_types), Decimal("0"))
    structure = store.add_fee_structure(
        {
            "name": payload.name.strip(),
            "class_name": payload.class_name.strip(),
            "fee_types": [ft.model_dump() for ft in payload.fee_types],
            "total_amount": total_amount,
        }
    )
    return _structure_to_response(structure)


async def list_fee_structures(
    store: FeeStore,
    class_name: Optional[str] = None,
) -> List[FeeStructureResponse]:
    structures = store.fee_structures
    if class_name is not None:
        structures = [fs for fs in structures if fs.class_name == class_name]
    return [_structure_to_response(fs) for fs in structures]


async def get_fee_structure(
    store: FeeStore,
    structure_id: str,
) -> Optional[FeeStructureResponse]:
    structure = store.get_fee_structure(structure_id)
    return _structure_to_response(structure) if structure else None
