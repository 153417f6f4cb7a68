from typing import Optional

from fastapi import Request

from feedesk.core.config import settings
from feedesk.core.store import FeeStore
from feedesk.db.seed import seed_sample_data


def create_store(seed: Optional[bool] = None) -> FeeStore:
    """Fresh in-memory store; seeded with sample data unless disabled."""
    store = FeeStore(receipt_prefix=settings.receipt_prefix)
    if settings.seed_sample_data if seed is None else seed:
        seed_sample_data(store)
    return store


def get_store(request: Request) -> FeeStore:
    return request.app.state.store
