import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from feedesk.api.v1.auth.router import router as auth_router
from feedesk.api.v1.dashboard.router import router as dashboard_router
from feedesk.api.v1.fee_structures.router import router as fee_structures_router
from feedesk.api.v1.payments.router import router as payments_router
from feedesk.api.v1.students.router import router as students_router
from feedesk.core.config import settings
from feedesk.core.store import FeeStore
from feedesk.db.session import create_store


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(store: Optional[FeeStore] = None) -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.app_name)

    # All records live on this store for the lifetime of the app.
    app.state.store = store if store is not None else create_store()

    # CORS: allow the dashboard frontend to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(auth_router)
    app.include_router(students_router)
    app.include_router(fee_structures_router)
    app.include_router(payments_router)
    app.include_router(dashboard_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
