from decimal import Decimal

import pytest
from httpx import AsyncClient

from feedesk.api.v1.dashboard.service import collection_rate


@pytest.mark.asyncio
async def test_dashboard_with_sample_data(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/dashboard")
    assert response.status_code == 200
    data = response.json()

    assert data["total_students"] == 2
    assert float(data["total_collected"]) == 5000
    assert float(data["total_dues"]) == 9000
    assert data["collection_rate"] == 36
    assert [p["receipt_number"] for p in data["recent_payments"]] == ["RCP001"]
    assert data["students_with_dues_count"] == 2


@pytest.mark.asyncio
async def test_dashboard_recent_payments_newest_first(auth_client: AsyncClient) -> None:
    for day in ("2024-03-01", "2024-02-01", "2024-05-01", "2024-04-01", "2024-06-01"):
        await auth_client.post(
            "/api/v1/payments",
            json={"student_id": "2", "fee_type_id": "3", "amount": 100, "payment_date": day, "method": "card"},
        )

    data = (await auth_client.get("/api/v1/dashboard")).json()
    dates = [p["payment_date"] for p in data["recent_payments"]]

    assert dates == ["2024-06-01", "2024-05-01", "2024-04-01", "2024-03-01", "2024-02-01"]


@pytest.mark.asyncio
async def test_dashboard_counts_orphaned_payments(auth_client: AsyncClient) -> None:
    await auth_client.delete("/api/v1/students/1")

    data = (await auth_client.get("/api/v1/dashboard")).json()

    assert data["total_students"] == 1
    assert float(data["total_collected"]) == 5000
    assert float(data["total_dues"]) == 7000
    assert [s["name"] for s in data["students_with_dues"]] == ["Jane Smith"]


def test_collection_rate() -> None:
    assert collection_rate(Decimal("0"), Decimal("9000")) == 0
    assert collection_rate(Decimal("5000"), Decimal("9000")) == 36
    assert collection_rate(Decimal("100"), Decimal("0")) == 100
    assert collection_rate(Decimal("100"), Decimal("-100")) == 100
