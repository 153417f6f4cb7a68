import pytest
from httpx import AsyncClient

from feedesk.core.store import FeeStore


CLASS_9 = {
    "name": "Class 9 Fee Structure",
    "class_name": "9",
    "fee_types": [
        {"name": "Tuition Fee", "amount": 4000, "frequency": "monthly", "category": "tuition"},
        {"name": "Sports Fee", "amount": 1000, "frequency": "yearly", "category": "sports"},
    ],
}


@pytest.mark.asyncio
async def test_create_fee_structure_sums_when_total_missing(auth_client: AsyncClient) -> None:
    response = await auth_client.post("/api/v1/fee-structures", json=CLASS_9)
    assert response.status_code == 201
    data = response.json()

    assert data["id"] == "2"
    assert float(data["total_amount"]) == 5000
    assert [ft["id"] for ft in data["fee_types"]] == ["4", "5"]
    assert [ft["name"] for ft in data["fee_types"]] == ["Tuition Fee", "Sports Fee"]


@pytest.mark.asyncio
async def test_create_fee_structure_keeps_given_total(auth_client: AsyncClient, store: FeeStore) -> None:
    response = await auth_client.post("/api/v1/fee-structures", json={**CLASS_9, "total_amount": 4500})
    assert response.status_code == 201
    assert float(response.json()["total_amount"]) == 4500
    assert store.get_fee_structure("2").total_amount == 4500


@pytest.mark.asyncio
async def test_create_fee_structure_requires_fee_types(auth_client: AsyncClient) -> None:
    response = await auth_client.post("/api/v1/fee-structures", json={**CLASS_9, "fee_types": []})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_fee_structure_rejects_bad_enum(auth_client: AsyncClient) -> None:
    bad = {**CLASS_9, "fee_types": [{"name": "X", "amount": 1, "frequency": "weekly", "category": "other"}]}
    response = await auth_client.post("/api/v1/fee-structures", json=bad)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_fee_structure_rejects_negative_amount(auth_client: AsyncClient) -> None:
    bad = {**CLASS_9, "fee_types": [{"name": "X", "amount": -1, "frequency": "one-time", "category": "other"}]}
    response = await auth_client.post("/api/v1/fee-structures", json=bad)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_and_get_fee_structures(auth_client: AsyncClient) -> None:
    await auth_client.post("/api/v1/fee-structures", json=CLASS_9)

    response = await auth_client.get("/api/v1/fee-structures")
    assert [fs["class_name"] for fs in response.json()] == ["10", "9"]

    response = await auth_client.get("/api/v1/fee-structures", params={"class_name": "9"})
    assert [fs["name"] for fs in response.json()] == ["Class 9 Fee Structure"]

    response = await auth_client.get("/api/v1/fee-structures/1")
    assert response.status_code == 200
    assert response.json()["name"] == "Class 10 Fee Structure"

    response = await auth_client.get("/api/v1/fee-structures/404")
    assert response.status_code == 404
