import pytest
from httpx import AsyncClient

from feedesk.core.store import FeeStore


NEW_STUDENT = {
    "name": "Asha Rao",
    "roll_number": "2024101",
    "class_name": "10",
    "section": "C",
    "parent_name": "Vikram Rao",
    "parent_contact": "+1234500000",
    "email": "asha.rao@email.com",
    "admission_date": "2024-06-01",
}


@pytest.mark.asyncio
async def test_list_students_includes_dues(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students")
    assert response.status_code == 200
    data = response.json()

    assert [s["name"] for s in data] == ["John Doe", "Jane Smith"]
    assert float(data[0]["dues"]) == 2000
    assert float(data[1]["dues"]) == 7000


@pytest.mark.asyncio
async def test_create_student(auth_client: AsyncClient, store: FeeStore) -> None:
    response = await auth_client.post("/api/v1/students", json=NEW_STUDENT)
    assert response.status_code == 201
    data = response.json()

    assert data["id"] == "3"
    assert data["class_name"] == "10"
    assert float(data["dues"]) == 7000
    assert store.get_student("3").name == "Asha Rao"


@pytest.mark.asyncio
async def test_create_student_missing_field(auth_client: AsyncClient) -> None:
    payload = {k: v for k, v in NEW_STUDENT.items() if k != "name"}

    response = await auth_client.post("/api/v1/students", json=payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_search_students(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students", params={"search": "jane"})
    assert [s["name"] for s in response.json()] == ["Jane Smith"]

    response = await auth_client.get("/api/v1/students", params={"search": "2024001"})
    assert [s["name"] for s in response.json()] == ["John Doe"]

    response = await auth_client.get("/api/v1/students", params={"search": "10"})
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_get_student(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students/1")
    assert response.status_code == 200
    assert response.json()["roll_number"] == "2024001"

    response = await auth_client.get("/api/v1/students/404")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_student_partial(auth_client: AsyncClient) -> None:
    response = await auth_client.patch("/api/v1/students/2", json={"section": "D"})
    assert response.status_code == 200
    data = response.json()

    assert data["section"] == "D"
    assert data["name"] == "Jane Smith"


@pytest.mark.asyncio
async def test_update_unknown_student(auth_client: AsyncClient) -> None:
    response = await auth_client.patch("/api/v1/students/404", json={"section": "D"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_student_keeps_payments(auth_client: AsyncClient, store: FeeStore) -> None:
    response = await auth_client.delete("/api/v1/students/1")
    assert response.status_code == 204

    assert store.get_student("1") is None
    assert [p.student_id for p in store.payments] == ["1"]

    dues = await auth_client.get("/api/v1/students/1/dues")
    assert dues.status_code == 200
    assert float(dues.json()["dues"]) == 0

    again = await auth_client.delete("/api/v1/students/1")
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_student_dues(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students/1/dues")
    assert response.status_code == 200
    assert response.json()["student_id"] == "1"
    assert float(response.json()["dues"]) == 2000


@pytest.mark.asyncio
async def test_available_fee_types(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students/1/fee-types")
    assert [ft["name"] for ft in response.json()] == ["Tuition Fee", "Transport Fee", "Library Fee"]

    await auth_client.patch("/api/v1/students/2", json={"class_name": "12"})
    response = await auth_client.get("/api/v1/students/2/fee-types")
    assert response.json() == []

    response = await auth_client.get("/api/v1/students/404/fee-types")
    assert response.json() == []


@pytest.mark.asyncio
async def test_passout_students(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students/passout", params={"year": 2028})
    assert [s["name"] for s in response.json()] == ["John Doe", "Jane Smith"]

    response = await auth_client.get("/api/v1/students/passout", params={"year": 2027})
    assert response.json() == []

    response = await auth_client.get("/api/v1/students/passout", params={"year": 2030, "search": "smith"})
    assert [s["name"] for s in response.json()] == ["Jane Smith"]


@pytest.mark.asyncio
async def test_export_invoice(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students/1/invoice")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")

    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="invoice-John-Doe-')
    assert "filename*=UTF-8''invoice-John-Doe-" in disposition

    text = response.text
    assert text.startswith("STUDENT PAYMENT INVOICE")
    assert "JANUARY 2024" in text
    assert "Total Amount Paid: ₹5,000" in text
    assert "Outstanding Amount: ₹2,000" in text
    assert "Current Dues: ₹2,000" in text


@pytest.mark.asyncio
async def test_export_invoice_unknown_student(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/students/404/invoice")
    assert response.status_code == 404
    assert response.json()["detail"] == "Student not found"


@pytest.mark.asyncio
async def test_export_invoice_non_ascii_name(auth_client: AsyncClient) -> None:
    created = await auth_client.post("/api/v1/students", json={**NEW_STUDENT, "name": "राम शर्मा"})
    assert created.status_code == 201

    response = await auth_client.get(f"/api/v1/students/{created.json()['id']}/invoice")
    assert response.status_code == 200

    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="invoice-')
    assert "filename*=UTF-8''invoice-%E0%A4%B0%E0%A4%BE%E0%A4%AE-" in disposition
    assert "Name: राम शर्मा" in response.text
