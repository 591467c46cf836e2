"""Tests for document endpoints."""

import io

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook


@pytest.fixture
def document_payload() -> dict:
    return {
        "line_items": [
            {"description": "Website redesign", "quantity": 1, "unit_price": "12000"},
            {"description": "Hosting (annual)", "quantity": 2, "unit_price": "1500"},
        ],
        "discount": {"type": "PERCENTAGE", "value": 10},
        "tax_rate": "18",
        "company": {
            "company_name": "Acme Digital",
            "upi_id": "acme@okhdfcbank",
            "invoice_terms": "1. Payment due in 15 days. 2. Late fee 2% per month.",
        },
        "client": {"name": "Globex Pvt Ltd"},
        "meta": {"kind": "INVOICE", "number": "INV-2024-001", "amount_paid": "5000"},
    }


class TestTotals:
    """Tests for POST /api/documents/totals."""

    def test_totals(self, client: TestClient, document_payload: dict):
        response = client.post("/api/documents/totals", json=document_payload)
        assert response.status_code == 200
        data = response.json()
        assert data["total_amount"] == "15930.00"
        assert data["tax_label"] == "Tax (18%)"
        assert data["amount_in_words"] == "Fifteen Thousand Nine Hundred Thirty Rupees Only"
        assert data["formatted_total"] == "₹15,930.00"
        assert data["warnings"] == []

    def test_negative_price_is_400(self, client: TestClient, document_payload: dict):
        document_payload["line_items"][0]["unit_price"] = "-5"
        response = client.post("/api/documents/totals", json=document_payload)
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert "line_items[0].unit_price" in data["detail"]

    def test_empty_items_is_422(self, client: TestClient):
        response = client.post("/api/documents/totals", json={"line_items": []})
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("quantity", [None, True, {"value": 1}])
    def test_non_numeric_quantity_is_422(self, client: TestClient, document_payload: dict, quantity):
        document_payload["line_items"][0]["quantity"] = quantity
        response = client.post("/api/documents/totals", json=document_payload)
        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert "quantity" in data["detail"]


class TestRender:
    """Tests for POST /api/documents/render."""

    def test_pdf_download(self, client: TestClient, document_payload: dict):
        response = client.post("/api/documents/render", json=document_payload)
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == 'attachment; filename="invoice_INV-2024-001.pdf"'
        assert response.content[:5] == b"%PDF-"

    def test_html_inline(self, client: TestClient, document_payload: dict):
        response = client.post("/api/documents/render?format=html", json=document_payload)
        assert response.status_code == 200
        assert response.headers["content-disposition"].startswith("inline;")
        assert "Scan to Pay" in response.text
        assert "Ten Thousand Nine Hundred Thirty Rupees Only" in response.text

    def test_xlsx(self, client: TestClient, document_payload: dict):
        response = client.post("/api/documents/render?format=xlsx", json=document_payload)
        assert response.status_code == 200
        sheet = load_workbook(io.BytesIO(response.content)).active
        assert sheet["A2"].value == "Invoice INV-2024-001"

    def test_unsupported_format(self, client: TestClient, document_payload: dict):
        response = client.post("/api/documents/render?format=docx", json=document_payload)
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "UNSUPPORTED_FORMAT"
        assert data["hint"] == "Use one of the formats listed in the error detail."

    def test_missing_client_is_422(self, client: TestClient, document_payload: dict):
        del document_payload["client"]
        response = client.post("/api/documents/render", json=document_payload)
        assert response.status_code == 422
