"""Integration tests for standardized error responses."""

import logging
from uuid import uuid4

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_auth_error_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/orders/")
        assert response.status_code == 401
        data = response.json()
        assert data["type"] == "client_error"
        assert isinstance(data["errors"], list)
        assert data["errors"][0]["code"] == "not_authenticated"
        assert "detail" in data["errors"][0]

    def test_malformed_json_has_standard_format(self, auth_client):
        response = auth_client.post(
            "/api/v1/orders/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "parse_error"

    def test_validation_error_lists_every_field(self, auth_client):
        response = auth_client.post(
            "/api/v1/orders/",
            {"customer_id": "nope", "product_id": "nope", "quantity": 0},
            format="json",
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        assert {e["attr"] for e in data["errors"]} == {
            "customer_id",
            "product_id",
            "quantity",
        }

    def test_method_not_allowed(self, auth_client):
        response = auth_client.delete("/api/v1/orders/")
        assert response.status_code == 405
        assert response.json()["errors"][0]["code"] == "method_not_allowed"

    def test_domain_failure_has_standard_format(self, auth_client, customer):
        response = auth_client.post(
            "/api/v1/orders/",
            {
                "customer_id": str(customer.id),
                "product_id": str(uuid4()),
                "quantity": 1,
            },
            format="json",
        )
        assert response.status_code == 404
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "product_not_found"
        assert data["errors"][0]["attr"] is None

    def test_error_responses_are_logged(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get("/api/v1/orders/")
        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "api.error_response" in messages
        assert "not_authenticated" in messages
