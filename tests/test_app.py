"""Tests for application-wide behaviour: system routes, middleware and error handlers."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from solana_api import __version__
from solana_api.api.error_handling import envelope_errors
from solana_api.dependencies import get_instruction_service
from solana_api.main import app
from solana_api.utils.errors import InvalidPublicKeyError


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_version(client):
    assert client.get("/version").json()["version"] == __version__


def test_request_id_header(client):
    """Test that every response carries a request ID"""
    first = client.post("/keypair")
    second = client.post("/keypair")

    assert first.headers["x-request-id"]
    assert first.headers["x-request-id"] != second.headers["x-request-id"]


def test_invalid_json_body(client):
    response = client.post(
        "/send/sol",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json()["success"] is False


def test_unexpected_error_returns_500():
    """Test that errors outside the service taxonomy are not reported as envelopes"""
    class ExplodingService:
        def transfer_sol(self, *args):
            raise RuntimeError("boom")

    app.dependency_overrides[get_instruction_service] = lambda: ExplodingService()
    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.post(
                "/send/sol",
                json={
                    "from": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
                    "to": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
                    "lamports": 1,
                },
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}


def test_envelope_errors_passes_kwargs():
    """Test that the failure builder sees the endpoint's arguments"""
    seen = {}

    def on_error(error, kwargs):
        seen.update(kwargs)
        return {"success": False, "error": error.message}

    @envelope_errors(on_error)
    async def endpoint(payload=None):
        raise InvalidPublicKeyError("mint")

    result = asyncio.run(endpoint(payload="body"))

    assert result == {"success": False, "error": "Invalid mint pubkey"}
    assert seen == {"payload": "body"}


def test_envelope_errors_lets_other_errors_through():
    @envelope_errors(lambda error, kwargs: None)
    async def endpoint():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        asyncio.run(endpoint())
