"""Error Handlers — faults and malformed bodies that produce no instruction envelope.

Tests cover:
    - InternalFaultError -> 500 with the generic message, no fault detail
    - Any other exception -> the same 500 body shape as an internal fault
    - Malformed body -> 400 listing field paths without the submitted input
"""

from httpx import ASGITransport, AsyncClient

from payment_instructions.api.routes import payment_instructions as route_module
from payment_instructions.core.errors import InternalFaultError
from payment_instructions.main import app

URL = "/api/v1/payment-instructions"
BODY = {"accounts": [], "instruction": "DEBIT 1 USD"}


async def test_internal_fault_returns_generic_500(client, monkeypatch):
    def _fault(*args, **kwargs):
        raise InternalFaultError("balance of 'a' is a string")

    monkeypatch.setattr(route_module, "process_payment_instruction", _fault)
    res = await client.post(URL, json=BODY)
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "Internal server error"
    assert "string" not in res.text


async def test_unhandled_exception_returns_catch_all_500(monkeypatch):
    def _crash(*args, **kwargs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(route_module, "process_payment_instruction", _crash)
    # The server error middleware re-raises after responding; keep the response
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.post(URL, json=BODY)
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "Internal server error"
    assert error["category"] == "internal"
    assert error["severity"] == "critical"
    assert error["context"] == {"instruction_type": None, "stage": None}
    assert "secret" not in res.text


async def test_malformed_body_details_name_fields_not_values(client):
    payload = {
        "accounts": [{"id": "a", "balance": "secret-balance", "currency": "USD"}],
        "instruction": "DEBIT 1 USD",
    }
    res = await client.post(URL, json=payload)
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert any(d["field"].startswith("body.accounts.0.balance") for d in details)
    assert all(set(d) == {"field", "message", "type"} for d in details)
    assert "secret-balance" not in res.text
