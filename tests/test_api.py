"""
Tests for the HTTP endpoints
"""
import pytest


PHONE = "555-123-4567"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.text == "OK"


def test_goodbye(client):
    response = client.get("/goodbyeworld")
    assert response.status_code == 200
    assert response.text == "Goodbye, World!"


def test_root_lists_endpoints(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "1.0.0"
    assert any("/auth/send-code" in e for e in data["endpoints"])


def test_process_time_header(client):
    response = client.get("/health")
    assert "x-process-time" in response.headers


def test_send_code(client, fake_sms):
    response = client.post("/auth/send-code", json={"phone_number": PHONE})
    assert response.status_code == 200
    assert response.json() == {"message": "Verification code sent successfully", "success": True}
    assert fake_sms.sent[-1][0] == "+15551234567"


@pytest.mark.parametrize("body", [{}, {"phone_number": ""}, {"phone_number": "   "}])
def test_send_code_requires_phone(client, body):
    response = client.post("/auth/send-code", json=body)
    assert response.status_code == 400
    assert response.json()["error"] == "Phone number is required"


def test_send_code_delivery_failure_is_500(client, fake_sms):
    fake_sms.fail = True
    response = client.post("/auth/send-code", json={"phone_number": PHONE})
    assert response.status_code == 500
    assert response.json()["code"] == "DELIVERY_ERROR"


def test_send_code_storage_failure_is_500(client, fake_redis):
    fake_redis.fail_ops.add("set")
    response = client.post("/auth/send-code", json={"phone_number": PHONE})
    assert response.status_code == 500
    assert response.json()["code"] == "STORAGE_ERROR"


@pytest.mark.parametrize("body", [
    {"phone_number": PHONE},
    {"code": "123456"},
    {"phone_number": "", "code": "123456"},
    {"phone_number": PHONE, "code": ""},
])
def test_verify_requires_both_fields(client, body):
    response = client.post("/auth/verify", json=body)
    assert response.status_code == 400
    assert response.json()["error"] == "Phone number and code are required"


def test_verify_wrong_code_is_401(client, fake_sms):
    client.post("/auth/send-code", json={"phone_number": PHONE})
    wrong = "000000" if fake_sms.last_code() != "000000" else "111111"
    response = client.post("/auth/verify", json={"phone_number": PHONE, "code": wrong})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid verification code"


def test_verify_without_code_sent_is_401(client):
    response = client.post("/auth/verify", json={"phone_number": PHONE, "code": "123456"})
    assert response.status_code == 401
    assert response.json()["code"] == "AUTHENTICATION_FAILED"


def test_verify_returns_user_and_token(login):
    body, _ = login()

    assert body["user"]["phone_number"] == PHONE
    assert body["user"]["is_verified"] is True
    assert body["token"]["token_type"] == "Bearer"
    assert body["token"]["expires_in"] == 86400
    assert "expires_at" in body["token"]
    assert "refresh_token" not in body["token"]


def test_me_returns_session_user(client, login):
    body, headers = login()
    response = client.get("/auth/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == body["user"]["id"]


def test_me_requires_token(client):
    response = client.get("/auth/me")
    assert response.status_code == 401
    assert response.json()["error"] == "Missing bearer token"


def test_me_rejects_garbage_token(client):
    response = client.get("/auth/me", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def test_me_after_session_expiry(client, login, fake_redis):
    _, headers = login()
    fake_redis.advance(86400)
    response = client.get("/auth/me", headers=headers)
    assert response.status_code == 401
    assert response.json()["error"] == "Session expired"


def test_ready_reports_redis_state(client, fake_redis, monkeypatch):
    monkeypatch.setattr("app.db.redis_client._client", fake_redis)
    assert client.get("/ready").json() == {"status": "ready"}

    fake_redis.fail_ops.add("ping")
    response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


def test_openapi_carries_request_examples(client):
    schemas = client.get("/openapi.json").json()["components"]["schemas"]
    assert schemas["VerificationRequest"]["example"] == {"phone_number": PHONE}
    assert schemas["UserLogin"]["example"]["code"] == "042917"
    assert schemas["ReceiptCreation"]["example"]["store_id"] == "store-001"
