from unittest.mock import patch

from restroom_relay.models import CommandLog
from restroom_relay.repositories import AdminSettingRepository, CommandLogRepository
from .conftest import TOILET_ID, SECRET_CODE

GSM_URL = "/api/v1/send-gsm-command"


def gsm_body(**overrides):
    body = {"toiletId": TOILET_ID, "command": "FLUSH", "phoneNumber": "+233201234567", "secretCode": SECRET_CODE}
    body.update(overrides)
    return body


def test_gsm_command_is_logged_as_sent(client, db_session, secret_code, user_headers):
    response = client.post(GSM_URL, json=gsm_body(), headers=user_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Command sent via GSM to +233201234567"
    assert data["note"] == "SMS integration requires SMS provider API key"
    assert response.headers["access-control-allow-origin"] == "*"

    logs = db_session.query(CommandLog).all()
    assert len(logs) == 1
    assert logs[0].status == "sent"
    assert logs[0].control_mode.value == "gsm"
    assert logs[0].destination == "+233201234567"
    assert logs[0].command_type == "FLUSH"
    assert logs[0].toilet_id == TOILET_ID
    assert logs[0].error_message is None


def test_identical_gsm_requests_are_not_deduplicated(client, db_session, secret_code, user_headers):
    first = client.post(GSM_URL, json=gsm_body(), headers=user_headers)
    second = client.post(GSM_URL, json=gsm_body(), headers=user_headers)

    assert first.status_code == second.status_code == 200
    logs = db_session.query(CommandLog).all()
    assert len(logs) == 2
    assert logs[0].id != logs[1].id
    assert all(log.status == "sent" for log in logs)


def test_missing_authorization_header(client, db_session, secret_code):
    response = client.post(GSM_URL, json=gsm_body())

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Missing authorization header"}
    assert db_session.query(CommandLog).count() == 0


def test_unresolvable_credential(client, db_session, secret_code):
    response = client.post(GSM_URL, json=gsm_body(), headers={"Authorization": "Bearer no-es-un-jwt"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized"}
    assert db_session.query(CommandLog).count() == 0


def test_invalid_toilet_id_skips_secret_read_and_log(client, db_session, secret_code, user_headers):
    with patch.object(AdminSettingRepository, "get_secret_code") as get_secret:
        response = client.post(GSM_URL, json=gsm_body(toiletId="toilet-1"), headers=user_headers)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid toilet ID format"}
    get_secret.assert_not_called()
    assert db_session.query(CommandLog).count() == 0


def test_invalid_command(client, secret_code, user_headers):
    response = client.post(GSM_URL, json=gsm_body(command="EXPLODE"), headers=user_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid command. Must be one of: FLUSH, OPEN, CLOSE, PERFUME"


def test_invalid_phone_number_skips_authorization(client, db_session, secret_code, user_headers):
    with patch.object(AdminSettingRepository, "get_secret_code") as get_secret:
        response = client.post(GSM_URL, json=gsm_body(phoneNumber="0201234567"), headers=user_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid phone number format"
    get_secret.assert_not_called()


def test_secret_code_length(client, secret_code, user_headers):
    short = client.post(GSM_URL, json=gsm_body(secretCode="12345"), headers=user_headers)
    long = client.post(GSM_URL, json=gsm_body(secretCode="x" * 51), headers=user_headers)

    assert short.status_code == long.status_code == 400
    assert short.json()["error"] == "Invalid secret code format"


def test_wrong_secret_code_creates_no_log(client, db_session, secret_code, user_headers):
    response = client.post(GSM_URL, json=gsm_body(secretCode="otro-codigo"), headers=user_headers)

    assert response.status_code == 403
    assert response.json() == {"success": False, "error": "Invalid secret code"}
    assert db_session.query(CommandLog).count() == 0


def test_no_configured_secret_is_rejected(client, db_session, user_headers):
    response = client.post(GSM_URL, json=gsm_body(), headers=user_headers)

    assert response.status_code == 403
    assert db_session.query(CommandLog).count() == 0


def test_log_failure_is_not_fatal(client, secret_code, user_headers):
    with patch.object(CommandLogRepository, "create_command_log", return_value=None):
        response = client.post(GSM_URL, json=gsm_body(), headers=user_headers)

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_invalid_json_body(client, secret_code, user_headers):
    response = client.post(
        GSM_URL,
        content=b"{no es json",
        headers={**user_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid toilet ID format"}


def test_unexpected_error_returns_generic_message(client, secret_code, user_headers):
    with patch.object(AdminSettingRepository, "get_secret_code", side_effect=RuntimeError("boom: detalle interno")):
        response = client.post(GSM_URL, json=gsm_body(), headers=user_headers)

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}


def test_preflight_returns_cors_headers(client):
    response = client.options(GSM_URL)

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "authorization, x-client-info, apikey, content-type"


def test_browser_preflight_reaches_relay(client):
    preflight = {
        "Origin": "https://dashboard.example.com",
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "authorization, content-type, x-supabase-api-version",
    }

    for url in (GSM_URL, "/api/v1/send-wifi-command"):
        response = client.options(url, headers=preflight)

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-headers"] == "authorization, x-client-info, apikey, content-type"


def test_dashboard_routes_keep_cors_middleware(client):
    response = client.options(
        "/api/v1/toilets/",
        headers={"Origin": "https://dashboard.example.com", "Access-Control-Request-Method": "GET"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
