from restroom_relay.repositories import AdminSettingRepository
from .conftest import SECRET_CODE

SECRET_URL = "/api/v1/settings/secret-code"


def test_admin_reads_secret_code(client, secret_code, admin_headers):
    response = client.get(SECRET_URL, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["secret_code"] == SECRET_CODE


def test_secret_code_not_configured(client, db_session, admin_headers):
    response = client.get(SECRET_URL, headers=admin_headers)

    assert response.status_code == 404


def test_regular_user_cannot_read_or_rotate(client, secret_code, user_headers):
    assert client.get(SECRET_URL, headers=user_headers).status_code == 403
    assert client.put(SECRET_URL, json={"secret_code": "nuevo-codigo"}, headers=user_headers).status_code == 403


def test_requires_authentication(client, secret_code):
    assert client.get(SECRET_URL).status_code == 401


def test_admin_rotates_secret_code(client, db_session, secret_code, admin_headers):
    response = client.put(SECRET_URL, json={"secret_code": "nuevo-codigo"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["secret_code"] == "nuevo-codigo"
    assert AdminSettingRepository(db_session).get_secret_code() == "nuevo-codigo"


def test_rotation_creates_missing_setting(client, db_session, admin_headers):
    response = client.put(SECRET_URL, json={"secret_code": "primer-codigo"}, headers=admin_headers)

    assert response.status_code == 200
    assert AdminSettingRepository(db_session).get_secret_code() == "primer-codigo"


def test_rotation_rejects_short_secret(client, db_session, secret_code, admin_headers):
    response = client.put(SECRET_URL, json={"secret_code": "123"}, headers=admin_headers)

    assert response.status_code == 422
    assert AdminSettingRepository(db_session).get_secret_code() == SECRET_CODE
