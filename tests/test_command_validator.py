import pytest
from restroom_relay.core.command_validator import (
    validate_gsm_request,
    validate_wifi_request,
    is_valid_phone_number,
    is_valid_ip_address,
)

TOILET_ID = "0b7c5f0e-3a51-4c0e-9a39-2d6f1b8a7c11"


def gsm_payload(**overrides):
    payload = {"toiletId": TOILET_ID, "command": "FLUSH", "phoneNumber": "+233201234567", "secretCode": "abc123"}
    payload.update(overrides)
    return payload


def wifi_payload(**overrides):
    payload = {"toiletId": TOILET_ID, "command": "OPEN", "ipAddress": "192.168.1.50", "secretCode": "abc123"}
    payload.update(overrides)
    return payload


def test_valid_requests():
    assert validate_gsm_request(gsm_payload()) is None
    assert validate_wifi_request(wifi_payload()) is None


def test_toilet_id_is_case_insensitive_uuid():
    assert validate_wifi_request(wifi_payload(toiletId=TOILET_ID.upper())) is None


@pytest.mark.parametrize("toilet_id", [None, "", "123", "not-a-uuid", TOILET_ID + "0", 42])
def test_invalid_toilet_id(toilet_id):
    assert validate_gsm_request(gsm_payload(toiletId=toilet_id)) == "Invalid toilet ID format"


def test_missing_payload():
    assert validate_wifi_request(None) == "Invalid toilet ID format"
    assert validate_wifi_request([1, 2]) == "Invalid toilet ID format"


@pytest.mark.parametrize("command", [None, "", "flush", "RESET", ["OPEN"]])
def test_invalid_command_lists_valid_set(command):
    error = validate_wifi_request(wifi_payload(command=command))
    assert error == "Invalid command. Must be one of: FLUSH, OPEN, CLOSE, PERFUME"


@pytest.mark.parametrize("phone", ["+233201234567", "233201234567", "12", "+123456789012345"])
def test_valid_phone_numbers(phone):
    assert is_valid_phone_number(phone)


@pytest.mark.parametrize("phone", [None, "", "0201234567", "+0201234567", "1", "+1234567890123456", "+23320 1234", "233201234567\n"])
def test_invalid_phone_numbers(phone):
    assert not is_valid_phone_number(phone)
    assert validate_gsm_request(gsm_payload(phoneNumber=phone)) == "Invalid phone number format"


@pytest.mark.parametrize("ip", ["0.0.0.0", "10.0.0.1", "255.255.255.255", "192.168.001.050"])
def test_valid_ip_addresses(ip):
    assert is_valid_ip_address(ip)


@pytest.mark.parametrize("ip", [None, "", "256.1.1.1", "1.2.3", "1.2.3.4.5", "a.b.c.d", "192.168.1.50/admin", "localhost"])
def test_invalid_ip_addresses(ip):
    assert not is_valid_ip_address(ip)
    assert validate_wifi_request(wifi_payload(ipAddress=ip)) == "Invalid IP address format"


@pytest.mark.parametrize("secret", [None, "", "12345", "x" * 51, 123456])
def test_invalid_secret_code(secret):
    assert validate_gsm_request(gsm_payload(secretCode=secret)) == "Invalid secret code format"


@pytest.mark.parametrize("secret", ["123456", "x" * 50])
def test_secret_code_length_bounds(secret):
    assert validate_gsm_request(gsm_payload(secretCode=secret)) is None


def test_first_failing_check_wins():
    payload = wifi_payload(toiletId="bad", command="BAD", ipAddress="bad", secretCode="1")
    assert validate_wifi_request(payload) == "Invalid toilet ID format"

    payload["toiletId"] = TOILET_ID
    assert validate_wifi_request(payload).startswith("Invalid command")

    payload["command"] = "CLOSE"
    assert validate_wifi_request(payload) == "Invalid IP address format"

    payload["ipAddress"] = "10.0.0.2"
    assert validate_wifi_request(payload) == "Invalid secret code format"
