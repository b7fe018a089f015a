import pytest

from fingerprint_dashboard.models.schemas import CommandRequest
from fingerprint_dashboard.utils.exceptions import BadRequestError
from fingerprint_dashboard.utils.validators import CommandValidator


def test_enroll_fills_optional_fields():
    command = CommandValidator.normalize(
        CommandRequest(deviceId="D1", type="enroll", id=5, name="Alice", cardId="C5"),
        timestamp=123,
    )
    assert command.to_wire() == {
        "type": "enroll", "id": 5, "name": "Alice", "phone": "", "cardId": "C5", "timestamp": 123,
    }


def test_numeric_string_id_is_parsed():
    command = CommandValidator.normalize(CommandRequest(deviceId="D1", type="delete", id="12"))
    assert command.id == 12


def test_delete_carries_only_id():
    command = CommandValidator.normalize(
        CommandRequest(deviceId="D1", type="delete", id=3, name="ignored"), timestamp=1
    )
    assert command.to_wire() == {"type": "delete", "id": 3, "timestamp": 1}


def test_clear_has_no_payload():
    command = CommandValidator.normalize(CommandRequest(deviceId="D1", type="clear", id=4), timestamp=1)
    assert command.to_wire() == {"type": "clear", "timestamp": 1}


@pytest.mark.parametrize(
    "fields",
    [
        {"type": "enroll", "name": "Alice"},
        {"type": "enroll", "id": 1},
        {"type": "enroll", "id": 1, "name": "   "},
        {"type": "delete"},
    ],
)
def test_missing_required_fields_raise(fields):
    with pytest.raises(BadRequestError):
        CommandValidator.normalize(CommandRequest(deviceId="D1", **fields))


def test_blank_device_id_rejected():
    with pytest.raises(BadRequestError):
        CommandValidator.require_device_id("  ")
