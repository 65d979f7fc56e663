import pytest

from src.app.use_cases.logs import INVALID_INPUT, parse_log_input
from src.domain.entities import Severity
from tests.fixtures.json_loader import TestDataLoader

INVALID_PAYLOADS, INVALID_IDS = TestDataLoader.get_cases("invalid_payloads")


@pytest.mark.parametrize(
    "case", INVALID_PAYLOADS, ids=INVALID_IDS
)
def test_invalid_payload_reports_reason(case):
    result = parse_log_input(case["payload"])

    assert result.is_err()
    assert result.error.code == INVALID_INPUT
    assert result.error.message == case["message"]


@pytest.mark.parametrize("severity", ["info", "warning", "error"])
def test_each_severity_accepted(severity):
    result = parse_log_input({"severity": severity, "message": "ok"})

    assert result.is_ok()
    assert result.value.severity == Severity(severity)


def test_first_failure_wins():
    """Both fields are wrong; only the severity problem is reported"""
    result = parse_log_input({"severity": "fatal", "message": ""})

    assert result.error.message == "Invalid severity. Must be one of: info, warning, error"


def test_message_kept_verbatim():
    """Trimming is only used for the emptiness check"""
    result = parse_log_input({"severity": "info", "message": "  padded  "})

    assert result.is_ok()
    assert result.value.message == "  padded  "


def test_message_length_cap():
    result = parse_log_input({"severity": "info", "message": "x" * 11}, max_message_length=10)

    assert result.is_err()
    assert result.error.message == "Message cannot exceed 10 characters"

    at_limit = parse_log_input({"severity": "info", "message": "x" * 10}, max_message_length=10)
    assert at_limit.is_ok()


def test_server_assigned_fields_ignored():
    result = parse_log_input(
        {
            "severity": "info",
            "message": "hello",
            "id": "client-id",
            "occurredAt": "1999-01-01T00:00:00.000000Z",
            "group": "OTHER",
        }
    )

    assert result.is_ok()
    assert set(result.value.model_dump().keys()) == {"severity", "message"}


@pytest.mark.parametrize("value", [None, "", 0, False])
def test_falsy_fields_count_as_missing(value):
    severity_result = parse_log_input({"severity": value, "message": "ok"})
    message_result = parse_log_input({"severity": "info", "message": value})

    assert severity_result.error.message == "Missing required field: severity"
    assert message_result.error.message == "Missing required field: message"


def test_empty_list_message_is_wrong_type():
    result = parse_log_input({"severity": "info", "message": []})

    assert result.error.message == "Message must be a string"
