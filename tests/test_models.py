"""Regression guards for the request models shared by the MCP host and HTTP facade."""

import pytest
from pydantic import ValidationError

from fravia.models import ExecuteRequest, FilterConfig, HygieneRequest, StopRequest


def test_execute_request_accepts_valid_payload() -> None:
    request = ExecuteRequest(phase=1, topics=["x"], codes="s AC")
    assert request.codes == "s AC"


@pytest.mark.parametrize(
    "payload",
    [
        {"phase": 0, "topics": ["x"], "codes": "A"},
        {"phase": 9, "topics": ["x"], "codes": "A"},
        {"phase": 1, "topics": [], "codes": "A"},
        {"phase": 1, "topics": ["x"], "codes": "   "},
    ],
)
def test_execute_request_rejects_invalid_payload(payload: dict) -> None:
    with pytest.raises(ValidationError):
        ExecuteRequest(**payload)


def test_hygiene_request_defaults() -> None:
    request = HygieneRequest()
    assert request.codes == ""
    assert request.engine == "google"


def test_stop_request_blank_reason_is_none() -> None:
    assert StopRequest(reason="").reason is None
    assert StopRequest(continue_to_phase=3, reason="done").reason == "done"


def test_filter_config_clause_for_dialect() -> None:
    config = FilterConfig(code="s", name="SOCIAL", google="-a", bing="NOT a")
    assert config.clause_for("bing") == "NOT a"
    assert config.clause_for("ddg") == ""
