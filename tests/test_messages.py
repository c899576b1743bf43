import pytest

from application.session import ProgressEvent, parse_control_message
from domain.enums import Region
from domain.errors import MalformedMessageError


def test_parse_start_analysis():
    msg = parse_control_message({
        "type": "startAnalysis",
        "payload": {"matchIds": ["EUW1_1", "EUW1_2"], "puuid": "abc", "region": "Europe"},
    })

    assert msg.payload.match_ids == ["EUW1_1", "EUW1_2"]
    assert msg.payload.puuid == "abc"
    assert msg.payload.region is Region.EUROPE


@pytest.mark.parametrize("raw", [
    {"type": "startAnalysis", "payload": {"puuid": "abc", "region": "europe"}},
    {"type": "startAnalysis", "payload": {"matchIds": [], "region": "europe"}},
    {"type": "startAnalysis", "payload": {"matchIds": [], "puuid": "abc", "region": "mars"}},
    {"type": "startAnalysis", "payload": {"matchIds": "EUW1_1", "puuid": "abc", "region": "europe"}},
    {"type": "stopAnalysis", "payload": {}},
    {"payload": {"matchIds": [], "puuid": "abc", "region": "europe"}},
    ["startAnalysis"],
])
def test_malformed_messages_are_rejected(raw):
    with pytest.raises(MalformedMessageError):
        parse_control_message(raw)


def test_progress_envelope_carries_its_type_tag():
    event = ProgressEvent(processed=3, total=10)

    assert event.model_dump() == {"type": "progress", "processed": 3, "total": 10}
