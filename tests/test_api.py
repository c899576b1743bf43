import asyncio
import time

from fastapi.testclient import TestClient

from domain.errors import AuthError, HTTPStatusError, NetworkError, NotFoundError, RateLimitedError
from presentation.api import create_app
from tests.helpers import TARGET, FakeMatchRepository, FakeSleep, match_payload, participant


def _app(repo):
    return create_app(repo, session_options={"throttle_seconds": 0, "sleep": FakeSleep()})


def _start(match_ids, region="europe"):
    return {"type": "startAnalysis", "payload": {"matchIds": match_ids, "puuid": TARGET, "region": region}}


def test_websocket_streams_progress_then_complete():
    repo = FakeMatchRepository(matches={
        "A": match_payload("A", [participant(kills=5, deaths=1, assists=3, win=True)]),
        "B": match_payload("B", [participant(kills=2, deaths=2, assists=1)]),
    })

    with TestClient(_app(repo)) as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_json(_start(["A", "B"]))
            events = [ws.receive_json() for _ in range(3)]

    assert events[0] == {"type": "progress", "processed": 1, "total": 2}
    assert events[1] == {"type": "progress", "processed": 2, "total": 2}
    assert events[2]["type"] == "complete"
    assert events[2]["data"]["totalKda"] == "3.67"


def test_websocket_ignores_malformed_messages():
    repo = FakeMatchRepository(matches={"A": match_payload("A", [participant()])})

    with TestClient(_app(repo)) as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_text("not json")
            ws.send_json({"type": "startAnalysis", "payload": {"puuid": TARGET}})
            ws.send_json(_start(["A"], region="atlantis"))
            ws.send_json(_start(["A"]))
            events = [ws.receive_json() for _ in range(2)]

    assert [e["type"] for e in events] == ["progress", "complete"]
    assert repo.match_calls == ["A"]


def test_websocket_ignores_binary_frames():
    repo = FakeMatchRepository(matches={"A": match_payload("A", [participant()])})

    with TestClient(_app(repo)) as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_bytes(b"\x00\x01")
            ws.send_json(_start(["A"]))
            events = [ws.receive_json() for _ in range(2)]

    assert [e["type"] for e in events] == ["progress", "complete"]


class SlowRepository(FakeMatchRepository):
    async def get_match_by_id(self, region, match_id):
        await asyncio.sleep(0.02)
        return await super().get_match_by_id(region, match_id)


def test_closing_the_socket_stops_fetching():
    ids = [f"M{i}" for i in range(200)]
    repo = SlowRepository(matches={i: match_payload(i, [participant()]) for i in ids})

    with TestClient(_app(repo)) as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_json(_start(ids))
            assert ws.receive_json()["type"] == "progress"

        fetched = len(repo.match_calls)
        time.sleep(0.3)
        assert len(repo.match_calls) == fetched

    assert fetched < len(ids)


def test_websocket_reports_error_event():
    repo = FakeMatchRepository(failures={"A": [NotFoundError("gone")]})

    with TestClient(_app(repo)) as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_json(_start(["A"]))
            event = ws.receive_json()

    assert event == {"type": "error", "message": "Failed to analyze matches"}


def test_list_matches_endpoint():
    repo = FakeMatchRepository(pages=[["EUW1_3", "EUW1_2", "EUW1_1"]])

    with TestClient(_app(repo)) as client:
        response = client.get("/api/matches", params={"puuid": TARGET, "region": "europe"})

    assert response.status_code == 200
    assert response.json() == ["EUW1_3", "EUW1_2", "EUW1_1"]


def test_list_matches_rejects_unknown_region():
    with TestClient(_app(FakeMatchRepository())) as client:
        response = client.get("/api/matches", params={"puuid": TARGET, "region": "mars"})

    assert response.status_code == 400


def test_list_matches_maps_riot_errors():
    cases = [
        (NotFoundError("x"), 404, "User not found"),
        (RateLimitedError(3), 429, "Rate limited"),
        (AuthError(401), 403, "Invalid API key"),
        (HTTPStatusError(503), 503, "An error occurred"),
        (NetworkError("down"), 500, "An internal server error occurred"),
    ]
    for error, status, message in cases:
        class FailingRepo(FakeMatchRepository):
            async def get_match_ids_by_puuid(self, *args, **kwargs):
                raise error

        with TestClient(_app(FailingRepo())) as client:
            response = client.get("/api/matches", params={"puuid": TARGET, "region": "europe"})

        assert response.status_code == status
        assert response.json() == {"error": message}
