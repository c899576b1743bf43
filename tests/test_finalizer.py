from application.services import finalize, fold
from application.services.finalizer import best_duo, first_max, most_common_role, player_persona, total_kda
from domain.entities import AggregateState, DuoRecord
from domain.enums import Persona
from tests.helpers import TARGET, match, participant


def test_total_kda_treats_zero_deaths_as_one():
    assert total_kda(7, 3, 4) == "3.67"
    assert total_kda(10, 0, 5) == "15.00"
    assert total_kda(0, 0, 0) == "0.00"


def test_first_max_keeps_first_of_equal_maxima():
    assert first_max([("a", 3), ("b", 5), ("c", 5)], key=lambda v: v) == "b"
    assert first_max([], key=lambda v: v) is None


def test_most_common_role():
    assert most_common_role({}) == "UNKNOWN"
    assert most_common_role({"TOP": 2, "JUNGLE": 3, "MIDDLE": 3}) == "JUNGLE"
    assert most_common_role({"": 4, "UTILITY": 1}) == ""


def test_persona_picks_dominant_stat():
    totals = {Persona.CARRY: 10, Persona.TANK: 50, Persona.VISIONARY: 1, Persona.OBJECTIVE_FIEND: 49}
    assert player_persona(totals) == "The Unkillable Tank"


def test_persona_ties_resolve_in_fixed_order():
    assert player_persona(AggregateState().persona_totals) == "The Carry"
    totals = {Persona.CARRY: 1, Persona.TANK: 9, Persona.VISIONARY: 9, Persona.OBJECTIVE_FIEND: 9}
    assert player_persona(totals) == "The Unkillable Tank"


def test_persona_falls_back_when_nothing_tracked():
    assert player_persona({}) == "The All-Rounder"


def test_best_duo_requires_minimum_games():
    assert best_duo({"x": DuoRecord(games=4, wins=4)}, min_games=5) is None


def test_best_duo_ranks_by_win_rate_not_volume():
    teammates = {"b": DuoRecord(games=10, wins=9), "a": DuoRecord(games=5, wins=5)}
    duo = best_duo(teammates, min_games=5)

    assert duo.to_dict() == {"puuid": "a", "games": 5, "winRate": 100.0}


def test_best_duo_tie_keeps_first_seen():
    teammates = {"first": DuoRecord(games=6, wins=3), "second": DuoRecord(games=10, wins=5)}
    assert best_duo(teammates, min_games=5).puuid == "first"


def test_finalize_end_to_end_payload():
    state = AggregateState()
    fold(state, match("A", [participant(kills=5, deaths=1, assists=3, win=True, championName="Ahri")]), TARGET)
    fold(state, match("B", [participant(kills=2, deaths=2, assists=1, win=False, championName="Lux")]), TARGET)

    data = finalize(state).to_dict()

    assert data["wins"] == 1 and data["losses"] == 1
    assert data["totalKda"] == "3.67"  # (7 + 4) / 3
    assert data["bestKdaGame"] == {"kd": 5.0, "kills": 5, "deaths": 1, "assists": 3, "championName": "Ahri"}
    assert data["mostKillsGame"]["championName"] == "Ahri"
    assert data["mostDeathsGame"]["championName"] == "Lux"
    assert data["mostCommonRole"] == "MIDDLE"
    assert data["bestDuo"] is None
    assert set(data) == {
        "mostCommonRole", "kills", "totalKda", "totalTimeDead", "mostKillsGame", "mostDeathsGame",
        "bestKdaGame", "playerPersona", "bestDuo", "wins", "losses",
    }


def test_finalize_does_not_touch_state():
    state = AggregateState()
    fold(state, match("A", [participant(kills=1, deaths=1)]), TARGET)
    before = repr(state)

    finalize(state)

    assert repr(state) == before
