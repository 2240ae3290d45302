import pytest
from pydantic import ValidationError

from pyhoops.models import UNDRAFTED, PlayerRecord


def _record(**overrides) -> PlayerRecord:
    data = dict(
        player_id=0,
        name="Test Player",
        team="BOS",
        age=25,
        height=81,
        points=20.5,
        rebounds=7.1,
        assists=4.0,
        usage_pct=27.5,
        ts_pct=58.2,
        draft_year=2017,
        draft_round=1,
        draft_number=3,
    )
    data.update(overrides)
    return PlayerRecord(**data)


def test_player_record_is_frozen():
    record = _record()

    assert record.player_id == 0
    assert record.points == 20.5

    with pytest.raises((TypeError, ValidationError)):
        record.points = 30.0  # type: ignore[misc]


def test_missing_stats_stay_none():
    record = PlayerRecord(player_id=4, name="Bench Player", team="NYK")
    assert record.points is None
    assert record.usage_pct is None
    assert record.stat("ts_pct") is None


@pytest.mark.parametrize("field", ["usage_pct", "ts_pct", "net_rating", "points"])
def test_non_finite_values_rejected(field):
    with pytest.raises(ValidationError):
        _record(**{field: float("nan")})
    with pytest.raises(ValidationError):
        _record(**{field: float("inf")})


def test_negative_counting_stats_rejected():
    with pytest.raises(ValidationError):
        _record(rebounds=-1.0)


def test_net_rating_may_be_negative():
    assert _record(net_rating=-6.4).net_rating == -6.4


def test_draft_status_and_height_display():
    record = _record()
    assert record.draft_status() == "2017 Draft, Rd 1 Pick 3"
    assert record.height_display() == "6'9\""

    undrafted = _record(draft_round=UNDRAFTED, draft_number=UNDRAFTED)
    assert undrafted.is_undrafted
    assert undrafted.draft_status() == "Undrafted"


def test_stat_lookup_rejects_unknown_names():
    record = _record()
    assert record.stat("assists") == 4.0
    with pytest.raises(KeyError):
        record.stat("salary")
