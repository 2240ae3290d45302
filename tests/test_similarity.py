import math
from itertools import product

import pytest

from pyhoops.analytics import distance, similarity
from pyhoops.config import get_preset
from pyhoops.errors import MissingFeature
from pyhoops.models import PlayerRecord


def _player(player_id, points, rebounds, assists, usage, ts, **extra) -> PlayerRecord:
    return PlayerRecord(
        player_id=player_id,
        name=f"Player {player_id}",
        team="TST",
        age=25,
        points=points,
        rebounds=rebounds,
        assists=assists,
        usage_pct=usage,
        ts_pct=ts,
        **extra,
    )


def _sample_pool() -> list[PlayerRecord]:
    return [
        _player(0, 10.0, 5.0, 3.0, 20.0, 55.0),
        _player(1, 12.0, 6.0, 4.0, 22.0, 56.0),
        _player(2, 30.0, 1.0, 1.0, 35.0, 60.0),
        _player(3, 0.0, 0.0, 0.0, 8.5, 41.0),
        _player(4, 27.4, 11.2, 8.9, 31.2, 63.5),
    ]


@pytest.mark.parametrize("preset", ["profile", "detail"])
def test_similarity_is_symmetric(preset):
    config = get_preset(preset)
    pool = _sample_pool()
    for a, b in product(pool, repeat=2):
        assert similarity(a, b, config) == similarity(b, a, config)


@pytest.mark.parametrize("preset", ["profile", "detail"])
def test_self_similarity_is_exactly_one(preset):
    config = get_preset(preset)
    for record in _sample_pool():
        assert similarity(record, record, config) == 1.0


@pytest.mark.parametrize("preset", ["profile", "detail"])
def test_similarity_is_bounded(preset):
    config = get_preset(preset)
    for a, b in product(_sample_pool(), repeat=2):
        score = similarity(a, b, config)
        assert 0.0 < score <= 1.0


def test_profile_preset_matches_weighted_euclidean():
    a, b = _sample_pool()[:2]
    expected = math.sqrt(
        0.30 * (2 / 30) ** 2
        + 0.20 * (1 / 15) ** 2
        + 0.20 * (1 / 15) ** 2
        + 0.15 * (2 / 40) ** 2
        + 0.15 * (1 / 70) ** 2
    )
    assert distance(a, b, get_preset("profile")) == pytest.approx(expected)
    assert similarity(a, b, get_preset("profile")) == pytest.approx(1 / (1 + expected))


def test_detail_preset_matches_weighted_absolute_difference():
    a, b = _sample_pool()[:2]
    expected = 0.2 * 2 / 30 + 0.1 * 1 / 15 + 0.1 * 1 / 10 + 0.3 * 2 + 0.3 * 1
    assert distance(a, b, get_preset("detail")) == pytest.approx(expected)
    assert similarity(a, b, get_preset("detail")) == pytest.approx(1 / 1.93)


def test_default_config_is_profile_preset():
    a, b = _sample_pool()[:2]
    assert similarity(a, b) == similarity(a, b, get_preset("profile"))


def test_zero_is_a_real_measurement():
    scrub = _sample_pool()[3]
    partial = PlayerRecord(player_id=9, name="Partial", team="TST", points=0.0, rebounds=0.0, assists=0.0)
    with pytest.raises(MissingFeature) as excinfo:
        similarity(scrub, partial)
    assert excinfo.value.field == "usage_pct"
    assert excinfo.value.player_id == 9


def test_closer_profiles_score_higher():
    a, b, c = _sample_pool()[:3]
    assert similarity(a, b) > similarity(a, c)


@pytest.mark.parametrize("preset", ["profile", "detail"])
@pytest.mark.parametrize("magnitude", [1e200, 1.7e308])
def test_similarity_stays_positive_for_extreme_magnitudes(preset, magnitude):
    config = get_preset(preset)
    low = _player(0, 0.0, 0.0, 0.0, -magnitude, -magnitude)
    high = _player(1, magnitude, magnitude, magnitude, magnitude, magnitude)

    assert math.isfinite(distance(low, high, config))
    score = similarity(low, high, config)
    assert 0.0 < score < 1.0
    assert similarity(high, low, config) == score
