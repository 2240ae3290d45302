import csv
from io import StringIO

import pytest

from pyhoops.analytics import cluster, nearest_neighbors, project
from pyhoops.models import PlayerRecord
from pyhoops.pool import (
    ExportError,
    FilterCriteria,
    compare_players,
    export_clusters_to_csv,
    export_neighbors_to_csv,
    export_projections_to_csv,
    filter_players,
    summarize_pool,
    top_players,
)


def _sample_pool() -> list[PlayerRecord]:
    rows = [
        ("Luka Doncic", "DAL", 25, 33.9, 9.2, 9.8, 36.0, 61.7),
        ("Kyrie Irving", "DAL", 32, 25.6, 5.0, 5.2, 28.5, 61.0),
        ("Jayson Tatum", "BOS", 26, 26.9, 8.1, 4.9, 29.8, 60.4),
        ("Al Horford", "BOS", 38, 8.6, 6.4, 2.6, 11.9, 64.2),
        ("Rudy Gobert", "MIN", 32, 14.0, 12.9, 1.3, 15.1, 67.5),
    ]
    pool = [
        PlayerRecord(
            player_id=i,
            name=name,
            team=team,
            age=age,
            points=pts,
            rebounds=reb,
            assists=ast,
            usage_pct=usg,
            ts_pct=ts,
        )
        for i, (name, team, age, pts, reb, ast, usg, ts) in enumerate(rows)
    ]
    pool.append(PlayerRecord(player_id=5, name="Two-Way Guy", team="MIN", age=22))
    return pool


def test_filter_by_stat_ranges():
    result = filter_players(_sample_pool(), FilterCriteria(min_points=20.0, max_rebounds=9.0))
    assert [r.name for r in result.players] == ["Jayson Tatum", "Kyrie Irving"]


def test_range_filter_excludes_missing_values():
    result = filter_players(_sample_pool(), FilterCriteria(min_points=0.0))
    assert "Two-Way Guy" not in {r.name for r in result.players}


def test_query_matches_name_or_team_case_insensitively():
    pool = _sample_pool()
    assert {r.name for r in filter_players(pool, FilterCriteria(query="dal")).players} == {
        "Luka Doncic",
        "Kyrie Irving",
    }
    assert [r.name for r in filter_players(pool, FilterCriteria(query="GOBERT")).players] == ["Rudy Gobert"]


def test_team_filter_and_limit():
    result = filter_players(_sample_pool(), FilterCriteria(teams=("bos", "min"), limit=2))
    assert [r.name for r in result.players] == ["Jayson Tatum", "Rudy Gobert"]
    assert result.pool_summary.players == 6


def test_sort_ascending_puts_missing_last():
    result = filter_players(_sample_pool(), FilterCriteria(sort_by="ts_pct", sort_direction="asc"))
    names = [r.name for r in result.players]
    assert names[0] == "Jayson Tatum"
    assert names[-1] == "Two-Way Guy"


def test_sort_by_name():
    result = filter_players(_sample_pool(), FilterCriteria(sort_by="name", sort_direction="asc"))
    assert result.players[0].name == "Al Horford"


def test_unknown_sort_field_rejected():
    with pytest.raises(ValueError):
        FilterCriteria(sort_by="salary")


def test_summarize_pool():
    summary = summarize_pool(_sample_pool())
    assert summary.players == 6
    assert summary.teams == 3
    assert summary.points_mean == pytest.approx((33.9 + 25.6 + 26.9 + 8.6 + 14.0) / 5)
    assert summary.points_median == pytest.approx(25.6)
    assert summary.top_scorer.name == "Luka Doncic"


def test_summarize_empty_pool():
    summary = summarize_pool([])
    assert summary.players == 0
    assert summary.points_mean is None
    assert summary.top_scorer is None


def test_top_players_skips_missing():
    assert [r.name for r in top_players(_sample_pool(), "rebounds", 2)] == ["Rudy Gobert", "Luka Doncic"]
    assert len(top_players(_sample_pool(), "rebounds", 10)) == 5


def test_compare_players():
    pool = _sample_pool()
    comparison = compare_players(pool[0], pool[2])

    rows = {row.stat: row for row in comparison.stats}
    assert rows["points"].leader == "first"
    assert rows["points"].delta == pytest.approx(33.9 - 26.9)
    assert rows["net_rating"].delta is None
    assert 0 < comparison.similarity < 1


def test_compare_with_incomplete_player_has_no_similarity():
    pool = _sample_pool()
    comparison = compare_players(pool[0], pool[5])
    assert comparison.similarity is None
    assert {row.stat: row.leader for row in comparison.stats}["points"] is None


def test_export_neighbors_to_csv():
    pool = _sample_pool()[:5]
    results = nearest_neighbors(pool[0], pool, 2)
    rows = list(csv.DictReader(StringIO(export_neighbors_to_csv(pool[0], results))))

    assert [row["rank"] for row in rows] == ["1", "2"]
    assert rows[0]["player_id"] == str(results[0].record.player_id)
    assert float(rows[0]["similarity"]) == pytest.approx(results[0].score, abs=1e-6)


def test_export_projections_to_csv():
    pool = _sample_pool()[:5]
    text = export_projections_to_csv([project(record) for record in pool], pool)
    rows = list(csv.DictReader(StringIO(text)))

    assert len(rows) == 5
    assert rows[0]["name"] == "Luka Doncic"
    assert rows[0]["method"] == "trend"
    assert rows[0]["points_current"] == "33.90"


def test_export_clusters_to_csv_and_unknown_ids():
    pool = _sample_pool()[:5]
    result = cluster(pool, k=2, seed=42, max_iterations=50)
    rows = list(csv.DictReader(StringIO(export_clusters_to_csv(result, pool))))

    assert [int(row["player_id"]) for row in rows] == [0, 1, 2, 3, 4]
    assert {row["cluster"] for row in rows} <= {"0", "1"}

    with pytest.raises(ExportError):
        export_clusters_to_csv(result, pool[:2])
