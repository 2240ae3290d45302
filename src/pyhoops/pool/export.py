"""CSV export helpers for analytics results."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable, Mapping, Sequence

from pyhoops.models import (
    PROJECTED_STATS,
    ClusterAssignment,
    PlayerRecord,
    ProjectionResult,
    SimilarityResult,
)


class ExportError(RuntimeError):
    """Raised when results cannot be matched back to the player pool."""


def _write(header: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue()


def _by_id(records: Iterable[PlayerRecord]) -> Mapping[int, PlayerRecord]:
    return {record.player_id: record for record in records}


def export_neighbors_to_csv(target: PlayerRecord, results: Sequence[SimilarityResult]) -> str:
    rows = [
        (rank, target.player_id, result.record.player_id, result.record.name, result.record.team, f"{result.score:.6f}")
        for rank, result in enumerate(results, start=1)
    ]
    return _write(("rank", "target_id", "player_id", "name", "team", "similarity"), rows)


def export_projections_to_csv(
    projections: Sequence[ProjectionResult],
    records: Iterable[PlayerRecord],
) -> str:
    lookup = _by_id(records)
    header = ["player_id", "name", "method"]
    for stat in PROJECTED_STATS:
        header.extend((f"{stat}_current", f"{stat}_projected", f"{stat}_delta"))

    rows = []
    for projection in projections:
        record = lookup.get(projection.player_id)
        if record is None:
            raise ExportError(f"Projection for unknown player {projection.player_id}")
        deltas = projection.deltas()
        row: list[object] = [projection.player_id, record.name, projection.method]
        for stat in PROJECTED_STATS:
            row.extend(
                (
                    f"{projection.current.get(stat, 0.0):.2f}",
                    f"{getattr(projection, stat):.2f}",
                    f"{deltas[stat]:+.2f}",
                )
            )
        rows.append(row)
    return _write(header, rows)


def export_clusters_to_csv(result: ClusterAssignment, records: Iterable[PlayerRecord]) -> str:
    lookup = _by_id(records)
    rows = []
    for player_id, cluster_index in sorted(result.assignment.items()):
        record = lookup.get(player_id)
        if record is None:
            raise ExportError(f"Cluster assignment for unknown player {player_id}")
        rows.append((player_id, record.name, record.team, cluster_index))
    return _write(("player_id", "name", "team", "cluster"), rows)


__all__ = [
    "ExportError",
    "export_clusters_to_csv",
    "export_neighbors_to_csv",
    "export_projections_to_csv",
]
