"""Command-line interface for exploring a player stats CSV."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from pyhoops.analytics import cluster, nearest_neighbors, project
from pyhoops.config import get_preset, load_settings
from pyhoops.config_loader import ColumnProfile
from pyhoops.errors import AnalyticsError
from pyhoops.ingest import default_headshot_resolver, load_records_from_csv
from pyhoops.models import PlayerRecord
from pyhoops.pool import (
    export_clusters_to_csv,
    export_neighbors_to_csv,
    export_projections_to_csv,
    summarize_pool,
    top_players,
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Player similarity, projection and clustering")
    parser.add_argument("players", type=Path, help="Path to player stats CSV")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for CSV columns (e.g., points=PTS)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Write results as CSV to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    summary = commands.add_parser("summary", help="Pool overview and top scorers")
    summary.add_argument("--top", type=int, default=5, help="Number of top scorers to list")

    similar = commands.add_parser("similar", help="Most similar players to one player")
    similar.add_argument("player", help="Player id or name")
    similar.add_argument("--k", type=int, default=settings.neighbors, help="Number of neighbours")
    similar.add_argument(
        "--preset",
        default=settings.similarity_preset,
        help="Similarity preset (profile or detail)",
    )

    projection = commands.add_parser("project", help="Next-season projection")
    projection.add_argument("player", nargs="?", default=None, help="Player id or name (all if omitted)")

    grouping = commands.add_parser("cluster", help="Group players with k-means")
    grouping.add_argument("--k", type=int, default=settings.clusters, help="Number of clusters")
    grouping.add_argument("--seed", type=int, default=settings.cluster_seed, help="Initialisation seed")
    grouping.add_argument(
        "--max-iterations",
        type=int,
        default=settings.cluster_max_iterations,
        help="Iteration cap",
    )

    serve = commands.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _find_player(records: Sequence[PlayerRecord], token: str) -> PlayerRecord:
    if token.isdigit():
        for record in records:
            if record.player_id == int(token):
                return record
    needle = token.strip().lower()
    exact = [record for record in records if record.name.lower() == needle]
    if exact:
        return exact[0]
    partial = [record for record in records if needle in record.name.lower()]
    if len(partial) == 1:
        return partial[0]
    if not partial:
        raise SystemExit(f"No player matches {token!r}")
    names = ", ".join(record.name for record in partial[:5])
    raise SystemExit(f"{token!r} is ambiguous: {names}")


def _emit(csv_text: str, output: Path | None) -> None:
    if output is None:
        print(csv_text, end="")
        return
    output.write_text(csv_text, encoding="utf-8")
    print(f"Wrote {output}")


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    mapping = _parse_mapping(args.column)
    if args.load_profile:
        profile = ColumnProfile.load(args.load_profile)
        mapping = profile.columns | mapping
    if args.save_profile:
        ColumnProfile(mapping).save(args.save_profile)
        print(f"Saved column profile to {args.save_profile}")

    records = load_records_from_csv(
        args.players,
        mapping=mapping or None,
        image_resolver=default_headshot_resolver(),
    )

    try:
        if args.command == "summary":
            summary = summarize_pool(records)
            print(f"{summary.players} players from {summary.teams} teams")
            if summary.points_mean is not None:
                print(f"Average points: {summary.points_mean:.1f}")
            for rank, record in enumerate(top_players(records, "points", args.top), start=1):
                print(f"{rank}. {record.name} ({record.team}) {record.points:.1f} pts")

        elif args.command == "similar":
            target = _find_player(records, args.player)
            try:
                config = get_preset(args.preset)
            except KeyError as exc:
                raise SystemExit(str(exc.args[0])) from exc
            results = nearest_neighbors(target, records, args.k, config)
            _emit(export_neighbors_to_csv(target, results), args.output)

        elif args.command == "project":
            targets = [_find_player(records, args.player)] if args.player else records
            projections = [project(record) for record in targets]
            _emit(export_projections_to_csv(projections, records), args.output)

        elif args.command == "cluster":
            result = cluster(records, args.k, seed=args.seed, max_iterations=args.max_iterations)
            print(f"Converged: {result.converged} after {result.iterations} iterations")
            _emit(export_clusters_to_csv(result, records), args.output)

        elif args.command == "serve":
            import uvicorn

            from pyhoops.api import create_app

            uvicorn.run(create_app(records), host=args.host, port=args.port)
    except AnalyticsError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
