"""REST API over the player pool and analytics engine."""

from __future__ import annotations

import logging
from typing import Literal, Sequence

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from pyhoops.analytics import cluster, nearest_neighbors, project
from pyhoops.api.schemas import (
    ClusterGroupResponse,
    ClusterResponse,
    ComparisonResponse,
    FeatureWeightResponse,
    NeighborsResponse,
    PlayerDetailResponse,
    PlayerListResponse,
    PlayerResponse,
    PoolSummaryResponse,
    PresetResponse,
    ProjectionResponse,
    SimilarPlayerResponse,
    StatComparisonResponse,
)
from pyhoops.config import Settings, SimilarityConfig, get_preset, iter_presets, load_settings
from pyhoops.errors import InvalidClusterCount, MissingFeature
from pyhoops.ingest import default_headshot_resolver, load_records_from_csv
from pyhoops.models import ClusterAssignment, PlayerRecord
from pyhoops.pool import (
    FilterCriteria,
    PoolSummary,
    compare_players,
    export_clusters_to_csv,
    filter_players,
    summarize_pool,
)


logger = logging.getLogger("uvicorn.error")


def _summary_response(summary: PoolSummary) -> PoolSummaryResponse:
    top = summary.top_scorer
    return PoolSummaryResponse(
        players=summary.players,
        teams=summary.teams,
        points_mean=summary.points_mean,
        points_median=summary.points_median,
        points_std=summary.points_std,
        top_scorer=PlayerResponse.from_record(top) if top is not None else None,
    )


def _preset_response(config: SimilarityConfig) -> PresetResponse:
    return PresetResponse(
        key=config.key,
        label=config.label,
        metric=config.metric,
        features=[
            FeatureWeightResponse(field=f.field, scale=f.scale, weight=f.weight)
            for f in config.features
        ],
    )


def _load_pool(settings: Settings) -> list[PlayerRecord]:
    if settings.data_path is None:
        logger.warning("PYHOOPS_DATA_PATH is not set; serving an empty player pool")
        return []
    return load_records_from_csv(settings.data_path, image_resolver=default_headshot_resolver())


def create_app(
    records: Sequence[PlayerRecord] | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    pool: list[PlayerRecord] = list(records) if records is not None else _load_pool(settings)
    by_id = {record.player_id: record for record in pool}

    app = FastAPI(title="pyhoops")
    app.state.settings = settings
    app.state.pool = pool

    def find_player(player_id: int) -> PlayerRecord:
        record = by_id.get(player_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return record

    def resolve_preset(key: str | None) -> SimilarityConfig:
        try:
            return get_preset(key or settings.similarity_preset)
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=str(exc.args[0])) from exc

    def run_clustering(k: int | None, seed: int | None, max_iterations: int | None) -> tuple[ClusterAssignment, int]:
        used_seed = settings.cluster_seed if seed is None else seed
        try:
            result = cluster(
                pool,
                settings.clusters if k is None else k,
                seed=used_seed,
                max_iterations=max_iterations or settings.cluster_max_iterations,
            )
        except InvalidClusterCount as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except MissingFeature as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return result, used_seed

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=PlayerListResponse)
    async def list_players(
        q: str | None = None,
        team: list[str] | None = Query(None),
        min_points: float | None = None,
        max_points: float | None = None,
        min_rebounds: float | None = None,
        max_rebounds: float | None = None,
        min_assists: float | None = None,
        max_assists: float | None = None,
        sort_by: str = "points",
        sort_direction: Literal["asc", "desc"] = "desc",
        limit: int | None = Query(None, ge=1, le=1000),
    ) -> PlayerListResponse:
        try:
            criteria = FilterCriteria(
                min_points=min_points,
                max_points=max_points,
                min_rebounds=min_rebounds,
                max_rebounds=max_rebounds,
                min_assists=min_assists,
                max_assists=max_assists,
                query=q,
                teams=tuple(team or ()),
                sort_by=sort_by,
                sort_direction=sort_direction,
                limit=limit,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        result = filter_players(pool, criteria)
        return PlayerListResponse(
            summary=_summary_response(result.summary),
            pool_summary=_summary_response(result.pool_summary),
            players=[PlayerResponse.from_record(record) for record in result.players],
        )

    @app.get("/summary", response_model=PoolSummaryResponse)
    async def summary() -> PoolSummaryResponse:
        return _summary_response(summarize_pool(pool))

    @app.get("/presets", response_model=list[PresetResponse])
    async def presets() -> list[PresetResponse]:
        return [_preset_response(config) for config in iter_presets()]

    @app.get("/players/{player_id}", response_model=PlayerDetailResponse)
    async def player_detail(player_id: int) -> PlayerDetailResponse:
        record = find_player(player_id)
        return PlayerDetailResponse(
            player=record,
            draft_status=record.draft_status(),
            height_display=record.height_display(),
        )

    @app.get("/players/{player_id}/similar", response_model=NeighborsResponse)
    async def similar_players(
        player_id: int,
        k: int | None = Query(None, ge=0, le=100),
        preset: str | None = None,
    ) -> NeighborsResponse:
        record = find_player(player_id)
        config = resolve_preset(preset)
        try:
            results = nearest_neighbors(record, pool, settings.neighbors if k is None else k, config)
        except MissingFeature as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return NeighborsResponse(
            player_id=player_id,
            preset=config.key,
            neighbors=[
                SimilarPlayerResponse(
                    rank=rank,
                    score=result.score,
                    player=PlayerResponse.from_record(result.record),
                )
                for rank, result in enumerate(results, start=1)
            ],
        )

    @app.get("/players/{player_id}/projection", response_model=ProjectionResponse)
    async def player_projection(player_id: int) -> ProjectionResponse:
        record = find_player(player_id)
        try:
            projection = project(record)
        except MissingFeature as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return ProjectionResponse(**projection.to_dict())

    @app.get("/compare", response_model=ComparisonResponse)
    async def compare(a: int, b: int, preset: str | None = None) -> ComparisonResponse:
        first = find_player(a)
        second = find_player(b)
        config = resolve_preset(preset)
        comparison = compare_players(first, second, config)
        return ComparisonResponse(
            first=PlayerResponse.from_record(first),
            second=PlayerResponse.from_record(second),
            preset=config.key,
            similarity=comparison.similarity,
            stats=[
                StatComparisonResponse(
                    stat=row.stat,
                    first=row.first,
                    second=row.second,
                    delta=row.delta,
                    leader=row.leader,
                )
                for row in comparison.stats
            ],
        )

    @app.get("/clusters", response_model=ClusterResponse)
    async def clusters(
        k: int | None = None,
        seed: int | None = None,
        max_iterations: int | None = Query(None, ge=1, le=10_000),
    ) -> ClusterResponse:
        result, used_seed = run_clustering(k, seed, max_iterations)
        return ClusterResponse(
            k=result.k,
            seed=used_seed,
            features=list(result.features),
            iterations=result.iterations,
            converged=result.converged,
            assignment=result.assignment,
            clusters=[
                ClusterGroupResponse(
                    index=index,
                    centroid=list(centroid),
                    player_ids=result.members(index),
                )
                for index, centroid in enumerate(result.centroids)
            ],
        )

    @app.get("/clusters/export.csv")
    async def clusters_export(
        k: int | None = None,
        seed: int | None = None,
        max_iterations: int | None = Query(None, ge=1, le=10_000),
    ) -> Response:
        result, _ = run_clustering(k, seed, max_iterations)
        csv_text = export_clusters_to_csv(result, pool)
        headers = {"Content-Disposition": 'attachment; filename="clusters.csv"'}
        return Response(content=csv_text, media_type="text/csv", headers=headers)

    return app
