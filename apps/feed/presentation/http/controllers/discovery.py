"""Nearby Discovery Controller.

GET /businesses, GET /videos — 페이지네이션 없는 주변 목록 조회.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from apps.feed.application.discovery import (
    GetNearbyBusinessesQuery,
    GetNearbyVideosQuery,
    parse_discovery_request,
)
from apps.feed.infrastructure.metrics import increment_request
from apps.feed.presentation.http.schemas import ErrorResponse, NearbyBusinessEntry, VideoEntry
from apps.feed.setup.constants import STATUS_SUCCESS
from apps.feed.setup.dependencies import get_nearby_businesses_query, get_nearby_videos_query

router = APIRouter(tags=["discovery"])

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get(
    "/businesses",
    response_model=list[NearbyBusinessEntry],
    response_model_exclude_unset=True,
    responses=_ERROR_RESPONSES,
    summary="List businesses, optionally within a radius",
)
async def list_businesses(
    lat: str | None = Query(None),
    lng: str | None = Query(None),
    radius: str | None = Query(None, description="반경 (miles)"),
    category: str | None = Query(None),
    query: GetNearbyBusinessesQuery = Depends(get_nearby_businesses_query),
) -> list[NearbyBusinessEntry]:
    request = parse_discovery_request(lat=lat, lng=lng, radius=radius, category=category)
    results = await query.execute(request)
    increment_request("businesses", STATUS_SUCCESS)
    return [NearbyBusinessEntry.from_dto(result) for result in results]


@router.get(
    "/videos",
    response_model=list[VideoEntry],
    responses=_ERROR_RESPONSES,
    summary="List videos, optionally within a radius",
)
async def list_videos(
    lat: str | None = Query(None),
    lng: str | None = Query(None),
    radius: str | None = Query(None, description="반경 (miles)"),
    category: str | None = Query(None),
    query: GetNearbyVideosQuery = Depends(get_nearby_videos_query),
) -> list[VideoEntry]:
    request = parse_discovery_request(lat=lat, lng=lng, radius=radius, category=category)
    videos = await query.execute(request)
    increment_request("videos", STATUS_SUCCESS)
    return [VideoEntry.from_entity(video) for video in videos]
