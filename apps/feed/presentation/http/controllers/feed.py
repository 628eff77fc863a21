"""Feed Controller."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from apps.feed.application.feed import FeedRequestParser, GetFeedQuery
from apps.feed.domain.exceptions import ValidationError
from apps.feed.infrastructure.metrics import (
    increment_request,
    observe_candidates,
    track_query_duration,
)
from apps.feed.presentation.http.schemas import ErrorResponse, FeedResponse
from apps.feed.setup.constants import STATUS_ERROR, STATUS_INVALID, STATUS_SUCCESS
from apps.feed.setup.dependencies import get_feed_query, get_feed_request_parser

router = APIRouter(tags=["feed"])

ENDPOINT = "feed"


@router.get(
    "/feed",
    response_model=FeedResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Nearby video feed (cursor paginated)",
)
async def get_feed(
    lat: str | None = Query(None, description="위도 (lng, radiusMi와 함께)"),
    lng: str | None = Query(None, description="경도 (lat, radiusMi와 함께)"),
    radius_mi: str | None = Query(None, alias="radiusMi", description="반경 (miles, > 0)"),
    category: str | None = Query(None),
    cursor: str | None = Query(None, description='"<ISO timestamp>:<id>"'),
    limit: str | None = Query(None, description="페이지 크기 (기본 20, 최대 50)"),
    parser: FeedRequestParser = Depends(get_feed_request_parser),
    query: GetFeedQuery = Depends(get_feed_query),
) -> FeedResponse:
    try:
        request = parser.parse(
            lat=lat,
            lng=lng,
            radius_mi=radius_mi,
            category=category,
            cursor=cursor,
            limit=limit,
        )
    except ValidationError:
        increment_request(ENDPOINT, STATUS_INVALID)
        raise

    try:
        with track_query_duration(request.has_location):
            page = await query.execute(request)
    except Exception:
        increment_request(ENDPOINT, STATUS_ERROR)
        raise

    observe_candidates(request.has_location, page.candidates_fetched)
    increment_request(ENDPOINT, STATUS_SUCCESS)
    return FeedResponse.from_page(page)
