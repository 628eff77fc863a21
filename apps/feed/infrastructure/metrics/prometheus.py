"""Feed 서비스 Prometheus 메트릭

수집 항목:
- 엔드포인트별 요청 결과 (success / invalid / error)
- 피드 쿼리 처리 시간 (위치 필터 여부별)
- 피드 쿼리당 저장소에서 읽은 후보 수
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Generator

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from apps.feed.setup.constants import (
    CANDIDATE_BUCKETS,
    METRIC_CANDIDATES_FETCHED,
    METRIC_QUERY_DURATION,
    METRIC_REQUESTS_TOTAL,
    METRICS_PATH,
    QUERY_DURATION_BUCKETS,
)

REGISTRY = CollectorRegistry(auto_describe=True)

REQUEST_TOTAL = Counter(
    name=METRIC_REQUESTS_TOTAL,
    documentation="Total number of feed service requests",
    labelnames=["endpoint", "status"],
    registry=REGISTRY,
)

QUERY_DURATION = Histogram(
    name=METRIC_QUERY_DURATION,
    documentation="Time spent building one feed page",
    labelnames=["location"],  # "true" or "false"
    buckets=QUERY_DURATION_BUCKETS,
    registry=REGISTRY,
)

CANDIDATES_FETCHED = Histogram(
    name=METRIC_CANDIDATES_FETCHED,
    documentation="Candidates read from the store per feed page",
    labelnames=["location"],
    buckets=CANDIDATE_BUCKETS,
    registry=REGISTRY,
)


def increment_request(endpoint: str, status: str) -> None:
    REQUEST_TOTAL.labels(endpoint=endpoint, status=status).inc()


def observe_candidates(has_location: bool, count: int) -> None:
    CANDIDATES_FETCHED.labels(location=str(has_location).lower()).observe(count)


@contextmanager
def track_query_duration(has_location: bool) -> Generator[None, None, None]:
    """피드 쿼리 처리 시간 기록."""
    start = time.perf_counter()
    try:
        yield
    finally:
        QUERY_DURATION.labels(location=str(has_location).lower()).observe(
            time.perf_counter() - start
        )


def register_metrics(app: FastAPI) -> None:
    """Prometheus 엔드포인트 등록"""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
