"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# =============================================================================
# Service Identity
# =============================================================================

SERVICE_NAME = "feed-api"
SERVICE_VERSION = "1.0.0"

# =============================================================================
# Logging Constants (12-Factor App Compliance)
# =============================================================================

ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

# 로그 레코드에서 제외할 기본 속성
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "sqlalchemy.engine",
    "asyncio",
)

# =============================================================================
# PII Masking
# =============================================================================

SENSITIVE_FIELD_PATTERNS = frozenset({"password", "secret", "token", "authorization", "email"})
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# =============================================================================
# HTTP Error Messages
# =============================================================================

INTERNAL_ERROR_MESSAGE = "Internal server error"

# =============================================================================
# Metrics Constants
# =============================================================================

METRICS_PATH = "/metrics/status"

METRIC_REQUESTS_TOTAL = "feed_requests_total"
METRIC_QUERY_DURATION = "feed_query_duration_seconds"
METRIC_CANDIDATES_FETCHED = "feed_candidates_fetched"

QUERY_DURATION_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)
CANDIDATE_BUCKETS = (0, 1, 5, 10, 21, 51, 100, 200, 500)

STATUS_SUCCESS = "success"
STATUS_INVALID = "invalid"
STATUS_ERROR = "error"
