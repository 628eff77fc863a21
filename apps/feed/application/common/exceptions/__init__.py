"""Application Exceptions."""

from apps.feed.application.common.exceptions.base import ApplicationError
from apps.feed.application.common.exceptions.gateway import DataMapperError, GatewayError

__all__ = ["ApplicationError", "GatewayError", "DataMapperError"]
