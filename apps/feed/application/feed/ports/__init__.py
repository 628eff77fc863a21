"""Application Ports."""

from apps.feed.application.feed.ports.video_reader import VideoCriteria, VideoReader

__all__ = ["VideoCriteria", "VideoReader"]
