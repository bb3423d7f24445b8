"""Failure taxonomy for podcast link resolution.

Every failure the pipeline can report is a ``PodlinkError`` subclass. Each
class fixes three things the host boundary needs:

    kind         stable identifier for logs and tests
    error        short code put in the ``error`` field of the payload
    http_status  status code returned to the caller

Hierarchy:
    PodlinkError
    ├── ValidationError        400
    ├── ShowNotFound           404
    ├── NoFeedUrl              404
    ├── FeedError              404
    │   ├── FeedUnavailable
    │   └── MalformedFeed
    ├── NoEpisodes             404
    ├── EpisodeNotFound        404 (carries hint titles)
    └── DirectoryUnavailable   500
"""
from __future__ import annotations
from typing import Optional, Sequence


class PodlinkError(Exception):
    kind = "unexpected"
    error = "Internal server error"
    http_status = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(PodlinkError):
    kind = "validation_error"
    error = "Invalid request"
    http_status = 400


class ShowNotFound(PodlinkError):
    kind = "show_not_found"
    error = "Podcast not found"
    http_status = 404


class NoFeedUrl(PodlinkError):
    kind = "no_feed_url"
    error = "No feed URL"
    http_status = 404


class FeedError(PodlinkError):
    """Feed could not be read; callers see it as a show with no episodes."""

    error = "No episodes"
    http_status = 404

    def __init__(self, message: str, feed_url: Optional[str] = None) -> None:
        self.feed_url = feed_url
        super().__init__(message)


class FeedUnavailable(FeedError):
    kind = "feed_unavailable"


class MalformedFeed(FeedError):
    kind = "malformed_feed"


class NoEpisodes(PodlinkError):
    kind = "no_episodes"
    error = "No episodes"
    http_status = 404


class EpisodeNotFound(PodlinkError):
    kind = "episode_not_found"
    error = "Episode not found"
    http_status = 404

    def __init__(self, message: str, available_episodes: Sequence[str] = ()) -> None:
        self.available_episodes = list(available_episodes)
        super().__init__(message)


class DirectoryUnavailable(PodlinkError):
    kind = "directory_unavailable"
