from __future__ import annotations
from enum import Enum
from typing import Any

from ..core import ResolvedLink, Result
from ..errors import EpisodeNotFound, MalformedFeed, NoEpisodes, NoFeedUrl, PodlinkError, ValidationError
from ..links import build_podlink_url, to_url_safe_base64
from ..log import get_logger
from ..parser.rss_parser import fetch_episodes
from .apple import search_show
from .episodes import episode_hints, find_episode

logger = get_logger(__name__)


class Stage(str, Enum):
    START = "start"
    SHOW_RESOLVED = "show_resolved"
    FEED_RETRIEVED = "feed_retrieved"
    EPISODE_RESOLVED = "episode_resolved"
    DONE = "done"


def resolve_podlink(show_name: str, episode_title: str) -> Result:
    """Run show search, feed fetch, episode match and link building in order.

    Never raises: every failure is turned into a classified Result.
    """
    stage = Stage.START
    try:
        show = search_show(show_name)
        stage = Stage.SHOW_RESOLVED
        logger.debug("%s: %r -> %s (%s)", stage.value, show_name, show.display_name, show.id)

        if not show.has_feed:
            raise NoFeedUrl(f'Podcast "{show.display_name}" has no RSS feed URL')

        episodes = fetch_episodes(show.feed_url)
        stage = Stage.FEED_RETRIEVED
        logger.debug("%s: %d episodes from %s", stage.value, len(episodes), show.feed_url)

        if not episodes:
            raise NoEpisodes(f'Podcast "{show.display_name}" has no episodes')

        outcome = find_episode(episodes, episode_title)
        if not outcome.found:
            raise EpisodeNotFound(
                f'No episode found matching "{episode_title}" in "{show.display_name}"',
                episode_hints(episodes),
            )
        episode = outcome.match
        if not episode.linkable:
            raise MalformedFeed(f'Episode "{episode.title}" has no guid', show.feed_url)
        stage = Stage.EPISODE_RESOLVED
        logger.debug("%s: %r via %s match", stage.value, episode.title, outcome.kind.value)

        link = ResolvedLink(
            url=build_podlink_url(show.id, to_url_safe_base64(episode.identifier)),
            show_id=show.id,
            show_name=show.display_name,
            episode_title=episode.title,
            episode_identifier=episode.identifier,
        )
        stage = Stage.DONE
    except PodlinkError as e:
        logger.warning("Resolution failed after %s: %s (%s)", stage.value, e.kind, e.message)
        return _failure(show_name, episode_title, e)
    except Exception as e:
        logger.exception("Unexpected error after %s while resolving %r / %r", stage.value, show_name, episode_title)
        return Result(
            show_name, episode_title, PodlinkError.kind,
            error=PodlinkError.error,
            message=str(e) or "Unknown error occurred",
            http_status=PodlinkError.http_status,
        )

    logger.info("Resolved %r / %r -> %s", show_name, episode_title, link.url)
    return Result(show_name, episode_title, "found", link=link)


def handle_request(body: Any) -> tuple[int, dict]:
    """Validate a decoded JSON body and resolve it. Returns (status, payload)."""
    try:
        show_name, episode_title = _validate(body)
    except ValidationError as e:
        logger.info("Rejected request: %s", e.message)
        return e.http_status, {"error": e.error, "message": e.message}

    result = resolve_podlink(show_name, episode_title)
    return result.http_status, result.to_payload()


def _validate(body: Any) -> tuple[str, str]:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    for key in ("showName", "episodeTitle"):
        value = body.get(key)
        if not value or not isinstance(value, str):
            raise ValidationError(f"Missing or invalid '{key}' field")
    return body["showName"], body["episodeTitle"]


def _failure(show_name: str, episode_title: str, e: PodlinkError) -> Result:
    return Result(
        show_name, episode_title, e.kind,
        error=e.error,
        message=e.message,
        http_status=e.http_status,
        available_episodes=getattr(e, "available_episodes", []),
    )
