from __future__ import annotations
from typing import Iterable, Sequence

import requests

from .. import config
from ..core import DirectoryCandidate, MatchKind, MatchOutcome
from ..errors import DirectoryUnavailable, ShowNotFound
from ..http import JSON_ACCEPT, get
from ..log import get_logger
from ..text import fuzzy_match, normalize_text, same_text

logger = get_logger(__name__)


def search_show(show_name: str) -> DirectoryCandidate:
    """Find the Apple Podcasts show that best matches ``show_name``.

    Raises ShowNotFound when the search comes back empty and
    DirectoryUnavailable when the API cannot be reached or answers with an
    error status.
    """
    params = {
        "term": show_name,
        "media": "podcast",
        "entity": "podcast",
        "limit": config.SEARCH_LIMIT,
    }
    try:
        resp = get(config.APPLE_SEARCH_URL, params=params, headers=JSON_ACCEPT)
    except requests.RequestException as e:
        raise DirectoryUnavailable(f"Apple Search API unreachable: {e}") from e
    if not resp.ok:
        raise DirectoryUnavailable(f"Apple Search API error: {resp.status_code}")
    try:
        data = resp.json()
    except ValueError as e:
        raise DirectoryUnavailable("Apple Search API returned invalid JSON") from e

    candidates = list(_candidates(data.get("results") or []))
    if data.get("resultCount") == 0 or not candidates:
        raise ShowNotFound(f'No podcast found matching "{show_name}"')

    outcome = rank_candidates(candidates, show_name)
    logger.debug(
        "Picked %r (id=%s) for %r via %s match out of %d results",
        outcome.match.display_name, outcome.match.id, show_name,
        outcome.kind.value, len(candidates),
    )
    return outcome.match


def rank_candidates(candidates: Sequence[DirectoryCandidate], show_name: str) -> MatchOutcome[DirectoryCandidate]:
    """Exact name first, then fuzzy containment, then the directory's own first hit."""
    if not candidates:
        return MatchOutcome.none()
    # unnamed results would contain every query
    named = [c for c in candidates if normalize_text(c.display_name)] if normalize_text(show_name) else []
    for c in named:
        if same_text(c.display_name, show_name):
            return MatchOutcome(MatchKind.EXACT, c)
    for c in named:
        if fuzzy_match(c.display_name, show_name):
            return MatchOutcome(MatchKind.FUZZY, c)
    return MatchOutcome(MatchKind.FIRST_OF_LIST, candidates[0])


def _candidates(results: Iterable[dict]) -> Iterable[DirectoryCandidate]:
    for it in results:
        collection_id = it.get("collectionId")
        if not isinstance(collection_id, int) or isinstance(collection_id, bool):
            continue
        yield DirectoryCandidate(
            id=collection_id,
            display_name=it.get("collectionName") or "",
            feed_url=it.get("feedUrl") or None,
        )
