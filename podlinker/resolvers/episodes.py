from __future__ import annotations
from typing import Optional, Sequence

from ..core import EpisodeRecord, MatchKind, MatchOutcome
from ..text import fuzzy_match, normalize_text, same_text

HINT_LIMIT = 5


def find_episode(episodes: Sequence[EpisodeRecord], title: str) -> MatchOutcome[EpisodeRecord]:
    """Exact title first, then fuzzy containment. Never guesses beyond that.

    Untitled items never match: an empty title is contained in every query.
    """
    titled = [ep for ep in episodes if normalize_text(ep.title)]
    if not normalize_text(title):
        return MatchOutcome.none()
    for ep in titled:
        if same_text(ep.title, title):
            return MatchOutcome(MatchKind.EXACT, ep)
    for ep in titled:
        if fuzzy_match(ep.title, title):
            return MatchOutcome(MatchKind.FUZZY, ep)
    return MatchOutcome.none()


def resolve_episode(episodes: Sequence[EpisodeRecord], title: str) -> Optional[EpisodeRecord]:
    return find_episode(episodes, title).match


def episode_hints(episodes: Sequence[EpisodeRecord], limit: int = HINT_LIMIT) -> list[str]:
    return [ep.title for ep in episodes[:min(limit, HINT_LIMIT)]]
