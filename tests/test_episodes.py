"""Tests for episode matching"""
import pytest

from podlinker.core import EpisodeRecord, MatchKind
from podlinker.resolvers.episodes import episode_hints, find_episode, resolve_episode


def _eps(*titles):
    return [EpisodeRecord(title=t, identifier=f"guid-{i}") for i, t in enumerate(titles)]


@pytest.mark.unit
class TestFindEpisode:
    def test_exact_beats_earlier_fuzzy(self):
        episodes = _eps("Latest Episode Part 2", "Latest Episode")
        outcome = find_episode(episodes, "latest episode")
        assert outcome.kind is MatchKind.EXACT
        assert outcome.match.identifier == "guid-1"

    def test_fuzzy_when_title_abbreviated(self):
        outcome = find_episode(_eps("Intro", "#412: The Big Interview with Someone"), "the big interview")
        assert outcome.kind is MatchKind.FUZZY
        assert outcome.match.identifier == "guid-1"

    def test_fuzzy_when_query_longer(self):
        outcome = find_episode(_eps("Big Interview"), "The Big Interview (rebroadcast)")
        assert outcome.kind is MatchKind.FUZZY

    def test_no_third_tier_fallback(self):
        outcome = find_episode(_eps("Ep1", "Ep2"), "Ep3")
        assert outcome.kind is MatchKind.NO_MATCH
        assert outcome.match is None
        assert resolve_episode(_eps("Ep1", "Ep2"), "Ep3") is None

    def test_returns_original_title(self):
        match = resolve_episode(_eps("  LATEST   Episode "), "latest episode")
        assert match.title == "  LATEST   Episode "


@pytest.mark.unit
class TestEpisodeHints:
    def test_first_five_in_feed_order(self):
        episodes = _eps("A", "b", "C c", "D", "E", "F", "G")
        assert episode_hints(episodes) == ["A", "b", "C c", "D", "E"]

    def test_fewer_than_limit(self):
        assert episode_hints(_eps("Only")) == ["Only"]

    def test_custom_limit(self):
        assert episode_hints(_eps("A", "B", "C"), limit=2) == ["A", "B"]


@pytest.mark.unit
class TestUntitledEpisodes:
    def test_untitled_item_never_matches(self):
        episodes = [EpisodeRecord("", "trailer"), EpisodeRecord("Real Episode", "g-1")]
        assert find_episode(episodes, "Totally Unrelated Title").kind is MatchKind.NO_MATCH

    def test_whitespace_title_never_matches(self):
        episodes = [EpisodeRecord("   ", "trailer"), EpisodeRecord("Real Episode", "g-1")]
        assert resolve_episode(episodes, "real episode").identifier == "g-1"

    def test_blank_query_matches_nothing(self):
        assert not find_episode(_eps("", "Ep1"), "   ").found

    def test_untitled_items_still_listed_in_hints(self):
        assert episode_hints([EpisodeRecord("", "t"), EpisodeRecord("Ep1", "g")]) == ["", "Ep1"]

    def test_hint_limit_capped_at_five(self):
        assert len(episode_hints(_eps(*"ABCDEFGH"), limit=10)) == 5
