from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DirectoryCandidate:
    id: int
    display_name: str
    feed_url: Optional[str] = None

    @property
    def has_feed(self) -> bool:
        return bool(self.feed_url)


@dataclass(frozen=True)
class EpisodeRecord:
    title: str
    identifier: Optional[str] = None   # None when the item has no usable <guid>

    @property
    def linkable(self) -> bool:
        return bool(self.identifier)


class MatchKind(str, Enum):
    EXACT = "exact"
    FUZZY = "fuzzy"
    FIRST_OF_LIST = "first_of_list"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class MatchOutcome(Generic[T]):
    kind: MatchKind
    match: Optional[T] = None

    @classmethod
    def none(cls) -> "MatchOutcome[T]":
        return cls(MatchKind.NO_MATCH)

    @property
    def found(self) -> bool:
        return self.kind is not MatchKind.NO_MATCH


@dataclass(frozen=True)
class ResolvedLink:
    url: str
    show_id: int
    show_name: str
    episode_title: str
    episode_identifier: str


@dataclass
class Result:
    show_name: str
    episode_title: str
    status: str               # "found" | PodlinkError.kind
    link: Optional[ResolvedLink] = None
    error: Optional[str] = None
    message: Optional[str] = None
    http_status: int = 200
    available_episodes: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "found"

    def to_payload(self) -> dict:
        if self.link is not None:
            return {
                "podlinkUrl": self.link.url,
                "podcast": {"name": self.link.show_name, "appleId": self.link.show_id},
                "episode": {"title": self.link.episode_title, "guid": self.link.episode_identifier},
            }
        payload = {"error": self.error, "message": self.message}
        if self.available_episodes:
            payload["availableEpisodes"] = list(self.available_episodes)
        return payload
