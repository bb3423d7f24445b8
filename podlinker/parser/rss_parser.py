from __future__ import annotations
import xml.etree.ElementTree as ET
from typing import Mapping, Optional, Union

import requests

from ..core import EpisodeRecord
from ..errors import FeedUnavailable, MalformedFeed
from ..http import FEED_ACCEPT, get
from ..log import get_logger

logger = get_logger(__name__)

# A <guid> is either bare text or text plus attributes, e.g.
# {"#text": "abc-123", "@isPermaLink": "false"}
GuidValue = Union[str, Mapping[str, str]]
TEXT_KEY = "#text"


def extract_guid(guid: GuidValue) -> str:
    if isinstance(guid, str):
        return guid
    return guid.get(TEXT_KEY) or ""


class PodcastRSSParser:
    def __init__(self, rss_url: str):
        self.rss_url = rss_url
        self.episodes: list[EpisodeRecord] = []

    def fetch_and_parse(self) -> list[EpisodeRecord]:
        """Fetch the RSS feed and parse every <item> into an EpisodeRecord"""
        try:
            response = get(self.rss_url, headers=FEED_ACCEPT)
        except requests.RequestException as e:
            raise FeedUnavailable(f"Failed to fetch RSS feed: {e}", self.rss_url) from e
        if not response.ok:
            raise FeedUnavailable(f"Failed to fetch RSS feed: {response.status_code}", self.rss_url)

        self.parse(response.content)
        return self.episodes

    def parse(self, content: bytes | str) -> list[EpisodeRecord]:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise MalformedFeed(f"Invalid RSS feed: {e}", self.rss_url) from e

        channel = root.find("channel") if root.tag == "rss" else None
        if channel is None:
            raise MalformedFeed("Invalid RSS feed structure", self.rss_url)

        # One <item> or many, the result is always a flat list in feed order
        self.episodes = [self._parse_episode(item) for item in channel.findall("item")]
        logger.debug("Parsed %d episodes from %s", len(self.episodes), self.rss_url)
        return self.episodes

    def _parse_episode(self, item: ET.Element) -> EpisodeRecord:
        title = self._get_text(item, "title") or ""
        guid = self._get_guid(item)
        identifier = extract_guid(guid).strip() if guid is not None else ""
        # Trailers often ship without a guid; they stay listed but cannot be linked
        return EpisodeRecord(title=title, identifier=identifier or None)

    def _get_guid(self, item: ET.Element) -> Optional[GuidValue]:
        found = item.find("guid")
        if found is None:
            return None
        text = found.text or ""
        if not found.attrib:
            return text
        value = {f"@{k}": v for k, v in found.attrib.items()}
        value[TEXT_KEY] = text
        return value

    def _get_text(self, element: ET.Element, tag: str) -> Optional[str]:
        """Safely extract stripped text from an XML child"""
        found = element.find(tag)
        if found is None or found.text is None:
            return None
        return found.text.strip()


def fetch_episodes(feed_url: str) -> list[EpisodeRecord]:
    return PodcastRSSParser(feed_url).fetch_and_parse()
