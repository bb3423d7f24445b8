"""Shared fixtures for podlinker tests"""
from __future__ import annotations
from xml.sax.saxutils import escape

import pytest
import responses

from podlinker import config

FEED_URL = "https://example.test/feed"


def rss_document(items: list[dict], *, title: str = "Test Podcast") -> str:
    """Build an RSS 2.0 document; item dicts may carry "title", "guid" and "guid_attrs"."""
    parts = []
    for it in items:
        attrs = "".join(f' {k}="{v}"' for k, v in (it.get("guid_attrs") or {}).items())
        parts.append(
            "<item>"
            + (f"<title>{escape(it['title'])}</title>" if "title" in it else "")
            + (f"<guid{attrs}>{escape(it['guid'])}</guid>" if "guid" in it else "")
            + '<enclosure url="https://example.test/audio.mp3" type="audio/mpeg"/>'
            + "</item>"
        )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel>'
        f"<title>{escape(title)}</title>"
        + "".join(parts)
        + "</channel></rss>"
    )


def search_payload(*shows: dict) -> dict:
    results = [
        {
            "collectionId": s["id"],
            "collectionName": s["name"],
            **({"feedUrl": s["feedUrl"]} if s.get("feedUrl") else {}),
        }
        for s in shows
    ]
    return {"resultCount": len(results), "results": results}


@pytest.fixture
def mocked_http():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def add_search(mocked_http):
    def _add(*shows: dict, status: int = 200):
        mocked_http.add(responses.GET, config.APPLE_SEARCH_URL, json=search_payload(*shows), status=status)
    return _add


@pytest.fixture
def add_feed(mocked_http):
    def _add(items: list[dict], *, url: str = FEED_URL, status: int = 200):
        mocked_http.add(
            responses.GET, url,
            body=rss_document(items),
            status=status,
            content_type="application/rss+xml",
        )
    return _add
