from __future__ import annotations
import requests

from . import config

HEADERS = {"User-Agent": config.USER_AGENT, "Accept": "*/*"}
JSON_ACCEPT = {"Accept": "application/json"}
FEED_ACCEPT = {"Accept": "application/xml, application/rss+xml, text/xml"}


def get(url: str, *, params: dict | None = None, headers: dict | None = None) -> requests.Response:
    h = dict(HEADERS)
    if headers:
        h.update(headers)
    return requests.get(url, params=params, headers=h, timeout=config.HTTP_TIMEOUT)
