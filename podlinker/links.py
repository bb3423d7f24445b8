from __future__ import annotations
import base64

PODLINK_BASE_URL = "https://pod.link"


def to_url_safe_base64(identifier: str) -> str:
    """Base64 of the UTF-8 bytes with ``+/`` swapped for ``-_`` and no ``=`` padding."""
    encoded = base64.b64encode(identifier.encode("utf-8")).decode("ascii")
    return encoded.replace("+", "-").replace("/", "_").rstrip("=")


def from_url_safe_base64(token: str) -> str:
    padded = token + "=" * (-len(token) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")


def build_podlink_url(show_id: int, encoded_identifier: str) -> str:
    return f"{PODLINK_BASE_URL}/{int(show_id):d}/episode/{encoded_identifier}"
