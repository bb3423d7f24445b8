"""Runtime settings for podlinker, read from the environment."""
from __future__ import annotations
import os
from dotenv import load_dotenv

load_dotenv()

# Directory (Apple Podcasts search)
APPLE_SEARCH_URL = os.getenv("PODLINKER_APPLE_SEARCH_URL", "https://itunes.apple.com/search")
SEARCH_LIMIT = int(os.getenv("PODLINKER_SEARCH_LIMIT", "10"))

# HTTP transport; 0 disables the timeout
HTTP_TIMEOUT = float(os.getenv("PODLINKER_HTTP_TIMEOUT", "10")) or None
USER_AGENT = os.getenv(
    "PODLINKER_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)

# Logging
LOG_LEVEL = os.getenv("PODLINKER_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("PODLINKER_LOG_FILE") or None

# API server
API_HOST = os.getenv("PODLINKER_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("PODLINKER_API_PORT", "8787"))
