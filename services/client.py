# services/client.py
"""
HTTP client for the search API (api/main.py).

- Base URL -> argument, or env DNA_SEARCH_API_URL
- 400      -> InvalidInput with the server's reason
- other    -> requests.HTTPError via raise_for_status()
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Tuple

import requests

from algorithms.trace import Result, Trace
from utils.dna import InvalidInput

logger = logging.getLogger(__name__)


class SearchClient:
    def __init__(self, base_url: Optional[str] = None, timeout: int = 15,
                 session: Optional[requests.Session] = None):
        base_url = base_url or os.getenv("DNA_SEARCH_API_URL")
        if not base_url:
            raise ValueError("no API base URL given and DNA_SEARCH_API_URL is unset")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def health(self) -> bool:
        try:
            r = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
            return r.status_code == 200 and bool((r.json() or {}).get("ok"))
        except requests.RequestException as e:
            logger.warning("health check against %s failed: %s", self.base_url, e)
            return False

    def search(self, text: str, pattern: str, annotate: bool = False,
               seed: Optional[int] = None) -> Dict:
        payload = {"text": text, "pattern": pattern, "annotate": annotate, "seed": seed}
        r = self.session.post(f"{self.base_url}/api/search", json=payload, timeout=self.timeout)
        if r.status_code == 400:
            data = r.json() or {}
            raise InvalidInput(data.get("error") or data.get("message") or "Invalid input")
        r.raise_for_status()
        return r.json() or {}

    def search_trace(self, text: str, pattern: str) -> Tuple[Result, Trace]:
        data = self.search(text, pattern)
        return Result.from_dict(data["result"]), Trace.from_list(data["trace"])
