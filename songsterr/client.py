import logging
import threading
import time
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config.settings import (
    SONGSTERR_BASE_URL,
    SONGSTERR_MIN_INTERVAL_SECONDS,
    SONGSTERR_SEARCH_PATH,
    SONGSTERR_TIMEOUT_SECONDS,
    SONGSTERR_USER_AGENT,
)

logger = logging.getLogger(__name__)


class TabSearchError(RuntimeError):
    pass


class SongsterrSearchClient:
    """Issues one search request per query and returns the raw response markup."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        search_path: str | None = None,
        user_agent: str | None = None,
        timeout_seconds: float | None = None,
        min_interval_seconds: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or SONGSTERR_BASE_URL).rstrip("/") + "/"
        self.search_path = search_path or SONGSTERR_SEARCH_PATH
        self.user_agent = user_agent or SONGSTERR_USER_AGENT
        self.timeout_seconds = SONGSTERR_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
        interval = SONGSTERR_MIN_INTERVAL_SECONDS if min_interval_seconds is None else min_interval_seconds
        self.min_interval_seconds = max(0.0, interval)
        self._rate_lock = threading.Lock()
        self._last_request_ts = 0.0
        if session is None:
            session = requests.Session()
            retry = Retry(
                total=3,
                backoff_factor=0.4,
                status_forcelist=(429, 500, 502, 503, 504),
                allowed_methods=frozenset({"GET"}),
                respect_retry_after_header=True,
            )
            adapter = HTTPAdapter(max_retries=retry)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        self._session = session

    @property
    def search_url(self) -> str:
        return urljoin(self.base_url, self.search_path.lstrip("/"))

    def _sleep_for_rate_limit(self) -> None:
        if not self.min_interval_seconds:
            return
        with self._rate_lock:
            now = time.monotonic()
            elapsed = now - self._last_request_ts
            wait_for = self.min_interval_seconds - elapsed
            if wait_for > 0:
                time.sleep(wait_for)
            self._last_request_ts = time.monotonic()

    def search(self, query: str) -> str:
        """Return the search page markup for ``query``; raise TabSearchError on any failure."""
        self._sleep_for_rate_limit()
        try:
            resp = self._session.get(
                self.search_url,
                params={"pattern": query},
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.info(f"[SONGSTERR] request=search status=error query={query!r}")
            raise TabSearchError(f"tab search transport error: {exc}") from exc
        status = int(resp.status_code)
        logger.info(f"[SONGSTERR] request=search status={status} query={query!r}")
        if status != 200:
            raise TabSearchError(f"tab search failed ({status})")
        return resp.text or ""

    def resolve_url(self, url: str) -> str:
        """Make a tab page path absolute against the tab site origin."""
        if url.startswith("http"):
            return url
        return urljoin(self.base_url, url.lstrip("/"))
