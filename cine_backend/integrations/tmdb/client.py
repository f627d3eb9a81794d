from __future__ import annotations

import logging
import os
import random
import threading
import time
from typing import Any, Mapping

import requests

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_LANGUAGE = "es-ES"
DEFAULT_TIMEOUT_SECONDS = 10.0
MISSING_API_KEY_MESSAGE = (
    "TMDB_API_KEY environment variable is not set. Check your .env file or deployment settings."
)

logger = logging.getLogger(__name__)


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


def resolve_api_key(api_key: str | None = None) -> str | None:
    """
    Best-effort API key resolution.

    `TMDB_API_KEY` wins; the older `API_KEY` name is still honoured for existing deployments.
    """

    resolved = (api_key or os.getenv("TMDB_API_KEY") or os.getenv("API_KEY") or "").strip()
    return resolved or None


def require_api_key(api_key: str | None = None) -> str:
    resolved = resolve_api_key(api_key)
    if not resolved:
        raise RuntimeError(MISSING_API_KEY_MESSAGE)
    return resolved


def _retry_delay(attempt: int, retry_after: str | None = None) -> float:
    delay = 1.0 * (2**attempt)
    retry_after = (retry_after or "").strip()
    if retry_after.isdigit():
        delay = max(delay, float(retry_after))
    return delay + random.uniform(0.0, delay * 0.25)


def _request_json(
    session: requests.Session,
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    max_attempts: int = 1,
) -> dict[str, Any]:
    headers = {
        "accept": "application/json",
    }
    max_attempts = max(1, int(max_attempts))

    last_response: requests.Response | None = None
    for attempt in range(max_attempts):
        try:
            resp = session.get(url, params=params, headers=headers, timeout=timeout_seconds)
        except requests.RequestException as exc:
            # The exception text embeds the full URL, api_key included.
            message = f"TMDb request to {url} failed ({type(exc).__name__})"
            if attempt < max_attempts - 1:
                logger.warning(f"{message}; retrying")
                time.sleep(_retry_delay(attempt))
                continue
            logger.error(message)
            raise TmdbClientError(message) from exc

        last_response = resp
        if resp.status_code == 200:
            break

        retryable = resp.status_code == 429 or 500 <= resp.status_code < 600
        if retryable and attempt < max_attempts - 1:
            logger.warning(f"TMDb returned HTTP {resp.status_code} for {url}; retrying")
            time.sleep(_retry_delay(attempt, resp.headers.get("Retry-After")))
            continue

        logger.error(f"TMDb returned HTTP {resp.status_code} for {url}")
        raise TmdbClientError(
            f"TMDb request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    if last_response is None:
        raise TmdbClientError("TMDb request failed (no response).")
    resp = last_response

    try:
        payload = resp.json()
    except ValueError as exc:
        raise TmdbClientError(
            "TMDb returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise TmdbClientError("TMDb returned unexpected JSON shape (not an object).")
    return payload


class TmdbClient:
    """
    Thin TMDb v3 client bound to one api key and language.

    Localized requests carry `language` (Spanish by default); the api key is sent on every request.

    `requests.Session` is not thread-safe, so unless a session is injected each calling thread
    gets its own. Resolvers call `get_json` from worker threads concurrently.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        session: requests.Session | None = None,
        language: str = DEFAULT_LANGUAGE,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        max_attempts: int = 1,
        base_url: str = TMDB_API_BASE_URL,
    ) -> None:
        self._api_key = require_api_key(api_key)
        self._session = session
        self._local = threading.local()
        self._owned_sessions: list[requests.Session] = []
        self._sessions_lock = threading.Lock()
        self._language = language or DEFAULT_LANGUAGE
        self._timeout_seconds = timeout_seconds
        self._max_attempts = max_attempts
        self._base_url = base_url.rstrip("/")

    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        localized: bool = True,
    ) -> dict[str, Any]:
        query: dict[str, Any] = {"api_key": self._api_key}
        if localized:
            query["language"] = self._language
        for key, value in (params or {}).items():
            if value is not None:
                query[key] = value

        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug(f"GET {url} params={sorted(k for k in query if k != 'api_key')}")
        return _request_json(
            self._get_session(),
            url,
            params=query,
            timeout_seconds=self._timeout_seconds,
            max_attempts=self._max_attempts,
        )

    def _get_session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._sessions_lock:
                self._owned_sessions.append(session)
        return session

    def close(self) -> None:
        with self._sessions_lock:
            owned, self._owned_sessions = self._owned_sessions, []
            self._local = threading.local()
        for session in owned:
            session.close()
        if self._session is not None:
            self._session.close()
