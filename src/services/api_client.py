"""HTTP client for the project/version API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from config.app_config import AppConfig, load_app_config
from .errors import ApiError, AuthenticationError, NotFoundError

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin wrapper around ``requests.Session`` with bearer-token auth.

    A 401 response clears the stored token before raising
    ``AuthenticationError`` so the caller can send the user back to login.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or load_app_config()
        self.token = token
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json", "Accept": "application/json"})

    @property
    def base_url(self) -> str:
        return self.config.api_url.rstrip("/")

    def set_token(self, token: Optional[str]) -> None:
        self.token = token

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        query = {k: v for k, v in (params or {}).items() if v is not None}

        try:
            resp = self.session.request(
                method,
                url,
                params=query or None,
                json=json,
                headers=self._auth_headers(),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.warning(
                "API request failed: %s %s",
                method,
                url,
                extra={"event": "api.transport_error", "error_type": type(e).__name__},
            )
            raise ApiError(f"{method} {url} failed: {e}", url=url) from e

        if resp.status_code == 401:
            self.token = None
            raise AuthenticationError("Not authenticated or session expired", status_code=401, url=url)
        if resp.status_code == 404:
            raise NotFoundError(f"Resource not found: {path}", status_code=404, url=url)
        if not resp.ok:
            raise ApiError(
                f"{method} {url} returned {resp.status_code}: {_error_detail(resp)}",
                status_code=resp.status_code,
                url=url,
            )

        logger.debug(
            "API %s %s -> %s",
            method,
            path,
            resp.status_code,
            extra={"event": "api.response", "status_code": resp.status_code},
        )
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"{method} {url} returned invalid JSON", status_code=resp.status_code, url=url) from e

    def _auth_headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


def _error_detail(resp: requests.Response) -> str:
    try:
        payload = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(payload, dict):
        return str(payload.get("message") or payload.get("title") or payload)
    return str(payload)
