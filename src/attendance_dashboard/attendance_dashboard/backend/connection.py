from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS


@dataclass
class ApiConfig:
    base_url: str
    token: Optional[str] = None
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS


class ApiConnection:
    """Singleton-like HTTP session factory.

    Note: One `requests.Session` is reused for every call so the bearer token
    and keep-alive connections are shared by all repositories.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def config(self) -> ApiConfig:
        return self._config

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            session.headers.update({"Accept": "application/json, text/plain"})
            if self._config.token:
                session.headers["Authorization"] = f"Bearer {self._config.token}"
            self._session = session
        return self._session

    def url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
