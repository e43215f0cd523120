from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Protocol
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


class HttpTransport(Protocol):
    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response: ...


@dataclass(frozen=True)
class HTTPConfig:
    # Sem retry por padrão: falha do upstream vira erro imediato no envelope.
    timeout_sec: int = 30
    max_retries: int = 0
    backoff_sec: float = 0.0
    headers: Optional[Dict[str, str]] = field(default_factory=lambda: {"accept": "application/json"})


class RequestsTransport:
    def __init__(self, cfg: Optional[HTTPConfig] = None):
        self.cfg = cfg or HTTPConfig()
        session = requests.Session()
        retries = Retry(
            total=self.cfg.max_retries,
            backoff_factor=self.cfg.backoff_sec,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("GET",),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retries)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        self.session = session

    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        h = headers or self.cfg.headers
        return self.session.get(url, params=params, headers=h, timeout=self.cfg.timeout_sec)
