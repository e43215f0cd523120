from __future__ import annotations

from typing import Any, Dict

from calc_aposentadoria.extractors.errors import ensure_ok
from calc_aposentadoria.utils.io.http import HttpTransport


class InflacaoApiClient:
    """Cliente das rotas /api/inflacao e /api/focus."""

    def __init__(self, transport: HttpTransport, base_url: str = ""):
        self.transport = transport
        self.base_url = base_url.rstrip("/")

    def _get_json(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        r = self.transport.get(url, params=params)
        ensure_ok(r, url)
        return r.json()

    def get_inflacao(self, index: str, period: str = "10y") -> Dict[str, Any]:
        return self._get_json("/api/inflacao", {"index": index, "period": period})

    def get_focus(self, horizon: str = "12m") -> Dict[str, Any]:
        return self._get_json("/api/focus", {"horizon": horizon})
