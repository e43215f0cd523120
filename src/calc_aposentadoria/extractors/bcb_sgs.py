from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from calc_aposentadoria.extractors.errors import ensure_ok
from calc_aposentadoria.utils.calendar.month_range import PeriodRange
from calc_aposentadoria.utils.io.http import HttpTransport

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SgsConfig:
    base_url: str = "https://api.bcb.gov.br/dados/serie"
    source: str = "BCB/SGS"


class BcbSgsExtractor:
    """
    Busca uma série do SGS e devolve as linhas JSON como vieram
    ([{"data": "dd/mm/aaaa", "valor": "0.52"}, ...]).
    """

    def __init__(self, transport: HttpTransport, cfg: Optional[SgsConfig] = None):
        self.transport = transport
        self.cfg = cfg or SgsConfig()

    def build_url(self, series_id: int) -> str:
        return f"{self.cfg.base_url.rstrip('/')}/bcdata.sgs.{series_id}/dados"

    def fetch(self, series_id: int, period: Optional[PeriodRange] = None) -> List[Dict[str, Any]]:
        url = self.build_url(series_id)
        params: Dict[str, Any] = {"formato": "json"}
        if period is not None:
            params["dataInicial"] = period.start_date_str()
            params["dataFinal"] = period.end_date_str()

        log.info("SGS fetch: series=%s params=%s", series_id, params)
        r = self.transport.get(url, params=params)
        ensure_ok(r, url)

        data = r.json()
        return data if isinstance(data, list) else []
