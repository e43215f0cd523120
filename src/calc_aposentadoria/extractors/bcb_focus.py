from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from calc_aposentadoria.extractors.errors import ensure_ok
from calc_aposentadoria.utils.io.http import HttpTransport

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocusConfig:
    url: str = (
        "https://olinda.bcb.gov.br/olinda/servico/Expectativas/versao/v1/odata/"
        "ExpectativasMercadoInflacao12Meses?$top=12&$format=json"
    )
    source: str = "BCB/Olinda"


class BcbFocusExtractor:
    """Busca as expectativas de inflação 12m (Focus) no Olinda; retorna o array 'value'."""

    def __init__(self, transport: HttpTransport, cfg: Optional[FocusConfig] = None):
        self.transport = transport
        self.cfg = cfg or FocusConfig()

    def fetch(self) -> List[Dict[str, Any]]:
        log.info("Olinda fetch: %s", self.cfg.url)
        r = self.transport.get(self.cfg.url)
        ensure_ok(r, self.cfg.url)

        payload = r.json()
        rows = payload.get("value") if isinstance(payload, dict) else None
        return rows if isinstance(rows, list) else []
