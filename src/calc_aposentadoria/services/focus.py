from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from calc_aposentadoria.domain.focus.extract import extract_focus_median
from calc_aposentadoria.domain.focus.models import ForecastMedian
from calc_aposentadoria.extractors.bcb_focus import BcbFocusExtractor
from calc_aposentadoria.extractors.errors import NoValueError

log = logging.getLogger(__name__)

SUPPORTED_HORIZONS = ("12m",)


class FocusDataAdapter:
    def __init__(self, extractor: BcbFocusExtractor):
        self.extractor = extractor

    def median(self, horizon: Optional[str] = None) -> ForecastMedian:
        horizon = horizon or "12m"
        if horizon not in SUPPORTED_HORIZONS:
            raise ValueError(f"horizonte não suportado: {horizon!r} (apenas '12m')")

        rows = self.extractor.fetch()
        value = extract_focus_median(rows)
        if value is None:
            raise NoValueError()

        log.info("Focus IPCA %s: mediana=%s (%s linhas)", horizon, value, len(rows))
        return ForecastMedian(value=value, source=self.extractor.cfg.source, horizon=horizon)

    def get(self, horizon: Optional[str] = None) -> Dict[str, Any]:
        return {"ok": True, **self.median(horizon).to_dict()}
