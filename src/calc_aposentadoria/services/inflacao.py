from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

from calc_aposentadoria.domain.sgs.models import DEFAULT_INDEX, series_meta_for
from calc_aposentadoria.domain.sgs.service import SeriesAggregator
from calc_aposentadoria.extractors.bcb_sgs import BcbSgsExtractor
from calc_aposentadoria.utils.calendar.month_range import resolve_period_range

log = logging.getLogger(__name__)


class InflationDataAdapter:
    """
    Série histórica de um índice (IPCA, IPCA-15, IGP-M) + médias
    geométricas anualizadas de 5 e 10 anos.
    """

    def __init__(
        self,
        extractor: BcbSgsExtractor,
        aggregator: Optional[SeriesAggregator] = None,
        today: Callable[[], date] = date.today,
    ):
        self.extractor = extractor
        self.aggregator = aggregator or SeriesAggregator()
        self.today = today

    def get(
        self,
        index: Optional[str] = None,
        period: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Dict[str, Any]:
        index = index or DEFAULT_INDEX
        meta = series_meta_for(index)
        rng = resolve_period_range(period, start=start, end=end, today=self.today())

        rows = self.extractor.fetch(meta.series_id, rng)
        series = self.aggregator.build(rows)
        log.info(
            "Serie %s (sgs=%s, %s) %s..%s: %s meses de %s linhas",
            meta.name, meta.series_id, meta.unit, rng.start, rng.end, len(series), len(rows),
        )

        return {
            "ok": True,
            "index": meta.name,
            "period": rng.period,
            "start": rng.start,
            "end": rng.end,
            "series": series.to_records(),
            "avg_5y": series.avg_5y,
            "avg_10y": series.avg_10y,
            "source": self.extractor.cfg.source,
        }
