from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from calc_aposentadoria.domain.inflation.annualize import geom_annualized_pct
from calc_aposentadoria.domain.sgs.models import MonthlyObservation
from calc_aposentadoria.domain.sgs.normalize import iter_month_values
from calc_aposentadoria.domain.sgs.validate import validate_monthly_series

log = logging.getLogger(__name__)

WINDOW_5Y = 60
WINDOW_10Y = 120


@dataclass(frozen=True)
class MonthlySeries:
    """Série mensal ordenada por ano-mês, sem chaves repetidas."""
    observations: Tuple[MonthlyObservation, ...]

    def __len__(self) -> int:
        return len(self.observations)

    def trailing(self, n: int) -> List[float]:
        """Valores das últimas n observações (todas, se houver menos que n)."""
        if n <= 0:
            return []
        return [o.percent_change for o in self.observations[-n:]]

    def annualized_trailing(self, n: int) -> Optional[float]:
        return geom_annualized_pct(self.trailing(n))

    @property
    def avg_5y(self) -> Optional[float]:
        return self.annualized_trailing(WINDOW_5Y)

    @property
    def avg_10y(self) -> Optional[float]:
        return self.annualized_trailing(WINDOW_10Y)

    def to_records(self) -> List[Dict[str, object]]:
        return [o.to_dict() for o in self.observations]


class SeriesAggregator:
    """
    Constrói a MonthlySeries a partir das linhas cruas do SGS:
      - normaliza data/valor (linhas inválidas são descartadas)
      - dedup por ano-mês, a última linha do upstream vence
      - ordena por ano-mês
    """

    def build(self, records: Iterable[dict]) -> MonthlySeries:
        pairs, dropped = iter_month_values(records)
        if dropped:
            log.warning("SGS: %s linha(s) descartada(s) por data/valor inválido", dropped)

        df = pd.DataFrame(pairs, columns=["year_month", "percent_change"])

        # Dedup por chave natural (mantém a ordem do upstream para o keep="last")
        df = (
            df.drop_duplicates(subset=["year_month"], keep="last")
              .sort_values("year_month", kind="stable")
              .reset_index(drop=True)
        )
        validate_monthly_series(df)

        obs = tuple(
            MonthlyObservation(year_month=str(ym), percent_change=float(v))
            for ym, v in zip(df["year_month"], df["percent_change"])
        )
        return MonthlySeries(observations=obs)
