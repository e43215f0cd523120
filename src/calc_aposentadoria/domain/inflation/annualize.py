from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional, Sequence


def geom_annualized_pct(monthly_rates: Iterable[float]) -> Optional[float]:
    """
    Média geométrica anualizada de taxas mensais (%):

        ((prod(1 + m_i/100)) ** (12/n) - 1) * 100

    Calculado em log para o produto não estourar. Fatores não finitos ou
    <= 0 são descartados e n conta só os que sobraram. Sem nenhum fator
    válido, ou com resultado fora do alcance de float, retorna None.
    """
    factors = []
    for r in monthly_rates:
        try:
            f = 1 + float(r) / 100
        except (TypeError, ValueError):
            continue
        if math.isfinite(f) and f > 0:
            factors.append(f)

    if not factors:
        return None

    log_annual = math.fsum(math.log(f) for f in factors) * 12 / len(factors)
    try:
        annual = math.expm1(log_annual) * 100
    except OverflowError:
        return None
    return annual if math.isfinite(annual) else None


def annual_from_series_12m(series: Sequence[Mapping[str, Any]]) -> Optional[float]:
    """Anualiza os últimos 12 pontos de uma série já serializada (campo monthly_percent)."""
    values = []
    for row in list(series or [])[-12:]:
        try:
            v = float(row.get("monthly_percent"))
        except (TypeError, ValueError):
            continue
        if math.isfinite(v):
            values.append(v)
    return geom_annualized_pct(values)
