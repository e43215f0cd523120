from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SgsSeriesMeta:
    """Metadados estáveis por série (não por data)."""
    series_id: int
    name: str
    unit: str


@dataclass(frozen=True)
class MonthlyObservation:
    """Variação mensal (%) de um índice, chaveada por 'YYYY-MM'."""
    year_month: str
    percent_change: float

    def to_dict(self) -> Dict[str, object]:
        return {"year_month": self.year_month, "monthly_percent": self.percent_change}


# Índices suportados -> códigos SGS
INFLATION_SERIES: Dict[str, SgsSeriesMeta] = {
    "IPCA": SgsSeriesMeta(series_id=433, name="IPCA", unit="% a.m."),
    "IPCA-15": SgsSeriesMeta(series_id=7478, name="IPCA-15", unit="% a.m."),
    "IGP-M": SgsSeriesMeta(series_id=189, name="IGP-M", unit="% a.m."),
}

DEFAULT_INDEX = "IPCA"


def series_meta_for(index: str) -> SgsSeriesMeta:
    try:
        return INFLATION_SERIES[index]
    except KeyError:
        valid = ", ".join(INFLATION_SERIES)
        raise ValueError(f"indice inválido: {index!r}. Use um de: {valid}") from None
