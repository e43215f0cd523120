from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ForecastMedian:
    """Mediana Focus (expectativa de mercado) para o IPCA 12 meses à frente."""
    value: float
    source: str = "BCB/Olinda"
    index: str = "IPCA"
    horizon: str = "12m"

    def to_dict(self) -> Dict[str, object]:
        return {"source": self.source, "index": self.index, "horizon": self.horizon, "annual": self.value}
