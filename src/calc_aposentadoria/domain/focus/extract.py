from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

RowGetter = Callable[[Mapping[str, Any]], Any]


def _field(name: str) -> RowGetter:
    return lambda row: row.get(name)


# O Olinda já trocou a caixa dos campos entre versões; ordem = prioridade
MEDIAN_GETTERS: Tuple[RowGetter, ...] = (
    _field("mediana"),
    _field("Mediana"),
    _field("valor"),
    _field("Valor"),
)


def to_finite_float(x: Any) -> Optional[float]:
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, str):
        x = x.strip()
        if x == "" or "_" in x:
            return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def extract_focus_median(
    rows: Sequence[Mapping[str, Any]],
    getters: Sequence[RowGetter] = MEDIAN_GETTERS,
) -> Optional[float]:
    """
    Percorre as linhas da mais recente (fim da lista) para a mais antiga e
    devolve o primeiro valor numérico válido encontrado. None se nenhuma
    linha tiver valor utilizável.
    """
    for row in reversed(list(rows)):
        if not isinstance(row, Mapping):
            continue
        for get in getters:
            v = to_finite_float(get(row))
            if v is not None:
                return v
    return None
