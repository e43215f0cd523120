from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional, Tuple


def month_key(dmy: str) -> str:
    """
    'dd/mm/aaaa' -> 'aaaa-mm'.

    Campos podem vir com espaços; mês é zero-padded. Data malformada levanta
    ValueError (a linha é descartada por quem chama).
    """
    parts = [p.strip() for p in str(dmy).split("/")]
    if len(parts) != 3:
        raise ValueError(f"data fora do formato dd/mm/aaaa: {dmy!r}")
    _, m, y = parts
    year, month = int(y), int(m)
    if not 1 <= month <= 12:
        raise ValueError(f"mês inválido em {dmy!r}")
    return f"{year:04d}-{month:02d}"


def parse_value_ptbr(s: Any) -> Optional[float]:
    """
    Converte o 'valor' do SGS em float.

    Só trata vírgula decimal (formato pt-BR); retorna None se vazio,
    não numérico ou não finito.
    """
    if s is None:
        return None
    s = str(s).strip().replace(",", ".", 1)
    # float() aceita "1_000"; o SGS nunca manda separador de milhar
    if s == "" or "_" in s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def iter_month_values(records: Iterable[dict]) -> Tuple[List[Tuple[str, float]], int]:
    """
    Normaliza as linhas cruas do SGS em pares (ano-mês, valor), mantendo a
    ordem do upstream. Retorna também quantas linhas foram descartadas.
    """
    out: List[Tuple[str, float]] = []
    dropped = 0
    for r in records:
        try:
            key = month_key(r["data"])
        except (KeyError, TypeError, ValueError):
            dropped += 1
            continue

        value = parse_value_ptbr(r.get("valor"))
        if value is None:
            dropped += 1
            continue

        out.append((key, value))
    return out, dropped
