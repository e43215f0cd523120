from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

DEFAULT_PERIOD = "10y"

# quantos anos voltar a partir do mês corrente (12m = só o mês corrente)
_PERIOD_YEARS = {
    "12m": 0,
    "5y": 5,
    "10y": 10,
}


def parse_ym(ym: str) -> date:
    """'YYYY-MM' -> date no 1º dia do mês. Levanta ValueError se malformado."""
    return datetime.strptime(ym.strip(), "%Y-%m").date()


def format_ym(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


@dataclass(frozen=True)
class PeriodRange:
    period: str
    start: str  # YYYY-MM
    end: str    # YYYY-MM

    def start_date(self) -> date:
        return parse_ym(self.start)

    def end_date(self) -> date:
        """Último dia do mês final."""
        return parse_ym(self.end) + relativedelta(months=1) - relativedelta(days=1)

    def start_date_str(self) -> str:
        return self.start_date().strftime("%d/%m/%Y")

    def end_date_str(self) -> str:
        return self.end_date().strftime("%d/%m/%Y")


def resolve_period_range(
    period: Optional[str],
    start: Optional[str] = None,
    end: Optional[str] = None,
    today: Optional[date] = None,
) -> PeriodRange:
    """
    Resolve o intervalo (ini, fim) em ano-mês.

    - start + end informados juntos sobrescrevem o período.
    - '12m' -> ini = fim = mês corrente.
    - '5y' / '10y' -> mesmo mês, N anos antes.
    - qualquer outro valor (ou None) cai no default '10y'.
    """
    if start and end:
        s, e = parse_ym(start), parse_ym(end)
        return PeriodRange(period=period or DEFAULT_PERIOD, start=format_ym(s), end=format_ym(e))

    key = period if period in _PERIOD_YEARS else DEFAULT_PERIOD
    current = (today or date.today()).replace(day=1)
    ini = current - relativedelta(years=_PERIOD_YEARS[key])
    return PeriodRange(period=key, start=format_ym(ini), end=format_ym(current))
