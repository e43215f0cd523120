"""
Estado da calculadora no lado do cliente: premissa de inflação anual e os
atalhos "Usar mediana Focus (12m)" e "Usar média 12m (realizado)".

Cargas assíncronas usam um contador de geração: resultado que chega depois
de trocar o índice (ou fechar o painel) é descartado.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from calc_aposentadoria.calculator.client import InflacaoApiClient
from calc_aposentadoria.domain.focus.extract import to_finite_float
from calc_aposentadoria.domain.inflation.annualize import annual_from_series_12m
from calc_aposentadoria.extractors.errors import NoValueError

log = logging.getLogger(__name__)

FOCUS_CONFIRM_MSG = "A mediana Focus (12m) é de IPCA. Aplicar mesmo assim?"
PRICE_MODES = ("real", "nominal")


def nominal_rate(real_pct: float, inflation_pct: float) -> float:
    """nominal = (1 + real)(1 + inflação) - 1, tudo em %."""
    return ((1 + real_pct / 100) * (1 + inflation_pct / 100) - 1) * 100


def real_rate(nominal_pct: float, inflation_pct: float) -> float:
    return ((1 + nominal_pct / 100) / (1 + inflation_pct / 100) - 1) * 100


class RelevanceGuard:
    """Contador de geração: begin() devolve um token, invalidate() torna os anteriores obsoletos."""

    def __init__(self):
        self._generation = 0
        self._lock = threading.Lock()

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def invalidate(self) -> None:
        with self._lock:
            self._generation += 1

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._generation


@dataclass
class CalculatorState:
    price_mode: str = "real"  # "real" | "nominal"
    inflation_index: str = "IPCA"
    inflation_annual: float = 4.0

    avg_5y: Optional[float] = None
    avg_10y: Optional[float] = None
    infl_loading: bool = False
    infl_error: Optional[str] = None

    focus_loading: bool = False
    focus_error: Optional[str] = None
    last_focus_applied: Optional[float] = None

    realized_loading: bool = False
    realized_error: Optional[str] = None
    last_realized_applied: Optional[float] = None


class InflationPanel:
    def __init__(
        self,
        client: InflacaoApiClient,
        state: Optional[CalculatorState] = None,
        confirm: Optional[Callable[[str], bool]] = None,
    ):
        self.client = client
        self.state = state or CalculatorState()
        self.confirm = confirm or (lambda msg: True)
        self.guard = RelevanceGuard()

    # ---------- médias 5a/10a do índice selecionado ----------

    def select_index(self, index: str) -> None:
        self.state.inflation_index = index
        self.load_averages()

    def load_averages(self) -> None:
        token = self.guard.begin()
        st = self.state
        st.infl_loading, st.infl_error = True, None
        try:
            j = self.client.get_inflacao(st.inflation_index, period="10y")
            if not self.guard.is_current(token):
                log.info("Resultado obsoleto descartado (index=%s)", st.inflation_index)
                return
            st.avg_5y = j.get("avg_5y")
            st.avg_10y = j.get("avg_10y")
        except Exception as exc:
            if self.guard.is_current(token):
                st.infl_error = str(exc) or "erro"
        finally:
            if self.guard.is_current(token):
                st.infl_loading = False

    def close(self) -> None:
        self.guard.invalidate()

    # ---------- atalhos que sobrescrevem a inflação anual ----------

    def apply_focus_median(self) -> Optional[float]:
        st = self.state
        st.focus_loading, st.focus_error = True, None
        try:
            if st.inflation_index != "IPCA" and not self.confirm(FOCUS_CONFIRM_MSG):
                return None
            j = self.client.get_focus("12m")
            annual = to_finite_float(j.get("annual")) if j.get("ok") else None
            if annual is None:
                raise NoValueError(j.get("error") or "sem dado")
            st.inflation_annual = annual
            st.last_focus_applied = annual
            return annual
        except Exception as exc:
            st.focus_error = str(exc) or "falha"
            return None
        finally:
            st.focus_loading = False

    def apply_realized_12m(self) -> Optional[float]:
        st = self.state
        st.realized_loading, st.realized_error = True, None
        try:
            j = self.client.get_inflacao(st.inflation_index, period="12m")
            annual = annual_from_series_12m(j.get("series") or [])
            if annual is None:
                raise NoValueError("sem dado")
            st.inflation_annual = annual
            st.last_realized_applied = annual
            return annual
        except Exception as exc:
            st.realized_error = str(exc) or "falha"
            return None
        finally:
            st.realized_loading = False

    # ---------- modo de preços (real / nominal) ----------

    def set_price_mode(self, mode: str) -> None:
        if mode not in PRICE_MODES:
            raise ValueError(f"modo de preços inválido: {mode!r}. Use 'real' ou 'nominal'.")
        self.state.price_mode = mode

    def display_return(self, real_pct: float) -> float:
        """Retorno real convertido para o modo de exibição atual."""
        if self.state.price_mode == "nominal":
            return nominal_rate(real_pct, self.state.inflation_annual)
        return real_pct

    def real_return(self, entered_pct: float) -> float:
        """Retorno digitado no modo atual, convertido para real."""
        if self.state.price_mode == "nominal":
            return real_rate(entered_pct, self.state.inflation_annual)
        return entered_pct
