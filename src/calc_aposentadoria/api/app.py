"""
API HTTP (FastAPI) da calculadora de aposentadoria.

Rotas:
  - GET /api/inflacao : série histórica + médias 5a/10a
  - GET /api/focus    : mediana Focus (IPCA 12m)

Toda falha vira {ok: false, error} com status 502.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from calc_aposentadoria.extractors.bcb_focus import BcbFocusExtractor, FocusConfig
from calc_aposentadoria.extractors.bcb_sgs import BcbSgsExtractor, SgsConfig
from calc_aposentadoria.services.focus import FocusDataAdapter
from calc_aposentadoria.services.inflacao import InflationDataAdapter
from calc_aposentadoria.utils.io.http import HTTPConfig, HttpTransport, RequestsTransport

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiConfig:
    cache_control: str = "public, s-maxage=21600, max-age=3600, stale-while-revalidate=86400"
    error_status: int = 502
    http: HTTPConfig = HTTPConfig()
    sgs: SgsConfig = SgsConfig()
    focus: FocusConfig = FocusConfig()


def _respond(cfg: ApiConfig, name: str, build: Callable[[], Dict[str, Any]]) -> JSONResponse:
    try:
        return JSONResponse(build(), status_code=200, headers={"Cache-Control": cfg.cache_control})
    except Exception as exc:
        log.warning("%s falhou: %s", name, exc)
        return JSONResponse(
            {"ok": False, "error": str(exc) or "error"},
            status_code=cfg.error_status,
        )


def create_app(
    cfg: Optional[ApiConfig] = None,
    transport: Optional[HttpTransport] = None,
) -> FastAPI:
    cfg = cfg or ApiConfig()
    transport = transport or RequestsTransport(cfg.http)

    inflacao = InflationDataAdapter(BcbSgsExtractor(transport, cfg.sgs))
    focus = FocusDataAdapter(BcbFocusExtractor(transport, cfg.focus))

    app = FastAPI(title="Calculadora de Aposentadoria")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/inflacao")
    def get_inflacao(
        index: str = Query("IPCA"),
        period: str = Query("10y"),
        start: Optional[str] = Query(None),
        end: Optional[str] = Query(None),
    ):
        return _respond(
            cfg, "inflacao",
            lambda: inflacao.get(index=index, period=period, start=start, end=end),
        )

    @app.get("/api/focus")
    def get_focus(horizon: str = Query("12m")):
        return _respond(cfg, "focus", lambda: focus.get(horizon=horizon))

    return app
