from datetime import date

import pytest

from calc_aposentadoria.domain.inflation.annualize import geom_annualized_pct
from calc_aposentadoria.extractors.bcb_focus import BcbFocusExtractor
from calc_aposentadoria.extractors.bcb_sgs import BcbSgsExtractor
from calc_aposentadoria.extractors.errors import NoValueError, UpstreamHTTPError
from calc_aposentadoria.services.focus import FocusDataAdapter
from calc_aposentadoria.services.inflacao import InflationDataAdapter

from fakes_http import FakeResponse, FakeTransport

SGS_ROWS = [
    {"data": "01/01/2024", "valor": "0,42"},
    {"data": "01/02/2024", "valor": "0,83"},
    {"data": "01/03/2024", "valor": "0,16"},
    {"data": "01/03/2024", "valor": "0,17"},  # revisão: vence
]


def _inflacao(transport) -> InflationDataAdapter:
    return InflationDataAdapter(BcbSgsExtractor(transport), today=lambda: date(2024, 3, 20))


# ---------- InflationDataAdapter ----------
def test_inflacao_envelope_defaults_to_ipca_10y():
    transport = FakeTransport({"bcdata.sgs.433": FakeResponse(SGS_ROWS)})
    j = _inflacao(transport).get()

    assert j["ok"] is True
    assert j["index"] == "IPCA"
    assert j["period"] == "10y"
    assert (j["start"], j["end"]) == ("2014-03", "2024-03")
    assert j["source"] == "BCB/SGS"
    assert j["series"] == [
        {"year_month": "2024-01", "monthly_percent": 0.42},
        {"year_month": "2024-02", "monthly_percent": 0.83},
        {"year_month": "2024-03", "monthly_percent": 0.17},
    ]
    expected = geom_annualized_pct([0.42, 0.83, 0.17])
    assert j["avg_5y"] == pytest.approx(expected)
    assert j["avg_10y"] == pytest.approx(expected)
    assert transport.last_params["dataInicial"] == "01/03/2014"
    assert transport.last_params["dataFinal"] == "31/03/2024"


@pytest.mark.parametrize("index, code", [("IPCA-15", 7478), ("IGP-M", 189)])
def test_inflacao_maps_index_to_sgs_code(index, code):
    transport = FakeTransport({f"bcdata.sgs.{code}/": FakeResponse([])})
    j = _inflacao(transport).get(index=index, period="12m")

    assert j["index"] == index
    assert (j["start"], j["end"]) == ("2024-03", "2024-03")
    assert j["series"] == []
    assert j["avg_5y"] is None and j["avg_10y"] is None


def test_inflacao_custom_range_overrides_period():
    transport = FakeTransport({"bcdata.sgs.433": FakeResponse([])})
    j = _inflacao(transport).get(period="5y", start="2020-01", end="2020-12")

    assert (j["start"], j["end"]) == ("2020-01", "2020-12")
    assert transport.last_params["dataInicial"] == "01/01/2020"
    assert transport.last_params["dataFinal"] == "31/12/2020"


def test_inflacao_unknown_index_raises_before_fetch():
    transport = FakeTransport({})
    with pytest.raises(ValueError, match="indice"):
        _inflacao(transport).get(index="INPC")
    assert transport.calls == []


def test_inflacao_upstream_error_propagates():
    transport = FakeTransport({"bcdata.sgs.433": FakeResponse(b"", status_code=500)})
    with pytest.raises(UpstreamHTTPError):
        _inflacao(transport).get()


# ---------- FocusDataAdapter ----------
def test_focus_envelope():
    payload = {"value": [{"Mediana": 3.71}, {"Mediana": 3.76}]}
    adapter = FocusDataAdapter(BcbFocusExtractor(FakeTransport({"olinda": FakeResponse(payload)})))

    assert adapter.get() == {
        "ok": True,
        "source": "BCB/Olinda",
        "index": "IPCA",
        "horizon": "12m",
        "annual": 3.76,
    }


def test_focus_no_value_raises():
    payload = {"value": [{"Mediana": None}]}
    adapter = FocusDataAdapter(BcbFocusExtractor(FakeTransport({"olinda": FakeResponse(payload)})))
    with pytest.raises(NoValueError, match="no_value"):
        adapter.get()


def test_focus_unsupported_horizon_raises():
    transport = FakeTransport({})
    adapter = FocusDataAdapter(BcbFocusExtractor(transport))
    with pytest.raises(ValueError):
        adapter.get(horizon="24m")
    assert transport.calls == []
