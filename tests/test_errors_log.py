import pytest

from calc_aposentadoria.extractors.errors import UpstreamHTTPError, ensure_ok

from fakes_http import FakeResponse


def test_ensure_ok_logs_url_and_raises_status_only_message(caplog):
    caplog.set_level("WARNING")
    with pytest.raises(UpstreamHTTPError) as excinfo:
        ensure_ok(FakeResponse(b"", status_code=404), "https://api.bcb.gov.br/x")

    assert str(excinfo.value) == "HTTP 404"
    assert "https://api.bcb.gov.br/x" in caplog.text


def test_ensure_ok_accepts_2xx():
    ensure_ok(FakeResponse([], status_code=204))
