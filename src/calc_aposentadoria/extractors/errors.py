from __future__ import annotations

import logging

log = logging.getLogger(__name__)


class UpstreamHTTPError(RuntimeError):
    """Resposta não-2xx do provedor (SGS / Olinda)."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class NoValueError(RuntimeError):
    """O provedor respondeu, mas nenhum valor numérico utilizável foi encontrado."""

    def __init__(self, message: str = "no_value"):
        super().__init__(message)


def ensure_ok(r, url: str = "") -> None:
    status = int(r.status_code)
    if not 200 <= status < 300:
        log.warning("Upstream respondeu HTTP %s: %s", status, url)
        raise UpstreamHTTPError(status)
