from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

# atributos padrão do LogRecord que não viram campos extras
_RESERVED = {
    "msg", "args", "levelname", "levelno", "name", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
    "created", "msecs", "relativeCreated", "thread", "threadName",
    "processName", "process", "taskName", "message",
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        # campos extras (via log.info(..., extra={...}))
        for k, v in record.__dict__.items():
            if k in _RESERVED:
                continue
            try:
                json.dumps(v)
                base[k] = v
            except (TypeError, ValueError):
                base[k] = str(v)

        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False)


def build_logger(name: str = "calc_aposentadoria") -> logging.Logger:
    """Logger com saída JSON no console (scripts e servidor)."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(JsonFormatter())
    logger.addHandler(ch)

    return logger
