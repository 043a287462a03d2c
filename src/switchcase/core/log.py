# src/switchcase/core/log.py
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

NAMESPACE = "switchcase"
PLAIN_FMT = "[%(asctime)s] %(levelname)s %(name)s | %(message)s"

# dispatch context the switches attach through `extra=`
DISPATCH_FIELDS = ("kind", "value", "result")

_configured = False


def _env(key: str, default: str) -> str:
    # SWITCHCASE_<KEY> wins over the bare <KEY>
    return os.getenv(f"{NAMESPACE.upper()}_{key}", os.getenv(key, default))


def _level(name: str) -> int:
    lvl = logging.getLevelName(name.upper())
    return lvl if isinstance(lvl, int) else logging.INFO


class JsonFormatter(logging.Formatter):
    """One JSON object per record, plus whatever dispatch fields it carries."""

    def format(self, record: logging.LogRecord) -> str:
        obj = {
            "ts": record.created,
            "lvl": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
            "where": f"{record.filename}:{record.lineno}",
        }
        for k in DISPATCH_FIELDS:
            if hasattr(record, k):
                obj[k] = getattr(record, k)
        if record.exc_info:
            obj["exc"] = self.formatException(record.exc_info)
        # subjects and results are arbitrary objects
        return json.dumps(obj, ensure_ascii=False, default=repr)


def setup(level: Optional[str] = None, json_mode: Optional[bool] = None, *, force: bool = False) -> None:
    """Configure the root logger for stdout.

    Arguments left as None come from the environment (after loading .env):
    SWITCHCASE_LOG_LEVEL / LOG_LEVEL and SWITCHCASE_LOG_JSON / LOG_JSON.
    Repeated calls are ignored unless force=True.
    """
    global _configured
    if _configured and not force:
        return

    load_dotenv()

    py_level = _level(level or _env("LOG_LEVEL", "INFO"))
    json_flag = json_mode if json_mode is not None else _env("LOG_JSON", "0") == "1"

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter() if json_flag else logging.Formatter(fmt=PLAIN_FMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(py_level)
    root.addHandler(handler)

    _configured = True


def get(name: str) -> logging.Logger:
    """Logger under the package namespace: get("switch") -> switchcase.switch."""
    if name != NAMESPACE and not name.startswith(NAMESPACE + "."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)


def set_level(level: str) -> None:
    logging.getLogger().setLevel(_level(level))
