"""
Process-wide logging setup.

Every record carries the id of the RPC being served, or "-" outside one.
"""
from __future__ import annotations

import logging
from contextvars import ContextVar

LOG_FORMAT = "%(levelname)s:%(name)s:%(request_id)s: %(message)s"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestIdFilter())
