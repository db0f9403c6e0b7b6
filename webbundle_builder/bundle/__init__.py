"""Bundle assembly utilities."""

from .builder import Builder
from .exchanges import ExchangeCollector, collect_exchanges
from .models import Bundle, Exchange, Request, Response, Version

__all__ = [
    "Builder",
    "Bundle",
    "Exchange",
    "ExchangeCollector",
    "Request",
    "Response",
    "Version",
    "collect_exchanges",
]
