"""Domain objects for solrhttp - explicit re-exports to satisfy linters."""
from .response import Response as Response
from .transport_config import TransportConfig as TransportConfig
from .raw_exchange import RawExchange as RawExchange

__all__ = ["Response", "TransportConfig", "RawExchange"]
