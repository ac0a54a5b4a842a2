import base64
import logging
import threading
from typing import Optional

from solrhttp import config as env
from solrhttp.domain.raw_exchange import RawExchange
from solrhttp.domain.response import Response
from solrhttp.domain.transport_config import TransportConfig
from solrhttp.exceptions import TransportInputError
from solrhttp.services.http_primitive import RequestsPrimitive
from solrhttp.services.response_parser import parse_response

logger = logging.getLogger(__name__)


def resolve_timeout(timeout: Optional[float], default: float) -> float:
    """Effective timeout handed to the HTTP primitive.

    A positive caller timeout is halved: existing callers tuned their values
    against a primitive that waited roughly twice as long as asked, so the
    observed deadline is only accurate to within a factor of two. Anything
    else falls back to the default.
    """
    if timeout is not None and timeout > 0.0:
        return float(timeout) / 2
    return default


class StreamContextTransport:
    """
    HTTP transport that keeps one reusable request config per verb.

    The GET, HEAD and POST configs are created once and overwritten in place
    on every call. Each perform_* call mutates its config and executes it
    under a lock, so an instance may be shared between threads.

    Request-level failures (DNS, refused connection, TLS, timeout, bad URL)
    come back as `Response.empty()`; HTTP error statuses are ordinary
    responses.
    """

    def __init__(self, primitive: Optional[RequestsPrimitive] = None,
                 default_timeout: Optional[float] = None):
        self.primitive = primitive if primitive is not None else RequestsPrimitive()
        self._default_timeout = None
        if default_timeout is not None:
            self._default_timeout = env.normalize_timeout(default_timeout)
        self._lock = threading.Lock()

        self.get_config = TransportConfig(method="GET")
        self.head_config = TransportConfig(method="HEAD")
        self.post_config = TransportConfig(method="POST")

        # POST shares its header block with a per-call Content-Type, so the
        # auth header is kept here with a trailing CRLF and prepended each time.
        self._auth_header = ""

    def get_default_timeout(self) -> float:
        if self._default_timeout is None:
            self._default_timeout = env.default_socket_timeout()
        return self._default_timeout

    def set_default_timeout(self, timeout: float) -> None:
        """Non-positive values fall back to 60 seconds."""
        self._default_timeout = env.normalize_timeout(timeout)

    def set_authentication_credentials(self, username: str, password: str) -> None:
        token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        auth_header = f"Authorization: Basic {token}"
        with self._lock:
            self.get_config.set_options(header=auth_header)
            self.head_config.set_options(header=auth_header)
            self._auth_header = auth_header + "\r\n"

    def perform_get_request(self, url: str, timeout: Optional[float] = None) -> Response:
        with self._lock:
            self.get_config.set_options(timeout=resolve_timeout(timeout, self.get_default_timeout()))
            exchange = self.primitive.execute(url, self.get_config)
        return self._response_from_exchange(exchange)

    def perform_head_request(self, url: str, timeout: Optional[float] = None) -> Response:
        with self._lock:
            self.head_config.set_options(
                method="HEAD",
                timeout=resolve_timeout(timeout, self.get_default_timeout()),
            )
            exchange = self.primitive.execute(url, self.head_config)
        return self._response_from_exchange(exchange)

    def perform_post_request(self, url: str, raw_post: bytes, content_type: str,
                             timeout: Optional[float] = None) -> Response:
        if content_type is None:
            raise TransportInputError("content_type")
        if "\r" in content_type or "\n" in content_type:
            raise TransportInputError("content_type", "must be a single header line")
        try:
            content_type.encode("latin-1")
        except UnicodeEncodeError:
            raise TransportInputError("content_type", "must be latin-1 encodable") from None

        with self._lock:
            self.post_config.set_options(
                method="POST",
                header=f"{self._auth_header}Content-Type: {content_type}",
                content=raw_post if raw_post is not None else b"",
                timeout=resolve_timeout(timeout, self.get_default_timeout()),
            )
            try:
                exchange = self.primitive.execute(url, self.post_config)
            finally:
                # release the posted payload
                self.post_config.set_options(content=b"")
        return self._response_from_exchange(exchange)

    def _response_from_exchange(self, exchange: RawExchange) -> Response:
        if not exchange.ok:
            logger.warning("Request failed, returning empty response: %s", exchange.error)
            return Response.empty()
        return parse_response(exchange.body, exchange.headers)
