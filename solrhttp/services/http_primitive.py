import logging
from typing import Callable, Dict, List

import requests

from solrhttp.domain.raw_exchange import RawExchange
from solrhttp.domain.transport_config import TransportConfig
from solrhttp.exceptions import HttpFetchError

logger = logging.getLogger(__name__)

# urllib3 reports the protocol version as an int (11 -> HTTP/1.1). Always
# render "x.y" so the status code sits at a fixed offset.
_HTTP_VERSIONS = {9: "0.9", 10: "1.0", 11: "1.1", 20: "2.0"}


def split_header_block(block: str) -> Dict[str, str]:
    """Turn a CRLF separated header block into a header mapping."""
    headers: Dict[str, str] = {}
    for line in block.splitlines():
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            continue
        headers[name.strip()] = value.strip()
    return headers


def header_lines(resp) -> List[str]:
    """Render a `requests` response's status and headers as raw lines."""
    version = _HTTP_VERSIONS.get(getattr(resp.raw, "version", None), "1.1")
    status_line = f"HTTP/{version} {resp.status_code} {resp.reason or ''}".rstrip()
    lines = [status_line]
    for name, value in resp.headers.items():
        lines.append(f"{name}: {value}")
    return lines


class RequestsPrimitive:
    """
    Executes one request described by a `TransportConfig`.

    Requires an http_client callable with the `requests.request` signature so
    tests can inject a fake and the HTTP library stays swappable. Redirects
    are followed by the client.
    """

    def __init__(self, http_client: Callable = requests.request):
        self.http_client = http_client

    def execute(self, url: str, config: TransportConfig) -> RawExchange:
        headers = split_header_block(config.header)
        logger.debug("%s %s timeout=%s", config.method, url, config.timeout)
        try:
            resp = self.http_client(
                config.method,
                url,
                headers=headers,
                data=config.content or None,
                timeout=config.timeout,
            )
        except requests.exceptions.RequestException as e:
            return RawExchange.failed(HttpFetchError(url, e))

        return RawExchange.succeeded(header_lines(resp), resp.content)
