from typing import List, NamedTuple, Optional

from solrhttp.exceptions import HttpFetchError


class RawExchange(NamedTuple):
    """Unparsed outcome of one HTTP exchange.

    Either `ok` (header lines and body as received) or failed (only `error`
    is set). A failed exchange never carries headers or a body.
    """
    headers: Optional[List[str]] = None
    body: Optional[bytes] = None
    error: Optional[HttpFetchError] = None

    @classmethod
    def succeeded(cls, headers: List[str], body: Optional[bytes]) -> "RawExchange":
        return cls(headers=list(headers), body=body, error=None)

    @classmethod
    def failed(cls, error: HttpFetchError) -> "RawExchange":
        return cls(headers=None, body=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
