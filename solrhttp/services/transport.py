from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from solrhttp.domain.response import Response


@runtime_checkable
class HttpTransport(Protocol):
    """Issue a request and return a normalized `Response`.

    This is the only contract the rest of the client depends on, so
    implementations stay interchangeable.
    """

    def get_default_timeout(self) -> float: ...

    def set_default_timeout(self, timeout: float) -> None: ...

    def set_authentication_credentials(self, username: str, password: str) -> None: ...

    def perform_get_request(self, url: str, timeout: Optional[float] = None) -> Response: ...

    def perform_head_request(self, url: str, timeout: Optional[float] = None) -> Response: ...

    def perform_post_request(
        self, url: str, raw_post: bytes, content_type: str, timeout: Optional[float] = None
    ) -> Response: ...
