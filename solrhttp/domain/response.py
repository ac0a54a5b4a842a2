from http import HTTPStatus
from typing import NamedTuple, Optional

DEFAULT_MIME_TYPE = "text/plain"
DEFAULT_ENCODING = "UTF-8"


class Response(NamedTuple):
    """Normalized result of one transport exchange.

    `status_code` is 0 when no status line was received (request-level
    failure); in that case `content_type` and `raw_body` are None.
    """
    status_code: int = 0
    content_type: Optional[str] = None
    raw_body: Optional[bytes] = None

    @classmethod
    def empty(cls) -> "Response":
        return cls(0, None, None)

    @property
    def status_message(self) -> str:
        if self.status_code == 0:
            return "Communication Error"
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return "Unknown Status"

    @property
    def mime_type(self) -> str:
        """Media type from the Content-Type value, e.g. 'text/plain'."""
        if not self.content_type:
            return DEFAULT_MIME_TYPE
        mime = self.content_type.split(";", 1)[0].strip()
        return mime or DEFAULT_MIME_TYPE

    @property
    def encoding(self) -> str:
        """Charset from the first Content-Type parameter, e.g. 'UTF-8'."""
        if not self.content_type:
            return DEFAULT_ENCODING
        parts = self.content_type.split(";", 1)
        if len(parts) < 2:
            return DEFAULT_ENCODING
        param = parts[1].split("=")
        if len(param) < 2:
            return DEFAULT_ENCODING
        return param[1].strip() or DEFAULT_ENCODING
