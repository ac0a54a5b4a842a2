from dataclasses import dataclass
from typing import Optional


@dataclass
class TransportConfig:
    """Per-verb request options, overwritten in place on every call.

    `header` is a CRLF separated header block, e.g.
    "Authorization: Basic ...\\r\\nContent-Type: text/xml".
    """
    method: str = "GET"
    header: str = ""
    content: bytes = b""
    timeout: Optional[float] = None

    def set_options(self, **options) -> None:
        for name, value in options.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown transport option: {name!r}")
            setattr(self, name, value)
