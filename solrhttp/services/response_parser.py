"""Translate a raw header list and body into a `Response`.

Header lines arrive as a plain ordered list of strings, the same shape as
PHP's `$http_response_header`:

    ["HTTP/1.1 100 Continue", "HTTP/1.1 200 OK", "Content-Type: text/xml"]
"""
import re
from typing import List, Optional, Sequence, Tuple

from solrhttp.domain.response import Response

STATUS_LINE_PREFIX = "HTTP"
# "HTTP/1.1 " is nine characters; the status code starts right after it.
STATUS_CODE_OFFSET = 9
CONTENT_TYPE_PREFIX = "content-type:"
# ASCII digits only
_STATUS_CODE_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_status_code(status_line: str) -> int:
    """Leading integer at the status-code offset, or 0 if there is none."""
    match = _STATUS_CODE_RE.match(status_line[STATUS_CODE_OFFSET:])
    if match is None:
        return 0
    return int(match.group(1))


def consume_status_lines(headers: Sequence[str]) -> Tuple[int, List[str]]:
    """Drop leading status lines, keeping the code of the last one.

    Provisional 1xx lines (e.g. "100 Continue") precede the final status
    line of the same exchange, so only the last code counts.
    """
    remaining = list(headers)
    status = 0
    while remaining and remaining[0].startswith(STATUS_LINE_PREFIX):
        status = parse_status_code(remaining.pop(0))
    return status, remaining


def find_content_type(headers: Sequence[str]) -> Optional[str]:
    """Tail of the first Content-Type line (name matched case-insensitively)."""
    size = len(CONTENT_TYPE_PREFIX)
    for header in headers:
        if header[:size].lower() == CONTENT_TYPE_PREFIX:
            return header[size:]
    return None


def parse_response(raw_body: Optional[bytes], raw_headers: Optional[Sequence[str]]) -> Response:
    status = 0
    content_type = None

    if raw_headers:
        status, remaining = consume_status_lines(raw_headers)
        content_type = find_content_type(remaining)

    return Response(status, content_type, raw_body)
