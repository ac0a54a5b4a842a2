import pytest

from solrhttp.services.response_parser import (
    consume_status_lines,
    find_content_type,
    parse_response,
    parse_status_code,
)


@pytest.mark.parametrize("line,expected", [
    ("HTTP/1.1 200 OK", 200),
    ("HTTP/1.0 404 Not Found", 404),
    ("HTTP/1.1 503", 503),
    ("HTTP/1.1 abc", 0),
    ("HTTP/1.1", 0),
    ("HTTP/1.1 \xb200 OK", 0),
    ("HTTP/1.1 \u0662\u0660\u0660 OK", 0),
])
def test_parse_status_code(line, expected):
    assert parse_status_code(line) == expected


def test_single_status_line():
    response = parse_response(b"ok", ["HTTP/1.1 200 OK", "Content-Length: 2"])
    assert response.status_code == 200


def test_provisional_status_lines_are_skipped():
    headers = [
        "HTTP/1.1 100 Continue",
        "HTTP/1.1 100 Continue",
        "HTTP/1.1 200 OK",
        "Content-Type: application/json",
    ]
    response = parse_response(b"{}", headers)
    assert response.status_code == 200
    assert response.content_type == " application/json"


def test_consume_status_lines_returns_remaining_headers():
    status, remaining = consume_status_lines(["HTTP/1.1 100 Continue", "HTTP/1.1 201 Created", "X-A: 1"])
    assert status == 201
    assert remaining == ["X-A: 1"]


def test_status_prefix_is_case_sensitive():
    status, remaining = consume_status_lines(["http/1.1 200 OK", "Content-Type: text/xml"])
    assert status == 0
    assert remaining == ["http/1.1 200 OK", "Content-Type: text/xml"]


def test_status_lines_after_other_headers_are_ignored():
    status, _ = consume_status_lines(["X-A: 1", "HTTP/1.1 500 Internal Server Error"])
    assert status == 0


def test_content_type_name_is_case_insensitive():
    assert find_content_type(["content-type: text/XML; charset=UTF-8"]) == " text/XML; charset=UTF-8"
    assert find_content_type(["CONTENT-TYPE:text/plain"]) == "text/plain"


def test_first_content_type_wins():
    headers = ["Content-Type: text/xml", "Content-Type: application/json"]
    assert find_content_type(headers) == " text/xml"


def test_empty_content_type_value_is_kept():
    assert find_content_type(["Content-Type:"]) == ""


def test_missing_content_type():
    assert find_content_type(["Content-Length: 10"]) is None


def test_not_found_with_charset():
    headers = ["HTTP/1.1 404 Not Found", "Content-Type: text/plain; charset=UTF-8"]
    response = parse_response("not found", headers)
    assert response.status_code == 404
    assert response.content_type == " text/plain; charset=UTF-8"
    assert response.raw_body == "not found"


@pytest.mark.parametrize("headers", [None, []])
def test_no_headers_yields_empty_metadata(headers):
    response = parse_response(b"body anyway", headers)
    assert response.status_code == 0
    assert response.content_type is None
    assert response.raw_body == b"body anyway"


def test_transport_failure_yields_empty_response():
    response = parse_response(None, None)
    assert tuple(response) == (0, None, None)


def test_parse_does_not_mutate_input():
    headers = ["HTTP/1.1 100 Continue", "HTTP/1.1 200 OK"]
    parse_response(b"", headers)
    assert headers == ["HTTP/1.1 100 Continue", "HTTP/1.1 200 OK"]
