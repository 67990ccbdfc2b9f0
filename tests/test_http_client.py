import httpx
import pytest

from core.http_client import fetch_json
from parsing.errors import PayloadFormatError, StatsTransportError
from tests.factories import example_raw_stats

URL = "https://stats.example.test/api/stats.php"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_fetch_json_returns_decoded_body():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=example_raw_stats())

    body = fetch_json(URL, client=_client(handler))
    assert body["sfw"]["artists"]["details"] == ["A"]
    assert seen == [URL]


def test_http_error_status_is_transport_error():
    client = _client(lambda request: httpx.Response(500, text="oops"))
    with pytest.raises(StatsTransportError):
        fetch_json(URL, client=client)


def test_connection_failure_is_transport_error_and_not_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(StatsTransportError):
        fetch_json(URL, client=_client(handler))
    assert len(calls) == 1


def test_malformed_body_is_format_error():
    client = _client(lambda request: httpx.Response(200, text="<html>nope</html>"))
    with pytest.raises(PayloadFormatError):
        fetch_json(URL, client=client)


def test_invalid_url_is_transport_error():
    client = _client(lambda request: httpx.Response(200, json={}))
    with pytest.raises(StatsTransportError):
        fetch_json("http://exa\x01mple.com", client=client)
