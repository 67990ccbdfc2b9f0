import httpx

from gui.workers import StatsLoadWorker
from parsing.errors import StatsTransportError
from tests.factories import example_raw_stats

URL = "https://stats.example.test/api/stats.php"


def _run(qtbot, url, client=None):
    worker = StatsLoadWorker(url, client=client)
    with qtbot.waitSignal(worker.finished, timeout=2500) as blocker:
        worker.start()
    worker.wait(2500)
    return blocker.args


def test_worker_emits_decoded_body(qtbot):
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=example_raw_stats()))
    )
    body, error = _run(qtbot, URL, client)
    assert error is None
    assert body["nsfw"]["commissions"]["details"] == {"B": 30}


def test_worker_emits_transport_error(qtbot):
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(503, text="down"))
    )
    body, error = _run(qtbot, URL, client)
    assert body is None
    assert isinstance(error, StatsTransportError)


def test_worker_reports_malformed_url_as_failed_load(qtbot):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    body, error = _run(qtbot, "http://exa\x01mple.com", client)
    assert body is None
    assert isinstance(error, StatsTransportError)


def test_worker_reports_unexpected_exception_as_failed_load(qtbot):
    def handler(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("transport exploded")

    body, error = _run(qtbot, URL, httpx.Client(transport=httpx.MockTransport(handler)))
    assert body is None
    assert isinstance(error, StatsTransportError)
    assert "transport exploded" in str(error)
