import logging

from gui.services.error_handling_service import ErrorHandlingService, ErrorKind, classify
from parsing.errors import PayloadFormatError, StatsPayloadError, StatsTransportError


def test_classify_taxonomy():
    assert classify(StatsPayloadError("x")) is ErrorKind.PAYLOAD
    assert classify(StatsTransportError("x")) is ErrorKind.TRANSPORT
    assert classify(PayloadFormatError("x")) is ErrorKind.PARSE
    assert classify(ValueError("x")) is ErrorKind.UNCAUGHT


def test_handle_exception_records_and_limits():
    svc = ErrorHandlingService(capacity=2)
    for exc in (ValueError("boom1"), RuntimeError("boom2"), KeyError("boom3")):
        try:
            raise exc
        except Exception as e:
            svc.handle_exception(type(e), e, e.__traceback__)
    errs = svc.recent_errors()
    assert len(errs) == 2
    assert errs[-1].exc_type is KeyError
    assert errs[0].exc_type is RuntimeError
    assert all(e.kind is ErrorKind.UNCAUGHT for e in errs)


def test_load_failure_is_logged(caplog):
    svc = ErrorHandlingService()
    with caplog.at_level(logging.ERROR, logger="gui.services.error_handling_service"):
        rec = svc.record(StatsTransportError("connection refused"))
    assert rec.kind is ErrorKind.TRANSPORT
    assert "Failed to check stats: connection refused" in caplog.text


def test_install_and_uninstall_restore_hook():
    import sys

    previous = sys.excepthook
    svc = ErrorHandlingService()
    svc.install()
    assert svc.installed and sys.excepthook is not previous
    svc.uninstall()
    assert not svc.installed and sys.excepthook is previous


def test_uncaught_error_logs_truncated_summary(caplog):
    svc = ErrorHandlingService()
    with caplog.at_level(logging.ERROR, logger="gui.services.error_handling_service"):
        record = svc.handle_exception(ValueError, ValueError("x" * 200), None)
    assert record.summary(20) == "ValueError: xxxxx..."
    assert len(record.summary()) == 120
    assert "Uncaught exception ValueError: x" in caplog.text
