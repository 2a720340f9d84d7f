import httpx

from order_relay.error_handler import ErrorHandler
from order_relay.orders.models import ErrorCode


def test_handle_exception_returns_payload():
    eh = ErrorHandler()
    out = eh.handle_exception(Exception("boom"), context={"k": "v"})
    assert out["status_code"] == 500
    assert out["body"]["success"] is False
    assert out["body"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "details" not in out["body"]


def test_details_only_in_development():
    eh = ErrorHandler(include_details=True)
    out = eh.handle_exception(RuntimeError("boom"))
    assert out["body"]["details"] == "boom"


def test_timeouts_map_to_504():
    eh = ErrorHandler()
    for exc in (httpx.ReadTimeout("slow"), httpx.ConnectTimeout("slow"), TimeoutError()):
        fault = eh.classify(exc)
        assert fault.status_code == 504
        assert fault.code is ErrorCode.TIMEOUT_ERROR


def test_transport_failures_map_to_502():
    eh = ErrorHandler()
    for exc in (httpx.ConnectError("refused"), httpx.RemoteProtocolError("eof"), ConnectionResetError()):
        fault = eh.classify(exc)
        assert fault.status_code == 502
        assert fault.code is ErrorCode.NETWORK_ERROR


def test_classification_by_exception_name():
    class FetchError(Exception):
        pass

    class GatewayTimeoutError(Exception):
        pass

    eh = ErrorHandler()
    assert eh.classify(FetchError("x")).code is ErrorCode.NETWORK_ERROR
    assert eh.classify(GatewayTimeoutError("x")).code is ErrorCode.TIMEOUT_ERROR


def test_unrecognized_faults_are_internal():
    fault = ErrorHandler(locale="en-US").classify(ValueError("bad json"))
    assert fault.status_code == 500
    assert fault.code is ErrorCode.INTERNAL_SERVER_ERROR
    assert fault.message == "An unexpected server error occurred"
