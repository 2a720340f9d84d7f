import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from order_relay.orders import messages
from order_relay.orders.handler import OrderSubmissionHandler
from order_relay.orders.models import ErrorCode, failure_body
from order_relay.utils.config_loader import NotifierSettings, get_notifier_settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Every verb is routed here so non-POST requests get the 405 envelope.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def get_order_handler(settings: NotifierSettings = Depends(get_notifier_settings)) -> OrderSubmissionHandler:
    return OrderSubmissionHandler(settings)


class RequestBodyError(Exception):
    def __init__(self, status_code: int, code: ErrorCode, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message


def _client_info(request: Request) -> Dict[str, Any]:
    forwarded = request.headers.get("x-forwarded-for", "")
    ip = forwarded.split(",")[0].strip() if forwarded else (request.client.host if request.client else None)
    return {"ip": ip, "user_agent": request.headers.get("user-agent")}


async def _read_json_body(request: Request, max_bytes: int) -> Any:
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise RequestBodyError(413, ErrorCode.PAYLOAD_TOO_LARGE, messages.PAYLOAD_TOO_LARGE.format(limit=max_bytes))

    # Chunked uploads carry no Content-Length, so the cap is enforced while reading.
    received = bytearray()
    async for chunk in request.stream():
        received.extend(chunk)
        if len(received) > max_bytes:
            raise RequestBodyError(
                413, ErrorCode.PAYLOAD_TOO_LARGE, messages.PAYLOAD_TOO_LARGE.format(limit=max_bytes)
            )
    raw = bytes(received)
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        raise RequestBodyError(400, ErrorCode.INVALID_BODY, messages.INVALID_BODY) from e


@router.api_route("/send-order", methods=ROUTED_METHODS, tags=["Orders"])
async def send_order(request: Request, handler: OrderSubmissionHandler = Depends(get_order_handler)):
    """
    Accept a storefront order and relay it to the configured Telegram chat.
    """
    payload: Any = {}
    if request.method == "POST":
        try:
            payload = await _read_json_body(request, handler.settings.config.server.max_body_bytes)
        except RequestBodyError as e:
            logger.info("Rejected request body: %s", e.message)
            return JSONResponse(status_code=e.status_code, content=failure_body(e.code, e.message))

    result = await handler.handle(request.method, payload, client_info=_client_info(request))
    return JSONResponse(status_code=result.status_code, content=result.body)
