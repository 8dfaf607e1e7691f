"""Request Correlation — one id per request, echoed back and bound for logging.

Invariants:
    - A client-supplied X-Request-ID is kept; otherwise a uuid4 hex is minted
    - The id is bound in request_id_var for the whole request and reset afterwards
    - Every routed response, 4xx error bodies included, carries X-Request-ID
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from tracker.infrastructure.observability import request_id_var

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
