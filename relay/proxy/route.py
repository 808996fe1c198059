import logging
import re

import httpx
from fastapi import Request
from fastapi.responses import Response
from opentelemetry import trace

from relay.errors import InvalidUrlError, ProxyFailedError
from relay.headers import cors_headers
from relay.utils.exception_logging import format_exception_message
from relay.utils.traced_requests import traced_request
from relay.vars import PROXY_TIMEOUT, PROXY_USER_AGENT

tracer = trace.get_tracer(__name__)
logger = logging.getLogger("uvicorn.error")

TARGET_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def validate_target_url(target_url: str) -> str:
    """Accept only absolute http(s) URLs as proxy targets."""
    if not TARGET_URL_PATTERN.match(target_url):
        raise InvalidUrlError(f"Not an absolute http(s) URL: {target_url}")
    return target_url


async def forward_to_target(request: Request, target_url: str) -> Response:
    """
    Relay a request to target_url and return the upstream answer.

    The upstream status code and the fully buffered body are passed through.
    Upstream headers are not: the response only carries the relay's CORS
    and JSON content type headers. The inbound body is not forwarded.
    """
    validate_target_url(target_url)

    with traced_request(
        tracer,
        operation="proxy_request",
        start_message=f"[Proxy] {request.method} {target_url}",
        extra_attrs={
            "relay.target_url": target_url,
            "relay.method": request.method,
        },
    ) as span:
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(PROXY_TIMEOUT),
                follow_redirects=True,
            ) as client:
                response = await client.request(
                    method=request.method,
                    url=target_url,
                    headers={"User-Agent": PROXY_USER_AGENT},
                )
        except Exception as e:
            details = format_exception_message(e)
            logger.error(f"[Proxy] Upstream {target_url} failed: {details}")
            span.set_attribute("relay.error", details)
            raise ProxyFailedError(details) from e

        span.set_attribute("relay.status_code", response.status_code)
        logger.debug(
            f"[Proxy] {target_url} answered {response.status_code} "
            f"({len(response.content)} bytes)"
        )
        return Response(
            content=response.content,
            status_code=response.status_code,
            headers=cors_headers(),
        )
