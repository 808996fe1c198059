import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response
from opentelemetry import trace

from relay.codec import base58
from relay.config_format import fetch_source_document, resolve, rewrite
from relay.errors import RelayError
from relay.headers import TEXT_CONTENT_TYPE, cors_headers
from relay.models import ErrorResponse
from relay.pages import render_info_page
from relay.proxy.route import forward_to_target
from relay.utils import compact_json
from relay.utils.exception_logging import (
    format_exception_message,
    log_exception_with_details,
)
from relay.utils.traced_requests import traced_request

router = APIRouter()

logger = logging.getLogger("uvicorn.error")

tracer = trace.get_tracer(__name__)

HEALTH_PATH = "/health"
PROXY_PREFIX_PATH = "/?url="


def current_origin(request: Request) -> str:
    """Origin the caller used to reach us, honoring x-forwarded-proto."""
    protocol = request.headers.get("x-forwarded-proto") or "http"
    host = request.headers.get("host", "")
    return f"{protocol}://{host}"


def _json_response(body: ErrorResponse, status_code: int) -> Response:
    return Response(
        content=compact_json(body.to_body()).encode("utf-8"),
        status_code=status_code,
        headers=cors_headers(),
    )


def _error_response(error: RelayError) -> Response:
    body = ErrorResponse(error=error.error)
    if error.expose_details:
        body.details = error.details
    return _json_response(body, error.status_code)


def _internal_error_response(exception: Exception) -> Response:
    body = ErrorResponse(
        error="Internal Server Error", message=format_exception_message(exception)
    )
    return _json_response(body, 500)


async def format_config(
    format_code: str,
    source_code: Optional[str],
    prefix: str,
) -> Response:
    """Fetch a config source and apply the transforms its format asks for."""
    resolved = resolve(format_code, source_code)
    policy = resolved.policy

    with traced_request(
        tracer,
        operation="format_request",
        start_message=f"[Format] format={format_code} source={resolved.source_url}",
        extra_attrs={
            "relay.format": format_code,
            "relay.source": source_code,
            "relay.source_url": resolved.source_url,
            "relay.apply_proxy_rewrite": policy.apply_proxy_rewrite,
            "relay.apply_base58": policy.apply_base58,
        },
    ):
        document = await fetch_source_document(resolved.source_url)
        if policy.apply_proxy_rewrite:
            document = rewrite(document, prefix)

        if policy.apply_base58:
            return Response(
                content=base58.encode(document),
                status_code=200,
                headers=cors_headers(TEXT_CONTENT_TYPE),
            )
        return Response(
            content=compact_json(document).encode("utf-8"),
            status_code=200,
            headers=cors_headers(),
        )


async def dispatch(request: Request) -> Response:
    """
    Route one request: preflight, health check, proxy mode, format mode,
    then the info page. The first matching branch answers.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=cors_headers())

    if request.url.path == HEALTH_PATH:
        return Response(content="OK", status_code=200, headers=cors_headers())

    origin = current_origin(request)
    params = request.query_params
    try:
        target_url = params.get("url")
        if target_url:
            return await forward_to_target(request, target_url)

        format_code = params.get("format")
        if format_code is not None:
            prefix = params.get("prefix") or origin + PROXY_PREFIX_PATH
            return await format_config(format_code, params.get("source"), prefix)

        return HTMLResponse(render_info_page(origin))
    except RelayError as e:
        logger.warning(f"[Relay] {e.error}: {format_exception_message(e)}")
        return _error_response(e)
    except Exception as e:
        log_exception_with_details(logger, "[Relay]", e)
        return _internal_error_response(e)


@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"],
)
async def relay_all(request: Request, path: str):
    """Catch-all route; everything is decided from method, path and query."""
    return await dispatch(request)
