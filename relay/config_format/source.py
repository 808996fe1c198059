import logging
from typing import Any

import httpx

from relay.vars import PROXY_TIMEOUT, PROXY_USER_AGENT

logger = logging.getLogger("uvicorn.error")


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


async def fetch_source_document(source_url: str) -> Any:
    """
    Fetch and parse the remote JSON config document.

    Transport and parse errors propagate to the caller; the document is
    fetched fresh on every call.
    """
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(PROXY_TIMEOUT), follow_redirects=True
    ) as client:
        response = await client.request(
            "GET", source_url, headers={"User-Agent": PROXY_USER_AGENT}
        )
    logger.debug(
        f"[Format] Source {source_url} answered {response.status_code} "
        f"({len(response.content)} bytes)"
    )
    return response.json(parse_constant=_reject_constant)
