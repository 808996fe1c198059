"""Rewrite the `api` endpoints of a config document to route through a proxy."""

from typing import Any

API_KEY = "api"
URL_MARKER = "?url="


def rewrite_api_url(api_url: str, new_prefix: str) -> str:
    """
    Point a single api URL at new_prefix.

    A previous `?url=` redirection is unwrapped first, so rewriting is stable
    when the same document passes through more than one relay.
    """
    marker_index = api_url.find(URL_MARKER)
    if marker_index != -1:
        api_url = api_url[marker_index + len(URL_MARKER):]
    if not api_url.startswith(new_prefix):
        api_url = new_prefix + api_url
    return api_url


def rewrite(value: Any, new_prefix: str) -> Any:
    """
    Return a copy of a JSON value with every string under an `api` key rewritten.

    Containers are always rebuilt, so the result shares no dict or list with
    the input and the input is never modified.
    """
    if isinstance(value, list):
        return [rewrite(item, new_prefix) for item in value]

    if isinstance(value, dict):
        rewritten = {}
        for key, item in value.items():
            if key == API_KEY and isinstance(item, str):
                rewritten[key] = rewrite_api_url(item, new_prefix)
            else:
                rewritten[key] = rewrite(item, new_prefix)
        return rewritten

    return value
