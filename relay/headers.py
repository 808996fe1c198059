JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain;charset=UTF-8"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def cors_headers(content_type: str = JSON_CONTENT_TYPE) -> dict[str, str]:
    """Fresh CORS header set for one response."""
    return {**CORS_HEADERS, "Content-Type": content_type}
