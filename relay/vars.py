import os

SERVICE_NAME = os.getenv("SERVICE_NAME", "config-relay")
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT") or "3000")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "info").lower()

# Outbound calls (proxy targets and config sources)
PROXY_TIMEOUT = float(os.getenv("PROXY_TIMEOUT") or "30")
PROXY_USER_AGENT = os.getenv("PROXY_USER_AGENT", "Mozilla/5.0 ConfigRelay/1.0")

OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT")


def _parse_key_value_list(raw: str) -> dict:
    mapping: dict = {}
    if not raw:
        return mapping
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if "=" in entry:
            key, val = entry.split("=", 1)
            key = key.strip()
            val = val.strip()
            if key and val:
                mapping[key] = val
    return mapping


OTLP_HEADERS = _parse_key_value_list(os.getenv("OTLP_HEADERS", ""))
