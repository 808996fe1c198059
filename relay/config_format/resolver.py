"""Format codes and config sources accepted by format mode."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from relay.errors import InvalidFormatError


@dataclass(frozen=True)
class FormatPolicy:
    apply_proxy_rewrite: bool
    apply_base58: bool


@dataclass(frozen=True)
class ResolvedFormat:
    policy: FormatPolicy
    source_url: str


RAW = FormatPolicy(apply_proxy_rewrite=False, apply_base58=False)
PROXY = FormatPolicy(apply_proxy_rewrite=True, apply_base58=False)
BASE58 = FormatPolicy(apply_proxy_rewrite=False, apply_base58=True)
PROXY_BASE58 = FormatPolicy(apply_proxy_rewrite=True, apply_base58=True)

# Numeric codes and their mnemonic aliases share one policy object
FORMAT_POLICIES: Mapping[str, FormatPolicy] = MappingProxyType(
    {
        "0": RAW,
        "raw": RAW,
        "1": PROXY,
        "proxy": PROXY,
        "2": BASE58,
        "base58": BASE58,
        "3": PROXY_BASE58,
        "proxy-base58": PROXY_BASE58,
    }
)

_SOURCE_BASE_URL = "https://raw.githubusercontent.com/hafrey1/LunaTV-config/refs/heads/main"

DEFAULT_SOURCE = "full"
JSON_SOURCES: Mapping[str, str] = MappingProxyType(
    {
        "jin18": f"{_SOURCE_BASE_URL}/jin18.json",
        "jingjian": f"{_SOURCE_BASE_URL}/jingjian.json",
        "full": f"{_SOURCE_BASE_URL}/LunaTV-config.json",
    }
)


def resolve(format_code: Optional[str], source_code: Optional[str]) -> ResolvedFormat:
    """
    Look up the transform policy for a format code and the URL for a source.

    Unknown sources fall back to the full config; unknown format codes raise
    InvalidFormatError.
    """
    policy = FORMAT_POLICIES.get(format_code) if format_code is not None else None
    if policy is None:
        raise InvalidFormatError(f"Unknown format code: {format_code!r}")

    source_url = JSON_SOURCES.get(source_code) if source_code is not None else None
    return ResolvedFormat(policy=policy, source_url=source_url or JSON_SOURCES[DEFAULT_SOURCE])
