"""Shared-secret URL signatures."""

from __future__ import annotations

import hashlib

SIGNATURE_PARAM = "s"


def compute_signature(sign_key: str, path: str, query: str) -> str:
    """MD5 hex digest of ``sign_key + path + ?query``."""
    payload = sign_key + path + (f"?{query}" if query else "")
    return hashlib.md5(payload.encode("utf-8"), usedforsecurity=False).hexdigest()


def sign_query(sign_key: str | None, path: str, query: str) -> str:
    """Append ``s=<digest>`` as the last query parameter when a key is set."""
    if not sign_key:
        return query
    signature = compute_signature(sign_key, path, query)
    pair = f"{SIGNATURE_PARAM}={signature}"
    return f"{query}&{pair}" if query else pair
