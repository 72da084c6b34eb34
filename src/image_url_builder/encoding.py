"""Canonical path and query-string encoding."""

from __future__ import annotations

import base64
from typing import Any, Mapping
from urllib.parse import quote

# Reserved characters a plain path keeps literal.
PATH_SAFE_CHARS = "/:@"
# Sub-delimiters left unescaped inside query values.
VALUE_SAFE_CHARS = "!*'()"
BASE64_KEY_SUFFIX = "64"


def encode_path(path: Any, *, preserve_reserved: bool = True) -> str:
    """Return an absolute, percent-encoded path.

    A path starting with ``http`` is a full source URL and is encoded as one
    opaque segment. Other paths keep ``/``, ``:`` and ``@`` unless
    ``preserve_reserved`` is false. Already-encoded input is encoded again.
    """
    if not isinstance(path, str) or not path:
        return "/"
    if path[:4] == "http":
        return "/" + quote(path, safe="")
    if path.startswith("/"):
        path = path[1:]
    if preserve_reserved:
        return "/" + quote(path, safe=PATH_SAFE_CHARS)
    return "/" + quote(path, safe="")


def base64_url_encode(value: str) -> str:
    """URL-safe base64 without ``=`` padding."""
    return base64.urlsafe_b64encode(value.encode("utf-8")).rstrip(b"=").decode("ascii")


def stringify_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(item) for item in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_query_pair(key: Any, value: Any) -> str:
    key_text = str(key)
    raw_value = stringify_value(value)
    if key_text.endswith(BASE64_KEY_SUFFIX):
        encoded_value = base64_url_encode(raw_value)
    else:
        encoded_value = quote(raw_value, safe=VALUE_SAFE_CHARS)
    return f"{quote(key_text, safe='')}={encoded_value}"


def encode_query(params: Mapping[Any, Any] | None) -> str:
    """Encode params sorted byte-wise by key; ``None`` values are skipped."""
    if not params:
        return ""
    items = sorted(params.items(), key=lambda item: str(item[0]).encode("utf-8"))
    return "&".join(encode_query_pair(key, value) for key, value in items if value is not None)
