"""URL assembly: scheme, domain, encoded path, and signed query."""

from __future__ import annotations

from typing import Any, Mapping

from .encoding import encode_path, encode_query
from .signing import sign_query


class UrlHelper:
    """Assemble one URL from its parts."""

    def __init__(
        self,
        domain: str,
        path: str,
        scheme: str = "http",
        sign_key: str = "",
        params: Mapping[str, Any] | None = None,
    ) -> None:
        self.domain = domain
        self.path = encode_path(path)
        self.scheme = scheme
        self.sign_key = sign_key
        self.params: dict[str, Any] = dict(params or {})

    def set_parameter(self, key: str, value: Any) -> None:
        """Set ``key``; a falsy value other than ``0`` removes it instead."""
        if key and (value or (value == 0 and not isinstance(value, bool))):
            self.params[key] = value
        else:
            self.params.pop(key, None)

    def delete_parameter(self, key: str) -> None:
        self.params.pop(key, None)

    def get_url(self) -> str:
        query = sign_query(self.sign_key, self.path, encode_query(self.params))
        suffix = f"?{query}" if query else ""
        return f"{self.scheme}://{self.domain}{self.path}{suffix}"
