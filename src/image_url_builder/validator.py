"""Argument validation for domains, width ranges, and width lists."""

from __future__ import annotations

import math
import re
from typing import Any, Sequence

ONE_PERCENT = 0.01

_DOMAIN_PATTERN = re.compile(
    r"^(?:[a-z\d\-_]{1,62}\.){0,125}"
    r"(?:[a-z\d](?:\-(?=\-*[a-z\d])|[a-z]|\d){0,62}\.)"
    r"[a-z\d]{1,63}$",
    re.ASCII,
)


class InvalidArgumentError(ValueError):
    """Raised when a builder argument violates its documented constraint."""


def validate_domain(domain: Any) -> str:
    """Return domain unchanged or raise when it is not a bare host name."""
    if not isinstance(domain, str):
        raise InvalidArgumentError("UrlBuilder must be passed a string domain")
    if _DOMAIN_PATTERN.fullmatch(domain) is None:
        raise InvalidArgumentError(
            "Domain must be passed in as fully-qualified domain name and should not "
            'include a protocol or any path element, i.e. "example.imgix.net".'
        )
    return domain


def validate_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidArgumentError(f"`{name}` value must be a finite number")


def validate_min_width(start: float) -> None:
    validate_finite("start", start)
    if start < 0:
        raise InvalidArgumentError("`start` width value must be greater than zero")


def validate_max_width(stop: float) -> None:
    validate_finite("stop", stop)
    if stop < 0:
        raise InvalidArgumentError("`stop` width value must be greater than zero")


def validate_range(start: float, stop: float) -> None:
    """Validate both bounds, then require start <= stop."""
    validate_min_width(start)
    validate_max_width(stop)
    if start > stop:
        raise InvalidArgumentError(
            "`start` width value must be less than `stop` width value"
        )


def validate_tolerance(tol: float) -> None:
    validate_finite("tol", tol)
    if tol < ONE_PERCENT:
        raise InvalidArgumentError(
            "`tol`erance value must be greater than, or equal to one percent, ie. >= 0.01"
        )


def validate_min_max_tol(start: float, stop: float, tol: float) -> None:
    validate_range(start, stop)
    validate_tolerance(tol)


def validate_widths(widths: Sequence[float] | None) -> None:
    """Reject a missing or empty widths list and any negative entry."""
    if widths is None:
        raise InvalidArgumentError("`widths` array cannot be `None`")
    if len(widths) == 0:
        raise InvalidArgumentError("`widths` array cannot be empty")
    for width in widths:
        if width < 0:
            raise InvalidArgumentError("width values in `widths` cannot be negative")
