from __future__ import annotations

import pytest

from image_url_builder.validator import (
    InvalidArgumentError,
    validate_domain,
    validate_max_width,
    validate_min_max_tol,
    validate_min_width,
    validate_range,
    validate_tolerance,
    validate_widths,
)

HOST = "demos.imgix.net"


def test_validate_min_width_rejects_negative() -> None:
    with pytest.raises(InvalidArgumentError, match="`start` width value"):
        validate_min_width(-1)


def test_validate_max_width_rejects_negative() -> None:
    with pytest.raises(InvalidArgumentError, match="`stop` width value"):
        validate_max_width(-1)


def test_validate_range_rejects_inverted_bounds() -> None:
    with pytest.raises(InvalidArgumentError, match="must be less than"):
        validate_range(400, 100)


def test_validate_range_accepts_zero_and_equal_bounds() -> None:
    validate_range(0, 0)
    validate_range(100, 100)


def test_validate_tolerance_floor_is_one_percent() -> None:
    validate_tolerance(0.01)
    with pytest.raises(InvalidArgumentError, match="one percent"):
        validate_tolerance(0.001)


def test_validate_min_max_tol_checks_range_before_tolerance() -> None:
    with pytest.raises(InvalidArgumentError, match="must be less than"):
        validate_min_max_tol(400, 100, 0.001)


@pytest.mark.parametrize(
    ("widths", "message"),
    [
        (None, "cannot be `None`"),
        ([], "cannot be empty"),
        ([0, -1, 100], "cannot be negative"),
    ],
)
def test_validate_widths_rejects_bad_lists(widths: list[int] | None, message: str) -> None:
    with pytest.raises(InvalidArgumentError, match=message):
        validate_widths(widths)


def test_validate_domain_accepts_host_names() -> None:
    assert validate_domain(HOST) == HOST
    assert validate_domain("my-source_1.imgix.net") == "my-source_1.imgix.net"


@pytest.mark.parametrize(
    "domain",
    [
        HOST + "/",
        "https://" + HOST,
        HOST + "-",
        "",
        "localhost",
        "demos.imgix.net\n",
        "demos.imgix.n\u0663t",
        "\u0661\u0662.imgix.net",
    ],
)
def test_validate_domain_rejects_malformed_hosts(domain: str) -> None:
    with pytest.raises(InvalidArgumentError, match="fully-qualified domain name"):
        validate_domain(domain)


def test_validate_domain_rejects_non_string() -> None:
    with pytest.raises(InvalidArgumentError, match="must be passed a string domain"):
        validate_domain(None)


def test_invalid_argument_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        validate_tolerance(0)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_bounds_and_tolerance_are_rejected(value: float) -> None:
    with pytest.raises(InvalidArgumentError, match="finite number"):
        validate_min_width(value)
    with pytest.raises(InvalidArgumentError, match="finite number"):
        validate_max_width(value)
    with pytest.raises(InvalidArgumentError, match="finite number"):
        validate_tolerance(value)
