"""Configuration helpers for CLI + YAML input."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .models import BuilderConfig, SrcSetOptions
from .validator import validate_domain, validate_min_max_tol, validate_widths
from .widths import MAX_WIDTH, MIN_WIDTH, SRCSET_WIDTH_TOLERANCE


def load_yaml_config(path: Path | None) -> dict[str, Any]:
    """Load YAML config or return empty dict when path is absent."""
    if path is None:
        return {}
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML config root must be a mapping.")
    return data


def build_builder_config(raw: dict[str, Any]) -> BuilderConfig:
    """Construct BuilderConfig with coerced values and a validated domain."""
    if raw.get("domain") is None:
        raise ValueError("domain is required.")
    config = BuilderConfig(
        domain=raw["domain"],
        use_https=bool(raw.get("use_https", True)),
        sign_key=str(raw.get("sign_key") or ""),
        include_library_param=bool(raw.get("include_library_param", True)),
    )
    validate_domain(config.domain)
    return config


def build_srcset_options(raw: dict[str, Any] | None) -> SrcSetOptions:
    """Construct SrcSetOptions from a mapping such as the YAML ``srcset`` block."""
    raw = raw or {}
    widths = raw.get("widths")
    options = SrcSetOptions(
        widths=[int(width) for width in _split_widths(widths)] if widths is not None else None,
        start=int(raw["start"]) if raw.get("start") is not None else None,
        stop=int(raw["stop"]) if raw.get("stop") is not None else None,
        tol=float(raw["tol"]) if raw.get("tol") is not None else None,
        disable_variable_quality=bool(raw.get("disable_variable_quality", False)),
    )
    validate_srcset_options(options)
    return options


def validate_srcset_options(options: SrcSetOptions) -> None:
    """Validate option values and raise InvalidArgumentError on bad input."""
    if options.widths is not None:
        validate_widths(options.widths)
    start = options.start if options.start is not None else MIN_WIDTH
    stop = options.stop if options.stop is not None else MAX_WIDTH
    tol = options.tol if options.tol is not None else SRCSET_WIDTH_TOLERANCE
    if start != stop:
        validate_min_max_tol(start, stop, tol)


def builder_config_json(config: BuilderConfig) -> str:
    """Serialize config as JSON with the sign key masked."""
    payload = {
        "domain": config.domain,
        "use_https": config.use_https,
        "sign_key": "***" if config.sign_key else "",
        "include_library_param": config.include_library_param,
    }
    return json.dumps(payload, ensure_ascii=True, sort_keys=True)


def _split_widths(widths: Any) -> list[Any]:
    if isinstance(widths, str):
        return [item for item in widths.split(",") if item.strip()]
    return list(widths)
