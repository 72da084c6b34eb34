"""Command-line interface for image URL and srcset generation."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from .builder import SRCSET_SEPARATOR, UrlBuilder
from .config import build_builder_config, build_srcset_options, builder_config_json, load_yaml_config
from .logging_utils import setup_logging
from .widths import MAX_WIDTH, MIN_WIDTH, SRCSET_WIDTH_TOLERANCE, target_widths

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    setup_logging(args.log_level)
    logger.info("Running command", extra={"event": "cli_start", "command": args.command})
    try:
        if args.command == "url":
            _handle_url(args)
        elif args.command == "srcset":
            _handle_srcset(args)
        elif args.command == "widths":
            _handle_widths(args)
        else:
            parser.error(f"Unknown command: {args.command}")
    except (ValueError, FileNotFoundError) as exc:
        logger.debug(
            "Command failed",
            exc_info=True,
            extra={"event": "cli_error", "command": args.command},
        )
        raise SystemExit(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Image URL builder")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for JSON log output on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    url_parser = subparsers.add_parser("url", help="Build one image URL.")
    _add_builder_arguments(url_parser)
    url_parser.add_argument("path", help="Image path or full source URL.")
    _add_param_argument(url_parser)

    srcset_parser = subparsers.add_parser("srcset", help="Build a srcset attribute value.")
    _add_builder_arguments(srcset_parser)
    srcset_parser.add_argument("path", help="Image path or full source URL.")
    _add_param_argument(srcset_parser)
    srcset_parser.add_argument(
        "--widths",
        default=None,
        help="Comma-separated explicit widths, e.g. 100,200,400.",
    )
    _add_range_arguments(srcset_parser)
    srcset_parser.add_argument(
        "--disable-variable-quality",
        dest="disable_variable_quality",
        action="store_true",
        default=None,
        help="Do not add per-DPR quality values.",
    )

    widths_parser = subparsers.add_parser("widths", help="Print the target width series.")
    _add_range_arguments(widths_parser)

    return parser


def _add_builder_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, default=None, help="YAML config file path.")
    parser.add_argument("--domain", default=None, help="Image service host, e.g. demo.imgix.net.")
    parser.add_argument("--sign-key", dest="sign_key", default=None, help="Secret used to sign URLs.")
    parser.add_argument("--https", dest="use_https", action="store_true", help="Use https (default).")
    parser.add_argument("--no-https", dest="use_https", action="store_false", help="Use http.")
    parser.set_defaults(use_https=None)
    parser.add_argument(
        "--library-param",
        dest="include_library_param",
        action="store_true",
        help="Append the ixlib parameter (default).",
    )
    parser.add_argument(
        "--no-library-param",
        dest="include_library_param",
        action="store_false",
        help="Do not append the ixlib parameter.",
    )
    parser.set_defaults(include_library_param=None)


def _add_param_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--param",
        dest="params",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Rendering parameter; repeat for more than one.",
    )


def _add_range_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start", type=int, default=None, help="Smallest target width.")
    parser.add_argument("--stop", type=int, default=None, help="Largest target width.")
    parser.add_argument("--tol", type=float, default=None, help="Width tolerance, e.g. 0.08.")


def _handle_url(args: argparse.Namespace) -> None:
    builder, _ = _builder_from_args(args)
    url = builder.create_url(args.path, _parse_params(args.params))
    print(json.dumps({"url": url}, ensure_ascii=False, indent=2))


def _handle_srcset(args: argparse.Namespace) -> None:
    builder, yaml_data = _builder_from_args(args)
    merged = dict(yaml_data.get("srcset") or {})
    for key in ("widths", "start", "stop", "tol", "disable_variable_quality"):
        cli_value = getattr(args, key)
        if cli_value is not None:
            merged[key] = cli_value
    options = build_srcset_options(merged)
    candidates = builder.create_srcset_candidates(args.path, _parse_params(args.params), options)
    payload = {
        "srcset": SRCSET_SEPARATOR.join(candidate.render() for candidate in candidates),
        "candidates": [
            {"url": candidate.url, "descriptor": candidate.descriptor}
            for candidate in candidates
        ],
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _handle_widths(args: argparse.Namespace) -> None:
    widths = target_widths(
        MIN_WIDTH if args.start is None else args.start,
        MAX_WIDTH if args.stop is None else args.stop,
        SRCSET_WIDTH_TOLERANCE if args.tol is None else args.tol,
    )
    print(json.dumps({"widths": widths}, ensure_ascii=False, indent=2))


def _builder_from_args(args: argparse.Namespace) -> tuple[UrlBuilder, dict[str, Any]]:
    yaml_data = load_yaml_config(args.config)
    merged = _merge_builder_settings(args, yaml_data)
    if merged.get("domain") is None:
        raise SystemExit("Missing required value: --domain (or config.domain).")
    config = build_builder_config(merged)
    logger.debug(
        "Using builder config %s",
        builder_config_json(config),
        extra={"event": "cli_config", "path": getattr(args, "path", None)},
    )
    return UrlBuilder.from_config(config), yaml_data


def _merge_builder_settings(args: argparse.Namespace, yaml_data: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for key in ("domain", "use_https", "sign_key", "include_library_param"):
        cli_value = getattr(args, key)
        if cli_value is not None:
            merged[key] = cli_value
        elif key in yaml_data:
            merged[key] = yaml_data[key]
    return merged


def _parse_params(items: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Parameter must look like KEY=VALUE: {item}")
        params[key] = value
    return params
