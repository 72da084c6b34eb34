"""Public URL and srcset builder."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .encoding import stringify_value
from .models import BuilderConfig, Candidate, SrcSetOptions
from .url import UrlHelper
from .validator import validate_domain, validate_widths
from .widths import (
    DPR_QUALITIES,
    MAX_WIDTH,
    MIN_WIDTH,
    SRCSET_WIDTH_TOLERANCE,
    TARGET_RATIOS,
    target_widths,
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
LIBRARY_PARAM = "ixlib"
LIBRARY_PARAM_VALUE = f"python-{VERSION}"
SRCSET_SEPARATOR = ",\n"


class UrlBuilder:
    """Build signed image URLs and srcset strings for one domain."""

    def __init__(
        self,
        domain: str,
        use_https: bool = True,
        sign_key: str = "",
        include_library_param: bool = True,
    ) -> None:
        self.config = BuilderConfig(
            domain=validate_domain(domain),
            use_https=use_https,
            sign_key=sign_key,
            include_library_param=include_library_param,
        )

    @classmethod
    def from_config(cls, config: BuilderConfig) -> UrlBuilder:
        return cls(
            config.domain,
            use_https=config.use_https,
            sign_key=config.sign_key,
            include_library_param=config.include_library_param,
        )

    @property
    def domain(self) -> str:
        return self.config.domain

    def set_use_https(self, use_https: bool) -> None:
        self.config.use_https = use_https

    def set_sign_key(self, sign_key: str) -> None:
        self.config.sign_key = sign_key

    def set_include_library_param(self, include_library_param: bool) -> None:
        self.config.include_library_param = include_library_param

    def create_url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        """Return the full URL for ``path`` with ``params`` applied."""
        query_params = dict(params or {})
        if self.config.include_library_param:
            query_params[LIBRARY_PARAM] = LIBRARY_PARAM_VALUE
        helper = UrlHelper(
            self.config.domain,
            path,
            self.config.scheme,
            self.config.sign_key,
            query_params,
        )
        return helper.get_url()

    def create_srcset(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        options: SrcSetOptions | None = None,
    ) -> str:
        """Return srcset candidates joined by ``,`` and a newline."""
        candidates = self.create_srcset_candidates(path, params, options)
        return SRCSET_SEPARATOR.join(candidate.render() for candidate in candidates)

    def create_srcset_candidates(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        options: SrcSetOptions | None = None,
    ) -> list[Candidate]:
        """Pick explicit widths, DPR variants, or a width range, in that order."""
        params = dict(params or {})
        options = options or SrcSetOptions()

        if options.widths is not None:
            validate_widths(options.widths)
            logger.debug(
                "Building srcset from %d explicit widths",
                len(options.widths),
                extra={"event": "srcset_widths", "path": path},
            )
            return self._width_candidates(path, params, options.widths)

        if _is_dpr(params):
            logger.debug(
                "Building DPR srcset",
                extra={"event": "srcset_dpr", "path": path},
            )
            return self._dpr_candidates(path, params, options.disable_variable_quality)

        widths = self.target_widths(
            MIN_WIDTH if options.start is None else options.start,
            MAX_WIDTH if options.stop is None else options.stop,
            SRCSET_WIDTH_TOLERANCE if options.tol is None else options.tol,
        )
        logger.debug(
            "Building srcset from %d target widths",
            len(widths),
            extra={"event": "srcset_range", "path": path},
        )
        return self._width_candidates(path, params, widths)

    def target_widths(
        self,
        start: float = MIN_WIDTH,
        stop: float = MAX_WIDTH,
        tol: float = SRCSET_WIDTH_TOLERANCE,
    ) -> list[int]:
        return target_widths(start, stop, tol)

    def _width_candidates(
        self,
        path: str,
        params: dict[str, Any],
        widths: list[int],
    ) -> list[Candidate]:
        candidates: list[Candidate] = []
        for width in widths:
            current = dict(params)
            current["w"] = width
            candidates.append(Candidate(self.create_url(path, current), f"{stringify_value(width)}w"))
        return candidates

    def _dpr_candidates(
        self,
        path: str,
        params: dict[str, Any],
        disable_variable_quality: bool,
    ) -> list[Candidate]:
        use_quality_table = not disable_variable_quality and params.get("q") is None
        candidates: list[Candidate] = []
        for ratio in TARGET_RATIOS:
            current = dict(params)
            current["dpr"] = ratio
            if use_quality_table:
                current["q"] = DPR_QUALITIES[ratio]
            candidates.append(Candidate(self.create_url(path, current), f"{ratio}x"))
        return candidates


def _is_dpr(params: Mapping[str, Any]) -> bool:
    """A fixed width or height means the srcset varies by pixel density."""
    return _has_size(params.get("w")) or _has_size(params.get("h"))


def _has_size(value: Any) -> bool:
    # String "0" counts as unset.
    return bool(value) and value != "0"
