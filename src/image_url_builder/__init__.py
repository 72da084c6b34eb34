"""Signed image URLs and responsive srcsets for an image-processing CDN."""

from .builder import VERSION, UrlBuilder
from .models import BuilderConfig, Candidate, ShardState, SrcSetOptions
from .sharding import choose_domain
from .validator import InvalidArgumentError
from .widths import target_widths

__version__ = VERSION

__all__ = [
    "BuilderConfig",
    "Candidate",
    "InvalidArgumentError",
    "ShardState",
    "SrcSetOptions",
    "UrlBuilder",
    "choose_domain",
    "target_widths",
]
