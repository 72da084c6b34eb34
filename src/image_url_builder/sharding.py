"""Pick one domain from a shard set before building a URL."""

from __future__ import annotations

import zlib
from typing import Sequence

from .models import ShardState
from .validator import InvalidArgumentError, validate_domain

SHARD_STRATEGIES = {"crc", "cycle"}


def choose_domain(
    path: str,
    domains: Sequence[str],
    strategy: str = "crc",
    state: ShardState | None = None,
) -> str:
    """Return the domain that should serve ``path``.

    ``crc`` always maps the same path to the same domain. ``cycle`` walks the
    domains in order using the caller's ``state`` counter.
    """
    if not domains:
        raise InvalidArgumentError("`domains` cannot be empty")
    for domain in domains:
        validate_domain(domain)
    if strategy == "crc":
        return domains[zlib.crc32(path.encode("utf-8")) % len(domains)]
    if strategy == "cycle":
        if state is None:
            raise InvalidArgumentError("`cycle` sharding requires a ShardState")
        return domains[state.advance(len(domains))]
    raise InvalidArgumentError(
        f"strategy must be one of: {', '.join(sorted(SHARD_STRATEGIES))}"
    )
