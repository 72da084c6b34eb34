"""Target-width series for width-described srcsets."""

from __future__ import annotations

import logging
import math

from .validator import InvalidArgumentError, validate_finite, validate_min_max_tol

logger = logging.getLogger(__name__)

MIN_WIDTH = 100
MAX_WIDTH = 8192
SRCSET_WIDTH_TOLERANCE = 0.08

TARGET_RATIOS = (1, 2, 3, 4, 5)
DPR_QUALITIES = {1: 75, 2: 50, 3: 35, 4: 23, 5: 20}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def target_widths(
    start: float = MIN_WIDTH,
    stop: float = MAX_WIDTH,
    tol: float = SRCSET_WIDTH_TOLERANCE,
) -> list[int]:
    """Return ascending widths from ``start`` to ``stop``, both inclusive.

    Each step grows the width by ``2 * tol``, which keeps the change in
    rendered image area near ``tol``. Generation never passes ``MAX_WIDTH``
    even when ``stop`` is larger; ``stop`` itself is still appended last.
    """
    if start == stop:
        validate_finite("start", start)
        return [int(start)]

    validate_min_max_tol(start, stop, tol)
    if start == 0:
        raise InvalidArgumentError("`start` width value must be greater than zero")

    resolutions: list[int] = []
    width = float(start)
    while width < stop and width < MAX_WIDTH:
        resolutions.append(_round_half_up(width))
        width *= 1 + tol * 2

    if not resolutions or resolutions[-1] < stop:
        resolutions.append(int(stop))

    logger.debug(
        "Generated %d target widths between %s and %s (tol=%s)",
        len(resolutions),
        start,
        stop,
        tol,
    )
    return resolutions
