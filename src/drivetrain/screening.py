"""Run the compatibility passes and placement checks before ranking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .config import ScreeningOptions
from .models.gearbox import Gearbox
from .ranking import rank_gearboxes

logger = logging.getLogger(__name__)


@dataclass
class ScreeningResult:
    """Outcome of screening one candidate gearbox."""

    gearbox: Gearbox  # filtered copy; the candidate passed in is left alone
    feasible: bool
    good_pinion: bool
    bad_pinion: bool
    accepted: bool
    reasons: list[str] = field(default_factory=list)  # checks that rejected it


def screen_gearbox(
    gearbox: Gearbox, options: Optional[ScreeningOptions] = None
) -> ScreeningResult:
    """Filter a copy of ``gearbox`` and evaluate the advisory checks on it."""
    options = options or ScreeningOptions()

    filtered = gearbox.clone()
    filtered.filter_overlapping_motion_methods()
    filtered.filter_overlapping_bores()

    feasible = filtered.has_motion_modes()
    good_pinion = filtered.has_good_pinion_placement()
    bad_pinion = filtered.has_bad_pinion_placement()

    reasons = []
    if not feasible:
        reasons.append("no compatible parts for every stage")
    if options.require_good_pinion_placement and not good_pinion:
        reasons.append("first stage has no motor-bore driving part")
    if options.reject_bad_pinion_placement and bad_pinion:
        reasons.append("motor-bore part in a bad position")
    if options.max_stages is not None and filtered.stage_count() > options.max_stages:
        reasons.append("too many stages")

    return ScreeningResult(
        gearbox=filtered,
        feasible=feasible,
        good_pinion=good_pinion,
        bad_pinion=bad_pinion,
        accepted=not reasons,
        reasons=reasons,
    )


def screen_and_rank(
    gearboxes: Iterable[Gearbox],
    target_reduction: float,
    options: Optional[ScreeningOptions] = None,
) -> list[Gearbox]:
    """Screen every candidate and rank the filtered survivors best-first."""
    survivors = []
    for index, gearbox in enumerate(gearboxes):
        result = screen_gearbox(gearbox, options)
        if result.accepted:
            survivors.append(result.gearbox)
        else:
            logger.debug("candidate %d rejected: %s", index, "; ".join(result.reasons))
    logger.debug("%d candidates survived screening", len(survivors))
    return rank_gearboxes(survivors, target_reduction)
