"""
Guide Resolver.

Solutions are written against one illustrative machine, but the user may own
a different one. Given the guide a Solution declares and the user's selected
machine, pick the most specific guide of the same category:

1. exact brand + exact model
2. exact brand + Generic model
3. Generic brand + Generic model
4. otherwise, the declared guide itself

Never raises; a missing declared guide simply resolves to None.
"""

import logging
from typing import Optional

from ..domain.models import GENERIC, Guide
from ..repositories.guide import GuideRepository
from ..state.models import MachineSelection

logger = logging.getLogger(__name__)


def resolve_guide(
    requested_guide_id: Optional[str],
    selected_machine: Optional[MachineSelection],
    guide_catalog: GuideRepository,
) -> Optional[Guide]:
    if not requested_guide_id:
        return None

    candidate = guide_catalog.lookup_guide(requested_guide_id)

    # Nothing to improve on: no machine, no base guide, or already a match
    if (
        selected_machine is None
        or candidate is None
        or candidate.matches_machine(selected_machine.brand, selected_machine.model)
    ):
        return candidate

    fallback_chain = (
        (selected_machine.brand, selected_machine.model),
        (selected_machine.brand, GENERIC),
        (GENERIC, GENERIC),
    )
    for brand, model in fallback_chain:
        guide = guide_catalog.find_guide(brand, model, candidate.category)
        if guide is not None:
            if guide.id != candidate.id:
                logger.debug(
                    f"Resolved guide '{requested_guide_id}' to '{guide.id}' "
                    f"for {selected_machine.label} ({brand}/{model})"
                )
            return guide

    return candidate
