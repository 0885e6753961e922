"""
Execution Layer - Graph Algorithms and Walkthrough Orchestration

Defines the graph validator, the tree renderer, the guide resolver and the
WalkthroughEngine (deterministic state machine) that drives interactive
troubleshooting sessions.
"""

from coffee_helper.execution.renderer import render
from coffee_helper.execution.resolver import resolve_guide
from coffee_helper.execution.validator import reachable_from, validate
from coffee_helper.execution.walkthrough import WalkthroughEngine


__all__ = [
    "WalkthroughEngine",
    "reachable_from",
    "render",
    "resolve_guide",
    "validate",
]
