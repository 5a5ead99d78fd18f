# analysis/__init__.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Analysis passes over finished formula trees

"""Read-only analysis passes over formula trees.

Each pass is an external visitor driven through :func:`formula.visit`; new
passes can be added here without touching the node types.
"""

from .visitors import (
    AtomCollector,
    AtomSubstituter,
    DepthMeter,
    OperatorCounter,
    TreePrinter,
    collect_atoms,
    count_operators,
    depth,
    substitute,
    tree_lines,
)

__all__ = [
    "AtomCollector",
    "AtomSubstituter",
    "DepthMeter",
    "OperatorCounter",
    "TreePrinter",
    "collect_atoms",
    "count_operators",
    "depth",
    "substitute",
    "tree_lines",
]
