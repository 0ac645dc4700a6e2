"""Scheduler package - bounded best-first search for a day's tasks.

Main entry points:
- SchedulingService: resolves the start time and runs the search
- BranchAndBoundScheduler: the search driver itself

Building blocks:
- IndexedHeap: binary heap with handle-addressable entries
- PartialSchedule: immutable snapshot of placed tasks
- earliest_feasible_start / extend: one-task transitions
- estimate: ranking heuristic for frontier states
"""

from .config import SchedulingConfig
from .core import ScheduledTask, ScheduleStatus, SchedulingResult
from .estimator import estimate
from .feasibility import (
    earliest_after_dependencies,
    earliest_feasible_start,
    earliest_within_constraints,
    extend,
)
from .heap import IndexedHeap
from .search import BranchAndBoundScheduler
from .service import SchedulingService
from .state import PartialSchedule

__all__ = [
    # Configuration
    "SchedulingConfig",
    # Results
    "ScheduleStatus",
    "ScheduledTask",
    "SchedulingResult",
    # Search
    "BranchAndBoundScheduler",
    "SchedulingService",
    # Building blocks
    "IndexedHeap",
    "PartialSchedule",
    "earliest_after_dependencies",
    "earliest_within_constraints",
    "earliest_feasible_start",
    "extend",
    "estimate",
]
