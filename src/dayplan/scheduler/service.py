"""High-level scheduling service."""

from datetime import datetime

from dayplan.clock import format_clock, format_duration, seconds_since_midnight
from dayplan.logger import get_logger
from dayplan.models import TaskList

from .config import SchedulingConfig
from .core import SchedulingResult
from .search import BranchAndBoundScheduler

logger = get_logger()


class SchedulingService:
    """Resolve run parameters and drive the search for a task list.

    The search itself needs a concrete start time; this service fills in
    "now" when the configuration leaves the start time open.
    """

    def __init__(
        self,
        tasks: TaskList,
        config: SchedulingConfig | None = None,
        now: datetime | None = None,
    ):
        """Initialize scheduling service.

        Args:
            tasks: Parsed task list
            config: Scheduling configuration (defaults apply when omitted)
            now: Moment used when the config has no start time (defaults to the
                current local time)
        """
        self.tasks = tasks
        self.config = config or SchedulingConfig()
        self.now = now

    def resolve_start_time(self) -> int:
        """Seconds since midnight at which the schedule begins."""
        if self.config.global_start_time is not None:
            return self.config.global_start_time
        return seconds_since_midnight(self.now or datetime.now())  # noqa: DTZ005

    def schedule(self) -> SchedulingResult:
        """Run the search and return its result."""
        start = self.resolve_start_time()
        logger.changes(
            f"Scheduling {len(self.tasks)} tasks from {format_clock(start)} "
            f"(rest {format_duration(self.config.rest_time)}, "
            f"frontier bound {self.config.max_frontier_size})"
        )
        scheduler = BranchAndBoundScheduler(self.tasks, start, config=self.config)
        return scheduler.schedule()
