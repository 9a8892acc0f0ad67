"""
Executor - interpret a Recipe against a domain model.

Execution flow, for each instance in recipe order:
1. progress(index, name)
2. print_key(key, value) for every config entry, in key order
3. read the clock, call the step executor, read the clock again
4. print_time(elapsed_ns), whatever the executor returned
5. stop immediately if the executor returned False, else advance

Stopping is a controlled abort, not an error: no further steps run and the
interpreter performs no cleanup. Callers clean up unconditionally after run()
returns. Exceptions raised by executors propagate unchanged.

The clock is injected so tests can use a fake; it defaults to
time.perf_counter_ns.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from recipelab.recipe import Recipe

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None]
KeyCallback = Callable[[str, float], None]
TimeCallback = Callable[[int], None]
Clock = Callable[[], int]


@dataclass
class RunResult:
    """
    Result of interpreting a recipe.

    Attributes:
        steps_run: Number of executors invoked
        completed: True if the recipe was exhausted, False if a step stopped it
        stopped_at: Index of the step that requested the stop, if any
        durations_ns: Elapsed time of each executed step
    """
    steps_run: int = 0
    completed: bool = True
    stopped_at: Optional[int] = None
    durations_ns: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "steps_run": self.steps_run,
            "completed": self.completed,
            "stopped_at": self.stopped_at,
            "durations_ns": list(self.durations_ns),
        }


def _ignore(*args: Any) -> None:
    pass


def run(
    recipe: Recipe,
    model: Any,
    progress: Optional[ProgressCallback] = None,
    print_key: Optional[KeyCallback] = None,
    print_time: Optional[TimeCallback] = None,
    clock: Optional[Clock] = None,
) -> RunResult:
    """
    Run a recipe with early-abort semantics.

    Args:
        recipe: The recipe to interpret (not modified)
        model: Domain state, mutated in place by every executor
        progress: Called with (index, name) before each step
        print_key: Called with (key, value) per config entry of each step
        print_time: Called with the elapsed nanoseconds of each step
        clock: Monotonic nanosecond clock (default: time.perf_counter_ns)

    Returns:
        RunResult describing how far execution got
    """
    progress = progress or _ignore
    print_key = print_key or _ignore
    print_time = print_time or _ignore
    clock = clock or time.perf_counter_ns

    result = RunResult()

    for index, step in enumerate(recipe):
        progress(index, step.name)

        for key, value in step.config.items():
            print_key(key, value)

        start = clock()
        keep_going = step.execute(model)
        elapsed = clock() - start

        result.steps_run += 1
        result.durations_ns.append(elapsed)
        print_time(elapsed)

        if not keep_going:
            logger.info(f"Step {index} ({step.name}) stopped the recipe")
            result.completed = False
            result.stopped_at = index
            return result

    logger.debug(f"Recipe completed: {result.steps_run} steps")
    return result
