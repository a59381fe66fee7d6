"""The linear entry sequence a debugger steps through."""

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from debug_playground.config import Settings
from debug_playground.core.exceptions import DivisionByZeroError
from debug_playground.core.operations import (
    calculate_sum,
    process_number,
    safe_divide,
    update_person,
)
from debug_playground.models.person import AgeBand, Person
from debug_playground.utils.console import Console, get_console

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Final values of the interesting locals after a run."""

    counter: int
    total: int
    person: Person
    age_band: AgeBand
    random_values: list[int] = field(default_factory=list)
    division_result: float | None = None
    division_error: DivisionByZeroError | None = None


def run(
    settings: Settings,
    console: Console | None = None,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RunResult:
    """Run the demonstration sequence once.

    Args:
        settings: Loop bounds, thresholds and delay
        console: Where status lines go (shared stdout console by default)
        rng: Source for the random threshold check
        sleep: Delay function, replaceable in tests

    Returns:
        RunResult with the values computed along the way
    """
    console = console or get_console()
    rng = rng or random.Random(settings.random_seed)

    logger.info(f"Starting sequence with {settings.iterations} iterations")
    console.print("Debug playground starting")

    # Plain variables
    counter = 0
    message = "Hello Debug"
    console.print(f"Starting debug session: {message}")  # breakpoint: first stop

    # Record
    person = Person(name="Alice", age=25)
    console.print(f"Person: {person.describe()}")  # breakpoint: inspect record

    # Sequence and mapping
    numbers = [1, 2, 3, 4, 5]
    scores: dict[str, int] = {}
    scores["math"] = 90
    scores["english"] = 85
    console.print(f"Scores: math={scores['math']}, english={scores['english']}")

    random_values: list[int] = []
    for i in range(settings.iterations):
        counter += 1

        # Conditional breakpoint site: i > 5
        if i > settings.highlight_after:
            console.print(f"Loop above {settings.highlight_after}: i={i}, counter={counter}")

        # Hit-count breakpoint site: every 3rd hit
        process_number(i, console=console)

        random_value = rng.randrange(settings.random_upper_bound)
        random_values.append(random_value)
        if random_value > settings.random_threshold:
            console.print(f"Random value above {settings.random_threshold}: {random_value}")

        sleep(settings.step_delay_seconds)

    # Call stack
    total = calculate_sum(numbers)
    console.print(f"Sum of numbers: {total}")

    # Mutation through a nested call
    age_band = update_person(person, console=console)
    console.print(f"Updated person: {person.describe()}")

    # Error reporting
    result = RunResult(
        counter=counter,
        total=total,
        person=person,
        age_band=age_band,
        random_values=random_values,
    )
    try:
        result.division_result = safe_divide(10, 0)
    except DivisionByZeroError as e:
        logger.warning(f"Division failed: {e.code} {e.details}")
        result.division_error = e
        console.error(f"Division error: {e.message}")
    else:
        console.print(f"Division result: {result.division_result:.6f}")

    console.print("Program finished")
    logger.info("Sequence complete")
    return result
