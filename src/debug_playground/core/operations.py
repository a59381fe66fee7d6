"""Helper operations called from the entry sequence.

Each function is small on purpose: it gives a debugger a distinct frame to
stop in, a few locals to watch, and at most one console line to observe.
"""

from collections.abc import Sequence

from debug_playground.core.exceptions import DivisionByZeroError
from debug_playground.models.person import AgeBand, Person
from debug_playground.utils.console import Console, get_console

UPDATED_SUFFIX = " (Updated)"
MAX_REASONABLE_AGE = 150


def hello() -> str:
    """Return the fixed greeting."""
    return "Hello, World!"


def add(a: int, b: int) -> int:
    return a + b


def process_number(num: int, console: Console | None = None) -> tuple[int, int]:
    """Print a number with its double and square.

    Args:
        num: Number to transform

    Returns:
        ``(doubled, squared)``
    """
    console = console or get_console()

    doubled = num * 2
    squared = num * num

    console.print(f"Number {num}: doubled={doubled}, squared={squared}")
    return doubled, squared


def calculate_sum(numbers: Sequence[int]) -> int:
    """Sum a sequence with an explicit running total."""
    total = 0
    for num in numbers:
        total += num  # watch `total` change per iteration
    return total


def validate_age(age: int, console: Console | None = None) -> AgeBand:
    """Report which advisory band an age falls into.

    Never raises and never changes the record the age came from.

    Args:
        age: Age to check

    Returns:
        NEGATIVE for age < 0, TOO_LARGE above 150, VALID otherwise
    """
    console = console or get_console()

    if age < 0:
        console.print("Age cannot be negative")
        return AgeBand.NEGATIVE
    if age > MAX_REASONABLE_AGE:
        console.print("Age is too large")
        return AgeBand.TOO_LARGE

    console.print(f"Age is valid: {age}")
    return AgeBand.VALID


def update_person(person: Person, console: Console | None = None) -> AgeBand:
    """Increment the age, mark the name as updated, then validate the age.

    The record is mutated in place.

    Returns:
        Band reported by ``validate_age`` for the new age
    """
    person.age += 1
    person.name = person.name + UPDATED_SUFFIX

    # Nested call for a deeper stack
    return validate_age(person.age, console=console)


def safe_divide(a: float, b: float) -> float:
    """Divide ``a`` by ``b``.

    Raises:
        DivisionByZeroError: If ``b`` is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)
    return a / b
