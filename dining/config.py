"""Command-line settings for the dining simulation and their validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from dining.text import atoi

WRONG_ARG_COUNT = "Error: wrong number of arguments"
NEGATIVE_ARGUMENT = "Error: the argument is negative.\nExpected: postive value!"
NOT_DIGITS = "Error: wrong arguments.\nExpected: Only digits"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds.

    ``must_eat_count`` is ``None`` when the run should go on until someone dies.
    """

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: Optional[int] = None


def check_positive_number(text: str) -> int:
    """Check that ``text`` holds only digits and return its value.

    A leading minus and any non-digit character raise :class:`ArgumentError`.
    """
    if text.startswith("-"):
        raise ArgumentError(NEGATIVE_ARGUMENT)
    if any(not "0" <= ch <= "9" for ch in text):
        raise ArgumentError(NOT_DIGITS)
    return atoi(text)


def parse_args(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from four or five arguments, program name excluded.

    The order is: number of philosophers, time to die, time to eat, time to
    sleep and, optionally, how many meals each philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise ArgumentError(WRONG_ARG_COUNT)
    values = [check_positive_number(arg) for arg in args]
    must_eat = values[4] if len(values) == 5 else None
    return Settings(
        philo_count=values[0],
        time_to_die=values[1],
        time_to_eat=values[2],
        time_to_sleep=values[3],
        must_eat_count=must_eat,
    )