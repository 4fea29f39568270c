"""Data models for the basics demo.

Person record and DemoConfig, the literal constants that flow through
greeting → summation → runner → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field

GREETING = "Hello, World!"
DEFAULT_NAME = "Alice"
DEFAULT_COUNT = 10
DEFAULT_THRESHOLD = 5
DEFAULT_ITERATIONS = 3
DEFAULT_NUMBERS = (1, 2, 3, 4, 5)


@dataclass
class Person:
    """A named person with an age."""

    first_name: str
    last_name: str
    age: int

    def get_full_name(self) -> str:
        """First and last name joined by a single space.

        Read from the fields on every call, so it always reflects
        their current values.
        """
        return f"{self.first_name} {self.last_name}"


def default_person() -> Person:
    return Person(first_name="John", last_name="Doe", age=30)


@dataclass
class DemoConfig:
    """Inputs to a demo run. Defaults reproduce the original literals."""

    greeting: str = GREETING
    name: str = DEFAULT_NAME
    count: int = DEFAULT_COUNT
    iterations: int = DEFAULT_ITERATIONS
    numbers: list[int] = field(default_factory=lambda: list(DEFAULT_NUMBERS))
    person: Person = field(default_factory=default_person)
    # Declared alongside the others but never printed
    is_active: bool = True
