"""Step catalogue for the basics demo.

Each step is one stage of the sequential driver, listed in the order the
driver runs them:
    greeting   — compose and print a greeting
    sum        — sum the number sequence
    threshold  — compare count against the threshold
    loop       — counted loop printing iteration labels
    person     — print the person's full name and age
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class StepInfo:
    """Metadata about a demo step."""

    name: str
    description: str
    order: int


_STEPS = [
    StepInfo("greeting", "Compose a greeting for a name", 1),
    StepInfo("sum", "Sum a sequence of numbers", 2),
    StepInfo("threshold", "Check whether count exceeds the threshold", 3),
    StepInfo("loop", "Print a label for each loop iteration", 4),
    StepInfo("person", "Derive a full name from a person record", 5),
]


def list_steps() -> list[StepInfo]:
    """All steps, in driver order."""
    return sorted(_STEPS, key=lambda s: s.order)


def load_step(name: str) -> Optional[StepInfo]:
    """Look up a single step by name.

    Args:
        name: Step name (e.g., 'loop').

    Returns:
        StepInfo if the step exists, None otherwise.
    """
    for step in _STEPS:
        if step.name == name:
            return step
    return None
