"""Basics demo runner — greeting → sum → threshold → loop → person.

Data flow per run:
1. Compose the greeting for the configured name
2. Sum the number sequence
3. Branch on count > threshold
4. Counted loop from 0 to iterations - 1
5. Derive the person's full name and print it with their age

Each step produces lines of text; run_demo() hands them to an emit
callable one at a time, in order.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console

from basicsdemo.greeting import say_hello
from basicsdemo.models import DEFAULT_ITERATIONS, DEFAULT_THRESHOLD, DemoConfig, Person
from basicsdemo.steps import list_steps, load_step
from basicsdemo.summation import calculate_sum


def threshold_message(count: int) -> str:
    """Report whether count is strictly greater than 5."""
    if count > DEFAULT_THRESHOLD:
        return "Count is greater than 5"
    return "Count is not greater than 5"


def iteration_lines(iterations: int = DEFAULT_ITERATIONS) -> list[str]:
    """One 'Iteration i' label per pass, i from 0 up to iterations - 1."""
    lines = []
    for i in range(iterations):
        lines.append(f"Iteration {i}")
    return lines


def person_summary(person: Person) -> str:
    return f"{person.get_full_name()} is {person.age} years old."


def run_step(name: str, config: DemoConfig) -> list[str]:
    """Produce the output lines of a single step.

    Raises:
        KeyError: if no step has that name.
    """
    if load_step(name) is None:
        raise KeyError(name)

    if name == "greeting":
        return [say_hello(config.name, config.greeting)]
    if name == "sum":
        return [f"Sum: {calculate_sum(config.numbers)}"]
    if name == "threshold":
        return [threshold_message(config.count)]
    if name == "loop":
        return iteration_lines(config.iterations)
    if name == "person":
        return [person_summary(config.person)]
    raise KeyError(name)


def demo_lines(config: Optional[DemoConfig] = None) -> list[str]:
    """All output lines of a full run, in order."""
    config = config or DemoConfig()
    lines: list[str] = []
    for step in list_steps():
        lines.extend(run_step(step.name, config))
    return lines


def run_demo(
    config: DemoConfig,
    emit: Callable[[str], None],
    console: Optional[Console] = None,
    step: Optional[str] = None,
) -> list[str]:
    """Run every step (or just ``step``), emitting each line as it is produced.

    Args:
        config: Demo inputs.
        emit: Called once per output line.
        console: Optional stderr console for [dim] progress messages.
        step: Restrict the run to a single named step.

    Returns:
        All emitted lines, in order.
    """
    steps = [load_step(step)] if step else list_steps()
    emitted: list[str] = []
    for info in steps:
        if info is None:
            raise KeyError(step)
        if console:
            console.print(f"  [dim]{info.order}. {info.name}: {info.description}[/dim]")
        for line in run_step(info.name, config):
            emit(line)
            emitted.append(line)
    return emitted
