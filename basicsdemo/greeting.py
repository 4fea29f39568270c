"""Greeting composition."""

from __future__ import annotations

from basicsdemo.models import GREETING


def say_hello(name: str, greeting: str = GREETING) -> str:
    """Introduce ``name`` after the greeting.

    The name is substituted as-is, no validation:
    say_hello("Alice") → 'Hello, World! My name is Alice.'
    """
    return f"{greeting} My name is {name}."
