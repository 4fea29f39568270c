"""basicsdemo — a walk through basic Python constructs.

Composes a greeting, sums a sequence, branches on a threshold, runs a
counted loop and reads a derived field from a record, printing each result.

Usage:
    python -m basicsdemo run                  # All steps, in order
    python -m basicsdemo run --step loop      # A single step
    python -m basicsdemo list                 # Show steps
"""
