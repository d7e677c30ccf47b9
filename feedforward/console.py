"""Console helpers for the command line."""

import time
from collections.abc import Sequence
from typing import Optional

import click

DEFAULT_DELAY_MS = 33


def paced_echo(text: str, delay_ms: int = DEFAULT_DELAY_MS, err: bool = False) -> None:
    """Echo ``text`` one character at a time, then end the line.

    A delay of zero or less writes the line in one go.
    """
    if delay_ms <= 0:
        click.echo(text, err=err)
        return

    for char in text:
        click.echo(char, nl=False, err=err)
        time.sleep(delay_ms / 1000.0)
    click.echo(err=err)


def format_vector(values: Sequence[float], precision: Optional[int] = None) -> str:
    """Render a vector as ``[a, b, c]``"""
    if precision is None:
        return "[" + ", ".join(repr(float(v)) for v in values) + "]"
    return "[" + ", ".join(f"{v:.{precision}f}" for v in values) + "]"
