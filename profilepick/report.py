"""Translate a finished session into process output and an exit status.

The selected profile goes to stdout as one shell line so a wrapper function
can ``eval`` it; every other outcome writes a diagnostic to stderr.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .profiles import Item
from .runtime.state import (
    OUTCOME_CANCELLED,
    OUTCOME_EMPTY_CANCELLED,
    OUTCOME_INIT_ERROR,
    OUTCOME_PENDING,
    OUTCOME_SELECTED,
    Outcome,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_ENV_VAR = "AWS_DEFAULT_PROFILE"
OUTPUT_FORMATS = ("export", "fish", "name")
DEFAULT_OUTPUT_FORMAT = "export"

CANCELLED_MESSAGE = "Profile selection cancelled."
EMPTY_MESSAGE = "No AWS profiles were found."


@dataclass(frozen=True)
class Report:
    exit_code: int
    stdout_line: str | None = None
    stderr_line: str | None = None


def format_selection(name: str, env_var: str = DEFAULT_ENV_VAR, output_format: str = DEFAULT_OUTPUT_FORMAT) -> str:
    """Render the machine-readable line for a selected profile name."""
    quoted = shlex.quote(name)
    if output_format == "fish":
        return f"set -gx {env_var} {quoted}"
    if output_format == "name":
        return quoted
    if output_format != "export":
        raise ValueError(f"unknown output format: {output_format!r}")
    return f"export {env_var}={quoted}"


def build_report(
    outcome: Outcome,
    items: Sequence[Item],
    env_var: str = DEFAULT_ENV_VAR,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
) -> Report:
    """Map ``outcome`` to exit code and output lines.

    A still-pending outcome (input ended before a decision) is reported as a
    cancellation.
    """
    if outcome.kind == OUTCOME_SELECTED and outcome.index is not None and 0 <= outcome.index < len(items):
        line = format_selection(items[outcome.index].name, env_var, output_format)
        return Report(EXIT_SUCCESS, stdout_line=line)
    if outcome.kind == OUTCOME_INIT_ERROR:
        return Report(EXIT_FAILURE, stderr_line=f"Error: {outcome.reason}")
    if outcome.kind == OUTCOME_EMPTY_CANCELLED:
        return Report(EXIT_FAILURE, stderr_line=EMPTY_MESSAGE)
    if outcome.kind in {OUTCOME_CANCELLED, OUTCOME_PENDING}:
        return Report(EXIT_FAILURE, stderr_line=CANCELLED_MESSAGE)
    return Report(EXIT_FAILURE, stderr_line=f"Error: unexpected outcome {outcome.kind!r}")


def emit_report(report: Report, stdout: TextIO, stderr: TextIO) -> int:
    """Write ``report`` to the given streams and return its exit code."""
    if report.stdout_line is not None:
        stdout.write(report.stdout_line + "\n")
        stdout.flush()
    if report.stderr_line is not None:
        stderr.write(report.stderr_line + "\n")
        stderr.flush()
    logger.info("exit %d", report.exit_code)
    return report.exit_code
