"""Picker composition: settings resolution, state bootstrap, and the session.

Reads the environment and persisted preferences here so the selector state
itself stays a pure function of its inputs.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TextIO

from ..profiles import ProfileSourceError, default_config_path, load_profiles
from ..render import render_frame
from ..report import DEFAULT_ENV_VAR, DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS
from ..ui_theme import resolve_theme
from .config import load_aws_config_file, load_env_var, load_output_format, load_theme_name
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_selector_loop
from .state import SelectorState, init_error, new_selector_state
from .terminal import TerminalController

logger = logging.getLogger(__name__)

AWS_CONFIG_FILE_ENV = "AWS_CONFIG_FILE"
NO_COLOR_ENV = "NO_COLOR"
NOT_A_TERMINAL_REASON = "an interactive terminal is required (stdin and stderr must be a TTY)"


@dataclass(frozen=True)
class PickerSettings:
    """Fully resolved options for one picker run."""

    aws_config_file: Path
    env_var: str = DEFAULT_ENV_VAR
    output_format: str = DEFAULT_OUTPUT_FORMAT
    theme_name: str | None = None
    no_color: bool = False


def resolve_settings(
    *,
    config_file: Path | None = None,
    env_var: str | None = None,
    output_format: str | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
    environ: Mapping[str, str] | None = None,
) -> PickerSettings:
    """Merge CLI options, environment, persisted config, and defaults.

    Precedence is CLI option, then environment, then the config file, then
    built-in defaults.
    """
    env = os.environ if environ is None else environ

    aws_config_file = config_file
    if aws_config_file is None and env.get(AWS_CONFIG_FILE_ENV):
        aws_config_file = Path(env[AWS_CONFIG_FILE_ENV]).expanduser()
    if aws_config_file is None:
        aws_config_file = load_aws_config_file()
    if aws_config_file is None:
        aws_config_file = default_config_path()

    settings = PickerSettings(
        aws_config_file=aws_config_file,
        env_var=env_var or load_env_var() or DEFAULT_ENV_VAR,
        output_format=output_format or load_output_format(OUTPUT_FORMATS) or DEFAULT_OUTPUT_FORMAT,
        theme_name=theme_name or load_theme_name(),
        no_color=no_color or bool(env.get(NO_COLOR_ENV)),
    )
    logger.debug("resolved settings: %s", settings)
    return settings


def load_initial_state(settings: PickerSettings, environ: Mapping[str, str] | None = None) -> SelectorState:
    """Load profiles and build the starting state.

    A source failure becomes an error-view state instead of an exception.
    """
    env = os.environ if environ is None else environ
    try:
        items = load_profiles(settings.aws_config_file)
    except ProfileSourceError as exc:
        logger.warning("%s", exc)
        return new_selector_state((), error=str(exc))

    preferred_name = env.get(settings.env_var) or None
    logger.info(
        "loaded %d profile(s); preferred profile %r",
        len(items),
        preferred_name,
    )
    return new_selector_state(items, preferred_name=preferred_name)


def _is_tty(stream: TextIO) -> bool:
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def run_picker(
    settings: PickerSettings,
    *,
    environ: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
    stderr: TextIO | None = None,
    timing: RuntimeLoopTiming | None = None,
) -> SelectorState:
    """Run one interactive session and return the final state."""
    stdin = sys.stdin if stdin is None else stdin
    stderr = sys.stderr if stderr is None else stderr
    state = load_initial_state(settings, environ)

    if not (_is_tty(stdin) and _is_tty(stderr)):
        reason = state.error if state.error is not None else NOT_A_TERMINAL_REASON
        return replace(state, outcome=init_error(reason))

    stdin_fd = stdin.fileno()
    try:
        terminal = TerminalController(stdin_fd, stderr.fileno())
    except termios.error as exc:
        logger.warning("terminal setup failed: %s", exc)
        return replace(state, outcome=init_error(f"terminal setup failed: {exc}"))

    theme = resolve_theme(settings.theme_name, settings.no_color)
    callbacks = RuntimeLoopCallbacks(
        render=lambda current: terminal.write_frame(render_frame(current, theme)),
        get_terminal_size=terminal.get_size,
    )
    final_state = run_selector_loop(state, terminal, stdin_fd, callbacks, timing)
    logger.info("session ended: %s", final_state.outcome)
    return final_state
