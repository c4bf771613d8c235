"""Command-line front door for profilepick.

Parses CLI options, configures logging, and resolves settings.
Then runs the interactive picker and reports its outcome to the shell.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .profiles import ProfileSourceError, load_profiles
from .report import OUTPUT_FORMATS, build_report, emit_report
from .runtime.app import PickerSettings, resolve_settings, run_picker
from .runtime.config import is_env_var_name
from .ui_theme import available_theme_names

LOG_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"


def _env_var_name(value: str) -> str:
    """argparse type for shell variable names."""
    if not is_env_var_name(value):
        raise argparse.ArgumentTypeError(f"invalid environment variable name: {value!r}")
    return value


def configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Route package logs to ``log_file`` or, failing that, stderr warnings.

    Console logging stays at WARNING so nothing is written over the
    interactive screen during normal use.
    """
    logger = logging.getLogger("profilepick")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)
        return

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    logger.addHandler(console_handler)


def list_profiles(settings: PickerSettings) -> int:
    """Print profile names (tab + role ARN when present) without the UI."""
    try:
        items = load_profiles(settings.aws_config_file)
    except ProfileSourceError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    for item in items:
        line = item.name if item.metadata is None else f"{item.name}\t{item.metadata}"
        sys.stdout.write(line + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="profilepick",
        description=(
            "Pick an AWS profile interactively and print a shell line that selects it. "
            "Use as: eval \"$(profilepick)\""
        )
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config-file",
        type=Path,
        default=None,
        help="AWS config file to read (default: $AWS_CONFIG_FILE or ~/.aws/config).",
    )
    parser.add_argument(
        "--env-var",
        type=_env_var_name,
        default=None,
        help="Variable that holds the current profile and receives the selection (default: AWS_DEFAULT_PROFILE).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output line format for the selected profile (default: export).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="Print available profiles and exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write diagnostic logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Include debug messages in the log file.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run the picker, and exit with its status code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    settings = resolve_settings(
        config_file=args.config_file,
        env_var=args.env_var,
        output_format=args.output_format,
        theme_name=args.theme,
        no_color=args.no_color,
    )

    if args.list:
        raise SystemExit(list_profiles(settings))

    final_state = run_picker(settings)
    report = build_report(
        final_state.outcome,
        final_state.items,
        env_var=settings.env_var,
        output_format=settings.output_format,
    )
    raise SystemExit(emit_report(report, sys.stdout, sys.stderr))


if __name__ == "__main__":
    main()
