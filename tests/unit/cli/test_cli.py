"""CLI argument, logging, and exit-status behavior tests.

Verifies how ``profilepick.cli.main`` resolves settings, reports outcomes,
and lists profiles without starting the interactive picker.
"""

from __future__ import annotations

import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from profilepick import __version__, cli
from profilepick.profiles import Item
from profilepick.runtime.state import SelectorState, cancelled, init_error, selected

AWS_CONFIG = "[default]\nregion = us-east-1\n[profile dev]\nrole_arn = arn:aws:iam::1:role/dev\n"


def _final_state(outcome) -> SelectorState:
    return SelectorState(
        items=(Item(name="default"), Item(name="dev")),
        cursor=1,
        ready=True,
        outcome=outcome,
    )


class CliMainTests(unittest.TestCase):
    def tearDown(self) -> None:
        cli.configure_logging(None, verbose=False)

    def _run(self, argv: list[str], final_state: SelectorState) -> tuple[int, str, str, mock.Mock]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch("profilepick.cli.run_picker", return_value=final_state) as run_picker, mock.patch(
            "profilepick.cli.sys.stdout", stdout
        ), mock.patch("profilepick.cli.sys.stderr", stderr), mock.patch(
            "profilepick.runtime.config.CONFIG_PATH", Path("/nonexistent/profilepick/config.json")
        ), mock.patch.dict(
            "os.environ", {}, clear=True
        ):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(argv)
        return ctx.exception.code, stdout.getvalue(), stderr.getvalue(), run_picker

    def test_selection_prints_export_line_and_exits_zero(self) -> None:
        code, out, err, run_picker = self._run(["--config-file", "/tmp/aws-config"], _final_state(selected(1)))

        self.assertEqual(code, 0)
        self.assertEqual(out, "export AWS_DEFAULT_PROFILE=dev\n")
        self.assertEqual(err, "")
        settings = run_picker.call_args.args[0]
        self.assertEqual(settings.aws_config_file, Path("/tmp/aws-config"))

    def test_env_var_and_format_options_shape_output(self) -> None:
        code, out, _err, _run_picker = self._run(
            ["--config-file", "/tmp/c", "--env-var", "AWS_PROFILE", "--format", "fish"],
            _final_state(selected(0)),
        )

        self.assertEqual(code, 0)
        self.assertEqual(out, "set -gx AWS_PROFILE default\n")

    def test_cancel_exits_one_with_message(self) -> None:
        code, out, err, _run_picker = self._run(["--config-file", "/tmp/c"], _final_state(cancelled()))

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("cancelled", err)

    def test_init_error_exits_one_with_detail(self) -> None:
        code, _out, err, _run_picker = self._run(["--config-file", "/tmp/c"], _final_state(init_error("boom")))

        self.assertEqual(code, 1)
        self.assertIn("Error: boom", err)

    def test_invalid_env_var_name_is_rejected(self) -> None:
        with mock.patch("profilepick.cli.sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--env-var", "9-bad"])

        self.assertEqual(ctx.exception.code, 2)

    def test_non_ascii_env_var_name_is_rejected(self) -> None:
        with mock.patch("profilepick.cli.sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--env-var", "PROFILÉ"])

        self.assertEqual(ctx.exception.code, 2)

    def test_version_option_prints_package_version(self) -> None:
        stdout = io.StringIO()
        with mock.patch("profilepick.cli.sys.stdout", stdout):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--version"])

        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(stdout.getvalue().strip(), f"profilepick {__version__}")

    def test_list_prints_profiles_without_running_picker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config"
            config_path.write_text(AWS_CONFIG, encoding="utf-8")

            code, out, _err, run_picker = self._run(
                ["--config-file", str(config_path), "--list"],
                _final_state(cancelled()),
            )

        run_picker.assert_not_called()
        self.assertEqual(code, 0)
        self.assertEqual(out, "default\ndev\tarn:aws:iam::1:role/dev\n")

    def test_list_with_missing_file_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, out, err, _run_picker = self._run(
                ["--config-file", str(Path(tmp) / "missing"), "--list"],
                _final_state(cancelled()),
            )

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("failed to read AWS config", err)


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        cli.configure_logging(None, verbose=False)

    def test_log_file_receives_debug_messages_when_verbose(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "profilepick.log"
            cli.configure_logging(log_path, verbose=True)
            logging.getLogger("profilepick.test").debug("hello from test")
            for handler in logging.getLogger("profilepick").handlers:
                handler.flush()
                handler.close()

            self.assertIn("hello from test", log_path.read_text(encoding="utf-8"))

    def test_console_logging_is_warning_only(self) -> None:
        cli.configure_logging(None, verbose=True)

        handlers = logging.getLogger("profilepick").handlers
        self.assertEqual(len(handlers), 1)
        self.assertEqual(handlers[0].level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
