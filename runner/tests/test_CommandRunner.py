"""
Unit tests for CommandRunner.

Uses the running Python interpreter as a stand-in generator.
"""

import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from runner.CommandRunner import DRY_RUN_STATUS, CommandRunner
from runner.Invocation import build_invocation
from utils.Errors import ExecutionError, SpawnError
from utils.Logger import Logger

# Writes "<-r value>|<-o value>|<-t value>" into the -o file, relative to cwd
_WRITE_ARGS = (
    "import sys; a = sys.argv[1:]; "
    "open(a[a.index('-o') + 1], 'w').write('|'.join(a[a.index(f) + 1] for f in ('-r', '-o', '-t')))"
)


def _python(code: str) -> list:
    return [sys.executable, "-c", code]


class TestCommandRunner(unittest.TestCase):
    """Test cases for CommandRunner."""

    def setUp(self) -> None:
        Logger.initialize(log_level="CRITICAL")
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.root = Path(self._tmpdir.name)

    def test_success_returns_exit_status(self) -> None:
        spec = build_invocation(_python(_WRITE_ARGS), "crates/a", "OUT.md", "T.tpl")
        result = CommandRunner(cwd=self.root).run(spec)

        self.assertTrue(result.success)
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.status, "exit status: 0")
        self.assertEqual((self.root / "OUT.md").read_text(), "crates/a|OUT.md|T.tpl")

    def test_non_zero_exit_raises_execution_error(self) -> None:
        spec = build_invocation(_python("import sys; sys.exit(3)"), "crates/a", "OUT.md", "T.tpl")
        with self.assertRaises(ExecutionError) as cm:
            CommandRunner(cwd=self.root).run(spec, project="crates/a")

        error = cm.exception
        self.assertEqual(error.project, "crates/a")
        self.assertIs(error.spec, spec)
        self.assertFalse(error.result.success)
        self.assertEqual(error.result.returncode, 3)
        self.assertEqual(error.result.status, "exit status: 3")

    def test_missing_executable_raises_spawn_error(self) -> None:
        spec = build_invocation([str(self.root / "no-such-generator")], "a", "OUT.md", "T.tpl")
        with self.assertRaises(SpawnError) as cm:
            CommandRunner(cwd=self.root).run(spec)
        self.assertEqual(cm.exception.project, "a")
        self.assertIn("no-such-generator", str(cm.exception))

    def test_missing_working_directory_raises_spawn_error(self) -> None:
        spec = build_invocation(_python("pass"), "a", "OUT.md", "T.tpl")
        with self.assertRaises(SpawnError):
            CommandRunner(cwd=self.root / "missing").run(spec)

    def test_project_identifier_override(self) -> None:
        """The identifier in errors can differ from the -r project."""
        spec = build_invocation(_python("import sys; sys.exit(1)"), "crates/rune", "../../README.md", "T.tpl")
        with self.assertRaises(ExecutionError) as cm:
            CommandRunner(cwd=self.root).run(spec, project=".")
        self.assertEqual(cm.exception.project, ".")

    @patch("subprocess.Popen")
    def test_dry_run_spawns_nothing(self, mock_popen: MagicMock) -> None:
        spec = build_invocation(["cargo", "readme"], "a", "README.md", "T.tpl")
        result = CommandRunner(dry_run=True).run(spec)

        mock_popen.assert_not_called()
        self.assertTrue(result.success)
        self.assertEqual(result.status, DRY_RUN_STATUS)
        self.assertIsNone(result.returncode)

    @patch("subprocess.Popen")
    def test_waits_for_process(self, mock_popen: MagicMock) -> None:
        mock_popen.return_value.wait.return_value = 0
        spec = build_invocation(["cargo", "readme"], "a", "README.md", "T.tpl")
        CommandRunner(cwd="ws").run(spec)

        mock_popen.assert_called_once_with(spec.argv, cwd="ws")
        mock_popen.return_value.wait.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
