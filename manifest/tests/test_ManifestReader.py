"""
Unit tests for ManifestReader.
"""

import tempfile
import unittest
from pathlib import Path

from manifest.ManifestReader import ManifestReader, read_manifest
from utils.Errors import ParseError, ReadError
from utils.Logger import Logger


class TestManifestReader(unittest.TestCase):
    """Test cases for ManifestReader."""

    def setUp(self) -> None:
        Logger.initialize(log_level="CRITICAL")
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.root = Path(self._tmpdir.name)

    def _manifest(self, content, name: str = "Cargo.toml") -> Path:
        path = self.root / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    def test_reads_members_in_order(self) -> None:
        path = self._manifest(
            '[workspace]\n'
            'members = [\n'
            '    "crates/runestick",\n'
            '    "crates/rune",\n'
            '    "crates/rune-cli",\n'
            ']\n'
            '\n'
            '[profile.release]\n'
            'debug = true\n'
        )
        self.assertEqual(
            ManifestReader(path).read(),
            ["crates/runestick", "crates/rune", "crates/rune-cli"],
        )

    def test_keeps_duplicates_and_order(self) -> None:
        """Members are returned as written: no sorting, no deduplication."""
        path = self._manifest('[workspace]\nmembers = ["b", "a", "b"]\n')
        self.assertEqual(read_manifest(path), ["b", "a", "b"])

    def test_empty_member_list(self) -> None:
        path = self._manifest("[workspace]\nmembers = []\n")
        self.assertEqual(read_manifest(path), [])

    def test_custom_members_key(self) -> None:
        path = self._manifest('[tool.docs]\nprojects = ["x", "y"]\n', name="docs.toml")
        self.assertEqual(read_manifest(path, "tool.docs.projects"), ["x", "y"])

    def test_missing_file_raises_read_error(self) -> None:
        with self.assertRaises(ReadError) as cm:
            read_manifest(self.root / "missing.toml")
        self.assertEqual(cm.exception.path, str(self.root / "missing.toml"))

    def test_directory_raises_read_error(self) -> None:
        with self.assertRaises(ReadError):
            read_manifest(self.root)

    def test_invalid_toml_raises_parse_error(self) -> None:
        path = self._manifest("[workspace\nmembers = [")
        with self.assertRaises(ParseError) as cm:
            read_manifest(path)
        self.assertIn("Invalid TOML", str(cm.exception))

    def test_invalid_utf8_raises_parse_error(self) -> None:
        path = self._manifest(b'[workspace]\nmembers = ["\xff"]\n')
        with self.assertRaises(ParseError):
            read_manifest(path)

    def test_missing_workspace_table(self) -> None:
        path = self._manifest('[package]\nname = "solo"\n')
        with self.assertRaises(ParseError) as cm:
            read_manifest(path)
        self.assertIn("workspace.members", str(cm.exception))

    def test_missing_members_field(self) -> None:
        path = self._manifest('[workspace]\nexclude = ["old"]\n')
        with self.assertRaises(ParseError):
            read_manifest(path)

    def test_workspace_not_a_table(self) -> None:
        path = self._manifest('workspace = "crates"\n')
        with self.assertRaises(ParseError):
            read_manifest(path)

    def test_members_not_a_list(self) -> None:
        path = self._manifest('[workspace]\nmembers = "crates/rune"\n')
        with self.assertRaises(ParseError) as cm:
            read_manifest(path)
        self.assertIn("must be a list", str(cm.exception))

    def test_member_not_a_string(self) -> None:
        path = self._manifest('[workspace]\nmembers = ["a", 2]\n')
        with self.assertRaises(ParseError) as cm:
            read_manifest(path)
        self.assertIn("members[1]", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
