"""
Workspace manifest reader.

Loads a TOML manifest (normally the workspace ``Cargo.toml``) and extracts the
ordered list of member project paths, e.g.::

    [workspace]
    members = ["crates/rune", "crates/runestick"]

Only the member list is consumed; the rest of the manifest is ignored.
"""

from pathlib import Path
from typing import Any, List, Union

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - older Python
    import tomli as tomllib  # type: ignore[import-untyped]

from utils.Errors import ParseError, ReadError, record_crash
from utils.Logger import Logger

DEFAULT_MEMBERS_KEY = "workspace.members"


class ManifestReader:
    """
    Reads the ordered member list from a workspace manifest.

    Args:
        path: Manifest file path.
        members_key: Dotted path of the member list inside the manifest.
    """

    def __init__(self, path: Union[str, Path], members_key: str = DEFAULT_MEMBERS_KEY) -> None:
        self.path = Path(path)
        self.members_key = members_key

    def read(self) -> List[str]:
        """
        Read the manifest and return its members in file order.

        Returns:
            Member project paths, unmodified and in manifest order.

        Raises:
            ReadError: If the file is missing or unreadable.
            ParseError: If the file is not valid TOML, or the member list is
                absent or not a list of strings.
        """
        data = self._load()
        members = self._lookup(data)
        Logger.info(f"Read {len(members)} workspace member(s) from {self.path}")
        return members

    def _load(self) -> dict:
        try:
            with self.path.open("rb") as fh:
                return tomllib.load(fh)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            record_crash(ParseError(f"Invalid TOML in manifest '{self.path}': {exc}", str(self.path)))
        except OSError as exc:
            record_crash(ReadError(f"Cannot read manifest '{self.path}': {exc}", str(self.path)))

    def _lookup(self, data: Any) -> List[str]:
        node = data
        for part in self.members_key.split("."):
            if not isinstance(node, dict) or part not in node:
                record_crash(ParseError(
                    f"Manifest '{self.path}' has no '{self.members_key}' entry", str(self.path)
                ))
            node = node[part]

        if not isinstance(node, list):
            record_crash(ParseError(
                f"'{self.members_key}' in manifest '{self.path}' must be a list, got {type(node).__name__}",
                str(self.path),
            ))
        for index, member in enumerate(node):
            if not isinstance(member, str):
                record_crash(ParseError(
                    f"'{self.members_key}[{index}]' in manifest '{self.path}' must be a string, "
                    f"got {type(member).__name__}",
                    str(self.path),
                ))
        return list(node)


def read_manifest(path: Union[str, Path], members_key: str = DEFAULT_MEMBERS_KEY) -> List[str]:
    """Convenience wrapper: ``ManifestReader(path, members_key).read()``."""
    return ManifestReader(path, members_key).read()
