"""
Error taxonomy and failure reporting for the README regenerator.

Every failure is fatal for the run:
- A ``ConfigError`` means a setting cannot be used, e.g. an empty or badly
  quoted generator command.
- A ``ManifestError`` (``ReadError`` or ``ParseError``) means the workspace
  manifest could not be turned into a member list.
- An ``InvocationError`` (``SpawnError`` or ``ExecutionError``) means one
  generator invocation did not complete successfully.

Errors are raised through ``record_crash`` where they originate so that each
one is logged exactly once before it unwinds the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, Optional

from utils.Logger import Logger

if TYPE_CHECKING:
    from runner.Invocation import InvocationResult, InvocationSpec


class RegenError(Exception):
    """Base class for every error that aborts a regeneration run."""


class ConfigError(RegenError):
    """A configuration value cannot be used."""


class ManifestError(RegenError):
    """The workspace manifest could not be read or understood."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class ReadError(ManifestError):
    """The manifest file is missing or unreadable."""


class ParseError(ManifestError):
    """The manifest is not valid TOML or lacks the member list."""


class InvocationError(RegenError):
    """A generator invocation failed."""

    def __init__(self, message: str, project: str, spec: "InvocationSpec") -> None:
        super().__init__(message)
        self.project = project
        self.spec = spec


class SpawnError(InvocationError):
    """The generator process could not be started."""


class ExecutionError(InvocationError):
    """The generator process started but terminated with a failure outcome."""

    def __init__(
        self,
        message: str,
        project: str,
        spec: "InvocationSpec",
        result: "InvocationResult",
    ) -> None:
        super().__init__(message, project, spec)
        self.result = result


def record_crash(error: RegenError) -> NoReturn:
    """
    Log a fatal error and raise it so the run stops.

    Args:
        error: The error to log and raise.

    Raises:
        RegenError: Always, the given error.
    """
    Logger.error(str(error))
    raise error
