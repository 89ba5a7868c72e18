"""
Runs the external documentation generator.

One process at a time: ``run`` starts the generator and blocks until it exits.
The generator's own stdout/stderr are passed through untouched and its output
file is never inspected.
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from runner.Invocation import InvocationResult, InvocationSpec, describe_status
from utils.Errors import ExecutionError, SpawnError, record_crash
from utils.Logger import Logger

DRY_RUN_STATUS = "dry run"


class CommandRunner:
    """
    Spawns generator invocations and waits for them.

    Args:
        cwd: Working directory for every invocation. None uses the current one.
        dry_run: If True, log the command line instead of running it.
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None, dry_run: bool = False) -> None:
        self.cwd = Path(cwd) if cwd is not None else None
        self.dry_run = dry_run

    def run(self, spec: InvocationSpec, project: Optional[str] = None) -> InvocationResult:
        """
        Run one invocation to completion.

        Args:
            spec: The command line to run.
            project: Identifier used in error reports. Defaults to spec.project.

        Returns:
            A successful InvocationResult.

        Raises:
            SpawnError: If the process cannot be started.
            ExecutionError: If the process exits with a non-zero status.
        """
        project = spec.project if project is None else project

        if self.dry_run:
            Logger.info(f"Dry run: {spec}")
            return InvocationResult(True, DRY_RUN_STATUS)

        Logger.debug(f"Running: {spec} (cwd={self.cwd or Path.cwd()})")
        try:
            proc = subprocess.Popen(spec.argv, cwd=str(self.cwd) if self.cwd is not None else None)
        except OSError as exc:
            record_crash(SpawnError(f"Cannot start '{spec.command[0]}' for {project}: {exc}", project, spec))

        returncode = proc.wait()
        result = InvocationResult(returncode == 0, describe_status(returncode), returncode)
        if not result.success:
            record_crash(ExecutionError(
                f"Generator failed for {project} ({result.status}): {spec}", project, spec, result
            ))
        return result
