"""
Orchestrator for the README regenerator.

Reads the workspace members once, runs the generator for each member in
manifest order, then once more for the workspace README. Invocations are
strictly sequential since they all read the same template. The first failure
ends the run.
"""

import shlex
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from manifest.ManifestReader import ManifestReader
from runner.CommandRunner import CommandRunner
from runner.Invocation import build_invocation
from utils.Args import Args
from utils.Errors import ConfigError, record_crash
from utils.Logger import Logger

ROOT_MARKER = "."


def format_status(identifier: str, status: str) -> str:
    """Status line printed after each successful invocation."""
    return f"{identifier}: {status}"


def print_status(line: str) -> None:
    # Flushed so the line precedes output of the next generator process
    print(line, flush=True)


def split_generator(generator: str) -> List[str]:
    """
    Split the configured generator command into its argument prefix.

    Raises:
        ConfigError: If the command is empty or not valid shell syntax.
    """
    try:
        command = shlex.split(generator)
    except ValueError as exc:
        record_crash(ConfigError(f"Invalid generator command {generator!r}: {exc}"))
    if not command:
        record_crash(ConfigError("Generator command must not be empty"))
    return command


class Orchestrator:
    """
    Regenerates the README of every workspace member, then the workspace README.

    ``run`` wires everything from Args; ``regenerate`` does the work given an
    explicit member list and runner.
    """

    @classmethod
    def run(cls) -> List[str]:
        """
        Run the full regeneration configured in Args.

        Returns:
            The status lines that were printed.

        Raises:
            RegenError: On a bad generator setting, or on the first manifest
                or invocation failure. A bad setting is reported before the
                manifest is read.
        """
        command = split_generator(Args.generator)
        workspace = Path(Args.workspace_root)
        manifest_path = workspace / Args.manifest
        Logger.info(f"Orchestrator reading manifest {manifest_path}")
        members = ManifestReader(manifest_path, Args.members_key).read()

        runner = CommandRunner(cwd=workspace, dry_run=Args.dry_run)
        lines = cls.regenerate(
            members,
            runner,
            command=command,
            template=Args.template,
            output=Args.output,
            root_project=Args.root_project,
            root_output=Args.root_output,
        )
        Logger.info(f"Orchestrator finished: {len(lines)} README(s) regenerated")
        return lines

    @classmethod
    def regenerate(
        cls,
        members: Sequence[str],
        runner: CommandRunner,
        command: Sequence[str],
        template: str,
        output: str,
        root_project: str,
        root_output: str,
        emit: Optional[Callable[[str], None]] = None,
    ) -> List[str]:
        """
        Run the generator for each member in order, then for the root project.

        Args:
            members: Member project paths, in manifest order.
            runner: Runs each invocation to completion.
            command: Generator command prefix.
            template: Template path passed to every invocation.
            output: Output filename for member invocations.
            root_project: Project used for the final invocation.
            root_output: Output path for the final invocation.
            emit: Receives each status line as soon as it is known.
                Defaults to printing it on stdout.

        Returns:
            The status lines emitted, member lines first and the root line last.

        Raises:
            SpawnError, ExecutionError: On the first failing invocation. No
                later invocation is attempted.
        """
        emit = emit or print_status
        targets = [(member, member, output) for member in members]
        targets.append((ROOT_MARKER, root_project, root_output))

        lines: List[str] = []
        for identifier, project, target_output in targets:
            spec = build_invocation(command, project, target_output, template)
            Logger.set_current_project(identifier)
            try:
                result = runner.run(spec, project=identifier)
            finally:
                Logger.clear_current_project()
            line = format_status(identifier, result.status)
            emit(line)
            lines.append(line)
        return lines
