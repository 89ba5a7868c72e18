"""
Generator invocation values.

An ``InvocationSpec`` is the full command line for one generator run; an
``InvocationResult`` is what came back. Neither is persisted.
"""

import shlex
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class InvocationSpec:
    """
    Command line for a single generator invocation.

    Attributes:
        command: Generator command prefix, e.g. ("cargo", "readme").
        project: Project path passed with -r.
        output: Output path passed with -o (resolved by the generator).
        template: Template path passed with -t (resolved by the generator).
    """

    command: Tuple[str, ...]
    project: str
    output: str
    template: str

    @property
    def argv(self) -> list:
        """Full argument vector: ``<command> -r <project> -o <output> -t <template>``."""
        return [*self.command, "-r", self.project, "-o", self.output, "-t", self.template]

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class InvocationResult:
    """
    Outcome of one generator invocation.

    Attributes:
        success: True when the generator exited with status 0.
        status: Human-readable status descriptor, printed verbatim.
        returncode: Raw process return code, None when nothing was spawned.
    """

    success: bool
    status: str
    returncode: Optional[int] = None


def build_invocation(command: Sequence[str], project: str, output: str, template: str) -> InvocationSpec:
    """
    Build the invocation for one project.

    Pure: the same inputs always yield the same argument list.
    """
    if not command:
        raise ValueError("Generator command must not be empty")
    return InvocationSpec(tuple(command), project, output, template)


def describe_status(returncode: int) -> str:
    """
    Render a process return code the way an exit status is usually shown.

    >>> describe_status(0)
    'exit status: 0'
    >>> describe_status(-9)
    'signal: 9'
    """
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status: {returncode}"
