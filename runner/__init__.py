"""
Runner module for the README regenerator.

Builds generator command lines and runs them one at a time.
"""

from runner.CommandRunner import CommandRunner
from runner.Invocation import InvocationResult, InvocationSpec, build_invocation, describe_status

__all__ = ["CommandRunner", "InvocationResult", "InvocationSpec", "build_invocation", "describe_status"]
